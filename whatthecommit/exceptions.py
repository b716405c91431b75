"""Exceptions raised by whatthecommit collaborators.

Template expansion itself never raises; only loading the name and message
lists can fail.
"""
from pathlib import Path
from typing import Optional, Union


class WhatTheCommitError(Exception):
    """Base class for all whatthecommit errors."""


class LineSourceError(WhatTheCommitError):
    """A names or messages source could not be used."""

    def __init__(self, kind: str, origin: Optional[Union[str, Path]], message: str):
        self.kind = kind
        self.origin = str(origin) if origin is not None else None
        super().__init__(message)


class EmptySourceError(LineSourceError):
    """A source contained no usable lines."""

    def __init__(self, kind: str, origin: Optional[Union[str, Path]] = None):
        where = f" in {origin}" if origin is not None else ""
        super().__init__(kind, origin, f"No usable {kind} found{where}")


class UnreadableFileError(LineSourceError):
    """A user supplied file could not be read."""

    def __init__(self, kind: str, origin: Union[str, Path], reason: str):
        self.reason = reason
        super().__init__(kind, origin, f"Cannot read {kind} file {origin}: {reason}")


class LogFileError(WhatTheCommitError):
    """The log file could not be created or written."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot write log file {path}: {reason}")

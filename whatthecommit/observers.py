"""Observer pattern for generated commit messages."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from .exceptions import LogFileError
from .models import GeneratedMessage


class GenerationObserver(ABC):
    """Abstract base class for generation observers."""

    @abstractmethod
    def on_message_generated(self, result: GeneratedMessage) -> None:
        """Called after a commit message has been generated."""
        pass


class ConsoleLogObserver(GenerationObserver):
    """Observer that logs generation details to the console.

    The CLI passes a stderr console so that stdout only ever carries the
    commit message itself.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)

    def on_message_generated(self, result: GeneratedMessage) -> None:
        self.console.print(f"[dim]Template: {escape(result.template)}[/dim]")
        self.console.print(f"[dim]Name: {escape(result.name)}[/dim]")


class FileLogObserver(GenerationObserver):
    """Observer that logs generated messages to a file."""

    def __init__(self, log_file: str):
        self.log_file = Path(log_file)
        # Ensure the parent directory exists
        try:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise LogFileError(self.log_file, str(e)) from e

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        try:
            with self.log_file.open("a", encoding="utf-8") as f:
                f.write(f"{timestamp} - {message}\n")
        except OSError as e:
            raise LogFileError(self.log_file, str(e)) from e

    def on_message_generated(self, result: GeneratedMessage) -> None:
        self._log(f"Generated commit message: {result.message}")

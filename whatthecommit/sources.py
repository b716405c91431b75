"""Name and commit message lists.

Built-in lists ship as package data and are read once per process into
tuples. Custom lists are plain text files with one entry per line.
"""
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

from .exceptions import EmptySourceError, UnreadableFileError

NAMES = "names"
MESSAGES = "commit messages"

_DEFAULT_FILES = {
    NAMES: "names.txt",
    MESSAGES: "commit_messages.txt",
}


def parse_lines(text: str) -> Tuple[str, ...]:
    """Split text into entries, dropping blank lines and surrounding whitespace."""
    return tuple(line.strip() for line in text.splitlines() if line.strip())


def load_lines(path: Union[str, Path], kind: str) -> Tuple[str, ...]:
    """Read a user supplied list.

    Args:
        path: File with one entry per line
        kind: What the file holds, used in error messages

    Returns:
        Tuple[str, ...]: The non-blank lines of the file

    Raises:
        UnreadableFileError: If the file cannot be read as UTF-8 text
        EmptySourceError: If the file holds no usable lines
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise UnreadableFileError(kind, path, str(e)) from e

    lines = parse_lines(text)
    if not lines:
        raise EmptySourceError(kind, path)
    return lines


@lru_cache(maxsize=None)
def _load_default(kind: str) -> Tuple[str, ...]:
    resource = resources.files("whatthecommit") / "data" / _DEFAULT_FILES[kind]
    lines = parse_lines(resource.read_text(encoding="utf-8"))
    if not lines:
        raise EmptySourceError(kind, "built-in defaults")
    return lines


def default_names() -> Tuple[str, ...]:
    return _load_default(NAMES)


def default_messages() -> Tuple[str, ...]:
    return _load_default(MESSAGES)


@dataclass(frozen=True)
class LineSource:
    """The candidate names and templates for one invocation."""

    names: Sequence[str]
    messages: Sequence[str]

    def __post_init__(self):
        if not self.names:
            raise EmptySourceError(NAMES)
        if not self.messages:
            raise EmptySourceError(MESSAGES)
        object.__setattr__(self, "names", tuple(self.names))
        object.__setattr__(self, "messages", tuple(self.messages))

    @classmethod
    def from_files(
        cls,
        names_file: Optional[Union[str, Path]] = None,
        messages_file: Optional[Union[str, Path]] = None,
    ) -> "LineSource":
        """Load custom lists, falling back to the built-ins for missing paths."""
        names = load_lines(names_file, NAMES) if names_file else default_names()
        messages = (
            load_lines(messages_file, MESSAGES) if messages_file else default_messages()
        )
        return cls(names, messages)

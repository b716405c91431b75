import pytest
from typing import List, Optional, Tuple

from whatthecommit.template import RandomProvider


class ScriptedRandomProvider(RandomProvider):
    """Random provider that replays scripted values and records every call.

    When a script runs out, indexes fall back to 0 and integers to the low
    end of the requested range.
    """

    def __init__(self, indexes: Optional[List[int]] = None, ints: Optional[List[int]] = None):
        self.indexes = list(indexes or [])
        self.ints = list(ints or [])
        self.index_calls: List[int] = []
        self.int_calls: List[Tuple[int, int]] = []

    def pick_index(self, n: int) -> int:
        self.index_calls.append(n)
        return self.indexes.pop(0) if self.indexes else 0

    def randint(self, low: int, high: int) -> int:
        self.int_calls.append((low, high))
        return self.ints.pop(0) if self.ints else low


@pytest.fixture
def scripted_random():
    """Factory for scripted random providers."""
    return ScriptedRandomProvider


@pytest.fixture
def names_file(tmp_path):
    """A names file with a blank line in the middle."""
    path = tmp_path / "names.txt"
    path.write_text("Alice\n\nBob\n", encoding="utf-8")
    return path


@pytest.fixture
def messages_file(tmp_path):
    """A messages file with a single template."""
    path = tmp_path / "messages.txt"
    path.write_text("XNAMEX fixed XNUM50X bugs\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove any WHAT_THE_COMMIT_* variables from the environment."""
    for var in [
        "WHAT_THE_COMMIT_NAMES_FILE",
        "WHAT_THE_COMMIT_MESSAGES_FILE",
        "WHAT_THE_COMMIT_SEED",
        "WHAT_THE_COMMIT_ALWAYS_LOG",
        "WHAT_THE_COMMIT_LOG_FILE",
        "WHAT_THE_COMMIT_LOG_DIRECTORY",
    ]:
        monkeypatch.delenv(var, raising=False)
    yield

"""Sources of randomness used to pick lines and draw numbers."""
import random
from abc import ABC, abstractmethod
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class RandomProvider(ABC):
    """Abstract base class for random providers.

    Tests inject a scripted provider to get exact, repeatable output.
    """

    @abstractmethod
    def pick_index(self, n: int) -> int:
        """Return a uniformly random index in ``[0, n)``."""
        pass

    @abstractmethod
    def randint(self, low: int, high: int) -> int:
        """Return a uniformly random integer in ``[low, high]``."""
        pass

    def choice(self, items: Sequence[T]) -> T:
        """Pick one element of a non-empty sequence."""
        if not items:
            raise ValueError("Cannot choose from an empty sequence")
        return items[self.pick_index(len(items))]


class SystemRandomProvider(RandomProvider):
    """Provider backed by :class:`random.Random`, optionally seeded."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def pick_index(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"Cannot pick an index from {n} items")
        return self._rng.randrange(n)

    def randint(self, low: int, high: int) -> int:
        if low > high:
            raise ValueError(f"Empty range [{low}, {high}]")
        return self._rng.randint(low, high)

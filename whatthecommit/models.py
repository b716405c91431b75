"""Shared models for whatthecommit."""
from dataclasses import dataclass
from enum import Enum
from typing import Union

from pydantic import BaseModel, Field

NUMBER_PREFIX = "XNUM"
NUMBER_SUFFIX = "X"
DEFAULT_LOW = 1
DEFAULT_HIGH = 999


class NameCase(str, Enum):
    AS_IS = "as_is"
    LOWER = "lower"
    UPPER = "upper"

    @property
    def marker(self) -> str:
        return NAME_MARKERS[self]


NAME_MARKERS = {
    NameCase.AS_IS: "XNAMEX",
    NameCase.LOWER: "XLOWERNAMEX",
    NameCase.UPPER: "XUPPERNAMEX",
}


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class NameToken:
    case: NameCase
    raw: str


@dataclass(frozen=True)
class NumberToken:
    """A number placeholder with its inclusive, already normalized range."""

    low: int
    high: int
    raw: str


Segment = Union[Literal, NameToken, NumberToken]


class GeneratedMessage(BaseModel):
    template: str = Field(description="Template line the message was built from")
    name: str = Field(description="Name substituted into the template")
    message: str = Field(description="Fully substituted commit message")

"""
Core domain models for Fieldcase Generator.

These models describe a split identifier and a parsed transform expression.
All of them are immutable and live only for the duration of a single render.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, Tuple, TypeVar, Union

from ..constants import ExpressionSyntax


T = TypeVar("T")


class WordKind(Enum):
    """Kinds of runs an identifier is split into."""

    ALPHA = "alpha"
    DIGIT = "digit"


class CharCase(Enum):
    """Rendering instruction for a single character."""

    LOWER = ExpressionSyntax.LOWER
    UPPER = ExpressionSyntax.UPPER
    KEEP = ExpressionSyntax.KEEP

    def apply(self, char: str) -> str:
        """Apply the case to one character. Only ASCII letters are changed."""
        if self is CharCase.KEEP or not char.isascii():
            return char
        if self is CharCase.UPPER:
            return char.upper()
        return char.lower()


class NumAlign(Enum):
    """Where a digit run goes when the words are joined."""

    LEFT = ExpressionSyntax.ALIGN_LEFT
    RIGHT = ExpressionSyntax.ALIGN_RIGHT
    MIDDLE = ExpressionSyntax.ALIGN_MIDDLE


def is_digit(char: str) -> bool:
    """Check if a character is an ASCII digit."""
    return "0" <= char <= "9"


@dataclass(frozen=True)
class Word:
    """
    A non-empty, homogeneous run of characters from an identifier.

    Alphabetic runs may mix cases (``Very``); digit runs hold ASCII digits only.
    """

    text: str
    kind: WordKind

    def __post_init__(self):
        """Validate the run is non-empty and matches its kind."""
        if not self.text:
            raise ValueError("A word cannot be empty")
        if self.kind is WordKind.DIGIT:
            homogeneous = all(is_digit(char) for char in self.text)
        else:
            homogeneous = all(char.isalpha() for char in self.text)
        if not homogeneous:
            raise ValueError(f"Word {self.text!r} is not a pure {self.kind.value} run")

    @property
    def is_digit(self) -> bool:
        return self.kind is WordKind.DIGIT


@dataclass(frozen=True)
class Identifier:
    """An identifier decomposed into its ordered words."""

    source: str
    words: Tuple[Word, ...] = ()

    @property
    def text(self) -> str:
        """The identifier text with separator characters removed."""
        return "".join(word.text for word in self.words)

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self):
        return iter(self.words)


# =============================================================================
# POSITIONAL RULES
# =============================================================================
# The same first/middle/last structure is used for characters within a word
# (WordCaseRule, over CharCase) and for words within an identifier (CaseSpec,
# over WordCaseRule).


@dataclass(frozen=True)
class Uniform(Generic[T]):
    """One rule for every position."""

    rule: T

    def resolve(self, index: int, length: int) -> T:
        return self.rule


@dataclass(frozen=True)
class FirstRest(Generic[T]):
    """A rule for the first position and one for all the others."""

    first: T
    rest: T

    def resolve(self, index: int, length: int) -> T:
        return self.first if index == 0 else self.rest


@dataclass(frozen=True)
class FirstMiddleLast(Generic[T]):
    """Separate rules for the first position, the last position and everything between."""

    first: T
    middle: T
    last: T

    def resolve(self, index: int, length: int) -> T:
        if index == 0:
            return self.first
        if index == length - 1:
            return self.last
        return self.middle


Positional = Union[Uniform[T], FirstRest[T], FirstMiddleLast[T]]
WordCaseRule = Positional[CharCase]
CaseSpec = Positional[WordCaseRule]


def positional(rules: Tuple[T, ...]) -> Positional[T]:
    """Build the positional variant matching the number of rules given (1 to 3)."""
    if len(rules) == 1:
        return Uniform(rules[0])
    if len(rules) == 2:
        return FirstRest(*rules)
    if len(rules) == 3:
        return FirstMiddleLast(*rules)
    raise ValueError(f"Expected 1 to 3 positional rules, got {len(rules)}")


@dataclass(frozen=True)
class TransformSpec:
    """
    A parsed transform expression.

    A field left as None keeps the default behavior: no case change, no
    numeral merging, words joined with the empty string.
    """

    case_spec: Optional[CaseSpec] = None
    num_align: Optional[NumAlign] = None
    separator: Optional[str] = None

    @property
    def joiner(self) -> str:
        return self.separator if self.separator is not None else ""

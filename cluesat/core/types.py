"""
cluesat/core/types.py
=====================
Foundation type system for cluesat.
Every module imports from here. No circular dependencies.

Encoding basis:
  - A variable is the proposition "holder h has card k", numbered h * C + k + 1
  - A Clause is a disjunction of signed variable numbers
  - A Refutation is exactly one of Shown / RefutedUnknown / NoRefutation
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union

from cluesat.core.exceptions import MalformedEvent


# ─────────────────────────────────────────────
#  ENUMERATIONS
# ─────────────────────────────────────────────

class Category(Enum):
    """The three disjoint card categories, in deck order."""
    SUSPECT = "suspect"
    WEAPON  = "weapon"
    ROOM    = "room"


class Verdict(Enum):
    """Three-valued answer to "does holder h have card k?".

    TRUE:    entailed by every model of the clause set
    FALSE:   refuted by every model of the clause set
    UNKNOWN: both remain possible
    """
    TRUE    = "true"
    FALSE   = "false"
    UNKNOWN = "unknown"

    @property
    def symbol(self) -> str:
        """Notepad glyph: Y, n or -."""
        return _SYMBOLS[self]

    @property
    def is_known(self) -> bool:
        return self is not Verdict.UNKNOWN


_SYMBOLS = {Verdict.TRUE: "Y", Verdict.FALSE: "n", Verdict.UNKNOWN: "-"}


# ─────────────────────────────────────────────
#  CLAUSES
# ─────────────────────────────────────────────

Literal = int
Clause = List[Literal]


# ─────────────────────────────────────────────
#  CARDS
# ─────────────────────────────────────────────

@dataclass(frozen=True)
class Card:
    """A card token with its category and global deck index."""
    token: str
    category: Category
    index: int


# ─────────────────────────────────────────────
#  REFUTATION VARIANTS
# ─────────────────────────────────────────────

@dataclass(frozen=True)
class Shown:
    """The refuter showed a card the reasoning player saw."""
    refuter: str
    card: str


@dataclass(frozen=True)
class RefutedUnknown:
    """The refuter showed a card, but not to the reasoning player."""
    refuter: str


@dataclass(frozen=True)
class NoRefutation:
    """Nobody could refute the suggestion."""
    pass


Refutation = Union[Shown, RefutedUnknown, NoRefutation]


def refutation_from_optional(
    refuter: Optional[str], shown: Optional[str]
) -> Refutation:
    """Build the refutation variant from nullable refuter / shown-card fields.

    Raises:
        MalformedEvent: if a shown card is given without a refuter.
    """
    if refuter is None:
        if shown is not None:
            raise MalformedEvent(
                f"Shown card '{shown}' given without a refuter.",
                context={"shown": shown},
            )
        return NoRefutation()
    if shown is None:
        return RefutedUnknown(refuter)
    return Shown(refuter, shown)


# ─────────────────────────────────────────────
#  EVENTS
# ─────────────────────────────────────────────

@dataclass(frozen=True)
class Suggestion:
    """One turn of suggest / refute.

    Example:
        Suggestion("sc", ("sc", "ro", "lo"), Shown("mu", "sc"))
    """
    suggester: str
    cards: Tuple[str, str, str]
    refutation: Refutation = field(default_factory=NoRefutation)

    def __post_init__(self) -> None:
        if len(self.cards) != 3:
            raise ValueError(
                f"A suggestion names exactly 3 cards, got {len(self.cards)}."
            )

    @classmethod
    def from_optional(
        cls,
        suggester: str,
        suspect: str,
        weapon: str,
        room: str,
        refuter: Optional[str] = None,
        shown: Optional[str] = None,
    ) -> "Suggestion":
        return cls(
            suggester=suggester,
            cards=(suspect, weapon, room),
            refutation=refutation_from_optional(refuter, shown),
        )


@dataclass(frozen=True)
class Accusation:
    """A final accusation and whether it was correct."""
    accuser: str
    cards: Tuple[str, str, str]
    correct: bool

    def __post_init__(self) -> None:
        if len(self.cards) != 3:
            raise ValueError(
                f"An accusation names exactly 3 cards, got {len(self.cards)}."
            )

"""
cluesat/core/validators.py
==========================
Input validation utilities for cluesat.

Validates:
    - GameConfig structure (non-empty categories, unique tokens, seat count)
    - Suggestion shape (category order, refuter identity, shown card)
    - Accusation shape (category order)

These validators run at API boundaries, before any clause is emitted.
Config validation returns a list of error strings (empty = valid);
event validation raises **MalformedEvent** with structured context.
"""
from __future__ import annotations

import re
from typing import TYPE_CHECKING, List, Sequence, Tuple

from cluesat.core.config import GameConfig
from cluesat.core.exceptions import MalformedEvent
from cluesat.core.types import (
    Category,
    NoRefutation,
    RefutedUnknown,
    Refutation,
    Shown,
)

if TYPE_CHECKING:
    from cluesat.symbolic.vocabulary import Vocabulary


TOKEN_RE = re.compile(r'^[A-Za-z0-9_][A-Za-z0-9_.\-]*$')

SUGGESTION_ORDER: Tuple[Category, ...] = (
    Category.SUSPECT,
    Category.WEAPON,
    Category.ROOM,
)


# ─── CONFIG VALIDATION ────────────────────────────────────────────

def validate_config(config: GameConfig) -> List[str]:
    """Validate a game configuration. Returns list of error strings.

    Checks:
        1. At least two seats
        2. Every category is non-empty
        3. Tokens match ``[A-Za-z0-9_][A-Za-z0-9_.-]*``
        4. Seat tokens are unique and do not collide with the case file
        5. Card tokens are unique across all categories
    """
    errors: List[str] = []

    if len(config.players) < 2:
        errors.append(f"Need at least 2 players, got {len(config.players)}")

    for name, tokens in (
        ("suspects", config.suspects),
        ("weapons", config.weapons),
        ("rooms", config.rooms),
    ):
        if not tokens:
            errors.append(f"Category '{name}' is empty")

    holders = list(config.players) + [config.case_file]
    for token in holders + config.cards:
        if not isinstance(token, str) or not TOKEN_RE.match(token):
            errors.append(f"Token {token!r} is not a valid identifier")

    errors.extend(_duplicates("holder", holders))
    errors.extend(_duplicates("card", config.cards))
    return errors


def _duplicates(kind: str, tokens: Sequence[str]) -> List[str]:
    seen = set()
    errors = []
    for token in tokens:
        if token in seen:
            errors.append(f"Duplicate {kind} token: '{token}'")
        seen.add(token)
    return errors


# ─── EVENT VALIDATION ─────────────────────────────────────────────

def validate_triple(
    vocab: "Vocabulary", cards: Sequence[str], event: str
) -> None:
    """Check the three cards are one suspect, one weapon, one room, in order.

    Raises UnknownIdentifier for unknown tokens (via the vocabulary) and
    MalformedEvent for a wrong category order.
    """
    if len(cards) != 3:
        raise MalformedEvent(
            f"A {event} names exactly 3 cards, got {len(cards)}.",
            context={"cards": list(cards)},
        )
    for card, expected in zip(cards, SUGGESTION_ORDER):
        actual = vocab.card(card).category
        if actual is not expected:
            raise MalformedEvent(
                f"{event.capitalize()} card '{card}' is a {actual.value}, "
                f"expected a {expected.value}.",
                context={"cards": list(cards), "card": card},
            )


def validate_suggestion(
    vocab: "Vocabulary",
    suggester: str,
    cards: Sequence[str],
    refutation: Refutation,
) -> None:
    """Validate one suggest / refute event. Raises MalformedEvent."""
    if vocab.holder_index(suggester) == vocab.case_file_index:
        raise MalformedEvent(
            "The case file cannot make a suggestion.",
            context={"suggester": suggester},
        )
    validate_triple(vocab, cards, "suggestion")

    if isinstance(refutation, NoRefutation):
        return
    if not isinstance(refutation, (Shown, RefutedUnknown)):
        raise MalformedEvent(
            f"Unsupported refutation {refutation!r}.",
            context={"refutation": repr(refutation)},
        )

    refuter = refutation.refuter
    refuter_index = vocab.holder_index(refuter)
    if refuter_index == vocab.case_file_index:
        raise MalformedEvent(
            "The case file cannot refute a suggestion.",
            context={"refuter": refuter},
        )
    if refuter_index == vocab.holder_index(suggester):
        raise MalformedEvent(
            f"Player '{suggester}' cannot refute their own suggestion.",
            context={"suggester": suggester, "refuter": refuter},
        )
    if isinstance(refutation, Shown) and refutation.card not in cards:
        vocab.card_index(refutation.card)
        raise MalformedEvent(
            f"Shown card '{refutation.card}' is not one of the suggested cards.",
            context={"cards": list(cards), "shown": refutation.card},
        )


def validate_accusation(vocab: "Vocabulary", accuser: str, cards: Sequence[str]) -> None:
    """Validate an accusation. Raises MalformedEvent."""
    if vocab.holder_index(accuser) == vocab.case_file_index:
        raise MalformedEvent(
            "The case file cannot make an accusation.",
            context={"accuser": accuser},
        )
    validate_triple(vocab, cards, "accusation")

"""
cluesat/symbolic/encoding.py
============================
Clause generators: game knowledge → CNF over holder/card variables.

Every generator is a pure function returning a fresh list of clauses.
Nothing here talks to the solver.

Axioms (asserted once per game):
  1. coverage            each card is held by some player or the case file
  2. exclusivity         no card is held by two holders
  3. case-file coverage  the case file holds a card of every category
  4. case-file exclusivity  ... and at most one per category

Events:
  hand         (+v(p,k))                                  per card in hand
  suggestion   Shown(r, k)       (+v(r,k))              + skip units
               RefutedUnknown(r) (+v(r,c1) ∨ +v(r,c2) ∨ +v(r,c3)) + skip units
               NoRefutation      (+v(s,c) ∨ +v(cf,c))    per suggested card
  accusation   correct           (+v(cf,c))              per card
               incorrect         (¬v(cf,c1) ∨ ¬v(cf,c2) ∨ ¬v(cf,c3))

Skip units (¬v(p,c1)), (¬v(p,c2)), (¬v(p,c3)) are emitted for every seat
that passed before the refuter answered.
"""

from __future__ import annotations

import itertools
import logging
from typing import Iterable, List, Sequence

from cluesat.core.types import (
    Category,
    Clause,
    NoRefutation,
    RefutedUnknown,
    Refutation,
    Shown,
)
from cluesat.symbolic.vocabulary import HolderRef, Vocabulary

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────
#  AXIOMS
# ─────────────────────────────────────────────

def coverage_clauses(vocab: Vocabulary) -> List[Clause]:
    """Each card is in at least one place, the case file included."""
    holders = range(vocab.num_players + 1)
    return [
        [vocab.variable(h, k) for h in holders]
        for k in range(vocab.num_cards)
    ]


def exclusivity_clauses(vocab: Vocabulary) -> List[Clause]:
    """No card is in two places."""
    clauses: List[Clause] = []
    for k in range(vocab.num_cards):
        for h1, h2 in itertools.combinations(range(vocab.num_players + 1), 2):
            clauses.append([-vocab.variable(h1, k), -vocab.variable(h2, k)])
    return clauses


def case_file_coverage_clauses(vocab: Vocabulary) -> List[Clause]:
    """One suspect, one weapon and one room are in the case file."""
    cf = vocab.case_file_index
    return [
        [vocab.variable(cf, card) for card in vocab.cards_in(category)]
        for category in Category
    ]


def case_file_exclusivity_clauses(vocab: Vocabulary) -> List[Clause]:
    """No two cards of one category are both in the case file."""
    cf = vocab.case_file_index
    clauses: List[Clause] = []
    for category in Category:
        for c1, c2 in itertools.combinations(vocab.cards_in(category), 2):
            clauses.append([-vocab.variable(cf, c1), -vocab.variable(cf, c2)])
    return clauses


def axiom_clauses(vocab: Vocabulary) -> List[Clause]:
    clauses = (
        coverage_clauses(vocab)
        + exclusivity_clauses(vocab)
        + case_file_coverage_clauses(vocab)
        + case_file_exclusivity_clauses(vocab)
    )
    logger.debug(f"Generated {len(clauses)} axiom clauses for {vocab!r}")
    return clauses


# ─────────────────────────────────────────────
#  EVENTS
# ─────────────────────────────────────────────

def hand_clauses(
    vocab: Vocabulary, player: HolderRef, cards: Iterable[str]
) -> List[Clause]:
    """The player holds every card of the given hand."""
    p = vocab.player_index(player)
    return [[vocab.variable(p, card)] for card in cards]


def skipped_seats(
    vocab: Vocabulary,
    suggester: HolderRef,
    refuter: HolderRef,
    wrap: bool = True,
) -> List[int]:
    """Seat indices that were asked before the refuter and could not refute.

    wrap=True walks the table modulo N starting after the suggester.
    wrap=False uses the raw index range suggester+1 .. refuter-1, which is
    empty when the refuter sits before the suggester.
    """
    s = vocab.player_index(suggester)
    r = vocab.player_index(refuter)
    if not wrap:
        return list(range(s + 1, r))

    n = vocab.num_players
    seats = []
    seat = (s + 1) % n
    while seat != r:
        seats.append(seat)
        seat = (seat + 1) % n
    return seats


def _none_of(vocab: Vocabulary, seats: Sequence[int], cards: Sequence[str]) -> List[Clause]:
    return [[-vocab.variable(seat, card)] for seat in seats for card in cards]


def suggestion_clauses(
    vocab: Vocabulary,
    suggester: HolderRef,
    cards: Sequence[str],
    refutation: Refutation,
    wrap: bool = True,
) -> List[Clause]:
    """Clauses learned from one suggest / refute turn.

    The three refutation cases are mutually exclusive; see module docstring.
    Shape validation belongs to cluesat.core.validators.
    """
    if isinstance(refutation, Shown):
        clauses = [[vocab.variable(refutation.refuter, refutation.card)]]
        seats = skipped_seats(vocab, suggester, refutation.refuter, wrap)
        return clauses + _none_of(vocab, seats, cards)

    if isinstance(refutation, RefutedUnknown):
        clauses = [[vocab.variable(refutation.refuter, card) for card in cards]]
        seats = skipped_seats(vocab, suggester, refutation.refuter, wrap)
        return clauses + _none_of(vocab, seats, cards)

    if isinstance(refutation, NoRefutation):
        # exclusivity already rules out every other holder
        cf = vocab.case_file_index
        return [
            [vocab.variable(suggester, card), vocab.variable(cf, card)]
            for card in cards
        ]

    raise TypeError(f"Unsupported refutation: {refutation!r}")


def accusation_clauses(
    vocab: Vocabulary, cards: Sequence[str], correct: bool
) -> List[Clause]:
    """Correct: the case file is exactly these cards. Incorrect: not all three."""
    cf = vocab.case_file_index
    if correct:
        return [[vocab.variable(cf, card)] for card in cards]
    return [[-vocab.variable(cf, card) for card in cards]]

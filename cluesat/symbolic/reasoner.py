"""
cluesat/symbolic/reasoner.py
============================
ClueReasoner: the domain-facing knowledge base of one game.

Translates hands, suggestions and accusations into clauses, keeps them in
a private SATOracle, and answers holder/card queries with a Verdict.
Raw variable numbers never leave this class.

Not thread-safe: one reasoner per game, driven by a single caller.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional

from cluesat.core.config import DEFAULT_CONFIG, GameConfig, ReasonerConfig
from cluesat.core.exceptions import ConfigError, Contradiction
from cluesat.core.types import (
    Accusation,
    Category,
    Clause,
    NoRefutation,
    Refutation,
    Suggestion,
    Verdict,
)
from cluesat.core.validators import (
    validate_accusation,
    validate_config,
    validate_suggestion,
)
from cluesat.symbolic.encoding import (
    accusation_clauses,
    axiom_clauses,
    hand_clauses,
    suggestion_clauses,
)
from cluesat.symbolic.solver import SATOracle
from cluesat.symbolic.vocabulary import Vocabulary

if TYPE_CHECKING:
    from cluesat.api.notepad import Notepad

logger = logging.getLogger(__name__)


class ClueReasoner:
    """Propositional reasoner for one game of Clue.

    Responsibilities:
        1. Own the vocabulary and variable numbering of the game
        2. Assert the deck axioms once, at construction
        3. Encode every observed event as permanent clauses
        4. Answer "does X hold card K?" as TRUE / FALSE / UNKNOWN
        5. Refuse to continue once the knowledge base is contradictory

    Usage:
        cr = ClueReasoner()
        cr.assert_hand("sc", ["wh", "li", "st"])
        cr.assert_suggestion("sc", "sc", "ro", "lo", Shown("mu", "sc"))
        cr.query("mu", "sc")        # Verdict.TRUE
    """

    def __init__(
        self,
        config: GameConfig = DEFAULT_CONFIG,
        settings: Optional[ReasonerConfig] = None,
    ):
        errors = validate_config(config)
        if errors:
            raise ConfigError(f"Invalid game configuration: {errors[0]}", errors)

        self.config = config
        self.settings = settings or ReasonerConfig()
        self.vocab = Vocabulary(config)
        self._oracle = SATOracle(self.vocab.num_variables)
        self._inconsistent = False

        self._oracle.add_clauses(axiom_clauses(self.vocab))
        logger.info(
            "Reasoner ready: %d players, %d cards, %d axiom clauses",
            self.vocab.num_players,
            self.vocab.num_cards,
            self._oracle.clause_count,
        )

    # ─── PROPERTIES ────────────────────────────────────────────────

    @property
    def players(self) -> List[str]:
        return self.vocab.players

    @property
    def holders(self) -> List[str]:
        return self.vocab.holders

    @property
    def cards(self) -> List[str]:
        return self.vocab.cards

    @property
    def case_file(self) -> str:
        return self.vocab.case_file

    @property
    def clause_count(self) -> int:
        return self._oracle.clause_count

    @property
    def is_consistent(self) -> bool:
        """False once a contradiction has been detected."""
        return not self._inconsistent

    # ─── ASSERTIONS ────────────────────────────────────────────────

    def assert_hand(self, player: str, cards: Iterable[str]) -> None:
        """Record the cards a player is known to hold."""
        self._ensure_consistent()
        self._oracle.clear_query_clauses()
        clauses = hand_clauses(self.vocab, player, list(cards))
        self._commit(clauses, f"hand of {player}")

    def assert_suggestion(
        self,
        suggester: str,
        suspect: str,
        weapon: str,
        room: str,
        refutation: Refutation = NoRefutation(),
    ) -> None:
        """Record one suggest / refute turn.

        Raises:
            MalformedEvent:     if the event has an impossible shape.
            UnknownIdentifier:  for tokens outside the vocabulary.
            Contradiction:      if the event contradicts earlier knowledge.
        """
        self._ensure_consistent()
        cards = (suspect, weapon, room)
        validate_suggestion(self.vocab, suggester, cards, refutation)
        clauses = suggestion_clauses(
            self.vocab,
            suggester,
            cards,
            refutation,
            wrap=self.settings.wrap_seat_order,
        )
        self._commit(clauses, f"suggestion by {suggester}")

    def assert_suggestion_event(self, event: Suggestion) -> None:
        self.assert_suggestion(event.suggester, *event.cards, event.refutation)

    def assert_accusation(
        self,
        accuser: str,
        suspect: str,
        weapon: str,
        room: str,
        correct: bool,
    ) -> None:
        """Record an accusation and whether it was correct."""
        self._ensure_consistent()
        cards = (suspect, weapon, room)
        validate_accusation(self.vocab, accuser, cards)
        clauses = accusation_clauses(self.vocab, cards, correct)
        self._commit(clauses, f"accusation by {accuser}")

    def assert_accusation_event(self, event: Accusation) -> None:
        self.assert_accusation(event.accuser, *event.cards, event.correct)

    # ─── QUERIES ───────────────────────────────────────────────────

    def query(self, holder: str, card: str) -> Verdict:
        """Is it known that ``holder`` (a player or the case file) has ``card``?

        Never changes permanent knowledge.
        """
        self._ensure_consistent()
        literal = self.vocab.variable(holder, card)
        try:
            return self._oracle.test_literal(literal)
        except Contradiction:
            self._inconsistent = True
            logger.warning("Contradiction found while querying %s:%s", holder, card)
            raise

    def holder_of(self, card: str) -> Optional[str]:
        """The holder known to have the card, or None if undetermined."""
        for holder in self.holders:
            if self.query(holder, card) is Verdict.TRUE:
                return holder
        return None

    def solution(self) -> Dict[Category, Optional[str]]:
        """Case-file card per category, None where not yet determined."""
        found: Dict[Category, Optional[str]] = {}
        for category in Category:
            found[category] = None
            for card in self.vocab.cards_in(category):
                if self.query(self.case_file, card) is Verdict.TRUE:
                    found[category] = card
                    break
        return found

    def is_solved(self) -> bool:
        return all(card is not None for card in self.solution().values())

    def notepad(self) -> "Notepad":
        from cluesat.api.notepad import Notepad

        return Notepad.from_reasoner(self)

    # ─── PRIVATE HELPERS ───────────────────────────────────────────

    def _ensure_consistent(self) -> None:
        if self._inconsistent:
            raise Contradiction(
                "Knowledge base is contradictory; start a new reasoner.",
                context={"clauses": self._oracle.clause_count},
            )

    def _commit(self, clauses: List[Clause], label: str) -> None:
        self._oracle.add_clauses(clauses)
        logger.debug(
            "%s: +%d clauses: %s",
            label,
            len(clauses),
            [[self.vocab.describe(lit) for lit in c] for c in clauses],
        )
        if self.settings.verify_on_assert and not self._oracle.is_satisfiable():
            self._inconsistent = True
            logger.warning("Contradiction after %s", label)
            raise Contradiction(
                f"Asserting {label} made the knowledge base unsatisfiable.",
                context={"event": label, "clauses": self._oracle.clause_count},
            )

    def __repr__(self) -> str:
        return (
            f"ClueReasoner(players={self.players}, clauses={self.clause_count}, "
            f"consistent={self.is_consistent})"
        )

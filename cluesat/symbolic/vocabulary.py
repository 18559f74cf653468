"""
cluesat/symbolic/vocabulary.py
==============================
Game vocabulary and the variable numbering scheme.

Holders are the N seats in turn order plus the case file at index N.
Cards are suspects, weapons and rooms concatenated, indices 0..C-1.

    variable(h, k) = h * C + k + 1        h in 0..N, k in 0..C-1

Variable 0 is never used, so the sign of a literal always carries its
polarity. The numbering is fixed for the lifetime of a Vocabulary.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Tuple, Union

from cluesat.core.config import GameConfig
from cluesat.core.exceptions import UnknownIdentifier
from cluesat.core.types import Card, Category

logger = logging.getLogger(__name__)

HolderRef = Union[str, int]
CardRef = Union[str, int]


class Vocabulary:
    """Bijection between (holder, card) pairs and SAT variable numbers.

    Usage:
        vocab = Vocabulary(GameConfig())
        v = vocab.variable("sc", "wh")
        vocab.decode(v)            # ("sc", "wh")
    """

    def __init__(self, config: GameConfig):
        self.config = config
        self._players: Tuple[str, ...] = tuple(config.players)
        self._holders: Tuple[str, ...] = self._players + (config.case_file,)
        self._holder_index: Dict[str, int] = {
            token: i for i, token in enumerate(self._holders)
        }

        self._cards: List[Card] = []
        for category, tokens in (
            (Category.SUSPECT, config.suspects),
            (Category.WEAPON, config.weapons),
            (Category.ROOM, config.rooms),
        ):
            for token in tokens:
                self._cards.append(Card(token, category, len(self._cards)))
        self._card_index: Dict[str, int] = {c.token: c.index for c in self._cards}

    # ─── SIZES ─────────────────────────────────────────────────────

    @property
    def num_players(self) -> int:
        return len(self._players)

    @property
    def num_cards(self) -> int:
        return len(self._cards)

    @property
    def num_variables(self) -> int:
        return (self.num_players + 1) * self.num_cards

    @property
    def case_file_index(self) -> int:
        return self.num_players

    # ─── TOKENS ────────────────────────────────────────────────────

    @property
    def players(self) -> List[str]:
        return list(self._players)

    @property
    def holders(self) -> List[str]:
        """Seats in turn order followed by the case file."""
        return list(self._holders)

    @property
    def case_file(self) -> str:
        return self.config.case_file

    @property
    def cards(self) -> List[str]:
        return [c.token for c in self._cards]

    def cards_in(self, category: Category) -> List[str]:
        return [c.token for c in self._cards if c.category is category]

    def card(self, card: CardRef) -> Card:
        return self._cards[self.card_index(card)]

    # ─── LOOKUP ────────────────────────────────────────────────────

    def holder_index(self, holder: HolderRef) -> int:
        """Index of a seat token (0..N-1) or the case file (N)."""
        if isinstance(holder, bool):
            raise UnknownIdentifier("holder", holder, self._holders)
        if isinstance(holder, int):
            if 0 <= holder <= self.num_players:
                return holder
            raise UnknownIdentifier("holder index", holder, self._holders)
        try:
            return self._holder_index[holder]
        except (KeyError, TypeError):
            raise UnknownIdentifier("player", holder, self._holders) from None

    def player_index(self, player: HolderRef) -> int:
        """Like holder_index, but the case file is rejected."""
        index = self.holder_index(player)
        if index == self.case_file_index:
            raise UnknownIdentifier("player", player, self._players)
        return index

    def card_index(self, card: CardRef) -> int:
        if isinstance(card, bool):
            raise UnknownIdentifier("card", card, self.cards)
        if isinstance(card, int):
            if 0 <= card < self.num_cards:
                return card
            raise UnknownIdentifier("card index", card, self.cards)
        try:
            return self._card_index[card]
        except (KeyError, TypeError):
            raise UnknownIdentifier("card", card, self.cards) from None

    def holder_token(self, index: int) -> str:
        return self._holders[self.holder_index(index)]

    # ─── VARIABLES ─────────────────────────────────────────────────

    def variable(self, holder: HolderRef, card: CardRef) -> int:
        """SAT variable for "holder has card". Always in [1, num_variables]."""
        return self.holder_index(holder) * self.num_cards + self.card_index(card) + 1

    def decode(self, variable: int) -> Tuple[str, str]:
        """Inverse of variable(): (holder token, card token).

        Accepts a signed literal; the sign is ignored.
        """
        v = abs(variable)
        if not 1 <= v <= self.num_variables:
            raise UnknownIdentifier("variable", variable)
        holder, card = divmod(v - 1, self.num_cards)
        return self._holders[holder], self._cards[card].token

    def describe(self, literal: int) -> str:
        """Human-readable form of a literal, e.g. '¬mu:kn'."""
        holder, card = self.decode(literal)
        prefix = "" if literal > 0 else "¬"
        return f"{prefix}{holder}:{card}"

    def __repr__(self) -> str:
        return (
            f"Vocabulary(players={self.num_players}, cards={self.num_cards}, "
            f"variables={self.num_variables})"
        )

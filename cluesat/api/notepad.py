"""
cluesat/api/notepad.py
======================
Detective notepad: the full holder x card verdict grid of a reasoner.

Read-only projection built from repeated ClueReasoner.query calls.

Rendering (tab separated, one row per card):

            sc  mu  wh  gr  pe  pl  cf
    mu      n   n   n   n   n   Y   n
    pe      n   n   n   n   n   n   Y
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional

from cluesat.core.types import Verdict

if TYPE_CHECKING:
    from cluesat.symbolic.reasoner import ClueReasoner

logger = logging.getLogger(__name__)


@dataclass
class Notepad:
    """Snapshot of every verdict at one point of the game.

    Attributes:
        holders: seat tokens in turn order followed by the case file.
        cards:   card tokens in deck order.
        grid:    card → holder → Verdict.
    """

    holders: List[str]
    cards: List[str]
    grid: Dict[str, Dict[str, Verdict]] = field(default_factory=dict)

    @classmethod
    def from_reasoner(cls, reasoner: "ClueReasoner") -> "Notepad":
        holders = reasoner.holders
        cards = reasoner.cards
        grid = {
            card: {holder: reasoner.query(holder, card) for holder in holders}
            for card in cards
        }
        pad = cls(holders=holders, cards=cards, grid=grid)
        logger.debug(f"Notepad built: {pad.known_count()} of {len(cards) * len(holders)} cells known")
        return pad

    def verdict(self, holder: str, card: str) -> Verdict:
        return self.grid[card][holder]

    def known_holders(self) -> Dict[str, str]:
        """Card → holder for every card whose location is determined."""
        found = {}
        for card in self.cards:
            owner = self.owner(card)
            if owner is not None:
                found[card] = owner
        return found

    def owner(self, card: str) -> Optional[str]:
        for holder, verdict in self.grid[card].items():
            if verdict is Verdict.TRUE:
                return holder
        return None

    def known_count(self) -> int:
        return sum(
            1 for row in self.grid.values() for v in row.values() if v.is_known
        )

    def render(self) -> str:
        lines = ["\t" + "\t".join(self.holders)]
        for card in self.cards:
            symbols = [self.grid[card][h].symbol for h in self.holders]
            lines.append(card + "\t" + "\t".join(symbols))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

"""
cluesat/api/trace.py
====================
Game traces: load a recorded game from JSON / dict and replay it.

JSON format:
{
  "config":   {"players": ["sc", "mu", ...]},            (optional)
  "settings": {"wrap_seat_order": true},                 (optional)
  "hand":     {"player": "sc", "cards": ["wh", "li", "st"]},
  "suggestions": [
      ["sc", "sc", "ro", "lo", "mu", "sc"],
      ["mu", "pe", "pi", "di", "pe", null],
      ["pl", "pe", "pi", "ba", null, null]
  ],
  "accusations": [["sc", "pe", "pi", "bi", true]]
}

A suggestion row is suggester, suspect, weapon, room, refuter, shown.
Refuter and shown may be null; a dict with the same keys is accepted too.
"hands" (a list of hand objects) may be used instead of "hand".
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

from cluesat.core.config import GameConfig, ReasonerConfig
from cluesat.core.exceptions import MalformedEvent
from cluesat.core.types import Accusation, Suggestion
from cluesat.symbolic.reasoner import ClueReasoner

logger = logging.getLogger(__name__)

Hand = Tuple[str, Tuple[str, ...]]


@dataclass
class GameTrace:
    """An ordered record of what one player observed during a game."""

    config: GameConfig = field(default_factory=GameConfig)
    settings: ReasonerConfig = field(default_factory=ReasonerConfig)
    hands: List[Hand] = field(default_factory=list)
    suggestions: List[Suggestion] = field(default_factory=list)
    accusations: List[Accusation] = field(default_factory=list)

    # ─── LOADING ───────────────────────────────────────────────────

    @classmethod
    def from_json(cls, path: str) -> "GameTrace":
        data = json.loads(Path(path).read_text())
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameTrace":
        config = GameConfig.from_dict(data.get("config", {}))
        settings = ReasonerConfig.from_dict(data.get("settings", {}))

        raw_hands = data.get("hands", [])
        if "hand" in data:
            raw_hands = [data["hand"]] + list(raw_hands)
        hands = [(h["player"], tuple(h["cards"])) for h in raw_hands]

        suggestions = [_parse_suggestion(row) for row in data.get("suggestions", [])]
        accusations = [_parse_accusation(row) for row in data.get("accusations", [])]

        logger.info(
            f"Loaded trace: {len(hands)} hand(s), {len(suggestions)} suggestions, "
            f"{len(accusations)} accusations."
        )
        return cls(
            config=config,
            settings=settings,
            hands=hands,
            suggestions=suggestions,
            accusations=accusations,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "config": self.config.to_dict(),
            "settings": self.settings.to_dict(),
            "hands": [{"player": p, "cards": list(cards)} for p, cards in self.hands],
            "suggestions": [_suggestion_row(s) for s in self.suggestions],
            "accusations": [
                [a.accuser, *a.cards, a.correct] for a in self.accusations
            ],
        }

    def to_json(self, path: str) -> None:
        Path(path).write_text(json.dumps(self.to_dict(), indent=2))

    # ─── REPLAY ────────────────────────────────────────────────────

    def build_reasoner(self) -> ClueReasoner:
        """Fresh reasoner for this trace's game, with every event replayed."""
        reasoner = ClueReasoner(self.config, self.settings)
        self.replay(reasoner)
        return reasoner

    def replay(self, reasoner: ClueReasoner) -> None:
        """Assert hands, then suggestions, then accusations, in recorded order."""
        for player, cards in self.hands:
            reasoner.assert_hand(player, cards)
        for suggestion in self.suggestions:
            reasoner.assert_suggestion_event(suggestion)
        for accusation in self.accusations:
            reasoner.assert_accusation_event(accusation)


# ─── ROW PARSING ──────────────────────────────────────────────────

def _parse_suggestion(row: Any) -> Suggestion:
    if isinstance(row, dict):
        cards = row.get("cards", ())
        if len(cards) != 3:
            raise MalformedEvent(
                f"Suggestion needs 3 cards, got {len(cards)}.", context={"row": row}
            )
        return Suggestion.from_optional(
            row["suggester"], *cards, row.get("refuter"), row.get("shown")
        )
    row = list(row)
    if not 4 <= len(row) <= 6:
        raise MalformedEvent(
            f"Suggestion row needs 4 to 6 fields, got {len(row)}.",
            context={"row": row},
        )
    row += [None] * (6 - len(row))
    return Suggestion.from_optional(*row)


def _parse_accusation(row: Any) -> Accusation:
    if isinstance(row, dict):
        return Accusation(row["accuser"], tuple(row["cards"]), bool(row["correct"]))
    row = list(row)
    if len(row) != 5:
        raise MalformedEvent(
            f"Accusation row needs 5 fields, got {len(row)}.", context={"row": row}
        )
    return Accusation(row[0], tuple(row[1:4]), bool(row[4]))


def _suggestion_row(s: Suggestion) -> List[Any]:
    refuter = getattr(s.refutation, "refuter", None)
    shown = getattr(s.refutation, "card", None)
    return [s.suggester, *s.cards, refuter, shown]

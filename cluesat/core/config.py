"""
cluesat/core/config.py
======================
Global configuration for cluesat.
Game vocabulary and reasoner switches in one place, validated at construction.
"""
from __future__ import annotations
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, List, Tuple

from cluesat.core.exceptions import ConfigError


STANDARD_PLAYERS:  Tuple[str, ...] = ("sc", "mu", "wh", "gr", "pe", "pl")
STANDARD_SUSPECTS: Tuple[str, ...] = ("mu", "pl", "gr", "pe", "sc", "wh")
STANDARD_WEAPONS:  Tuple[str, ...] = ("kn", "ca", "re", "ro", "pi", "wr")
STANDARD_ROOMS:    Tuple[str, ...] = ("ha", "lo", "di", "ki", "ba", "co", "bi", "li", "st")


@dataclass(frozen=True)
class GameConfig:
    """Fixed vocabulary of one game: seats in turn order and the deck.

    Tokens are opaque short strings. A token may name both a player and a
    card ("sc" is Miss Scarlet the player and Miss Scarlet the suspect card).
    """
    players:   Tuple[str, ...] = STANDARD_PLAYERS
    suspects:  Tuple[str, ...] = STANDARD_SUSPECTS
    weapons:   Tuple[str, ...] = STANDARD_WEAPONS
    rooms:     Tuple[str, ...] = STANDARD_ROOMS
    case_file: str             = "cf"

    @classmethod
    def standard(cls, players: Tuple[str, ...] = STANDARD_PLAYERS) -> "GameConfig":
        """Standard deck (6 suspects, 6 weapons, 9 rooms) with the given seats."""
        return cls(players=tuple(players))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameConfig":
        """Build from a plain mapping; missing keys fall back to the standard game."""
        return cls(
            players=tuple(data.get("players", STANDARD_PLAYERS)),
            suspects=tuple(data.get("suspects", STANDARD_SUSPECTS)),
            weapons=tuple(data.get("weapons", STANDARD_WEAPONS)),
            rooms=tuple(data.get("rooms", STANDARD_ROOMS)),
            case_file=data.get("case_file", "cf"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "players": list(self.players),
            "suspects": list(self.suspects),
            "weapons": list(self.weapons),
            "rooms": list(self.rooms),
            "case_file": self.case_file,
        }

    @property
    def num_players(self) -> int:
        return len(self.players)

    @property
    def num_cards(self) -> int:
        return len(self.suspects) + len(self.weapons) + len(self.rooms)

    @property
    def cards(self) -> List[str]:
        return list(self.suspects) + list(self.weapons) + list(self.rooms)


@dataclass
class ReasonerConfig:
    # Walk seats modulo the table size when collecting players who passed.
    # False keeps the raw-index range suggester+1 .. refuter-1.
    wrap_seat_order:  bool = True
    # Check the permanent clause set after every assertion.
    verify_on_assert: bool = True

    @classmethod
    def for_legacy_traces(cls) -> "ReasonerConfig":
        """Settings reproducing the raw seat-index behaviour of old traces."""
        return cls(wrap_seat_order=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReasonerConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            errors = [f"Unknown reasoner setting: {key!r}" for key in unknown]
            raise ConfigError(f"Invalid reasoner settings: {unknown}", errors)
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# Singleton default config
DEFAULT_CONFIG = GameConfig()

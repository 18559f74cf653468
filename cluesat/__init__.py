"""
cluesat/__init__.py: Public API exports
"""

from cluesat.api.notepad import Notepad
from cluesat.api.trace import GameTrace
from cluesat.core.config import DEFAULT_CONFIG, GameConfig, ReasonerConfig
from cluesat.core.exceptions import (
    ClueError,
    ConfigError,
    Contradiction,
    InvalidLiteral,
    MalformedEvent,
    SolverError,
    UnknownIdentifier,
)
from cluesat.core.types import (
    Accusation,
    Card,
    Category,
    NoRefutation,
    RefutedUnknown,
    Refutation,
    Shown,
    Suggestion,
    Verdict,
)
from cluesat.symbolic.reasoner import ClueReasoner
from cluesat.symbolic.solver import SATOracle
from cluesat.symbolic.vocabulary import Vocabulary
from cluesat.version import __version__

__all__ = [
    "ClueReasoner",
    "SATOracle",
    "Vocabulary",
    "Notepad",
    "GameTrace",
    "GameConfig",
    "ReasonerConfig",
    "DEFAULT_CONFIG",
    "Accusation",
    "Card",
    "Category",
    "NoRefutation",
    "RefutedUnknown",
    "Refutation",
    "Shown",
    "Suggestion",
    "Verdict",
    "ClueError",
    "ConfigError",
    "Contradiction",
    "InvalidLiteral",
    "MalformedEvent",
    "SolverError",
    "UnknownIdentifier",
    "__version__",
]

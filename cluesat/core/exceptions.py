"""
cluesat/core/exceptions.py
==========================
Custom exception hierarchy for cluesat.

All exceptions carry structured context so callers can
programmatically handle different failure modes.
"""

from __future__ import annotations

from typing import List, Optional, Sequence


class ClueError(Exception):
    """Base exception for all cluesat errors."""

    def __init__(self, message: str, context: Optional[dict] = None):
        super().__init__(message)
        self.context = context or {}


class ConfigError(ClueError):
    """Raised when a game configuration is structurally invalid
    (duplicate tokens, empty categories, too few seats)."""

    def __init__(self, message: str, errors: List[str]):
        super().__init__(message, context={"errors": list(errors)})
        self.errors = list(errors)


class UnknownIdentifier(ClueError):
    """Raised when a player, card or index is not part of the game vocabulary.

    No clause is ever emitted for an unresolved identifier.
    """

    def __init__(self, kind: str, identifier: object, known: Sequence[str] = ()):
        super().__init__(
            f"Unknown {kind}: {identifier!r}",
            context={"kind": kind, "identifier": identifier, "known": list(known)},
        )
        self.kind = kind
        self.identifier = identifier


class MalformedEvent(ClueError):
    """Raised when a game event has an impossible shape, e.g. a shown card
    without a refuter or a refuter equal to the suggester."""

    pass


class InvalidLiteral(ClueError):
    """Raised when a clause holds a zero literal or a variable outside
    ``[1, num_variables]``."""

    def __init__(self, message: str, literal: int, num_variables: int):
        super().__init__(
            message, context={"literal": literal, "num_variables": num_variables}
        )
        self.literal = literal
        self.num_variables = num_variables


class Contradiction(ClueError):
    """Raised when the accumulated clause set is unsatisfiable.

    This is a hard failure for the reasoning session: either the asserted
    facts are impossible together or an encoding is wrong. It is never
    reported as an undetermined verdict.
    """

    pass


class SolverError(ClueError):
    """Raised when the SAT backend cannot decide satisfiability."""

    pass

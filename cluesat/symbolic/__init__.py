"""cluesat/symbolic: Vocabulary, clause encoding, SAT oracle and reasoner."""

from cluesat.symbolic.encoding import (
    accusation_clauses,
    axiom_clauses,
    case_file_coverage_clauses,
    case_file_exclusivity_clauses,
    coverage_clauses,
    exclusivity_clauses,
    hand_clauses,
    skipped_seats,
    suggestion_clauses,
)
from cluesat.symbolic.reasoner import ClueReasoner
from cluesat.symbolic.solver import SATOracle
from cluesat.symbolic.vocabulary import Vocabulary

__all__ = [
    "ClueReasoner",
    "SATOracle",
    "Vocabulary",
    "coverage_clauses",
    "exclusivity_clauses",
    "case_file_coverage_clauses",
    "case_file_exclusivity_clauses",
    "axiom_clauses",
    "hand_clauses",
    "skipped_seats",
    "suggestion_clauses",
    "accusation_clauses",
]

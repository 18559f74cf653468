"""
cluesat/symbolic/solver.py
==========================
SAT oracle layer: wraps the Z3 solver as a two-layer clause store.

Clauses are DIMACS-style lists of signed integers. The oracle keeps:
  - permanent clauses   (axioms and learned facts, never retracted)
  - query clauses       (scratch hypotheses, discarded by clear_query_clauses)

The query layer is a single Z3 backtracking scope: it is opened with
push() on the first query clause and dropped with pop().

Entailment test (per literal l):
    KB ∧ ¬l  UNSAT  →  l is TRUE in every model
    KB ∧  l  UNSAT  →  l is FALSE in every model
    both SAT        →  UNKNOWN
    both UNSAT      →  KB itself is contradictory → Contradiction

Reference: De Moura & Bjørner (2008) "Z3: An Efficient SMT Solver".
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Sequence

import z3

from cluesat.core.exceptions import Contradiction, InvalidLiteral, SolverError
from cluesat.core.types import Clause, Verdict

logger = logging.getLogger(__name__)


class SATOracle:
    """Propositional satisfiability oracle over variables 1..num_variables.

    Each oracle owns its own Z3 context, so two oracles never share
    solver state.

    Usage:
        oracle = SATOracle(num_variables=3)
        oracle.add_clause([1, 2])
        oracle.add_clause([-1])
        oracle.test_literal(2)     # Verdict.TRUE
    """

    def __init__(self, num_variables: int) -> None:
        if num_variables < 1:
            raise ValueError(f"num_variables must be positive, got {num_variables}")
        self.num_variables = num_variables
        self._ctx = z3.Context()
        self._solver = z3.Solver(ctx=self._ctx)
        self._atoms: Dict[int, z3.BoolRef] = {}
        self._clause_count = 0
        self._query_clause_count = 0
        self._query_scope_open = False

    # ─── CLAUSE REGISTRATION ───────────────────────────────────────

    def add_clause(self, literals: Sequence[int]) -> None:
        """Append a disjunction to the permanent store.

        Raises:
            InvalidLiteral: if the clause is empty, holds a zero, or
                            references a variable outside [1, num_variables].
        """
        expr = self._to_z3(literals)
        # Permanent clauses always sit below the scratch scope.
        self.clear_query_clauses()
        self._solver.add(expr)
        self._clause_count += 1
        logger.debug("Added clause %s", list(literals))

    def add_clauses(self, clauses: Iterable[Sequence[int]]) -> None:
        for clause in clauses:
            self.add_clause(clause)

    def add_query_clause(self, literals: Sequence[int]) -> None:
        """Add a transient clause, removed by the next clear_query_clauses()."""
        expr = self._to_z3(literals)
        if not self._query_scope_open:
            self._solver.push()
            self._query_scope_open = True
        self._solver.add(expr)
        self._query_clause_count += 1

    def clear_query_clauses(self) -> None:
        """Discard every query clause; permanent clauses are untouched."""
        if self._query_scope_open:
            self._solver.pop()
            self._query_scope_open = False
        self._query_clause_count = 0

    @property
    def clause_count(self) -> int:
        """Number of permanent clauses."""
        return self._clause_count

    @property
    def query_clause_count(self) -> int:
        """Number of live query clauses."""
        return self._query_clause_count

    # ─── SATISFIABILITY ────────────────────────────────────────────

    def is_satisfiable(self) -> bool:
        """Satisfiability of permanent + live query clauses.

        Raises:
            SolverError: if Z3 answers ``unknown``.
        """
        result = self._solver.check()
        if result == z3.sat:
            return True
        if result == z3.unsat:
            return False
        raise SolverError(
            "Z3 could not decide satisfiability.",
            context={"reason": self._solver.reason_unknown()},
        )

    def model(self) -> List[int]:
        """Positive variables of one satisfying assignment of the permanent store.

        Raises:
            Contradiction: if the permanent store is unsatisfiable.
        """
        self.clear_query_clauses()
        if not self.is_satisfiable():
            raise Contradiction(
                "No model: the clause set is unsatisfiable.",
                context={"clauses": self._clause_count},
            )
        z3_model = self._solver.model()
        return sorted(
            v for v, atom in self._atoms.items()
            if z3.is_true(z3_model.evaluate(atom, model_completion=True))
        )

    def test_literal(self, literal: int) -> Verdict:
        """Is the literal TRUE in all models, FALSE in all models, or neither?

        Clears the query layer first so stale hypotheses never leak into
        the answer, and leaves it empty afterwards.

        Raises:
            Contradiction: if the permanent store has no model at all.
        """
        self._check_literal(literal)
        self.clear_query_clauses()

        can_be_false = self._satisfiable_with(-literal)
        can_be_true = self._satisfiable_with(literal)

        if not can_be_false and not can_be_true:
            raise Contradiction(
                "Clause set is unsatisfiable: no verdict is possible.",
                context={"literal": literal, "clauses": self._clause_count},
            )
        if not can_be_false:
            verdict = Verdict.TRUE
        elif not can_be_true:
            verdict = Verdict.FALSE
        else:
            verdict = Verdict.UNKNOWN
        logger.debug("test_literal(%d) -> %s", literal, verdict.value)
        return verdict

    # ─── PRIVATE HELPERS ───────────────────────────────────────────

    def _satisfiable_with(self, literal: int) -> bool:
        self.add_query_clause([literal])
        try:
            return self.is_satisfiable()
        finally:
            self.clear_query_clauses()

    def _check_literal(self, literal: int) -> None:
        if isinstance(literal, bool) or not isinstance(literal, int):
            raise InvalidLiteral(
                f"Literal must be an int, got {literal!r}.",
                literal=literal,
                num_variables=self.num_variables,
            )
        if literal == 0 or abs(literal) > self.num_variables:
            raise InvalidLiteral(
                f"Literal {literal} outside ±[1, {self.num_variables}].",
                literal=literal,
                num_variables=self.num_variables,
            )

    def _atom(self, variable: int) -> z3.BoolRef:
        atom = self._atoms.get(variable)
        if atom is None:
            atom = z3.Bool(f"v{variable}", ctx=self._ctx)
            self._atoms[variable] = atom
        return atom

    def _to_z3(self, literals: Clause) -> z3.BoolRef:
        literals = list(literals)
        if not literals:
            raise InvalidLiteral(
                "Empty clause.", literal=0, num_variables=self.num_variables
            )
        terms = []
        for lit in literals:
            self._check_literal(lit)
            atom = self._atom(abs(lit))
            terms.append(atom if lit > 0 else z3.Not(atom))
        if len(terms) == 1:
            return terms[0]
        return z3.Or(*terms)

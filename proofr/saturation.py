"""Given-clause saturation loop for refutational proving."""

from __future__ import annotations

from typing import Iterable

from proofr.sup import Clause, Formula, Not, SupError, is_tautology, subsumes


class SaturationError(SupError):
    """Raised when saturation ends without deriving the empty clause."""


def is_bottom(formula: Formula) -> bool:
    """Return True if the formula is the empty clause."""
    return isinstance(formula, Clause) and not formula.literals


def is_redundant(clause: Formula, kept: Iterable[Formula]) -> bool:
    """Return True if the clause is a tautology or subsumed by a kept clause."""
    return is_tautology(clause) or any(subsumes(other, clause) for other in kept)


def saturate(clauses: Iterable[Formula]) -> None:
    """Saturate the clause set, returning once the empty clause is derived.

    Raises SaturationError when every clause has been processed and no
    refutation was found.
    """
    unprocessed = list(clauses)
    kept: list = []

    while unprocessed:
        clause = unprocessed.pop(0)
        if is_bottom(clause):
            return None
        if is_redundant(clause, kept):
            continue
        kept.append(clause)

    raise SaturationError(
        f"Clause set saturated without deriving the empty clause: {kept!r}"
    )


def prove(premises: Iterable[Formula], goal: Formula) -> None:
    """Refute the premises together with the negated goal.

    Returns None when a proof is found, raises SaturationError otherwise.
    """
    clauses = list(premises)
    clauses.append(Not(goal))
    return saturate(clauses)
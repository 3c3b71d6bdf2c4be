"""Normal-form transformations of first-order formulas."""

from __future__ import annotations

from proofr.fol import (
    Arrow,
    Conjunction,
    Disjunction,
    Exist,
    FolError,
    ForAll,
    Formula,
    Not,
    Predicate,
    Variable,
    make_multiarg_app,
    substitute_formula,
    swap_binded_formula,
)

_HOLE = Predicate("tmp")


def negation_normal_form(formula: Formula) -> Formula:
    """Remove implications and push negations down to atomic predicates."""

    def solve(phi: Formula, negate: bool) -> Formula:
        if isinstance(phi, Predicate):
            return Not(phi) if negate else phi
        if isinstance(phi, Arrow):
            return Disjunction(
                (solve(phi.assumption, not negate), solve(phi.conclusion, negate))
            )
        if isinstance(phi, Not):
            inner = phi.formula
            if isinstance(inner, Not):
                return solve(inner.formula, negate)
            if isinstance(inner, Conjunction):
                return Disjunction(solve(f, not negate) for f in inner.formulas)
            if isinstance(inner, Disjunction):
                return Conjunction(solve(f, not negate) for f in inner.formulas)
            if isinstance(inner, ForAll):
                return Exist(
                    inner.var_name, inner.var_type, solve(inner.body, not negate)
                )
            if isinstance(inner, Exist):
                return ForAll(
                    inner.var_name, inner.var_type, solve(inner.body, not negate)
                )
            return solve(inner, not negate)
        if isinstance(phi, (Conjunction, Disjunction)):
            return type(phi)(solve(f, negate) for f in phi.formulas)
        if isinstance(phi, (ForAll, Exist)):
            # the variable type is assumed to be a sort and is left untouched
            return type(phi)(phi.var_name, phi.var_type, solve(phi.body, negate))
        raise FolError(f"Not a formula: {phi!r}")

    return solve(formula, False)


def prenex_normal_form(formula: Formula) -> Formula:
    """Pull quantifiers of a formula in negation normal form to the top level."""

    def bind(prefix: Formula, quantifier: type, phi: Formula) -> Formula:
        return swap_binded_formula(
            prefix, quantifier(phi.var_name, phi.var_type, _HOLE)
        )

    def arrow_component(phi: Formula, prefix: Formula) -> tuple:
        if isinstance(phi, ForAll):
            return solve(phi.body, bind(prefix, Exist, phi))
        if isinstance(phi, Exist):
            return solve(phi.body, bind(prefix, ForAll, phi))
        return prefix, phi

    def solve(phi: Formula, prefix: Formula) -> tuple:
        if isinstance(phi, (Predicate, Not)):
            return prefix, phi
        if isinstance(phi, ForAll):
            return solve(phi.body, bind(prefix, ForAll, phi))
        if isinstance(phi, Exist):
            return solve(phi.body, bind(prefix, Exist, phi))
        if isinstance(phi, (Conjunction, Disjunction)):
            quantifier_free = []
            for sub in phi.formulas:
                prefix, sub = solve(sub, prefix)
                quantifier_free.append(sub)
            return prefix, type(phi)(quantifier_free)
        if isinstance(phi, Arrow):
            prefix, assumption = arrow_component(phi.assumption, prefix)
            prefix, conclusion = arrow_component(phi.conclusion, prefix)
            return prefix, Arrow(assumption, conclusion)
        raise FolError(f"Not a formula: {phi!r}")

    prefix, matrix = solve(formula, _HOLE)
    return swap_binded_formula(prefix, matrix)


def skolemize(formula: Formula) -> Formula:
    """Replace existentially bound variables with Skolem witness terms."""

    def solve(phi: Formula, args: tuple, witness_idx: int) -> Formula:
        if isinstance(phi, Exist):
            witness = make_multiarg_app(f"sw_{witness_idx}", args)
            body = substitute_formula(phi.body, phi.var_name, witness)
            return solve(body, args, witness_idx + 1)
        if isinstance(phi, ForAll):
            return ForAll(
                phi.var_name,
                phi.var_type,
                solve(phi.body, args + (Variable(phi.var_name),), witness_idx),
            )
        if isinstance(phi, (Conjunction, Disjunction)):
            return type(phi)(solve(f, args, witness_idx) for f in phi.formulas)
        if isinstance(phi, Arrow):
            return Arrow(
                solve(phi.assumption, args, witness_idx),
                solve(phi.conclusion, args, witness_idx),
            )
        if isinstance(phi, Not):
            return Not(solve(phi.formula, args, witness_idx))
        if isinstance(phi, Predicate):
            return phi
        raise FolError(f"Not a formula: {phi!r}")

    return solve(formula, (), 0)


def _combine_disjunctions(phi: Formula, psi: Formula) -> Disjunction:
    """Flatten phi ∨ psi into a single disjunction."""
    left = list(phi.formulas) if isinstance(phi, Disjunction) else [phi]
    right = list(psi.formulas) if isinstance(psi, Disjunction) else [psi]
    return Disjunction(left + right)


def conjunction_normal_form(formula: Formula) -> list:
    """Return the list of conjoined clauses of an equivalent CNF formula.

    The input is expected to be skolemized and free of implications.
    """
    if isinstance(formula, (Predicate, Not)):
        return [formula]
    if isinstance(formula, Conjunction):
        return [c for sub in formula.formulas for c in conjunction_normal_form(sub)]
    if isinstance(formula, Disjunction):
        result: list = []
        for sub in formula.formulas:
            sub_clauses = conjunction_normal_form(sub)
            if not result:
                result.extend(sub_clauses)
            else:
                result = [
                    _combine_disjunctions(literal, other)
                    for literal in result
                    for other in sub_clauses
                ]
        return result
    if isinstance(formula, ForAll):
        return conjunction_normal_form(formula.body)
    if isinstance(formula, Exist):
        raise FolError("Existential quantifiers should be removed by skolemization")
    if isinstance(formula, Arrow):
        raise FolError("Implications should be removed by negation normal form")
    raise FolError(f"Not a formula: {formula!r}")
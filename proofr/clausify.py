"""Conversion of first-order formulas into superposition clauses."""

from __future__ import annotations

from proofr import sup
from proofr.fol import (
    Application,
    Disjunction,
    FolError,
    Formula,
    Not,
    Predicate,
    Term,
    Variable,
    get_application_components,
)
from proofr.normal_forms import (
    conjunction_normal_form,
    negation_normal_form,
    prenex_normal_form,
    skolemize,
)


def term_to_sup(term: Term) -> sup.Term:
    """Translate a first-order term into a superposition term."""
    if isinstance(term, Variable):
        return sup.Variable(term.name)
    if isinstance(term, Application):
        fun_name, args = get_application_components(term)
        return sup.Application(fun_name, [term_to_sup(arg) for arg in args])
    raise FolError(f"FOL term {term!r} doesn't have a corresponding SUP term")


def _clauses_to_sup(clauses) -> list:
    errors = []
    sup_clauses = []
    for clause in clauses:
        try:
            sup_clauses.append(clause_to_sup(clause))
        except FolError as error:
            errors.append(str(error))
    if errors:
        raise FolError("\n\n".join(errors))
    return sup_clauses


def clause_to_sup(clause: Formula) -> sup.Formula:
    """Translate a literal or a disjunction of literals into a superposition formula."""
    if isinstance(clause, Predicate):
        return sup.Atom(clause.name, [term_to_sup(arg) for arg in clause.args])
    if isinstance(clause, Disjunction):
        return sup.Clause(_clauses_to_sup(clause.formulas))
    if isinstance(clause, Not):
        return sup.Not(clause_to_sup(clause.formula))
    raise FolError(f"Not a Clause: {clause!r}")


def clausify(formula: Formula) -> list:
    """Turn a formula into a list of superposition clauses.

    Errors from every clause are collected and raised together as FolError.
    """
    nnf = negation_normal_form(formula)
    pnf = prenex_normal_form(nnf)
    skolemized = skolemize(pnf)
    cnf = conjunction_normal_form(skolemized)
    return _clauses_to_sup(cnf)
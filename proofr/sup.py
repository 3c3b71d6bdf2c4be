"""Terms, formulas and orderings of the superposition calculus."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Iterable, Union


class SupError(ValueError):
    """Raised when a superposition check or operation fails."""


@dataclass(frozen=True)
class Variable:
    """A term variable."""

    name: str

    def __repr__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Application:
    """A function symbol applied to argument terms."""

    name: str
    args: tuple = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))

    def __repr__(self) -> str:
        return f"{self.name}({', '.join(map(repr, self.args))})"


Term = Union[Variable, Application]


@dataclass(frozen=True)
class Atom:
    """A predicate applied to argument terms."""

    name: str
    args: tuple = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))

    def __repr__(self) -> str:
        return f"{self.name}({', '.join(map(repr, self.args))})"


@dataclass(frozen=True)
class Equality:
    """An equation between two terms."""

    left: Term
    right: Term

    def __repr__(self) -> str:
        return f"{self.left!r} = {self.right!r}"


@dataclass(frozen=True)
class Not:
    """Negation of a formula."""

    formula: "Formula"

    def __repr__(self) -> str:
        return f"¬{self.formula!r}"


@dataclass(frozen=True)
class Clause:
    """A disjunction of literals; the empty clause is falsity."""

    literals: tuple = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "literals", tuple(self.literals))

    def __repr__(self) -> str:
        return "{" + " ∨ ".join(map(repr, self.literals)) + "}"


@dataclass(frozen=True)
class ForAll:
    """Universal quantification of a variable of a given type."""

    var_name: str
    var_type: "Formula"
    body: "Formula"

    def __repr__(self) -> str:
        return f"∀{self.var_name}:{self.var_type!r}. {self.body!r}"


Formula = Union[Atom, Equality, Not, Clause, ForAll]


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def base_term_equality(term1: Term, term2: Term) -> None:
    """Raise SupError unless the two terms are identical."""
    if term1 != term2:
        raise SupError(f"{term1!r} and {term2!r} are not equal")


def base_type_equality(type1: Formula, type2: Formula) -> None:
    """Raise SupError unless the two formulas are identical."""
    if type1 != type2:
        raise SupError(f"{type1!r} and {type2!r} are not equal")


def get_arg_types(forall: Formula) -> list:
    """Return the variable types of nested universal quantifiers, outermost first."""
    types = []
    while isinstance(forall, ForAll):
        types.append(forall.var_type)
        forall = forall.body
    return types


def get_forall_innermost(forall: Formula) -> Formula:
    """Return the body under all leading universal quantifiers."""
    while isinstance(forall, ForAll):
        forall = forall.body
    return forall


def _are_complements(l1: Formula, l2: Formula) -> bool:
    if isinstance(l1, Atom) and isinstance(l2, Not):
        return l2.formula == l1
    if isinstance(l1, Not) and isinstance(l2, Atom):
        return l1.formula == l2
    return False


def is_tautology(formula: Formula) -> bool:
    """Return True if the formula is recognised as a tautology."""
    if isinstance(formula, Clause):
        literals = formula.literals
        for idx, lit in enumerate(literals):
            if is_tautology(lit):
                return True
            if any(_are_complements(lit, earlier) for earlier in literals[:idx]):
                return True
        return False
    if isinstance(formula, Equality):
        return formula.left == formula.right
    return False


def _term_weight(term: Term) -> int:
    if isinstance(term, Variable):
        return 1
    return 1 + len(term.args)


def _compare_sequences(seq1: Iterable, seq2: Iterable, compare) -> int:
    for a, b in zip(seq1, seq2):
        result = compare(a, b)
        if result:
            return result
    return 0


def kbo_terms(term1: Term, term2: Term) -> int:
    """Knuth-Bendix comparison of terms: negative, zero or positive."""
    w1, w2 = _term_weight(term1), _term_weight(term2)
    if w1 != w2:
        return _cmp(w1, w2)

    if isinstance(term1, Variable) and isinstance(term2, Variable):
        return _cmp(term1.name, term2.name)
    if isinstance(term1, Variable):
        return -1
    if isinstance(term2, Variable):
        return 1

    by_arity = _cmp(len(term1.args), len(term2.args))
    if by_arity:
        return by_arity
    by_args = _compare_sequences(term1.args, term2.args, kbo_terms)
    if by_args:
        return by_args
    return _cmp(term1.name, term2.name)


_KIND_RANK = {Atom: 0, Not: 1, Equality: 2, Clause: 3, ForAll: 4}


def kbo_types(formula1: Formula, formula2: Formula) -> int:
    """Simplification ordering on formulas: negative, zero or positive."""
    if isinstance(formula1, Atom) and isinstance(formula2, Atom):
        by_arity = _cmp(len(formula1.args), len(formula2.args))
        if by_arity:
            return by_arity
        by_args = _compare_sequences(formula1.args, formula2.args, kbo_terms)
        if by_args:
            return by_args
        return _cmp(formula1.name, formula2.name)

    if isinstance(formula1, Not) and isinstance(formula2, Not):
        return kbo_types(formula1.formula, formula2.formula)

    if isinstance(formula1, Equality) and isinstance(formula2, Equality):
        by_left = kbo_terms(formula1.left, formula2.left)
        if by_left:
            return by_left
        return kbo_terms(formula1.right, formula2.right)

    if isinstance(formula1, Clause) and isinstance(formula2, Clause):
        by_size = _cmp(len(formula1.literals), len(formula2.literals))
        if by_size:
            return by_size
        key = cmp_to_key(kbo_types)
        return _compare_sequences(
            sorted(formula1.literals, key=key),
            sorted(formula2.literals, key=key),
            kbo_types,
        )

    if isinstance(formula1, ForAll) and isinstance(formula2, ForAll):
        by_body = kbo_types(formula1.body, formula2.body)
        if by_body:
            return by_body
        return _cmp(formula1.var_name, formula2.var_name)

    return _cmp(_KIND_RANK[type(formula1)], _KIND_RANK[type(formula2)])


def subsumes(c: Formula, d: Formula) -> bool:
    """Return True if every literal of clause `c` occurs in clause `d`."""
    if not isinstance(c, Clause) or not isinstance(d, Clause):
        return False
    return all(c_lit in d.literals for c_lit in c.literals)


def select(clause: Formula) -> Formula:
    """Select a literal from a non-empty clause (currently the first)."""
    if not isinstance(clause, Clause):
        raise SupError(
            f"Selection is defined on clause formulas only, not {clause!r}"
        )
    if not clause.literals:
        raise SupError("Empty clause does not allow for selection of literals")
    return clause.literals[0]
"""Terms and formulas of first-order logic, with substitution helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


class FolError(ValueError):
    """Raised when a first-order logic operation fails."""


def _quote(name: str) -> str:
    return '"' + name.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _list_repr(items) -> str:
    return "[" + ", ".join(map(repr, items)) + "]"


# ---------------------------------------------------------------- terms


@dataclass(frozen=True)
class Variable:
    """A term variable."""

    name: str

    def __repr__(self) -> str:
        return f"Variable({_quote(self.name)})"


@dataclass(frozen=True)
class Abstraction:
    """A lambda abstraction over a typed variable."""

    var_name: str
    var_type: "Formula"
    body: "Term"

    def __repr__(self) -> str:
        return (
            f"Abstraction({_quote(self.var_name)}, "
            f"{self.var_type!r}, {self.body!r})"
        )


@dataclass(frozen=True)
class Application:
    """Application of a term to a single argument."""

    function: "Term"
    argument: "Term"

    def __repr__(self) -> str:
        return f"Application({self.function!r}, {self.argument!r})"


@dataclass(frozen=True)
class Tuple:
    """A tuple of terms."""

    terms: tuple = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "terms", tuple(self.terms))

    def __repr__(self) -> str:
        return f"Tuple({_list_repr(self.terms)})"


Term = Union[Variable, Abstraction, Application, Tuple]


# ---------------------------------------------------------------- formulas


class _FormulaText:
    """Shared rendering: str is the plain form, repr the fully parenthesized one."""

    def __str__(self) -> str:
        return _plain(self)

    def __repr__(self) -> str:
        return parenthesized(self)


@dataclass(frozen=True, repr=False)
class Predicate(_FormulaText):
    """A predicate applied to argument terms."""

    name: str
    args: tuple = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))


@dataclass(frozen=True, repr=False)
class Arrow(_FormulaText):
    """Implication between two formulas."""

    assumption: "Formula"
    conclusion: "Formula"


@dataclass(frozen=True, repr=False)
class Not(_FormulaText):
    """Negation of a formula."""

    formula: "Formula"


@dataclass(frozen=True, repr=False)
class Conjunction(_FormulaText):
    """Conjunction of formulas."""

    formulas: tuple = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "formulas", tuple(self.formulas))


@dataclass(frozen=True, repr=False)
class Disjunction(_FormulaText):
    """Disjunction of formulas."""

    formulas: tuple = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "formulas", tuple(self.formulas))


@dataclass(frozen=True, repr=False)
class ForAll(_FormulaText):
    """Universal quantification of a typed variable."""

    var_name: str
    var_type: "Formula"
    body: "Formula"


@dataclass(frozen=True, repr=False)
class Exist(_FormulaText):
    """Existential quantification of a typed variable."""

    var_name: str
    var_type: "Formula"
    body: "Formula"


Formula = Union[Predicate, Arrow, Not, Conjunction, Disjunction, ForAll, Exist]


def _plain(formula: Formula) -> str:
    if isinstance(formula, Predicate):
        return f"{formula.name}({_list_repr(formula.args)})"
    if isinstance(formula, Not):
        return f"¬{_plain(formula.formula)}"
    if isinstance(formula, Arrow):
        return f"{_plain(formula.assumption)} → {_plain(formula.conclusion)}"
    if isinstance(formula, Conjunction):
        return "∧".join(_plain(f) for f in formula.formulas)
    if isinstance(formula, Disjunction):
        return "∨".join(_plain(f) for f in formula.formulas)
    if isinstance(formula, ForAll):
        return f"∀{formula.var_name}:{_plain(formula.var_type)}. {_plain(formula.body)}"
    if isinstance(formula, Exist):
        return f"∃{formula.var_name}:{_plain(formula.var_type)}. {_plain(formula.body)}"
    raise FolError(f"Not a formula: {formula!r}")


def parenthesized(formula: Formula) -> str:
    """Render a formula with every compound subformula parenthesized."""
    if isinstance(formula, Predicate):
        return f"{formula.name}({_list_repr(formula.args)})"
    if isinstance(formula, Not):
        return f"¬({parenthesized(formula.formula)})"
    if isinstance(formula, Arrow):
        return (
            f"({parenthesized(formula.assumption)} → "
            f"{parenthesized(formula.conclusion)})"
        )
    if isinstance(formula, Conjunction):
        return "(" + "∧".join(parenthesized(f) for f in formula.formulas) + ")"
    if isinstance(formula, Disjunction):
        return "(" + "∨".join(parenthesized(f) for f in formula.formulas) + ")"
    if isinstance(formula, ForAll):
        return (
            f"∀{formula.var_name}:{parenthesized(formula.var_type)}. "
            f"({parenthesized(formula.body)})"
        )
    if isinstance(formula, Exist):
        return (
            f"∃{formula.var_name}:{parenthesized(formula.var_type)}. "
            f"({parenthesized(formula.body)})"
        )
    raise FolError(f"Not a formula: {formula!r}")


# ---------------------------------------------------------------- helpers


def make_multiarg_app(fun_name: str, args) -> Term:
    """Build the curried application of `fun_name` to `args`, left to right."""
    term: Term = Variable(fun_name)
    for arg in args:
        term = Application(term, arg)
    return term


def get_application_components(app: Term) -> tuple:
    """Split a curried application into (function name, argument list).

    Anonymous functions yield an empty name; tuples raise FolError.
    """
    if isinstance(app, Variable):
        return app.name, []
    if isinstance(app, Abstraction):
        return "", []
    if isinstance(app, Application):
        fun_name, args = get_application_components(app.function)
        args.append(app.argument)
        return fun_name, args
    raise FolError(f"Term {app!r} is not an application")


def substitute_term(term: Term, target_name: str, arg: Term) -> Term:
    """Replace every free occurrence of `target_name` in `term` with `arg`."""
    if isinstance(term, Variable):
        return arg if term.name == target_name else term
    if isinstance(term, Abstraction):
        if term.var_name == target_name:
            return term
        return Abstraction(
            term.var_name,
            substitute_formula(term.var_type, target_name, arg),
            substitute_term(term.body, target_name, arg),
        )
    if isinstance(term, Application):
        return Application(
            substitute_term(term.function, target_name, arg),
            substitute_term(term.argument, target_name, arg),
        )
    if isinstance(term, Tuple):
        return Tuple(substitute_term(t, target_name, arg) for t in term.terms)
    raise FolError(f"Not a term: {term!r}")


def substitute_formula(formula: Formula, target_name: str, arg: Term) -> Formula:
    """Replace every free occurrence of `target_name` in `formula` with `arg`."""
    if isinstance(formula, Predicate):
        return Predicate(
            formula.name,
            (substitute_term(t, target_name, arg) for t in formula.args),
        )
    if isinstance(formula, Arrow):
        return Arrow(
            substitute_formula(formula.assumption, target_name, arg),
            substitute_formula(formula.conclusion, target_name, arg),
        )
    if isinstance(formula, Not):
        return Not(substitute_formula(formula.formula, target_name, arg))
    if isinstance(formula, (Conjunction, Disjunction)):
        return type(formula)(
            substitute_formula(f, target_name, arg) for f in formula.formulas
        )
    if isinstance(formula, (ForAll, Exist)):
        if formula.var_name == target_name:
            return formula
        return type(formula)(
            formula.var_name,
            substitute_formula(formula.var_type, target_name, arg),
            substitute_formula(formula.body, target_name, arg),
        )
    raise FolError(f"Not a formula: {formula!r}")


def swap_binded_formula(formula: Formula, new_body: Formula) -> Formula:
    """Keep the leading quantifier prefix of `formula`, replacing its matrix."""
    if isinstance(formula, (ForAll, Exist)):
        return type(formula)(
            formula.var_name,
            formula.var_type,
            swap_binded_formula(formula.body, new_body),
        )
    return new_body
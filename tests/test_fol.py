import pytest

from proofr.fol import (
    Abstraction,
    Application,
    Arrow,
    Conjunction,
    Disjunction,
    Exist,
    FolError,
    ForAll,
    Not,
    Predicate,
    Tuple,
    Variable,
    get_application_components,
    make_multiarg_app,
    parenthesized,
    substitute_formula,
    substitute_term,
    swap_binded_formula,
)

NAT = Predicate("Nat")
TOP = Predicate("Top")
X = Variable("x")
Y = Variable("y")


def test_make_multiarg_app_is_left_nested():
    app = make_multiarg_app("f", [X, Y])
    assert app == Application(Application(Variable("f"), X), Y)


def test_make_multiarg_app_without_args_is_variable():
    assert make_multiarg_app("c", []) == Variable("c")


def test_application_components_round_trip():
    args = [X, Y, Variable("z")]
    name, got = get_application_components(make_multiarg_app("g", args))
    assert name == "g"
    assert got == args


def test_application_components_of_variable_and_abstraction():
    assert get_application_components(X) == ("x", [])
    assert get_application_components(Abstraction("x", NAT, X)) == ("", [])


def test_application_components_rejects_tuple():
    with pytest.raises(FolError):
        get_application_components(Tuple([X, Y]))


def test_substitute_term_replaces_free_occurrences():
    term = Tuple([X, Application(Variable("f"), X), Y])
    result = substitute_term(term, "x", Variable("c"))
    assert result == Tuple(
        [Variable("c"), Application(Variable("f"), Variable("c")), Y]
    )


def test_substitute_term_respects_binder():
    term = Abstraction("x", NAT, X)
    assert substitute_term(term, "x", Y) == term


def test_substitute_term_enters_other_binder():
    term = Abstraction("y", Predicate("P", [X]), X)
    result = substitute_term(term, "x", Variable("c"))
    assert result == Abstraction(
        "y", Predicate("P", [Variable("c")]), Variable("c")
    )


def test_substitute_formula_through_connectives():
    formula = Arrow(
        Not(Predicate("P", [X])),
        Disjunction([Predicate("Q", [X]), Conjunction([Predicate("R", [Y])])]),
    )
    result = substitute_formula(formula, "x", Variable("a"))
    assert result == Arrow(
        Not(Predicate("P", [Variable("a")])),
        Disjunction(
            [Predicate("Q", [Variable("a")]), Conjunction([Predicate("R", [Y])])]
        ),
    )


@pytest.mark.parametrize("binder", [ForAll, Exist])
def test_substitute_formula_respects_quantifier(binder):
    formula = binder("x", NAT, Predicate("P", [X]))
    assert substitute_formula(formula, "x", Y) == formula
    other = binder("y", NAT, Predicate("P", [X]))
    assert substitute_formula(other, "x", Y) == binder(
        "y", NAT, Predicate("P", [Y])
    )


def test_substitute_missing_name_is_identity():
    formula = ForAll("y", NAT, Predicate("P", [Y, Application(Variable("f"), Y)]))
    assert substitute_formula(formula, "absent", X) == formula


def test_swap_binded_formula_keeps_prefix():
    prefix = ForAll("x", NAT, Exist("y", NAT, Predicate("P", [X, Y])))
    result = swap_binded_formula(prefix, TOP)
    assert result == ForAll("x", NAT, Exist("y", NAT, TOP))


def test_swap_binded_formula_without_quantifier():
    assert swap_binded_formula(Predicate("P", [X]), TOP) == TOP


def test_plain_rendering_of_arrow_and_not():
    assert str(Arrow(NAT, TOP)) == "Nat([]) → Top([])"
    assert str(Not(NAT)) == "¬Nat([])"


def test_parenthesized_rendering():
    formula = Arrow(Not(NAT), TOP)
    assert parenthesized(formula) == "(¬(Nat([])) → Top([]))"
    assert repr(formula) == parenthesized(formula)


def test_junction_renderings_use_connectives():
    conj = Conjunction([NAT, TOP])
    disj = Disjunction([NAT, TOP])
    assert "∧" in str(conj) and str(conj).startswith("Nat")
    assert parenthesized(disj).startswith("(") and "∨" in parenthesized(disj)


def test_formulas_are_hashable_and_equal_by_value():
    a = ForAll("x", NAT, Predicate("P", [X]))
    b = ForAll("x", NAT, Predicate("P", (X,)))
    assert a == b
    assert len({a, b}) == 1
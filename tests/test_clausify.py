import pytest

from proofr import sup
from proofr.clausify import clause_to_sup, clausify, term_to_sup
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
)

NAT = Predicate("Nat")
X = Variable("x")
Y = Variable("y")


def test_term_to_sup_variable():
    assert term_to_sup(X) == sup.Variable("x")


def test_term_to_sup_curried_application():
    term = Application(Application(Variable("f"), X), Y)
    assert term_to_sup(term) == sup.Application(
        "f", [sup.Variable("x"), sup.Variable("y")]
    )


def test_term_to_sup_nested_application():
    term = Application(Variable("f"), Application(Variable("g"), X))
    assert term_to_sup(term) == sup.Application(
        "f", [sup.Application("g", [sup.Variable("x")])]
    )


@pytest.mark.parametrize(
    "term", [Tuple([X, Y]), Abstraction("x", NAT, X)]
)
def test_term_to_sup_rejects_other_terms(term):
    with pytest.raises(FolError, match="doesn't have a corresponding SUP term"):
        term_to_sup(term)


def test_clause_to_sup_literals():
    p = Predicate("P", [X])
    assert clause_to_sup(p) == sup.Atom("P", [sup.Variable("x")])
    assert clause_to_sup(Not(p)) == sup.Not(sup.Atom("P", [sup.Variable("x")]))


def test_clause_to_sup_disjunction():
    clause = Disjunction([Predicate("P", [X]), Not(Predicate("Q", [X]))])
    result = clause_to_sup(clause)
    assert isinstance(result, sup.Clause)
    assert result.literals == (
        sup.Atom("P", [sup.Variable("x")]),
        sup.Not(sup.Atom("Q", [sup.Variable("x")])),
    )


def test_clause_to_sup_rejects_conjunction():
    with pytest.raises(FolError, match="Not a Clause"):
        clause_to_sup(Conjunction([Predicate("P"), Predicate("Q")]))


def test_clausify_universal_implication():
    phi = ForAll("x", NAT, Arrow(Predicate("P", [X]), Predicate("Q", [X])))
    result = clausify(phi)
    assert result == [
        sup.Clause(
            [
                sup.Not(sup.Atom("P", [sup.Variable("x")])),
                sup.Atom("Q", [sup.Variable("x")]),
            ]
        )
    ]


def test_clausify_existential_becomes_skolem_constant():
    result = clausify(Exist("x", NAT, Predicate("P", [X])))
    assert result == [sup.Atom("P", [sup.Variable("sw_0")])]


def test_clausify_conjunction_gives_one_clause_each():
    phi = Conjunction([Predicate("P", [X]), Predicate("Q", [X]), Predicate("R", [X])])
    result = clausify(phi)
    assert [atom.name for atom in result] == ["P", "Q", "R"]


def test_clausify_collects_errors_from_all_clauses():
    bad_p = Predicate("P", [Tuple([X])])
    bad_q = Predicate("Q", [Abstraction("y", NAT, Y)])
    with pytest.raises(FolError) as info:
        clausify(Conjunction([bad_p, bad_q]))
    message = str(info.value)
    assert "\n\n" in message
    assert message.count("doesn't have a corresponding SUP term") == 2
# proofr

A small library for first-order logic formulas and clause-level reasoning.
It has no dependencies beyond the standard library.

## Modules

- **`proofr.fol`**: first-order terms (`Variable`, `Abstraction`,
  `Application`, `Tuple`) and formulas (`Predicate`, `Arrow`, `Not`,
  `Conjunction`, `Disjunction`, `ForAll`, `Exist`), all immutable dataclasses.
  `str()` of a formula gives a plain rendering, `repr()` and `parenthesized()`
  a fully parenthesized one. Helpers: `make_multiarg_app`,
  `get_application_components`, `substitute_term`, `substitute_formula`
  (substitution stops at a binder of the same name) and `swap_binded_formula`.
- **`proofr.normal_forms`**: `negation_normal_form`, `prenex_normal_form`,
  `skolemize` (witnesses are named `sw_0`, `sw_1`, … and applied to the
  enclosing universally bound variables) and `conjunction_normal_form`, which
  returns the list of conjoined clauses.
- **`proofr.clausify`**: `clausify` runs the normal forms above in order and
  translates the result into superposition clauses; `clause_to_sup` and
  `term_to_sup` do the translation of a single clause or term.
- **`proofr.sup`**: superposition-calculus terms (`Variable`, `Application`)
  and formulas (`Atom`, `Equality`, `Not`, `Clause`, `ForAll`);
  `base_term_equality` and `base_type_equality` (syntactic equality, raising
  on mismatch); `get_arg_types` and `get_forall_innermost`; `is_tautology`
  (identical-sided equalities and clauses with complementary literals);
  `subsumes`; `select` (the first literal of a non-empty clause); and the
  orderings `kbo_terms` and `kbo_types`, which return a negative, zero or
  positive integer.
- **`proofr.saturation`**: `is_bottom`, `is_redundant`, `saturate` and
  `prove`, which adds the negated goal to the premises and saturates.

## Errors

Failures are raised, never returned:

- `proofr.fol.FolError` (a `ValueError`) for malformed input to the
  first-order functions and for clauses that cannot be translated; `clausify`
  collects the messages of every failing clause into one error.
- `proofr.sup.SupError` (a `ValueError`) for failed equality checks and
  invalid selection.
- `proofr.saturation.SaturationError` (a `SupError`) when saturation ends
  without reaching the empty clause.

## Example

```python
from proofr.fol import Predicate, Variable, ForAll, Arrow
from proofr.normal_forms import negation_normal_form
from proofr.clausify import clausify

x = Variable("x")
nat = Predicate("Nat", [])
formula = ForAll("x", nat, Arrow(Predicate("P", [x]), Predicate("Q", [x])))

print(negation_normal_form(formula))
clauses = clausify(formula)   # [{¬P(x) ∨ Q(x)}]
```

```python
from proofr.sup import Atom, Clause, Not, Variable, is_tautology, subsumes

x = Variable("x")
p = Atom("P", [x])
q = Atom("Q", [x])

is_tautology(Clause([p, q, Not(p)]))      # True
subsumes(Clause([p]), Clause([q, p]))     # True
```

## What it does not do

- `saturate` processes the given clauses, discarding tautologies and subsumed
  clauses, but generates no new clauses: there are no resolution or
  superposition inferences and no simplification. It succeeds only when the
  empty clause is among its inputs; otherwise it raises `SaturationError`.
  `prove` is therefore not a complete prover.
- Subsumption and tautology checks are purely syntactic; there is no
  unification.
- There is no parser for a formula syntax and no command-line tool; formulas
  are built from the Python classes directly.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```
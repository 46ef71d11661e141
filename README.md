# logicfuzz

Build propositional formulas from constants, variables and AND/OR gates,
simplify and normalize them, evaluate them under a model, and fuzz the
simplifier with a deterministic random generator.

## Installation

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Modules

- `logicfuzz.nodes`: `Constant`, `Variable`, `Gate`, the `GateType` enum
  (`AND`, `OR`) and their common base `Node`.
- `logicfuzz.builder`: `LogicBuilder`, which builds, normalizes, simplifies
  and evaluates formulas.
- `logicfuzz.rng`: `Random`, a deterministic 64-bit linear congruential
  generator.
- `logicfuzz.fuzzer`: `Fuzzer`, `FuzzError` and the `logicfuzz` command.
- `logicfuzz.demo`: the `logicfuzz-demo` command.

## Building formulas

```python
from logicfuzz.builder import LogicBuilder

builder = LogicBuilder()
formula = builder.make_conjunction(
    [builder.make_variable(1), builder.make_variable(2), builder.make_true()]
)
print(formula)                     # AND[x1, x2]

simplified = builder.simplify(formula)
print(builder.evaluate(simplified, [True, True]))    # True
print(builder.evaluate(simplified, [True, False]))   # False
```

A model is a sequence of booleans: variable `n` reads position `n - 1`, and a
negative literal `-n` is its negation. A variable whose position lies outside
the model is false.

Nodes compare and hash structurally, so equal formulas built separately are
equal. A formula prints as `True`, `False`, `x3`, `x-3`, `AND[...]` or
`OR[...]`.

`make_conjunction` and `make_disjunction` fold constants as they build:

- `AND[]` is `True`, `OR[]` is `False`
- `AND[x]` and `OR[x]` are `x`
- `AND[..., False, ...]` is `False`, `OR[..., True, ...]` is `True`
- neutral constants are dropped

`simplify` applies the same rules recursively and also merges duplicate
children. It remembers its results in a cache shared by all builders, so
simplifying structurally equal formulas gives back the same object.
`clear_cache()` forgets them.

`normalize` rewrites a gate in place: every gate below it loses duplicate
children and neutral constants, and a gate containing its absorbing constant
is reduced to that constant as its single child. A gate is never left empty.
Constants and variables are left as they are.

`collect_children` lists every node of a formula in pre-order, the formula
itself first.

## Fuzzing

The `logicfuzz` command grows a pool of random formulas and checks that
normalized and simplified formulas agree with the originals on random models,
and that simplified gates hold no constants and no duplicate children.

    logicfuzz                      # seed and length taken from the clock
    logicfuzz 42                   # seed 42, 1000 tests
    logicfuzz ab12cd 500           # seed derived from the text ab12cd, 500 tests
    logicfuzz 42 500 verbose       # seed 42, 500 tests, verbose output

With two arguments the first is read as text (each character's code folded in
as a hex digit), except when the count is 1, where it is read as a number.
Any third argument switches on verbose output. Formulas use variables 1 to 20.

On a failure the run stops, prints the seed of the current loop so the search
can be restarted from that point, and the command exits with status 1.

From Python:

```python
from logicfuzz.fuzzer import Fuzzer

errors = Fuzzer(seed=42, size=20, length=1000).run(verbose=False)
```

By default the first failed check raises `FuzzError`, whose `seed` attribute
holds the loop seed. With `fail_on_first_error=False` the fuzzer keeps going,
prints a summary at the end, and `run` returns the number of errors found.

## Demonstration

    logicfuzz-demo

runs a short walk-through of the simplification rules and the result cache,
raising `RuntimeError` if any of its checks fails.

## What it does not do

There is no logging facility: progress and results go to standard output and
error reports to standard error.
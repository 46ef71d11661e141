"""Small walk-through of formula simplification and its cache."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .builder import LogicBuilder
from .nodes import Constant, Variable


def _check(condition: bool, message: str) -> None:
    if not condition:
        raise RuntimeError(message)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simplification examples, raising on the first failed check."""
    builder = LogicBuilder()

    print("Test 1: Basic simplification and structural sharing")
    g1 = builder.make_conjunction(
        [builder.make_variable(1), builder.make_variable(2), builder.make_true()]
    )
    print(f"Original formula: {g1}")
    h1 = builder.simplify(g1)
    print(f"Simplified formula: {h1}")
    _check(h1.arity() == 2, "simplified formula should have two children")

    print("\nTest 2: Verify caching works")
    h2 = builder.simplify(g1)
    print(f"Simplified formula (second time): {h2}")
    print(f"Are pointers identical? {'Yes' if h1 is h2 else 'No'}")
    _check(h1 is h2, "cached simplification should return the same object")

    print("\nTest 3: Create structurally identical but different formulas")
    g2 = builder.make_conjunction([builder.make_variable(1), builder.make_variable(2)])
    print(f"Second formula: {g2}")
    h3 = builder.simplify(g2)
    print(f"Simplified second formula: {h3}")
    print(f"Are simplified formulas structurally equal? {'Yes' if h1 == h3 else 'No'}")
    _check(h1 == h3, "simplified formulas should be structurally equal")

    print("\nTest 4: AND[x] = x simplification")
    g3 = builder.make_conjunction([builder.make_variable(5)])
    print(f"Single child formula: {g3}")
    h4 = builder.simplify(g3)
    print(f"Simplified single child formula: {h4}")
    _check(isinstance(h4, Variable) and h4.literal == 5, "AND[x5] should become x5")

    print("\nTest 5: OR[x] = x simplification")
    g4 = builder.make_disjunction([builder.make_variable(7)])
    print(f"Single child OR formula: {g4}")
    h5 = builder.simplify(g4)
    print(f"Simplified single child OR formula: {h5}")
    _check(isinstance(h5, Variable) and h5.literal == 7, "OR[x7] should become x7")

    print("\nTest 6: AND[] = True simplification")
    g5 = builder.make_conjunction([])
    print(f"Empty AND formula: {g5}")
    h6 = builder.simplify(g5)
    print(f"Simplified empty AND formula: {h6}")
    _check(isinstance(h6, Constant) and h6.value is True, "AND[] should become True")

    print("\nTest 7: OR[] = False simplification")
    g6 = builder.make_disjunction([])
    print(f"Empty OR formula: {g6}")
    h7 = builder.simplify(g6)
    print(f"Simplified empty OR formula: {h7}")
    _check(isinstance(h7, Constant) and h7.value is False, "OR[] should become False")

    print("\nAll tests passed!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
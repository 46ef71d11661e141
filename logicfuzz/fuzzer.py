"""Random differential testing of formula normalisation and simplification."""

from __future__ import annotations

import itertools
import sys
import time
from collections.abc import Sequence

from .builder import LogicBuilder
from .nodes import Constant, Gate, Node
from .rng import Random

_MASK64 = (1 << 64) - 1


class FuzzError(Exception):
    """Raised when a check fails and the fuzzer stops at the first error."""

    def __init__(self, seed: int) -> None:
        super().__init__(
            f"ERROR, rerun with the following seed as start point {seed}"
        )
        self.seed = seed


class Fuzzer:
    """Builds random formulas and checks that rewriting preserves their meaning.

    ``size`` is the highest variable number used in formulas and ``length``
    the number of rounds to run.
    """

    def __init__(
        self,
        seed: int,
        size: int = 100,
        length: int = 0,
        fail_on_first_error: bool = True,
    ) -> None:
        self.rand = Random(seed)
        self.builder = LogicBuilder()
        self.number_of_literals = size
        self.length = length
        self.fail_on_first_error = fail_on_first_error
        self.current_loop_seed = self.rand.seed
        self.found_errors = 0
        self.cache: list[Node] = []

    def _report_error(self) -> None:
        print(
            "\nERROR, rerun with the following seed as start point "
            f"{self.current_loop_seed}",
            file=sys.stderr,
        )
        self.found_errors += 1
        if self.fail_on_first_error:
            raise FuzzError(self.current_loop_seed)

    def _pick_cached(self) -> Node:
        return self.cache[self.rand.pick_int(0, len(self.cache) - 1)]

    def pick_children(self) -> list[Node]:
        """Between zero and six formulas taken at random from the cache."""
        count = self.rand.pick_int(0, 6)
        return [self._pick_cached() for _ in range(count)]

    def generate_model(self) -> list[bool]:
        """A random assignment with one entry per variable, plus one."""
        return [self.rand.generate_bool() for _ in range(self.number_of_literals + 1)]

    def check_same_models(self, first: Node, second: Node) -> None:
        """Evaluate both formulas under random models and report a mismatch."""
        rounds = self.rand.pick_int(0, 10000)
        for _ in range(rounds):
            model = self.generate_model()
            v1 = self.builder.evaluate(first, model)
            v2 = self.builder.evaluate(second, model)
            if v1 != v2:
                literals = " ".join(
                    str(i if value else -i)
                    for i, value in enumerate(model[1:], start=1)
                )
                print(
                    f"the models are not the same (val: {int(v1)})\n\t{first}"
                    f"\nvs (val: {int(v2)})\n\t{second}",
                    file=sys.stderr,
                )
                print(f"model: {literals} ", file=sys.stderr)
                self._report_error()
                break

    def produce_new_node(self, verbose: bool = False) -> None:
        """Add one random constant, gate or variable to the cache."""
        choice = self.rand.pick_int(0, 5)
        if choice == 0:
            kind = "true"
            self.cache.append(self.builder.make_true())
        elif choice == 1:
            kind = "false"
            self.cache.append(self.builder.make_false())
        elif choice == 2:
            kind = "and"
            self.cache.append(self.builder.make_conjunction(self.pick_children()))
        elif choice == 3:
            kind = "or"
            self.cache.append(self.builder.make_disjunction(self.pick_children()))
        else:
            kind = "literal"
            literal = self.rand.pick_int(1, self.number_of_literals)
            self.cache.append(self.builder.make_variable(literal))
        if verbose:
            print(f"produce new node {kind}")

    def check_normalize(self, verbose: bool = False) -> None:
        """Normalise a cached formula in place and check it keeps its meaning."""
        if verbose:
            print("test normalize")
        formula = self._pick_cached()
        self.builder.normalize(formula)
        self.check_same_models(formula, formula)
        self.cache.append(formula)

    def check_simplify(self, verbose: bool = False) -> None:
        """Simplify a cached formula and check meaning and structure."""
        original = self._pick_cached()
        if verbose:
            print("*****************\ntest simplify")
        simplified = self.builder.simplify(original)
        if verbose:
            print(f"test simplify\t{original}\nafter simplification\t{simplified}")

        self.check_same_models(simplified, original)

        if isinstance(simplified, Gate):
            children = simplified.children
            for child in children:
                if isinstance(child, Constant):
                    if verbose:
                        print("Error: Found constant in direct children of simplified formula")
                    self._report_error()
            for left, right in itertools.combinations(children, 2):
                if left == right:
                    if verbose:
                        print("Error: Found duplicate nodes, imperfect structural sharing")
                    self._report_error()

        self.cache.append(simplified)

    def prepopulate(self) -> None:
        """Add ten random constants or literals to the cache."""
        for _ in range(10):
            choice = self.rand.pick_int(0, 5)
            if choice == 0:
                self.cache.append(self.builder.make_true())
            elif choice == 1:
                self.cache.append(self.builder.make_false())
            else:
                literal = self.rand.pick_int(1, self.number_of_literals)
                sign = 1 if self.rand.generate_bool() else -1
                self.cache.append(self.builder.make_variable(literal * sign))

    def run(self, verbose: bool = False) -> int:
        """Run all rounds and return the number of errors found."""
        self.prepopulate()
        for i in range(self.length):
            if i % 100 == 0:
                print(f"...{i}", end="", flush=True)
            choice = self.rand.pick_int(0, 3)
            if choice == 0:
                self.produce_new_node(verbose)
            elif choice == 1:
                self.check_normalize(verbose)
            elif choice == 2:
                self.check_simplify(verbose)
            elif self.rand.pick_int(0, 100) < 10:
                if verbose:
                    print("emptying cache", end="")
                self.cache.clear()
                self.current_loop_seed = self.rand.seed
                self.prepopulate()
                self.builder.clear_cache()
        if not self.fail_on_first_error:
            print(f"\n\nerrors: {self.found_errors} from {self.length}")
        return self.found_errors


def seed_from_account(account: str) -> int:
    """Turn an account name into a seed, reading each character as a hex digit."""
    seed = 0
    for byte in account.encode("utf-8"):
        char = byte - 256 if byte >= 128 else byte
        seed = (seed * 16 + char) & _MASK64
    return seed


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``[seed [count [verbose]]]``."""
    args = list(sys.argv[1:] if argv is None else argv)
    length = 1001
    verbose = False
    if len(args) == 3:
        seed = int(args[0]) & _MASK64
        length = int(args[1]) + 1
        print(f"using as seed {seed}")
        verbose = True
    elif len(args) == 2:
        length = int(args[1]) + 1
        if length == 2:
            seed = int(args[0]) & _MASK64
        else:
            seed = seed_from_account(args[0])
        print(f"using as seed {seed}")
    elif len(args) != 1:
        print("generating new seed based on the time!")
        generator = Random(int(time.time()))
        seed = generator.generate_int() & _MASK64
        length = generator.pick_int(0, 100000)
    else:
        seed = int(args[0]) & _MASK64
        print(seed)
        print(f"using as seed! {seed}")
    print(f"testing {length - 1} values")
    fuzzer = Fuzzer(seed, 20, length)
    try:
        fuzzer.run(verbose)
    except FuzzError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
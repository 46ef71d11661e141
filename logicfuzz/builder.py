"""Construction, normalisation and simplification of formulas."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import ClassVar

from .nodes import Constant, Gate, GateType, Node, Variable


def _unique(children: Iterable[Node]) -> list[Node]:
    """Drop structural duplicates, keeping the first occurrence of each."""
    return list(dict.fromkeys(children))


class LogicBuilder:
    """Factory and rewriting operations for formulas.

    The simplification cache is shared by all builders and maps formulas,
    compared structurally, to their simplified representative.
    """

    _simplified: ClassVar[dict[Node, Node]] = {}

    def make_variable(self, literal: int) -> Node:
        return Variable(literal)

    def make_true(self) -> Node:
        return Constant(True)

    def make_false(self) -> Node:
        return Constant(False)

    def _make_gate(self, kind: GateType, children: Iterable[Node]) -> Node:
        # AND is absorbed by False and ignores True; OR the other way round.
        absorbing = kind is GateType.OR
        children = list(children)
        if any(isinstance(c, Constant) and c.value is absorbing for c in children):
            return Constant(absorbing)
        remaining = [c for c in children if not isinstance(c, Constant)]
        if not remaining:
            return Constant(not absorbing)
        if len(remaining) == 1:
            return remaining[0]
        return Gate(kind, remaining)

    def make_conjunction(self, children: Iterable[Node]) -> Node:
        """AND of the children, with constants folded away."""
        return self._make_gate(GateType.AND, children)

    def make_disjunction(self, children: Iterable[Node]) -> Node:
        """OR of the children, with constants folded away."""
        return self._make_gate(GateType.OR, children)

    def normalize(self, formula: Node) -> None:
        """Rewrite the gates of a formula in place.

        Children are normalised first, duplicates dropped, and constants
        folded; a gate is never left without children.
        """
        if not isinstance(formula, Gate):
            return
        for child in formula.children:
            self.normalize(child)

        children = _unique(formula.children)
        absorbing = formula.kind is GateType.OR
        if any(isinstance(c, Constant) and c.value is absorbing for c in children):
            children = [Constant(absorbing)]
        else:
            children = [c for c in children if not isinstance(c, Constant)]
        if not children:
            children = [Constant(not absorbing)]
        formula.children = children

    def collect_children(self, formula: Node | None) -> list[Node]:
        """All nodes of the formula in pre-order, the formula itself first."""
        if formula is None:
            return []
        result = [formula]
        if isinstance(formula, Gate):
            for child in formula.children:
                result.extend(self.collect_children(child))
        return result

    def simplify(self, formula: Node) -> Node:
        """Return a simplified formula equivalent to the given one."""
        cache = LogicBuilder._simplified
        if formula in cache:
            return cache[formula]

        if not isinstance(formula, Gate):
            cache[formula] = formula
            return formula

        result = self._simplify_gate(formula)
        cache[formula] = result
        return result

    def _simplify_gate(self, gate: Gate) -> Node:
        absorbing = gate.kind is GateType.OR
        children = [self.simplify(child) for child in gate.children]

        if not children:
            return Constant(not absorbing)
        if len(children) == 1:
            return children[0]
        if any(isinstance(c, Constant) and c.value is absorbing for c in children):
            return Constant(absorbing)

        remaining = [c for c in children if not isinstance(c, Constant)]
        if not remaining:
            return Constant(not absorbing)
        if len(remaining) == 1:
            return remaining[0]
        return Gate(gate.kind, _unique(remaining))

    def evaluate(self, formula: Node, model: Sequence[bool]) -> bool:
        """Truth value of the formula under the model."""
        return formula.evaluate(model)

    def clear_cache(self) -> None:
        """Forget every cached simplification."""
        LogicBuilder._simplified.clear()
"""Formula nodes: constants, variables and AND/OR gates."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

_MASK64 = (1 << 64) - 1


class GateType(enum.Enum):
    """Kind of a gate."""

    AND = "AND"
    OR = "OR"


class Node(ABC):
    """A node of a propositional formula."""

    __slots__ = ()

    @abstractmethod
    def arity(self) -> int:
        """Number of inputs of the node."""

    @abstractmethod
    def evaluate(self, model: Sequence[bool]) -> bool:
        """Truth value of the node under the given model."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


class Constant(Node):
    """The constant True or False."""

    __slots__ = ("value",)

    def __init__(self, value: bool) -> None:
        self.value = bool(value)

    def arity(self) -> int:
        return 0

    def evaluate(self, model: Sequence[bool]) -> bool:
        return self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Constant):
            return self.value == other.value
        if isinstance(other, Node):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return 1 if self.value else 0

    def __str__(self) -> str:
        return "True" if self.value else "False"


class Variable(Node):
    """A literal: a positive or negated variable, numbered from 1."""

    __slots__ = ("literal",)

    def __init__(self, literal: int) -> None:
        self.literal = literal

    def arity(self) -> int:
        return 1

    def evaluate(self, model: Sequence[bool]) -> bool:
        index = abs(self.literal) - 1
        if 0 <= index < len(model):
            value = bool(model[index])
            return value if self.literal > 0 else not value
        return False

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Variable):
            return self.literal == other.literal
        if isinstance(other, Node):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return (hash(self.literal) * 31) & _MASK64

    def __str__(self) -> str:
        return f"x{self.literal}"


class Gate(Node):
    """An AND or OR gate over an ordered list of children."""

    __slots__ = ("kind", "children")

    def __init__(self, kind: GateType, children: Iterable[Node]) -> None:
        self.kind = kind
        self.children: list[Node] = list(children)

    def arity(self) -> int:
        return len(self.children)

    def evaluate(self, model: Sequence[bool]) -> bool:
        if self.kind is GateType.AND:
            return all(child.evaluate(model) for child in self.children)
        return any(child.evaluate(model) for child in self.children)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Gate):
            return self.kind is other.kind and self.children == other.children
        if isinstance(other, Node):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        value = 17 if self.kind is GateType.AND else 23
        for child in self.children:
            value = (value * 31 + hash(child)) & _MASK64
        return value

    def __str__(self) -> str:
        inner = ", ".join(str(child) for child in self.children)
        return f"{self.kind.value}[{inner}]"
"""Type expressions: functions, tuples, type variables and the two base types."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import total_ordering
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from typeunify.core.rules import RuleExpr


@total_ordering
class TypeExpr:
    """Base class for type expressions.

    Variants are frozen dataclasses, so rewriting operations return a new tree
    rather than mutating the receiver. Ordering is total across variants:
    Function < Tuple < Var < Bool < Int, then by payload.
    """

    def needs_wrapping(self) -> bool:
        """Whether the expression needs parentheses when used as an operand."""
        return False

    def replace_var(self, from_: int, to: int) -> TypeExpr:
        """Return a copy with every `Var(from_)` renamed to `Var(to)`."""
        raise NotImplementedError

    def all_vars(self) -> set[int]:
        """Return the set of variable ids appearing anywhere in the expression."""
        raise NotImplementedError

    def to_mathjax(self) -> str:
        raise NotImplementedError

    def sort_key(self) -> tuple[Any, ...]:
        raise NotImplementedError

    def compare_types(self, other: TypeExpr) -> list[RuleExpr]:
        """Unify with `other`, returning the constraints that make both equal.

        Raises:
            TypeMismatch: If the two expressions can never be equal
        """
        from typeunify.core.unify import compare_types

        return compare_types(self, other)

    def substitute_constraint(
        self,
        rules: Sequence[RuleExpr],
        on_step: Callable[[RuleExpr, TypeExpr, TypeExpr], None] | None = None,
    ) -> tuple[TypeExpr, RuleExpr | None]:
        """Rewrite the first variable that has a rule, see `unify.substitute_constraint`."""
        from typeunify.core.unify import substitute_constraint

        return substitute_constraint(self, rules, on_step)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TypeExpr):
            return NotImplemented
        return self.sort_key() < other.sort_key()


def _wrapped(t: TypeExpr, text: str) -> str:
    return f"({text})" if t.needs_wrapping() else text


@dataclass(frozen=True)
class Function(TypeExpr):
    """Function type: left -> right."""

    left: TypeExpr
    right: TypeExpr

    def __str__(self) -> str:
        # -> is right associative, only the left operand may need parentheses
        return f"{_wrapped(self.left, str(self.left))} -> {self.right}"

    def to_mathjax(self) -> str:
        return f"{_wrapped(self.left, self.left.to_mathjax())} \\to {self.right.to_mathjax()}"

    def needs_wrapping(self) -> bool:
        return True

    def replace_var(self, from_: int, to: int) -> TypeExpr:
        return Function(self.left.replace_var(from_, to), self.right.replace_var(from_, to))

    def all_vars(self) -> set[int]:
        return self.left.all_vars() | self.right.all_vars()

    def sort_key(self) -> tuple[Any, ...]:
        return (0, self.left.sort_key(), self.right.sort_key())


@dataclass(frozen=True)
class Tuple(TypeExpr):
    """Pair type: (left, right)."""

    left: TypeExpr
    right: TypeExpr

    def __str__(self) -> str:
        return f"({_wrapped(self.left, str(self.left))}, {_wrapped(self.right, str(self.right))})"

    def to_mathjax(self) -> str:
        left = _wrapped(self.left, self.left.to_mathjax())
        right = _wrapped(self.right, self.right.to_mathjax())
        return f"({left}, {right})"

    def replace_var(self, from_: int, to: int) -> TypeExpr:
        return Tuple(self.left.replace_var(from_, to), self.right.replace_var(from_, to))

    def all_vars(self) -> set[int]:
        return self.left.all_vars() | self.right.all_vars()

    def sort_key(self) -> tuple[Any, ...]:
        return (1, self.left.sort_key(), self.right.sort_key())


@dataclass(frozen=True)
class Var(TypeExpr):
    """Type variable `t<id>`."""

    id: int

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id < 0:
            raise ValueError(f"Variable id must be a non-negative integer, got {self.id!r}")

    def __str__(self) -> str:
        return f"t{self.id}"

    def to_mathjax(self) -> str:
        return f"t_{{{self.id}}}"

    def replace_var(self, from_: int, to: int) -> TypeExpr:
        if self.id == from_:
            return Var(to)
        return self

    def all_vars(self) -> set[int]:
        return {self.id}

    def sort_key(self) -> tuple[Any, ...]:
        return (2, self.id)


@dataclass(frozen=True)
class Bool(TypeExpr):
    """Boolean base type."""

    def __str__(self) -> str:
        return "Bool"

    def to_mathjax(self) -> str:
        return "Bool"

    def replace_var(self, from_: int, to: int) -> TypeExpr:
        return self

    def all_vars(self) -> set[int]:
        return set()

    def sort_key(self) -> tuple[Any, ...]:
        return (3,)


@dataclass(frozen=True)
class Int(TypeExpr):
    """Integer base type."""

    def __str__(self) -> str:
        return "Int"

    def to_mathjax(self) -> str:
        return "Int"

    def replace_var(self, from_: int, to: int) -> TypeExpr:
        return self

    def all_vars(self) -> set[int]:
        return set()

    def sort_key(self) -> tuple[Any, ...]:
        return (4,)


BOOL = Bool()
INT = Int()


def var(id: int) -> Var:
    return Var(id)


def fn(left: TypeExpr, right: TypeExpr) -> Function:
    return Function(left, right)


def tup(left: TypeExpr, right: TypeExpr) -> Tuple:
    return Tuple(left, right)

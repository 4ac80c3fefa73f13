"""Rules (`t<var> = rhs`) and aggregate queries over rule sets."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from typeunify.core.types import TypeExpr, Var


@runtime_checkable
class RuleInfo(Protocol):
    """Anything that can report the variables on either side of its rules."""

    def all_vars_lhs(self) -> set[int]:
        """All variables used on the left hand side."""
        ...

    def all_vars_rhs(self) -> set[int]:
        """All variables used on the right hand side."""
        ...


@dataclass(order=True)
class RuleExpr:
    """A single constraint: variable `var` must equal `rhs`.

    Rules are mutable; renaming and substitution rewrite them in place.
    """

    var: int
    rhs: TypeExpr

    def __str__(self) -> str:
        return f"t{self.var} = {self.rhs}"

    def to_mathjax(self) -> str:
        return f"t_{{{self.var}}} = {self.rhs.to_mathjax()}"

    def copy(self) -> RuleExpr:
        return RuleExpr(self.var, self.rhs)

    def is_simple(self) -> tuple[int, int] | None:
        """Return `(var, other)` if the rule has the form `t<var> = t<other>`."""
        if isinstance(self.rhs, Var):
            return (self.var, self.rhs.id)
        return None

    def replace_var(self, from_: int, to: int) -> None:
        """Rename `from_` to `to` on both sides of the rule."""
        if self.var == from_:
            self.var = to
        self.rhs = self.rhs.replace_var(from_, to)

    def substitute_constraint(
        self,
        rules: Sequence[RuleExpr],
        on_step: Callable[[RuleExpr, TypeExpr, TypeExpr], None] | None = None,
    ) -> RuleExpr | None:
        """Substitute the first variable of `rhs` that has a rule, in place.

        The left hand side variable is never substituted.
        """
        self.rhs, fired = self.rhs.substitute_constraint(rules, on_step)
        return fired

    def compare_rules(self, other: RuleExpr) -> list[RuleExpr]:
        """Unify the right hand sides of two rules; the lhs variables are ignored."""
        return self.rhs.compare_types(other.rhs)

    def has_same_lhs(self, other: RuleExpr) -> bool:
        return self.var == other.var

    def has_lhs(self, var: int) -> bool:
        return self.var == var

    def all_vars_lhs(self) -> set[int]:
        return {self.var}

    def all_vars_rhs(self) -> set[int]:
        return self.rhs.all_vars()


class RuleSet(list[RuleExpr]):
    """An ordered collection of rules; earlier rules take precedence."""

    def all_vars_lhs(self) -> set[int]:
        return all_vars_lhs(self)

    def all_vars_rhs(self) -> set[int]:
        return all_vars_rhs(self)

    def find(self, var: int) -> RuleExpr | None:
        return find_rule(self, var)

    def __str__(self) -> str:
        return "\n".join(str(r) for r in self)


def all_vars_lhs(rules: Iterable[RuleInfo]) -> set[int]:
    """Union of the left hand side variables of every rule."""
    result: set[int] = set()
    for r in rules:
        result |= r.all_vars_lhs()
    return result


def all_vars_rhs(rules: Iterable[RuleInfo]) -> set[int]:
    """Union of the variables appearing in every rule's right hand side."""
    result: set[int] = set()
    for r in rules:
        result |= r.all_vars_rhs()
    return result


def find_rule(rules: Iterable[RuleExpr], var: int) -> RuleExpr | None:
    """Return the first rule constraining `var`, or None."""
    for r in rules:
        if r.var == var:
            return r
    return None


def rule(var: int, rhs: TypeExpr) -> RuleExpr:
    return RuleExpr(var, rhs)

"""Unification by structural comparison, and single-step substitution."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import replace

from loguru import logger

from typeunify.core.errors import TypeMismatch
from typeunify.core.rules import RuleExpr, find_rule
from typeunify.core.types import Bool, Function, Int, Tuple, TypeExpr, Var

StepCallback = Callable[[RuleExpr, TypeExpr, TypeExpr], None]


def compare_types(left: TypeExpr, right: TypeExpr) -> list[RuleExpr]:
    """Compute the constraints under which `left` and `right` are equal.

    Matching constructors are compared child by child, left before right, and
    the resulting rules are concatenated in that order. A variable facing any
    other expression yields one rule binding the variable. Two distinct
    variables always produce `t<min> = t<max>`, so repeated comparisons of the
    same pair agree.

    No occurs check is performed.

    Args:
        left: First type
        right: Second type

    Returns:
        The new rules, possibly empty

    Raises:
        TypeMismatch: If the constructors are incompatible and neither side is a variable
    """
    match left, right:
        case Function(l1, r1), Function(l2, r2):
            return compare_types(l1, l2) + compare_types(r1, r2)

        case Tuple(l1, r1), Tuple(l2, r2):
            return compare_types(l1, l2) + compare_types(r1, r2)

        case Var(x), Var(c):
            if x < c:
                return [RuleExpr(x, Var(c))]
            if c < x:
                return [RuleExpr(c, Var(x))]
            return []

        case Var(x), _:
            return [RuleExpr(x, right)]

        case _, Var(x):
            return [RuleExpr(x, left)]

        case (Bool(), Bool()) | (Int(), Int()):
            return []

        case _:
            logger.debug("unify.mismatch left={} right={}", left, right)
            raise TypeMismatch(left, right)


def unify_all(pairs: Iterable[tuple[TypeExpr, TypeExpr]]) -> list[RuleExpr]:
    """Compare every pair in order and concatenate the resulting rules."""
    rules: list[RuleExpr] = []
    for left, right in pairs:
        rules.extend(compare_types(left, right))
    return rules


def substitute_constraint(
    expr: TypeExpr,
    rules: Sequence[RuleExpr],
    on_step: StepCallback | None = None,
) -> tuple[TypeExpr, RuleExpr | None]:
    """Perform at most one substitution in `expr`.

    The tree is walked depth first with the left child before the right one.
    The first variable that is the left hand side of some rule (earliest rule
    wins) is replaced by that rule's right hand side, and the walk stops.

    Args:
        expr: Expression to rewrite
        rules: Rules to pick from, in priority order
        on_step: Called as `on_step(rule, replaced_var, replacement)` when a rule fires

    Returns:
        `(new_expr, rule)` where rule is a copy of the rule that fired, or
        `(expr, None)` when no variable could be substituted
    """
    match expr:
        case Function(left, right) | Tuple(left, right):
            new_left, fired = substitute_constraint(left, rules, on_step)
            if fired is not None:
                return replace(expr, left=new_left), fired
            new_right, fired = substitute_constraint(right, rules, on_step)
            if fired is not None:
                return replace(expr, right=new_right), fired
            return expr, None

        case Var(x):
            found = find_rule(rules, x)
            if found is None:
                return expr, None
            logger.debug("substitute.step rule={} var={}", found, expr)
            if on_step is not None:
                on_step(found, expr, found.rhs)
            return found.rhs, found.copy()

        case Bool() | Int():
            return expr, None

        case _:
            raise TypeError(f"Unknown type: {expr!r}")

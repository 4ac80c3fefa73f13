"""Step-by-step solving driven on top of the core engine.

The core only offers single-step primitives; `Stepper` owns the rule set,
the iteration and the termination policy, and keeps a history of every
substitution so a front end can replay the elimination one step at a time.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from loguru import logger

from typeunify.config.settings import load_settings
from typeunify.core.errors import StepLimitExceeded
from typeunify.core.rules import RuleExpr, RuleSet
from typeunify.core.types import TypeExpr
from typeunify.core.unify import compare_types, substitute_constraint


@dataclass(frozen=True)
class Step:
    """One substitution: `rule` rewrote `before` into `after`."""

    rule: RuleExpr
    before: TypeExpr
    after: TypeExpr

    def __str__(self) -> str:
        return f"[{self.rule}] {self.before} => {self.after}"


class Stepper:
    """Accumulates rules and applies them one substitution at a time."""

    def __init__(
        self,
        rules: Iterable[RuleExpr] | None = None,
        *,
        max_steps: int | None = None,
        on_step: Callable[[Step], None] | None = None,
    ) -> None:
        self.rules = RuleSet(r.copy() for r in rules or [])
        self.max_steps = max_steps if max_steps is not None else load_settings().max_steps
        self.on_step = on_step
        self.history: list[Step] = []

    def add_constraint(self, left: TypeExpr, right: TypeExpr) -> list[RuleExpr]:
        """Unify `left` with `right` and append the resulting rules.

        Raises:
            TypeMismatch: If the types cannot be unified; the rule set is left unchanged
        """
        new_rules = compare_types(left, right)
        self.rules.extend(new_rules)
        logger.debug("stepper.constraint left={} right={} new_rules={}", left, right, len(new_rules))
        return new_rules

    def step(self, expr: TypeExpr) -> tuple[TypeExpr, RuleExpr | None]:
        """Apply a single substitution to `expr`."""
        after, fired = substitute_constraint(expr, self.rules)
        if fired is None:
            return expr, None
        step = Step(fired, expr, after)
        self.history.append(step)
        logger.debug("stepper.step {}", step)
        if self.on_step is not None:
            self.on_step(step)
        return after, fired

    def is_resolved(self, expr: TypeExpr) -> bool:
        """True if no variable constrained by the rule set remains in `expr`."""
        return not (expr.all_vars() & self.rules.all_vars_lhs())

    def normalize(self, expr: TypeExpr) -> TypeExpr:
        """Substitute until no rule applies.

        Raises:
            StepLimitExceeded: If `max_steps` substitutions did not reach a fixpoint,
                e.g. for a rule set that mentions a variable in its own definition
        """
        for _ in range(self.max_steps):
            expr, fired = self.step(expr)
            if fired is None:
                return expr
        if self.is_resolved(expr):
            return expr
        logger.warning("stepper.limit max_steps={} expr={}", self.max_steps, expr)
        raise StepLimitExceeded(self.max_steps, expr)

    def unify_simple(self) -> list[tuple[int, int]]:
        """Merge the two variables of every simple rule into the smaller id.

        For a rule `t<x> = t<y>` as produced by `compare_types` (x < y), `y` is
        renamed to `x` throughout all other rules. Merging always towards the
        smaller id keeps later renames from undoing earlier ones.

        Returns:
            The `(from, to)` renames that were applied, in order
        """
        renames: list[tuple[int, int]] = []
        for r in list(self.rules):
            simple = r.is_simple()
            if simple is None:
                continue
            to, from_ = min(simple), max(simple)
            if from_ == to:
                continue
            for other in self.rules:
                if other is not r:
                    other.replace_var(from_, to)
            renames.append((from_, to))
            logger.debug("stepper.rename from={} to={}", from_, to)
        return renames

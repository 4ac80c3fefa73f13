"""Error types for the unification engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typeunify.core.types import TypeExpr


class UnifyError(Exception):
    """Base class for unification engine errors."""


class TypeMismatch(UnifyError):
    """Two type expressions can never be made equal.

    Raised at the innermost pair of incompatible constructors where neither
    side is a variable; the comparison is aborted as a whole.
    """

    def __init__(self, left: TypeExpr, right: TypeExpr):
        self.left = left
        self.right = right
        super().__init__(f"Cannot unify {left} with {right}")


class StepLimitExceeded(UnifyError):
    """Normalization did not reach a fixpoint within the allowed steps."""

    def __init__(self, max_steps: int, expr: TypeExpr):
        self.max_steps = max_steps
        self.expr = expr
        super().__init__(f"No fixpoint after {max_steps} substitution steps, last expression: {expr}")

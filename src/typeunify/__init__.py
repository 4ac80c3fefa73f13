"""Structural unification engine for a small type language."""

from loguru import logger

from typeunify.core import (
    BOOL,
    INT,
    Bool,
    Function,
    Int,
    RuleExpr,
    RuleSet,
    StepLimitExceeded,
    Tuple,
    TypeExpr,
    TypeMismatch,
    UnifyError,
    Var,
    compare_types,
    fn,
    rule,
    substitute_constraint,
    tup,
    unify_all,
    var,
)
from typeunify.solver import Step, Stepper

__version__ = "0.1.0"

# Sinks are attached by logging_utils.configure_logging.
logger.disable("typeunify")

__all__ = [
    "BOOL",
    "INT",
    "Bool",
    "Function",
    "Int",
    "RuleExpr",
    "RuleSet",
    "Step",
    "StepLimitExceeded",
    "Stepper",
    "Tuple",
    "TypeExpr",
    "TypeMismatch",
    "UnifyError",
    "Var",
    "compare_types",
    "fn",
    "rule",
    "substitute_constraint",
    "tup",
    "unify_all",
    "var",
]

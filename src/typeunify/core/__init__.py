"""Core engine: type expressions, rules, unification and substitution."""

from typeunify.core.errors import StepLimitExceeded, TypeMismatch, UnifyError
from typeunify.core.rules import (
    RuleExpr,
    RuleInfo,
    RuleSet,
    all_vars_lhs,
    all_vars_rhs,
    find_rule,
    rule,
)
from typeunify.core.types import (
    BOOL,
    INT,
    Bool,
    Function,
    Int,
    Tuple,
    TypeExpr,
    Var,
    fn,
    tup,
    var,
)
from typeunify.core.unify import compare_types, substitute_constraint, unify_all

__all__ = [
    # Types
    "TypeExpr",
    "Function",
    "Tuple",
    "Var",
    "Bool",
    "Int",
    "BOOL",
    "INT",
    "fn",
    "tup",
    "var",
    # Rules
    "RuleExpr",
    "RuleInfo",
    "RuleSet",
    "all_vars_lhs",
    "all_vars_rhs",
    "find_rule",
    "rule",
    # Unification
    "compare_types",
    "substitute_constraint",
    "unify_all",
    # Errors
    "UnifyError",
    "TypeMismatch",
    "StepLimitExceeded",
]

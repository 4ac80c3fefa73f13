"""Test configuration and shared fixtures."""

import pytest

from typeunify.core.rules import RuleExpr, RuleSet
from typeunify.core.types import BOOL, INT, Function, Tuple, Var


@pytest.fixture
def base_rules() -> RuleSet:
    """Rules binding t0 to Bool and t1 to Int."""
    return RuleSet([RuleExpr(0, BOOL), RuleExpr(1, INT)])


@pytest.fixture
def chained_rules() -> RuleSet:
    """t0 = (t1, t2), t1 = t2 -> Bool, t2 = Int."""
    return RuleSet(
        [
            RuleExpr(0, Tuple(Var(1), Var(2))),
            RuleExpr(1, Function(Var(2), BOOL)),
            RuleExpr(2, INT),
        ]
    )


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep TYPEUNIFY_* variables and .env files from leaking into tests."""
    monkeypatch.chdir(tmp_path)
    for name in ("TYPEUNIFY_MAX_STEPS", "TYPEUNIFY_MATHJAX", "TYPEUNIFY_LOG_PROFILE", "TYPEUNIFY_LOG_FILTER"):
        monkeypatch.delenv(name, raising=False)

"""Tests for type expressions."""

import pytest

from typeunify.core.types import BOOL, INT, Bool, Function, Int, Tuple, Var, fn, tup, var


class TestVar:
    """Tests for Var."""

    def test_str(self):
        assert str(Var(3)) == "t3"

    def test_mathjax(self):
        assert Var(12).to_mathjax() == "t_{12}"

    def test_all_vars(self):
        assert Var(4).all_vars() == {4}

    def test_replace_matching(self):
        assert Var(1).replace_var(1, 7) == Var(7)

    def test_replace_non_matching(self):
        t = Var(2)
        assert t.replace_var(1, 7) is t

    @pytest.mark.parametrize("bad", [-1, 1.0, "1", True])
    def test_rejects_invalid_id(self, bad):
        with pytest.raises(ValueError):
            Var(bad)


class TestBaseTypes:
    """Tests for Bool and Int."""

    def test_str(self):
        assert str(BOOL) == "Bool"
        assert str(INT) == "Int"
        assert BOOL.to_mathjax() == "Bool"
        assert INT.to_mathjax() == "Int"

    def test_no_vars(self):
        assert BOOL.all_vars() == set()
        assert INT.all_vars() == set()

    def test_replace_is_noop(self):
        assert BOOL.replace_var(0, 1) == Bool()
        assert INT.replace_var(0, 1) == Int()

    def test_equality(self):
        assert Bool() == BOOL
        assert Bool() != Int()


class TestNeedsWrapping:
    """Only functions need parentheses as operands."""

    def test_function(self):
        assert Function(Var(0), Var(1)).needs_wrapping() is True

    @pytest.mark.parametrize("t", [Tuple(Var(0), Var(1)), Var(0), BOOL, INT])
    def test_others(self, t):
        assert t.needs_wrapping() is False

    def test_not_recursive(self):
        """A tuple holding a function still does not need wrapping."""
        assert Tuple(Function(Var(0), INT), INT).needs_wrapping() is False


class TestDisplay:
    """Tests for plain and typeset rendering."""

    def test_function_simple(self):
        assert str(Function(Var(0), Var(1))) == "t0 -> t1"

    def test_function_right_associative(self):
        t = Function(Var(0), Function(Var(1), Var(2)))
        assert str(t) == "t0 -> t1 -> t2"

    def test_function_left_operand_wrapped(self):
        t = Function(Function(Var(0), Var(1)), INT)
        assert str(t) == "(t0 -> t1) -> Int"

    def test_tuple_operand_not_wrapped(self):
        t = Function(Tuple(Var(0), INT), BOOL)
        assert str(t) == "(t0, Int) -> Bool"

    def test_tuple_wraps_functions(self):
        t = Tuple(Function(Var(0), BOOL), Function(INT, Var(1)))
        assert str(t) == "((t0 -> Bool), (Int -> t1))"

    def test_nested_tuple(self):
        assert str(Tuple(Tuple(BOOL, INT), Var(5))) == "((Bool, Int), t5)"

    def test_mathjax_matches_plain_shape(self):
        t = Function(Function(Var(0), Var(1)), Tuple(Function(INT, BOOL), Var(2)))
        assert str(t) == "(t0 -> t1) -> ((Int -> Bool), t2)"
        assert t.to_mathjax() == "(t_{0} \\to t_{1}) \\to ((Int \\to Bool), t_{2})"


class TestReplaceVar:
    """Tests for renaming variables."""

    def test_total(self):
        t = Tuple(Var(3), Function(Var(3), INT))
        assert t.replace_var(3, 9) == Tuple(Var(9), Function(Var(9), INT))

    def test_other_vars_untouched(self):
        t = Function(Var(1), Tuple(Var(2), BOOL))
        assert t.replace_var(1, 4) == Function(Var(4), Tuple(Var(2), BOOL))

    def test_original_unchanged(self):
        t = Function(Var(1), Var(1))
        t.replace_var(1, 2)
        assert t == Function(Var(1), Var(1))


class TestAllVars:
    """Tests for variable collection."""

    def test_distinct(self):
        t = Function(Tuple(Var(0), Var(1)), Function(Var(1), Var(0)))
        assert t.all_vars() == {0, 1}

    def test_ground(self):
        assert Function(INT, Tuple(BOOL, INT)).all_vars() == set()


class TestOrdering:
    """Tests for equality, hashing and the total order."""

    def test_structural_equality(self):
        assert Function(Var(0), INT) == Function(Var(0), INT)
        assert Function(Var(0), INT) != Tuple(Var(0), INT)
        assert Function(Var(0), INT) != Function(Var(1), INT)

    def test_hashable(self):
        assert len({Var(0), Var(0), Function(Var(0), INT), Function(Var(0), INT)}) == 2

    def test_variant_order(self):
        values = [INT, BOOL, Var(0), Tuple(INT, INT), Function(INT, INT)]
        assert sorted(values) == [Function(INT, INT), Tuple(INT, INT), Var(0), BOOL, INT]

    def test_payload_order(self):
        assert Var(1) < Var(2)
        assert Function(Var(0), INT) < Function(Var(1), BOOL)
        assert Function(Var(0), Var(0)) < Function(Var(0), BOOL)
        assert Var(3) <= Var(3)
        assert INT > BOOL

    def test_not_comparable_with_other_objects(self):
        with pytest.raises(TypeError):
            _ = Var(0) < 0


class TestBuilders:
    """Tests for the constructor helpers."""

    def test_helpers(self):
        assert fn(var(0), tup(BOOL, INT)) == Function(Var(0), Tuple(Bool(), Int()))

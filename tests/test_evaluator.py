"""
Tests for expression and statement evaluation.
"""

import pytest

from while_interpreter import (
    Assign, BinaryOp, BoolVal, Bop, EvalError, If, IntVal, Literal, Sequence,
    Skip, Store, UnboundVariableError, Var, While, evaluate, execute, sequence,
)


def num(n):
    return Literal(IntVal(n))


def op(bop, left, right):
    return BinaryOp(bop, left, right)


class TestExpressions:

    def test_literal(self):
        assert evaluate(Store(), num(3)) == IntVal(3)
        assert evaluate(Store(), Literal(BoolVal(True))) == BoolVal(True)

    def test_literal_wraps_plain_values(self):
        assert Literal(5) == num(5)
        assert Literal(True).value == BoolVal(True)
        assert Literal(0).value == IntVal(0)
        assert execute(Store(), If(Literal(0), Assign("X", Literal(1)), Skip())).to_dict() == \
            {"X": IntVal(1)}

    @pytest.mark.parametrize("value", ["5", 2.5, None])
    def test_literal_rejects_other_values(self, value):
        with pytest.raises(TypeError, match="integer or boolean"):
            Literal(value)

    def test_variable(self):
        store = Store().update("X", IntVal(4))
        assert evaluate(store, Var("X")) == IntVal(4)

    def test_unbound_variable(self):
        with pytest.raises(UnboundVariableError):
            evaluate(Store(), Var("X"))

    @pytest.mark.parametrize("bop,a,b,expected", [
        (Bop.PLUS, 2, 3, IntVal(5)),
        (Bop.MINUS, 2, 3, IntVal(-1)),
        (Bop.TIMES, 4, 3, IntVal(12)),
        (Bop.DIVIDE, 7, 2, IntVal(3)),
        (Bop.GT, 3, 2, BoolVal(True)),
        (Bop.GE, 2, 2, BoolVal(True)),
        (Bop.LT, 3, 2, BoolVal(False)),
        (Bop.LE, 3, 2, BoolVal(False)),
    ])
    def test_operator_table(self, bop, a, b, expected):
        assert evaluate(Store(), op(bop, num(a), num(b))) == expected

    @pytest.mark.parametrize("a,b,expected", [
        (-7, 2, -3),
        (7, -2, -3),
        (-7, -2, 3),
        (6, 3, 2),
    ])
    def test_division_truncates_toward_zero(self, a, b, expected):
        assert evaluate(Store(), op(Bop.DIVIDE, num(a), num(b))) == IntVal(expected)

    def test_division_by_zero(self):
        expr = op(Bop.DIVIDE, num(1), num(0))
        with pytest.raises(EvalError, match="division by zero") as exc:
            evaluate(Store(), expr)
        assert exc.value.expression == expr

    def test_boolean_operand_rejected(self):
        expr = op(Bop.PLUS, Literal(BoolVal(True)), num(1))
        with pytest.raises(EvalError, match="expects integer operands"):
            evaluate(Store(), expr)

    def test_comparison_result_is_not_arithmetic(self):
        expr = op(Bop.PLUS, op(Bop.GT, num(1), num(0)), num(1))
        with pytest.raises(EvalError):
            evaluate(Store(), expr)

    def test_innermost_expression_is_reported(self):
        inner = op(Bop.DIVIDE, num(1), num(0))
        with pytest.raises(EvalError) as exc:
            evaluate(Store(), op(Bop.PLUS, num(1), inner))
        assert exc.value.expression == inner

    def test_left_operand_evaluated_first(self):
        expr = op(Bop.PLUS, Var("X"), op(Bop.DIVIDE, num(1), num(0)))
        with pytest.raises(UnboundVariableError):
            evaluate(Store(), expr)


class TestStatements:

    def test_skip_returns_same_store(self):
        store = Store().update("X", IntVal(1))
        assert execute(store, Skip()) is store

    def test_assign(self):
        assert execute(Store(), Assign("X", num(5))).to_dict() == {"X": IntVal(5)}

    def test_execute_does_not_touch_input_store(self):
        store = Store().update("X", IntVal(1))
        execute(store, Assign("X", num(2)))
        assert store.lookup("X") == IntVal(1)

    @pytest.mark.parametrize("cond,expected", [
        (num(0), 1),
        (num(3), 2),
        (Literal(BoolVal(True)), 1),
        (Literal(BoolVal(False)), 2),
    ])
    def test_if_condition_truth(self, cond, expected):
        stmt = If(cond, Assign("Z", num(1)), Assign("Z", num(2)))
        assert execute(Store(), stmt).lookup("Z") == IntVal(expected)

    def test_while_false_never_runs_body(self):
        stmt = While(Literal(BoolVal(False)), Assign("Z", Var("UNBOUND")))
        assert execute(Store(), stmt) == Store()

    def test_while_zero_test_counts_up_to_zero(self):
        # loop while X equals zero: runs exactly once
        stmt = sequence(
            Assign("X", num(0)),
            Assign("N", num(0)),
            While(Var("X"), sequence(
                Assign("N", op(Bop.PLUS, Var("N"), num(1))),
                Assign("X", num(1)),
            )),
        )
        assert execute(Store(), stmt).to_dict() == {"X": IntVal(1), "N": IntVal(1)}

    def test_long_loop_does_not_recurse(self):
        stmt = sequence(
            Assign("N", num(5000)),
            While(op(Bop.GT, Var("N"), num(0)),
                  Assign("N", op(Bop.MINUS, Var("N"), num(1)))),
        )
        assert execute(Store(), stmt).lookup("N") == IntVal(0)

    def test_sequence_threads_store(self):
        stmt = Sequence(Assign("X", num(2)), Assign("Y", op(Bop.TIMES, Var("X"), Var("X"))))
        assert execute(Store(), stmt).lookup("Y") == IntVal(4)

    def test_sequence_associativity(self):
        a = Assign("X", num(1))
        b = Assign("X", op(Bop.PLUS, Var("X"), num(10)))
        c = Assign("Y", op(Bop.TIMES, Var("X"), num(2)))
        start = Store().update("Z", IntVal(0))
        left = execute(start, Sequence(Sequence(a, b), c))
        right = execute(start, Sequence(a, Sequence(b, c)))
        assert left == right
        assert right.to_dict() == {"X": IntVal(11), "Y": IntVal(22), "Z": IntVal(0)}

    def test_error_carries_innermost_statement(self):
        failing = Assign("Y", op(Bop.DIVIDE, Var("X"), num(0)))
        stmt = sequence(
            Assign("X", num(1)),
            While(op(Bop.GT, Var("X"), num(0)), sequence(failing, Assign("X", num(0)))),
        )
        with pytest.raises(EvalError) as exc:
            execute(Store(), stmt)
        assert exc.value.statement == failing
        assert "while running 'Y := X / 0'" in str(exc.value)

    def test_error_in_condition_reports_the_if(self):
        stmt = If(op(Bop.LT, Literal(BoolVal(True)), num(1)), Skip(), Skip())
        with pytest.raises(EvalError) as exc:
            execute(Store(), stmt)
        assert exc.value.statement == stmt

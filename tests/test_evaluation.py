import pytest

from lispy.types import Number, Double, Symbol, Error, SExpr
from lispy.evaluation.evaluator import evaluate, evaluate_sexpr
from lispy.builtins import builtin_op

# -----------------------------------------------------
# Self-evaluating values
# -----------------------------------------------------

@pytest.mark.parametrize(
    "value",
    [Number(1), Double(3.14), Symbol("+"), Error("boom")]
)
def test_atoms_evaluate_to_themselves(value):
    assert evaluate(value) is value


def test_empty_list_is_a_fixed_point():
    v = SExpr()
    result = evaluate(v)
    assert result is v
    assert result == SExpr()


@pytest.mark.parametrize(
    "value",
    [Number(4), Double(2.5), Symbol("*"), Error("boom")]
)
def test_single_element_unwraps(value):
    assert evaluate(SExpr([value])) == evaluate(value)


def test_single_nested_list_unwraps():
    inner = SExpr([Symbol("+"), Number(1), Number(2)])
    assert evaluate(SExpr([SExpr([inner])])) == Number(3)


def test_nested_empty_list():
    assert evaluate(SExpr([SExpr()])) == SExpr()

# -----------------------------------------------------
# Errors
# -----------------------------------------------------

def test_head_must_be_symbol(run):
    assert run("(5 1 2)") == Error("S-expression Does not start with symbol!")
    assert run("((+ 1 2) 3)") == Error("S-expression Does not start with symbol!")


def test_undefined_symbol_is_not_a_number():
    expr = SExpr([Symbol("+"), Number(1), Symbol("foo")])
    assert evaluate(expr) == Error("Cannot operate on non-number!")


def test_list_operand_is_not_a_number(run):
    assert run("(+ 1 ())") == Error("Cannot operate on non-number!")


def test_error_propagates_out_of_nested_list(run):
    assert run("(+ 1 (/ 1 0) 2)") == Error("Division By Zero!")
    assert run("(* 2 (+ 1 (- 3 (/ 4 0))))") == Error("Division By Zero!")


def test_first_error_wins():
    expr = SExpr([Symbol("+"), Error("first"), Number(1), Error("second")])
    assert evaluate(expr) == Error("first")


def test_error_found_after_siblings_evaluated():
    later = SExpr([Symbol("/"), Number(1), Number(0)])
    expr = SExpr([SExpr([Symbol("+"), Number(1), Number(1)]), later])
    assert evaluate(expr) == Error("Division By Zero!")


def test_unknown_operator():
    expr = SExpr([Symbol("max"), Number(1), Number(2)])
    assert evaluate(expr) == Error("Unknown operator 'max'!")

# -----------------------------------------------------
# Ownership: evaluated lists give up their children
# -----------------------------------------------------

def test_take_releases_remaining_children():
    v = SExpr([Number(1), Number(2), Number(3)])
    x = v.take(1)
    assert x == Number(2)
    assert len(v) == 0


def test_pop_removes_child():
    v = SExpr([Symbol("-"), Number(2)])
    assert v.pop(0) == Symbol("-")
    assert v.cells == [Number(2)]


def test_evaluated_list_is_consumed():
    v = SExpr([Symbol("+"), Number(1), Number(2)])
    assert evaluate_sexpr(v) == Number(3)
    assert len(v) == 0


def test_error_list_is_consumed():
    v = SExpr([Number(1), Error("bad"), Number(2)])
    assert evaluate_sexpr(v) == Error("bad")
    assert len(v) == 0


def test_non_symbol_head_list_is_consumed():
    v = SExpr([Number(1), Number(2)])
    evaluate_sexpr(v)
    assert len(v) == 0


def test_builtin_op_stops_at_division_by_zero():
    operands = SExpr([Number(10), Number(0), Number(5)])
    assert builtin_op(operands, "/") == Error("Division By Zero!")
    assert len(operands) == 0


def test_builtin_op_without_operands():
    assert builtin_op(SExpr(), "+") == Error("No operands given!")


def test_constructor_copies_sequence():
    cells = [Number(1)]
    v = SExpr(cells)
    v.add(Number(2))
    assert cells == [Number(1)]

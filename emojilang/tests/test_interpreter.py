"""
Tests for evaluation: arithmetic, comparisons, control flow and runtime errors.
"""
import io
import math

import pytest

from emojilang.exceptions import (
    EvaluationError,
    UndefinedVariableException,
    UnknownOpException,
)
from emojilang.interpreter import Interpreter, divide
from emojilang.nodes import BinaryOp, NumberLiteral, Print, VariableReference
from emojilang.operations import Op

from emojilang.tests.utils import (
    ASSIGN, IF, MINUS, PLUS, PRINT, PRINTER, SLASH, STAR, VS16, WHILE,
    output_lines, parse_source, run_source,
)


def evaluate(expression: str) -> float:
    """Evaluate a single expression and return its value."""
    stmt = parse_source(f"{PRINT} {expression}")[0]
    return Interpreter("<test>").eval_expr(stmt.value)


def test_assignment_then_print(capsys):
    """
    Assigning 5 stores 5.0 and printing it emits '5.0'.
    """
    interpreter = run_source(f"{ASSIGN} x == 5\n{PRINT} x\n")
    assert interpreter.vars == {"x": 5.0}
    assert output_lines(capsys) == ["5.0"]


@pytest.mark.parametrize("expression, expected", [
    (f"2 {PLUS} 3 {STAR} 4", 14.0),
    (f"2 {STAR} 3 {PLUS} 4", 10.0),
    (f"10 {MINUS} 3 {MINUS} 2", 5.0),
    (f"7 {SLASH} 2", 3.5),
    (f"(2 {PLUS} 3) {STAR} 4", 20.0),
    (f"3 {STAR}{VS16} 3", 9.0),
])
def test_arithmetic(expression, expected):
    """
    Arithmetic respects precedence and associativity and uses true division.
    """
    assert evaluate(expression) == expected


@pytest.mark.parametrize("expression, expected", [
    ("5 > 3", 1.0),
    ("5 < 3", 0.0),
    ("5 == 5", 1.0),
    ("5 != 5", 0.0),
    ("3 > 5", 0.0),
    ("3 != 5", 1.0),
])
def test_comparisons_yield_one_or_zero(expression, expected):
    """
    Comparisons produce exactly 1.0 or 0.0.
    """
    result = evaluate(expression)
    assert result == expected
    assert isinstance(result, float)


def test_division_by_zero_follows_ieee(capsys):
    """
    Dividing by zero produces infinities or NaN instead of raising.
    """
    run_source(f"{PRINT} 5 {SLASH} 0\n{PRINT} 0 {MINUS} 5 {SLASH} 0\n{PRINT} 0 {SLASH} 0\n")
    assert output_lines(capsys) == ["inf", "-inf", "nan"]


def test_divide_signed_zero():
    """
    The sign of a zero divisor decides the sign of the infinity.
    """
    assert divide(1.0, -0.0) == -math.inf
    assert divide(-1.0, -0.0) == math.inf
    assert math.isnan(divide(math.nan, 0.0))
    assert divide(9.0, 3.0) == 3.0


def test_while_loop_counts_down(capsys):
    """
    A decrementing counter stops the loop after the expected iterations.
    """
    source = (
        f"{ASSIGN} n == 3\n"
        f"{ASSIGN} steps == 0\n"
        f"{WHILE} n > 0 {{\n"
        f"    {ASSIGN} n == n {MINUS} 1\n"
        f"    {ASSIGN} steps == steps {PLUS} 1\n"
        f"}}\n"
    )
    interpreter = run_source(source)
    assert interpreter.vars == {"n": 0.0, "steps": 3.0}
    assert output_lines(capsys) == []


def test_end_to_end_loop(capsys):
    """
    Counting from 1 while below 5 prints 1.0 to 4.0 and leaves x at 5.0.
    """
    source = (
        f"{ASSIGN} x == 1;\n"
        f"{WHILE} x < 5 {{ {PRINT} x; {ASSIGN} x == x {PLUS} 1 }}\n"
    )
    interpreter = run_source(source)
    assert output_lines(capsys) == ["1.0", "2.0", "3.0", "4.0"]
    assert interpreter.vars["x"] == 5.0


def test_if_else_branches(capsys):
    """
    Non-zero conditions take the then branch, zero takes the else branch.
    """
    source = (
        f"{IF} 1 {{ {PRINT} 1 }} else {{ {PRINT} 2 }}\n"
        f"{IF} 0 {{ {PRINT} 3 }} else {{ {PRINT} 4 }}\n"
        f"{IF} 0 {PRINT} 5\n"
        f"{IF} 2 {PRINTER}{VS16} 6\n"
    )
    run_source(source)
    assert output_lines(capsys) == ["1.0", "4.0", "6.0"]


def test_blocks_share_the_environment(capsys):
    """
    Assignments inside blocks are visible afterwards.
    """
    interpreter = run_source(f"{{ {ASSIGN} inner == 2 }} {PRINT} inner {STAR} 2")
    assert interpreter.vars == {"inner": 2.0}
    assert output_lines(capsys) == ["4.0"]


def test_bare_expression_is_printed(capsys):
    """
    Bare expressions display their value.
    """
    run_source(f"1 {PLUS} 1")
    assert output_lines(capsys) == ["2.0"]


def test_reassignment_overwrites():
    """
    Assigning an existing name replaces its value.
    """
    interpreter = run_source(f"{ASSIGN} a == 1 {ASSIGN} a == a {PLUS} 41")
    assert interpreter.vars == {"a": 42.0}


def test_undefined_variable_stops_execution(capsys):
    """
    Reading an unassigned variable fails before any later output.
    """
    ast = parse_source(f"{PRINT} 1\n{PRINT} missing\n{PRINT} 2\n")
    interpreter = Interpreter("<test>")
    with pytest.raises(UndefinedVariableException) as excinfo:
        interpreter.execute(ast)
    assert excinfo.value.varname == "missing"
    assert excinfo.value.line == 2
    assert isinstance(excinfo.value, RuntimeError)
    assert output_lines(capsys) == ["1.0"]


def test_unknown_operator_is_rejected():
    """
    An operator outside the supported set fails with a runtime error.
    """
    node = BinaryOp(NumberLiteral(1.0), "pow", NumberLiteral(2.0))
    with pytest.raises(UnknownOpException) as excinfo:
        Interpreter("<test>").eval_expr(node)
    assert excinfo.value.op == "pow"


def test_unknown_statement_is_rejected():
    """
    Anything that is not a statement node fails with a runtime error.
    """
    with pytest.raises(EvaluationError):
        Interpreter("<test>").execute([VariableReference("x")])


def test_interpreters_do_not_share_state():
    """
    Each interpreter owns its own environment.
    """
    first = run_source(f"{ASSIGN} x == 1")
    second = Interpreter("<test>")
    assert "x" in first.vars
    assert second.vars == {}


def test_output_stream_and_supplied_environment():
    """
    Hosts may provide the environment and the output stream.
    """
    out = io.StringIO()
    env = {"y": 2.5}
    interpreter = Interpreter("<test>", env=env, output=out)
    interpreter.execute([Print(BinaryOp(VariableReference("y"), Op.MUL, NumberLiteral(2.0)))])
    assert out.getvalue() == "5.0\n"
    assert interpreter.vars is env


def test_long_sum_evaluates(capsys):
    """
    A sum of two thousand terms evaluates without exhausting the call stack.
    """
    run_source(f"{PRINT} " + f" {PLUS} ".join(["1"] * 2000))
    assert output_lines(capsys) == ["2000.0"]


def test_deep_right_nested_tree_evaluates():
    """
    Right-leaning trees far deeper than the call stack also evaluate.
    """
    node = NumberLiteral(0.0)
    for _ in range(5000):
        node = BinaryOp(NumberLiteral(1.0), Op.ADD, node)
    assert Interpreter("<test>").eval_expr(node) == 5000.0


def test_left_operand_is_evaluated_first():
    """
    With both operands undefined, the left one is reported.
    """
    with pytest.raises(UndefinedVariableException) as excinfo:
        evaluate(f"first {MINUS} second")
    assert excinfo.value.varname == "first"

"""Interpreter.

This is a tree-walk interpreter for evaluating AST nodes produced by the parser. It supports
arithmetic, comparisons, variables, conditionals, loops, and output statements.

1. Execution Model
The interpreter evaluates an abstract syntax tree (AST) top-down. Statements recurse through
nested bodies via `execute()`, while `eval_expr()` walks expressions with an explicit stack.
Both dispatch on the node class with structural pattern matching.

2. Environment
The interpreter owns a single flat dictionary `vars` mapping names to floats. Blocks,
conditionals and loops share it; there are no nested scopes. Each interpreter instance
has its own dictionary, so independent programs never see each other's variables.

3. Values
Every value is a float. Comparisons yield 1.0 or 0.0, and conditions treat 0.0 as false.
Division follows IEEE-754: dividing by zero produces an infinity or NaN instead of failing.

4. Output
A print statement writes the value's decimal representation as one line to `output`
(standard output unless the host supplies another stream).

5. Error Handling
Runtime errors, such as reading a variable that was never assigned or meeting an operator
the interpreter does not know, are raised as typed exceptions with line numbers and file
context. Execution stops at the first error.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math
from typing import Optional, TextIO

from emojilang.exceptions import (
    EvaluationError,
    UndefinedVariableException,
    UnknownOpException,
)
from emojilang.nodes import (
    BinaryOp,
    Block,
    If,
    NumberLiteral,
    Print,
    VariableAssignment,
    VariableReference,
    While,
    format_number,
)
from emojilang.operations import Op


def divide(lhs: float, rhs: float) -> float:
    """
    Divide with IEEE-754 semantics for a zero divisor.
    """
    if rhs == 0.0:
        if lhs == 0.0 or math.isnan(lhs):
            return math.nan
        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)
    return lhs / rhs


class Interpreter:
    """Tree-walk interpreter for Emoji Lang."""

    def __init__(
        self,
        file: str = "<stdin>",
        env: Optional[dict[str, float]] = None,
        output: Optional[TextIO] = None,
    ):
        """Initialize the interpreter."""
        self.vars = env if env is not None else {}
        self.file = file
        self.output = output

    def eval_expr(self, node) -> float:
        """
        Evaluate an expression node and return its computed value.

        Operands are evaluated left before right with an explicit work stack,
        so long operator chains and deep groupings never exhaust the call stack.

        Parameters:
            node: An expression node (NumberLiteral, VariableReference or BinaryOp).

        Returns:
            float: The evaluated result of the expression.

        Raises:
            UndefinedVariableException: If a variable is referenced that has not been assigned.
            UnknownOpException: If an unrecognized binary operator is encountered.
            EvaluationError: If the node is not an expression.
        """
        pending = [(node, False)]
        values: list[float] = []

        while pending:
            current, operands_done = pending.pop()
            match current:
                case NumberLiteral(value=value):
                    values.append(value)

                case VariableReference(name=name, line=line):
                    if name not in self.vars:
                        raise UndefinedVariableException(name, line or None, self.file)
                    values.append(self.vars[name])

                case BinaryOp(left=left, right=right) if not operands_done:
                    pending.append((current, True))
                    pending.append((right, False))
                    pending.append((left, False))

                case BinaryOp(op=op, line=line):
                    rhs = values.pop()
                    lhs = values.pop()
                    values.append(self.apply_op(op, lhs, rhs, line))

                case _:
                    raise EvaluationError(
                        f"Invalid expression node: {current!r}",
                        getattr(current, "line", None) or None,
                        self.file,
                    )

        return values.pop()

    def apply_op(self, op, lhs: float, rhs: float, line: int = 0) -> float:
        """
        Apply a binary operator to two evaluated operands.

        Raises:
            UnknownOpException: If ``op`` is not a supported operator.
        """
        match op:
            # Arithmetic
            case Op.ADD:
                return lhs + rhs
            case Op.SUB:
                return lhs - rhs
            case Op.MUL:
                return lhs * rhs
            case Op.DIV:
                return divide(lhs, rhs)
            # Comparison
            case Op.GT:
                return 1.0 if lhs > rhs else 0.0
            case Op.LT:
                return 1.0 if lhs < rhs else 0.0
            case Op.EQ:
                return 1.0 if lhs == rhs else 0.0
            case Op.NE:
                return 1.0 if lhs != rhs else 0.0
            case _:
                raise UnknownOpException(op, line or None, self.file)

    def execute(self, statements) -> None:
        """
        Executes a list of statements.

        Parameters:
            statements (list): Statement nodes, executed in order.

        Raises:
            EvaluationError: For undefined variables, unknown operators or unknown nodes.
        """
        for stmt in statements:
            self.exec_stmt(stmt)

    def exec_stmt(self, stmt) -> None:
        """
        Execute a single statement node.
        """
        match stmt:
            case VariableAssignment(name=name, value=expr_node):
                self.vars[name] = self.eval_expr(expr_node)

            case Print(value=expr_node):
                value = self.eval_expr(expr_node)
                print(format_number(value), file=self.output)

            case Block(statements=block_statements):
                self.execute(block_statements)

            case If(condition=cond_node, then_branch=then_branch, else_branch=else_branch):
                if self.eval_expr(cond_node) != 0.0:
                    self.exec_stmt(then_branch)
                elif else_branch is not None:
                    self.exec_stmt(else_branch)

            case While(condition=cond_node, body=body):
                while self.eval_expr(cond_node) != 0.0:
                    self.exec_stmt(body)

            case _:
                raise EvaluationError(
                    f"Unknown statement type: {type(stmt).__name__}",
                    getattr(stmt, "line", None) or None,
                    self.file,
                )

"""Syntax tree for Emoji Lang.

The parser produces two closed families of immutable nodes: statements and
expressions. A program is a list of top-level statements. The interpreter
dispatches on node class with structural pattern matching.

Every node remembers the line it started on. The line is excluded from
equality so trees built by hand compare equal to parsed ones.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from emojilang.lexer import ASSIGN_SYMBOL, IF_SYMBOL, PRINT_SYMBOLS, WHILE_SYMBOL
from emojilang.operations import Op


# ---- Expressions ----

@dataclass(frozen=True)
class NumberLiteral:
    """A numeric literal."""

    value: float
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class VariableReference:
    """A read of a variable from the environment."""

    name: str
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class BinaryOp:
    """A binary arithmetic or comparison operation."""

    left: Expression
    op: Op
    right: Expression
    line: int = field(default=0, compare=False)


Expression = Union[NumberLiteral, VariableReference, BinaryOp]


# ---- Statements ----

@dataclass(frozen=True)
class VariableAssignment:
    """Store the value of an expression under a name."""

    name: str
    value: Expression
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class Print:
    """Evaluate an expression and write it as a line of output."""

    value: Expression
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class Block:
    """An ordered, possibly empty, sequence of statements."""

    statements: tuple[Statement, ...] = ()
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class If:
    """Conditional with an optional else branch."""

    condition: Expression
    then_branch: Statement
    else_branch: Optional[Statement] = None
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class While:
    """Loop executing its body while the condition is non-zero."""

    condition: Expression
    body: Statement
    line: int = field(default=0, compare=False)


Statement = Union[VariableAssignment, Print, Block, If, While]


def format_number(value: float) -> str:
    """
    Return the decimal representation used when printing a value.
    """
    return repr(float(value))


def format_expr(node) -> str:
    """
    Convert an expression back to readable source text.

    Args:
        node: An expression node.

    Returns:
        str: A string representation of the expression.
    """
    parts: list[str] = []
    pending = [node]
    while pending:
        current = pending.pop()
        match current:
            case str():
                parts.append(current)
            case NumberLiteral(value=value):
                text = format_number(value)
                parts.append(text[:-2] if text.endswith(".0") else text)
            case VariableReference(name=name):
                parts.append(name)
            case BinaryOp(left=left, op=op, right=right):
                pending.extend([")", right, f" {op.symbol} ", left, "("])
            case _:
                parts.append(f"<expr {type(current).__name__}>")
    return "".join(parts)


def format_stmt(node, indent: int = 0) -> str:
    """
    Convert a statement back to readable source text.
    """
    pad = "    " * indent
    match node:
        case VariableAssignment(name=name, value=value):
            return f"{pad}{ASSIGN_SYMBOL} {name} == {format_expr(value)}"
        case Print(value=value):
            return f"{pad}{PRINT_SYMBOLS[0]} {format_expr(value)}"
        case Block(statements=statements):
            inner = "".join(format_stmt(s, indent + 1) + "\n" for s in statements)
            return f"{pad}{{\n{inner}{pad}}}"
        case If(condition=condition, then_branch=then_branch, else_branch=else_branch):
            text = f"{pad}{IF_SYMBOL} {format_expr(condition)}\n{format_stmt(then_branch, indent)}"
            if else_branch is not None:
                text += f"\n{pad}else\n{format_stmt(else_branch, indent)}"
            return text
        case While(condition=condition, body=body):
            return f"{pad}{WHILE_SYMBOL} {format_expr(condition)}\n{format_stmt(body, indent)}"
        case _:
            return f"{pad}<stmt {type(node).__name__}>"

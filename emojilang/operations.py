"""Shared definitions for AST operation identifiers.

This module centralizes the operator kinds used by the parser and
interpreter to label binary nodes in the abstract syntax tree. Keeping them
in one place prevents the two components from drifting apart when
operations are added or renamed.
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of supported binary operator kinds.
    """

    # Arithmetic
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"

    # Comparison
    EQ = "eq"
    NE = "ne"
    GT = "gt"
    LT = "lt"

    @property
    def symbol(self) -> str:
        """
        Return the source spelling of the operator.
        """
        return _SYMBOLS[self]

    def __str__(self) -> str:
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


_SYMBOLS = {
    Op.ADD: "➕",
    Op.SUB: "➖",
    Op.MUL: "✖",
    Op.DIV: "➗",
    Op.EQ: "==",
    Op.NE: "!=",
    Op.GT: ">",
    Op.LT: "<",
}


__all__ = ["Op"]

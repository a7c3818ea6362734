"""Errors.

Two kinds of failure terminate a run: :class:`ParseError` while building the
syntax tree and :class:`EvaluationError` (or one of its subclasses) while
executing it. Both carry structured fields so callers can inspect them
without parsing the message.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class ParseError(SyntaxError):
    """
    Error for source text that does not follow the grammar.
    """
    def __init__(self, message, token, file=None):
        self.message = message
        self.token = token
        self.file = file
        text = f"{message}, found {token} on line {token.line} column {token.column}"
        if file is not None:
            text += f" in {file}"
        super().__init__(text)

    @property
    def line(self) -> int:
        """Line of the offending token."""
        return self.token.line

    @property
    def column(self) -> int:
        """Column of the offending token."""
        return self.token.column


class EvaluationError(RuntimeError):
    """
    Base error for failures while executing a program.
    """
    def __init__(self, message, line=None, file=None):
        self.line = line
        self.file = file
        if line is not None:
            message += f" on line {line}"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class UndefinedVariableException(EvaluationError):
    """
    Error for undefined variables.
    """
    def __init__(self, varname, line=None, file=None):
        self.varname = varname
        super().__init__(f"Undefined variable '{varname}'", line, file)


class UnknownOpException(EvaluationError):
    """
    Error for unknown operations.
    """
    def __init__(self, op, line=None, file=None):
        self.op = op
        super().__init__(f"Unknown operation '{op}'", line, file)

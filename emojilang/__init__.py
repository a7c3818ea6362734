"""Emoji Lang.

A small language whose keywords are emoji symbols. Source text is scanned by
:func:`emojilang.lexer.tokenize`, parsed into a syntax tree by
:class:`emojilang.parser.Parser` and executed by
:class:`emojilang.interpreter.Interpreter`.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from emojilang.exceptions import (
    EvaluationError,
    ParseError,
    UndefinedVariableException,
    UnknownOpException,
)
from emojilang.interpreter import Interpreter
from emojilang.lexer import Token, TokenType, tokenize
from emojilang.parser import Parser

__version__ = "0.1.0"

__all__ = [
    "EvaluationError",
    "Interpreter",
    "ParseError",
    "Parser",
    "Token",
    "TokenType",
    "UndefinedVariableException",
    "UnknownOpException",
    "tokenize",
]

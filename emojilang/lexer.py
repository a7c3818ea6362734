"""Lexer for Emoji Lang.

This lexer performs a single pass over the source code using a combined
regular expression of named groups, matched at each position in turn. Each
match yields a :class:`Token` containing its type, lexeme and source position.

Keywords are emoji symbols (``📦`` assigns, ``📢`` prints, ``❓`` branches,
``🔁`` loops ...). Python strings index by code point, so symbols outside the
basic multilingual plane match as a single character. An emoji presentation
selector (U+FE0F) directly after a symbol belongs to that symbol's lexeme.

The lexer never fails: characters that do not start a token are dropped.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re
from dataclasses import dataclass
from enum import Enum


class TokenType(str, Enum):
    """
    Enumeration of lexical categories.
    """

    IDENTIFIER = "IDENTIFIER"
    NUMBER = "NUMBER"

    # Keyword symbols
    ASSIGN = "ASSIGN"
    PRINT = "PRINT"
    IF = "IF"
    WHILE = "WHILE"

    # Arithmetic operators
    PLUS = "PLUS"
    MINUS = "MINUS"
    STAR = "STAR"
    SLASH = "SLASH"

    # Delimiters
    LBRACE = "LBRACE"
    RBRACE = "RBRACE"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    SEMICOLON = "SEMICOLON"

    # Comparison operators
    GREATER = "GREATER"
    LESS = "LESS"
    EQUAL_EQUAL = "EQUAL_EQUAL"
    BANG_EQUAL = "BANG_EQUAL"

    END_OF_INPUT = "END_OF_INPUT"

    def __str__(self) -> str:
        return self.value


ASSIGN_SYMBOL = "\U0001F4E6"                  # 📦
PRINT_SYMBOLS = ("\U0001F4E2", "\U0001F5A8")  # 📢 🖨
PLUS_SYMBOL = "\u2795"                        # ➕
MINUS_SYMBOL = "\u2796"                       # ➖
STAR_SYMBOL = "\u2716"                        # ✖
SLASH_SYMBOL = "\u2797"                       # ➗
IF_SYMBOL = "\u2753"                          # ❓
WHILE_SYMBOL = "\U0001F501"                   # 🔁

EMOJI_PRESENTATION = "\ufe0f"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token with a type, its source lexeme and position.
    """

    type: TokenType
    lexeme: str
    line: int = 1
    column: int = 1

    def __str__(self) -> str:
        """
        Return the printable form of the token, e.g. ``NUMBER(42)``.
        """
        return f"{self.type}({self.lexeme})"

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.lexeme!r}, line={self.line})"


def _symbol(*chars: str) -> str:
    """Build a pattern for emoji symbols with an optional presentation selector."""
    alternatives = "|".join(re.escape(c) for c in chars)
    return f"(?:{alternatives}){EMOJI_PRESENTATION}?"


TOKEN_SPECIFICATION: list[tuple[str, str]] = [
    # Literals and names. \d is Unicode aware; identifier matches are trimmed in tokenize().
    ('NUMBER',      r'\d+'),
    ('IDENTIFIER',  r'[^\W\d_][^\W_]*'),

    # Keywords
    ('ASSIGN',      _symbol(ASSIGN_SYMBOL)),
    ('PRINT',       _symbol(*PRINT_SYMBOLS)),
    ('IF',          _symbol(IF_SYMBOL)),
    ('WHILE',       _symbol(WHILE_SYMBOL)),

    # Arithmetic operators
    ('PLUS',        _symbol(PLUS_SYMBOL)),
    ('MINUS',       _symbol(MINUS_SYMBOL)),
    ('STAR',        _symbol(STAR_SYMBOL)),
    ('SLASH',       _symbol(SLASH_SYMBOL)),

    # Delimiters
    ('LBRACE',      r'\{'),
    ('RBRACE',      r'\}'),
    ('LPAREN',      r'\('),
    ('RPAREN',      r'\)'),
    ('SEMICOLON',   r';'),

    # Comparison operators
    ('EQUAL_EQUAL', r'=='),
    ('BANG_EQUAL',  r'!='),
    ('GREATER',     r'>'),
    ('LESS',        r'<'),

    # Miscellaneous
    ('NEWLINE',     r'\n'),
    ('SKIP',        r'[ \t\r]+'),
    ('MISMATCH',    r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in TOKEN_SPECIFICATION),
    re.DOTALL,
)


def _identifier_length(candidate: str) -> int:
    """
    Return how much of ``candidate`` forms an identifier.

    The regex letter class also admits numerics such as ``²`` or ``½``.
    An identifier starts with a letter and continues with letters or
    decimal digits, so the match is cut at the first other character.
    """
    if not candidate[0].isalpha():
        return 0
    for index, char in enumerate(candidate):
        if not (char.isalpha() or char.isdecimal()):
            return index
    return len(candidate)


def tokenize(code: str) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.

    Returns:
        list[Token]: The tokens in source order, terminated by a single
        END_OF_INPUT token with an empty lexeme.
    """
    tokens = []
    line_num = 1
    line_start = 0
    pos = 0

    while pos < len(code):
        # MISMATCH matches any character, so a match always exists.
        match_obj = TOKEN_REGEX.match(code, pos)
        kind = match_obj.lastgroup
        value = match_obj.group()

        if kind == 'IDENTIFIER':
            value = value[:_identifier_length(value)]
            if not value:
                kind = 'MISMATCH'
                value = code[pos]

        start = pos
        pos += len(value)

        if kind == 'NEWLINE':
            line_num += 1
            line_start = pos
            continue
        if kind in ('SKIP', 'MISMATCH'):
            # Lone '=' and '!' land here along with anything else unknown.
            continue

        column = start - line_start + 1
        tokens.append(Token(TokenType[kind], value, line_num, column))

    tokens.append(Token(TokenType.END_OF_INPUT, "", line_num, len(code) - line_start + 1))
    return tokens

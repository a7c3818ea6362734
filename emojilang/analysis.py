"""Static analysis helpers used by the language server.

These helpers reuse the lexer and parser to build a symbol index and to
turn parse failures into diagnostics. They do not depend on the language
server framework so editors and tests can call them directly.

Positions are zero-based and count UTF-16 code units, the default position
encoding of the Language Server Protocol. Tokens count code points, so a
keyword outside the basic multilingual plane such as ``📦`` occupies two
units on the wire.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from emojilang.exceptions import ParseError
from emojilang.lexer import Token, TokenType, tokenize
from emojilang.nodes import Block, If, VariableAssignment, While, format_stmt
from emojilang.parser import Parser


@dataclass
class EmojiSymbol:
    """Represents a variable assigned in an Emoji Lang file."""

    name: str
    uri: str
    line: int
    detail: str
    start_column: int = 0
    end_column: int = 0


@dataclass
class SourceDiagnostic:
    """A parse failure located in the source text."""

    message: str
    line: int
    start_column: int
    end_column: int


def utf16_length(text: str) -> int:
    """Return the number of UTF-16 code units needed to encode ``text``."""
    return len(text.encode("utf-16-le")) // 2


def token_span(lines: List[str], tok: Token) -> Tuple[int, int, int]:
    """
    Return the zero-based line and UTF-16 start and end columns of ``tok``.

    Empty lexemes, such as END_OF_INPUT, span one unit so editors can show them.
    """
    line = tok.line - 1
    text = lines[line] if line < len(lines) else ""
    start = utf16_length(text[:tok.column - 1])
    return line, start, start + max(utf16_length(tok.lexeme), 1)


def parse_document(uri: str, text: str) -> Tuple[list, Optional[SourceDiagnostic]]:
    """
    Parse ``text`` and return the AST and the first parse failure, if any.

    The AST is empty when parsing fails.
    """
    try:
        return Parser(tokenize(text), uri).parse(), None
    except ParseError as e:
        tok = e.token
        line, start, end = token_span(text.split("\n"), tok)
        diagnostic = SourceDiagnostic(
            message=f"{e.message}, found {tok}",
            line=line,
            start_column=start,
            end_column=end,
        )
        return [], diagnostic


def iter_assignments(statements) -> Iterator[VariableAssignment]:
    """
    Yield every assignment in ``statements``, descending into nested bodies.
    """
    for stmt in statements:
        match stmt:
            case VariableAssignment():
                yield stmt
            case Block(statements=inner):
                yield from iter_assignments(inner)
            case If(then_branch=then_branch, else_branch=else_branch):
                yield from iter_assignments([then_branch])
                if else_branch is not None:
                    yield from iter_assignments([else_branch])
            case While(body=body):
                yield from iter_assignments([body])


def assigned_name_tokens(tokens: List[Token]) -> Iterator[Token]:
    """
    Yield the identifier token that follows each assignment symbol.
    """
    for previous, tok in zip(tokens, tokens[1:]):
        if previous.type == TokenType.ASSIGN and tok.type == TokenType.IDENTIFIER:
            yield tok


def collect_symbols(uri: str, text: str, statements) -> List[EmojiSymbol]:
    """
    Return one symbol per variable, located at the name in its first assignment.

    ``statements`` must be the AST parsed from ``text``. Assignments appear in
    the tree in source order, one per assignment symbol in the token stream.
    """
    lines = text.split("\n")
    symbols: List[EmojiSymbol] = []
    seen = set()
    name_tokens = assigned_name_tokens(tokenize(text))
    for node, name_tok in zip(iter_assignments(statements), name_tokens):
        if node.name in seen:
            continue
        seen.add(node.name)
        line, start, end = token_span(lines, name_tok)
        symbols.append(EmojiSymbol(node.name, uri, line, format_stmt(node), start, end))
    return symbols

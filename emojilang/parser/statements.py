"""Statement parsing utilities for Emoji Lang.

These functions operate on a `emojilang.parser.parser.Parser` instance and
handle the statement forms of the language: assignments, prints,
conditionals, loops, blocks and bare expressions.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from emojilang.lexer import ASSIGN_SYMBOL, TokenType
from emojilang.nodes import Block, If, Print, VariableAssignment, While

if TYPE_CHECKING:
    from emojilang.parser import Parser


ELSE_KEYWORD = "else"


def parse_block(parser: 'Parser') -> Block:
    """
    Parse a block of statements enclosed in braces.

    Syntax:
        { <statement>* }

    Args:
        parser: The parser instance.

    Returns:
        Block: the statements in source order.
    """
    tok = parser.eat(TokenType.LBRACE, "Expected '{'")
    parser.enter(tok)
    statements = []
    while not parser.check(TokenType.RBRACE) and not parser.at_end():
        statements.append(parser.statement())
    parser.eat(TokenType.RBRACE, "Expected '}'")
    parser.leave()
    return Block(tuple(statements), tok.line)


def parse_body(parser: 'Parser'):
    """
    Parse the body of a conditional or loop.

    Syntax:
        { <statement>* } | <statement>

    Args:
        parser: The parser instance.

    Returns:
        Block or a single statement node.
    """
    if parser.check(TokenType.LBRACE):
        return parser.block()
    parser.enter(parser.curr_token)
    node = parser.statement()
    parser.leave()
    return node


def parse_statement(parser: 'Parser'):
    """
    Parse a single statement.

    Args:
        parser: The parser instance.

    Returns:
        The statement node.
    """
    tok = parser.curr_token
    if tok.type == TokenType.ASSIGN:
        return parser.parse_assignment()
    elif tok.type == TokenType.PRINT:
        return parser.parse_print()
    elif tok.type == TokenType.IF:
        return parser.parse_if()
    elif tok.type == TokenType.WHILE:
        return parser.parse_while()
    elif tok.type == TokenType.LBRACE:
        return parser.block()
    return parser.parse_expression_statement()


def parse_assignment(parser: 'Parser') -> VariableAssignment:
    """
    Parse a variable assignment. The '==' token separates name and value.

    Syntax:
        📦 <identifier> == <expression> [;]

    Args:
        parser: The parser instance.

    Returns:
        VariableAssignment
    """
    tok = parser.eat(TokenType.ASSIGN)
    id_tok = parser.eat(TokenType.IDENTIFIER, f"Expected identifier after {ASSIGN_SYMBOL}")
    parser.eat(TokenType.EQUAL_EQUAL, "Expected '==' after variable name")
    expr_node = parser.expr()
    parser.match(TokenType.SEMICOLON)
    return VariableAssignment(id_tok.lexeme, expr_node, tok.line)


def parse_print(parser: 'Parser') -> Print:
    """
    Parse a print statement.

    Syntax:
        📢 <expression> [;]
    """
    tok = parser.eat(TokenType.PRINT)
    expr_node = parser.expr()
    parser.match(TokenType.SEMICOLON)
    return Print(expr_node, tok.line)


def parse_if(parser: 'Parser') -> If:
    """
    Parse a conditional with an optional else branch.

    Syntax:
        ❓ <condition> <body> [else <body>]

    Args:
        parser: The parser instance.

    Returns:
        If
    """
    tok = parser.eat(TokenType.IF)
    condition = parser.expr()
    then_branch = parser.body()

    else_branch = None
    if parser.check(TokenType.IDENTIFIER) and parser.curr_token.lexeme == ELSE_KEYWORD:
        parser.advance()
        else_branch = parser.body()

    return If(condition, then_branch, else_branch, tok.line)


def parse_while(parser: 'Parser') -> While:
    """
    Parse a loop.

    Syntax:
        🔁 <condition> <body>
    """
    tok = parser.eat(TokenType.WHILE)
    condition = parser.expr()
    body = parser.body()
    return While(condition, body, tok.line)


def parse_expression_statement(parser: 'Parser') -> Print:
    """
    Parse a bare expression. Its value is displayed as if printed.

    Syntax:
        <expression> [;]
    """
    tok = parser.curr_token
    expr_node = parser.expr()
    parser.match(TokenType.SEMICOLON)
    return Print(expr_node, tok.line)

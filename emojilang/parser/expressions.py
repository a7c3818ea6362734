"""
Expression parsing utilities for Emoji Lang.

These functions operate on a `emojilang.parser.parser.Parser` instance and
implement the recursive descent logic for expressions, maintaining
operator precedence and left associativity.
"""

from typing import TYPE_CHECKING

from emojilang.exceptions import ParseError
from emojilang.lexer import TokenType
from emojilang.nodes import BinaryOp, NumberLiteral, VariableReference
from emojilang.operations import Op

if TYPE_CHECKING:
    from emojilang.parser import Parser


OP_MAP = {
    TokenType.PLUS: Op.ADD,
    TokenType.MINUS: Op.SUB,
    TokenType.STAR: Op.MUL,
    TokenType.SLASH: Op.DIV,
    TokenType.GREATER: Op.GT,
    TokenType.LESS: Op.LT,
    TokenType.EQUAL_EQUAL: Op.EQ,
    TokenType.BANG_EQUAL: Op.NE,
}


def _binary(parser: 'Parser', operand, *operators: TokenType):
    """Fold ``operand (op operand)*`` left to right into BinaryOp nodes."""
    result = operand()
    while parser.check(*operators):
        op_tok = parser.advance()
        result = BinaryOp(result, OP_MAP[op_tok.type], operand(), op_tok.line)
    return result


# ---- Highest precedence ----

def parse_primary(parser: 'Parser'):
    """Parse a number, a variable, or a parenthesized expression."""
    tok = parser.curr_token

    if tok.type == TokenType.NUMBER:
        parser.advance()
        return NumberLiteral(float(tok.lexeme), tok.line)

    if tok.type == TokenType.IDENTIFIER:
        parser.advance()
        return VariableReference(tok.lexeme, tok.line)

    if tok.type == TokenType.LPAREN:
        parser.advance()
        parser.enter(tok)
        node = parser.expr()
        parser.eat(TokenType.RPAREN, "Expected ')' after expression")
        parser.leave()
        return node

    raise ParseError("Unexpected token", tok, parser.source_file)


def parse_factor(parser: 'Parser'):
    """Parse multiplication and division expressions."""
    return _binary(parser, parser.primary, TokenType.STAR, TokenType.SLASH)


def parse_term(parser: 'Parser'):
    """Parse addition and subtraction expressions."""
    return _binary(parser, parser.factor, TokenType.PLUS, TokenType.MINUS)


def parse_comparison(parser: 'Parser'):
    """Parse relational expressions ('>', '<')."""
    return _binary(parser, parser.term, TokenType.GREATER, TokenType.LESS)


def parse_equality(parser: 'Parser'):
    """Parse equality expressions ('==', '!=')."""
    return _binary(parser, parser.comparison, TokenType.EQUAL_EQUAL, TokenType.BANG_EQUAL)


# ---- Entry point ----

def parse_expr(parser: 'Parser'):
    """Parse an expression starting from the lowest-precedence operator."""
    return parser.equality()

"""
Main parser entry point for Emoji Lang.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`emojilang.parser.expressions` and `emojilang.parser.statements`.
"""

from emojilang.exceptions import ParseError
from emojilang.lexer import Token, TokenType

from . import expressions as _expr
from . import statements as _stmt

# Parenthesized groups, blocks and if/while bodies may nest this deep.
MAX_NESTING_DEPTH = 32


class Parser:
    """Emoji Lang parser."""

    def __init__(self, tokens: list[Token], file: str = "<stdin>"):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances ending in END_OF_INPUT.
            file (str): The name of the script, used in error messages.
        """
        if not tokens or tokens[-1].type != TokenType.END_OF_INPUT:
            tokens = list(tokens) + [Token(TokenType.END_OF_INPUT, "")]
        self.tokens = tokens
        self.position = 0
        self.curr_token = self.tokens[self.position]
        self.source_file = file
        self.depth = 0

    @property
    def previous(self) -> Token:
        """
        The most recently consumed token.
        """
        return self.tokens[self.position - 1]

    def at_end(self) -> bool:
        """
        Return True when only END_OF_INPUT remains.
        """
        return self.curr_token.type == TokenType.END_OF_INPUT

    def check(self, *token_types: TokenType) -> bool:
        """
        Return True if the current token is one of ``token_types``.
        """
        return self.curr_token.type in token_types

    def advance(self) -> Token:
        """
        Consume the current token and return it. END_OF_INPUT is never consumed.
        """
        tok = self.curr_token
        if not self.at_end():
            self.position += 1
            self.curr_token = self.tokens[self.position]
        return tok

    def match(self, *token_types: TokenType) -> bool:
        """
        Consume the current token if it is one of ``token_types``.
        """
        if self.check(*token_types):
            self.advance()
            return True
        return False

    def eat(self, token_type: TokenType, message: str | None = None) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (TokenType): The expected token type.
            message (str): Error text used when the token does not match.

        Raises:
            ParseError: If the token does not match the expected type.
        """
        if self.curr_token.type == token_type:
            return self.advance()
        raise ParseError(
            message or f"Expected token of type {token_type}",
            self.curr_token,
            self.source_file,
        )

    def enter(self, tok: Token) -> None:
        """
        Record entry into a nested construct opened at ``tok``.

        Raises:
            ParseError: If constructs nest deeper than MAX_NESTING_DEPTH.
        """
        if self.depth >= MAX_NESTING_DEPTH:
            raise ParseError(
                f"Nesting deeper than {MAX_NESTING_DEPTH} levels",
                tok,
                self.source_file,
            )
        self.depth += 1

    def leave(self) -> None:
        """
        Record exit from the innermost nested construct.
        """
        self.depth -= 1

    # Expression wrappers
    def primary(self):
        """
        Parse a number, a variable reference or a parenthesized group.
        """
        return _expr.parse_primary(self)

    def factor(self):
        """
        Parse multiplication and division.
        """
        return _expr.parse_factor(self)

    def term(self):
        """
        Parse addition and subtraction.
        """
        return _expr.parse_term(self)

    def comparison(self):
        """
        Parse '>' and '<' comparisons.
        """
        return _expr.parse_comparison(self)

    def equality(self):
        """
        Parse '==' and '!=' comparisons.
        """
        return _expr.parse_equality(self)

    def expr(self):
        """
        Parse a full expression.
        """
        return _expr.parse_expr(self)

    # Statement wrappers
    def block(self):
        """
        Parse a block of statements enclosed in braces.
        """
        return _stmt.parse_block(self)

    def body(self):
        """
        Parse the body of an 'if' or 'while': a block or a single statement.
        """
        return _stmt.parse_body(self)

    def statement(self):
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def parse_assignment(self):
        """
        Parse a variable assignment statement.
        """
        return _stmt.parse_assignment(self)

    def parse_print(self):
        """
        Parse a print statement used for output.
        """
        return _stmt.parse_print(self)

    def parse_if(self):
        """
        Parse an 'if' conditional statement.
        """
        return _stmt.parse_if(self)

    def parse_while(self):
        """
        Parse a 'while' loop statement.
        """
        return _stmt.parse_while(self)

    def parse_expression_statement(self):
        """
        Parse a bare expression, which is displayed like a print.
        """
        return _stmt.parse_expression_statement(self)

    def parse(self) -> list:
        """
        Parse the full input into a list of statements.
        """
        statements = []
        while not self.at_end():
            # Stray semicolons between top-level statements are ignored.
            if self.match(TokenType.SEMICOLON):
                continue
            statements.append(self.statement())
        return statements

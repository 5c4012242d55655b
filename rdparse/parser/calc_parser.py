"""
Calc Parser - Recursive descent evaluator for integer arithmetic.

Grammar:
    statement  := expression SEMICOLON
    expression := term ((PLUS | MINUS) term)*
    term       := factor ((STAR | SLASH) factor)*
    factor     := LPAREN expression RPAREN | NUMBER | (PLUS | MINUS) factor

Each production is evaluated as soon as it is parsed; no tree is built.
Arithmetic is checked against the configured integer width, and division
truncates toward zero.
"""

import logging

from rdparse.config import CalcConfig
from rdparse.errors import DivisionByZeroError, IntegerOverflowError, ParserError
from rdparse.lexer import CalcLexer, CalcTokenType, Token

logger = logging.getLogger(__name__)


def truncated_divide(dividend: int, divisor: int) -> int:
    """Integer division rounding toward zero (-7 / 2 == -3)."""
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        return -quotient
    return quotient


class CalcEvaluator:
    """
    Parses and evaluates statements pulled from a CalcLexer.

    The lexer's current token must already be the first token of the
    statement; the session loop is responsible for advancing onto it.
    """

    def __init__(self, lexer: CalcLexer, config: CalcConfig | None = None):
        self.lexer = lexer
        self.config = config or CalcConfig()
        self.min_value, self.max_value = self.config.int_limits

    def _current_token(self) -> Token:
        return self.lexer.token

    def _advance(self) -> Token:
        return self.lexer.advance_token()

    def _match(self, *token_types: CalcTokenType) -> bool:
        return self.lexer.token.type in token_types

    def _check(self, value: int, token: Token) -> int:
        if not self.min_value <= value <= self.max_value:
            raise IntegerOverflowError(value, self.config.int_bits, token)
        return value

    def statement(self) -> int:
        """Evaluate one expression and require the terminating ';'."""
        value = self.expression()
        if not self._match(CalcTokenType.SEMICOLON):
            raise ParserError("invalid token", self._current_token())
        logger.debug("statement => %d", value)
        return value

    def expression(self) -> int:
        """Parse additive expression: term ((+|-) term)*"""
        value = self.term()

        while self._match(CalcTokenType.PLUS, CalcTokenType.MINUS):
            op = self._current_token()
            self._advance()
            right = self.term()
            if op.type is CalcTokenType.PLUS:
                value = self._check(value + right, op)
            else:
                value = self._check(value - right, op)

        return value

    def term(self) -> int:
        """Parse multiplicative expression: factor ((*|/) factor)*"""
        value = self.factor()

        while self._match(CalcTokenType.STAR, CalcTokenType.SLASH):
            op = self._current_token()
            self._advance()
            right = self.factor()
            if op.type is CalcTokenType.STAR:
                value = self._check(value * right, op)
            else:
                if right == 0:
                    raise DivisionByZeroError(op)
                value = self._check(truncated_divide(value, right), op)

        return value

    def factor(self) -> int:
        """Parse a parenthesised expression, a number or a signed factor."""
        token = self._current_token()

        if token.type is CalcTokenType.LPAREN:
            self._advance()
            value = self.expression()
            if not self._match(CalcTokenType.RPAREN):
                raise ParserError("')' expected", self._current_token())
            self._advance()
            return value

        if token.type is CalcTokenType.NUMBER:
            value = self._check(token.value, token)
            self._advance()
            return value

        if token.type is CalcTokenType.PLUS:
            self._advance()
            return self.factor()

        if token.type is CalcTokenType.MINUS:
            self._advance()
            return self._check(-self.factor(), token)

        raise ParserError("unexpected token", token)

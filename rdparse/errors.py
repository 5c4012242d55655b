"""
Error classes for the expression grammar.

The job grammar never raises; everything here belongs to the calculator.
All errors propagate unmodified from the point of detection up to the
session loop, which is the only place they are caught.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rdparse.lexer import Token


class CalcError(Exception):
    """Base class for all calculator errors."""


class LexerError(CalcError):
    """The current character does not start any known token."""

    def __init__(self, char: str, position: int, line: int = 1, column: int = 0):
        self.char = char
        self.position = position
        self.line = line
        self.column = column
        super().__init__(f"invalid character {char!r} at line {line}, column {column}")


class ParserError(CalcError):
    """Syntax error: the token stream does not fit the grammar."""

    def __init__(self, reason: str, token: "Token | None" = None):
        self.reason = reason
        self.token = token
        if token:
            super().__init__(f"{reason} at line {token.line}, column {token.column}")
        else:
            super().__init__(reason)


class CalcArithmeticError(CalcError, ArithmeticError):
    """An operation left the checked integer domain."""

    def __init__(self, message: str, token: "Token | None" = None):
        self.token = token
        if token:
            super().__init__(f"{message} at line {token.line}, column {token.column}")
        else:
            super().__init__(message)


class DivisionByZeroError(CalcArithmeticError):
    def __init__(self, token: "Token | None" = None):
        super().__init__("division by zero", token)


class IntegerOverflowError(CalcArithmeticError):
    def __init__(self, value: int | str, bits: int, token: "Token | None" = None):
        self.value = value
        self.bits = bits
        super().__init__(f"integer overflow: {value} does not fit in int{bits}", token)

"""
Lexer module for both grammars.

This module provides:
- classify(): the stateless job tokenizer, one character at a time
- CalcLexer: the stateful expression scanner over a character stream
"""

import io
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, TextIO

from rdparse.cursor import TERMINATOR
from rdparse.config import CalcConfig
from rdparse.errors import IntegerOverflowError, LexerError

logger = logging.getLogger(__name__)


class JobTokenType(Enum):
    """Token kinds of the job grammar."""

    PIPE = auto()  # |
    REDIRECT = auto()  # >
    SEPARATOR = auto()  # space
    STRING_CHAR = auto()  # any other character
    TERMINATOR = auto()  # end of line


def classify(char: str) -> JobTokenType:
    """Map a single character onto its job token kind."""
    if char == "|":
        return JobTokenType.PIPE
    if char == ">":
        return JobTokenType.REDIRECT
    if char == " ":
        return JobTokenType.SEPARATOR
    if char == TERMINATOR or char == "":
        return JobTokenType.TERMINATOR
    return JobTokenType.STRING_CHAR


class CalcTokenType(Enum):
    """Token kinds of the expression grammar."""

    EOF = auto()
    NUMBER = auto()
    PLUS = auto()  # +
    MINUS = auto()  # -
    STAR = auto()  # *
    SLASH = auto()  # /
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    SEMICOLON = auto()  # ;
    INVALID = auto()


SINGLE_CHAR_TOKENS = {
    "+": CalcTokenType.PLUS,
    "-": CalcTokenType.MINUS,
    "*": CalcTokenType.STAR,
    "/": CalcTokenType.SLASH,
    "(": CalcTokenType.LPAREN,
    ")": CalcTokenType.RPAREN,
    ";": CalcTokenType.SEMICOLON,
}


@dataclass
class Token:
    """A single expression token; value is the decoded int for NUMBER."""

    type: CalcTokenType
    value: Any
    position: int  # character offset in the stream
    line: int = 1
    column: int = 0

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, pos={self.position})"


WHITESPACE = " \t\n\r\v\f"


def _is_digit(char: str) -> bool:
    return len(char) == 1 and "0" <= char <= "9"


class CalcLexer:
    """
    Pull-based scanner for the calculator.

    Reads one character at a time from a text stream and keeps the
    current character, the current token and the last decoded number as
    state. One lexer is reused across all statements of a session; tokens
    stream continuously from one statement into the next.

    The first character is read lazily on the first call to
    advance_token(), so creating a lexer over stdin never blocks.
    """

    def __init__(self, stream: TextIO, config: CalcConfig | None = None):
        self.stream = stream
        self.config = config or CalcConfig()
        # Literals with more digits than the domain maximum cannot fit
        self.max_digits = len(str(self.config.int_limits[1]))
        self.pos = -1
        self.line = 1
        self.column = 0
        self.value = 0
        self.token = Token(CalcTokenType.INVALID, "", 0)
        self._char: str | None = None  # "" once the stream is exhausted

    @classmethod
    def from_string(cls, source: str, config: CalcConfig | None = None) -> "CalcLexer":
        return cls(io.StringIO(source), config)

    def _read_char(self) -> None:
        """Move to the next character of the stream."""
        if self._char == "":
            return
        if self._char == "\n":
            self.line += 1
            self.column = 0
        char = self.stream.read(1)
        if char:
            self.pos += 1
            self.column += 1
        self._char = char

    def _current_char(self) -> str:
        if self._char is None:
            self._read_char()
        return self._char  # type: ignore[return-value]

    def _skip_whitespace(self) -> None:
        while self._current_char() and self._current_char() in WHITESPACE:
            self._read_char()

    def _read_integer(self, token: Token) -> int:
        """
        Read a run of decimal digits.

        Raises:
            IntegerOverflowError: if the literal has more digits than the
                largest value of the integer domain
        """
        chars: list[str] = []
        while _is_digit(self._current_char()):
            chars.append(self._current_char())
            self._read_char()
        digits = "".join(chars)
        if len(digits.lstrip("0")) > self.max_digits:
            self.token = token
            text = digits[:self.max_digits]
            raise IntegerOverflowError(
                f"{text}... ({len(chars)} digits)", self.config.int_bits, token
            )
        return int(digits.lstrip("0") or "0")

    def advance_token(self) -> Token:
        """
        Scan the next token and make it current.

        Raises:
            LexerError: if the current character starts no token
            IntegerOverflowError: if a literal is too long for the domain
        """
        self._skip_whitespace()
        char = self._current_char()
        position, line, column = self.pos, self.line, self.column

        if _is_digit(char):
            start = Token(CalcTokenType.INVALID, char, position, line, column)
            self.value = self._read_integer(start)
            self.token = Token(CalcTokenType.NUMBER, self.value, position, line, column)
        elif char == "":
            self.token = Token(CalcTokenType.EOF, "", position, line, column)
        elif char in SINGLE_CHAR_TOKENS:
            self._read_char()
            self.token = Token(SINGLE_CHAR_TOKENS[char], char, position, line, column)
        else:
            # The offending character stays unread so skip_statement() can resume from it
            self.token = Token(CalcTokenType.INVALID, char, position, line, column)
            raise LexerError(char, position, line, column)

        logger.debug("token %r", self.token)
        return self.token

    def skip_statement(self) -> None:
        """Discard input up to and including the next ';', or to the end of input."""
        if self.token.type is CalcTokenType.SEMICOLON:
            return
        while self._current_char() not in ("", ";"):
            self._read_char()
        if self._current_char() == ";":
            position, line, column = self.pos, self.line, self.column
            self._read_char()
            self.token = Token(CalcTokenType.SEMICOLON, ";", position, line, column)
        logger.debug("resynchronised at %r", self.token)

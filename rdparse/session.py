"""
Calculator session - the read-evaluate-print loop.

A session owns one CalcLexer over its input stream and evaluates
';'-terminated statements until the end of input.
"""

import io
import logging
from dataclasses import dataclass
from typing import TextIO

from rdparse.config import CalcConfig
from rdparse.errors import CalcError
from rdparse.lexer import CalcLexer, CalcTokenType
from rdparse.parser.calc_parser import CalcEvaluator

logger = logging.getLogger(__name__)


@dataclass
class StatementResult:
    """Outcome of one statement: exactly one of value and error is set."""

    value: int | None = None
    error: CalcError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class CalcSession:
    """
    Interactive calculator over a character stream.

    Usage:
        session = CalcSession(sys.stdin, sys.stdout, sys.stderr)
        exit_code = session.run()

    Errors are written to the error stream. Unless config.abort_on_error
    is set, the session then discards input up to the next ';' and
    carries on with the following statement.
    """

    def __init__(
        self,
        stdin: TextIO,
        stdout: TextIO,
        stderr: TextIO,
        config: CalcConfig | None = None,
    ):
        self.stdout = stdout
        self.stderr = stderr
        self.config = config or CalcConfig()
        self.lexer = CalcLexer(stdin, self.config)
        self.evaluator = CalcEvaluator(self.lexer, self.config)
        self.results: list[StatementResult] = []

    def evaluate_statement(self) -> StatementResult:
        """Evaluate the statement starting at the lexer's current token."""
        try:
            value = self.evaluator.statement()
        except CalcError as e:
            return StatementResult(error=e)
        return StatementResult(value=value)

    def _next_statement(self) -> StatementResult | None:
        """Advance onto the next statement and evaluate it; None at end of input."""
        try:
            token = self.lexer.advance_token()
        except CalcError as e:
            return StatementResult(error=e)
        if token.type is CalcTokenType.EOF:
            return None
        return self.evaluate_statement()

    def _write_prompt(self) -> None:
        self.stdout.write(self.config.prompt)
        self.stdout.flush()

    def run(self) -> int:
        """
        Run until end of input.

        Returns:
            0 if every statement succeeded, 1 otherwise
        """
        failed = False
        self._write_prompt()

        while True:
            result = self._next_statement()
            if result is None:
                break
            self.results.append(result)

            if result.ok:
                self.stdout.write(self.config.result_format.format(value=result.value) + "\n")
            else:
                failed = True
                logger.info("statement failed: %s", result.error)
                self.stderr.write(f"{result.error}\n")
                self.stderr.flush()
                if self.config.abort_on_error:
                    return 1
                self.lexer.skip_statement()

            self._write_prompt()

        return 1 if failed else 0


def evaluate(source: str, config: CalcConfig | None = None) -> int:
    """
    Evaluate the first statement of source.

    Raises:
        CalcError: on any lexical, syntax or arithmetic error
    """
    lexer = CalcLexer.from_string(source, config)
    lexer.advance_token()
    return CalcEvaluator(lexer, config).statement()


def evaluate_all(source: str, config: CalcConfig | None = None) -> list[StatementResult]:
    """Evaluate every statement of source and return the per-statement results."""
    session = CalcSession(io.StringIO(source), io.StringIO(), io.StringIO(), config)
    session.run()
    return session.results

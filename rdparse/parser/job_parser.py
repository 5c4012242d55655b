"""
Job Parser - Recursive descent parser for shell-like job lines.

Grammar:
    job     := command (PIPE command)* (REDIRECT word)?
    command := word (SEPARATOR word)*
    word    := STRING_CHAR+

The parser is total: any input, including empty or malformed lines,
yields some Job. It never backtracks; every character is consumed once,
left to right.
"""

import logging

from rdparse.cursor import Cursor
from rdparse.lexer import JobTokenType, classify
from rdparse.syntax_tree.nodes import Command, Job

logger = logging.getLogger(__name__)


class JobParser:
    """
    Recursive descent parser for the job grammar.

    Usage:
        job = JobParser("ls -l | wc -l > count.txt").parse()

    A parser owns one Cursor for its lifetime; once parse() has consumed
    the line, parsing again yields an empty Job.
    """

    def __init__(self, source: str | Cursor):
        self.cursor = source if isinstance(source, Cursor) else Cursor(source)
        self.source = self.cursor.source

    def parse(self) -> Job:
        """Parse the line into a Job."""
        return self.parse_job()

    def _token(self) -> JobTokenType:
        return classify(self.cursor.current())

    def _match(self, *token_types: JobTokenType) -> bool:
        return self._token() in token_types

    def _skip_separators(self) -> None:
        while self._match(JobTokenType.SEPARATOR):
            self.cursor.advance()

    def parse_word(self) -> str:
        """Consume a run of STRING_CHAR characters; may return ""."""
        chars: list[str] = []
        while self._match(JobTokenType.STRING_CHAR):
            chars.append(self.cursor.current())
            self.cursor.advance()
        return "".join(chars)

    def parse_command(self) -> Command:
        """Parse separator-delimited words up to a pipe, redirect or terminator."""
        command = Command()
        self._skip_separators()

        while True:
            word = self.parse_word()
            if word:
                command.args.append(word)
            if not self._match(JobTokenType.SEPARATOR):
                break
            self._skip_separators()

        return command

    def parse_job(self) -> Job:
        """Parse a pipeline of commands with an optional redirect target."""
        job = Job()
        self._skip_separators()

        while True:
            command = self.parse_command()
            # Empty commands (e.g. "a || b" or a trailing pipe) are dropped
            if command.args:
                logger.debug("command %r at position %d", command, self.cursor.position)
                job.commands.append(command)
            if not self._match(JobTokenType.PIPE):
                break
            self.cursor.advance()  # consume |

        if self._match(JobTokenType.REDIRECT):
            self.cursor.advance()  # consume >
            self._skip_separators()
            job.redirect = self.parse_word()

        logger.debug("parsed %r from %r", job, self.source)
        return job


def parse_job(line: str) -> Job:
    """Parse one line into a Job. Never raises."""
    return JobParser(line).parse()

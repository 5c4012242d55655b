"""
Pytest configuration and shared fixtures.
"""

import io

import pytest

from rdparse.config import CalcConfig
from rdparse.lexer import CalcLexer
from rdparse.session import CalcSession


@pytest.fixture
def make_lexer():
    """Build a CalcLexer over a string."""
    return CalcLexer.from_string


@pytest.fixture
def run_session():
    """
    Run a CalcSession over the given input.

    Returns (exit_code, stdout_text, stderr_text, session).
    """

    def _run(source: str, **config):
        stdout = io.StringIO()
        stderr = io.StringIO()
        session = CalcSession(io.StringIO(source), stdout, stderr, CalcConfig(**config))
        exit_code = session.run()
        return exit_code, stdout.getvalue(), stderr.getvalue(), session

    return _run


@pytest.fixture
def pipeline_line() -> str:
    """Four-stage pipeline with irregular spacing and a redirect."""
    return "cmd1 aaa    bbb     | cmd2 |cmd3|cmd4 xxx>out.txt"

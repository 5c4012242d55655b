"""
rdparse - hand-written recursive descent parsers for two small grammars.

This package provides:
- a permissive job grammar splitting a shell-like line into piped
  commands and an optional output redirect
- an integer calculator evaluating ';'-terminated statements

Usage:
    from rdparse import parse_job, evaluate

    job = parse_job("ls -l | wc -l > count.txt")
    value = evaluate("(2+3)*4;")
"""

# Lazy imports keep `import rdparse` free of pandas and numpy
def __getattr__(name: str):
    if name in ("JobParser", "parse_job"):
        from rdparse.parser import job_parser
        return getattr(job_parser, name)
    if name in ("Command", "Job"):
        from rdparse.syntax_tree import nodes
        return getattr(nodes, name)
    if name == "Cursor":
        from rdparse.cursor import Cursor
        return Cursor
    if name in ("CalcLexer", "classify"):
        from rdparse import lexer
        return getattr(lexer, name)
    if name == "CalcEvaluator":
        from rdparse.parser.calc_parser import CalcEvaluator
        return CalcEvaluator
    if name in ("CalcSession", "StatementResult", "evaluate", "evaluate_all"):
        from rdparse import session
        return getattr(session, name)
    if name == "CalcConfig":
        from rdparse.config import CalcConfig
        return CalcConfig
    if name in ("CalcError", "LexerError", "ParserError", "CalcArithmeticError",
                "DivisionByZeroError", "IntegerOverflowError"):
        from rdparse import errors
        return getattr(errors, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "CalcArithmeticError",
    "CalcConfig",
    "CalcError",
    "CalcEvaluator",
    "CalcLexer",
    "CalcSession",
    "Command",
    "Cursor",
    "DivisionByZeroError",
    "IntegerOverflowError",
    "Job",
    "JobParser",
    "LexerError",
    "ParserError",
    "StatementResult",
    "classify",
    "evaluate",
    "evaluate_all",
    "parse_job",
]

__version__ = "0.1.0"

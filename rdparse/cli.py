"""
Command-line entry points.

rdparse-job   parse one job line (or the built-in samples) and print it
rdparse-calc  interactive calculator on stdin
"""

import argparse
import json
import logging
import sys

from rdparse.config import SUPPORTED_INT_BITS, CalcConfig
from rdparse.parser.job_parser import parse_job
from rdparse.session import CalcSession
from rdparse.syntax_tree.nodes import Job

SELF_TEST_LINES = [
    "cmd1 aaa    bbb     | cmd2 |cmd3|cmd4 xxx>out.txt",
    " cmd1 > out.txt",
    "ls -l | grep py | wc -l",
    "cat notes.txt || sort |",
    "echo hello >",
    "",
]


def configure_logging(verbosity: int) -> None:
    """-v enables INFO, -vv DEBUG; without it the library stays silent."""
    if verbosity <= 0:
        return
    level = logging.INFO if verbosity == 1 else logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def format_job(job: Job, fmt: str = "text") -> str:
    """Render a Job for display."""
    if fmt == "json":
        return json.dumps(job.to_dict())

    if fmt == "table":
        if not job.commands:
            table = "(no commands)"
        else:
            table = job.to_frame().to_string(index=False)
        redirect = job.redirect if job.redirect is not None else "(none)"
        return f"{table}\nredirect: {redirect}"

    lines = []
    for i, command in enumerate(job.commands):
        lines.append(f"command[{i}]: " + " ".join(repr(arg) for arg in command.args))
    if not job.commands:
        lines.append("(no commands)")
    if job.redirect is None:
        lines.append("redirect: (none)")
    else:
        lines.append(f"redirect: {job.redirect!r}")
    return "\n".join(lines)


def job_main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rdparse-job",
        description="Split a shell-like line into piped commands and a redirect target.",
    )
    parser.add_argument(
        "line",
        nargs="?",
        help="the line to parse; put -- before a line that starts with -",
    )
    parser.add_argument(
        "--self-test", action="store_true", help="parse the built-in sample lines instead"
    )
    parser.add_argument(
        "--format", choices=["text", "table", "json"], default="text", help="output format"
    )
    parser.add_argument("-v", "--verbose", action="count", default=0)
    args = parser.parse_args(argv)

    if args.self_test and args.line is not None:
        parser.error("LINE cannot be combined with --self-test")
    if not args.self_test and args.line is None:
        parser.error("expected exactly one LINE argument")

    configure_logging(args.verbose)

    lines = SELF_TEST_LINES if args.self_test else [args.line]
    for line in lines:
        if args.self_test:
            print(f"input: {line!r}")
        print(format_job(parse_job(line), args.format))
    return 0


def calc_main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rdparse-calc",
        description="Evaluate ';'-terminated integer expressions read from stdin.",
    )
    parser.add_argument(
        "--bits",
        type=int,
        choices=SUPPORTED_INT_BITS,
        default=32,
        help="width of the checked integer domain (default: 32)",
    )
    parser.add_argument("--prompt", default="Calc> ", help="prompt string")
    parser.add_argument(
        "--abort-on-error",
        action="store_true",
        help="stop at the first error instead of skipping to the next statement",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0)
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    config = CalcConfig(
        int_bits=args.bits,
        prompt=args.prompt,
        abort_on_error=args.abort_on_error,
    )
    session = CalcSession(sys.stdin, sys.stdout, sys.stderr, config)
    return session.run()

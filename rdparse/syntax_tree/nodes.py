"""
Node definitions for the job grammar.

A Job owns its Commands by value and a Command owns its argument strings.
The parser only ever appends commands that have at least one argument.
"""

from dataclasses import dataclass, field
from typing import Any

import pandas as pd


@dataclass
class Command:
    """One stage of a pipeline: argument strings in left-to-right order."""

    args: list[str] = field(default_factory=list)

    @property
    def name(self) -> str:
        """The program name, or "" for a command without arguments."""
        return self.args[0] if self.args else ""

    def to_line(self) -> str:
        return " ".join(self.args)

    def __len__(self) -> int:
        return len(self.args)

    def __repr__(self) -> str:
        return f"Command({self.args!r})"


@dataclass
class Job:
    """
    A parsed pipeline.

    Attributes:
        commands: Commands in pipeline order (first feeds the second, ...)
        redirect: Output target; None when no '>' was seen, "" when '>'
            was followed by no word
    """

    commands: list[Command] = field(default_factory=list)
    redirect: str | None = None

    @property
    def has_redirect(self) -> bool:
        return self.redirect is not None

    def to_line(self) -> str:
        """
        Render the job back to a line the parser accepts.

        Parsing the result yields an equivalent Job.
        """
        line = " | ".join(command.to_line() for command in self.commands)
        if self.redirect is not None:
            line = f"{line} > {self.redirect}".rstrip(" ")
        return line

    def to_dict(self) -> dict[str, Any]:
        return {
            "commands": [list(command.args) for command in self.commands],
            "redirect": self.redirect,
        }

    def to_frame(self) -> pd.DataFrame:
        """One row per pipeline stage, for tabular reporting."""
        return pd.DataFrame(
            {
                "stage": list(range(1, len(self.commands) + 1)),
                "command": [command.name for command in self.commands],
                "args": [" ".join(command.args[1:]) for command in self.commands],
                "argc": [len(command) for command in self.commands],
            },
            columns=["stage", "command", "args", "argc"],
        )

    def __repr__(self) -> str:
        return f"Job({self.commands!r}, redirect={self.redirect!r})"

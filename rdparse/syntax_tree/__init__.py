"""
Syntax tree package - result structures of the job grammar.
"""

from .nodes import Command, Job

__all__ = [
    "Command",
    "Job",
]

"""
Parser module for both grammars.

This module provides recursive descent parsers: JobParser builds Job
structures, CalcEvaluator evaluates arithmetic statements directly.
"""

from .calc_parser import CalcEvaluator
from .job_parser import JobParser, parse_job

__all__ = [
    "CalcEvaluator",
    "JobParser",
    "parse_job",
]

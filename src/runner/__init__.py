"""
Runner Package - Command line parsing, day selection and result reporting.

Public API:
    - ArgumentSpec / ArgumentArity: Flag descriptions
    - CliParser: Parses flags into Options
    - Options: What to run
    - Runner: Runs the selection and prints the report
    - create_sampler(): Memory sampler factory

Usage:
    from src.days import DayFactory
    from src.runner import CliParser, Runner, DEFAULT_ARGUMENTS

    options = CliParser(*DEFAULT_ARGUMENTS).get_options()
    Runner(2025, options, DayFactory("input")).run()
"""

from .arguments import ArgumentArity, ArgumentSpec, ParsedArgument, DEFAULT_ARGUMENTS
from .options import Options
from .parser import (
    CliParser,
    CliArgumentError,
    InvalidOptionError,
    InvalidValueError,
    parse_range_list,
    strip_day_prefix,
)
from .sampler import (
    ResourceSample,
    ResourceSampler,
    TracedMemorySampler,
    ProcessMemorySampler,
    create_sampler,
)
from .runner import Runner

__all__ = [
    # Argument model
    "ArgumentArity",
    "ArgumentSpec",
    "ParsedArgument",
    "DEFAULT_ARGUMENTS",
    # Parsing
    "CliParser",
    "CliArgumentError",
    "InvalidOptionError",
    "InvalidValueError",
    "parse_range_list",
    "strip_day_prefix",
    "Options",
    # Resources
    "ResourceSample",
    "ResourceSampler",
    "TracedMemorySampler",
    "ProcessMemorySampler",
    "create_sampler",
    # Orchestration
    "Runner",
]

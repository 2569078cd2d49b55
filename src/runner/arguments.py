"""
Argument Model - Declarative description of recognised command line flags.
"""

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import List, Union


class ArgumentArity(Enum):
    """How many values a flag accepts."""
    NO_VALUE = auto()        # Boolean switch, presence = enabled
    OPTIONAL_VALUE = auto()  # Takes an optional inline value (--day=1-5)


@dataclass(frozen=True)
class ArgumentSpec:
    """
    A recognised flag.

    Attributes:
        long_name: Name used as --long_name
        short_name: Single letter used as -s ("" = no short form)
        arity: Value arity of the flag
    """
    long_name: str
    short_name: str = ""
    arity: ArgumentArity = ArgumentArity.NO_VALUE

    @property
    def flags(self) -> List[str]:
        """Command line spellings of this flag."""
        flags = [f"--{self.long_name}"]
        if self.short_name:
            flags.append(f"-{self.short_name}")
        return flags


@dataclass(frozen=True)
class ParsedArgument:
    """
    A flag spec with its resolved value.

    Attributes:
        spec: The flag this value belongs to
        value: bool for NO_VALUE flags, list of ints for OPTIONAL_VALUE flags
    """
    spec: ArgumentSpec
    value: Union[bool, List[int], None] = None

    def with_value(self, value: Union[bool, List[int]]) -> "ParsedArgument":
        """Create a new instance with an updated value."""
        return replace(self, value=value)


DEFAULT_ARGUMENTS = (
    ArgumentSpec("day", "d", ArgumentArity.OPTIONAL_VALUE),
    ArgumentSpec("part", "p", ArgumentArity.OPTIONAL_VALUE),
    ArgumentSpec("examples", "e", ArgumentArity.NO_VALUE),
    ArgumentSpec("help", "h", ArgumentArity.NO_VALUE),
)

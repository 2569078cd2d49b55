"""
Argument Parser Module - Turns command line arguments into run Options.

Flags are described by ArgumentSpec and scanned with argparse. Values of
OPTIONAL_VALUE flags use a small range/list language:

    5           -> [5]
    1-3         -> [1, 2, 3]
    Day1-Day3   -> [1, 2, 3]   ("Day" prefix is case-insensitive)
    1-3,7,2     -> [1, 2, 2, 3, 7]   (sorted, duplicates kept)
"""

import argparse
import logging
import re
import sys
from typing import Dict, List, Optional, Sequence

from .arguments import ArgumentArity, ArgumentSpec, DEFAULT_ARGUMENTS, ParsedArgument
from .options import Options

logger = logging.getLogger(__name__)


DAY_PREFIX = re.compile(r"^day", re.IGNORECASE)


class CliArgumentError(ValueError):
    """Base class for fatal command line errors."""


class InvalidOptionError(CliArgumentError):
    """Raised for an unrecognised flag or stray argument."""

    def __init__(self, key: str):
        super().__init__(f"Invalid option: {key}")
        self.key = key


class InvalidValueError(CliArgumentError):
    """Raised when a range/list value cannot be parsed."""

    def __init__(self, value: str):
        super().__init__(f"Invalid value: {value}")
        self.value = value


def strip_day_prefix(value: str) -> str:
    """Strip a leading "Day" prefix ("Day17" -> "17", "17" -> "17")."""
    return DAY_PREFIX.sub("", value.strip())


def _parse_int(value: str) -> int:
    try:
        return int(strip_day_prefix(value))
    except ValueError:
        raise InvalidValueError(value) from None


def parse_range_list(raw: str) -> List[int]:
    """
    Expand a comma-separated list of numbers and inclusive ranges.

    A reversed range ("5-1") is expanded in ascending order.

    Args:
        raw: Value such as "1-5,9" or "Day3"

    Returns:
        Sorted list of ints, duplicates preserved

    Raises:
        InvalidValueError: If a chunk is not a number or range
    """
    result: List[int] = []

    for chunk in raw.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue

        if "-" in chunk:
            start_text, end_text = chunk.split("-", 1)
            start = _parse_int(start_text)
            end = _parse_int(end_text)
            low, high = min(start, end), max(start, end)
            result.extend(range(low, high + 1))
        else:
            result.append(_parse_int(chunk))

    result.sort()
    return result


class CliParser:
    """
    Parses command line flags described by a set of ArgumentSpec.

    Example:
        parser = CliParser(*DEFAULT_ARGUMENTS)
        options = parser.get_options(["--day=1-5", "-e"])
    """

    def __init__(self, *specs: ArgumentSpec):
        """
        Initialize the parser.

        Args:
            *specs: Recognised flags (default: DEFAULT_ARGUMENTS)

        Raises:
            ValueError: If a long or short name is used twice
        """
        self.specs = specs or DEFAULT_ARGUMENTS
        self._by_long_name: Dict[str, ArgumentSpec] = {}
        self._by_short_name: Dict[str, ArgumentSpec] = {}

        for spec in self.specs:
            if spec.long_name in self._by_long_name:
                raise ValueError(f"Duplicate option: {spec.long_name}")
            self._by_long_name[spec.long_name] = spec

            if spec.short_name:
                if spec.short_name in self._by_short_name:
                    raise ValueError(f"Duplicate short option: {spec.short_name}")
                self._by_short_name[spec.short_name] = spec

        self._parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        """Build the argparse scanner; every occurrence of a flag is recorded."""
        parser = argparse.ArgumentParser(add_help=False, allow_abbrev=False,
                                         exit_on_error=False)

        for spec in self.specs:
            if spec.arity is ArgumentArity.NO_VALUE:
                parser.add_argument(*spec.flags, dest=spec.long_name,
                                    action="count", default=0)
            else:
                parser.add_argument(*spec.flags, dest=spec.long_name,
                                    action="append", nargs="?", default=None)

        return parser

    def resolve(self, key: str) -> ArgumentSpec:
        """
        Find the spec for a long or short flag name.

        Raises:
            InvalidOptionError: If no spec matches
        """
        spec = self._by_long_name.get(key) or self._by_short_name.get(key)
        if spec is None:
            raise InvalidOptionError(key)
        return spec

    def parse(self, argv: Optional[Sequence[str]] = None) -> Dict[str, ParsedArgument]:
        """
        Parse arguments into resolved values keyed by long name.

        Flags that were not supplied keep a value of None.

        Args:
            argv: Arguments without the program name (default: sys.argv[1:])

        Returns:
            Dict of long name -> ParsedArgument

        Raises:
            InvalidOptionError: On an unrecognised flag
            InvalidValueError: On a malformed range/list value
        """
        argv = sys.argv[1:] if argv is None else list(argv)
        self._check_short_clusters(argv)

        try:
            namespace, extras = self._parser.parse_known_args(argv)
        except argparse.ArgumentError as e:
            raise CliArgumentError(str(e)) from None

        if extras:
            token = extras[0]
            raise InvalidOptionError(token.lstrip("-").split("=", 1)[0] or token)

        result = {spec.long_name: ParsedArgument(spec) for spec in self.specs}

        for key, raw in vars(namespace).items():
            spec = self.resolve(key)

            if spec.arity is ArgumentArity.NO_VALUE:
                if raw:
                    result[key] = result[key].with_value(True)
            elif raw is not None:
                result[key] = result[key].with_value(self._parse_value(raw))

        values = {name: argument.value for name, argument in result.items()}
        logger.debug(f"Parsed arguments: {values}")
        return result

    def _check_short_clusters(self, argv: List[str]) -> None:
        """Every letter of a combined short flag (-eh) must be a known flag."""
        for token in argv:
            if token == "--":
                break
            if len(token) <= 2 or not token.startswith("-") or token.startswith("--"):
                continue
            for letter in token[1:]:
                spec = self._by_short_name.get(letter)
                if spec is None:
                    raise InvalidOptionError(letter)
                # The rest of the token is the inline value of this flag
                if spec.arity is ArgumentArity.OPTIONAL_VALUE:
                    break

    def _parse_value(self, raw: List[Optional[str]]) -> List[int]:
        """A single inline value is expanded; a bare or repeated flag is empty."""
        if len(raw) != 1 or not isinstance(raw[0], str):
            return []
        return parse_range_list(raw[0])

    def get_options(self, argv: Optional[Sequence[str]] = None) -> Options:
        """
        Parse arguments into run Options.

        Args:
            argv: Arguments without the program name (default: sys.argv[1:])

        Returns:
            Options for the runner
        """
        parsed = self.parse(argv)

        def value(name: str):
            argument = parsed.get(name)
            return None if argument is None else argument.value

        return Options(
            days=value("day"),
            parts=value("part"),
            with_examples=bool(value("examples")),
            wants_help=bool(value("help")),
        )

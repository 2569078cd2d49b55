"""
Day Factory Module - Registry, instantiation and discovery of puzzle days.
"""

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Type, Union

from .base import Day

logger = logging.getLogger(__name__)


# Number of puzzles in the calendar
MAX_DAYS = 25

# Input files are named positionally by day number
INPUT_FORMAT = "day{}.txt"

# Global registry of days, keyed by day number
_DAYS: Dict[int, Type[Day]] = {}


class DayError(Exception):
    """Base class for day resolution errors."""

    def __init__(self, message: str, day_id: int):
        super().__init__(message)
        self.day_id = day_id


class InputNotFoundError(DayError):
    """Raised when the input file for a day does not exist."""

    def __init__(self, path: Path, day_id: int):
        super().__init__(f"Input file not found: {path}", day_id)
        self.path = path


class UnitNotFoundError(DayError):
    """Raised when no solver is registered for a day."""

    def __init__(self, day_id: int):
        super().__init__(f"Missing day class: Day{day_id}", day_id)


def register_day(cls: Type[Day]) -> Type[Day]:
    """
    Decorator to register a day class.

    Usage:
        @register_day
        class Day7(Day):
            day_id = 7
            name = "Day7"
            ...

    Args:
        cls: Day class to register

    Returns:
        The same class (for decorator chaining)
    """
    _DAYS[cls.day_id] = cls
    return cls


def registered_days() -> List[int]:
    """
    Get the sorted list of registered day numbers.

    Returns:
        List of day numbers with a registered solver
    """
    return sorted(_DAYS.keys())


class DayFactory:
    """
    Creates day instances from their registered class and input file.

    Input existence is checked before class existence, so an unsolved day
    without an input file reports a missing input.
    """

    def __init__(self, input_dir: Union[str, Path] = "input",
                 registry: Optional[Dict[int, Type[Day]]] = None):
        """
        Initialize the factory.

        Args:
            input_dir: Directory holding dayN.txt input files
            registry: Day classes keyed by number (default: global registry)
        """
        self.input_dir = Path(input_dir)
        self.registry = _DAYS if registry is None else registry

    def input_path(self, day_id: int) -> Path:
        """Path of the input file for a day."""
        return self.input_dir / INPUT_FORMAT.format(day_id)

    def create(self, day_id: int) -> Day:
        """
        Create a day instance loaded with its input.

        Args:
            day_id: Day number

        Returns:
            Day instance

        Raises:
            InputNotFoundError: If the input file does not exist
            UnitNotFoundError: If no class is registered for the day
        """
        path = self.input_path(day_id)
        if not path.is_file():
            raise InputNotFoundError(path, day_id)

        if day_id not in self.registry:
            raise UnitNotFoundError(day_id)

        lines = path.read_text(encoding="utf-8", errors="replace").splitlines()
        logger.debug(f"Loaded {len(lines)} input lines for day {day_id} from {path}")
        return self.registry[day_id](lines)

    def is_available(self, day_id: int) -> bool:
        """
        Check whether a day can be created.

        Args:
            day_id: Day number

        Returns:
            True if the input file exists and a class is registered
        """
        return self.input_path(day_id).is_file() and day_id in self.registry

    def all_available(self) -> "AvailableDays":
        """
        Lazily create every available day in order.

        Returns:
            Iterator stopping at the first unavailable day
        """
        return AvailableDays(self)


class AvailableDays(Iterator[Day]):
    """
    Single-pass iterator over days 1..MAX_DAYS.

    Availability is checked before each day is created. Iteration stops at
    the first gap and stays exhausted; later days are never reached.
    """

    def __init__(self, factory: DayFactory, max_days: int = MAX_DAYS):
        self.factory = factory
        self.max_days = max_days
        self._next_id = 1
        self._exhausted = False

    def __iter__(self) -> "AvailableDays":
        return self

    def __next__(self) -> Day:
        if self._exhausted:
            raise StopIteration

        day_id = self._next_id
        day: Optional[Day] = None
        if day_id <= self.max_days and self.factory.is_available(day_id):
            try:
                day = self.factory.create(day_id)
            except DayError as e:
                logger.debug(f"Day {day_id} failed to load: {e}")

        if day is None:
            logger.debug(f"No day available at {day_id}, discovery finished")
            self._exhausted = True
            raise StopIteration

        self._next_id += 1
        return day

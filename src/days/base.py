"""
Base Day Module - Abstract base class for puzzle day solvers.
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Sequence, Union


# A day input is either the lines of an input file or a raw example string
DayInput = Union[str, Sequence[str]]
Answer = Union[int, str, None]
Example = Union[str, List[str]]


class Day(ABC):
    """
    Abstract base class for all puzzle days.

    Subclasses must implement solve_part1() and solve_part2() and define
    the day_id, name and EXAMPLE1 class attributes. EXAMPLE2 is optional
    and falls back to EXAMPLE1.

    Attributes:
        day_id: Calendar number of the puzzle (1-25)
        name: Short display name shown in the report (e.g. "Day1")
        EXAMPLE1: Worked example for part 1, or a list of examples
        EXAMPLE2: Worked example for part 2 (None = reuse EXAMPLE1)
    """
    day_id: int = 0
    name: str = "Day"
    EXAMPLE1: Example = ""
    EXAMPLE2: Optional[Example] = None

    def __init__(self, input: DayInput):
        """
        Initialize the day with its full input.

        Args:
            input: Input lines (trailing newlines stripped) or a raw string
        """
        self.input = input
        self._long_running_callback: Optional[Callable[[], None]] = None

    @abstractmethod
    def solve_part1(self, input: DayInput) -> Answer:
        """
        Solve part 1 for the given input.

        Args:
            input: Real input lines or an example string

        Returns:
            Puzzle answer
        """
        pass

    @abstractmethod
    def solve_part2(self, input: DayInput) -> Answer:
        """
        Solve part 2 for the given input.

        Args:
            input: Real input lines or an example string

        Returns:
            Puzzle answer
        """
        pass

    def get_example1(self) -> Example:
        """Get the worked example for part 1."""
        return self.EXAMPLE1

    def get_example2(self) -> Example:
        """Get the worked example for part 2, falling back to part 1's."""
        if self.EXAMPLE2 is None:
            return self.EXAMPLE1
        return self.EXAMPLE2

    def identify(self) -> str:
        """Display name of this day."""
        return self.name

    def parse_input(self, input: DayInput) -> List[str]:
        """
        Normalize input into a list of lines.

        Override to customise parsing for a specific day.

        Args:
            input: Input lines or a raw multi-line string

        Returns:
            List of lines
        """
        if isinstance(input, str):
            return input.split("\n")
        return list(input)

    def set_long_running_callback(self, callback: Callable[[], None]) -> "Day":
        """
        Set a callback used to report progress during expensive work.

        Args:
            callback: Called with no arguments from report_long_running()

        Returns:
            self (for chaining)
        """
        self._long_running_callback = callback
        return self

    def report_long_running(self) -> None:
        """Invoke the long running callback, if one is set."""
        if self._long_running_callback is not None:
            self._long_running_callback()

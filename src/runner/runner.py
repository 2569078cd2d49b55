"""
Runner Module - Runs the selected days and prints results with resource usage.

Days and parts run strictly one after another so each memory and time
reading belongs to a single part.
"""

import logging
import time
from typing import Callable, Iterator, List, Optional, TextIO

from src.days import Day, DayFactory
from src.days.base import Answer, DayInput, Example

from .options import Options
from .report import DIM, GREEN, BOLD_RED, RESET, format_report
from .sampler import ResourceSampler, TracedMemorySampler

logger = logging.getLogger(__name__)


PARTS = (1, 2)

BOLD_UNDERLINE = "\033[1;4m"
BOX_GREEN = "\033[32m"
LABEL = "\033[0;37m"
VALUE = "\033[2;37m"
BOX_RESET = "\033[0;32m"

HELP_TEXT = """\
Advent of Code {year} Python runner.

Usage:
 python main.py <options>
    -d,--day=PATTERN          Only run days that match pattern (range or comma-separated list)
    -p,--part=PATTERN         Only run parts that match pattern (range or comma-separated list)
    -e,--examples             Runs the examples
    -h,--help                 This help message

Examples:
 python main.py                     Run all days
 python main.py --day=15 -e         Run day 15 with its examples
 python main.py --day=1-5,9         Run days 1-5 and 9
 python main.py --day=6,7 --part=2  Run part 2 of days 6 and 7
"""


class Runner:
    """
    Orchestrates a run: banner, each selected day, total time.

    Attributes:
        year: Puzzle year shown in the banner
        options: Selection parsed from the command line
        factory: Creates days and discovers available ones
        sampler: Source of memory readings
        clock: Monotonic time source in seconds
    """

    def __init__(
        self,
        year: int,
        options: Options,
        factory: Optional[DayFactory] = None,
        sampler: Optional[ResourceSampler] = None,
        clock: Callable[[], float] = time.perf_counter,
        stream: Optional[TextIO] = None,
    ):
        """
        Initialize the runner.

        Args:
            year: Puzzle year
            options: What to run
            factory: Day factory (default: reads ./input)
            sampler: Memory sampler (default: tracemalloc)
            clock: Time source, injectable for deterministic output
            stream: Output stream (default: stdout)
        """
        self.year = year
        self.options = options
        self.factory = factory or DayFactory()
        self.sampler = sampler or TracedMemorySampler()
        self.clock = clock
        self.stream = stream
        self._part_start = 0.0

    def run(self) -> None:
        """
        Run everything selected, or print help.

        Raises:
            DayError: If an explicitly requested day cannot be created
        """
        if self.options.wants_help:
            self.show_help()
        else:
            self.run_days()

    def run_days(self) -> None:
        """Run all selected days between the banner and the total time."""
        self.show_start()
        total_start = self.clock()

        for day in self.selected_days():
            self.run_day(day)

        self.show_total_time(total_start)

    def selected_days(self) -> Iterator[Day]:
        """
        Days to run, created one at a time.

        Explicitly requested days propagate factory errors. Without a
        selection, every available day runs up to the first gap.
        """
        if self.options.days is not None:
            for day_id in self.options.days:
                yield self.factory.create(day_id)
        else:
            yield from self.factory.all_available()

    def run_day(self, day: Day) -> None:
        """Run a day's examples (if requested) and then its selected parts."""
        logger.info(f"Running {day.identify()}")
        day.set_long_running_callback(self.report_long_running)

        if self.options.with_examples:
            self.run_examples(day)

        self._print(f"{BOLD_UNDERLINE}{day.identify()}{RESET}")
        for part in PARTS:
            if self.options.should_run_part(part):
                self.run_part(day, part)

    def run_examples(self, day: Day) -> None:
        """Run the worked examples of every selected part."""
        self._print(f"{BOLD_UNDERLINE}{day.identify()} Examples{RESET}")
        for part in PARTS:
            if self.options.should_run_part(part):
                self.run_part_examples(day, part)

    def run_part(self, day: Day, part: int) -> None:
        """
        Solve one part against the day's real input.

        A solver exception is printed inline so the remaining parts and
        days still run.
        """
        start = self._part_start = self.clock()
        self._print(f"    Part{part} {self._solve(day, part, day.input)}")
        self.report(start)

    def run_part_examples(self, day: Day, part: int) -> None:
        """
        Solve one part against its worked example(s).

        A list of examples is labelled A, B, C... in order.
        """
        start = self._part_start = self.clock()
        examples = self.example_for(day, part)

        if isinstance(examples, (list, tuple)):
            for i, example in enumerate(examples):
                label = chr(ord("A") + i)
                self._print(f"    Part{part}{label} {self._solve(day, part, example)}")
        else:
            self._print(f"    Part{part} Example {self._solve(day, part, examples)}")

        self.report(start)

    def solver_for(self, day: Day, part: int) -> Callable[[DayInput], Answer]:
        """
        Get the solve method for a part.

        Raises:
            ValueError: If the part is not 1 or 2
        """
        if part == 1:
            return day.solve_part1
        if part == 2:
            return day.solve_part2
        raise ValueError(f"Unknown part: {part}")

    def example_for(self, day: Day, part: int) -> Example:
        """
        Get the worked example(s) for a part.

        Raises:
            ValueError: If the part is not 1 or 2
        """
        if part == 1:
            return day.get_example1()
        if part == 2:
            return day.get_example2()
        raise ValueError(f"Unknown part: {part}")

    def _solve(self, day: Day, part: int, input: DayInput) -> str:
        """Run a solver and format its answer, or the error it raised."""
        solve = self.solver_for(day, part)
        try:
            result = solve(input)
        except Exception as e:
            logger.debug(f"{day.identify()} part {part} failed", exc_info=True)
            return f"{BOLD_RED}Error: {e}{RESET}"

        return f"{GREEN}{'' if result is None else result}{RESET}"

    def report(self, start: float) -> None:
        """Print memory usage and time elapsed since start."""
        elapsed = self.clock() - start
        sample = self.sampler.sample()
        logger.debug(f"current={sample.current} peak={sample.peak} elapsed={elapsed:.6f}")
        self._print(format_report(sample.current, sample.peak, elapsed))

    def report_long_running(self) -> None:
        """Interim report a day can trigger during expensive work."""
        self.report(self._part_start)

    def show_start(self) -> None:
        """Print the banner with the current selection."""
        title = f" Advent of Code {self.year} Python"
        with_examples = "yes" if self.options.with_examples else "no"
        lines: List[str] = [
            f"{BOX_GREEN}---------------------------------------------",
            f"|{RESET}{title:<41}{BOX_GREEN}  |",
            f"|{RESET}{' ' * 41}{BOX_GREEN}  |",
            f"|{LABEL} Days: {VALUE}{self.options.days_label:<34} {BOX_RESET} |",
            f"|{LABEL} Part: {VALUE}{self.options.parts_label:<34} {BOX_RESET} |",
            f"|{LABEL} With Examples: {VALUE}{with_examples:<25} {BOX_RESET} |",
            f"---------------------------------------------{RESET}",
            "",
        ]
        self._print("\n".join(lines))

    def show_help(self) -> None:
        """Print usage text."""
        self._print(HELP_TEXT.format(year=self.year))

    def show_total_time(self, total_start: float) -> None:
        """Print the time taken by the whole run."""
        total = f"{self.clock() - total_start:.5f}s"
        lines = [
            f"{BOX_GREEN}---------------------------------------------",
            f"|{RESET} Total time: {DIM}{total:<28}{RESET}{BOX_GREEN}  |",
            f"---------------------------------------------{RESET}",
        ]
        self._print("\n".join(lines))

    def _print(self, text: str) -> None:
        print(text, file=self.stream)

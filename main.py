"""
Advent of Code Runner - Entry Point

Runs the selected puzzle days and reports answers, memory and time.

Example:
    python main.py                      # Run all days
    python main.py --day=15 --examples  # Run day 15 with its examples
    python main.py --day=1-5,9          # Run days 1-5 and 9
    python main.py --day=6,7 --part=2   # Run part 2 of days 6 and 7
"""

import sys
import logging
from typing import Any, Dict, List, Optional

from src.days import DayError, DayFactory
from src.runner import (
    CliArgumentError,
    CliParser,
    DEFAULT_ARGUMENTS,
    Runner,
    create_sampler,
)
from src.settings import load_settings


logger = logging.getLogger(__name__)


def setup_logging(settings: Dict[str, Any]):
    """
    Configure logging - console at the configured level, file at DEBUG.

    The console stays quiet by default so the report is readable.
    """
    console = logging.StreamHandler()
    console.setLevel(settings.get("log_level", "WARNING"))

    handlers: List[logging.Handler] = [console]
    if settings.get("log_file"):
        file_handler = logging.FileHandler(settings["log_file"], mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        handlers.append(file_handler)

    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the selected days."""
    settings = load_settings()
    setup_logging(settings)

    try:
        options = CliParser(*DEFAULT_ARGUMENTS).get_options(argv)
    except CliArgumentError as e:
        logger.info(f"Argument error: {e}")
        print(e)
        return 2

    runner = Runner(
        year=settings["year"],
        options=options,
        factory=DayFactory(settings["input_dir"]),
        sampler=create_sampler(settings["memory_source"]),
    )

    try:
        runner.run()
    except DayError as e:
        logger.info(f"Day {e.day_id} could not be loaded: {e}")
        print(e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

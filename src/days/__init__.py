"""
Days Package - Pluggable puzzle solvers, one per calendar day.

Each day subclasses Day, defines its day_id, name and examples, and is
registered with @register_day. The factory pairs a registered day with its
input file (input/dayN.txt).

Public API:
    - Day: Abstract base for day solvers
    - DayFactory: Creates days and discovers the available ones
    - register_day(): Registration decorator
    - registered_days(): List registered day numbers
    - DayError, InputNotFoundError, UnitNotFoundError: Resolution errors

Usage:
    from src.days import DayFactory

    factory = DayFactory("input")
    day = factory.create(1)
    print(day.solve_part1(day.input))

    # All days solved so far, stopping at the first gap
    for day in factory.all_available():
        print(day.identify())
"""

from .base import Day
from .factory import (
    MAX_DAYS,
    AvailableDays,
    DayError,
    DayFactory,
    InputNotFoundError,
    UnitNotFoundError,
    register_day,
    registered_days,
)

# Import days to register them
from . import day01

__all__ = [
    "Day",
    "DayFactory",
    "AvailableDays",
    "MAX_DAYS",
    "DayError",
    "InputNotFoundError",
    "UnitNotFoundError",
    "register_day",
    "registered_days",
]

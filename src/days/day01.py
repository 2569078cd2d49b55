"""
Day 1 - Dial rotations counting how often the dial points at zero.
"""

from typing import List, Tuple

from .base import Day, DayInput
from .factory import register_day


# Dial positions run 0..DIAL_SIZE-1 and wrap around
DIAL_SIZE = 100
DIAL_START = 50


@register_day
class Day1(Day):
    """
    Dial puzzle: each instruction rotates the dial left (L) or right (R)
    by a number of clicks, starting from position 50.

    Part 1 counts rotations that end on zero. Part 2 counts every click
    that passes through zero, including those in the middle of a rotation.
    """
    day_id = 1
    name = "Day1"
    EXAMPLE1 = "\n".join([
        "L68",
        "L30",
        "R48",
        "L5",
        "R60",
        "L55",
        "L1",
        "L99",
        "R14",
        "L82",
    ])

    def solve_part1(self, input: DayInput) -> int:
        dial = DIAL_START
        zero_count = 0

        for direction, distance in self.parse_rotations(input):
            dial += distance if direction == "R" else -distance
            dial %= DIAL_SIZE
            if dial == 0:
                zero_count += 1

        return zero_count

    def solve_part2(self, input: DayInput) -> int:
        dial = DIAL_START
        zero_count = 0

        for direction, distance in self.parse_rotations(input):
            if direction == "R":
                zero_count += (dial + distance) // DIAL_SIZE
                dial = (dial + distance) % DIAL_SIZE
            else:
                # Starting on zero, the first pass through zero is a full turn away
                first_zero = dial if dial > 0 else DIAL_SIZE
                if distance >= first_zero:
                    zero_count += (distance - first_zero) // DIAL_SIZE + 1
                dial = (dial - distance) % DIAL_SIZE

        return zero_count

    def parse_rotations(self, input: DayInput) -> List[Tuple[str, int]]:
        """
        Parse rotation instructions like "L68" into (direction, distance).

        Args:
            input: Input lines or example string

        Returns:
            List of (direction, distance) tuples

        Raises:
            ValueError: If a line is not a valid rotation
        """
        rotations = []
        for line in self.parse_input(input):
            line = line.strip()
            if not line:
                continue
            direction = line[0]
            if direction not in ("L", "R"):
                raise ValueError(f"Invalid rotation: {line}")
            rotations.append((direction, int(line[1:])))
        return rotations

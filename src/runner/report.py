"""
Report Formatting Module - Human readable metrics and severity colouring.
"""

import math
from enum import Enum, auto
from typing import Tuple, Union

Number = Union[int, float]


# (warn, error) thresholds per metric
MEMORY_THRESHOLDS: Tuple[int, int] = (900_000, 2_000_000)
PEAK_MEMORY_THRESHOLDS: Tuple[int, int] = (50_000_000, 100_000_000)
TIME_THRESHOLDS: Tuple[float, float] = (0.1, 0.75)

BYTE_UNITS = ["b", "kb", "mb", "gb", "tb", "pb", "eb", "zb", "yb"]
BYTE_DECIMALS = [0, 0, 1, 2, 2, 3, 3, 4, 4]

# ANSI escapes
RESET = "\033[0m"
DIM = "\033[0;2m"
BOLD_RED = "\033[1;31m"
RED = "\033[0;31m"
GREEN = "\033[1;32m"


class Severity(Enum):
    """How alarming a metric is."""
    NORMAL = auto()
    WARN = auto()
    ERROR = auto()


def classify(metric: Number, thresholds: Tuple[Number, Number]) -> Severity:
    """
    Classify a metric against its (warn, error) thresholds.

    Args:
        metric: Measured value
        thresholds: Values at which the metric becomes WARN and ERROR

    Returns:
        Severity band
    """
    warn, error = thresholds
    if metric >= error:
        return Severity.ERROR
    if metric >= warn:
        return Severity.WARN
    return Severity.NORMAL


def colorise(text: str, severity: Severity) -> str:
    """Wrap text in the emphasis for its severity, returning to dim afterwards."""
    if severity is Severity.ERROR:
        return f"{RED}{text}{DIM}"
    if severity is Severity.WARN:
        return f"{BOLD_RED}{text}{DIM}"
    return text


def human_readable_bytes(num_bytes: int) -> str:
    """
    Format a byte count with binary-prefixed units.

    Examples:
        512 -> "512b", 2048 -> "2kb", 5_000_000 -> "4.8mb"
    """
    if num_bytes <= 0:
        return "0b"

    tier = min(int(math.floor(math.log(num_bytes, 1024))), len(BYTE_UNITS) - 1)
    # Float log can land either side of an exact power of 1024
    if tier + 1 < len(BYTE_UNITS) and num_bytes >= 1024 ** (tier + 1):
        tier += 1
    elif tier > 0 and num_bytes < 1024 ** tier:
        tier -= 1

    value = num_bytes / (1024 ** tier)
    return f"{value:.{BYTE_DECIMALS[tier]}f}{BYTE_UNITS[tier]}"


def format_time(seconds: float) -> str:
    """Format seconds with fewer decimals as the magnitude grows."""
    if seconds < 10:
        return f"{seconds:.5f}s"
    if seconds < 100:
        return f"{seconds:.4f}s"
    if seconds < 1000:
        return f"{seconds:.3f}s"
    return f"{seconds:.2f}s"


def format_report(current: int, peak: int, elapsed: float) -> str:
    """
    Build the resource line printed after each part.

    Args:
        current: Current memory usage in bytes
        peak: Peak memory usage in bytes
        elapsed: Seconds since the part started

    Returns:
        Formatted "Mem[...] Peak[...] Time[...]" line (with ANSI codes)
    """
    mem = colorise(human_readable_bytes(current), classify(current, MEMORY_THRESHOLDS))
    mem_peak = colorise(human_readable_bytes(peak), classify(peak, PEAK_MEMORY_THRESHOLDS))
    time_text = colorise(format_time(elapsed), classify(elapsed, TIME_THRESHOLDS))
    return f"      {DIM}Mem[{mem}] Peak[{mem_peak}] Time[{time_text}]{RESET}"

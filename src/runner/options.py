"""
Options Module - Run selection produced from the command line.
"""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class Options:
    """
    What to run.

    Attributes:
        days: Day numbers to run (None = all available days)
        parts: Parts to run (None = both parts)
        with_examples: Also run each day's worked examples
        wants_help: Print usage and run nothing
    """
    days: Optional[List[int]] = None
    parts: Optional[List[int]] = None
    with_examples: bool = False
    wants_help: bool = False

    @property
    def days_label(self) -> str:
        """Days selection for display."""
        if self.days is None:
            return "all"
        return ",".join(str(d) for d in self.days)

    @property
    def parts_label(self) -> str:
        """Parts selection for display."""
        if self.parts is None:
            return "1,2"
        return ",".join(str(p) for p in self.parts)

    def should_run_part(self, part: int) -> bool:
        """Check if a part is selected."""
        return self.parts is None or part in self.parts

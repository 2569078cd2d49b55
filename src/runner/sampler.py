"""
Resource Sampler Module - Current and peak memory readings for the report.

Two sources are available:
    - "traced": Python heap allocations via tracemalloc (default)
    - "process": Resident set size of the whole process via psutil
"""

import logging
import tracemalloc
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Optional, Type

import psutil

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResourceSample:
    """
    Memory reading.

    Attributes:
        current: Bytes in use now
        peak: Highest bytes in use since sampling began
    """
    current: int
    peak: int


class ResourceSampler(ABC):
    """Abstract source of memory readings."""
    name: str = "base"

    @abstractmethod
    def sample(self) -> ResourceSample:
        """Take a memory reading."""
        pass


class TracedMemorySampler(ResourceSampler):
    """
    Python heap usage tracked by tracemalloc.

    Tracing is started on construction if it is not already running, so
    the peak covers everything allocated after the sampler was created.
    Tracing slows allocation-heavy code, so Time[...] readings run higher
    than with the "process" sampler.
    """
    name = "traced"

    def __init__(self):
        if not tracemalloc.is_tracing():
            tracemalloc.start()
            logger.debug("tracemalloc started")

    def sample(self) -> ResourceSample:
        current, peak = tracemalloc.get_traced_memory()
        return ResourceSample(current=current, peak=peak)


class ProcessMemorySampler(ResourceSampler):
    """
    Whole-process resident memory read through psutil.

    Uses the platform's peak working set where psutil reports one
    (Windows), otherwise the highest RSS this sampler has observed.
    """
    name = "process"

    def __init__(self, process: Optional[psutil.Process] = None):
        self.process = process or psutil.Process()
        self._peak = 0

    def sample(self) -> ResourceSample:
        info = self.process.memory_info()
        self._peak = max(self._peak, info.rss, getattr(info, "peak_wset", 0))
        return ResourceSample(current=info.rss, peak=self._peak)


_SAMPLERS: Dict[str, Type[ResourceSampler]] = {
    TracedMemorySampler.name: TracedMemorySampler,
    ProcessMemorySampler.name: ProcessMemorySampler,
}


def create_sampler(kind: str = "traced") -> ResourceSampler:
    """
    Create a sampler by name.

    Args:
        kind: "traced" or "process"

    Returns:
        ResourceSampler instance

    Raises:
        ValueError: If the sampler name is unknown
    """
    if kind not in _SAMPLERS:
        available = ", ".join(_SAMPLERS.keys())
        raise ValueError(f"Unknown memory source: {kind}. Available: {available}")
    return _SAMPLERS[kind]()

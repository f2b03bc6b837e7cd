"""
Utility functions for path finding operations.
"""

import gc
import logging
import math
import os
import time
from typing import Dict, List, Optional

import psutil

from ..exceptions import GraphOperationError, NegativeCycleError
from .models import Distance

logger = logging.getLogger(__name__)


def reconstruct_path(
    predecessors: Dict[int, int], start: int, end: int, distance: Distance
) -> List[int]:
    """
    Walk the predecessor map back from ``end`` to ``start``.

    Returns an empty list when the distance is infinite in either direction:
    the target is unreachable or sits behind a negative cycle.
    """
    if not math.isfinite(distance):
        return []

    path = [end]
    current = end
    while current != start:
        try:
            current = predecessors[current]
        except KeyError:
            raise GraphOperationError(
                f"Predecessor chain from {end} is broken at {current}"
            ) from None
        path.append(current)
        if len(path) > len(predecessors) + 1:
            raise GraphOperationError(f"Predecessor chain from {end} loops")
    path.reverse()
    return path


def reconstruct_path_strict(
    predecessors: Dict[int, int], start: int, end: int, distance: Distance
) -> List[int]:
    """Like ``reconstruct_path`` but raise instead of returning an empty path."""
    if distance == -math.inf:
        raise NegativeCycleError(f"Vertex {end} is affected by a negative cycle")
    if distance == math.inf:
        raise GraphOperationError(f"No path exists between {start} and {end}")
    return reconstruct_path(predecessors, start, end, distance)


class MemoryManager:
    """Memory guard for search loops.

    Inactive unless a budget is given. When active, the resident set size of
    the process is sampled at most every ``check_interval`` seconds and a
    ``MemoryError`` is raised once growth since the search started exceeds
    the budget.
    """

    def __init__(self, max_memory_mb: Optional[float] = None, check_interval: float = 0.1):
        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        self.start_memory = get_memory_usage() if self.max_memory else 0
        self._peak_memory = self.start_memory
        self._last_check = time.time()
        self._check_interval = check_interval

    @property
    def active(self) -> bool:
        return self.max_memory is not None

    def check_memory(self) -> None:
        """Check if memory usage exceeds limit."""
        if not self.max_memory:
            return

        current_time = time.time()
        if current_time - self._last_check < self._check_interval:
            return
        self._last_check = current_time

        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)

        if current - self.start_memory > self.max_memory:
            # Try to reclaim memory
            gc.collect()
            current = get_memory_usage()

            if current - self.start_memory > self.max_memory:
                logger.error(
                    f"Search memory {current / 1024 / 1024:.1f}MB over budget "
                    f"{self.max_memory / 1024 / 1024:.1f}MB"
                )
                raise MemoryError(
                    f"Memory usage {current / 1024 / 1024:.1f}MB exceeds "
                    f"limit of {self.max_memory / 1024 / 1024:.1f}MB"
                )

    @property
    def peak_memory_mb(self) -> float:
        return self._peak_memory / 1024 / 1024


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss

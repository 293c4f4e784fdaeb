"""
Opt-in timing of parser hot paths.

Set JTREE_PROFILE in the environment before import to record per-handler
call counts, elapsed nanoseconds and characters consumed. Without it every
ProfileContext is a no-op.
"""

import logging
import os
import time
from dataclasses import dataclass
from typing import Any

log = logging.getLogger(__name__)

PROFILE_HOT_PATHS = __debug__ and "JTREE_PROFILE" in os.environ


@dataclass
class HotPathStats:
    """Statistics for profiling hot paths during parsing."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0

    def record_call(self, duration_ns: int, chars: int = 0) -> None:
        """Records a function call with timing and character processing info."""
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars


_hot_path_stats: dict[str, HotPathStats] = {}


if PROFILE_HOT_PATHS:

    class ProfileContext:
        """
        Times the enclosed block under func_name.

        chars_at is a callable returning the cursor position, sampled on
        entry and exit to count the characters the handler consumed.
        """

        def __init__(self, func_name: str, chars_at: Any = None):
            self.func_name = func_name
            self.chars_at = chars_at
            self.start_time = 0
            self.start_pos = 0

        def __enter__(self) -> "ProfileContext":
            if self.chars_at is not None:
                self.start_pos = self.chars_at()
            self.start_time = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self.start_time
            chars = 0
            if self.chars_at is not None:
                chars = self.chars_at() - self.start_pos
            stats = _hot_path_stats.get(self.func_name)
            if stats is None:
                stats = _hot_path_stats[self.func_name] = HotPathStats(
                    self.func_name
                )
            stats.record_call(duration, chars)

else:

    class ProfileContext:  # type: ignore[no-redef]
        def __init__(self, func_name: str, chars_at: Any = None) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass


def get_hot_path_stats() -> dict[str, HotPathStats]:
    """Returns current profiling statistics."""
    return _hot_path_stats.copy()


def clear_hot_path_stats() -> None:
    _hot_path_stats.clear()


def log_hot_path_stats() -> None:
    """Emits one DEBUG line per profiled handler, slowest first."""
    ordered = sorted(
        _hot_path_stats.values(), key=lambda s: s.total_time_ns, reverse=True
    )
    for stats in ordered:
        log.debug(
            "%s: %d calls, %d ns, %d chars",
            stats.function_name,
            stats.call_count,
            stats.total_time_ns,
            stats.chars_processed,
        )

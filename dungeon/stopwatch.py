"""Frame-based timers driven by the game's time unit."""

from __future__ import annotations

from typing import Any


class Stopwatch:
    """Counts game time up to ``stop_time``, optionally restarting itself.

    ``clock`` is any object with a ``time_unit`` attribute giving the
    length of the current frame.
    """

    def __init__(self, stop_time: float, clock: Any, is_loop: bool) -> None:
        self.stop_time = stop_time
        self.current_time = 0.0
        self.clock = clock
        self.is_loop = is_loop
        self.is_stop = not is_loop

    def update(self) -> bool:
        """Advance one frame; False when stopped or when the time ran out."""
        if self.is_stop:
            return False
        if self.current_time + self.clock.time_unit >= self.stop_time:
            if not self.is_loop:
                self.is_stop = True
            self.current_time = 0.0
            return False
        self.current_time += self.clock.time_unit
        return True
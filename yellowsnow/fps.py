"""Frame pacing with carried-over delay and an optional FPS printout."""

from __future__ import annotations

import sys
from typing import Callable, TextIO

import pygame

from .settings import TARGET_FPS

_UINT32_MAX = 0xFFFFFFFF


class FrameClock:
    """Keeps frames close to a target rate and reports each frame's duration."""

    def __init__(
        self,
        target_fps: float = TARGET_FPS,
        ticks: Callable[[], int] | None = None,
        sleep: Callable[[int], object] | None = None,
        out: TextIO | None = None,
    ):
        if target_fps <= 0:
            raise ValueError("target_fps must be positive")
        self._ticks = ticks if ticks is not None else pygame.time.get_ticks
        self._sleep = sleep if sleep is not None else pygame.time.delay
        self._out = out
        self.target_delay = 1000.0 / target_fps
        self.carry_delay = 0.0
        self.last_time = self._ticks()
        self.display = False
        self._fps_last_time = 0
        self._fps_counter = 0

    def _since(self, last_time: int) -> tuple[int, int]:
        """Return milliseconds elapsed since last_time and the current tick."""
        current = self._ticks()
        if current >= last_time:
            elapsed = current - last_time
        else:
            elapsed = _UINT32_MAX - last_time + current
        return elapsed, current

    def toggle_display(self) -> None:
        """Switch the once-a-second frame count printout on or off."""
        self.display = not self.display
        if self.display:
            self._fps_last_time = self._ticks()
            self._fps_counter = 0

    def update(self) -> float:
        """Wait out the rest of the frame and return its length in seconds."""
        elapsed, _ = self._since(self.last_time)
        delay = self.target_delay + self.carry_delay

        if delay > elapsed:
            self._sleep(int(delay) - elapsed)

        elapsed, self.last_time = self._since(self.last_time)
        self.carry_delay = delay - elapsed

        if self.display:
            self._fps_counter += 1
            since_report, _ = self._since(self._fps_last_time)
            if since_report > 1000:
                print(self._fps_counter, file=self._out or sys.stdout)
                self._fps_counter = 0
                self._fps_last_time = (self._fps_last_time + 1000) & _UINT32_MAX

        return elapsed / 1000
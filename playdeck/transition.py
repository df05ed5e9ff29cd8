"""Fade-out / fade-in effect shown when switching between scenes."""

from __future__ import annotations

import enum

from playdeck.scene import DrawList

_MAX_ALPHA = 255.0


class Phase(enum.Enum):
    IN_START = enum.auto()
    IN_END = enum.auto()
    OUT_START = enum.auto()
    OUT_END = enum.auto()


class TransitionEffect:
    """A full-screen overlay that fades in and out over a fixed time."""

    def __init__(self, seconds: float = 1.0) -> None:
        self.color = (0, 0, 0)
        self.alpha = _MAX_ALPHA
        self.phase = Phase.IN_START
        self.set_time(seconds)

    def set_time(self, seconds: float) -> None:
        """Set the time from the start of a fade-out to the end of the fade-in."""
        if seconds <= 0:
            raise ValueError("transition time must be positive")
        self.speed = _MAX_ALPHA / (seconds * 0.5)

    def in_start(self) -> None:
        if self.phase is Phase.OUT_END:
            self.phase = Phase.IN_START

    def in_end_flag(self) -> bool:
        return self.phase is Phase.IN_START

    def out_start(self) -> None:
        if self.phase is Phase.IN_END:
            self.phase = Phase.OUT_START

    def out_end_flag(self) -> bool:
        return self.phase is Phase.OUT_END

    def proc(self, delta: float, canvas: DrawList, width: float, height: float) -> None:
        """Draw the overlay and advance the fade by ``delta`` seconds."""
        if self.phase in (Phase.IN_END, Phase.OUT_END):
            return
        canvas.rect(0, 0, width, height, (*self.color, self.alpha))
        if self.phase is Phase.IN_START:
            self.alpha -= self.speed * delta
            if self.alpha <= 0:
                self.alpha = 0.0
                self.phase = Phase.IN_END
        elif self.phase is Phase.OUT_START:
            self.alpha += self.speed * delta
            if self.alpha >= _MAX_ALPHA:
                self.alpha = _MAX_ALPHA
                self.phase = Phase.OUT_END
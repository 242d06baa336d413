"""Pulsing ring animation used to highlight a point on the chart."""

from __future__ import annotations

from chartviz.palette import Color


class HighlightAnimation:
    """Rings that grow and then shrink around a point.

    The animation is driven by :meth:`advance`, which is given the time that
    passed since the previous call and returns the ring radius to draw, or
    ``None`` when nothing is to be drawn.
    """

    def __init__(self, pos: tuple[float, float], total_time: float, rings: int,
                 color: Color, radius: float) -> None:
        self.pos = pos
        self.total_time = total_time
        self.rings = rings
        self.color = color
        self.time_between_rings = total_time / float(rings * 2 - 1)
        self.count = 0
        self.radius = float(radius)
        self.width = 3
        self.space = 1.0
        self._started = False
        self._since_step = 0.0

    def finished(self) -> bool:
        """Return True once every ring step has been played."""
        return self.count == self.rings * 2

    def advance(self, elapsed: float) -> float | None:
        """Move the animation forward by ``elapsed`` seconds."""
        if self.finished():
            return None
        if not self._started:
            self._started = True
            self._since_step = 0.0
            return None

        self._since_step += elapsed
        if self._since_step >= self.time_between_rings:
            self._since_step = 0.0
            self.count += 1
            if self.count < self.rings:
                self.radius += self.space
            else:
                self.radius -= self.space
        return self.radius
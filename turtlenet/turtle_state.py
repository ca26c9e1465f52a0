"""Turtle position, heading, pen and the lines it has drawn."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

WINDOW_WIDTH = 800.0
WINDOW_HEIGHT = 600.0

# The heading is converted to radians with this value rather than math.pi,
# which gives the drawings their exact shape.
_PI_APPROX = 3.14


@dataclass(frozen=True)
class Line:
    """A straight segment drawn by the turtle."""

    start: tuple[float, float]
    end: tuple[float, float]

    @property
    def coords(self) -> tuple[float, float, float, float]:
        """Start x, start y, end x, end y."""
        return (*self.start, *self.end)


@dataclass
class TurtleState:
    """The turtle: where it was, where it is, where it faces and its pen."""

    previous_x: float = WINDOW_WIDTH / 2
    previous_y: float = WINDOW_HEIGHT / 2
    current_x: float = WINDOW_WIDTH / 2
    current_y: float = WINDOW_HEIGHT / 2
    direction: float = 0.0
    pen_down: bool = True
    lines: list[Line] = field(default_factory=list)

    @property
    def position(self) -> tuple[float, float]:
        return (self.current_x, self.current_y)

    def origin(self) -> None:
        """Return to the centre of the window facing up."""
        self.previous_x = self.current_x = WINDOW_WIDTH / 2
        self.previous_y = self.current_y = WINDOW_HEIGHT / 2
        self.direction = 0.0

    def clear_screen(self) -> None:
        """Forget every line drawn so far."""
        self.lines.clear()

    def set_pen(self, down: bool) -> None:
        self.pen_down = down

    def move(self, distance: float) -> None:
        """Move along the heading, drawing a line if the pen is down."""
        self.previous_x = self.current_x
        self.previous_y = self.current_y
        radians = (self.direction * _PI_APPROX) / 180
        self.current_x += distance * math.sin(radians)
        self.current_y -= distance * math.cos(radians)
        if self.pen_down:
            self.lines.append(
                Line(
                    (self.previous_x, self.previous_y),
                    (self.current_x, self.current_y),
                )
            )

    def turn(self, angle: float) -> None:
        """Turn clockwise by ``angle`` degrees."""
        self.direction += angle
        if self.direction < 0:
            self.direction += 360
        self.direction = math.fmod(self.direction, 360.0)
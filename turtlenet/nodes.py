"""Syntax tree nodes of a Logo program."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from turtlenet.turtle_state import TurtleState


class Node(ABC):
    """A command that acts on a turtle."""

    @abstractmethod
    def execute(self, turtle: TurtleState) -> None:
        """Apply the command to ``turtle``."""

    @abstractmethod
    def __str__(self) -> str:
        ...


@dataclass
class MovementNode(Node):
    """Move by ``steps``; negative steps move backwards."""

    steps: float

    def execute(self, turtle: TurtleState) -> None:
        turtle.move(self.steps)

    def __str__(self) -> str:
        return f"MovementNode: {self.steps:f}"


@dataclass
class DirectionNode(Node):
    """Turn clockwise by ``angle`` degrees."""

    angle: float

    def execute(self, turtle: TurtleState) -> None:
        turtle.turn(self.angle)

    def __str__(self) -> str:
        return f"DirectionNode: {self.angle:f}"


@dataclass
class PenNode(Node):
    """Put the pen down or lift it."""

    pen_down: bool

    def execute(self, turtle: TurtleState) -> None:
        turtle.set_pen(self.pen_down)

    def __str__(self) -> str:
        return "PenNode: " + ("Down" if self.pen_down else "Up")


@dataclass
class LoopNode(Node):
    """Run the enclosed commands ``iterations`` times."""

    iterations: int
    commands: list[Node] = field(default_factory=list)

    def add_command(self, command: Node) -> None:
        self.commands.append(command)

    def execute(self, turtle: TurtleState) -> None:
        for _ in range(self.iterations):
            for command in self.commands:
                command.execute(turtle)

    def __str__(self) -> str:
        body = "".join(f"\n  {command}" for command in self.commands)
        return f"IterationNodes: {self.iterations} [{body}\n]"


@dataclass
class OriginNode(Node):
    """Return home, optionally clearing the drawing."""

    clear_screen: bool

    def execute(self, turtle: TurtleState) -> None:
        turtle.origin()
        if self.clear_screen:
            turtle.clear_screen()

    def __str__(self) -> str:
        return "OriginNode: " + ("Clear Screen" if self.clear_screen else "Home")


@dataclass
class CommentNode(Node):
    """A comment; does nothing when run."""

    comment: str

    def execute(self, turtle: TurtleState) -> None:
        pass

    def __str__(self) -> str:
        return "CommentNode: " + self.comment
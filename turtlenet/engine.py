"""Run a Logo program and collect the lines it draws."""

from __future__ import annotations

from turtlenet.logo_parser import parse
from turtlenet.turtle_state import Line, TurtleState


def run(code: str) -> list[Line]:
    """Parse and run ``code`` from the window centre, pen down, facing up.

    Raises LogoSyntaxError if the program does not parse.
    """
    program = parse(code)
    turtle = TurtleState()
    for node in program:
        node.execute(turtle)
    return turtle.lines
import math

import pytest

from turtlenet.turtle_state import WINDOW_HEIGHT, WINDOW_WIDTH, Line, TurtleState


def test_starts_at_centre_pen_down():
    turtle = TurtleState()
    assert turtle.position == (WINDOW_WIDTH / 2, WINDOW_HEIGHT / 2)
    assert turtle.direction == 0
    assert turtle.pen_down is True
    assert turtle.lines == []


def test_move_up_draws_line():
    turtle = TurtleState()
    start = turtle.position
    turtle.move(100)
    assert turtle.current_x == start[0]
    assert turtle.current_y == start[1] - 100
    assert turtle.lines == [Line(start, turtle.position)]
    assert (turtle.previous_x, turtle.previous_y) == start


def test_move_pen_up_draws_nothing():
    turtle = TurtleState()
    turtle.set_pen(False)
    turtle.move(40)
    assert turtle.lines == []
    assert turtle.current_y == WINDOW_HEIGHT / 2 - 40


def test_move_after_right_turn_goes_right():
    turtle = TurtleState()
    start_x, start_y = turtle.position
    turtle.turn(90)
    turtle.move(50)
    assert turtle.current_x > start_x
    assert math.isclose(turtle.current_x - start_x, 50, rel_tol=1e-3)
    assert math.isclose(turtle.current_y, start_y, abs_tol=0.1)


@pytest.mark.parametrize("angle", [-359, -90, -1, 0, 45, 90, 359, 360, 400, 719])
def test_turn_wraps_into_circle(angle):
    turtle = TurtleState()
    turtle.turn(angle)
    assert 0 <= turtle.direction < 360
    assert math.isclose(
        math.cos(math.radians(turtle.direction)),
        math.cos(math.radians(angle)),
        abs_tol=1e-9,
    )


def test_turn_and_back_returns_to_zero():
    turtle = TurtleState()
    turtle.turn(90)
    turtle.turn(-90)
    assert turtle.direction == 0


def test_turn_below_minus_full_circle_stays_negative():
    turtle = TurtleState()
    turtle.turn(-450)
    assert turtle.direction == -90


def test_origin_resets_but_keeps_lines():
    turtle = TurtleState()
    turtle.turn(30)
    turtle.move(20)
    turtle.origin()
    assert turtle.position == (WINDOW_WIDTH / 2, WINDOW_HEIGHT / 2)
    assert (turtle.previous_x, turtle.previous_y) == turtle.position
    assert turtle.direction == 0
    assert len(turtle.lines) == 1


def test_clear_screen_removes_lines():
    turtle = TurtleState()
    turtle.move(10)
    turtle.move(10)
    turtle.clear_screen()
    assert turtle.lines == []
    assert turtle.current_y == WINDOW_HEIGHT / 2 - 20


def test_line_coords_flatten():
    line = Line((1.0, 2.0), (3.0, 4.0))
    assert line.coords == (1.0, 2.0, 3.0, 4.0)
import pytest

from turtlenet.engine import run
from turtlenet.logo_parser import LogoSyntaxError
from turtlenet.turtle_state import WINDOW_HEIGHT, WINDOW_WIDTH

CENTRE = (WINDOW_WIDTH / 2, WINDOW_HEIGHT / 2)


def test_single_line_from_centre():
    lines = run("forward 100")
    assert len(lines) == 1
    assert lines[0].start == CENTRE
    assert lines[0].end == (CENTRE[0], CENTRE[1] - 100)


def test_square_draws_four_connected_lines():
    lines = run("repeat 4 [forward 50 right 90]")
    assert len(lines) == 4
    for previous, following in zip(lines, lines[1:]):
        assert previous.end == following.start


def test_pen_up_draws_nothing():
    assert run("penup forward 10") == []


def test_pen_down_again_draws():
    lines = run("penup forward 10 pendown forward 10")
    assert len(lines) == 1
    assert lines[0].start == (CENTRE[0], CENTRE[1] - 10)


def test_clearscreen_discards_earlier_lines():
    lines = run("forward 10 clearscreen forward 20")
    assert len(lines) == 1
    assert lines[0].start == CENTRE
    assert lines[0].end == (CENTRE[0], CENTRE[1] - 20)


def test_home_keeps_lines_and_returns_to_centre():
    lines = run("right 90 forward 10 home forward 10")
    assert len(lines) == 2
    assert lines[0].start == CENTRE
    assert lines[1].start == CENTRE


def test_comment_only_program_draws_nothing():
    assert run("; nothing here") == []


def test_invalid_program_raises():
    with pytest.raises(LogoSyntaxError):
        run("forward ten")
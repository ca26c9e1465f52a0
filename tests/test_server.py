import socket
import struct

import pytest

from turtlenet.client import receive_lines, send_code
from turtlenet.engine import run
from turtlenet.server import handle_client, receive_code, send_lines
from turtlenet.turtle_state import Line


@pytest.fixture
def pair():
    left, right = socket.socketpair()
    yield left, right
    left.close()
    right.close()


def test_receive_code_reads_length_prefixed_text(pair):
    left, right = pair
    left.sendall(struct.pack(">I", 11) + b"forward 100")
    assert receive_code(right) == "forward 100"


def test_receive_code_round_trip_with_client(pair):
    left, right = pair
    send_code(left, "repeat 4 [ forward 10 right 90 ]")
    assert receive_code(right) == "repeat 4 [ forward 10 right 90 ]"


def test_receive_code_truncated_raises(pair):
    left, right = pair
    left.sendall(struct.pack(">I", 20) + b"home")
    left.shutdown(socket.SHUT_WR)
    with pytest.raises(ConnectionError):
        receive_code(right)


def test_send_lines_empty_is_zero_count(pair):
    left, right = pair
    send_lines(left, [])
    left.shutdown(socket.SHUT_WR)
    assert receive_lines(right) == []
    assert right.recv(64) == b""


def test_send_lines_round_trip(pair):
    left, right = pair
    lines = [Line((400.0, 300.0), (400.0, 200.0)), Line((1.5, 2.5), (-3.0, 4.0))]
    send_lines(left, lines)
    assert receive_lines(right) == lines


def test_handle_client_replies_with_engine_lines(pair):
    left, right = pair
    code = "repeat 3 [ forward 50 right 120 ]"
    send_code(left, code)
    produced = handle_client(right)
    received = receive_lines(left)
    expected = run(code)
    assert len(produced) == len(expected) == len(received)
    got = [c for line in received for c in line.coords]
    want = [c for line in expected for c in line.coords]
    assert got == pytest.approx(want, rel=1e-5)


def test_handle_client_closes_socket(pair):
    left, right = pair
    send_code(left, "home")
    handle_client(right)
    assert right.fileno() == -1


def test_handle_client_bad_program_sends_no_lines(pair):
    left, right = pair
    send_code(left, "jump 10")
    assert handle_client(right) == []
    assert receive_lines(left) == []
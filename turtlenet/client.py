"""TCP client that sends a Logo file to the server and shows the drawing."""

from __future__ import annotations

import argparse
import socket
import struct
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

from turtlenet.turtle_state import WINDOW_HEIGHT, WINDOW_WIDTH, Line

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 12345

_LENGTH = struct.Struct(">I")
_COORDS = struct.Struct("<4f")


def _recv_exact(sock: socket.socket, size: int) -> bytes:
    data = bytearray()
    while len(data) < size:
        chunk = sock.recv(size - len(data))
        if not chunk:
            raise ConnectionError(f"connection closed after {len(data)} of {size} bytes")
        data += chunk
    return bytes(data)


def send_code(sock: socket.socket, code: str) -> None:
    """Send ``code`` prefixed with its length in bytes."""
    data = code.encode("utf-8")
    sock.sendall(_LENGTH.pack(len(data)) + data)


def receive_lines(sock: socket.socket) -> list[Line]:
    """Read the server's reply: a line count, then four floats per line."""
    (count,) = _LENGTH.unpack(_recv_exact(sock, _LENGTH.size))
    payload = _recv_exact(sock, count * _COORDS.size)
    return [
        Line((x0, y0), (x1, y1)) for x0, y0, x1, y1 in _COORDS.iter_unpack(payload)
    ]


def draw_lines(lines: Iterable[Line]) -> None:
    """Show the lines in a window until it is closed."""
    import tkinter

    root = tkinter.Tk()
    root.title("TurtleNet Image")
    canvas = tkinter.Canvas(
        root,
        width=int(WINDOW_WIDTH),
        height=int(WINDOW_HEIGHT),
        background="black",
        highlightthickness=0,
    )
    canvas.pack()
    for line in lines:
        canvas.create_line(*line.coords, fill="white")
    root.mainloop()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Send a Logo file to the server.")
    parser.add_argument("path", nargs="?", help="Logo file; asked for if omitted")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    try:
        sock = socket.create_connection((args.host, args.port))
    except OSError:
        print("Connection failed", file=sys.stderr)
        return 1

    with sock:
        path = args.path
        if path is None:
            try:
                path = input("Enter the directory for the logo code: ")
            except EOFError:
                path = ""
        if not path:
            print("Error: No file path provided", file=sys.stderr)
            return 1
        try:
            code = Path(path).read_text(encoding="utf-8")
        except OSError:
            print("Error: Unable to open file", file=sys.stderr)
            return 1

        send_code(sock, code)
        lines = receive_lines(sock)

    if not lines:
        print("Fail", file=sys.stderr)
        return 1
    draw_lines(lines)
    return 0
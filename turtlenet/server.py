"""TCP server that runs Logo programs and sends back the drawn lines."""

from __future__ import annotations

import argparse
import socket
import struct
import sys
from collections.abc import Sequence
from functools import partial

from turtlenet.engine import run
from turtlenet.logo_parser import LogoSyntaxError
from turtlenet.thread_pool import ThreadPool
from turtlenet.turtle_state import Line

DEFAULT_PORT = 12345
DEFAULT_WORKERS = 4

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


def receive_code(sock: socket.socket) -> str:
    """Read one length-prefixed Logo program from ``sock``."""
    (length,) = _LENGTH.unpack(_recv_exact(sock, _LENGTH.size))
    return _recv_exact(sock, length).decode("utf-8", errors="replace")


def send_lines(sock: socket.socket, lines: Sequence[Line]) -> None:
    """Send a line count followed by four float32 coordinates per line."""
    payload = bytearray(_LENGTH.pack(len(lines)))
    for line in lines:
        payload += _COORDS.pack(*line.coords)
    sock.sendall(payload)


def handle_client(sock: socket.socket) -> list[Line]:
    """Serve one client: read its program, run it, reply and close."""
    with sock:
        code = receive_code(sock)
        try:
            lines = run(code)
        except LogoSyntaxError as exc:
            print(f"Fail: {exc}", file=sys.stderr)
            lines = []
        print(f"Engine produced {len(lines)} lines", flush=True)
        send_lines(sock, lines)
    return lines


def serve(host: str = "0.0.0.0", port: int = DEFAULT_PORT, workers: int = DEFAULT_WORKERS) -> None:
    """Accept clients forever, handling each on the worker pool."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        listener.bind((host, port))
        listener.listen(10)
        with ThreadPool(workers) as pool:
            while True:
                client, _ = listener.accept()
                pool.submit(partial(handle_client, client))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run Logo programs sent over TCP.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--workers", type=int, default=DEFAULT_WORKERS)
    args = parser.parse_args(argv)
    try:
        serve(args.host, args.port, args.workers)
    except OSError as exc:
        print(f"Server failed: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0
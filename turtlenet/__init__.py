"""Logo turtle interpreter producing drawn line segments, with a TCP server, a client and a program checker."""

__version__ = "0.1.0"
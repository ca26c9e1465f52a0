"""Parser turning Logo source text into syntax tree nodes."""

from __future__ import annotations

import math
import re
from collections.abc import Callable

from turtlenet.nodes import (
    CommentNode,
    DirectionNode,
    LoopNode,
    MovementNode,
    Node,
    OriginNode,
    PenNode,
)

_SPACE = " \t\n\r\f\v"
_NUMBER = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class LogoSyntaxError(ValueError):
    """Raised when Logo source text cannot be parsed."""

    def __init__(self, message: str, text: str, position: int) -> None:
        self.position = position
        self.line = text.count("\n", 0, position) + 1
        self.column = position - (text.rfind("\n", 0, position) + 1) + 1
        super().__init__(f"{message} at line {self.line}, column {self.column}")


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self._rules: tuple[Callable[[], Node | None], ...] = (
            self._movement,
            self._direction,
            self._pen,
            self._origin,
            self._loop,
            self._comment,
        )

    def _skip(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in _SPACE:
            self.pos += 1

    def _keyword(self, *words: str) -> str | None:
        self._skip()
        for word in words:
            if self.text.startswith(word, self.pos):
                self.pos += len(word)
                return word
        return None

    def _number(self) -> float | None:
        self._skip()
        match = _NUMBER.match(self.text, self.pos)
        if match is None:
            return None
        self.pos = match.end()
        return float(match.group())

    def _movement(self) -> Node | None:
        word = self._keyword("forward", "back")
        if word is None or (value := self._number()) is None:
            return None
        return MovementNode(value if word == "forward" else -value)

    def _direction(self) -> Node | None:
        word = self._keyword("left", "right")
        if word is None or (value := self._number()) is None:
            return None
        return DirectionNode(value if word == "right" else -value)

    def _pen(self) -> Node | None:
        word = self._keyword("penup", "pendown")
        return None if word is None else PenNode(word == "pendown")

    def _origin(self) -> Node | None:
        word = self._keyword("clearscreen", "home")
        return None if word is None else OriginNode(word == "clearscreen")

    def _loop(self) -> Node | None:
        if self._keyword("repeat") is None:
            return None
        count_at = self.pos
        count = self._number()
        if count is None or self._keyword("[") is None:
            return None
        commands = self.commands()
        if not commands or self._keyword("]") is None:
            return None
        if not math.isfinite(count):
            raise LogoSyntaxError("repeat count must be finite", self.text, count_at)
        return LoopNode(int(count), commands)

    def _comment(self) -> Node | None:
        self._skip()
        if not self.text.startswith(";", self.pos):
            return None
        end = self.text.find("\n", self.pos)
        if end < 0:
            end = len(self.text)
        comment = self.text[self.pos + 1 : end]
        self.pos = end
        return CommentNode(comment)

    def command(self) -> Node | None:
        start = self.pos
        for rule in self._rules:
            node = rule()
            if node is not None:
                return node
            self.pos = start
        return None

    def commands(self) -> list[Node]:
        nodes = []
        while (node := self.command()) is not None:
            nodes.append(node)
        return nodes


def parse(code: str) -> list[Node]:
    """Parse a whole Logo program; it must hold at least one command."""
    parser = _Parser(code)
    program = parser.commands()
    parser._skip()
    if not program:
        raise LogoSyntaxError("expected a command", code, parser.pos)
    if parser.pos != len(code):
        raise LogoSyntaxError("unexpected input", code, parser.pos)
    return program
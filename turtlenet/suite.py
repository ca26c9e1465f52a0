"""Run directories of Logo programs expected to draw or to fail."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from turtlenet.engine import run
from turtlenet.logo_parser import LogoSyntaxError


def run_test_file(path: str | Path) -> bool:
    """Return True if the program in ``path`` draws at least one line."""
    try:
        code = Path(path).read_text(encoding="utf-8")
    except OSError:
        print("Couldn't open file", file=sys.stderr)
        return False
    try:
        lines = run(code)
    except LogoSyntaxError as exc:
        print(f"Fail: {exc}", file=sys.stderr)
        return False
    return bool(lines)


def collect_cases(root: str | Path) -> list[tuple[Path, bool]]:
    """Find ``.logo`` files under ``root/passing`` and ``root/failing``.

    Each is paired with whether it is expected to draw something.
    """
    root = Path(root)
    cases = []
    for folder, expected in (("passing", True), ("failing", False)):
        files = sorted(
            entry
            for entry in (root / folder).iterdir()
            if entry.is_file() and entry.suffix == ".logo"
        )
        cases.extend((entry, expected) for entry in files)
    return cases


def run_suite(root: str | Path, out: TextIO | None = None) -> tuple[int, int]:
    """Run every case, report each and a summary; return (passed, total)."""
    out = sys.stdout if out is None else out
    passed = total = 0
    for path, expected in collect_cases(root):
        ok = run_test_file(path) == expected
        print(f"{path}: {'[PASS]' if ok else '[FAIL]'}", file=out)
        passed += ok
        total += 1
    print(f"\nSummary: {passed}/{total} tests passed.", file=out)
    return passed, total


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run Logo test programs.")
    parser.add_argument("root", nargs="?", default="tests")
    args = parser.parse_args(argv)
    try:
        run_suite(args.root)
    except OSError as exc:
        print(f"Cannot read test directories: {exc}", file=sys.stderr)
        return 1
    return 0
"""Helpers for picking lines out of included source files."""

from __future__ import annotations

import re
from collections.abc import Iterator

ANCHOR_START = re.compile(r"ANCHOR:\s*(?P<anchor_name>[\w_-]+)")
ANCHOR_END = re.compile(r"ANCHOR_END:\s*(?P<anchor_name>[\w_-]+)")


def _lines(text: str) -> list[str]:
    """Split text into lines, ignoring one trailing newline and any trailing CR."""
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _anchor_name(pattern: re.Pattern[str], line: str) -> str | None:
    match = pattern.search(line)
    return match.group("anchor_name") if match else None


def take_lines(text: str, start: int | None = None, stop: int | None = None) -> str:
    """Return the lines from ``start`` (inclusive) to ``stop`` (exclusive)."""
    return "\n".join(_lines(text)[start:stop])


def take_anchored_lines(text: str, anchor: str) -> str:
    """Return the lines between ``ANCHOR: anchor`` and ``ANCHOR_END: anchor``.

    Lines holding any anchor marker are left out.
    """
    retained: list[str] = []
    anchor_found = False

    for line in _lines(text):
        if anchor_found:
            end_name = _anchor_name(ANCHOR_END, line)
            if end_name is not None:
                if end_name == anchor:
                    break
            elif not ANCHOR_START.search(line):
                retained.append(line)
        elif _anchor_name(ANCHOR_START, line) == anchor:
            anchor_found = True

    return "\n".join(retained)


def take_rustdoc_include_lines(
    text: str, start: int | None = None, stop: int | None = None
) -> str:
    """Keep lines in the range as they are and prefix all others with ``# ``."""
    low = 0 if start is None else start

    def inside(index: int) -> bool:
        return index >= low and (stop is None or index < stop)

    return "\n".join(
        line if inside(index) else f"# {line}"
        for index, line in enumerate(_lines(text))
    )


def take_rustdoc_include_anchored_lines(text: str, anchor: str) -> str:
    """Keep lines between the anchor markers and prefix all others with ``# ``.

    Lines holding anchor markers are dropped.
    """

    def produce() -> Iterator[str]:
        within = False
        for line in _lines(text):
            if within:
                end_name = _anchor_name(ANCHOR_END, line)
                if end_name is not None:
                    if end_name == anchor:
                        within = False
                elif not ANCHOR_START.search(line):
                    yield line
            else:
                start_name = _anchor_name(ANCHOR_START, line)
                if start_name is not None:
                    if start_name == anchor:
                        within = True
                elif not ANCHOR_END.search(line):
                    yield f"# {line}"

    return "\n".join(produce())
"""Wrapping of Rust code blocks for the playground and hiding of boring lines."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from bookpress.headers import build_header_links, fix_code_blocks

_CODE_BLOCK = re.compile(r'(<code[^>]?class="([^"]+)".*?>(.*?)</code>)', re.DOTALL)
_BORING_LINE = re.compile(r"^(\s*)#(.?)(.*)$")


class RustEdition(Enum):
    """The Rust edition code blocks are compiled with."""

    E2015 = "2015"
    E2018 = "2018"


@dataclass
class Playground:
    """Settings for runnable code blocks."""

    editable: bool = False
    copyable: bool = True
    copy_js: bool = True
    line_numbers: bool = False


def _lines(text: str) -> list[str]:
    """Split text into lines, ignoring one trailing newline and any trailing CR."""
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def hide_lines(content: str) -> str:
    """Wrap lines starting with ``#`` in a "boring" span.

    A doubled ``##`` is unescaped to a literal ``#``; ``#!`` and ``#[``
    lines are left as they are.
    """
    pieces: list[str] = []
    for line in _lines(content):
        match = _BORING_LINE.match(line)
        if match:
            indent, marker, rest = match.groups()
            if marker == "#":
                pieces.append(f"{indent}{marker}{rest}\n")
                continue
            if marker not in ("!", "["):
                shown = "" if marker == " " else marker
                pieces.append(f'<span class="boring">{indent}{shown}{rest}\n</span>')
                continue
        pieces.append(f"{line}\n")
    return "".join(pieces)


def partition_source(source: str) -> tuple[str, str]:
    """Split code into its leading crate attributes and blank lines, and the rest."""
    before: list[str] = []
    after: list[str] = []
    after_header = False
    for line in _lines(source):
        trimmed = line.strip()
        header = trimmed == "" or trimmed.startswith("#![")
        if not header or after_header:
            after_header = True
            after.append(f"{line}\n")
        else:
            before.append(f"{line}\n")
    return "".join(before), "".join(after)


def _edition_class(classes: str, edition: RustEdition | None) -> str:
    if "edition2015" in classes or "edition2018" in classes:
        return ""
    if edition is None:
        return ""
    return f" edition{edition.value}"


def add_playground_pre(
    html: str, playground: Playground, edition: RustEdition | None
) -> str:
    """Wrap runnable Rust code blocks in a playground ``pre`` element."""

    def replace(match: re.Match[str]) -> str:
        text, classes, code = match.groups()
        if "language-rust" not in classes:
            return text

        runnable = (
            "ignore" not in classes
            and "noplayground" not in classes
            and "noplaypen" not in classes
        ) or "mdbook-runnable" in classes
        if not runnable:
            return f'<code class="{classes}">{hide_lines(code)}</code>'

        if (
            (playground.editable and "editable" in classes)
            or "fn main" in text
            or "quick_main!" in text
        ):
            content = code
        else:
            attrs, body = partition_source(code)
            content = f"\n# #![allow(unused)]\n{attrs}#fn main() {{\n{body}#}}"

        return (
            f'<pre class="playground"><code class="{classes}'
            f'{_edition_class(classes, edition)}">{hide_lines(content)}</code></pre>'
        )

    return _CODE_BLOCK.sub(replace, html)


def post_process(
    rendered: str, playground: Playground, edition: RustEdition | None
) -> str:
    """Add header anchors, fix code block classes and wrap playground code."""
    rendered = build_header_links(rendered)
    rendered = fix_code_blocks(rendered)
    return add_playground_pre(rendered, playground, edition)
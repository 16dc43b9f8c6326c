"""Rendering of the table of contents shown in the sidebar of every page."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import PurePath
from typing import Any

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml
from markdown_it.token import Token

from bookpress.fsutil import path_to_root


class TocError(ValueError):
    """Raised when the page data does not have the expected shape."""


def _chapters(data: Mapping[str, Any]) -> list[dict[str, str]]:
    chapters = data.get("chapters")
    if not isinstance(chapters, list):
        raise TocError("Could not decode the JSON data")
    for chapter in chapters:
        if not isinstance(chapter, dict) or not all(
            isinstance(key, str) and isinstance(value, str)
            for key, value in chapter.items()
        ):
            raise TocError("Could not decode the JSON data")
    return chapters


def _html_link(path: str) -> str:
    pure = PurePath(path)
    link = str(pure.with_suffix(".html")) if pure.name else path
    return link.replace("\\", "/")


def _inline_pieces(children: Iterable[Token]) -> Iterator[str]:
    for child in children:
        if child.type in ("text", "text_special"):
            yield escapeHtml(child.content)
        elif child.type == "code_inline":
            yield f"<code>{escapeHtml(child.content)}</code>"
        elif child.type == "html_inline":
            yield child.content
        elif child.children:
            yield from _inline_pieces(child.children)


def _render_name(name: str) -> str:
    """Render only the text, inline code and raw HTML of a chapter name."""
    pieces: list[str] = []
    for token in MarkdownIt("commonmark").parse(name):
        if token.type == "html_block":
            pieces.append(token.content)
        elif token.type == "inline" and token.children:
            pieces.extend(_inline_pieces(token.children))
    return "".join(pieces)


def _escaped(title: str) -> str:
    return title.replace("<", "&lt;").replace(">", "&gt;")


def _li_open_tag(is_expanded: bool, is_affix: bool) -> str:
    classes = "chapter-item "
    if is_expanded:
        classes += "expanded "
    if is_affix:
        classes += "affix "
    return f'<li class="{classes}">'


@dataclass(frozen=True)
class RenderToc:
    """Builds the nested chapter list for a page."""

    no_section_label: bool = False

    def render(self, data: Mapping[str, Any]) -> str:
        """Return the table of contents HTML for the page described by ``data``."""
        chapters = _chapters(data)

        path = data.get("path")
        if not isinstance(path, str):
            raise TocError("Type error for `path`, string expected")
        current_path = path.replace('"', "")

        section_value = data.get("section")
        current_section = section_value if isinstance(section_value, str) else ""

        fold_enable = data.get("fold_enable")
        if not isinstance(fold_enable, bool):
            raise TocError("Type error for `fold_enable`, bool expected")

        fold_level = data.get("fold_level")
        if (
            not isinstance(fold_level, int)
            or isinstance(fold_level, bool)
            or fold_level < 0
        ):
            raise TocError("Type error for `fold_level`, u64 expected")

        out = ['<ol class="chapter">']
        current_level = 1

        for item in chapters:
            if "spacer" in item:
                out.append('<li class="spacer"></li>')
                continue

            if "section" in item:
                section = item["section"]
                level = section.count(".")
            else:
                section = ""
                level = 1

            # Expand when folding is off, when this is the current section or
            # one of its ancestors, or when the level is shallow enough.
            is_expanded = (
                not fold_enable
                or (section != "" and current_section.startswith(section))
                or level - 1 < fold_level
            )

            if level > current_level:
                while level > current_level:
                    out.append('<li><ol class="section">')
                    current_level += 1
                out.append(_li_open_tag(is_expanded, False))
            elif level < current_level:
                while level < current_level:
                    out.append("</ol></li>")
                    current_level -= 1
                out.append(_li_open_tag(is_expanded, False))
            else:
                out.append(_li_open_tag(is_expanded, "section" not in item))

            if "part" in item:
                out.append(f'<li class="part-title">{_escaped(item["part"])}</li>')
                continue

            link_path = item.get("path")
            has_link = bool(link_path)
            if has_link:
                out.append('<a href="')
                out.append(path_to_root(current_path))
                out.append(_html_link(link_path))
                out.append('"')
                if link_path == current_path:
                    out.append(' class="active"')
                out.append(">")
            else:
                out.append("<div>")

            if not self.no_section_label and "section" in item:
                out.append(f'<strong aria-hidden="true">{item["section"]}</strong> ')

            if "name" in item:
                out.append(_escaped(_render_name(item["name"])))

            out.append("</a>" if has_link else "</div>")

            if fold_enable and item.get("has_sub_items") == "true":
                out.append('<a class="toggle"><div>\u2771</div></a>')
            out.append("</li>")

        while current_level > 1:
            out.append("</ol></li>")
            current_level -= 1

        out.append("</ol>")
        return "".join(out)
"""Markdown rendering and HTML id helpers."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterator

from markdown_it import MarkdownIt
from markdown_it.token import Token

log = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"\s\s+")
_SCHEME_LINK = re.compile(r"^[a-z][a-z0-9+.-]*:")
_MD_LINK = re.compile(r"(?P<link>.*)\.md(?P<anchor>#.*)?")
_HTML_LINK = re.compile(r'(<(?:a|img) [^>]*?(?:src|href)=")([^"]+?)"')

_STRIPPED_MARKUP = (
    "<em>",
    "</em>",
    "<code>",
    "</code>",
    "<strong>",
    "</strong>",
    "&lt;",
    "&gt;",
    "&amp;",
    "&#39;",
    "&quot;",
)


def collapse_whitespace(text: str) -> str:
    """Replace runs of two or more whitespace characters with one space."""
    return _WHITESPACE_RUN.sub(" ", text)


def normalize_id(content: str) -> str:
    """Turn ``content`` into a valid HTML element id."""

    def convert(ch: str) -> str:
        if ch.isalnum() or ch in "_-":
            return ch.lower() if ch.isascii() else ch
        if ch.isspace():
            return "-"
        return ""

    return "".join(convert(ch) for ch in content)


def id_from_content(content: str) -> str:
    """Derive an anchor id from header content."""
    for sub in _STRIPPED_MARKUP:
        content = content.replace(sub, "")
    trimmed = content.strip().lstrip("#").strip()
    return normalize_id(trimmed)


def convert_quotes_to_curly(text: str) -> str:
    """Replace straight quotes with curly ones, opening after whitespace."""

    def produce() -> Iterator[str]:
        preceded_by_whitespace = True
        for ch in text:
            if ch == "'":
                yield "\u2018" if preceded_by_whitespace else "\u2019"
            elif ch == '"':
                yield "\u201c" if preceded_by_whitespace else "\u201d"
            else:
                yield ch
            preceded_by_whitespace = ch.isspace()

    return "".join(produce())


def _fix_link(dest: str, path: str | None) -> str:
    if dest.startswith("#"):
        if path is None:
            return dest
        base = path
        if base.endswith(".md"):
            base = base[:-3] + ".html"
        return base + dest

    if _SCHEME_LINK.match(dest):
        return dest

    fixed = ""
    if path is not None:
        base = os.path.dirname(path)
        if base:
            fixed = f"{base}/"

    match = _MD_LINK.search(dest)
    if match:
        fixed += match.group("link") + ".html" + (match.group("anchor") or "")
    else:
        fixed += dest
    return fixed


def _fix_html(html: str, path: str | None) -> str:
    return _HTML_LINK.sub(
        lambda m: f'{m.group(1)}{_fix_link(m.group(2), path)}"', html
    )


def new_markdown_parser() -> MarkdownIt:
    """Return a Markdown parser with tables and strikethrough enabled."""
    return MarkdownIt("commonmark").enable(["table", "strikethrough"])


def _adjust_inline(children: list[Token], path: str | None, curly_quotes: bool) -> None:
    for child in children:
        if child.type == "link_open":
            href = child.attrGet("href")
            if href is not None:
                child.attrSet("href", _fix_link(str(href), path))
        elif child.type == "image":
            src = child.attrGet("src")
            if src is not None:
                child.attrSet("src", _fix_link(str(src), path))
            if child.children:
                _adjust_inline(child.children, path, curly_quotes)
        elif child.type == "html_inline":
            child.content = _fix_html(child.content, path)
        elif child.type == "text" and curly_quotes:
            child.content = convert_quotes_to_curly(child.content)


def render_markdown_with_path(
    text: str, curly_quotes: bool, path: str | os.PathLike[str] | None
) -> str:
    """Render Markdown to HTML, adjusting links relative to ``path`` if given."""
    page = None if path is None else os.fspath(path)
    md = new_markdown_parser()
    env: dict = {}
    tokens = md.parse(text, env)
    for token in tokens:
        if token.type == "fence":
            token.info = "".join(ch for ch in token.info if not ch.isspace())
        elif token.type == "html_block":
            token.content = _fix_html(token.content, page)
        elif token.type == "inline" and token.children:
            _adjust_inline(token.children, page, curly_quotes)
    return md.renderer.render(tokens, md.options, env)


def render_markdown(text: str, curly_quotes: bool) -> str:
    """Render Markdown to HTML."""
    return render_markdown_with_path(text, curly_quotes, None)


def log_backtrace(error: BaseException) -> None:
    """Log an error followed by each exception that caused it."""
    log.error("Error: %s", error)
    cause = _cause_of(error)
    seen = {id(error)}
    while cause is not None and id(cause) not in seen:
        seen.add(id(cause))
        log.error("\tCaused By: %s", cause)
        cause = _cause_of(cause)


def _cause_of(error: BaseException) -> BaseException | None:
    if error.__cause__ is not None:
        return error.__cause__
    if error.__suppress_context__:
        return None
    return error.__context__
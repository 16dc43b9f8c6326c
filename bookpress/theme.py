"""Theme files for the HTML output, with overrides from a theme directory."""

from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger(__name__)


@dataclass
class Theme:
    """The template, style and script files that make up an HTML theme."""

    index: bytes = b""
    head: bytes = b""
    redirect: bytes = b""
    header: bytes = b""
    chrome_css: bytes = b""
    general_css: bytes = b""
    print_css: bytes = b""
    variables_css: bytes = b""
    favicon_png: bytes | None = b""
    favicon_svg: bytes | None = b""
    js: bytes = b""
    highlight_css: bytes = b""
    tomorrow_night_css: bytes = b""
    ayu_highlight_css: bytes = b""
    highlight_js: bytes = b""
    clipboard_js: bytes = b""


_OVERRIDES = (
    ("index.hbs", "index"),
    ("head.hbs", "head"),
    ("redirect.hbs", "redirect"),
    ("header.hbs", "header"),
    ("book.js", "js"),
    ("css/chrome.css", "chrome_css"),
    ("css/general.css", "general_css"),
    ("css/print.css", "print_css"),
    ("css/variables.css", "variables_css"),
    ("highlight.js", "highlight_js"),
    ("clipboard.min.js", "clipboard_js"),
    ("highlight.css", "highlight_css"),
    ("tomorrow-night.css", "tomorrow_night_css"),
    ("ayu-highlight.css", "ayu_highlight_css"),
)


def _load_with_warn(filename: Path) -> bytes | None:
    """Return the file's contents, or None if it is missing or unreadable."""
    if not filename.exists():
        return None
    try:
        return filename.read_bytes()
    except OSError as exc:
        log.warning("Couldn't load custom file, %s: %s", filename, exc)
        return None


def load_theme(
    theme_dir: str | os.PathLike[str], defaults: Theme | None = None
) -> Theme:
    """Build a theme from ``defaults``, replacing each file found in ``theme_dir``.

    If only one of the two favicons is overridden, the other is dropped.
    """
    base = defaults if defaults is not None else Theme()
    theme = dataclasses.replace(base)
    directory = Path(theme_dir)

    if not directory.is_dir():
        return theme

    for relative, field_name in _OVERRIDES:
        contents = _load_with_warn(directory / relative)
        if contents is not None:
            setattr(theme, field_name, contents)

    png = _load_with_warn(directory / "favicon.png")
    svg = _load_with_warn(directory / "favicon.svg")
    if png is not None:
        theme.favicon_png = png
    if svg is not None:
        theme.favicon_svg = svg

    if png is not None and svg is None:
        theme.favicon_svg = None
    elif png is None and svg is not None:
        theme.favicon_png = None

    return theme
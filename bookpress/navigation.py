"""Previous/next chapter lookup and theme option labels for page templates."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from pathlib import PurePosixPath
from typing import Any

from bookpress.fsutil import path_to_root

log = logging.getLogger(__name__)

Chapter = dict[str, str]


class NavigationError(ValueError):
    """Raised when the page data does not have the expected shape."""


class _Target(Enum):
    PREVIOUS = "previous"
    NEXT = "next"


def _chapters(data: Mapping[str, Any]) -> list[Chapter]:
    chapters = data.get("chapters")
    if not isinstance(chapters, list):
        raise NavigationError("Could not decode the JSON data")
    for chapter in chapters:
        if not isinstance(chapter, dict) or not all(
            isinstance(key, str) and isinstance(value, str)
            for key, value in chapter.items()
        ):
            raise NavigationError("Could not decode the JSON data")
    return chapters


def _base_path(data: Mapping[str, Any]) -> str:
    path = data.get("path")
    if not isinstance(path, str):
        raise NavigationError("Type error for `path`, string expected")
    return path.replace('"', "")


def _find_chapter(data: Mapping[str, Any], target: _Target) -> Chapter | None:
    chapters = _chapters(data)
    base_path = _base_path(data)

    if "is_index" in data:
        # The index page may be synthetic, so it has no entry to match against.
        if target is _Target.PREVIOUS:
            return None
        with_path = [chapter for chapter in chapters if "path" in chapter]
        return dict(with_path[1]) if len(with_path) > 1 else None

    previous: Chapter | None = None
    for item in chapters:
        path = item.get("path")
        if not path:
            continue
        if previous is not None:
            if target is _Target.NEXT:
                if previous["path"] == base_path:
                    return dict(item)
            elif path == base_path:
                return dict(previous)
        previous = item
    return None


def previous_chapter(data: Mapping[str, Any]) -> Chapter | None:
    """Return the chapter before the current page, if any."""
    return _find_chapter(data, _Target.PREVIOUS)


def next_chapter(data: Mapping[str, Any]) -> Chapter | None:
    """Return the chapter after the current page, if any."""
    return _find_chapter(data, _Target.NEXT)


def _html_link(path: str) -> str:
    pure = PurePosixPath(path)
    link = str(pure.with_suffix(".html")) if pure.name else path
    return link.replace("\\", "/")


def chapter_link(data: Mapping[str, Any], chapter: Mapping[str, str]) -> dict[str, str]:
    """Return the template values for a link from the current page to ``chapter``."""
    base_path = _base_path(data)
    if "name" not in chapter:
        raise NavigationError("No title found for chapter in JSON data")
    if "path" not in chapter:
        raise NavigationError("No path found for chapter in JSON data")
    return {
        "path_to_root": path_to_root(base_path),
        "title": chapter["name"],
        "link": _html_link(chapter["path"]),
    }


def theme_option(param: Any, default_theme: Any) -> str:
    """Return the label of a theme option, marking the default theme."""
    if not isinstance(param, str):
        raise NavigationError(
            "Param 0 with String type is required for theme_option helper."
        )
    if not isinstance(default_theme, str):
        raise NavigationError("Type error for `default_theme`, string expected")
    if param.lower() == default_theme.lower():
        return f"{param} (default)"
    return param
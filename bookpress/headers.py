"""Post-processing of rendered HTML: header anchors and code block classes."""

from __future__ import annotations

import re
from collections.abc import MutableMapping

from bookpress.markup import id_from_content

_HEADER = re.compile(r"<h(\d)>(.*?)</h\d>")
_CODE_CLASS = re.compile(r'<code([^>]+)class="([^"]+)"([^>]*)>')


def insert_link_into_header(
    level: int, content: str, id_counter: MutableMapping[str, int]
) -> str:
    """Return a header of ``level`` whose ``content`` links to its own anchor.

    ``id_counter`` tracks the ids already used; a repeated id gets a numeric
    suffix so every anchor stays unique.
    """
    raw_id = id_from_content(content)
    count = id_counter.get(raw_id, 0)
    anchor = raw_id if count == 0 else f"{raw_id}-{count}"
    id_counter[raw_id] = count + 1
    return (
        f'<h{level} id="{anchor}"><a class="header" href="#{anchor}">'
        f"{content}</a></h{level}>"
    )


def build_header_links(html: str) -> str:
    """Give every header in ``html`` an id and a link to itself."""
    id_counter: dict[str, int] = {}
    return _HEADER.sub(
        lambda m: insert_link_into_header(int(m.group(1)), m.group(2), id_counter),
        html,
    )


def fix_code_blocks(html: str) -> str:
    """Replace the commas in code block classes with spaces."""
    return _CODE_CLASS.sub(
        lambda m: f'<code{m.group(1)}class="{m.group(2).replace(",", " ")}"{m.group(3)}>',
        html,
    )
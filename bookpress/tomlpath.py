"""Dotted-key access to nested configuration tables."""

from __future__ import annotations

from typing import Any


def _split(key: str) -> tuple[str, str] | None:
    head, dot, tail = key.partition(".")
    return (head, tail) if dot else None


def read(table: Any, key: str) -> Any | None:
    """Return the value at the dotted ``key``, or None if it is missing."""
    if not isinstance(table, dict):
        return None
    parts = _split(key)
    if parts is None:
        return table.get(key)
    head, tail = parts
    if head not in table:
        return None
    return read(table[head], tail)


def insert(table: dict[str, Any], key: str, value: Any) -> None:
    """Set the dotted ``key`` to ``value``, creating intermediate tables.

    Any non-table value standing in the way is replaced by a new table.
    """
    if not isinstance(table, dict):
        raise TypeError(f"expected a table, got {type(table).__name__}")
    parts = _split(key)
    if parts is None:
        table[key] = value
        return
    head, tail = parts
    child = table.get(head)
    if not isinstance(child, dict):
        child = {}
        table[head] = child
    insert(child, tail, value)


def delete(table: Any, key: str) -> Any | None:
    """Remove the dotted ``key`` and return its value, or None if absent."""
    if not isinstance(table, dict):
        return None
    parts = _split(key)
    if parts is None:
        return table.pop(key, None)
    head, tail = parts
    if head not in table:
        return None
    return delete(table[head], tail)
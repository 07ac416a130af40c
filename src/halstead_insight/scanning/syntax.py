"""Helpers over the tree-sitter node shape used by the metric calculators.

The calculators only rely on a node's ``type``, ``start_byte``, ``children``,
``text`` and ``child_by_field_name``; everything else about the tree is opaque.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

ENTER = "enter"
EXIT = "exit"


def walk(root: Any) -> Iterator[Any]:
    """Yield every node of the tree depth-first, parents before children."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def walk_events(root: Any) -> Iterator[tuple[str, Any]]:
    """Depth-first walk emitting (ENTER, node) and (EXIT, node) events.

    Needed where state must be restored when a subtree is left (scopes).
    """
    stack: list[tuple[str, Any]] = [(ENTER, root)]
    while stack:
        event, node = stack.pop()
        yield event, node
        if event == ENTER:
            stack.append((EXIT, node))
            for child in reversed(node.children):
                stack.append((ENTER, child))


def node_text(node: Any) -> str:
    """Source text of a node."""
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8", errors="replace")


def field_text(node: Any, field_name: str) -> str | None:
    """Source text of a named field child, None if the field is absent."""
    child = node.child_by_field_name(field_name)
    if child is None:
        return None
    return node_text(child)

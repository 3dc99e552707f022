"""Serialize a mindmap forest to JSON without recursion.

pydantic and the json module both recurse per nesting level and give up on
outlines a few hundred levels deep, so the nested structure is emitted here
from an explicit work stack. Only the leaf strings go through json.dumps.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from app.models.mindmap_models import MindmapNode

_CHILDREN_CLOSE = "]}"


def _push_nodes(stack: list[str | MindmapNode], nodes: Sequence[MindmapNode]) -> None:
    # Separators sit between items, so each node after the first is preceded by ", "
    for position in range(len(nodes) - 1, -1, -1):
        stack.append(nodes[position])
        if position > 0:
            stack.append(", ")


def forest_to_json(forest: Sequence[MindmapNode]) -> str:
    """Return the forest as a JSON array of ``{"text", "children"}`` objects."""
    parts: list[str] = ["["]
    stack: list[str | MindmapNode] = ["]"]
    _push_nodes(stack, forest)

    while stack:
        entry = stack.pop()
        if isinstance(entry, str):
            parts.append(entry)
            continue

        parts.append(f'{{"text": {json.dumps(entry.text)}, "children": [')
        stack.append(_CHILDREN_CLOSE)
        _push_nodes(stack, entry.children)

    return "".join(parts)


def document_to_json(file_name: str, forest: Sequence[MindmapNode], node_count: int) -> str:
    """Return the ``MindmapDocument`` payload for a loaded file as JSON."""
    return (
        f'{{"file_name": {json.dumps(file_name)}, '
        f'"forest": {forest_to_json(forest)}, '
        f'"node_count": {node_count}}}'
    )

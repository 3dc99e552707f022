"""Parse marker-prefixed outline text (PlantUML mindmap style) into a forest.

Depth is the number of repeated marker characters at the start of a line::

    @startmindmap
    * Root
    ** Child
    *** Grandchild
    ** Second child
    @endmindmap

Lines starting with the directive prefix are skipped, as is anything that is
not a marker line. The parser never raises for input it does not understand.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from functools import lru_cache

from app.models.mindmap_models import MindmapNode

logger = logging.getLogger(__name__)

DEFAULT_MARKER = "*"
DEFAULT_DIRECTIVE_PREFIX = "@"

# Stack frame index for the virtual root that owns the top-level nodes
_ROOT = -1

# ASCII whitespace and NUL only; Unicode spaces such as U+00A0 stay part of the text
TRIM_CHARS = " \t\n\r\0\x0b"


def split_lines(text: str) -> list[str]:
    """Split on line feeds only, trimming each line and dropping blank ones.

    str.splitlines() would also break on form feeds, U+2028 and friends,
    cutting node text short.
    """
    lines = (line.strip(TRIM_CHARS) for line in text.split("\n"))
    return [line for line in lines if line]


@lru_cache(maxsize=8)
def _marker_pattern(marker: str) -> re.Pattern[str]:
    if len(marker) != 1:
        raise ValueError(f"Marker must be a single character, got {marker!r}")
    return re.compile(rf"^({re.escape(marker)}+)\s(.*)", re.ASCII)


def parse_outline(
    lines: Iterable[str],
    marker: str = DEFAULT_MARKER,
    directive_prefix: str = DEFAULT_DIRECTIVE_PREFIX,
) -> list[MindmapNode]:
    """Build an ordered forest from outline lines using a stack of open ancestors.

    Nodes are first collected in an arena (a flat list addressed by index) and
    the stack holds ``(index, depth)`` frames. A new line pops every frame whose
    depth is >= its own, so equal depth yields a sibling, a shallower line
    dedents by any number of levels, and a deeper line nests directly under
    the current top even when levels are skipped.
    """
    pattern = _marker_pattern(marker)

    # Arena entries: (text, child indices)
    arena: list[tuple[str, list[int]]] = []
    root_children: list[int] = []
    stack: list[tuple[int, int]] = [(_ROOT, 0)]
    skipped = 0

    for raw in lines:
        line = raw.strip(TRIM_CHARS)
        if not line:
            continue
        if directive_prefix and line.startswith(directive_prefix):
            continue

        match = pattern.match(line)
        if not match:
            skipped += 1
            continue

        level = len(match.group(1))
        text = match.group(2)

        # The root frame sits at depth 0 and every level is >= 1, so it is never popped
        while stack[-1][1] >= level:
            stack.pop()

        index = len(arena)
        arena.append((text, []))

        parent_index = stack[-1][0]
        if parent_index == _ROOT:
            root_children.append(index)
        else:
            arena[parent_index][1].append(index)

        stack.append((index, level))

    forest = _materialize(arena, root_children)
    logger.debug("Parsed outline: %d nodes, %d non-marker lines skipped", len(arena), skipped)
    return forest


def _materialize(
    arena: list[tuple[str, list[int]]], root_children: list[int]
) -> list[MindmapNode]:
    """Turn arena entries into nested models.

    Children are always created after their parent, so walking the arena
    backwards guarantees every child is built before the node that owns it.
    """
    built: list[MindmapNode | None] = [None] * len(arena)
    for index in range(len(arena) - 1, -1, -1):
        text, child_ids = arena[index]
        built[index] = MindmapNode(
            text=text,
            children=[built[child] for child in child_ids],
        )
    return [built[index] for index in root_children]


def count_nodes(forest: Sequence[MindmapNode]) -> int:
    """Return the total number of nodes in the forest."""
    total = 0
    pending = list(forest)
    while pending:
        node = pending.pop()
        total += 1
        pending.extend(node.children)
    return total

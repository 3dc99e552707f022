"""Render a parsed mindmap forest as collapsible nested HTML lists."""

from __future__ import annotations

import html
from collections.abc import Sequence

from app.models.mindmap_models import MindmapNode

LIST_OPEN = '<ul class="mindmap-list">\n'
LIST_CLOSE = "</ul>\n"
ITEM_CLOSE = "</li>\n"
CARET = '<span class="caret"></span>'


def _html_escape(s: str) -> str:
    return html.escape(s, quote=True)


def _push_list(stack: list[str | MindmapNode], nodes: Sequence[MindmapNode]) -> None:
    # Pushed in reverse so the opening tag pops first and items pop in order
    stack.append(LIST_CLOSE)
    for node in reversed(nodes):
        stack.append(node)
    stack.append(LIST_OPEN)


def render_mindmap_html(forest: Sequence[MindmapNode]) -> str:
    """Render the forest as ``<ul class="mindmap-list">`` markup.

    Items with children get a leading caret span and a nested list of the same
    class; leaves get only the text span. An empty forest renders to "".

    Uses an explicit work stack of pending literals and nodes rather than
    recursion, so very deep outlines cannot hit the recursion limit.
    """
    if not forest:
        return ""

    parts: list[str] = []
    stack: list[str | MindmapNode] = []
    _push_list(stack, forest)

    while stack:
        entry = stack.pop()
        if isinstance(entry, str):
            parts.append(entry)
            continue

        has_children = len(entry.children) > 0
        parts.append("<li>")
        if has_children:
            parts.append(CARET)
        parts.append(f"<span>{_html_escape(entry.text)}</span>")

        stack.append(ITEM_CLOSE)
        if has_children:
            _push_list(stack, entry.children)

    return "".join(parts)


_PAGE_STYLE = """<style>
body {
  font-family: Arial, sans-serif;
  padding: 20px;
}
.controls { margin-bottom: 1em; }
.mindmap-list, .mindmap-list ul {
  list-style: none;
  padding-left: 1.5em;
}
.mindmap-list ul { display: none; }
.mindmap-list .active { display: block; }
.mindmap-list li { padding: 0.2em 0; }
.caret {
  cursor: pointer; user-select: none; font-size: 1.2em; color: #555;
  display: inline-block; margin-right: 0.2em;
}
.caret::before { content: "\\25BA"; }
.caret-down::before { content: "\\25BC"; }
.mindmap-list li > span:not(.caret) { cursor: default; }
button { padding: 8px 12px; margin-right: 8px; cursor: pointer; }
</style>"""

_PAGE_SCRIPT = """<script>
document.addEventListener('DOMContentLoaded', function() {
  document.querySelectorAll('.caret').forEach(function(toggler) {
    toggler.addEventListener('click', function() {
      var nested = this.parentElement.querySelector('ul');
      if (nested) nested.classList.toggle('active');
      this.classList.toggle('caret-down');
    });
  });

  document.getElementById('expand-all').addEventListener('click', function() {
    document.querySelectorAll('.mindmap-list ul').forEach(function(ul) { ul.classList.add('active'); });
    document.querySelectorAll('.caret').forEach(function(c) { c.classList.add('caret-down'); });
  });

  document.getElementById('collapse-all').addEventListener('click', function() {
    document.querySelectorAll('.mindmap-list ul').forEach(function(ul) { ul.classList.remove('active'); });
    document.querySelectorAll('.caret').forEach(function(c) { c.classList.remove('caret-down'); });
  });
});
</script>"""


def generate_mindmap_page(
    forest: Sequence[MindmapNode],
    title: str = "Collapsible Mindmap",
) -> str:
    """Wrap the rendered forest in a standalone HTML document.

    The page carries the stylesheet that hides nested lists until they get the
    ``active`` class, the Expand All / Collapse All buttons, and the script that
    toggles ``active`` and ``caret-down`` when a caret is clicked.
    """
    safe_title = _html_escape(title)

    parts: list[str] = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '<meta charset="UTF-8">',
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f"<title>{safe_title}</title>",
        _PAGE_STYLE,
        "</head>",
        "<body>",
        f"<h1>{safe_title}</h1>",
        '<div class="controls">',
        '<button id="expand-all">Expand All</button>',
        '<button id="collapse-all">Collapse All</button>',
        "</div>",
        render_mindmap_html(forest),
        _PAGE_SCRIPT,
        "</body>",
        "</html>",
    ]
    return "\n".join(parts)

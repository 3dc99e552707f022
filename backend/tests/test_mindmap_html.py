"""Tests for the mindmap list renderer and the standalone page shell."""

from __future__ import annotations

from app.models.mindmap_models import MindmapNode
from app.services.mindmap_html import generate_mindmap_page, render_mindmap_html
from app.services.outline_parser import parse_outline


def _leaf(text: str) -> MindmapNode:
    return MindmapNode(text=text, children=[])


def test_render_empty_forest():
    assert render_mindmap_html([]) == ""


def test_render_leaves_have_no_caret():
    html = render_mindmap_html([_leaf("A"), _leaf("B")])
    assert html == (
        '<ul class="mindmap-list">\n'
        "<li><span>A</span></li>\n"
        "<li><span>B</span></li>\n"
        "</ul>\n"
    )
    assert "caret" not in html


def test_render_nested_forest_exact_markup():
    forest = parse_outline(["* A", "** B", "** C", "* D"])
    html = render_mindmap_html(forest)
    assert html == (
        '<ul class="mindmap-list">\n'
        '<li><span class="caret"></span><span>A</span>'
        '<ul class="mindmap-list">\n'
        "<li><span>B</span></li>\n"
        "<li><span>C</span></li>\n"
        "</ul>\n"
        "</li>\n"
        "<li><span>D</span></li>\n"
        "</ul>\n"
    )


def test_caret_only_on_items_with_children():
    forest = parse_outline(["* A", "** B", "*** C", "* D"])
    html = render_mindmap_html(forest)
    assert html.count('<span class="caret"></span>') == 2
    assert html.count('<ul class="mindmap-list">') == 3


def test_every_nested_list_carries_class():
    forest = parse_outline(["* A", "** B", "*** C"])
    html = render_mindmap_html(forest)
    assert html.count("<ul") == html.count('<ul class="mindmap-list">')


def test_escapes_markup_characters():
    html = render_mindmap_html([_leaf("<script>alert(\"x\")</script> & 'y'")])
    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert "&amp;" in html
    assert "&quot;" in html
    assert "&#x27;y&#x27;" in html


def test_render_is_deterministic():
    lines = ["* A", "** B", "*** C", "** D", "* E", "** <b>F</b>"]
    first = render_mindmap_html(parse_outline(lines))
    second = render_mindmap_html(parse_outline(lines))
    assert first == second


def test_render_preserves_order():
    forest = [_leaf(f"item {i}") for i in range(10)]
    html = render_mindmap_html(forest)
    positions = [html.index(f"<span>item {i}</span>") for i in range(10)]
    assert positions == sorted(positions)


def test_render_very_deep_tree():
    depth = 5000
    lines = ["*" * level + f" n{level}" for level in range(1, depth + 1)]
    html = render_mindmap_html(parse_outline(lines))
    assert html.count("<li>") == depth
    assert html.count('<span class="caret"></span>') == depth - 1
    assert html.count("</ul>\n") == depth


def test_page_contains_list_and_controls():
    forest = parse_outline(["* Root", "** Leaf"])
    page = generate_mindmap_page(forest)
    assert page.startswith("<!DOCTYPE html>")
    assert render_mindmap_html(forest) in page
    assert 'id="expand-all"' in page
    assert 'id="collapse-all"' in page
    assert ".mindmap-list ul { display: none; }" in page
    assert ".mindmap-list .active { display: block; }" in page
    assert "caret-down" in page


def test_page_escapes_title():
    page = generate_mindmap_page([], title="<Plans & Ideas>")
    assert "<title>&lt;Plans &amp; Ideas&gt;</title>" in page
    assert "<h1>&lt;Plans &amp; Ideas&gt;</h1>" in page


def test_page_with_empty_forest_has_no_list():
    page = generate_mindmap_page([])
    assert 'class="mindmap-list"' not in page.split("<body>", 1)[1].split("<script>", 1)[0]

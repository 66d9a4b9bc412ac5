# tests/test_decorations.py

from highlight.colors import hash_color
from highlight.decorations import (
    Decoration,
    build_decorations,
    hash_style,
    render_html,
    to_decorations,
)
from highlight.models import ACTION, KEYWORD, VARIABLE_HASH, Span


def test_to_decorations_maps_classes_and_styles():
    spans = [
        Span(0, 4, KEYWORD),
        Span(5, 8, ACTION),
        Span(9, 20, VARIABLE_HASH, {"hashColor": "#abcdef"}),
    ]
    decos = to_decorations(spans, offset=100)
    assert decos == [
        Decoration(100, 104, css_class="cm-semantic-keyword"),
        Decoration(105, 108, css_class="cm-semantic-action"),
        Decoration(109, 120, style=hash_style("#abcdef")),
    ]


def test_hash_span_without_color_is_skipped():
    assert to_decorations([Span(0, 3, VARIABLE_HASH)]) == []


def test_custom_classes():
    decos = to_decorations([Span(0, 4, KEYWORD)], classes={"keyword": "kw"})
    assert decos[0].css_class == "kw"


def test_build_decorations_uses_visible_ranges(fake_analyzer):
    doc = "run this\nTODO later"
    decos = build_decorations(doc, [(9, len(doc))], fake_analyzer)
    assert decos == [Decoration(9, 13, css_class="cm-semantic-keyword")]

    whole = build_decorations(doc, analyzer=fake_analyzer)
    assert [d.start for d in whole] == [0, 9]


def test_render_html():
    text = "TODO ask <UserService>"
    spans = [
        Span(0, 4, KEYWORD),
        Span(10, 21, VARIABLE_HASH, {"hashColor": hash_color("UserService")}),
    ]
    out = render_html(text, spans)
    color = hash_color("UserService")
    assert out.startswith('<span class="cm-semantic-keyword">TODO</span> ask &lt;')
    assert f"color: {color};" in out
    assert out.endswith("UserService</span>&gt;")


def test_render_html_escapes_configured_class():
    out = render_html("TODO", [Span(0, 4, KEYWORD)], classes={"keyword": 'kw" onclick="x'})
    assert out == '<span class="kw&quot; onclick=&quot;x">TODO</span>'

# highlight/decorations.py

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from highlight.analyzer import Analyzer
from highlight.models import VARIABLE_HASH, Span
from highlight.pipeline import analyze_ranges
from highlight.settings import DEFAULT_CLASSES


@dataclass
class Decoration:
    start: int
    end: int
    css_class: Optional[str] = None
    style: Optional[str] = None


def hash_style(color: str) -> str:
    return f"color: {color}; font-weight: bold; text-shadow: 0 0 5px {color}40;"


def to_decoration(
    span: Span, offset: int = 0, classes: Optional[Dict[str, str]] = None
) -> Optional[Decoration]:
    classes = classes or DEFAULT_CLASSES
    start, end = offset + span.start, offset + span.end

    if span.type == VARIABLE_HASH:
        color = span.hash_color
        if not color:
            return None
        return Decoration(start, end, style=hash_style(color))

    css_class = classes.get(span.type)
    if css_class is None:
        return None
    return Decoration(start, end, css_class=css_class)


def to_decorations(
    spans: Iterable[Span], offset: int = 0, classes: Optional[Dict[str, str]] = None
) -> List[Decoration]:
    out: List[Decoration] = []
    for span in spans:
        deco = to_decoration(span, offset, classes)
        if deco is not None:
            out.append(deco)
    return out


def build_decorations(
    doc: str,
    ranges: Optional[Iterable[Tuple[int, int]]] = None,
    analyzer: Optional[Analyzer] = None,
    classes: Optional[Dict[str, str]] = None,
) -> List[Decoration]:
    """
    Decorations for the visible ranges of `doc` (the whole doc when no
    ranges are given), in document coordinates.
    """
    if ranges is None:
        ranges = [(0, len(doc))]
    return to_decorations(analyze_ranges(doc, ranges, analyzer), classes=classes)


def render_html(text: str, spans: List[Span], classes: Optional[Dict[str, str]] = None) -> str:
    """
    Wrap each span of `text` in a <span> carrying its class or inline style.
    Text between spans is escaped and left as-is.
    """
    spans_sorted = sorted(spans, key=lambda s: s.start)
    out_parts = []
    cursor = 0

    for span in spans_sorted:
        if span.start < cursor:
            continue
        if span.start > cursor:
            out_parts.append(html.escape(text[cursor:span.start]))

        original = html.escape(text[span.start:span.end])
        deco = to_decoration(span, classes=classes)
        if deco is None:
            out_parts.append(original)
        elif deco.style:
            out_parts.append(f'<span style="{html.escape(deco.style)}">{original}</span>')
        else:
            out_parts.append(f'<span class="{html.escape(deco.css_class)}">{original}</span>')
        cursor = span.end

    if cursor < len(text):
        out_parts.append(html.escape(text[cursor:]))

    return "".join(out_parts)

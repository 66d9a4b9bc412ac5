# highlight/pipeline.py

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from .analyzer import Analyzer, get_analyzer
from .classify import classify
from .models import Span
from .patterns import structural_spans
from .resolve import merge_spans

logger = logging.getLogger(__name__)


def _collect_spans(text: str, analyzer: Analyzer) -> List[Span]:
    # 1) Structural keywords, then prompt labels (highest priority)
    structural = structural_spans(text)

    # 2) POS / NER contextual layer
    contextual = classify(text, analyzer)

    return merge_spans(structural, contextual)


def analyze_text(text: str, analyzer: Optional[Analyzer] = None) -> List[Span]:
    """
    Annotate `text` with non-overlapping spans sorted by start offset.

    Structural and prompt markers always win over contextual spans covering
    the same characters.
    """
    if not text or not text.strip():
        return []

    spans = _collect_spans(text, analyzer or get_analyzer())
    logger.debug("analyzed %d chars -> %d spans", len(text), len(spans))
    return spans


analyze = analyze_text


def analyze_ranges(
    doc: str,
    ranges: Iterable[Tuple[int, int]],
    analyzer: Optional[Analyzer] = None,
) -> List[Span]:
    """
    Analyze each visible range of `doc` on its own and return the spans in
    document coordinates.
    """
    spans: List[Span] = []
    for start, end in ranges:
        start = max(0, start)
        end = min(len(doc), end)
        if start >= end:
            continue
        for span in analyze_text(doc[start:end], analyzer):
            spans.append(span.shifted(start))

    # Overlapping ranges may cover the same text twice; the earliest span wins
    return merge_spans(sorted(spans, key=lambda s: s.start))

# highlight/resolve.py

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Set
from highlight.models import Span


class SpanCollector:
    """
    Greedy interval allocator over character positions.

    The first candidate to claim a position keeps it; any later candidate
    touching a claimed position is dropped. Callers submit higher-priority
    detectors first.
    """

    def __init__(self) -> None:
        self._occupied: Set[int] = set()
        self.spans: List[Span] = []

    def add(
        self,
        start: int,
        end: int,
        type: str,
        attributes: Optional[Dict[str, Any]] = None,
    ) -> bool:
        if start < 0 or start >= end:
            return False
        positions = range(start, end)
        if any(i in self._occupied for i in positions):
            return False

        self._occupied.update(positions)
        self.spans.append(Span(start, end, type, dict(attributes or {})))
        return True

    def add_span(self, span: Span) -> bool:
        return self.add(span.start, span.end, span.type, span.attributes)

    def sorted(self) -> List[Span]:
        # sorted() is stable, so insertion order breaks ties
        return sorted(self.spans, key=lambda s: s.start)


def merge_spans(*layers: Iterable[Span]) -> List[Span]:
    """
    Merge span layers into one non-overlapping, sorted list.

    Layers are fed in the order given; within a layer, spans are fed in
    iteration order. Earlier spans win every conflict.
    """
    collector = SpanCollector()
    for layer in layers:
        for span in layer:
            collector.add_span(span)
    return collector.sorted()

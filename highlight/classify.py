# highlight/classify.py

from __future__ import annotations

from typing import List
from highlight.analyzer import Analyzer
from highlight.colors import hash_color
from highlight.models import ACTION, ENTITY, NEGATED, VARIABLE_HASH, Analysis, Span
from highlight.patterns import is_pascal_case
from highlight.resolve import SpanCollector


# Entity labels worth highlighting; person/org style labels are too noisy
ENTITY_TYPES = frozenset(
    {
        "DATE",
        "TIME",
        "DURATION",
        "MONEY",
        "PERCENT",
        "URL",
        "EMAIL",
        "HASHTAG",
        "ORDINAL",
        "CARDINAL",
    }
)

SKIP_POS = frozenset({"PUNCT", "DET", "SPACE"})
NEGATABLE_POS = frozenset({"VERB", "ADJ", "AUX"})


def _entity_spans(text: str, analysis: Analysis, collector: SpanCollector) -> None:
    search_from = 0
    for entity in analysis.entities:
        if entity.label not in ENTITY_TYPES or not entity.text:
            continue
        idx = text.find(entity.text, search_from)
        if idx < 0:
            continue
        end = idx + len(entity.text)
        collector.add(idx, end, ENTITY)
        search_from = end


def _token_spans(text: str, analysis: Analysis, collector: SpanCollector) -> None:
    cursor = 0
    for token in analysis.tokens:
        cursor += len(token.preceding_spaces)
        token_from = cursor
        token_to = cursor + len(token.text)
        cursor = token_to

        if token.pos in SKIP_POS:
            continue
        if text[token_from:token_to] != token.text:
            continue

        if token.negated and token.pos in NEGATABLE_POS:
            collector.add(token_from, token_to, NEGATED)
        elif token.pos == "VERB":
            collector.add(token_from, token_to, ACTION)

        if token.pos == "PROPN" or is_pascal_case(token.text):
            collector.add(
                token_from,
                token_to,
                VARIABLE_HASH,
                {"hashColor": hash_color(token.text)},
            )


def contextual_spans(text: str, analysis: Analysis) -> List[Span]:
    """
    Turn an analysis of `text` into candidate spans:
    - allow-listed named entities -> entity
    - negated VERB/ADJ/AUX -> negated
    - VERB -> action
    - PROPN or PascalCase token -> variable-hash (with hashColor)

    Entities are placed first and win over token-level spans.
    """
    collector = SpanCollector()
    _entity_spans(text, analysis, collector)
    _token_spans(text, analysis, collector)
    return collector.sorted()


def classify(text: str, analyzer: Analyzer) -> List[Span]:
    if not text or not text.strip():
        return []
    return contextual_spans(text, analyzer.analyze(text))

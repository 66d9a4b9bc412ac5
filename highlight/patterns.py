# highlight/patterns.py

"""
Regex layer of the highlighter.

ENTITY_RE / find_entity_shapes are not a highlighting layer; they serve
external consumers such as find-references and the entity index.
"""

from __future__ import annotations

import regex as re
from typing import List, Tuple
from highlight.models import (
    KEYWORD,
    PROMPT_CONSTRAINT,
    PROMPT_CONTEXT,
    PROMPT_DIRECTIVE,
    Span,
)


# Structural signal keywords
STRUCTURE_RE = re.compile(
    r"\b(?:TODO|FIXME|HACK|NOTE|IMPORTANT|WARNING|CAUTION|ERROR|FAILED|SUCCESS|DONE|PENDING|QUEUED)\b"
)

# Prompt framework labels; only the label (through the colon) is highlighted
PROMPT_DIRECTIVE_RE = re.compile(
    r"^(?P<label>(?:Task|Objective|Goal|Directive):)",
    re.MULTILINE,
)
PROMPT_CONTEXT_RE = re.compile(
    r"^(?P<label>(?:Context|Background|Scenario|Role):)",
    re.MULTILINE,
)
PROMPT_CONSTRAINT_RE = re.compile(
    r"^(?P<label>(?:Constraint|Requirement|Restriction|Output|Format):)",
    re.MULTILINE,
)

PROMPT_PATTERNS = (
    (PROMPT_DIRECTIVE_RE, PROMPT_DIRECTIVE),
    (PROMPT_CONTEXT_RE, PROMPT_CONTEXT),
    (PROMPT_CONSTRAINT_RE, PROMPT_CONSTRAINT),
)

# Architectural entity shapes: PascalCase (2+ segments) or UPPER_CASE
ENTITY_RE = re.compile(r"\b(?:[A-Z][a-z]+(?:[A-Z][a-z]+)+|[A-Z]{2,}(?:_[A-Z0-9]+)*)\b")

# Whole-token PascalCase, the classifier's fallback when POS misses a PROPN
PASCAL_CASE_RE = re.compile(r"^[A-Z][a-z]+(?:[A-Z][a-z]+)+$")


def keyword_spans(text: str) -> List[Span]:
    return [Span(m.start(), m.end(), KEYWORD) for m in STRUCTURE_RE.finditer(text)]


def prompt_spans(text: str) -> List[Span]:
    """
    Prompt label spans, directive family first, then context, then constraint.
    """
    spans: List[Span] = []
    for pattern, span_type in PROMPT_PATTERNS:
        for m in pattern.finditer(text):
            spans.append(Span(m.start("label"), m.end("label"), span_type))
    return spans


def structural_spans(text: str) -> List[Span]:
    return keyword_spans(text) + prompt_spans(text)


def find_entity_shapes(text: str) -> List[Tuple[int, int, str]]:
    return [(m.start(), m.end(), m.group(0)) for m in ENTITY_RE.finditer(text)]


def is_pascal_case(token: str) -> bool:
    return PASCAL_CASE_RE.match(token) is not None

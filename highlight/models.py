# highlight/models.py

from dataclasses import dataclass, field
from typing import Any, Dict, List

KEYWORD = "keyword"
PROMPT_DIRECTIVE = "prompt-directive"
PROMPT_CONTEXT = "prompt-context"
PROMPT_CONSTRAINT = "prompt-constraint"
ENTITY = "entity"
ACTION = "action"
NEGATED = "negated"
VARIABLE_HASH = "variable-hash"

SPAN_TYPES = (
    KEYWORD,
    PROMPT_DIRECTIVE,
    PROMPT_CONTEXT,
    PROMPT_CONSTRAINT,
    ENTITY,
    ACTION,
    NEGATED,
    VARIABLE_HASH,
)


@dataclass
class Span:
    start: int
    end: int
    type: str
    attributes: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.start < 0 or self.start >= self.end:
            raise ValueError(f"Invalid span [{self.start}, {self.end})")
        if self.type not in SPAN_TYPES:
            raise ValueError(f"Unknown span type {self.type!r}")

    @property
    def hash_color(self):
        return self.attributes.get("hashColor")

    def overlaps(self, other: "Span") -> bool:
        return not (self.end <= other.start or other.end <= self.start)

    def shifted(self, offset: int) -> "Span":
        return Span(self.start + offset, self.end + offset, self.type, dict(self.attributes))


@dataclass
class Token:
    text: str
    pos: str
    negated: bool = False
    preceding_spaces: str = ""


@dataclass
class Entity:
    text: str
    label: str


@dataclass
class Analysis:
    """POS / negation / NER view of a text, in document order."""

    tokens: List[Token] = field(default_factory=list)
    entities: List[Entity] = field(default_factory=list)

# highlight/settings.py

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict

import yaml

from highlight.analyzer import DEFAULT_MODEL
from highlight.models import SPAN_TYPES, VARIABLE_HASH

DEFAULT_CLASSES: Dict[str, str] = {
    "entity": "cm-semantic-entity",
    "action": "cm-semantic-action",
    "keyword": "cm-semantic-keyword",
    "negated": "cm-semantic-negated",
    "prompt-directive": "cm-semantic-prompt-directive",
    "prompt-context": "cm-semantic-prompt-context",
    "prompt-constraint": "cm-semantic-prompt-constraint",
}


@dataclass
class Settings:
    model: str = DEFAULT_MODEL
    classes: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_CLASSES))


def load_settings(path: str) -> Settings:
    if not os.path.exists(path):
        return Settings()

    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}

    analyzer_cfg = cfg.get("analyzer", {}) or {}
    deco_cfg = cfg.get("decorations", {}) or {}

    classes = dict(DEFAULT_CLASSES)
    for span_type, css_class in (deco_cfg.get("classes") or {}).items():
        if span_type not in SPAN_TYPES or span_type == VARIABLE_HASH:
            raise ValueError(f"Cannot assign a class to span type {span_type!r}")
        classes[span_type] = str(css_class)

    return Settings(
        model=str(analyzer_cfg.get("model", DEFAULT_MODEL)),
        classes=classes,
    )

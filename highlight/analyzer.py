# highlight/analyzer.py

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Protocol, Tuple

import regex as re
import spacy

from highlight.models import Analysis, Entity, Token

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "en_core_web_sm"

NEGATION_CUES = {"not", "n't", "never", "no", "cannot"}

HASHTAG_RE = re.compile(r"(?<![\w#])#[A-Za-z][\w-]*")


class Analyzer(Protocol):
    """
    Anything that can tag a text with POS, negation and named entities.
    """

    def analyze(self, text: str) -> Analysis:
        ...


def _load_model(name: str) -> "spacy.language.Language":
    try:
        return spacy.load(name)
    except OSError:
        # Model package not installed yet; fetch it once
        from spacy.cli import download

        logger.info("Downloading spaCy model %r", name)
        download(name)
        return spacy.load(name)


def _negated_tokens(doc) -> set:
    """
    Indices of tokens under negation: a head that follows its `neg`
    dependent, or any token after a negation cue up to the next
    punctuation in the same sentence. Negation never reaches backwards.
    """
    negated = set()
    for token in doc:
        if any(child.dep_ == "neg" and child.i < token.i for child in token.children):
            negated.add(token.i)

    sents = doc.sents if doc.has_annotation("SENT_START") else [doc]
    for sent in sents:
        in_scope = False
        for token in sent:
            if token.pos_ == "PUNCT":
                in_scope = False
                continue
            if token.lower_ in NEGATION_CUES or token.dep_ == "neg":
                in_scope = True
                continue
            if in_scope:
                negated.add(token.i)
    return negated


class SpacyAnalyzer:
    def __init__(self, model_name: str = DEFAULT_MODEL, nlp=None):
        self.model_name = model_name
        # Lazy-loaded so import doesn't fail when the model is missing
        self._nlp = nlp

    @property
    def nlp(self) -> "spacy.language.Language":
        if self._nlp is None:
            logger.info("Loading spaCy model %r", self.model_name)
            self._nlp = _load_model(self.model_name)
        return self._nlp

    def analyze(self, text: str) -> Analysis:
        doc = self.nlp(text)
        return Analysis(tokens=self._tokens(doc, text), entities=self._entities(doc, text))

    def _tokens(self, doc, text: str) -> List[Token]:
        negated = _negated_tokens(doc)
        tokens: List[Token] = []
        prev_end = 0
        for token in doc:
            tokens.append(
                Token(
                    text=token.text,
                    pos=token.pos_,
                    negated=token.i in negated,
                    preceding_spaces=text[prev_end:token.idx],
                )
            )
            prev_end = token.idx + len(token.text)
        return tokens

    def _entities(self, doc, text: str) -> List[Entity]:
        found: List[Tuple[int, Entity]] = []
        for ent in doc.ents:
            found.append((ent.start_char, Entity(ent.text, ent.label_)))

        # spaCy's statistical NER has no URL / EMAIL / HASHTAG labels
        for token in doc:
            if token.like_email:
                found.append((token.idx, Entity(token.text, "EMAIL")))
            elif token.like_url:
                found.append((token.idx, Entity(token.text, "URL")))
        for m in HASHTAG_RE.finditer(text):
            found.append((m.start(), Entity(m.group(0), "HASHTAG")))

        found.sort(key=lambda item: item[0])

        # Drop mentions overlapping an earlier one so the text search in
        # the classifier never skips ahead to a later occurrence
        entities: List[Entity] = []
        last_end = 0
        for start, ent in found:
            if start < last_end:
                continue
            entities.append(ent)
            last_end = start + len(ent.text)
        return entities


_ANALYZERS: Dict[str, SpacyAnalyzer] = {}


def get_analyzer(model_name: Optional[str] = None) -> SpacyAnalyzer:
    name = model_name or DEFAULT_MODEL
    analyzer = _ANALYZERS.get(name)
    if analyzer is None:
        analyzer = SpacyAnalyzer(name)
        _ANALYZERS[name] = analyzer
    return analyzer

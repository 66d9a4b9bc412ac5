# tests/conftest.py

import regex as re
import pytest

from highlight.models import Analysis, Entity, Token

TOKEN_RE = re.compile(r"\w+|[^\w\s]")


class FakeAnalyzer:
    """
    Lexicon-driven stand-in for a POS/NER analyzer.

    Words not in `pos` are tagged NOUN; `negated` lists words whose negation
    flag is set; `entities` are reported (in order) when their text occurs.
    """

    def __init__(self, pos=None, negated=(), entities=()):
        self.pos = dict(pos or {})
        self.negated = set(negated)
        self.entities = list(entities)
        self.calls = 0

    def analyze(self, text):
        self.calls += 1
        tokens = []
        prev_end = 0
        for m in TOKEN_RE.finditer(text):
            word = m.group(0)
            if word in self.pos:
                pos = self.pos[word]
            elif not word[0].isalnum() and word != "_":
                pos = "PUNCT"
            else:
                pos = "NOUN"
            tokens.append(
                Token(
                    text=word,
                    pos=pos,
                    negated=word in self.negated,
                    preceding_spaces=text[prev_end:m.start()],
                )
            )
            prev_end = m.end()

        entities = [Entity(t, label) for t, label in self.entities if t in text]
        return Analysis(tokens=tokens, entities=entities)


@pytest.fixture
def fake_analyzer():
    return FakeAnalyzer(
        pos={
            "the": "DET",
            "The": "DET",
            "a": "DET",
            "run": "VERB",
            "deploy": "VERB",
            "Do": "AUX",
            "is": "AUX",
            "running": "VERB",
            "fix": "VERB",
            "Alice": "PROPN",
        },
        negated={"deploy"},
    )

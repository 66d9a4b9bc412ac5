import os
import logging
import logging.config

import yaml
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.schemas import (
    AnalyzeRequest,
    AnalyzeResponse,
    DecorationSchema,
    DecorationsRequest,
    DecorationsResponse,
    SpanSchema,
)
from highlight.analyzer import get_analyzer
from highlight.decorations import build_decorations
from highlight.pipeline import analyze_text
from highlight.settings import load_settings


def setup_logging():
    cfg_path = os.path.join("configs", "logging.yaml")
    if os.path.exists(cfg_path):
        try:
            with open(cfg_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
            os.makedirs("logs", exist_ok=True)
            logging.config.dictConfig(config)
        except Exception as e:
            print(f"[logging] Failed to load logging.yaml: {e}")
            logging.basicConfig(level=logging.INFO)
    else:
        logging.basicConfig(level=logging.INFO)


setup_logging()
logger = logging.getLogger("api")

settings = load_settings(os.environ.get("HIGHLIGHT_CONFIG", "configs/highlight.yaml"))

app = FastAPI(
    title="Semantic Highlighter",
    version="0.1.0",
    description="Span annotation of Markdown prose using regex + spaCy POS/NER.",
)

# Editor dev servers
origins = [
    "http://localhost:1420",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> dict:
    return {"status": "ok", "model": settings.model}


@app.post("/analyze", response_model=AnalyzeResponse, response_model_exclude_none=True)
def analyze(req: AnalyzeRequest) -> AnalyzeResponse:
    logger.info("Received /analyze request (%d chars)", len(req.text))
    spans = analyze_text(req.text, get_analyzer(settings.model))
    span_schemas = [
        SpanSchema(
            start=s.start,
            end=s.end,
            type=s.type,
            hash_color=s.hash_color,
        )
        for s in spans
    ]
    return AnalyzeResponse(spans=span_schemas)


@app.post("/decorations", response_model=DecorationsResponse, response_model_exclude_none=True)
def decorations(req: DecorationsRequest) -> DecorationsResponse:
    logger.info("Received /decorations request (%d chars)", len(req.text))
    decos = build_decorations(
        req.text,
        req.ranges,
        analyzer=get_analyzer(settings.model),
        classes=settings.classes,
    )
    return DecorationsResponse(
        decorations=[
            DecorationSchema(start=d.start, end=d.end, css_class=d.css_class, style=d.style)
            for d in decos
        ]
    )

# api/schemas.py

from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


class SpanSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    start: int = Field(alias="from")
    end: int = Field(alias="to")
    type: str
    hash_color: Optional[str] = Field(default=None, alias="hashColor")


class AnalyzeRequest(BaseModel):
    text: str


class AnalyzeResponse(BaseModel):
    spans: List[SpanSchema]


class DecorationSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    start: int = Field(alias="from")
    end: int = Field(alias="to")
    css_class: Optional[str] = Field(default=None, alias="class")
    style: Optional[str] = None


class DecorationsRequest(BaseModel):
    text: str
    ranges: Optional[List[Tuple[int, int]]] = None  # visible ranges; whole text if omitted


class DecorationsResponse(BaseModel):
    decorations: List[DecorationSchema]

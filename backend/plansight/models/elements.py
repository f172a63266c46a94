"""Decoded drawing/document primitives, the input contract of the engine.

Elements arrive already decoded (DWG/HWP decoding happens upstream). Each
variant carries a literal ``type`` tag so a mixed list validates as a
discriminated union.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

Point = tuple[float, float]

# CAD files put untagged geometry on layer "0".
DEFAULT_LAYER = "0"


class LineElement(BaseModel):
    model_config = {"frozen": True}

    type: Literal["line"] = "line"
    coordinates: tuple[Point, Point]
    layer: str = DEFAULT_LAYER

    @property
    def start(self) -> Point:
        return self.coordinates[0]

    @property
    def end(self) -> Point:
        return self.coordinates[1]


class CircleElement(BaseModel):
    model_config = {"frozen": True}

    type: Literal["circle"] = "circle"
    center: Point
    radius: float = Field(..., ge=0.0)
    layer: str = DEFAULT_LAYER


class TextElement(BaseModel):
    model_config = {"frozen": True}

    type: Literal["text"] = "text"
    content: str
    position: Point
    layer: str = DEFAULT_LAYER


Element = Annotated[
    LineElement | CircleElement | TextElement,
    Field(discriminator="type"),
]


# ── Paginated documents (HWP) ──


class TextSection(BaseModel):
    model_config = {"frozen": True}

    type: Literal["text"] = "text"
    content: str


class TableSection(BaseModel):
    model_config = {"frozen": True}

    type: Literal["table"] = "table"
    rows: int = Field(..., ge=0)
    columns: int = Field(..., ge=0)
    data: list[Any] = Field(default_factory=list)


class ImageSection(BaseModel):
    model_config = {"frozen": True}

    type: Literal["image"] = "image"
    description: str = ""


DocumentSection = Annotated[
    TextSection | TableSection | ImageSection,
    Field(discriminator="type"),
]

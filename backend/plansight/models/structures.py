"""Derived structure model: what the geometry engine infers from a drawing."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Room(BaseModel):
    """Axis-aligned enclosure. ``(x, y)`` is the min corner."""

    model_config = {"frozen": True}

    x: float
    y: float
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height


class Corridor(BaseModel):
    """Centre line of an elongated room plus its clear width."""

    model_config = {"frozen": True}

    x1: float
    y1: float
    x2: float
    y2: float
    width: float


class StructureSet(BaseModel):
    rooms: list[Room] = Field(default_factory=list)
    corridors: list[Corridor] = Field(default_factory=list)


class DrawingDimensions(BaseModel):
    width: float = 0.0
    height: float = 0.0


class DrawingAnalysis(BaseModel):
    """Headline numbers for a drawing, reported next to the interpretation."""

    total_elements: int = 0
    layers: list[str] = Field(default_factory=list)  # first-seen order
    dimensions: DrawingDimensions = Field(default_factory=DrawingDimensions)

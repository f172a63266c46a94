"""API response models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from plansight.models.elements import DocumentSection, Element
from plansight.models.structures import DrawingAnalysis, StructureSet


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    transforms_registered: int = 0


class DrawingInterpretationResponse(BaseModel):
    file_type: Literal["AutoCAD"] = "AutoCAD"
    file_name: str = ""
    file_size: int = 0
    elements: list[Element] = Field(default_factory=list)
    analysis: DrawingAnalysis = Field(default_factory=DrawingAnalysis)
    structures: StructureSet = Field(default_factory=StructureSet)
    interpretation: str = ""
    processing_time_ms: float = 0.0
    transforms_completed: int = 0
    transforms_failed: int = 0
    transforms_skipped: list[str] = Field(default_factory=list)
    errors: dict[str, str] = Field(default_factory=dict)


class DocumentInterpretationResponse(BaseModel):
    file_type: Literal["HWP"] = "HWP"
    file_name: str = ""
    file_size: int = 0
    title: str = ""
    sections: list[DocumentSection] = Field(default_factory=list)
    interpretation: str = ""

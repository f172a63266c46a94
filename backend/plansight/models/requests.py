"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from plansight.models.elements import DocumentSection, Element


class InterpretDrawingRequest(BaseModel):
    file_name: str = Field(default="", description="Original file name, echoed back")
    file_size: int = Field(default=0, ge=0, description="Original file size in bytes")
    elements: list[Element] = Field(
        default_factory=list,
        description="Decoded drawing elements (line / circle / text)",
    )


class InterpretDocumentRequest(BaseModel):
    file_name: str = Field(default="", description="Original file name, echoed back")
    file_size: int = Field(default=0, ge=0, description="Original file size in bytes")
    title: str = Field(default="", description="Document title")
    sections: list[DocumentSection] = Field(
        default_factory=list,
        description="Decoded document sections (text / table / image)",
    )

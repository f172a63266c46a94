"""PlanSight structure-inference engine."""

from plansight.engine.registry import transform, Layer, get_registry
from plansight.engine.context import DrawingContext
from plansight.engine.geometry import (
    classify_segments,
    derive_corridors,
    detect_rooms,
    identify_structures,
    room_search_size,
)
from plansight.engine.narrative import summarize
from plansight.engine.document_narrative import summarize_document
from plansight.engine.pipeline import Pipeline

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "DrawingContext",
    "Pipeline",
    "classify_segments",
    "detect_rooms",
    "derive_corridors",
    "identify_structures",
    "room_search_size",
    "summarize",
    "summarize_document",
]

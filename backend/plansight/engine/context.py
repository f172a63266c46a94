"""DrawingContext — the single mutable state object flowing through all engine steps.

Inputs (elements, file metadata) are set by the caller; every other field is
written by exactly one registered step.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from plansight.engine.geometry import HorizontalSegment, VerticalSegment
from plansight.models.elements import Element
from plansight.models.structures import Corridor, DrawingAnalysis, Room, StructureSet


@dataclass
class DrawingContext:
    """Shared state for one interpretation run."""

    # --- Inputs ---
    elements: list[Element] = field(default_factory=list)
    file_name: str = ""
    file_size: int = 0

    # --- Layer 0: classification ---
    horizontals: list[HorizontalSegment] = field(default_factory=list)
    verticals: list[VerticalSegment] = field(default_factory=list)
    analysis: DrawingAnalysis = field(default_factory=DrawingAnalysis)

    # --- Layer 1: structure ---
    rooms: list[Room] = field(default_factory=list)
    corridors: list[Corridor] = field(default_factory=list)

    # --- Layer 2: synthesis ---
    interpretation: str = ""

    # --- Pipeline metadata ---
    completed_transforms: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)
    skipped_transforms: set[str] = field(default_factory=set)
    # Set by Pipeline.run_streaming while a step runs; long steps report 0..1.
    progress_callback: Callable[[float], None] | None = None

    @property
    def num_elements(self) -> int:
        return len(self.elements)

    @property
    def num_segments(self) -> int:
        return len(self.horizontals) + len(self.verticals)

    @property
    def structures(self) -> StructureSet:
        return StructureSet(rooms=list(self.rooms), corridors=list(self.corridors))

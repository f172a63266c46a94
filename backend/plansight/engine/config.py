"""Pipeline configuration — controls adaptive behavior."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PipelineConfig:
    """Controls which steps run based on drawing size.

    Geometric tolerances are fixed in spatial_constants, not here.
    """

    # Room search tests every horizontal pair against every vertical pair;
    # above this many combinations it is skipped and the drawing is
    # reported without rooms.
    room_search_max_pairs: int = 250_000

"""T1.02 — Corridor Derivation.

A room longer than 3x its width, and under 3 units wide, also reads as a
corridor: its centre line plus clear width. Rooms are kept as rooms.
"""

from __future__ import annotations

from plansight.engine.context import DrawingContext
from plansight.engine.geometry import derive_corridors
from plansight.engine.registry import Layer, transform


@transform(
    id="T1.02",
    layer=Layer.STRUCTURE,
    dependencies=["T1.01"],
    description="Derive corridors from elongated rooms",
)
def corridor_derivation(ctx: DrawingContext) -> None:
    ctx.corridors = derive_corridors(ctx.rooms)

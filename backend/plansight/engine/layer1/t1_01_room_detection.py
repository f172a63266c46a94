"""T1.01 — Room Detection.

Every pair of horizontal walls x every pair of vertical walls is tested for
a closed rectangle (eight loose overlap checks). Rooms of side <= 1 are
discarded and near-identical rooms (all fields within 0.5) collapse to the
first one found. O(H^2 * V^2): the pipeline gate skips this step on large
drawings, and sub-progress is reported per outer iteration.
"""

from __future__ import annotations

from plansight.engine.context import DrawingContext
from plansight.engine.geometry import detect_rooms
from plansight.engine.registry import Layer, transform


@transform(
    id="T1.01",
    layer=Layer.STRUCTURE,
    dependencies=["T0.01"],
    description="Detect rectangular rooms from wall pairs",
)
def room_detection(ctx: DrawingContext) -> None:
    ctx.rooms = detect_rooms(ctx.horizontals, ctx.verticals, progress=ctx.progress_callback)

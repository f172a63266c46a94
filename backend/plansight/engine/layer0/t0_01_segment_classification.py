"""T0.01 — Segment Classification.

Bucket line elements into horizontal and vertical wall candidates
(|Δy| < 0.1 / |Δx| < 0.1). Diagonal and zero-length lines drop out here and
take no part in room detection.
"""

from __future__ import annotations

from plansight.engine.context import DrawingContext
from plansight.engine.geometry import classify_segments
from plansight.engine.registry import Layer, transform


@transform(
    id="T0.01",
    layer=Layer.CLASSIFICATION,
    description="Classify lines as horizontal / vertical",
)
def segment_classification(ctx: DrawingContext) -> None:
    ctx.horizontals, ctx.verticals = classify_segments(ctx.elements)

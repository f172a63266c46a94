"""T0.02 — Drawing Analysis.

Headline numbers for the report: element count, layers in first-seen order,
and the bounding extent of every element (line endpoints, circle bounds,
text anchors).
"""

from __future__ import annotations

import numpy as np

from plansight.engine.context import DrawingContext
from plansight.engine.registry import Layer, transform
from plansight.models.elements import CircleElement, LineElement, TextElement
from plansight.models.structures import DrawingAnalysis, DrawingDimensions
from plansight.utils.geometry import extent


def _element_points(ctx: DrawingContext) -> np.ndarray:
    points: list[tuple[float, float]] = []
    for e in ctx.elements:
        if isinstance(e, LineElement):
            points.extend(e.coordinates)
        elif isinstance(e, CircleElement):
            cx, cy = e.center
            points.append((cx - e.radius, cy - e.radius))
            points.append((cx + e.radius, cy + e.radius))
        elif isinstance(e, TextElement):
            points.append(e.position)
    return np.array(points, dtype=np.float64).reshape(-1, 2)


@transform(
    id="T0.02",
    layer=Layer.CLASSIFICATION,
    description="Count elements, list layers, measure drawing extent",
)
def drawing_analysis(ctx: DrawingContext) -> None:
    width, height = extent(_element_points(ctx))
    ctx.analysis = DrawingAnalysis(
        total_elements=ctx.num_elements,
        layers=list(dict.fromkeys(e.layer for e in ctx.elements)),
        dimensions=DrawingDimensions(width=round(width, 4), height=round(height, 4)),
    )

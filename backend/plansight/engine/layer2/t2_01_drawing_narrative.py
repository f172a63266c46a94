"""T2.01 — Drawing Narrative.

Turn elements + detected structures into the plain-language interpretation.
"""

from __future__ import annotations

from plansight.engine.context import DrawingContext
from plansight.engine.narrative import summarize
from plansight.engine.registry import Layer, transform


@transform(
    id="T2.01",
    layer=Layer.SYNTHESIS,
    dependencies=["T0.01", "T1.02"],
    description="Write the plain-language interpretation",
)
def drawing_narrative(ctx: DrawingContext) -> None:
    ctx.interpretation = summarize(ctx.elements, ctx.structures)

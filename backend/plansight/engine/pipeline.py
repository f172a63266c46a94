"""Pipeline orchestrator — runs engine steps in dependency order with adaptive gating."""

from __future__ import annotations

import logging
import time
from collections.abc import Generator
from typing import Any

from plansight.engine.config import PipelineConfig
from plansight.engine.context import DrawingContext
from plansight.engine.geometry import classify_segments, room_search_size
from plansight.engine.registry import TransformRegistry, TransformSpec, get_registry

logger = logging.getLogger(__name__)

# Steps that only make sense when the room search runs.
_ROOM_SEARCH_STEPS = {"T1.01", "T1.02"}


class Pipeline:
    """Orchestrates the step pipeline over a DrawingContext."""

    def __init__(
        self,
        registry: TransformRegistry | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or PipelineConfig()

    def _plan(self, ctx: DrawingContext) -> list[TransformSpec]:
        skip_ids = self._adaptive_gate(ctx)
        ctx.skipped_transforms = skip_ids & {s.id for s in self.registry.all()}
        # Skipped steps are dropped after ordering so their dependents still
        # run (against empty results) instead of pulling them back in.
        return [s for s in self.registry.resolve_order() if s.id not in skip_ids]

    def _run_step(self, spec: TransformSpec, ctx: DrawingContext) -> str:
        """Run one step, recording success or failure on the context."""
        try:
            spec.fn(ctx)
        except Exception as e:
            message = str(e) or type(e).__name__
            ctx.errors[spec.id] = message
            logger.warning("  %s FAILED: %s", spec.id, message)
            return message
        ctx.completed_transforms.add(spec.id)
        return ""

    def run(self, ctx: DrawingContext) -> DrawingContext:
        """Run the full pipeline on the given context."""
        start = time.perf_counter()
        ordered = self._plan(ctx)

        logger.info(
            "Pipeline: %d steps queued (%d skipped) for %d elements",
            len(ordered),
            len(ctx.skipped_transforms),
            ctx.num_elements,
        )

        for spec in ordered:
            t0 = time.perf_counter()
            if not self._run_step(spec, ctx):
                logger.debug("  %s completed in %.1fms", spec.id, (time.perf_counter() - t0) * 1000)

        logger.info(
            "Pipeline complete: %d/%d steps in %.0fms",
            len(ctx.completed_transforms),
            len(ordered),
            (time.perf_counter() - start) * 1000,
        )
        return ctx

    def run_streaming(self, ctx: DrawingContext) -> Generator[dict[str, Any], None, None]:
        """Run the pipeline, yielding a progress dict before and after each step.

        The caller's ``ctx`` is mutated in-place, so after the generator is
        exhausted the context holds all results (same as ``run()``). Closing
        the generator early stops the run at the next step boundary.
        """
        ordered = self._plan(ctx)
        total = len(ordered)

        def event(spec: TransformSpec, index: int, **extra: Any) -> dict[str, Any]:
            return {
                "transform_id": spec.id,
                "description": spec.description,
                "layer": spec.layer.name,
                "index": index,
                "total": total,
                "elapsed_ms": 0.0,
                "status": "running",
                "error": "",
                **extra,
            }

        for i, spec in enumerate(ordered):
            yield event(spec, i)

            sub_events: list[dict[str, Any]] = []

            def _on_sub_progress(pct: float, _spec=spec, _i=i) -> None:
                sub_events.append(event(_spec, _i, sub_progress=round(pct, 2)))

            ctx.progress_callback = _on_sub_progress
            t0 = time.perf_counter()
            try:
                error = self._run_step(spec, ctx)
            finally:
                ctx.progress_callback = None
            elapsed_ms = round((time.perf_counter() - t0) * 1000, 1)

            yield from sub_events

            yield event(
                spec,
                i,
                elapsed_ms=elapsed_ms,
                status="error" if error else "ok",
                error=error,
            )

    def _adaptive_gate(self, ctx: DrawingContext) -> set[str]:
        """Determine which steps to skip based on drawing size.

        Large drawings skip the quartic room search (and the corridor step
        that only reads its output).
        """
        skip: set[str] = set()
        horizontals, verticals = classify_segments(ctx.elements)
        n_pairs = room_search_size(horizontals, verticals)
        if n_pairs > self.config.room_search_max_pairs:
            logger.warning(
                "Room search skipped: %d wall-pair combinations exceeds limit of %d",
                n_pairs,
                self.config.room_search_max_pairs,
            )
            skip.update(_ROOM_SEARCH_STEPS)
        return skip


def create_pipeline(config: PipelineConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance."""
    return Pipeline(config=config)

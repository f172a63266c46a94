"""Step registry — each engine step is a standalone function registered via decorator.

Usage:
    @transform(id="T1.01", layer=Layer.STRUCTURE, dependencies=["T0.01"])
    def room_detection(ctx: DrawingContext) -> None:
        ctx.rooms = detect_rooms(ctx.horizontals, ctx.verticals)

Adding a step = one module with the decorator under a layer package.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from plansight.engine.context import DrawingContext

logger = logging.getLogger(__name__)


class Layer(enum.IntEnum):
    CLASSIFICATION = 0  # element → segment buckets, drawing extent
    STRUCTURE = 1  # rooms, corridors
    SYNTHESIS = 2  # prose


@dataclass
class TransformSpec:
    id: str
    layer: Layer
    fn: Callable[["DrawingContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class TransformRegistry:
    """Registry of engine steps, keyed by ID."""

    def __init__(self) -> None:
        self._transforms: dict[str, TransformSpec] = {}

    def register(self, spec: TransformSpec) -> None:
        if spec.id in self._transforms:
            raise ValueError(f"Duplicate transform ID: {spec.id}")
        self._transforms[spec.id] = spec
        logger.debug("Registered transform %s (%s)", spec.id, spec.layer.name)

    def get(self, transform_id: str) -> TransformSpec:
        return self._transforms[transform_id]

    def get_layer(self, layer: Layer) -> list[TransformSpec]:
        return sorted(
            (s for s in self._transforms.values() if s.layer == layer),
            key=lambda s: s.id,
        )

    def all(self) -> list[TransformSpec]:
        return sorted(self._transforms.values(), key=lambda s: (s.layer, s.id))

    def resolve_order(self) -> list[TransformSpec]:
        """All registered steps in dependency order (Kahn), ties broken by ID.

        Dependencies on unregistered IDs are ignored.
        """
        pool = self._transforms

        waiting: dict[str, set[str]] = {
            tid: {d for d in spec.dependencies if d in pool} for tid, spec in pool.items()
        }
        ready = sorted(tid for tid, deps in waiting.items() if not deps)
        ordered: list[TransformSpec] = []

        while ready:
            tid = ready.pop(0)
            ordered.append(pool[tid])
            del waiting[tid]
            for other, deps in waiting.items():
                if tid in deps:
                    deps.discard(tid)
                    if not deps:
                        ready.append(other)
            ready.sort()

        if waiting:
            raise ValueError(f"Circular dependency detected among: {set(waiting)}")
        return ordered

    @property
    def count(self) -> int:
        return len(self._transforms)


_registry = TransformRegistry()


def get_registry() -> TransformRegistry:
    return _registry


def transform(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator registering a step function on the module-level registry."""

    def decorator(fn: Callable[["DrawingContext"], None]):
        _registry.register(
            TransformSpec(
                id=id,
                layer=layer,
                fn=fn,
                dependencies=dependencies or [],
                description=description,
            )
        )
        return fn

    return decorator

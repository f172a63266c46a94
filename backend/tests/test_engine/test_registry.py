"""Tests for the transform registry."""

import pytest

from plansight.engine.context import DrawingContext
from plansight.engine.registry import Layer, TransformRegistry, TransformSpec


def _noop(ctx: DrawingContext) -> None:
    pass


def test_register_and_get():
    reg = TransformRegistry()
    spec = TransformSpec(id="T0.01", layer=Layer.CLASSIFICATION, fn=_noop)
    reg.register(spec)
    assert reg.get("T0.01") is spec
    assert reg.count == 1


def test_duplicate_id_rejected():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T0.01", layer=Layer.CLASSIFICATION, fn=_noop))
    with pytest.raises(ValueError, match="Duplicate"):
        reg.register(TransformSpec(id="T0.01", layer=Layer.STRUCTURE, fn=_noop))


def test_get_layer():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T1.02", layer=Layer.STRUCTURE, fn=_noop))
    reg.register(TransformSpec(id="T0.01", layer=Layer.CLASSIFICATION, fn=_noop))
    reg.register(TransformSpec(id="T1.01", layer=Layer.STRUCTURE, fn=_noop))
    assert [s.id for s in reg.get_layer(Layer.STRUCTURE)] == ["T1.01", "T1.02"]


def test_resolve_order_with_deps():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T2.01", layer=Layer.SYNTHESIS, fn=_noop, dependencies=["T1.01"]))
    reg.register(TransformSpec(id="T1.01", layer=Layer.STRUCTURE, fn=_noop, dependencies=["T0.01"]))
    reg.register(TransformSpec(id="T0.01", layer=Layer.CLASSIFICATION, fn=_noop))
    ids = [s.id for s in reg.resolve_order()]
    assert ids == ["T0.01", "T1.01", "T2.01"]


def test_resolve_order_all():
    reg = TransformRegistry()
    for i in range(5):
        reg.register(TransformSpec(id=f"T0.0{i+1}", layer=Layer.CLASSIFICATION, fn=_noop))
    order = reg.resolve_order()
    assert [s.id for s in order] == ["T0.01", "T0.02", "T0.03", "T0.04", "T0.05"]


def test_unregistered_dependency_ignored():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T1.01", layer=Layer.STRUCTURE, fn=_noop, dependencies=["T0.99"]))
    assert [s.id for s in reg.resolve_order()] == ["T1.01"]


def test_circular_dependency():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T1.01", layer=Layer.STRUCTURE, fn=_noop, dependencies=["T1.02"]))
    reg.register(TransformSpec(id="T1.02", layer=Layer.STRUCTURE, fn=_noop, dependencies=["T1.01"]))
    with pytest.raises(ValueError, match="Circular"):
        reg.resolve_order()

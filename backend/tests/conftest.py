"""Shared test fixtures and drawing builders."""

from __future__ import annotations

import pytest

from plansight.models.elements import CircleElement, LineElement, TextElement


def line(x1: float, y1: float, x2: float, y2: float, layer: str = "Walls") -> LineElement:
    return LineElement(coordinates=((x1, y1), (x2, y2)), layer=layer)


def rectangle(x: float, y: float, w: float, h: float, layer: str = "Walls") -> list[LineElement]:
    """Four wall lines: bottom, top, left, right."""
    return [
        line(x, y, x + w, y, layer),
        line(x, y + h, x + w, y + h, layer),
        line(x, y, x, y + h, layer),
        line(x + w, y, x + w, y + h, layer),
    ]


def grid(n: int, spacing: float, layer: str = "Walls") -> list[LineElement]:
    """n horizontal + n vertical full-length walls, ``spacing`` apart."""
    size = (n - 1) * spacing
    walls = [line(0, i * spacing, size, i * spacing, layer) for i in range(n)]
    walls += [line(i * spacing, 0, i * spacing, size, layer) for i in range(n)]
    return walls


def text(content: str, x: float = 0.0, y: float = 0.0, layer: str = "Text") -> TextElement:
    return TextElement(content=content, position=(x, y), layer=layer)


def circle(cx: float, cy: float, r: float, layer: str = "Parts") -> CircleElement:
    return CircleElement(center=(cx, cy), radius=r, layer=layer)


# The exact 10 x 5 box: h1, h2, v1, v2
SINGLE_ROOM = rectangle(0, 0, 10, 5)

# 3 x 3 walls, 10 apart: nine rectangles (four 10x10, two 10x20, two 20x10, one 20x20)
GRID_PLAN = grid(3, 10.0)

# Mostly circles: reads as a mechanical part
FLANGE = [
    circle(50, 50, 30),
    circle(25, 75, 15),
    circle(75, 75, 15),
    line(0, 0, 100, 100, "Layer1"),
    line(0, 100, 100, 0, "Layer1"),
]


@pytest.fixture
def single_room() -> list[LineElement]:
    return list(SINGLE_ROOM)


@pytest.fixture
def grid_plan() -> list[LineElement]:
    return list(GRID_PLAN)


@pytest.fixture
def flange() -> list:
    return list(FLANGE)

"""Orthogonal structure inference: segment buckets, rooms, corridors.

Leaf module of the engine. It takes decoded drawing elements and returns a
StructureSet; it never raises on well-formed elements and returns empty
results when nothing is found. The pipeline transforms in layer0/layer1
are thin wrappers around the functions here.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass

import numpy as np

from plansight.engine.spatial_constants import (
    AXIS_TOLERANCE,
    CORRIDOR_ASPECT_RATIO,
    CORRIDOR_MAX_WIDTH,
    MIN_ROOM_SIDE,
    OVERLAP_TOLERANCE,
    PARALLEL_SEPARATION,
)
from plansight.models.elements import Element, LineElement
from plansight.models.structures import Corridor, Room, StructureSet
from plansight.utils.geometry import intervals_overlap

logger = logging.getLogger(__name__)

# Above this many candidate segments the quartic room search gets slow
# enough to be worth a log line.
_LARGE_SEARCH_SEGMENTS = 200


@dataclass(frozen=True)
class HorizontalSegment:
    """Horizontal wall candidate, ``x1 <= x2``."""

    x1: float
    x2: float
    y: float

    @property
    def length(self) -> float:
        return self.x2 - self.x1


@dataclass(frozen=True)
class VerticalSegment:
    """Vertical wall candidate, ``y1 <= y2``."""

    y1: float
    y2: float
    x: float

    @property
    def length(self) -> float:
        return self.y2 - self.y1


def classify_segments(
    elements: Iterable[Element],
) -> tuple[list[HorizontalSegment], list[VerticalSegment]]:
    """Split line elements into horizontal and vertical segments.

    Diagonal lines and zero-length lines fall into neither bucket. The fixed
    coordinate comes from the first endpoint; the free axis is sorted so
    overlap tests downstream do not depend on drawing direction.
    """
    lines = [e for e in elements if isinstance(e, LineElement)]
    if not lines:
        return [], []

    # (N, 2, 2): line, endpoint, axis
    coords = np.array([line.coordinates for line in lines], dtype=np.float64)
    dx = np.abs(coords[:, 1, 0] - coords[:, 0, 0])
    dy = np.abs(coords[:, 1, 1] - coords[:, 0, 1])
    flat = dy < AXIS_TOLERANCE
    upright = dx < AXIS_TOLERANCE
    degenerate = flat & upright

    horizontals: list[HorizontalSegment] = []
    verticals: list[VerticalSegment] = []

    for i in np.flatnonzero(flat & ~degenerate):
        (x1, y1), (x2, _) = coords[i]
        horizontals.append(
            HorizontalSegment(x1=float(min(x1, x2)), x2=float(max(x1, x2)), y=float(y1))
        )

    for i in np.flatnonzero(upright & ~degenerate):
        (x1, y1), (_, y2) = coords[i]
        verticals.append(
            VerticalSegment(y1=float(min(y1, y2)), y2=float(max(y1, y2)), x=float(x1))
        )

    dropped = len(lines) - len(horizontals) - len(verticals)
    logger.debug(
        "Segments: %d horizontal, %d vertical, %d dropped (diagonal/degenerate)",
        len(horizontals),
        len(verticals),
        dropped,
    )
    return horizontals, verticals


def _bounds_rectangle(
    h1: HorizontalSegment,
    h2: HorizontalSegment,
    v1: VerticalSegment,
    v2: VerticalSegment,
) -> bool:
    """Every wall must reach both of the walls it meets."""
    tol = OVERLAP_TOLERANCE
    return (
        intervals_overlap(h1.x1, h1.x2, v1.x, v1.x, tol)
        and intervals_overlap(h1.x1, h1.x2, v2.x, v2.x, tol)
        and intervals_overlap(h2.x1, h2.x2, v1.x, v1.x, tol)
        and intervals_overlap(h2.x1, h2.x2, v2.x, v2.x, tol)
        and intervals_overlap(v1.y1, v1.y2, h1.y, h1.y, tol)
        and intervals_overlap(v1.y1, v1.y2, h2.y, h2.y, tol)
        and intervals_overlap(v2.y1, v2.y2, h1.y, h1.y, tol)
        and intervals_overlap(v2.y1, v2.y2, h2.y, h2.y, tol)
    )


_Cell = tuple[int, int]


def _cell(room: Room) -> _Cell:
    """Grid cell of a room's min corner; cells are one dedup tolerance wide."""
    return (
        math.floor(room.x / OVERLAP_TOLERANCE),
        math.floor(room.y / OVERLAP_TOLERANCE),
    )


def _is_duplicate(candidate: Room, seen: dict[_Cell, list[Room]]) -> bool:
    # Corners within the tolerance land in the same or an adjacent cell.
    tol = OVERLAP_TOLERANCE
    cx, cy = _cell(candidate)
    return any(
        abs(r.x - candidate.x) < tol
        and abs(r.y - candidate.y) < tol
        and abs(r.width - candidate.width) < tol
        and abs(r.height - candidate.height) < tol
        for dx in (-1, 0, 1)
        for dy in (-1, 0, 1)
        for r in seen.get((cx + dx, cy + dy), ())
    )


def detect_rooms(
    horizontals: list[HorizontalSegment],
    verticals: list[VerticalSegment],
    progress: Callable[[float], None] | None = None,
) -> list[Room]:
    """Find rectangles bounded by two horizontal and two vertical segments.

    Pairs are enumerated h1 < h2, v1 < v2 in list order, so the first
    candidate in that order survives deduplication. O(H^2 * V^2).

    ``progress`` is called with the completed fraction after each outer
    iteration.
    """
    n_h = len(horizontals)
    n_v = len(verticals)
    if n_h + n_v > _LARGE_SEARCH_SEGMENTS:
        logger.info("Room search over %d horizontal x %d vertical segments", n_h, n_v)

    # Vertical pairs do not depend on the horizontal pair; build them once.
    vertical_pairs: list[tuple[VerticalSegment, VerticalSegment]] = []
    for a in range(n_v):
        for b in range(a + 1, n_v):
            if abs(verticals[a].x - verticals[b].x) > PARALLEL_SEPARATION:
                vertical_pairs.append((verticals[a], verticals[b]))

    rooms: list[Room] = []
    seen: dict[_Cell, list[Room]] = {}
    for i in range(n_h):
        h1 = horizontals[i]
        for j in range(i + 1, n_h):
            h2 = horizontals[j]
            if abs(h1.y - h2.y) <= PARALLEL_SEPARATION:
                continue
            for v1, v2 in vertical_pairs:
                if not _bounds_rectangle(h1, h2, v1, v2):
                    continue

                width = abs(v1.x - v2.x)
                height = abs(h1.y - h2.y)
                if width <= MIN_ROOM_SIDE or height <= MIN_ROOM_SIDE:
                    continue

                room = Room(x=min(v1.x, v2.x), y=min(h1.y, h2.y), width=width, height=height)
                if not _is_duplicate(room, seen):
                    rooms.append(room)
                    seen.setdefault(_cell(room), []).append(room)

        if progress is not None:
            progress((i + 1) / n_h)

    logger.debug("Room search: %d rooms", len(rooms))
    return rooms


def room_search_size(
    horizontals: list[HorizontalSegment],
    verticals: list[VerticalSegment],
) -> int:
    """Wall-pair combinations ``detect_rooms`` would test (H choose 2 x V choose 2)."""
    n_h, n_v = len(horizontals), len(verticals)
    return (n_h * (n_h - 1) // 2) * (n_v * (n_v - 1) // 2)


def derive_corridors(rooms: list[Room]) -> list[Corridor]:
    """Reinterpret long, narrow rooms as corridors (centre line + width)."""
    corridors: list[Corridor] = []
    for room in rooms:
        w, h = room.width, room.height
        if w > CORRIDOR_ASPECT_RATIO * h and h < CORRIDOR_MAX_WIDTH:
            mid_y = room.y + h / 2
            corridors.append(Corridor(x1=room.x, y1=mid_y, x2=room.x + w, y2=mid_y, width=h))
        elif h > CORRIDOR_ASPECT_RATIO * w and w < CORRIDOR_MAX_WIDTH:
            mid_x = room.x + w / 2
            corridors.append(Corridor(x1=mid_x, y1=room.y, x2=mid_x, y2=room.y + h, width=w))
    return corridors


def identify_structures(elements: Iterable[Element]) -> StructureSet:
    """Full classification pass: segments → rooms → corridors."""
    horizontals, verticals = classify_segments(elements)
    rooms = detect_rooms(horizontals, verticals)
    return StructureSet(rooms=rooms, corridors=derive_corridors(rooms))

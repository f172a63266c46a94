"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def intervals_overlap(a1: float, a2: float, b1: float, b2: float, tolerance: float) -> bool:
    """Loose overlap of ``[a1, a2]`` and ``[b1, b2]``.

    True when either endpoint of one interval falls inside the other
    interval widened by ``tolerance``. Pass ``(p, p)`` to test a point.
    """
    return (
        (a1 - tolerance <= b1 <= a2 + tolerance)
        or (a1 - tolerance <= b2 <= a2 + tolerance)
        or (b1 - tolerance <= a1 <= b2 + tolerance)
        or (b1 - tolerance <= a2 <= b2 + tolerance)
    )


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def extent(points: NDArray[np.float64]) -> tuple[float, float]:
    """Width and height of the bounding box of a point set."""
    xmin, ymin, xmax, ymax = bbox(points)
    return (xmax - xmin, ymax - ymin)

"""Fixed geometric tolerances for orthogonal structure inference.

All values are in drawing units and are not configurable.
"""

# A line whose off-axis delta is below this is axis-aligned.
AXIS_TOLERANCE = 0.1

# Slack for the extent/position overlap test and for room deduplication.
OVERLAP_TOLERANCE = 0.5

# Two parallel walls closer than this are the same wall, not a room.
PARALLEL_SEPARATION = 1.0

# Rooms must exceed this on both sides.
MIN_ROOM_SIDE = 1.0

# Corridor: long side > 3 x short side AND short side < 3 units.
CORRIDOR_ASPECT_RATIO = 3.0
CORRIDOR_MAX_WIDTH = 3.0

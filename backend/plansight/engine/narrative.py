"""Narrative synthesis: drawing elements + structures → plain-language report.

The report is built from independent paragraph builders run in a fixed
order. Keyword and structural judgments are ordered (predicate, text) rule
lists; the first matching rule wins, so list order is the precedence.
Every builder returns "" when it has nothing to say and the paragraph is
omitted.
"""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from plansight.engine.geometry import HorizontalSegment, VerticalSegment, classify_segments
from plansight.models.elements import CircleElement, Element, LineElement, TextElement
from plansight.models.structures import Room, StructureSet

# ── Composition ──
_TOP_LAYERS = 3

# ── Text excerpts ──
_MAX_TEXT_EXCERPTS = 5
_MIN_EXCERPT_CHARS = 2  # single characters are grid marks, not labels

# Plain numbers, "3x4" style sizes, or a number with a length unit.
_DIMENSION_PATTERNS = (
    re.compile(r"\d+(\.\d+)?(\s*[xX×]\s*\d+(\.\d+)?)?", re.ASCII),
    re.compile(r"\d+(\.\d+)?\s*(mm|cm|m|inch|ft|인치|밀리|센티|미터)", re.ASCII),
)

# ── Structural heuristics ──
_ORTHOGONAL_PLAN_MIN_LINES = 10  # per axis
_MULTI_ROOM_MIN_LINES = 5  # per axis, exclusive
_MULTI_ROOM_MIN_ROOMS = 3
_MANY_ROOMS = 4
_LARGE_ROOM_AREA = 20.0

_DISCLAIMER = (
    "Note: this interpretation is the output of an automated analysis. "
    "Have a professional review the drawing before relying on it."
)


@dataclass(frozen=True)
class DrawingFacts:
    """Everything the paragraph builders look at, gathered once."""

    elements: Sequence[Element]
    lines: list[LineElement]
    circles: list[CircleElement]
    texts: list[TextElement]
    horizontals: list[HorizontalSegment]
    verticals: list[VerticalSegment]
    rooms: list[Room]
    corridor_count: int

    def mentions(self, *keywords: str) -> bool:
        """Case-insensitive substring match against any text label."""
        return any(kw in t.content.lower() for t in self.texts for kw in keywords)

    @property
    def circle_heavy(self) -> bool:
        return len(self.circles) > len(self.lines) / 2


def _gather_facts(elements: Sequence[Element], structures: StructureSet) -> DrawingFacts:
    horizontals, verticals = classify_segments(elements)
    return DrawingFacts(
        elements=elements,
        lines=[e for e in elements if isinstance(e, LineElement)],
        circles=[e for e in elements if isinstance(e, CircleElement)],
        texts=[e for e in elements if isinstance(e, TextElement)],
        horizontals=horizontals,
        verticals=verticals,
        rooms=list(structures.rooms),
        corridor_count=len(structures.corridors),
    )


Rule = tuple[Callable[[DrawingFacts], bool], str]

_DRAWING_TYPE_RULES: list[Rule] = [
    (lambda f: f.mentions("plan", "평면도", "설계도"), "an architectural floor plan"),
    (lambda f: f.mentions("elevation", "입면도"), "an architectural elevation"),
    (lambda f: f.mentions("section", "단면도"), "an architectural section"),
    (
        lambda f: len(f.horizontals) >= _ORTHOGONAL_PLAN_MIN_LINES
        and len(f.verticals) >= _ORTHOGONAL_PLAN_MIN_LINES,
        "an orthogonal building plan",
    ),
    (lambda f: f.circle_heavy, "a mechanical part or equipment"),
]
_UNKNOWN_DRAWING_TYPE = "an unknown structure"


def _multi_room(f: DrawingFacts) -> bool:
    return (
        len(f.horizontals) > _MULTI_ROOM_MIN_LINES
        and len(f.verticals) > _MULTI_ROOM_MIN_LINES
        and len(f.rooms) >= _MULTI_ROOM_MIN_ROOMS
    )


_LAYOUT_RULES: list[Rule] = [
    (
        lambda f: len(f.rooms) >= _MANY_ROOMS,
        "The number of rooms suggests a residential building or office space.",
    ),
    (
        lambda f: any(r.area > _LARGE_ROOM_AREA for r in f.rooms),
        "A few rooms with one large space suggest a commercial space or a "
        "studio-style residence.",
    ),
]

# (predicate, text, refinements): refinements are tried only when the
# predicate matched and may add one sentence.
_PURPOSE_RULES: list[tuple[Callable[[DrawingFacts], bool], str, list[Rule]]] = [
    (
        lambda f: f.mentions("floor plan", "평면도"),
        "This is a building floor plan showing the arrangement and size of its rooms.",
        [],
    ),
    (
        lambda f: f.mentions("elevation", "입면"),
        "This is a building elevation showing the exterior and height of the building.",
        [],
    ),
    (
        lambda f: f.circle_heavy,
        "This is a mechanical part or engineering drawing, characterised by "
        "its many circular components.",
        [],
    ),
    (
        _multi_room,
        "This is a building floor plan divided into several rooms and spaces.",
        _LAYOUT_RULES,
    ),
]
_GENERIC_PURPOSE = (
    "This appears to be a design drawing for a specific structure or system. "
    "Its exact purpose needs confirmation by a specialist."
)


def _first_match(rules: list[Rule], facts: DrawingFacts, default: str) -> str:
    for predicate, text in rules:
        if predicate(facts):
            return text
    return default


def _fmt(value: float) -> str:
    return f"{value:.1f}"


def _count(n: int, singular: str, plural: str | None = None) -> str:
    return f"{n} {singular if n == 1 else (plural or singular + 's')}"


# ── Paragraph builders ──


def _describe_type_and_scale(f: DrawingFacts) -> str:
    drawing_type = _first_match(_DRAWING_TYPE_RULES, f, _UNKNOWN_DRAWING_TYPE)
    width = max((h.length for h in f.horizontals), default=0.0)
    height = max((v.length for v in f.verticals), default=0.0)
    return (
        f"This drawing is {drawing_type}, approximately {_fmt(width)} x {_fmt(height)} "
        f"units (typically meters) in size."
    )


def _describe_composition(f: DrawingFacts) -> str:
    parts = []
    if f.lines:
        parts.append(_count(len(f.lines), "line"))
    if f.circles:
        parts.append(_count(len(f.circles), "circular element"))
    if f.texts:
        parts.append(_count(len(f.texts), "text label"))

    text = f"It is made up of {_count(len(f.elements), 'element')}"
    text += f": {', '.join(parts)}." if parts else "."

    # Counter keeps first-seen order; sorted() is stable on ties.
    layers = Counter(e.layer for e in f.elements)
    text += f" The elements sit on {_count(len(layers), 'layer')}"
    if layers:
        ranked = sorted(layers.items(), key=lambda kv: kv[1], reverse=True)[:_TOP_LAYERS]
        named = ", ".join(f"'{name}' ({_count(n, 'element')})" for name, n in ranked)
        text += f"; the main layers are {named}."
    else:
        text += "."
    return text


def _describe_room(room: Room) -> str:
    return (
        f"{_fmt(room.width)} x {_fmt(room.height)} units "
        f"(about {_fmt(room.area)} square units)"
    )


def _describe_structures(f: DrawingFacts) -> str:
    if not f.rooms:
        return ""
    text = f"About {_count(len(f.rooms), 'room')} (or enclosed spaces) can be identified."
    by_area = sorted(f.rooms, key=lambda r: r.area, reverse=True)
    text += f" The largest space measures {_describe_room(by_area[0])}"
    if len(by_area) > 1:
        text += f", and the smallest measures {_describe_room(by_area[-1])}"
    text += "."
    if f.corridor_count == 1:
        text += " One of them is long and narrow enough to read as a corridor."
    elif f.corridor_count > 1:
        text += f" {f.corridor_count} of them are long and narrow enough to read as corridors."
    return text


def _describe_text(f: DrawingFacts) -> str:
    excerpts = [t.content for t in f.texts if len(t.content.strip()) >= _MIN_EXCERPT_CHARS]
    if not excerpts:
        return ""
    quoted = ", ".join(f'"{c}"' for c in excerpts[:_MAX_TEXT_EXCERPTS])
    return f"Main text found in the drawing: {quoted}."


def _describe_dimensions(f: DrawingFacts) -> str:
    found = [
        t.content for t in f.texts if any(p.search(t.content) for p in _DIMENSION_PATTERNS)
    ]
    if not found:
        return ""
    quoted = ", ".join(f'"{c}"' for c in found)
    return f"Dimension information found in the drawing: {quoted}."


def _describe_purpose(f: DrawingFacts) -> str:
    for predicate, text, refinements in _PURPOSE_RULES:
        if predicate(f):
            detail = _first_match(refinements, f, "")
            return f"Likely purpose: {text} {detail}".rstrip()
    return f"Likely purpose: {_GENERIC_PURPOSE}"


_PARAGRAPHS: list[Callable[[DrawingFacts], str]] = [
    _describe_type_and_scale,
    _describe_composition,
    _describe_structures,
    _describe_text,
    _describe_dimensions,
    _describe_purpose,
]


def summarize(elements: Sequence[Element], structures: StructureSet) -> str:
    """Plain-language interpretation of a drawing.

    Pure and deterministic. Paragraphs are separated by a blank line; the
    disclaimer is always last.
    """
    facts = _gather_facts(list(elements), structures)
    paragraphs = [p for p in (build(facts) for build in _PARAGRAPHS) if p]
    paragraphs.append(_DISCLAIMER)
    return "\n\n".join(paragraphs)

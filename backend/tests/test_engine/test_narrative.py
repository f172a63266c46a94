"""Tests for the drawing narrative."""

from __future__ import annotations

from plansight.engine.geometry import identify_structures
from plansight.engine.narrative import summarize
from plansight.models.structures import StructureSet
from tests.conftest import FLANGE, GRID_PLAN, circle, grid, line, rectangle, text

DISCLAIMER_MARK = "Have a professional review the drawing"


def _read(elements) -> str:
    return summarize(elements, identify_structures(elements))


def _paragraphs(report: str) -> list[str]:
    return report.split("\n\n")


class TestEmpty:
    def test_empty_drawing(self):
        report = summarize([], StructureSet())
        assert DISCLAIMER_MARK in report
        assert "unknown structure" in report
        assert "0.0 x 0.0 units" in report
        assert "enclosed spaces" not in report
        assert "Main text" not in report
        assert "Dimension information" not in report

    def test_disclaimer_is_last(self):
        report = _read(GRID_PLAN)
        assert _paragraphs(report)[-1].startswith("Note:")

    def test_deterministic(self):
        assert _read(GRID_PLAN) == _read(GRID_PLAN)


class TestDrawingType:
    def test_keyword_beats_structure(self):
        # Circle-heavy geometry, but the title says plan
        report = _read(FLANGE + [text("Floor Plan A-1")])
        first = _paragraphs(report)[0]
        assert "architectural floor plan" in first
        assert "mechanical" not in first

    def test_korean_plan_keyword(self):
        first = _paragraphs(_read([text("1층 평면도")]))[0]
        assert "architectural floor plan" in first

    def test_elevation(self):
        first = _paragraphs(_read([text("SOUTH ELEVATION")]))[0]
        assert "architectural elevation" in first

    def test_section(self):
        first = _paragraphs(_read([text("A-A 단면도")]))[0]
        assert "architectural section" in first

    def test_plan_wins_over_section(self):
        first = _paragraphs(_read([text("Section"), text("Site plan")]))[0]
        assert "architectural floor plan" in first

    def test_orthogonal_fallback(self):
        # Structures are irrelevant to the type call; skip the room search
        first = _paragraphs(summarize(grid(10, 2.0), StructureSet()))[0]
        assert "orthogonal building plan" in first

    def test_nine_per_axis_is_not_enough(self):
        first = _paragraphs(summarize(grid(9, 2.0), StructureSet()))[0]
        assert "orthogonal building plan" not in first

    def test_mechanical_fallback(self):
        first = _paragraphs(_read(FLANGE))[0]
        assert "mechanical part or equipment" in first

    def test_unknown(self):
        first = _paragraphs(_read(rectangle(0, 0, 10, 5)))[0]
        assert "unknown structure" in first


class TestScaleAndComposition:
    def test_scale_uses_longest_axis_lines(self):
        elements = [line(0, 0, 12.34, 0), line(0, 3, 5, 3), line(0, 0, 0, 7.26), line(0, 0, 50, 50)]
        first = _paragraphs(_read(elements))[0]
        assert "approximately 12.3 x 7.3 units" in first

    def test_scale_ignores_circles(self):
        first = _paragraphs(_read(rectangle(0, 0, 10, 5) + [circle(0, 0, 500)]))[0]
        assert "10.0 x 5.0 units" in first

    def test_counts(self):
        report = _read(FLANGE + [text("Title")])
        assert "6 elements: 2 lines, 3 circular elements, 1 text label." in report

    def test_top_three_layers(self):
        elements = [
            line(0, 0, 1, 1, "A"),
            line(0, 0, 1, 2, "B"),
            line(0, 0, 1, 3, "A"),
            line(0, 0, 1, 4, "C"),
            line(0, 0, 1, 5, "C"),
            line(0, 0, 1, 6, "A"),
            line(0, 0, 1, 7, "D"),
        ]
        report = _read(elements)
        assert "4 layers" in report
        assert "'A' (3 elements), 'C' (2 elements), 'B' (1 element)" in report
        assert "'D'" not in report


class TestStructures:
    def test_room_paragraph(self):
        report = _read(GRID_PLAN)
        assert "About 9 rooms (or enclosed spaces)" in report
        assert "largest space measures 20.0 x 20.0 units (about 400.0 square units)" in report
        assert "smallest measures 10.0 x 10.0 units (about 100.0 square units)" in report

    def test_single_room_has_no_smallest(self):
        report = _read(rectangle(0, 0, 10, 5))
        assert "About 1 room (or enclosed spaces)" in report
        assert "50.0 square units" in report
        assert "smallest" not in report

    def test_corridor_mentioned(self):
        report = _read(rectangle(0, 0, 20, 2))
        assert "read as a corridor" in report

    def test_no_rooms_no_paragraph(self):
        report = _read(FLANGE)
        assert "enclosed spaces" not in report


class TestText:
    def test_excerpts_limited_to_five(self):
        labels = ["Kitchen", "Bath", "Bedroom", "Hall", "Study", "Garage", "Porch"]
        report = _read([text(t) for t in labels])
        assert '"Study"' in report
        assert '"Garage"' not in report

    def test_single_characters_skipped(self):
        report = _read([text("A"), text(" B "), text("Lobby")])
        assert 'Main text found in the drawing: "Lobby".' in report

    def test_only_trivial_text_has_no_excerpts(self):
        report = _read([text("A")])
        assert "Main text" not in report

    def test_dimension_info(self):
        report = _read([text("Kitchen"), text("3000 x 4500"), text("2.4m"), text("Hall")])
        dims = next(p for p in _paragraphs(report) if p.startswith("Dimension information"))
        assert '"3000 x 4500"' in dims
        assert '"2.4m"' in dims
        assert "Kitchen" not in dims
        assert "Hall" not in dims

    def test_any_number_counts_as_dimension(self):
        report = _read([text("Floor Plan A-1")])
        assert 'Dimension information found in the drawing: "Floor Plan A-1".' in report


class TestPurpose:
    def _purpose(self, elements) -> str:
        return next(p for p in _paragraphs(_read(elements)) if p.startswith("Likely purpose"))

    def test_floor_plan_keyword(self):
        assert "building floor plan showing the arrangement" in self._purpose([text("Floor Plan")])

    def test_plain_plan_is_not_floor_plan(self):
        # Drawing type matches "plan", purpose needs "floor plan"
        assert "specialist" in self._purpose([text("Site plan")])

    def test_elevation_keyword(self):
        assert "building elevation" in self._purpose([text("동측 입면")])

    def test_mechanical(self):
        assert "mechanical part or engineering drawing" in self._purpose(FLANGE)

    def test_many_rooms_residential(self):
        purpose = self._purpose(grid(6, 4.0))
        assert "divided into several rooms" in purpose
        assert "residential building or office space" in purpose

    def test_few_rooms_with_large_space(self):
        elements = (
            rectangle(0, 0, 10, 5)
            + rectangle(100, 100, 4, 4)
            + rectangle(200, 200, 4, 4)
        )
        purpose = self._purpose(elements)
        assert "divided into several rooms" in purpose
        assert "commercial space or a studio-style residence" in purpose

    def test_few_small_rooms_no_refinement(self):
        elements = (
            rectangle(0, 0, 4, 4)
            + rectangle(100, 100, 4, 4)
            + rectangle(200, 200, 4, 4)
        )
        purpose = self._purpose(elements)
        assert "divided into several rooms" in purpose
        assert "residential" not in purpose
        assert "commercial" not in purpose

    def test_generic(self):
        assert "specialist" in self._purpose(rectangle(0, 0, 10, 5))

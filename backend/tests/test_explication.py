"""Tests for explication rows, text summary and PDF."""

import pytest

from planner.exceptions import ExportError, UnsupportedLanguageError
from planner.services.explication import (
    ROW_ROOM,
    ROW_SUBTOTAL,
    ROW_TOTAL,
    build_explication_rows,
    format_explication_text,
)
from planner.services.cost_estimate import SiteObject, SiteObjectKind
from planner.services.house_plan import HouseParameters, build_house_plan
from planner.services.pdf_generator import ExplicationPDFGenerator, generate_explication_pdf
from planner.services.room_allocation import LivingFormat


@pytest.fixture
def two_floor_plan(en_labels):
    params = HouseParameters(
        house_width=12, house_length=10, floors=2,
        format=LivingFormat.SIGNATURE, floor_comments=["Garden access"]
    )
    return build_house_plan(params, en_labels)


def test_rows_grouped_by_floor_with_subtotals(two_floor_plan):
    rows = build_explication_rows(two_floor_plan, "Floor subtotal", "Total area")

    subtotals = [r for r in rows if r.kind == ROW_SUBTOTAL]
    assert [r.floor_number for r in subtotals] == [1, 2]
    assert rows[-1].kind == ROW_TOTAL
    assert rows[-1].name == "Total area"
    assert rows[-1].area == pytest.approx(sum(r.area for r in subtotals))

    first_floor = [r for r in rows if r.kind == ROW_ROOM and r.floor_number == 1]
    assert len(first_floor) == len(two_floor_plan.floors[0].rooms)
    assert [r.position for r in first_floor] == list(range(1, len(first_floor) + 1))
    assert subtotals[0].area == pytest.approx(sum(r.area for r in first_floor))


def test_rows_to_dict(two_floor_plan):
    row = build_explication_rows(two_floor_plan)[0].to_dict()

    assert row == {
        'kind': ROW_ROOM,
        'floor_number': 1,
        'name': 'Entrance hall',
        'area': pytest.approx(8.52),
        'position': 1,
    }


def test_text_summary_sections(two_floor_plan):
    text = format_explication_text(two_floor_plan, {
        'name': 'PH-202610-1234', 'client': 'A. Client', 'house_width': 12, 'house_length': 10
    })
    lines = text.splitlines()

    assert lines[0] == "### PROJECT DATA FOR AI ANALYSIS ###"
    assert "PROJECT_ID: PH-202610-1234" in lines
    assert "CLIENT: A. Client" in lines
    assert "LIVING_FORMAT: SIGNATURE" in lines
    assert "TOTAL_AREA_M2: 240.00" in lines
    assert "FLOORS: 2" in lines
    assert "FOOTPRINT_WIDTH_M: 12" in lines
    assert "FOOTPRINT_DEPTH_M: 10" in lines
    assert lines.index("FLOOR_1:") < lines.index("FLOOR_2:")
    assert "  - Guest WC: 4.50m2" in lines
    assert "  - Staircase: 7.00m2" in lines
    assert not any("Garden access" in line for line in lines)
    assert "PLOT_WIDTH_M" not in text


def test_text_summary_plot_objects_and_wishes(two_floor_plan):
    text = format_explication_text(two_floor_plan, {
        'plot_width': 25, 'plot_length': 30,
        'site_objects': [
            SiteObject(SiteObjectKind.TERRACE, width=6, depth=3),
            SiteObject(SiteObjectKind.CARPORT, cars=2),
        ],
        'planning_wishes': 'Open kitchen',
        'files_attached': 2,
    })
    lines = text.splitlines()

    assert "PLOT_WIDTH_M: 25" in lines
    assert "PLOT_DEPTH_M: 30" in lines
    assert "PLOT_AREA_SOTKA: 7.50" in lines
    landscape = lines.index("[LANDSCAPE_OBJECTS]")
    assert lines[landscape + 1:landscape + 3] == ["- Terrace: 6x3m", "- Carport: 2 cars"]
    wishes = lines.index("[CLIENT_WISHES]")
    assert lines[wishes + 1:] == [
        "PLANNING: Open kitchen",
        "ADDITIONAL: No additional notes",
        "FILES_ATTACHED: 2",
    ]


def test_text_summary_without_project(two_floor_plan):
    text = format_explication_text(two_floor_plan)

    assert "PROJECT_ID" not in text
    assert "[EXPLICATION_OF_ROOMS]" in text
    assert "[LANDSCAPE_OBJECTS]" in text
    assert "PLANNING: No specific planning wishes" in text
    assert text.endswith("\n")


def test_pdf_document(two_floor_plan):
    buffer = generate_explication_pdf(two_floor_plan, {'name': 'Test', 'client': 'A. Client'}, 'en')

    data = buffer.getvalue()
    assert data.startswith(b'%PDF')
    assert len(data) > 1000


def test_pdf_rejects_unknown_language(two_floor_plan):
    with pytest.raises(UnsupportedLanguageError):
        generate_explication_pdf(two_floor_plan, language='de')


def test_pdf_bad_font_path():
    with pytest.raises(ExportError):
        ExplicationPDFGenerator(font_path='/nonexistent/font.ttf')

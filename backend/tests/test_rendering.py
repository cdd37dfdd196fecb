"""Tests for report rendering."""

from carcheck.client.rendering import (
    Row,
    fixed_rows,
    flatten_rows,
    render_printable_html,
    render_text,
    report_sections,
)


class TestFixedRows:
    def test_omits_empty_values(self, dvla_payload):
        dvla_payload["colour"] = ""
        dvla_payload["taxDueDate"] = None
        labels = [row.label for row in fixed_rows(dvla_payload)]
        assert "Make" in labels
        assert "Colour" not in labels
        assert "Tax due" not in labels

    def test_booleans_are_readable(self, dvla_payload):
        rows = {row.label: row.value for row in fixed_rows(dvla_payload)}
        assert rows["Marked for export"] == "No"

    def test_none_record(self):
        assert fixed_rows(None) == []


class TestFlattenRows:
    def test_nested(self):
        rows = flatten_rows({"summary": {"fuelType": "PETROL"}, "keepers": [{"dateOfChange": "2020-01-01"}]})
        assert rows == [
            Row("Summary / Fuel Type", "PETROL"),
            Row("Keepers 1 / Date Of Change", "2020-01-01"),
        ]

    def test_skips_empty(self):
        assert flatten_rows({"a": None, "b": [], "c": {}}) == []

    def test_zero_is_kept(self):
        assert flatten_rows({"colourChanges": 0}) == [Row("Colour Changes", "0")]


class TestReportSections:
    def test_orders_and_titles_sections(self):
        report = {
            "provider": "oneauto",
            "technical": {"doors": 5},
            "summary": {"registration": "AB12CDE", "make": "FORD"},
            "finance": [],
            "plateHistory": [{"previousPlate": "FO12RDX"}],
        }
        sections = report_sections(report)
        assert [s.title for s in sections] == ["Summary", "Plate History", "Technical"]
        assert sections[1].rows == [Row("1 / Previous Plate", "FO12RDX")]


def test_render_text(dvla_payload):
    text = render_text(dvla_payload, {"summary": {"model": "FOCUS"}})
    assert "Vehicle Check" in text
    assert "FORD" in text
    assert "Summary" in text
    assert "FOCUS" in text


def test_render_text_empty():
    assert render_text() == ""


def test_printable_html_escapes_and_prints(dvla_payload):
    dvla_payload["make"] = "<script>alert(1)</script>"
    html = render_printable_html("AB12CDE", dvla_payload)
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html
    assert "window.print()" in html
    assert "@media print" in html

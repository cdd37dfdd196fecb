"""Tests for error snippet cleaning and label humanizing."""

from carcheck.utils.text import clean_error_text, humanize_label


class TestCleanErrorText:
    def test_strips_markup(self):
        html = "<html><head><title>502</title></head><body><h1>Bad Gateway</h1><p>nginx</p></body></html>"
        cleaned = clean_error_text(html)
        assert "<" not in cleaned
        assert "Bad Gateway" in cleaned
        assert "nginx" in cleaned

    def test_collapses_whitespace(self):
        assert clean_error_text("  Service \n\n  unavailable  ") == "Service unavailable"

    def test_truncates(self):
        cleaned = clean_error_text("x" * 500, max_length=50)
        assert len(cleaned) == 50
        assert cleaned.endswith("...")

    def test_short_text_untouched(self):
        assert clean_error_text("Not JSON", max_length=50) == "Not JSON"

    def test_empty(self):
        assert clean_error_text(None) == ""
        assert clean_error_text("") == ""


class TestHumanizeLabel:
    def test_camel_case(self):
        assert humanize_label("yearOfManufacture") == "Year Of Manufacture"

    def test_snake_case(self):
        assert humanize_label("plate_history") == "Plate History"

    def test_single_word(self):
        assert humanize_label("make") == "Make"

    def test_digits(self):
        assert humanize_label("co2Emissions") == "Co2 Emissions"

    def test_acronym_kept(self):
        assert humanize_label("VIN") == "VIN"

    def test_empty(self):
        assert humanize_label("") == ""

"""
Turn proxy responses into display rows.

The basic check uses a fixed list of labelled rows; full reports are
rendered section by section with labels derived from the JSON keys.
"""

from dataclasses import dataclass, field
from html import escape
from typing import Any

from carcheck.services.remapping import is_empty
from carcheck.utils.text import humanize_label

# (label, key) rows for the flat DVLA check result
CHECK_ROWS: list[tuple[str, str]] = [
    ("Registration", "registrationNumber"),
    ("Make", "make"),
    ("Colour", "colour"),
    ("Fuel type", "fuelType"),
    ("Year of manufacture", "yearOfManufacture"),
    ("First registered", "monthOfFirstRegistration"),
    ("Engine capacity (cc)", "engineCapacity"),
    ("CO2 emissions (g/km)", "co2Emissions"),
    ("Euro status", "euroStatus"),
    ("Tax status", "taxStatus"),
    ("Tax due", "taxDueDate"),
    ("MOT status", "motStatus"),
    ("MOT expiry", "motExpiryDate"),
    ("Wheelplan", "wheelplan"),
    ("Type approval", "typeApproval"),
    ("Marked for export", "markedForExport"),
    ("Last V5C issued", "dateOfLastV5CIssued"),
]

# Full report sections in display order
REPORT_SECTIONS: list[str] = [
    "summary",
    "history",
    "finance",
    "keepers",
    "plateHistory",
    "performance",
    "technical",
    "motTests",
]


@dataclass(frozen=True)
class Row:
    label: str
    value: str


@dataclass
class Section:
    title: str
    rows: list[Row] = field(default_factory=list)


def format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "Yes" if value else "No"
    return str(value)


def fixed_rows(record: dict[str, Any] | None, rows: list[tuple[str, str]] = CHECK_ROWS) -> list[Row]:
    """Look up each (label, key) in ``record``, omitting empty values."""
    if not record:
        return []
    return [Row(label, format_value(record[key])) for label, key in rows if not is_empty(record.get(key))]


def flatten_rows(obj: Any, prefix: str = "") -> list[Row]:
    """
    Recursively flatten nested objects and arrays into labelled rows.

    {"keepers": [{"dateOfChange": "2020-01-01"}]}
        -> [Row("Keepers 1 / Date Of Change", "2020-01-01")]
    """
    if isinstance(obj, dict):
        rows = []
        for key, value in obj.items():
            label = humanize_label(key)
            rows.extend(flatten_rows(value, f"{prefix} / {label}" if prefix else label))
        return rows
    if isinstance(obj, list):
        rows = []
        for index, item in enumerate(obj, start=1):
            rows.extend(flatten_rows(item, f"{prefix} {index}" if prefix else str(index)))
        return rows
    if is_empty(obj):
        return []
    return [Row(prefix or "Value", format_value(obj))]


def report_sections(report: dict[str, Any] | None) -> list[Section]:
    """One section per non-empty part of a full report."""
    if not report:
        return []
    sections = []
    for key in REPORT_SECTIONS:
        rows = flatten_rows(report.get(key))
        if rows:
            sections.append(Section(humanize_label(key), rows))
    return sections


def render_text(basic: dict[str, Any] | None = None, full: dict[str, Any] | None = None) -> str:
    """Plain-text report for terminals."""
    sections = []
    if basic:
        sections.append(Section("Vehicle Check", fixed_rows(basic)))
    sections.extend(report_sections(full))

    lines = []
    for section in sections:
        lines.append(section.title)
        lines.append("-" * len(section.title))
        width = max((len(r.label) for r in section.rows), default=0)
        lines.extend(f"{r.label.ljust(width)}  {r.value}" for r in section.rows)
        lines.append("")
    return "\n".join(lines).rstrip() + "\n" if lines else ""


_PRINT_CSS = """
body { font-family: system-ui, sans-serif; margin: 2rem; color: #111; }
h1 { margin-bottom: 0.25rem; }
h2 { margin-top: 1.5rem; border-bottom: 1px solid #ccc; }
table { border-collapse: collapse; width: 100%; }
td { padding: 0.25rem 0.5rem; border-bottom: 1px solid #eee; vertical-align: top; }
td.label { font-weight: 600; width: 40%; }
@media print { .no-print { display: none; } }
"""


def render_printable_html(plate: str, basic: dict[str, Any] | None = None, full: dict[str, Any] | None = None) -> str:
    """
    Standalone HTML report that opens the browser print dialog on load,
    so the user can "Save as PDF".
    """
    sections = []
    if basic:
        sections.append(Section("Vehicle Check", fixed_rows(basic)))
    sections.extend(report_sections(full))

    body = []
    for section in sections:
        body.append(f"<h2>{escape(section.title)}</h2>\n<table>")
        for row in section.rows:
            body.append(f'<tr><td class="label">{escape(row.label)}</td><td>{escape(row.value)}</td></tr>')
        body.append("</table>")

    return (
        "<!doctype html>\n"
        '<html lang="en">\n<head>\n<meta charset="utf-8">\n'
        f"<title>Vehicle report {escape(plate)}</title>\n"
        f"<style>{_PRINT_CSS}</style>\n</head>\n<body>\n"
        f"<h1>Vehicle report: {escape(plate)}</h1>\n"
        '<button class="no-print" onclick="window.print()">Download PDF</button>\n'
        + "\n".join(body)
        + "\n<script>window.addEventListener('load', () => window.print());</script>\n"
        "</body>\n</html>\n"
    )

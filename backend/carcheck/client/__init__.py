"""
Report client: calls the proxy and renders the results.
"""

from carcheck.client.rendering import CHECK_ROWS, Row, Section, fixed_rows, flatten_rows, report_sections
from carcheck.client.report_client import ReportClient, ReportState

__all__ = [
    "CHECK_ROWS",
    "Row",
    "Section",
    "ReportClient",
    "ReportState",
    "fixed_rows",
    "flatten_rows",
    "report_sections",
]

"""
Text helpers for error snippets and display labels.
"""

import re

from bs4 import BeautifulSoup

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_SEPARATOR_RE = re.compile(r"[_\-\s]+")


def clean_error_text(text: str | None, max_length: int = 300) -> str:
    """
    Turn an upstream error body into a short plain-text snippet.

    Upstreams sometimes answer with an HTML error page instead of JSON;
    markup is stripped, whitespace collapsed and the result truncated.
    """
    if not text:
        return ""
    plain = BeautifulSoup(text, "html.parser").get_text(" ")
    plain = " ".join(plain.split())
    if len(plain) > max_length:
        return plain[: max(max_length - 3, 0)].rstrip() + "..."
    return plain


def humanize_label(key: str) -> str:
    """
    Convert a camelCase or snake_case key into a display label.

    "yearOfManufacture" -> "Year Of Manufacture"
    "plate_history"     -> "Plate History"
    "motTests"          -> "Mot Tests"
    """
    if not key:
        return ""
    spaced = _CAMEL_BOUNDARY_RE.sub(" ", str(key))
    words = [w for w in _SEPARATOR_RE.split(spaced) if w]
    return " ".join(w if w.isupper() and len(w) > 1 else w.capitalize() for w in words)

"""
UK registration plate normalization and validation.
"""

import re

_PLATE_RE = re.compile(r"^[A-Z0-9]{1,8}$")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_plate(raw: str | None) -> str:
    """
    Normalize a user-entered plate: trim, drop inner spaces, uppercase.
    " ab12 cde " -> "AB12CDE"
    """
    if raw is None:
        return ""
    return _WHITESPACE_RE.sub("", str(raw)).upper()


def validate_plate(plate: str) -> str | None:
    """Validate a normalized plate. Returns error message or None if valid."""
    if not plate:
        return "Please enter a registration number."
    if not _PLATE_RE.match(plate):
        return "Invalid registration format."
    return None

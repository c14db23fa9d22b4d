"""
LCCN (010), cataloging source (040) and field length checks.
"""

import re
from typing import Any, List, Optional

from ..diagnostics import Diagnostic
from ..record import RecordView
from ..settings import DEFAULT_SETTINGS, Settings

_LCCN_NUMBER = re.compile(r"\D*(\d{8,10})\D*")
_EIGHT_DIGITS = re.compile(r"\d{8}")
_TEN_DIGITS = re.compile(r"\d{10}")
_DIGITS_AND_SPACES = re.compile(r"[ \d]*")


def normalize_lccn(number: str) -> str:
    """Blank-padded form of an 8- or 10-digit LCCN as stored in 010 $a.

    Example:
        >>> normalize_lccn("85012345")
        '   85012345 '
        >>> normalize_lccn("2001012345")
        '  2001012345'
    """
    if len(number) == 8:
        return f"   {number} "
    return f"  {number}"


def check_010(record: Any, settings: Optional[Settings] = None) -> List[Diagnostic]:
    """Check the LCCN in the first 010 $a.

    The number must be 8 or 10 digits. An 8-digit number may not start with a
    year in ``Settings.lccn_old_years``; a 10-digit number must start with a
    year in ``Settings.lccn_ten_digit_years``. A valid number must be spaced
    exactly as ``normalize_lccn`` gives it.
    """
    settings = settings or DEFAULT_SETTINGS
    view = RecordView.of(record)
    field010 = view.field("010")
    original = field010.subfield("a") if field010 is not None else None
    if not original:
        return []

    warnings = []
    number, found = _LCCN_NUMBER.subn(r"\1", original, count=1)
    if not found:
        warnings.append(Diagnostic.of("010", "Could not find an 8-10 digit number in subfield 'a'."))

    if _EIGHT_DIGITS.fullmatch(number):
        year = number[:2]
        low, high = settings.lccn_old_years
        if low <= int(year) <= high:
            warnings.append(Diagnostic.of("010", f"First digits of LCCN are {year}."))
    elif _TEN_DIGITS.fullmatch(number):
        year = number[:4]
        low, high = settings.lccn_ten_digit_years
        if not low <= int(year) <= high:
            warnings.append(Diagnostic.of("010", f"First digits of LCCN are {year}"))
    else:
        warnings.append(Diagnostic.of("010", "LCCN subfield 'a' is not 8 or 10 digits"))

    if warnings:
        return warnings

    if original == normalize_lccn(number):
        return []
    if not _DIGITS_AND_SPACES.fullmatch(original):
        return [Diagnostic.of("010", "Subfield 'a' has non-digits.")]
    return [Diagnostic.of("010", "Subfield 'a' has improper spacing.")]


def check_040_present(record: Any, settings: Optional[Settings] = None) -> List[Diagnostic]:
    """Every record needs a cataloging source field."""
    view = RecordView.of(record)
    if view.has_field("040"):
        return []
    return [Diagnostic.of("040", "Record lacks 040 field.")]


def check_field_length(record: Any, settings: Optional[Settings] = None) -> List[Diagnostic]:
    """Report fields longer than ``Settings.max_field_length`` characters."""
    settings = settings or DEFAULT_SETTINGS
    view = RecordView.of(record)
    limit = settings.max_field_length
    return [
        Diagnostic.of(field.tag, f"Field is longer than {limit} bytes.")
        for field in view
        if len(field.as_string()) > limit
    ]

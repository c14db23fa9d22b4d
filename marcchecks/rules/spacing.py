"""
Spacing and repeated-punctuation checks over subfield text.

These look only at fields after 010: control fields hold no subfields and the
010 LCCN is blank-padded on purpose.
"""

import re
from typing import Any, Iterator, List, Optional

from ..diagnostics import Diagnostic
from ..record import FieldView, RecordView
from ..settings import Settings

_MULTIPLE_SPACES = re.compile(r"  +")
_TRAILING_SPACE = re.compile(r"\s+$")
_DOUBLE_PERIODS = re.compile(r"\.\.+")
_ELLIPSIS = re.compile(r"\.\.\.")
_DOUBLE_COMMAS = re.compile(r",,+")

INTERNAL_SPACE_EXEMPT = frozenset({"035", "787"})
LEADING_SPACE_EXEMPT = frozenset({"016"})
TRAILING_SPACE_EXEMPT = frozenset({"016"})

FLOATING_HYPHEN_TAGS = ("245", "246", "500", "501", "505", "508", "511", "520", "538", "546")


def _fields_after_010(view: RecordView) -> Iterator[FieldView]:
    for field in view:
        if field.tag_number is not None and field.tag_number > 10:
            yield field


def check_internal_spaces(record: Any, settings: Optional[Settings] = None) -> List[Diagnostic]:
    """Report runs of spaces inside subfields and subfields starting with a space."""
    view = RecordView.of(record)
    warnings = []
    for field in _fields_after_010(view):
        if field.tag in INTERNAL_SPACE_EXEMPT:
            continue
        for sub in field.subfields:
            if _MULTIPLE_SPACES.search(sub.value):
                warnings.append(Diagnostic.of(field.tag, "has multiple internal spaces."))
            if sub.value.startswith(" ") and field.tag not in LEADING_SPACE_EXEMPT:
                warnings.append(Diagnostic.of(field.tag, "Subfield starts with a space."))
    return warnings


def check_trailing_spaces(record: Any, settings: Optional[Settings] = None) -> List[Diagnostic]:
    """Report fields whose last subfield ends in whitespace."""
    view = RecordView.of(record)
    warnings = []
    for field in _fields_after_010(view):
        if field.tag in TRAILING_SPACE_EXEMPT or not field.subfields:
            continue
        if _TRAILING_SPACE.search(field.subfields[-1].value):
            warnings.append(Diagnostic.of(field.tag, "has trailing spaces."))
    return warnings


def check_double_periods(record: Any, settings: Optional[Settings] = None) -> List[Diagnostic]:
    """Report doubled periods that are not an ellipsis, and doubled commas.

    A subfield containing three periods in a row is taken to hold an ellipsis
    and its periods are not reported.
    """
    view = RecordView.of(record)
    warnings = []
    for field in _fields_after_010(view):
        for sub in field.subfields:
            if _DOUBLE_PERIODS.search(sub.value) and not _ELLIPSIS.search(sub.value):
                warnings.append(Diagnostic.of(
                    field.tag, "has multiple consecutive periods that do not appear to be ellipses."
                ))
            if _DOUBLE_COMMAS.search(sub.value):
                warnings.append(Diagnostic.of(field.tag, "has multiple consecutive commas."))
    return warnings


def find_floating_hyphens(record: Any, settings: Optional[Settings] = None) -> List[Diagnostic]:
    """Report space-hyphen-space in title and note fields.

    Fields are visited tag by tag in the order of ``FLOATING_HYPHEN_TAGS``.
    The diagnostic quotes the first 10 characters of the field.
    """
    view = RecordView.of(record)
    warnings = []
    for tag in FLOATING_HYPHEN_TAGS:
        for field in view.get_fields(tag):
            text = field.as_string()
            if " - " in text:
                warnings.append(Diagnostic.of(field.tag, f"May have a floating hyphen, {text[:10]}"))
    return warnings


def find_empty_subfields(record: Any, settings: Optional[Settings] = None) -> List[Diagnostic]:
    """Report subfields with no data. 037 is skipped in CIP records."""
    view = RecordView.of(record)
    warnings = []
    for field in view:
        if field.tag_number is None or field.tag_number < 10:
            continue
        if view.is_cip and field.tag == "037":
            continue
        for sub in field.subfields:
            if sub.value == "":
                warnings.append(Diagnostic.of(field.tag, f"Subfield {sub.code} is empty."))
    return warnings

"""
Terminal punctuation checks.

Some fields must close with a mark of punctuation (most 5xx notes, the 300
when a series statement follows it); others normally carry none (uniform
titles, varying titles, series statements, awards notes) unless the text ends
in an abbreviation.
"""

import re
from typing import Any, List, Optional

from ..diagnostics import Diagnostic
from ..record import SERIES_STATEMENTS, FieldView, RecordView
from ..settings import DEFAULT_SETTINGS, Settings

ENDING_PUNCTUATION_TAGS = frozenset({"500", "501", "504", "520", "538", "546", "508", "511"})
NON_PUNCTUATED_TAGS = frozenset({"240", "246", "440", "490", "586"})

_VALID_ENDING = re.compile(r"\)?[!?.]'?\"?$")
_PERIOD_ENDING = re.compile(r"[.]'?\"?$")
_CIP_500_PREFIXES = ("LCCN", "ISBN", "Preassigned")

PREVIEW_LENGTH = 10


def preview(data: str) -> str:
    """First and last 10 characters of text, as ``"<head> ___ <tail>"``."""
    return f"{data[:PREVIEW_LENGTH]} ___ {data[-PREVIEW_LENGTH:]}"


def _last_text_subfield(field: FieldView, skip_codes: str = "") -> Optional[str]:
    """Data of the last subfield whose code is not a digit or in ``skip_codes``."""
    for sub in reversed(field.subfields):
        if sub.code.isdigit() or sub.code in skip_codes:
            continue
        return sub.value
    return None


def check_end_punct_300(record: Any, settings: Optional[Settings] = None) -> List[Diagnostic]:
    """Compare the 300's closing punctuation with the presence of a 4xx.

    With a series statement the 300 must end with a period; without one it
    should not end with a parenthesis and period. CIP records are skipped.
    """
    view = RecordView.of(record)
    if view.is_cip:
        return []

    field300 = view.field("300")
    if field300 is None:
        return [Diagnostic.of("300", "Record has no 300.")]

    last = field300.subfields[-1].value if field300.subfields else ""
    has_series = view.has_field(SERIES_STATEMENTS)
    if has_series and not last.endswith("."):
        return [Diagnostic.of("300", "4xx exists but 300 does not end with period.")]
    if not has_series and last.endswith(")."):
        return [Diagnostic.of("300", "4xx does not exist but 300 ends with parens-period.")]
    return []


def check_5xx_ending_punctuation(record: Any, settings: Optional[Settings] = None) -> List[Diagnostic]:
    """Check that selected notes end in a period, question mark or exclamation point.

    The last non-numeric subfield is tested; a closing parenthesis before the
    mark and quotation marks after it are allowed. In CIP records, 500 notes
    carrying an LCCN, ISBN or preassigned number are skipped.
    """
    view = RecordView.of(record)
    warnings = []
    for field in view:
        if field.tag not in ENDING_PUNCTUATION_TAGS:
            continue
        if view.is_cip and field.tag == "500":
            first_a = field.subfield("a") or ""
            if first_a.startswith(_CIP_500_PREFIXES):
                continue
        data = _last_text_subfield(field)
        if data is None:
            continue
        if not _VALID_ENDING.search(data):
            warnings.append(Diagnostic.of(field.tag, f"Check ending punctuation, {preview(data)}"))
    return warnings


def check_nonpunct_ending_fields(record: Any, settings: Optional[Settings] = None) -> List[Diagnostic]:
    """Report fields that normally take no closing period but end in one.

    The final word is compared with ``Settings.abbreviation_exceptions``; a
    field ending in a known abbreviation ("Inc.", "U.S.") is not reported.
    240 $o is ignored along with numeric subfields.
    """
    settings = settings or DEFAULT_SETTINGS
    view = RecordView.of(record)
    warnings = []
    for field in view:
        if field.tag not in NON_PUNCTUATED_TAGS:
            continue
        data = _last_text_subfield(field, "o" if field.tag == "240" else "")
        if data is None or not _PERIOD_ENDING.search(data):
            continue
        words = data.split()
        last_word = words[-1] if words else ""
        if last_word in settings.abbreviation_exceptions:
            continue
        warnings.append(Diagnostic.of(
            field.tag,
            f"Check ending punctuation (not normally added for this field), {preview(data)}",
        ))
    return warnings

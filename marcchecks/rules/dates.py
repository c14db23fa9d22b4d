"""
Publication date agreement between 008/07-10, 050 $b and 260 $c.
"""

import re
from typing import Any, List, Optional, Tuple

from ..control008 import get_008
from ..diagnostics import Diagnostic
from ..record import RecordView
from ..settings import Settings

_FOUR_DIGITS = re.compile(r"\d{4}")
_EIGHT_DIGITS = re.compile(r"\d{8}")
_050_YEAR = re.compile(r"\b(\d{4})")
_CORRECTED_YEAR = re.compile(r"\[i\..?e\..*(\d{4}).*?\]")
_FIRST_YEAR = re.compile(r"^.*?\b\D*(\d{4})\D*\b.*$", re.DOTALL)


def extract_050_year(subfield_b: str) -> Optional[str]:
    """First 4-digit run starting at a word boundary in a call number's $b."""
    match = _050_YEAR.search(subfield_b)
    return match.group(1) if match else None


def extract_260_year(subfield_c: str) -> Optional[str]:
    """Year of publication from an imprint date.

    A corrected date in brackets ("1990 [i.e. 1991]") wins over the date as
    printed. Otherwise the first 4-digit year is used; run-together dates
    ("19901991") give the second year.

    Example:
        >>> extract_260_year("c1999.")
        '1999'
        >>> extract_260_year("1990 [i.e. 1991]")
        '1991'
    """
    corrected = _CORRECTED_YEAR.search(subfield_c)
    if corrected:
        text = corrected.group(1)
    else:
        first = _FIRST_YEAR.match(subfield_c)
        text = first.group(1) if first else subfield_c
    if _FOUR_DIGITS.fullmatch(text):
        return text
    if _EIGHT_DIGITS.fullmatch(text):
        return text[4:8]
    return None


def _is_conference(view: RecordView) -> bool:
    if view.has_field("111"):
        return True
    field110 = view.field("110")
    return field110 is not None and bool(field110.subfield("d"))


def _050_year(view: RecordView) -> Tuple[Optional[str], Optional[Diagnostic]]:
    fields050 = [f for f in view.get_fields("050") if f.subfield("b")]
    if not fields050:
        return None, Diagnostic.of("050", "Could not get 050 or 050 subfield 'b'.")

    years = [year for year in (extract_050_year(f.subfield("b")) for f in fields050) if year]
    if len(set(years)) > 1:
        return None, Diagnostic.of("050", "Dates do not match in each of the 050s.")
    if not years:
        return None, Diagnostic.of("050", "Unable to find 4 digit year in subfield 'b'.")
    return years[0], None


def _260_year(view: RecordView) -> Tuple[Optional[str], Optional[Diagnostic]]:
    field260 = view.field("260")
    if field260 is None or not field260.subfield("c"):
        return None, Diagnostic.of("260", "Could not get 260 or 260 subfield 'c'.")
    last_c = field260.get_subfields("c")[-1]
    year = extract_260_year(last_c)
    if year is None:
        return None, Diagnostic.of("260", "Unable to find 4 digit year in subfield 'c'.")
    return year, None


def match_pub_dates(record: Any, settings: Optional[Settings] = None) -> List[Diagnostic]:
    """Check that 008 date 1, the 050 date and the 260 date agree.

    For conference publications (a 111, or a 110 with $d) the 050 date is
    expected to differ and only 008 date 1 and 260 $c are compared. The first
    date that cannot be found is reported and nothing is compared. CIP records
    without a 260 are skipped.
    """
    view = RecordView.of(record)
    if view.is_cip and not view.has_field("260"):
        return []
    field008 = get_008(view)
    if field008 is None:
        return []

    date1 = field008[7:11]
    if not _FOUR_DIGITS.fullmatch(date1):
        return [Diagnostic.of("008", "Could not get date 1.")]

    date050, problem = _050_year(view)
    if problem is not None:
        return [problem]

    date260, problem = _260_year(view)
    if problem is not None:
        return [problem]

    if _is_conference(view):
        if date1 != date260:
            return [Diagnostic.of(
                None, f"Pub. Dates: 008 date1, {date1} and 260_c date, {date260} do not match."
            )]
    elif not date1 == date050 == date260:
        return [Diagnostic.of(
            None,
            f"Pub. Dates: 008 date1, {date1}, 050 date, {date050}, and 260_c date, {date260} do not match.",
        )]
    return []

"""
Heading, title and linking-field consistency.
"""

import re
from typing import Any, List, Optional

from ..control008 import get_008
from ..diagnostics import Diagnostic
from ..record import MAIN_ENTRIES, SERIES_ADDED_ENTRIES, SUBJECTS, RecordView
from ..settings import DEFAULT_SETTINGS, Settings

_LANGUAGE_CODE = re.compile(r"[\w ]{3}")
_TRAILING_MARK = re.compile(r"[ .,]$")


def check_490_vs_8xx(record: Any, settings: Optional[Settings] = None) -> List[Diagnostic]:
    """A traced series (490 first indicator 1) needs a series added entry."""
    view = RecordView.of(record)
    field490 = view.field("490")
    if field490 is None or field490.indicator(1) != "1":
        return []
    if view.has_field(SERIES_ADDED_ENTRIES):
        return []
    return [Diagnostic.of("490", "Indicator is 1 but 8xx does not exist.")]


def check_240_ind1_vs_1xx(record: Any, settings: Optional[Settings] = None) -> List[Diagnostic]:
    """A uniform title needs a main entry, and is then printed (indicator 1)."""
    view = RecordView.of(record)
    field240 = view.field("240")
    if field240 is None:
        return []
    has_main_entry = view.has_field(MAIN_ENTRIES)
    if not has_main_entry:
        return [Diagnostic.of("240", "Is present but 1xx does not exist.")]
    if field240.indicator(1) == "0":
        return [Diagnostic.of("240", "First indicator is 0 but 1xx exists.")]
    return []


def check_245_ind1_vs_1xx(record: Any, settings: Optional[Settings] = None) -> List[Diagnostic]:
    """Title added entry indicator against the presence of a main entry.

    With a 1xx the 245 first indicator should be 1; without one, 0.
    """
    view = RecordView.of(record)
    field245 = view.field("245")
    if field245 is None:
        return []
    has_main_entry = view.has_field(MAIN_ENTRIES)
    ind1 = field245.indicator(1)
    if ind1 == "1" and not has_main_entry:
        return [Diagnostic.of("245", "Indicator is 1 but 1xx does not exist.")]
    if ind1 == "0" and has_main_entry:
        return [Diagnostic.of("245", "Indicator is 0 but 1xx exists.")]
    return []


def check_041_vs_008_lang(record: Any, settings: Optional[Settings] = None) -> List[Diagnostic]:
    """The first language code in 041 $a should be the 008/35-37 language."""
    view = RecordView.of(record)
    field008 = get_008(view)
    if field008 is None:
        return []

    warnings = []
    language = field008[35:38]
    if not _LANGUAGE_CODE.fullmatch(language):
        warnings.append(Diagnostic.of("008", f"Could not get language code, {language}."))

    field041 = view.field("041")
    first_a = field041.subfield("a") if field041 is not None else None
    if not first_a:
        return warnings

    first_code = first_a[:3]
    if first_code != language:
        warnings.append(Diagnostic.of(
            "041", f"First code ({first_code}) does not match 008 bytes 35-37 (Language {language})."
        ))
    return warnings


def geog_subject_vs_043(record: Any, settings: Optional[Settings] = None) -> List[Diagnostic]:
    """A geographic subject needs an 043 geographic area code.

    A 651, or any 6xx $z not listed in ``Settings.geographic_exceptions``,
    counts as geographic. One trailing space, period or comma is ignored when
    comparing $z with the exceptions.
    """
    settings = settings or DEFAULT_SETTINGS
    view = RecordView.of(record)
    if view.has_field("043"):
        return []

    for field in view.get_fields(SUBJECTS):
        if field.tag == "651":
            break
        if any(
            _TRAILING_MARK.sub("", z, count=1) not in settings.geographic_exceptions
            for z in field.get_subfields("z")
        ):
            break
    else:
        return []
    return [Diagnostic.of("043", "Record has 651 or 6xx subfield 'z' but no 043.")]

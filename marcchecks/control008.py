"""
Validation of the 40-character 008 control field.

Bytes 00-17 and 35-39 mean the same thing for every record and are always
checked. Bytes 18-34 are checked against the ``FixedFieldSchema`` chosen from
leader bytes 06 and 07. Only the length test stops the check early; every
other problem is reported independently.
"""

import logging
import re
from typing import Any, List, NamedTuple, Optional, Tuple

from .codes import CodeStatus, CodeTables, get_code_tables
from .diagnostics import Diagnostic
from .fixed_fields import schema_for
from .record import RecordView
from .settings import DEFAULT_SETTINGS, DateWindow, Settings

logger = logging.getLogger(__name__)

CONTROL_TAG = "008"
FIELD_LENGTH = 40

_MONTHS_31 = frozenset({1, 3, 5, 7, 8, 10, 12})
_MONTHS_30 = frozenset({4, 6, 9, 11})

_DATE_TYPE = re.compile(r"[bcdeikmnpqrstu|]")
_DATE = re.compile(r"[u0-9|]{4}")
_NO_DATE = "    "
_SINGLE_DATE_TYPES = frozenset("bqs")
_MODIFIED_RECORD = re.compile(r"[dorsx| ]")
_CATALOGING_SOURCE = re.compile(r"[cdu| ]")


class DateEntered(NamedTuple):
    """Parsed 008/00-05. Parts are None when the text is not 6 digits."""

    year: Optional[int]
    month: Optional[int]
    day: Optional[int]
    violations: Tuple[str, ...]


def parse_date_entered(text: str, window: Optional[DateWindow] = None) -> DateEntered:
    """Parse a yymmdd date entered on file.

    The two-digit year is expanded through ``window``; years outside it are
    reported. Days are checked against the month length, with February
    allowed 29 days in every year.

    Example:
        >>> parse_date_entered("040230")
        DateEntered(year=2004, month=2, day=30, violations=('Day entered is greater than 29 or is 00',))
    """
    window = window or DEFAULT_SETTINGS.date_entered_window
    date = text[:6]
    if not (len(date) == 6 and date.isascii() and date.isdigit()):
        return DateEntered(None, None, None, ("Date entered is not 6 digits",))

    violations = []
    year = window.expand(int(date[0:2]))
    if year is None:
        violations.append(f"Year entered is {window.description}")

    month = int(date[2:4])
    if not 1 <= month <= 12:
        violations.append("Month entered is greater than 12 or is 00")

    day = int(date[4:6])
    if month in _MONTHS_31:
        last_day = 31
    elif month in _MONTHS_30:
        last_day = 30
    elif month == 2:
        last_day = 29
    else:
        # an invalid month has already been reported
        last_day = None
    if last_day is not None and not 1 <= day <= last_day:
        violations.append(f"Day entered is greater than {last_day} or is 00")

    return DateEntered(year, month, day, tuple(violations))


def validate_008(
    field008: str,
    record_type: str,
    bibliographic_level: str,
    settings: Optional[Settings] = None,
    code_tables: Optional[CodeTables] = None,
) -> List[Diagnostic]:
    """Validate an 008 string for a record of the given type and level.

    Args:
        field008: Contents of the 008.
        record_type: Leader byte 06.
        bibliographic_level: Leader byte 07.
        settings: Supplies the date-entered window (default profile if None).
        code_tables: Country and language tables (bundled tables if None).

    Returns:
        Diagnostics tagged "008", in byte order.
    """
    settings = settings or DEFAULT_SETTINGS
    code_tables = code_tables or get_code_tables()

    if len(field008) != FIELD_LENGTH:
        return [Diagnostic.of(CONTROL_TAG, f"Not 40 bytes. Bytes not validated ({field008}).")]

    messages: List[Tuple[str, ...]] = []

    date_entered = parse_date_entered(field008[0:6], settings.date_entered_window)
    if date_entered.violations:
        messages.append(("Bytes 0-5, Date entered has bad characters.",) + date_entered.violations)

    date_type = field008[6]
    if not _DATE_TYPE.fullmatch(date_type):
        messages.append(("Byte 6, Date type has bad characters.",))

    date1 = field008[7:11]
    if not (_DATE.fullmatch(date1) or (date1 == _NO_DATE and date_type == "b")):
        messages.append(("Bytes 7-10, Date1 has bad characters.",))

    date2 = field008[11:15]
    if date_type in _SINGLE_DATE_TYPES:
        if date2 != _NO_DATE:
            messages.append(("Bytes 11-14 Date2, has bad characters.",))
    elif not _DATE.fullmatch(date2):
        messages.append(("Bytes 11-14, Date2 has bad characters.",))

    country = field008[15:18]
    country_status = code_tables.classify_country(country)
    if country_status is CodeStatus.OBSOLETE:
        messages.append((f"Bytes 15-17, Country of Publication ({country}) may be obsolete.",))
    elif country_status is CodeStatus.UNKNOWN:
        messages.append((f"Bytes 15-17, Country of Publication ({country}) is not valid.",))

    language = field008[35:38]
    language_status = code_tables.classify_language(language)
    if language_status is CodeStatus.OBSOLETE:
        messages.append((f"Bytes 35-37, Language ({language}) may be obsolete.",))
    elif language_status is CodeStatus.UNKNOWN:
        messages.append((f"Bytes 35-37, Language ({language}) not valid.",))

    if not _MODIFIED_RECORD.fullmatch(field008[38]):
        messages.append(("Byte 38, Modified record has bad characters.",))
    if not _CATALOGING_SOURCE.fullmatch(field008[39]):
        messages.append(("Byte 39, Cataloging source has bad characters.",))

    schema = schema_for(record_type, bibliographic_level)
    if schema is not None:
        for byte_range in schema.invalid_ranges(field008):
            messages.append((schema.message(byte_range),))

    return [Diagnostic(CONTROL_TAG, parts) for parts in messages]


def validate_control_field_008(
    record: Any,
    settings: Optional[Settings] = None,
    code_tables: Optional[CodeTables] = None,
) -> List[Diagnostic]:
    """Validate the record's first 008 using leader bytes 06 and 07.

    A record without an 008 gets a single "Record lacks 008 field." diagnostic.
    """
    view = RecordView.of(record)
    field008 = view.control_field(CONTROL_TAG)
    if field008 is None:
        return [Diagnostic.of(CONTROL_TAG, "Record lacks 008 field.")]
    return validate_008(
        field008,
        view.leader_byte(6),
        view.leader_byte(7),
        settings=settings,
        code_tables=code_tables,
    )


def get_008(view: RecordView) -> Optional[str]:
    """The 008 string when it is present and 40 characters long, else None.

    Cross-field rules that read 008 bytes use this and skip silently otherwise.
    """
    field008 = view.control_field(CONTROL_TAG)
    if field008 is None or len(field008) != FIELD_LENGTH:
        logger.debug("No usable 008, cross-field comparison skipped")
        return None
    return field008

"""
Bibliography and index notes against book contents and index coding.
"""

import re
from typing import Any, List, Optional

from ..control008 import get_008
from ..diagnostics import Diagnostic
from ..record import SUBJECTS, RecordView
from ..settings import Settings

_INDEX_NOTE = re.compile(r"Includes.*index")
_INDEX_ONLY_504 = re.compile(r"^Includes index(es)?\.$")
_BIBLIOGRAPHICAL_REFERENCES = re.compile(r"bibliographical references?\.?\b")
_BIBLIOGRAPHY_SUBJECT = re.compile(r"bibliography|bibliographies", re.IGNORECASE)


def check_bk008_vs_bibref_and_index(record: Any, settings: Optional[Settings] = None) -> List[Diagnostic]:
    """Compare 008 index and contents coding with the 500 and 504 notes.

    Books (leader/06 'a') and maps ('e') are checked for index coding, 008/31
    against an "Includes ... index" note. Books are also checked for
    bibliographies: a 'b' in 008/24-27 needs "bibliographical references" in
    a 504 (a 500 is accepted but reported) unless a 6xx marks the item as a
    bibliography.
    """
    view = RecordView.of(record)
    if view.record_type not in ("a", "e"):
        return []
    field008 = get_008(view)
    if field008 is None:
        return []

    notes500 = [f.as_string() for f in view.get_fields("500")]
    notes504 = [f.as_string() for f in view.get_fields("504")]
    warnings = []

    mentions_index = any(_INDEX_NOTE.search(note) for note in notes500 + notes504)
    if any(_INDEX_ONLY_504.search(note) for note in notes504):
        warnings.append(Diagnostic.of("504", "'Includes index.' or 'Includes indexes.' should be 500."))

    index = field008[31]
    if index == "0" and mentions_index:
        warnings.append(Diagnostic.of("008", "Index is coded 0 but 500 or 504 mentions index."))
    elif index == "1" and not mentions_index:
        warnings.append(Diagnostic.of("008", "Index is coded 1 but 500 or 504 does not mention index."))

    if view.record_type == "e":
        return warnings

    coded_bibliography = "b" in field008[24:28]
    refs_in_504 = any(_BIBLIOGRAPHICAL_REFERENCES.search(note) for note in notes504)
    refs_in_500 = any(_BIBLIOGRAPHICAL_REFERENCES.search(note) for note in notes500)
    is_bibliography = any(
        _BIBLIOGRAPHY_SUBJECT.search(field.as_string()) for field in view.get_fields(SUBJECTS)
    )

    if refs_in_500:
        warnings.append(Diagnostic.of("500", "Bibliographical references should be in 504."))

    if coded_bibliography and not (refs_in_504 or refs_in_500 or is_bibliography):
        warnings.append(Diagnostic.of(
            "008",
            "Coded 'b' but 504 (or 500) does not mention 'bibliographical references', "
            "and 'bibliography' is not present in 6xx.",
        ))
    elif not coded_bibliography and (refs_in_504 or refs_in_500):
        warnings.append(Diagnostic.of(
            "008", "Not coded 'b' but 504 (or 500) mentions 'bibliographical references'."
        ))
    return warnings

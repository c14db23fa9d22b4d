"""
Leader validation: bytes 05, 06, 07, 17 and 18 against closed vocabularies.
"""

from typing import Any, List, Optional

from .diagnostics import Diagnostic
from .record import RecordView
from .settings import DEFAULT_SETTINGS, Settings
from .vocabularies import CHECKED_POSITIONS

LEADER_TAG = "LDR"

# message templates per checked position
_MESSAGES = {
    5: "Byte 05, Status {value} is invalid.",
    6: "Byte 06, Material type {value} is invalid.",
    7: "Byte 07, Bib. Level, {value} is invalid.",
    17: "Byte 17, Encoding Level, {value} is invalid.",
    18: "Byte 18, Cataloging rules, {value} is invalid.",
}


def validate_leader(record: Any, settings: Optional[Settings] = None) -> List[Diagnostic]:
    """Check leader bytes 05, 06, 07, 17 and 18.

    Every position is checked; each unaccepted character yields one
    diagnostic naming the position and the character. The leader is assumed
    to be 24 characters long.

    Args:
        record: A pymarc-compatible record or a ``RecordView``.
        settings: Supplies the accepted vocabulary (default profile if None).

    Returns:
        Up to five diagnostics, in position order.

    Example:
        >>> [str(d) for d in validate_leader(record)]
        ['LDR: Byte 06, Material type x is invalid.']
    """
    view = RecordView.of(record)
    vocabulary = (settings or DEFAULT_SETTINGS).leader_vocabulary

    warnings = []
    for position in CHECKED_POSITIONS:
        value = view.leader_byte(position)
        if value not in vocabulary.allowed(position):
            warnings.append(Diagnostic.of(LEADER_TAG, _MESSAGES[position].format(value=value)))
    return warnings

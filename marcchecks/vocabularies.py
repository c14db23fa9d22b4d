"""
MARC 21 leader value tables and the closed vocabularies checked against them.

``MARC21_LEADER_VALUES`` maps each checked leader position to every value the
MARC 21 format defines for it, with its description. ``LeaderVocabulary`` is
the subset a cataloging department accepts; ``DEFAULT_LEADER_VOCABULARY`` is
the local profile the checks were written for (no deleted records, no
minimal-level or non-AACR2 copy).
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping, Optional

# Position 5 - Record status
RECORD_STATUS_VALUES = MappingProxyType({
    'a': 'Increase in encoding level',
    'c': 'Corrected or revised',
    'd': 'Deleted',
    'n': 'New',
    'p': 'Increase in encoding level from prepublication',
})

# Position 6 - Type of record
RECORD_TYPE_VALUES = MappingProxyType({
    'a': 'Language material',
    'c': 'Notated music',
    'd': 'Manuscript notated music',
    'e': 'Cartographic material',
    'f': 'Manuscript cartographic material',
    'g': 'Projected medium',
    'i': 'Nonmusical sound recording',
    'j': 'Musical sound recording',
    'k': 'Two-dimensional nonprojectable graphic',
    'm': 'Computer file',
    'o': 'Kit',
    'p': 'Mixed materials',
    'r': 'Three-dimensional artifact or naturally occurring object',
    't': 'Manuscript language material',
})

# Position 7 - Bibliographic level
BIBLIOGRAPHIC_LEVEL_VALUES = MappingProxyType({
    'a': 'Monographic component part',
    'b': 'Serial component part',
    'c': 'Collection',
    'd': 'Subunit',
    'i': 'Integrating resource',
    'm': 'Monograph/Item',
    's': 'Serial',
})

# Position 17 - Encoding level
ENCODING_LEVEL_VALUES = MappingProxyType({
    ' ': 'Full level',
    '1': 'Full level, material not examined',
    '2': 'Less-than-full level, material not examined',
    '3': 'Abbreviated level',
    '4': 'Core level',
    '5': 'Partial (preliminary) level',
    '7': 'Minimal level',
    '8': 'Prepublication level',
    'u': 'Unknown',
    'z': 'Not applicable',
})

# Position 18 - Descriptive cataloging form
CATALOGING_FORM_VALUES = MappingProxyType({
    ' ': 'Non-ISBD',
    'a': 'AACR 2',
    'c': 'ISBD punctuation omitted',
    'i': 'ISBD punctuation included',
    'n': 'Non-ISBD punctuation omitted',
    'u': 'Unknown',
})

MARC21_LEADER_VALUES = MappingProxyType({
    5: RECORD_STATUS_VALUES,
    6: RECORD_TYPE_VALUES,
    7: BIBLIOGRAPHIC_LEVEL_VALUES,
    17: ENCODING_LEVEL_VALUES,
    18: CATALOGING_FORM_VALUES,
})

CHECKED_POSITIONS = (5, 6, 7, 17, 18)


def describe_leader_value(position: int, value: str) -> Optional[str]:
    """Description of a leader value, or None if MARC 21 does not define it.

    Example:
        >>> describe_leader_value(17, '8')
        'Prepublication level'
    """
    values = MARC21_LEADER_VALUES.get(position)
    if values is None:
        return None
    return values.get(value)


@dataclass(frozen=True)
class LeaderVocabulary:
    """Accepted characters for each checked leader position."""

    record_status: FrozenSet[str]
    record_type: FrozenSet[str]
    bibliographic_level: FrozenSet[str]
    encoding_level: FrozenSet[str]
    cataloging_form: FrozenSet[str]

    @classmethod
    def build(
        cls,
        record_status: Iterable[str],
        record_type: Iterable[str],
        bibliographic_level: Iterable[str],
        encoding_level: Iterable[str],
        cataloging_form: Iterable[str],
    ) -> "LeaderVocabulary":
        return cls(
            frozenset(record_status),
            frozenset(record_type),
            frozenset(bibliographic_level),
            frozenset(encoding_level),
            frozenset(cataloging_form),
        )

    def allowed(self, position: int) -> FrozenSet[str]:
        """Accepted characters for a checked position."""
        by_position: Mapping[int, FrozenSet[str]] = {
            5: self.record_status,
            6: self.record_type,
            7: self.bibliographic_level,
            17: self.encoding_level,
            18: self.cataloging_form,
        }
        try:
            return by_position[position]
        except KeyError:
            raise ValueError(f"Leader position {position} is not a checked position") from None


MARC21_LEADER_VOCABULARY = LeaderVocabulary.build(
    RECORD_STATUS_VALUES,
    RECORD_TYPE_VALUES,
    BIBLIOGRAPHIC_LEVEL_VALUES,
    ENCODING_LEVEL_VALUES,
    CATALOGING_FORM_VALUES,
)

DEFAULT_LEADER_VOCABULARY = LeaderVocabulary.build(
    record_status="acnp",
    record_type="acdefgijkmoprt",
    bibliographic_level="aims",
    encoding_level=" 1248",
    cataloging_form="a",
)

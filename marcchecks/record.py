"""
Read-only record view used by every check.

The checks never talk to a record library directly. ``RecordView.of()`` adapts
a pymarc ``Record`` (attribute-style ``leader``/``fields``/``subfields``) or an
mrrc-style record (method-style ``leader()``/``fields()``/``subfields()``) into
one small, uniform interface: a 24-character leader string and an ordered list
of ``FieldView`` objects.

Tag wildcards such as "4xx" are expressed as ``TagRange`` values, an inclusive
numeric range over the parsed integer tag.
"""

from collections import namedtuple
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Tuple, Union


Subfield = namedtuple("Subfield", ["code", "value"])
Indicators = namedtuple("Indicators", ["ind1", "ind2"])

CIP_ENCODING_LEVEL = "8"


class TagRange:
    """Inclusive range of numeric field tags.

    Example:
        >>> "490" in TagRange(400, 499)
        True
        >>> TagRange.from_pattern("6xx") == TagRange(600, 699)
        True
    """

    __slots__ = ("start", "end")

    def __init__(self, start: int, end: int):
        if start > end:
            raise ValueError(f"Tag range start {start} is after end {end}")
        self.start = start
        self.end = end

    @classmethod
    def from_pattern(cls, pattern: str) -> "TagRange":
        """Parse a legacy "4xx" / "4.." / "65x" style pattern."""
        if len(pattern) != 3:
            raise ValueError(f"Tag pattern must be 3 characters, got {pattern!r}")
        prefix = pattern.rstrip("xX.")
        if not prefix.isdigit() and prefix != "":
            raise ValueError(f"Unsupported tag pattern {pattern!r}")
        width = 3 - len(prefix)
        base = int(prefix or "0") * 10 ** width
        return cls(base, base + 10 ** width - 1)

    def __contains__(self, tag: Any) -> bool:
        number = tag if isinstance(tag, int) else parse_tag(tag)
        if number is None:
            return False
        return self.start <= number <= self.end

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, TagRange):
            return False
        return self.start == other.start and self.end == other.end

    def __hash__(self) -> int:
        return hash((self.start, self.end))

    def __repr__(self) -> str:
        return f"TagRange({self.start:03d}, {self.end:03d})"


MAIN_ENTRIES = TagRange(100, 199)
SERIES_STATEMENTS = TagRange(400, 499)
SUBJECTS = TagRange(600, 699)
SERIES_ADDED_ENTRIES = TagRange(800, 899)

Selector = Union[str, int, TagRange]


def parse_tag(tag: Any) -> Optional[int]:
    """Return the integer value of a numeric tag, or None for "LDR", "FMT", etc."""
    if isinstance(tag, int):
        return tag
    if isinstance(tag, str) and tag.isdigit():
        return int(tag)
    return None


class FieldView:
    """Read-only view of one control or variable field."""

    __slots__ = ("tag", "tag_number", "data", "indicators", "subfields")

    def __init__(
        self,
        tag: str,
        indicators: Sequence[str] = (" ", " "),
        subfields: Iterable[Tuple[str, str]] = (),
        data: Optional[str] = None,
    ):
        self.tag = tag
        self.tag_number = parse_tag(tag)
        self.data = data
        ind1, ind2 = (list(indicators) + [" ", " "])[:2]
        self.indicators = Indicators(ind1 or " ", ind2 or " ")
        self.subfields: Tuple[Subfield, ...] = tuple(Subfield(code, value) for code, value in subfields)

    @property
    def is_control_field(self) -> bool:
        """True for 001-009. Tag 010 and above hold subfields."""
        return self.tag_number is not None and self.tag_number < 10

    def indicator(self, number: int) -> str:
        """Get indicator 1 or 2."""
        if number == 1:
            return self.indicators.ind1
        elif number == 2:
            return self.indicators.ind2
        raise IndexError("Indicator number must be 1 or 2")

    def subfield(self, code: str) -> Optional[str]:
        """First value of a subfield code, or None."""
        for sub in self.subfields:
            if sub.code == code:
                return sub.value
        return None

    def get_subfields(self, *codes: str) -> List[str]:
        """All values for the given codes, in field order."""
        return [sub.value for sub in self.subfields if sub.code in codes]

    def as_string(self) -> str:
        """Control data, or subfield values separated by single spaces."""
        if self.data is not None:
            return self.data
        return " ".join(sub.value for sub in self.subfields)

    def matches(self, selector: Selector) -> bool:
        if isinstance(selector, TagRange):
            return self.tag in selector
        if isinstance(selector, int):
            return self.tag_number == selector
        if isinstance(selector, str):
            return self.tag == selector
        raise TypeError(f"Unsupported field selector {selector!r}")

    def __repr__(self) -> str:
        if self.data is not None:
            return f"FieldView(tag='{self.tag}', data='{self.data}')"
        return f"FieldView(tag='{self.tag}', indicators={self.indicators!r}, subfields={list(self.subfields)!r})"


class RecordView:
    """Read-only view of a bibliographic record.

    Args:
        leader: The 24-character leader string.
        fields: Fields in record order.

    Example:
        >>> view = RecordView.of(pymarc_record)
        >>> view.leader[6]
        'a'
        >>> [f.tag for f in view.get_fields(SUBJECTS)]
        ['650', '651']
    """

    __slots__ = ("leader", "_fields")

    def __init__(self, leader: str, fields: Iterable[FieldView] = ()):
        self.leader = leader
        self._fields: Tuple[FieldView, ...] = tuple(fields)

    @classmethod
    def of(cls, record: Any) -> "RecordView":
        """Adapt a pymarc- or mrrc-style record. Views are returned unchanged."""
        if isinstance(record, RecordView):
            return record
        if record is None:
            raise TypeError("record must not be None")
        if not hasattr(record, "leader") or not hasattr(record, "fields"):
            raise TypeError(f"Expected a MARC record, got {type(record).__name__}")
        return cls(_leader_string(record.leader), _adapt_fields(record))

    def leader_byte(self, position: int) -> str:
        """Leader character at a position, or an empty string if the leader is short."""
        return self.leader[position:position + 1]

    @property
    def record_type(self) -> str:
        """Leader/06."""
        return self.leader_byte(6)

    @property
    def bibliographic_level(self) -> str:
        """Leader/07."""
        return self.leader_byte(7)

    @property
    def is_cip(self) -> bool:
        """True for prepublication (CIP) records, encoding level 8."""
        return self.leader_byte(17) == CIP_ENCODING_LEVEL

    def fields(self) -> List[FieldView]:
        """All fields in record order."""
        return list(self._fields)

    def __iter__(self) -> Iterator[FieldView]:
        return iter(self._fields)

    def get_fields(self, *selectors: Selector) -> List[FieldView]:
        """Fields matching any selector, in record order. No selectors returns all fields."""
        if not selectors:
            return list(self._fields)
        return [f for f in self._fields if any(f.matches(s) for s in selectors)]

    def field(self, selector: Selector) -> Optional[FieldView]:
        """First field matching the selector, or None."""
        for f in self._fields:
            if f.matches(selector):
                return f
        return None

    def has_field(self, selector: Selector) -> bool:
        return self.field(selector) is not None

    def __contains__(self, selector: Selector) -> bool:
        return self.has_field(selector)

    def control_field(self, tag: str) -> Optional[str]:
        """Data of the first control field with the tag, or None."""
        f = self.field(tag)
        if f is None:
            return None
        return f.as_string()


def _leader_string(leader: Any) -> str:
    if callable(leader) and not isinstance(leader, str):
        # mrrc records expose leader() as a method
        leader = leader()
    if isinstance(leader, str):
        return str(leader)
    to_string = getattr(leader, "_get_leader_as_string", None)
    if callable(to_string):
        return to_string()
    return str(leader)


def _adapt_fields(record: Any) -> List[FieldView]:
    raw_fields = record.fields
    if callable(raw_fields):
        raw_fields = raw_fields()

    views = []
    control_fields = getattr(record, "control_fields", None)
    if callable(control_fields):
        # mrrc keeps control fields apart from data fields
        for tag, value in sorted(control_fields()):
            views.append(FieldView(tag, data=value))

    for field in raw_fields:
        views.append(_adapt_field(field))
    return views


def _adapt_field(field: Any) -> FieldView:
    if isinstance(field, FieldView):
        return field
    tag = str(field.tag)
    number = parse_tag(tag)
    if number is not None and number < 10:
        data = getattr(field, "data", None)
        if data is None:
            value = getattr(field, "value", None)
            data = value if isinstance(value, str) else ""
        return FieldView(tag, data=data)

    ind1 = getattr(field, "indicator1", None)
    ind2 = getattr(field, "indicator2", None)
    if ind1 is None or ind2 is None:
        indicators = getattr(field, "indicators", None) or (" ", " ")
        ind1, ind2 = indicators[0], indicators[1]
    return FieldView(tag, (ind1, ind2), _adapt_subfields(field.subfields))


def _adapt_subfields(subfields: Any) -> List[Tuple[str, str]]:
    if callable(subfields):
        subfields = subfields()
    subfields = list(subfields or [])
    if subfields and isinstance(subfields[0], str):
        # pre-5.0 pymarc: flat [code, value, code, value, ...]
        return list(zip(subfields[0::2], subfields[1::2]))
    return [(sub.code, sub.value) for sub in subfields]

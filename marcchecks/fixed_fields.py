"""
Material-specific layouts of 008 bytes 18-34.

Each ``MaterialType`` has one ``FixedFieldSchema``: an ordered tuple of
``ByteRange`` values, each naming a span of the 008 and the pattern its
contents must match in full. ``classify_material()`` picks the material type
from leader bytes 06 and 07.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Pattern, Tuple

logger = logging.getLogger(__name__)


class MaterialType(Enum):
    BOOKS = "books"
    CONTINUING_RESOURCES = "continuing_resources"
    COMPUTER_FILES = "computer_files"
    MAPS = "maps"
    MUSIC = "music"
    VISUAL_MATERIALS = "visual_materials"
    MIXED_MATERIALS = "mixed_materials"


# Leader/06 (type of record) to material type. Leader/07 's' overrides.
_RECORD_TYPE_MATERIAL = {
    "a": MaterialType.BOOKS,
    "t": MaterialType.BOOKS,
    "m": MaterialType.COMPUTER_FILES,
    "e": MaterialType.MAPS,
    "f": MaterialType.MAPS,
    "c": MaterialType.MUSIC,
    "d": MaterialType.MUSIC,
    "i": MaterialType.MUSIC,
    "j": MaterialType.MUSIC,
    "g": MaterialType.VISUAL_MATERIALS,
    "k": MaterialType.VISUAL_MATERIALS,
    "o": MaterialType.VISUAL_MATERIALS,
    "r": MaterialType.VISUAL_MATERIALS,
    "p": MaterialType.MIXED_MATERIALS,
}


def classify_material(leader: str) -> Optional[MaterialType]:
    """Material type for a leader, or None when leader/06 is not recognized.

    Example:
        >>> classify_material("00000cas a2200000 a 4500")
        <MaterialType.CONTINUING_RESOURCES: 'continuing_resources'>
    """
    return material_for(leader[6:7], leader[7:8])


def material_for(record_type: str, bibliographic_level: str) -> Optional[MaterialType]:
    """Material type from the type of record and bibliographic level bytes."""
    if bibliographic_level == "s":
        return MaterialType.CONTINUING_RESOURCES
    material = _RECORD_TYPE_MATERIAL.get(record_type)
    if material is None:
        logger.debug("Type of record %r has no 008/18-34 layout", record_type)
    return material


@dataclass(frozen=True)
class ByteRange:
    """A span of the 008 and the pattern its contents must fully match.

    Args:
        start: First byte position.
        length: Number of bytes.
        label: Name used in diagnostics ("Illustrations").
        pattern: Regular expression the whole span must match.
    """

    start: int
    length: int
    label: str
    pattern: str
    regex: Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "regex", re.compile(self.pattern))

    @property
    def end(self) -> int:
        """Last byte position, inclusive."""
        return self.start + self.length - 1

    @property
    def position_label(self) -> str:
        """``"Byte 22"`` or ``"Bytes 18-21"``."""
        if self.length == 1:
            return f"Byte {self.start}"
        return f"Bytes {self.start}-{self.end}"

    def extract(self, field008: str) -> str:
        return field008[self.start:self.start + self.length]

    def is_valid(self, field008: str) -> bool:
        return self.regex.fullmatch(self.extract(field008)) is not None


@dataclass(frozen=True)
class FixedFieldSchema:
    """Byte ranges 18-34 for one material type, in ascending order."""

    material_type: MaterialType
    label: str
    ranges: Tuple[ByteRange, ...]

    def message(self, byte_range: ByteRange) -> str:
        return f"{byte_range.position_label}, {self.label}-{byte_range.label} has bad characters."

    def invalid_ranges(self, field008: str) -> Tuple[ByteRange, ...]:
        """Ranges whose contents do not match, in byte order."""
        return tuple(r for r in self.ranges if not r.is_valid(field008))


def _codes(*codes: str) -> str:
    return "(?:" + "|".join(re.escape(code) for code in codes) + ")"


def _repeat(char_class: str, count: int) -> str:
    return f"{char_class}{{{count}}}"


# Character classes shared by several material types
UNDEFINED = r"[| ]"
AUDIENCE = r"[abcdefgj| ]"
FORM_OF_ITEM = r"[abcdfrs| ]"
GOVT_PUBLICATION = r"[acfilmosuz| ]"
YES_NO = r"[01|]"

CONTINUING_RESOURCE_CONTENTS = r"[abcdefghiklmnopqrstuvwz| ]"

MAP_PROJECTIONS = (
    "||", "  ",
    "aa", "ab", "ac", "ad", "ae", "af", "ag", "am", "an", "ap", "au", "az",
    "ba", "bb", "bc", "bd", "be", "bf", "bg", "bh", "bi", "bj", "bo", "br",
    "bs", "bu", "bz",
    "ca", "cb", "cc", "ce", "cp", "cu", "cz",
    "da", "db", "dc", "dd", "de", "df", "dg", "dh", "dl",
    "zz",
)

MUSIC_FORMS_OF_COMPOSITION = (
    "||",
    "an", "bd", "bg", "bl", "bt", "ca", "cb", "cc", "cg", "ch", "cl", "cn",
    "co", "cp", "cr", "cs", "ct", "cy", "cz", "df", "dv", "fg", "fm", "ft",
    "gm", "hy", "jz", "mc", "md", "mi", "mo", "mp", "mr", "ms", "mu", "mz",
    "nc", "nn", "op", "or", "ov", "pg", "pm", "po", "pp", "pr", "ps", "pt",
    "pv", "rc", "rd", "rg", "ri", "rp", "rq", "sd", "sg", "sn", "sp", "st",
    "su", "sy", "tc", "ts", "uu", "vr", "wz", "zz",
)

_SCHEMAS = (
    FixedFieldSchema(MaterialType.CONTINUING_RESOURCES, "Continuing resources", (
        ByteRange(18, 1, "Frequency", r"[abcdefghijkmqstuwz| ]"),
        ByteRange(19, 1, "Regularity", r"[nrux|]"),
        ByteRange(20, 1, "ISSN center", r"[0124z| ]"),
        ByteRange(21, 1, "Type of continuing resource", r"[dlmnpw| ]"),
        ByteRange(22, 1, "Form of original", r"[abcdefs ]"),
        ByteRange(23, 1, "Form of item", FORM_OF_ITEM),
        ByteRange(24, 1, "Nature of work", CONTINUING_RESOURCE_CONTENTS),
        ByteRange(25, 3, "Contents", _repeat(CONTINUING_RESOURCE_CONTENTS, 3)),
        ByteRange(28, 1, "Govt publication", GOVT_PUBLICATION),
        ByteRange(29, 1, "Conference publication", YES_NO),
        ByteRange(30, 3, "Undef30to32", _repeat(UNDEFINED, 3)),
        ByteRange(33, 1, "Original alphabet", r"[abcdefghijkluz| ]"),
        ByteRange(34, 1, "Entry convention", r"[012|]"),
    )),
    FixedFieldSchema(MaterialType.BOOKS, "Books", (
        ByteRange(18, 4, "Illustrations", _repeat(r"[abcdefghijklmop| ]", 4)),
        ByteRange(22, 1, "Audience", AUDIENCE),
        ByteRange(23, 1, "Form of item", FORM_OF_ITEM),
        ByteRange(24, 4, "Contents", _repeat(r"[abcdefgijklmnopqrstuvwz| ]", 4)),
        ByteRange(28, 1, "Govt publication", GOVT_PUBLICATION),
        ByteRange(29, 1, "Conference publication", YES_NO),
        ByteRange(30, 1, "Festschrift", YES_NO),
        ByteRange(31, 1, "Index", YES_NO),
        ByteRange(32, 1, "Obsoletebyte32", UNDEFINED),
        ByteRange(33, 1, "Literary form", r"[01cdefhijmpsu| ]"),
        ByteRange(34, 1, "Biography", r"[abcd| ]"),
    )),
    FixedFieldSchema(MaterialType.COMPUTER_FILES, "Electronic Resources", (
        ByteRange(18, 4, "Undef18to21", _repeat(UNDEFINED, 4)),
        ByteRange(22, 1, "Audience", AUDIENCE),
        ByteRange(23, 3, "Undef23to25", _repeat(UNDEFINED, 3)),
        ByteRange(26, 1, "Type of file", r"[abcdefghijmuz|]"),
        ByteRange(27, 1, "Undef27", UNDEFINED),
        ByteRange(28, 1, "Govt publication", GOVT_PUBLICATION),
        ByteRange(29, 6, "Undef29to34", _repeat(UNDEFINED, 6)),
    )),
    FixedFieldSchema(MaterialType.MAPS, "Cartographic", (
        ByteRange(18, 4, "Relief", _repeat(r"[abcdefgijkmz| ]", 4)),
        ByteRange(22, 2, "Projection", _codes(*MAP_PROJECTIONS)),
        ByteRange(24, 1, "Undef24", UNDEFINED),
        ByteRange(25, 1, "Type of map", r"[abcdefguz|]"),
        ByteRange(26, 2, "Undef26to27", _repeat(UNDEFINED, 2)),
        ByteRange(28, 1, "Govt publication", GOVT_PUBLICATION),
        ByteRange(29, 1, "Form of item", FORM_OF_ITEM),
        ByteRange(30, 1, "Undef30", UNDEFINED),
        ByteRange(31, 1, "Index", YES_NO),
        ByteRange(32, 1, "Undef32", UNDEFINED),
        ByteRange(33, 2, "Special format characteristics", _repeat(r"[ejklnoprz| ]", 2)),
    )),
    FixedFieldSchema(MaterialType.MUSIC, "Music", (
        ByteRange(18, 2, "Form of composition", _codes(*MUSIC_FORMS_OF_COMPOSITION)),
        ByteRange(20, 1, "Format of music", r"[abcdegmnuz|]"),
        ByteRange(21, 1, "Parts", r"[defnu| ]"),
        ByteRange(22, 1, "Audience", AUDIENCE),
        ByteRange(23, 1, "Form of item", FORM_OF_ITEM),
        ByteRange(24, 6, "Accompanying material", _repeat(r"[abcdefghikrsz| ]", 6)),
        ByteRange(30, 2, "Text for sound recordings", _repeat(r"[abcdefghijklmnoprstz| ]", 2)),
        ByteRange(32, 1, "Undef32", UNDEFINED),
        ByteRange(33, 1, "Transposition and arrangement", r"[abcnu| ]"),
        ByteRange(34, 1, "Undef34", UNDEFINED),
    )),
    FixedFieldSchema(MaterialType.VISUAL_MATERIALS, "Visual materials", (
        ByteRange(18, 3, "Runningtime", r"(?:[|0-9]{3}|-{3}|n{3})"),
        ByteRange(21, 1, "Undef21", UNDEFINED),
        ByteRange(22, 1, "Audience", AUDIENCE),
        ByteRange(23, 5, "Undef23to27", _repeat(UNDEFINED, 5)),
        ByteRange(28, 1, "Govt publication", GOVT_PUBLICATION),
        ByteRange(29, 1, "Form of item", FORM_OF_ITEM),
        ByteRange(30, 3, "Undef30to32", _repeat(UNDEFINED, 3)),
        ByteRange(33, 1, "Type of visual material", r"[abcdfgiklmnopqrstvwz|]"),
        ByteRange(34, 1, "Technique", r"[aclnuz|]"),
    )),
    FixedFieldSchema(MaterialType.MIXED_MATERIALS, "Mixed materials", (
        ByteRange(18, 5, "Undef18to22", _repeat(UNDEFINED, 5)),
        ByteRange(23, 1, "Form of item", FORM_OF_ITEM),
        ByteRange(24, 11, "Undef24to34", _repeat(UNDEFINED, 11)),
    )),
)

SCHEMAS: Mapping[MaterialType, FixedFieldSchema] = MappingProxyType(
    {schema.material_type: schema for schema in _SCHEMAS}
)


def get_schema(material_type: MaterialType) -> FixedFieldSchema:
    return SCHEMAS[material_type]


def schema_for(record_type: str, bibliographic_level: str) -> Optional[FixedFieldSchema]:
    """Schema selected by leader bytes 06 and 07, or None."""
    material = material_for(record_type, bibliographic_level)
    if material is None:
        return None
    return SCHEMAS[material]

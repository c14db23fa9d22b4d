"""
Country and language code tables for 008/15-17 and 008/35-37.

The tables are read once from the JSON files bundled in ``marcchecks/data`` and
kept in read-only mappings. Codes are stored blank-padded to three characters,
the width they occupy in the 008, so two-letter country codes such as ``"aa"``
are looked up as ``"aa "``.
"""

import json
import logging
from enum import Enum
from functools import lru_cache
from importlib import resources
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional

logger = logging.getLogger(__name__)

CODE_WIDTH = 3
NOT_CODED = " " * CODE_WIDTH


class CodeStatus(Enum):
    """Classification of a code against a table."""

    VALID = "valid"
    OBSOLETE = "obsolete"
    UNKNOWN = "unknown"


class CodeEntry(NamedTuple):
    """A code with its label and status."""

    code: str
    label: str
    status: CodeStatus


def pad_code(code: str) -> str:
    """Blank-pad a code to the 3-character 008 width."""
    return code.ljust(CODE_WIDTH)


def _freeze(entries: Mapping[str, str], status: CodeStatus) -> Mapping[str, CodeEntry]:
    return MappingProxyType({
        pad_code(code): CodeEntry(pad_code(code), label, status)
        for code, label in entries.items()
    })


def _read_dataset(name: str) -> dict:
    text = resources.files("marcchecks").joinpath("data", name).read_text(encoding="utf-8")
    return json.loads(text)


class CodeTables:
    """Read-only country and language lookups.

    Args:
        countries: Padded country code to ``CodeEntry``.
        languages: Padded language code to ``CodeEntry``.

    Example:
        >>> tables = CodeTables.load()
        >>> tables.classify_country("nyu")
        <CodeStatus.VALID: 'valid'>
        >>> tables.classify_language("esk")
        <CodeStatus.OBSOLETE: 'obsolete'>
    """

    __slots__ = ("countries", "languages")

    def __init__(self, countries: Mapping[str, CodeEntry], languages: Mapping[str, CodeEntry]):
        self.countries = MappingProxyType(dict(countries))
        self.languages = MappingProxyType(dict(languages))

    @classmethod
    def from_data(cls, countries: Mapping[str, Mapping[str, str]],
                  languages: Mapping[str, Mapping[str, str]]) -> "CodeTables":
        """Build tables from ``{"valid": {...}, "obsolete": {...}}`` mappings.

        A code listed as both valid and obsolete is treated as valid.
        """
        return cls(_merge(countries), _merge(languages))

    @classmethod
    def load(cls) -> "CodeTables":
        """Load the bundled datasets."""
        tables = cls.from_data(_read_dataset("countries.json"), _read_dataset("languages.json"))
        logger.debug(
            "Loaded code tables: %d country codes, %d language codes",
            len(tables.countries), len(tables.languages),
        )
        return tables

    def lookup_country(self, code: str) -> Optional[CodeEntry]:
        return self.countries.get(pad_code(code))

    def lookup_language(self, code: str) -> Optional[CodeEntry]:
        return self.languages.get(pad_code(code))

    def classify_country(self, code: str) -> CodeStatus:
        """Classify a country of publication code."""
        entry = self.lookup_country(code)
        return entry.status if entry is not None else CodeStatus.UNKNOWN

    def classify_language(self, code: str) -> CodeStatus:
        """Classify a language code. Three blanks (not coded) is valid."""
        if pad_code(code) == NOT_CODED:
            return CodeStatus.VALID
        entry = self.lookup_language(code)
        return entry.status if entry is not None else CodeStatus.UNKNOWN


def _merge(data: Mapping[str, Mapping[str, str]]) -> Mapping[str, CodeEntry]:
    merged = dict(_freeze(data.get("obsolete", {}), CodeStatus.OBSOLETE))
    merged.update(_freeze(data.get("valid", {}), CodeStatus.VALID))
    return merged


@lru_cache(maxsize=None)
def get_code_tables() -> CodeTables:
    """Process-wide tables, loaded on first use."""
    return CodeTables.load()


def classify_country(code: str) -> CodeStatus:
    return get_code_tables().classify_country(code)


def classify_language(code: str) -> CodeStatus:
    return get_code_tables().classify_language(code)


def lookup_country(code: str) -> Optional[CodeEntry]:
    return get_code_tables().lookup_country(code)


def lookup_language(code: str) -> Optional[CodeEntry]:
    return get_code_tables().lookup_language(code)

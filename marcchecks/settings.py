"""
Configuration for the checks.

Everything a cataloging department would tune lives in one frozen
``Settings`` value: the leader vocabularies, the date-entered year window, the
LCCN year window, exception lists and the field-length limit. ``Settings`` is
passed explicitly to each check; ``DEFAULT_SETTINGS`` is used when it is not.

Two environment variables override the defaults through ``Settings.from_env()``:

- ``MARCCHECKS_DATE_ENTERED_LATEST``: last two-digit year (00-79) accepted as
  20xx in 008/00-05.
- ``MARCCHECKS_MAX_FIELD_LENGTH``: longest field, in characters, before
  ``check_field_length`` reports it.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, FrozenSet, Mapping, Optional, Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .vocabularies import DEFAULT_LEADER_VOCABULARY, LeaderVocabulary

ENV_PREFIX = "MARCCHECKS_"
DATE_ENTERED_LATEST_ENV = ENV_PREFIX + "DATE_ENTERED_LATEST"
MAX_FIELD_LENGTH_ENV = ENV_PREFIX + "MAX_FIELD_LENGTH"

ABBREVIATION_EXCEPTIONS = frozenset({
    "U.S.A.", "arr.", "etc.", "L. A.", "A.D.", "B.I.G.", "Co.", "D.C.",
    "E.R.", "I.Q.", "Inc.", "J.F.K.", "Jr.", "O.K.", "R.E.M.", "St.",
    "T.R.", "U.S.", "bk.", "cc.", "ed.", "ft.", "jr.",
})

GEOGRAPHIC_EXCEPTIONS = frozenset({
    "English-speaking countries",
    "Foreign countries",
})


@dataclass(frozen=True)
class DateWindow:
    """Two-digit year window for 008/00-05.

    Years ``00``..``latest_2000s`` are read as 20xx and
    ``earliest_1900s``..``99`` as 19xx; anything between is rejected.
    """

    latest_2000s: int = 6
    earliest_1900s: int = 80

    def expand(self, two_digit_year: int) -> Optional[int]:
        """Four-digit year, or None when the year falls outside the window."""
        if 0 <= two_digit_year <= self.latest_2000s:
            return 2000 + two_digit_year
        if self.earliest_1900s <= two_digit_year <= 99:
            return 1900 + two_digit_year
        return None

    @property
    def description(self) -> str:
        return f"after {2000 + self.latest_2000s} or before {1900 + self.earliest_1900s}"


@dataclass(frozen=True)
class Settings:
    """Tunable parameters shared by all checks.

    Args:
        leader_vocabulary: Allowed values for leader bytes 05, 06, 07, 17, 18.
        date_entered_window: Year window for 008/00-05.
        lccn_old_years: Two-digit years (inclusive) that an 8-digit LCCN must
            not start with.
        lccn_ten_digit_years: Years (inclusive) a 10-digit LCCN may start with.
        abbreviation_exceptions: Final words allowed to end in a period in
            fields that normally carry no closing punctuation.
        geographic_exceptions: 6xx $z values that do not require an 043.
        max_field_length: Longest field accepted by ``check_field_length``.
    """

    leader_vocabulary: LeaderVocabulary = DEFAULT_LEADER_VOCABULARY
    date_entered_window: DateWindow = field(default_factory=DateWindow)
    lccn_old_years: Tuple[int, int] = (1, 79)
    lccn_ten_digit_years: Tuple[int, int] = (2001, 2006)
    abbreviation_exceptions: FrozenSet[str] = ABBREVIATION_EXCEPTIONS
    geographic_exceptions: FrozenSet[str] = GEOGRAPHIC_EXCEPTIONS
    max_field_length: int = 1870

    def __post_init__(self):
        if self.max_field_length <= 0:
            raise ValueError("max_field_length must be positive")
        low, high = self.lccn_ten_digit_years
        if low > high:
            raise ValueError("lccn_ten_digit_years must be (earliest, latest)")
        window = self.date_entered_window
        if not 0 <= window.latest_2000s < window.earliest_1900s <= 99:
            raise ValueError("date_entered_window must satisfy 0 <= latest_2000s < earliest_1900s <= 99")

    def with_overrides(self, **changes) -> "Settings":
        """Copy of these settings with some values replaced."""
        return replace(self, **changes)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Default settings with overrides taken from environment variables.

        Reads ``os.environ`` unless a mapping is given. Malformed values raise
        ``pydantic.ValidationError``, a ``ValueError``.
        """
        if environ is None:
            overrides = EnvironmentOverrides()
        else:
            overrides = EnvironmentOverrides.from_mapping(environ)
        return cls(**overrides.changes())


class EnvironmentOverrides(BaseSettings):
    """Typed ``MARCCHECKS_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        extra="ignore",
    )

    date_entered_latest: Optional[int] = Field(default=None, ge=0, le=79)
    max_field_length: Optional[int] = None

    @field_validator("max_field_length")
    @classmethod
    def max_field_length_is_positive(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value <= 0:
            raise ValueError("must be positive")
        return value

    @classmethod
    def from_mapping(cls, environ: Mapping[str, str]) -> "EnvironmentOverrides":
        """Validate overrides from a mapping instead of the process environment."""
        values = {
            key[len(ENV_PREFIX):].lower(): value
            for key, value in environ.items()
            if key.startswith(ENV_PREFIX) and value
        }
        return cls.model_validate(values)

    def changes(self) -> Dict[str, Any]:
        """Keyword arguments for ``Settings`` covering the variables that were set."""
        changes: Dict[str, Any] = {}
        if self.date_entered_latest is not None:
            changes["date_entered_window"] = DateWindow(latest_2000s=self.date_entered_latest)
        if self.max_field_length is not None:
            changes["max_field_length"] = self.max_field_length
        return changes


DEFAULT_SETTINGS = Settings()

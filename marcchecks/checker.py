"""
Record Checker - run every check over a record in a fixed order.

The leader check runs first, then the 008 check, then the cross-field rules in
the order they were registered. The diagnostics of all checks are returned in
one list, keeping both the order of the checks and the order each check
reported in.

# Example Usage

```python
from pymarc import MARCReader
from marcchecks import validate_all

with open('records.mrc', 'rb') as f:
    for record in MARCReader(f):
        for diagnostic in validate_all(record):
            print(diagnostic)
```

# Adding a Rule

```python
from marcchecks import Diagnostic, RecordChecker, RecordView

def check_020_present(record, settings=None):
    view = RecordView.of(record)
    return [] if view.has_field('020') else [Diagnostic.of('020', 'Record lacks 020 field.')]

checker = RecordChecker()
checker.register('check_020_present', check_020_present)
```

Rules share nothing but the read-only settings and code tables, so one
checker can be used from several threads at once.
"""

import logging
from functools import partial
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from .codes import CodeTables, get_code_tables
from .control008 import validate_control_field_008
from .diagnostics import Diagnostic
from .leader import validate_leader
from .record import RecordView
from .rules import (
    check_010,
    check_040_present,
    check_041_vs_008_lang,
    check_240_ind1_vs_1xx,
    check_245_ind1_vs_1xx,
    check_490_vs_8xx,
    check_5xx_ending_punctuation,
    check_bk008_vs_300,
    check_bk008_vs_bibref_and_index,
    check_double_periods,
    check_end_punct_300,
    check_field_length,
    check_internal_spaces,
    check_nonpunct_ending_fields,
    check_trailing_spaces,
    find_empty_subfields,
    find_floating_hyphens,
    geog_subject_vs_043,
    match_pub_dates,
    video_007_vs_300_vs_538,
)
from .settings import DEFAULT_SETTINGS, Settings

logger = logging.getLogger(__name__)

__all__ = ["Rule", "RuleRegistry", "RecordChecker", "default_registry", "validate_all"]

Rule = Callable[..., List[Diagnostic]]

# Cross-field rules, in execution order
CROSS_FIELD_RULES: Tuple[Tuple[str, Rule], ...] = (
    ("check_internal_spaces", check_internal_spaces),
    ("check_trailing_spaces", check_trailing_spaces),
    ("check_double_periods", check_double_periods),
    ("check_010", check_010),
    ("check_end_punct_300", check_end_punct_300),
    ("check_bk008_vs_300", check_bk008_vs_300),
    ("check_490_vs_8xx", check_490_vs_8xx),
    ("check_240_ind1_vs_1xx", check_240_ind1_vs_1xx),
    ("check_245_ind1_vs_1xx", check_245_ind1_vs_1xx),
    ("match_pub_dates", match_pub_dates),
    ("check_bk008_vs_bibref_and_index", check_bk008_vs_bibref_and_index),
    ("check_041_vs_008_lang", check_041_vs_008_lang),
    ("check_5xx_ending_punctuation", check_5xx_ending_punctuation),
    ("find_floating_hyphens", find_floating_hyphens),
    ("video_007_vs_300_vs_538", video_007_vs_300_vs_538),
    ("geog_subject_vs_043", geog_subject_vs_043),
    ("find_empty_subfields", find_empty_subfields),
    ("check_040_present", check_040_present),
    ("check_nonpunct_ending_fields", check_nonpunct_ending_fields),
    ("check_field_length", check_field_length),
)


class RuleRegistry:
    """Named rules kept in registration order.

    A rule is any callable ``rule(record, settings)`` returning a list of
    ``Diagnostic`` values.
    """

    def __init__(self):
        self._rules: Dict[str, Rule] = {}

    def register(self, name: str, rule: Rule) -> Rule:
        """Add a rule after the ones already registered.

        Raises:
            ValueError: If a rule with this name is already registered.
            TypeError: If ``rule`` is not callable.
        """
        if name in self._rules:
            raise ValueError(f"Rule {name!r} is already registered")
        if not callable(rule):
            raise TypeError(f"Rule {name!r} must be callable, got {type(rule).__name__}")
        self._rules[name] = rule
        return rule

    def names(self) -> List[str]:
        return list(self._rules)

    def __iter__(self) -> Iterator[Tuple[str, Rule]]:
        return iter(list(self._rules.items()))

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, name: str) -> bool:
        return name in self._rules


def default_registry(code_tables: Optional[CodeTables] = None) -> RuleRegistry:
    """Registry holding the leader check, the 008 check and every cross-field rule."""
    registry = RuleRegistry()
    registry.register("validate_leader", validate_leader)
    registry.register(
        "validate_control_field_008",
        partial(validate_control_field_008, code_tables=code_tables or get_code_tables()),
    )
    for name, rule in CROSS_FIELD_RULES:
        registry.register(name, rule)
    return registry


class RecordChecker:
    """Runs a registry of rules with one set of settings and code tables.

    Args:
        settings: Settings passed to every rule (``DEFAULT_SETTINGS`` if None).
        code_tables: Country and language tables (bundled tables if None).
        registry: Rules to run (``default_registry()`` if None).

    Example:
        >>> checker = RecordChecker(Settings(max_field_length=1000))
        >>> [str(d) for d in checker.check(record_without_040)]
        ['040: Record lacks 040 field.']
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        code_tables: Optional[CodeTables] = None,
        registry: Optional[RuleRegistry] = None,
    ):
        self.settings = settings or DEFAULT_SETTINGS
        self.code_tables = code_tables or get_code_tables()
        self.registry = registry if registry is not None else default_registry(self.code_tables)

    def register(self, name: str, rule: Rule) -> Rule:
        """Add a rule to this checker's registry."""
        return self.registry.register(name, rule)

    def check(self, record: Any) -> List[Diagnostic]:
        """Run every rule over the record and concatenate their diagnostics."""
        view = RecordView.of(record)
        diagnostics: List[Diagnostic] = []
        for name, rule in self.registry:
            found = rule(view, self.settings)
            if found:
                logger.debug("%s reported %d diagnostic(s)", name, len(found))
            diagnostics.extend(found)
        return diagnostics

    __call__ = check


def validate_all(record: Any, settings: Optional[Settings] = None) -> List[Diagnostic]:
    """Run all checks over a record with the bundled code tables."""
    return RecordChecker(settings).check(record)

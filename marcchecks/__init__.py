"""
marcchecks: cross-field quality checks for MARC 21 bibliographic records.

The checks compare the leader, the 008 fixed field and the variable fields of
a record against each other and report what looks wrong as ``Diagnostic``
values. Records come from pymarc (or any record with the same shape); they are
read, never modified.

>>> from marcchecks import validate_all
>>> for diagnostic in validate_all(record):
...     print(diagnostic)
"""

from .checker import RecordChecker, RuleRegistry, default_registry, validate_all
from .codes import (
    CodeEntry,
    CodeStatus,
    CodeTables,
    classify_country,
    classify_language,
    get_code_tables,
    lookup_country,
    lookup_language,
)
from .control008 import DateEntered, parse_date_entered, validate_008, validate_control_field_008
from .diagnostics import SEPARATOR, Diagnostic, render_all
from .fixed_fields import SCHEMAS, ByteRange, FixedFieldSchema, MaterialType, classify_material
from .leader import validate_leader
from .record import (
    MAIN_ENTRIES,
    SERIES_ADDED_ENTRIES,
    SERIES_STATEMENTS,
    SUBJECTS,
    FieldView,
    RecordView,
    Subfield,
    TagRange,
)
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
    parse_illustrations,
    video_007_vs_300_vs_538,
)
from .settings import DEFAULT_SETTINGS, DateWindow, Settings
from .vocabularies import (
    DEFAULT_LEADER_VOCABULARY,
    MARC21_LEADER_VALUES,
    MARC21_LEADER_VOCABULARY,
    LeaderVocabulary,
    describe_leader_value,
)

__version__ = "0.1.0"
__author__ = "marcchecks Contributors"

__all__ = [
    # Aggregation
    "validate_all",
    "RecordChecker",
    "RuleRegistry",
    "default_registry",
    # Diagnostics
    "Diagnostic",
    "SEPARATOR",
    "render_all",
    # Record view
    "RecordView",
    "FieldView",
    "Subfield",
    "TagRange",
    "MAIN_ENTRIES",
    "SERIES_STATEMENTS",
    "SUBJECTS",
    "SERIES_ADDED_ENTRIES",
    # Configuration
    "Settings",
    "DateWindow",
    "DEFAULT_SETTINGS",
    "LeaderVocabulary",
    "DEFAULT_LEADER_VOCABULARY",
    "MARC21_LEADER_VOCABULARY",
    "MARC21_LEADER_VALUES",
    "describe_leader_value",
    # Code tables
    "CodeStatus",
    "CodeEntry",
    "CodeTables",
    "get_code_tables",
    "classify_country",
    "classify_language",
    "lookup_country",
    "lookup_language",
    # Leader and 008
    "validate_leader",
    "validate_control_field_008",
    "validate_008",
    "parse_date_entered",
    "DateEntered",
    "MaterialType",
    "ByteRange",
    "FixedFieldSchema",
    "SCHEMAS",
    "classify_material",
    # Cross-field rules
    "check_internal_spaces",
    "check_trailing_spaces",
    "check_double_periods",
    "find_floating_hyphens",
    "find_empty_subfields",
    "check_end_punct_300",
    "check_5xx_ending_punctuation",
    "check_nonpunct_ending_fields",
    "check_bk008_vs_300",
    "parse_illustrations",
    "video_007_vs_300_vs_538",
    "match_pub_dates",
    "check_490_vs_8xx",
    "check_240_ind1_vs_1xx",
    "check_245_ind1_vs_1xx",
    "check_041_vs_008_lang",
    "geog_subject_vs_043",
    "check_bk008_vs_bibref_and_index",
    "check_010",
    "check_040_present",
    "check_field_length",
]

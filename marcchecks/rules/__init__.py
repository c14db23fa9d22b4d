"""Cross-field consistency rules.

Every rule takes a record (or a ``RecordView``) and optional ``Settings`` and
returns a list of ``Diagnostic`` values. Rules never modify the record and do
not depend on each other's results, so any subset can be run in any order.

Modules
-------
- **spacing**: internal, leading and trailing spaces; doubled periods and
  commas; floating hyphens; empty subfields
- **punctuation**: closing punctuation of the 300, 5xx notes and fields that
  normally take none
- **physical**: 008 illustrations vs. 300; video 007 vs. 300 vs. 538
- **dates**: 008 date 1 vs. 050 vs. 260
- **headings**: 490/8xx, 240 and 245 indicators vs. 1xx, 041 vs. 008,
  geographic subjects vs. 043
- **notes**: bibliography and index notes vs. 008
- **identifiers**: 010 LCCN, 040 presence, field length

Quick Start
-----------
>>> from marcchecks.rules import check_490_vs_8xx
>>> [str(d) for d in check_490_vs_8xx(record)]
['490: Indicator is 1 but 8xx does not exist.']
"""

from .dates import match_pub_dates
from .headings import (
    check_041_vs_008_lang,
    check_240_ind1_vs_1xx,
    check_245_ind1_vs_1xx,
    check_490_vs_8xx,
    geog_subject_vs_043,
)
from .identifiers import check_010, check_040_present, check_field_length
from .notes import check_bk008_vs_bibref_and_index
from .physical import check_bk008_vs_300, parse_illustrations, video_007_vs_300_vs_538
from .punctuation import check_5xx_ending_punctuation, check_end_punct_300, check_nonpunct_ending_fields
from .spacing import (
    check_double_periods,
    check_internal_spaces,
    check_trailing_spaces,
    find_empty_subfields,
    find_floating_hyphens,
)

__all__ = [
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

"""
Physical description (300) checks against fixed-field coding.

``check_bk008_vs_300`` compares the book illustration codes in 008/18-21 with
the wording of 300 $b (and $a for plates). ``video_007_vs_300_vs_538``
compares the videorecording 007 with the 300 and the 538 system details note.
"""

import re
from typing import Any, List, NamedTuple, Optional, Pattern

from ..control008 import get_008
from ..diagnostics import Diagnostic
from ..record import RecordView
from ..settings import Settings

BLANK_ILLUSTRATIONS = "    "

_EXTENT = re.compile(r"\b[pv]\.")
_DIMENSIONS = re.compile(r"\d+ (?:[cm]m\.|in\.)")
_CODED_ILLUSTRATION = re.compile(r"[a-eg-mop]")


class IllustrationCode(NamedTuple):
    """Wording expected in 300 $b for one 008/18-21 code.

    ``reverse`` is the wording that, when present in $b, requires the code;
    codes without it are only checked one way.
    """

    code: str
    wording: Pattern
    reverse: Optional[Pattern] = None
    reverse_label: str = ""


ILLUSTRATION_CODES = (
    IllustrationCode("a", re.compile(r"ill\."), re.compile(r"ill\."), "'ill.'"),
    IllustrationCode("b", re.compile(r"map"), re.compile(r"map"), "'map' or 'maps'"),
    IllustrationCode("c", re.compile(r"port\.|ports\.|ill\."), re.compile(r"port\.|ports\."),
                     "'port.' or 'ports.'"),
    IllustrationCode("d", re.compile(r"chart|ill\.")),
    IllustrationCode("e", re.compile(r"plan|ill\.")),
    # f (plates) is described in 300 $a
    IllustrationCode("g", re.compile(r"music|ill\."), re.compile(r"music"), "'music'"),
    IllustrationCode("h", re.compile(r"facsim\.|facsims\.|ill\.")),
    IllustrationCode("i", re.compile(r"coats of arms|ill\.")),
    IllustrationCode("j", re.compile(r"geneal\. table|ill\.")),
    IllustrationCode("k", re.compile(r"form[ s]|ill\.")),
    IllustrationCode("l", re.compile(r"samples|ill\.")),
)

_PHOTOGRAPHS = re.compile(r"photo\.|photos\.|ill\.")


def parse_illustrations(codes: str, subfield_b: str) -> List[Diagnostic]:
    """Compare 008/18-21 illustration codes with 300 $b, one finding per problem.

    Codes a-e and g-l need matching wording in $b; for a, b, c and g the
    wording also requires the code. Code m is reported whenever present, as is
    p. The photographs check for code o is keyed on code l, so it runs only
    when samples are coded.
    """
    findings = []
    for entry in ILLUSTRATION_CODES:
        if entry.code in codes:
            if not entry.wording.search(subfield_b):
                findings.append(Diagnostic.of(
                    "300", f"bytes 18-21 have code '{entry.code}' but 300 subfield b is {subfield_b}"
                ))
        elif entry.reverse is not None and entry.reverse.search(subfield_b):
            findings.append(Diagnostic.of(
                "008",
                f"Bytes 18-21 do not have code '{entry.code}' but 300 subfield 'b' has {entry.reverse_label}",
            ))

    if "m" in codes:
        findings.append(Diagnostic.of("300", "bytes 18-21 have code 'm' (phonodisc, sound disc, etc.)."))
    # TODO: key the photographs check on code 'o' once local practice for it is confirmed
    if "l" in codes and not _PHOTOGRAPHS.search(subfield_b):
        findings.append(Diagnostic.of("300", f"bytes 18-21 have code 'o' but 300 subfield b is {subfield_b}"))
    if "p" in codes:
        findings.append(Diagnostic.of("300", f"bytes 18-21 have code 'p' but 300 subfield b is {subfield_b}"))
    return findings


def _combine(findings: List[Diagnostic]) -> Diagnostic:
    """Fold several findings into one diagnostic led by the first finding."""
    first, rest = findings[0], findings[1:]
    return Diagnostic(first.tag, first.parts + tuple(d.render() for d in rest))


def _plates_warning(subfield_a: str) -> Diagnostic:
    return Diagnostic.of(
        "300", f"bytes 18-21 (Illustrations) is coded f for plates but 300 subfield a is {subfield_a}"
    )


def check_bk008_vs_300(record: Any, settings: Optional[Settings] = None) -> List[Diagnostic]:
    """Check a book's 300 wording and its agreement with 008/18-21.

    Only language material (leader/06 'a') is checked; CIP records are
    skipped. $a must give pages, volumes or leaves and $c a measurement in
    cm., mm. or in.; then the illustration codes are compared with $b.
    """
    view = RecordView.of(record)
    if view.is_cip or view.record_type != "a":
        return []

    field300 = view.field("300")
    if field300 is None:
        return [Diagnostic.of("300", "Record has no 300.")]

    subfield_a = field300.subfield("a")
    subfield_b = field300.subfield("b")
    subfield_c = field300.subfield("c")
    warnings = []

    if subfield_a:
        has_leaves = " leaves " in subfield_a and " leaves of plates" not in subfield_a
        if not (_EXTENT.search(subfield_a) or has_leaves):
            warnings.append(Diagnostic.of("300", "Check subfield _a for p. or v."))
    else:
        warnings.append(Diagnostic.of("300", "Subfield _a is not present."))

    if subfield_c:
        if not _DIMENSIONS.search(subfield_c):
            warnings.append(Diagnostic.of("300", "Check subfield _c for cm., mm. or in."))
    else:
        warnings.append(Diagnostic.of("300", "Subfield _c is not present."))

    field008 = get_008(view)
    if field008 is None:
        return warnings

    codes = field008[18:22]
    if codes == BLANK_ILLUSTRATIONS:
        if subfield_b:
            warnings.append(Diagnostic.of(
                "008", "bytes 18-21 (Illustrations) coded blank but 300 has subfield 'b'."
            ))
    elif _CODED_ILLUSTRATION.search(codes):
        if not subfield_b:
            warnings.append(Diagnostic.of(
                "008", "bytes 18-21 (Illustrations) have valid code but 300 has no subfield 'b'."
            ))
        else:
            findings = parse_illustrations(codes, subfield_b)
            if findings:
                warnings.append(_combine(findings))
            if "f" in codes and subfield_a and "plate" not in subfield_a:
                warnings.append(_plates_warning(subfield_a))
    elif "f" in codes:
        if subfield_a and "plate" not in subfield_a:
            warnings.append(_plates_warning(subfield_a))
    else:
        warnings.append(Diagnostic.of("008", "bytes 18-21 (Illustrations) have a least one invalid character."))
    return warnings


_VHS_538 = re.compile(r"VHS ([hH]i-[fF]i)?( mono\.)? ?format, [ES]?L?P playback mode")
_DVD_538 = re.compile(r"(DVD)|(Video CD)")
_BLACK_AND_WHITE = re.compile(r"b.?&.?w")
_COLOR = re.compile(r"col\.")
_COLOR_NO_PERIOD = re.compile(r"col[^.]")

DISC_DIMENSIONS = "4 3/4 in."
CASSETTE_DIMENSIONS = "1/2 in."


def _video_007(view: RecordView, warnings: List[Diagnostic]) -> Optional[str]:
    """The single 007 starting with 'v', or None after reporting why not."""
    fields007 = view.get_fields("007")
    if not fields007:
        warnings.append(Diagnostic.of("007", f"Record is coded {view.record_type} but 007 does not exist."))
    video = [f.as_string() for f in fields007 if f.as_string().startswith("v")]
    if len(video) > 1:
        warnings.append(Diagnostic.of("007", "Multiple 007 with first byte 'v' are present."))
        return None
    if not video:
        warnings.append(Diagnostic.of(
            "007", f"Record is coded {view.record_type} but no 007 has 'v' as its first byte."
        ))
        return None
    return video[0]


def video_007_vs_300_vs_538(record: Any, settings: Optional[Settings] = None) -> List[Diagnostic]:
    """Cross-check a videorecording's 007, 300 and 538.

    Applies to projected media (leader/06 'g') with exactly one 007 starting
    with 'v'. Videodiscs ('vd') should be 4 3/4 in. with DVD or Video CD in
    the 538; videocassettes ('vf') 1/2 in. with VHS format and a playback mode.
    The colour code in 007/03 is compared with the wording of 300 $b. Only the
    first 300 and first 538 are examined.
    """
    view = RecordView.of(record)
    if view.record_type != "g":
        return []

    warnings: List[Diagnostic] = []
    field007 = _video_007(view, warnings)
    if field007 is None:
        return warnings

    def byte(position: int) -> str:
        return field007[position:position + 1]

    is_disc = byte(1) == "d"
    is_cassette = byte(1) == "f"
    if is_disc and not (byte(4) in ("v", "z") and field007[5:8] == "aiz"):
        warnings.append(Diagnostic.of("007", "Coded 'vd' for videodisc but bytes do not match normal pattern."))
    elif is_cassette and field007[4:8] != "baho":
        warnings.append(Diagnostic.of("007", "Coded 'vf' for videocassette but bytes do not match normal pattern."))

    subfield_a = subfield_b = subfield_c = None
    field300 = view.field("300")
    if field300 is None:
        warnings.append(Diagnostic.of("300", "May be missing."))
    elif field300.subfield("a") and field300.subfield("b") and field300.subfield("c"):
        subfield_a = field300.subfield("a")
        subfield_b = field300.subfield("b")
        subfield_c = field300.subfield("c")
    else:
        for code in "abc":
            if not field300.subfield(code):
                warnings.append(Diagnostic.of("300", f"Subfield '{code}' is missing."))

    disc_in_300 = cassette_in_300 = False
    if subfield_a:
        if "videodisc" in subfield_a:
            disc_in_300 = True
        elif "videocassette" in subfield_a:
            cassette_in_300 = True
        else:
            warnings.append(Diagnostic.of("300", f"Not videodisc or videocassette, {subfield_a}."))

    bw_only = color_only = color_and_bw = False
    if subfield_b:
        has_bw = _BLACK_AND_WHITE.search(subfield_b) is not None
        has_color = _COLOR.search(subfield_b) is not None
        has_bare_color = _COLOR_NO_PERIOD.search(subfield_b) is not None
        if has_bw and has_color:
            color_and_bw = True
        elif has_bw and has_bare_color:
            color_and_bw = True
            warnings.append(Diagnostic.of("300", f"Col. may need a period, {subfield_b}."))
        elif has_bw:
            bw_only = True
        elif has_color:
            color_only = True
        elif has_bare_color:
            color_only = True
            warnings.append(Diagnostic.of("300", f"Col. may need a period, {subfield_b}."))
        else:
            warnings.append(Diagnostic.of("300", f"Col. or b&w are not indicated, {subfield_b}."))

    dimensions = None
    if subfield_c:
        if DISC_DIMENSIONS in subfield_c:
            dimensions = DISC_DIMENSIONS
        elif CASSETTE_DIMENSIONS in subfield_c:
            dimensions = CASSETTE_DIMENSIONS
        else:
            warnings.append(Diagnostic.of(
                "300", f"Dimensions are not 4 3/4 in. or 1/2 in., {subfield_c}."
            ))

    if (disc_in_300 and dimensions != DISC_DIMENSIONS) or (cassette_in_300 and dimensions != CASSETTE_DIMENSIONS):
        warnings.append(Diagnostic.of("300", f"Dimensions, {subfield_c}, do not match SMD, {subfield_a}."))

    dvd_538 = vhs_538 = False
    field538 = view.field("538")
    if field538 is None:
        warnings.append(Diagnostic.of("538", "May be missing in video record."))
    else:
        note = field538.as_string()
        if _DVD_538.search(note):
            dvd_538 = True
        elif _VHS_538.search(note):
            vhs_538 = True
        else:
            warnings.append(Diagnostic.of("538", "Does not indicate VHS or DVD."))

    if is_cassette:
        if not cassette_in_300:
            warnings.append(Diagnostic.of("300", "007 coded for cassette but videocassette is not present in 300a."))
        if not vhs_538:
            warnings.append(Diagnostic.of(
                "538", "007 coded for cassette but 538 does not have 'VHS format, SP playback mode'."
            ))
    elif is_disc:
        if not disc_in_300:
            warnings.append(Diagnostic.of("300", "007 coded for disc but videodisc is not present in 300a."))
        if not dvd_538:
            warnings.append(Diagnostic.of("538", "007 coded for disc but 538 does not have 'DVD'."))

    color = byte(3)
    shown_b = subfield_b or ""
    if color == "b" and not bw_only:
        warnings.append(Diagnostic.of("300", f"Color in 007 coded 'b' but 300b mentions col., {shown_b}"))
    elif color == "c" and not color_only:
        warnings.append(Diagnostic.of("300", f"Color in 007 coded 'c' but 300b mentions b&w, {shown_b}"))
    elif color == "m" and not color_and_bw:
        warnings.append(Diagnostic.of(
            "300", f"Color in 007 coded 'm' but 300b mentions only col. or b&w, {shown_b}"
        ))
    elif color == "a":
        warnings.append(Diagnostic.of("300", "Color in 007 coded 'a', one color."))
    return warnings

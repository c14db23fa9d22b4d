"""
Diagnostic values returned by every check.

A diagnostic is a tag plus one or more message parts. The parts are kept
separate internally and only joined with ``SEPARATOR`` when rendered, which
keeps the tab-joined output that downstream report scripts split on.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

SEPARATOR = "\t"


@dataclass(frozen=True)
class Diagnostic:
    """One finding about a record.

    Args:
        tag: Field tag the finding is about ("008", "LDR", "300"), or None for
            record-level findings whose label is part of the message.
        parts: Message parts, rendered joined by ``SEPARATOR``.

    Example:
        >>> str(Diagnostic("040", ("Record lacks 040 field.",)))
        '040: Record lacks 040 field.'
    """

    tag: Optional[str]
    parts: Tuple[str, ...]

    def __post_init__(self):
        if isinstance(self.parts, str):
            object.__setattr__(self, "parts", (self.parts,))
        elif not isinstance(self.parts, tuple):
            object.__setattr__(self, "parts", tuple(self.parts))

    @classmethod
    def of(cls, tag: Optional[str], *parts: str) -> "Diagnostic":
        """Build a diagnostic from positional message parts."""
        return cls(tag, tuple(parts))

    @property
    def message(self) -> str:
        """Message parts joined by the separator token."""
        return SEPARATOR.join(self.parts)

    def render(self) -> str:
        """Render in the ``"<tag>: <message>"`` report format."""
        if self.tag is None:
            return self.message
        return f"{self.tag}: {self.message}"

    def __str__(self) -> str:
        return self.render()


def render_all(diagnostics: Iterable[Diagnostic]) -> List[str]:
    """Render diagnostics to strings, preserving order."""
    return [d.render() for d in diagnostics]

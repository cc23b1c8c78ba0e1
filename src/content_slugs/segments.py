from dataclasses import dataclass
from enum import Enum

ASCII_DIGITS = frozenset("0123456789")
INDEX_MARKERS = ("index", "readme")
DATE_LENGTH = 10
# Positions of the two dashes inside YYYY-MM-DD.
DATE_DASHES = (4, 7)


class SegmentKind(str, Enum):
    DATE_ONLY = "date_only"
    DATE_WITH_SLUG = "date_with_slug"
    INDEX_MARKER = "index_marker"
    PLAIN = "plain"


@dataclass(frozen=True)
class Segment:
    raw: str
    kind: SegmentKind
    is_last: bool = False
    slug_text: str | None = None


def date_prefix(text: str) -> str | None:
    """Return the leading YYYY-MM-DD of ``text``, or None when it does not start with one."""
    if len(text) < DATE_LENGTH:
        return None
    for idx in range(DATE_LENGTH):
        char = text[idx]
        if idx in DATE_DASHES:
            if char != "-":
                return None
        elif char not in ASCII_DIGITS:
            return None
    return text[:DATE_LENGTH]


def is_index_marker(text: str) -> bool:
    return text.lower() in INDEX_MARKERS


def classify_segment(text: str, is_last: bool = False, dates_enabled: bool = True) -> Segment:
    if is_last and is_index_marker(text):
        return Segment(text, SegmentKind.INDEX_MARKER, is_last)
    if not dates_enabled or date_prefix(text) is None:
        return Segment(text, SegmentKind.PLAIN, is_last)
    if len(text) == DATE_LENGTH:
        return Segment(text, SegmentKind.DATE_ONLY, is_last)
    # "2023-08-10-" with nothing after the dash has no slug text to capture.
    if text[DATE_LENGTH] == "-" and len(text) > DATE_LENGTH + 1:
        return Segment(text, SegmentKind.DATE_WITH_SLUG, is_last, text[DATE_LENGTH + 1 :])
    return Segment(text, SegmentKind.PLAIN, is_last)


def classify_parts(parts: list[str], dates_enabled: bool = True) -> list[Segment]:
    last = len(parts) - 1
    return [
        classify_segment(part, is_last=idx == last, dates_enabled=dates_enabled)
        for idx, part in enumerate(parts)
    ]

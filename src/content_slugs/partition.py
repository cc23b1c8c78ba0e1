import logging
from dataclasses import dataclass, field

from content_slugs.segments import SegmentKind, classify_parts

logger = logging.getLogger(__name__)


@dataclass
class ParseState:
    found_date: bool = False
    folder_structure: list[str] = field(default_factory=list)
    slug_parts: list[str] = field(default_factory=list)


def partition_segments(parts: list[str], dates_enabled: bool = True) -> ParseState:
    """Split path segments into a folder prefix and hyphen-joined slug parts.

    Segments before the first date-bearing segment form the folder prefix.
    The date segment's own slug text and everything after it are slug parts.
    A path without any date collapses entirely into slug parts.
    """
    state = ParseState()
    for segment in classify_parts(parts, dates_enabled=dates_enabled):
        if segment.kind is SegmentKind.INDEX_MARKER:
            continue
        if segment.kind is SegmentKind.DATE_ONLY:
            state.found_date = True
            continue
        if segment.kind is SegmentKind.DATE_WITH_SLUG:
            state.found_date = True
            state.slug_parts.append(segment.slug_text)
            continue
        if state.found_date:
            state.slug_parts.append(segment.raw)
        else:
            state.folder_structure.append(segment.raw)

    if not state.found_date:
        state.slug_parts = state.folder_structure + state.slug_parts
        state.folder_structure = []

    logger.debug(
        "Partitioned %s into folders=%s slug_parts=%s",
        parts,
        state.folder_structure,
        state.slug_parts,
    )
    return state

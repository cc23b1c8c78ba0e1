from __future__ import annotations

import logging
import os
from datetime import date, datetime

from content_slugs.errors import InvalidDateError, RootMismatchError
from content_slugs.paths import content_parts, relative_to_root
from content_slugs.segments import DATE_LENGTH, date_prefix

logger = logging.getLogger(__name__)


def _parse_date(value: str, file_path: str | os.PathLike) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as exc:
        logger.error("Invalid date %s in %s", value, file_path)
        raise InvalidDateError(f"Invalid date: {value} in path: {file_path}", str(file_path)) from exc


def _find_date(text: str) -> str | None:
    for offset in range(len(text) - DATE_LENGTH + 1):
        found = date_prefix(text[offset:])
        if found is not None:
            return found
    return None


def published_date(root: str | os.PathLike, file_path: str | os.PathLike) -> date:
    """Publication date of a post, read from the first YYYY-MM-DD found in a folder or filename.

    The post-type folder directly under ``root`` is ignored when the file sits below one.
    """
    relative = relative_to_root(root, file_path)
    if relative is None:
        raise RootMismatchError(f"File path is not within content folder: {file_path}", str(file_path))

    parts = content_parts(relative)
    if len(parts) > 1:
        parts = parts[1:]
    for part in parts:
        found = _find_date(part)
        if found is not None:
            return _parse_date(found, file_path)

    raise InvalidDateError(
        f"Invalid date format in path: {file_path}. Expected either folder pattern: "
        "<type>/YYYY-MM-DD/... or filename pattern: YYYY-MM-DD-*",
        str(file_path),
    )

"""Slug conventions for the content collections.

Posts:        content/posts/<folders>/YYYY-MM-DD-<slug>/...  -> <folders>/<slug>-...
README topics: content/articles/<category>/<topic>/README.md  -> <category>/<topic>
Pages:        content/pages/<folders>/YYYY-MM-DD/...          -> <folders>/<slug>-...
In-research:  content/in-research/<folders>/<file>.md         -> <folders>-<file>
"""

from __future__ import annotations

import logging
import os
from pathlib import PurePath
from typing import Sequence

from content_slugs.assemble import assemble_state
from content_slugs.errors import RootMismatchError, UnexpectedFilenameError
from content_slugs.partition import partition_segments
from content_slugs.paths import absolute_path, content_parts, relative_to_root

logger = logging.getLogger(__name__)

README_STEM = "README"


class SingleRootSlugStrategy:
    """Date-aware slugs for every file below one content root."""

    dates_enabled = True
    strip_type_folder = False

    def __init__(self, root: str | os.PathLike) -> None:
        self.root = absolute_path(root)

    def _relative(self, file_path: str | os.PathLike) -> PurePath:
        relative = relative_to_root(self.root, file_path)
        if relative is None:
            logger.error("%s is outside content root %s", file_path, self.root)
            raise RootMismatchError(
                f"File path is not within content folder: {file_path}", str(file_path)
            )
        return relative

    def slug_for(self, file_path: str | os.PathLike) -> str:
        parts = content_parts(self._relative(file_path))
        if self.strip_type_folder:
            parts = parts[1:]
        state = partition_segments(parts, dates_enabled=self.dates_enabled)
        slug = assemble_state(state)
        logger.debug("Slug for %s: %r", file_path, slug)
        return slug

    def __call__(self, file_path: str | os.PathLike) -> str:
        return self.slug_for(file_path)


class PostSlugStrategy(SingleRootSlugStrategy):
    """Blog posts: the first folder below the root names the post type and is dropped."""

    strip_type_folder = True


class PageSlugStrategy(SingleRootSlugStrategy):
    pass


class InResearchSlugStrategy(SingleRootSlugStrategy):
    """Scratch content: dates carry no meaning, only index markers are dropped."""

    dates_enabled = False


class ReadmeSlugStrategy:
    """Topic folders indexed by a README; the slug is the folder path itself."""

    def __init__(self, roots: Sequence[str | os.PathLike]) -> None:
        self.roots = tuple(absolute_path(root) for root in roots)

    def _match_root(self, file_path: str | os.PathLike) -> PurePath | None:
        candidates = (relative_to_root(root, file_path) for root in self.roots)
        return next((relative for relative in candidates if relative is not None), None)

    def slug_for(self, file_path: str | os.PathLike) -> str:
        if PurePath(file_path).stem != README_STEM:
            logger.error("%s is not a README file", file_path)
            raise UnexpectedFilenameError(f"Expected README.md file: {file_path}", str(file_path))

        relative = self._match_root(file_path)
        if relative is None:
            logger.error("%s is outside content roots %s", file_path, list(self.roots))
            raise RootMismatchError(
                f"File path is not within a known content folder: {file_path}", str(file_path)
            )
        return "/".join(relative.parent.parts)

    def __call__(self, file_path: str | os.PathLike) -> str:
        return self.slug_for(file_path)

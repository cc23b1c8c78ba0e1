from __future__ import annotations

import logging
import os
from typing import Callable, Iterable

from content_slugs.config import SlugSettings
from content_slugs.strategies import (
    InResearchSlugStrategy,
    PageSlugStrategy,
    PostSlugStrategy,
    ReadmeSlugStrategy,
)

logger = logging.getLogger(__name__)

COLLECTIONS = ("posts", "readme", "pages", "in-research")


class SlugResolver:
    def __init__(self, settings: SlugSettings) -> None:
        self.settings = settings
        self._strategies: dict[str, Callable[[str | os.PathLike], str]] = {
            "posts": PostSlugStrategy(settings.posts_root),
            "readme": ReadmeSlugStrategy(settings.readme_roots),
            "pages": PageSlugStrategy(settings.pages_root),
            "in-research": InResearchSlugStrategy(settings.in_research_root),
        }

    def strategy(self, collection: str) -> Callable[[str | os.PathLike], str]:
        try:
            return self._strategies[collection]
        except KeyError as exc:
            raise ValueError(
                f"Unknown collection '{collection}'. Expected one of: {', '.join(COLLECTIONS)}"
            ) from exc

    def slug_for(self, collection: str, file_path: str | os.PathLike) -> str:
        return self.strategy(collection)(file_path)

    def resolve_many(
        self, collection: str, paths: Iterable[str | os.PathLike]
    ) -> list[tuple[str, str]]:
        strategy = self.strategy(collection)
        results = [(str(path), strategy(path)) for path in paths]
        logger.info("Resolved %d %s slugs", len(results), collection)
        return results

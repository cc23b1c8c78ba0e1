from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from content_slugs.paths import default_content_dir

ENV_PREFIX = "CONTENT_SLUGS_"
DEFAULT_README_DIRS = ("articles", "blogs", "projects")


class SlugSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    content_dir: Path = Field(default_factory=default_content_dir)
    readme_dirs: tuple[str, ...] = DEFAULT_README_DIRS
    pages_dir: str = "pages"
    in_research_dir: str = "in-research"
    log_level: str = "INFO"

    @field_validator("content_dir")
    @classmethod
    def _absolute_content_dir(cls, value: Path) -> Path:
        return Path(os.path.abspath(value))

    def _under_content(self, name: str) -> Path:
        return self.content_dir / name

    @property
    def posts_root(self) -> Path:
        # Post-type folders (posts/, pages/, ...) sit directly under the content dir.
        return self.content_dir

    @property
    def readme_roots(self) -> list[Path]:
        return [self._under_content(name) for name in self.readme_dirs]

    @property
    def pages_root(self) -> Path:
        return self._under_content(self.pages_dir)

    @property
    def in_research_root(self) -> Path:
        return self._under_content(self.in_research_dir)


def load_settings(env: Optional[Mapping[str, str]] = None, **overrides) -> SlugSettings:
    env = os.environ if env is None else env
    values: dict = {}
    content_dir = env.get(f"{ENV_PREFIX}CONTENT_DIR")
    if content_dir:
        values["content_dir"] = content_dir
    readme_dirs = env.get(f"{ENV_PREFIX}README_DIRS")
    if readme_dirs:
        values["readme_dirs"] = tuple(item.strip() for item in readme_dirs.split(",") if item.strip())
    pages_dir = env.get(f"{ENV_PREFIX}PAGES_DIR")
    if pages_dir:
        values["pages_dir"] = pages_dir
    in_research_dir = env.get(f"{ENV_PREFIX}IN_RESEARCH_DIR")
    if in_research_dir:
        values["in_research_dir"] = in_research_dir
    log_level = env.get(f"{ENV_PREFIX}LOG_LEVEL")
    if log_level:
        values["log_level"] = log_level
    values.update({key: value for key, value in overrides.items() if value is not None})
    return SlugSettings(**values)

import os
from pathlib import Path, PurePath


def absolute_path(value: str | os.PathLike) -> PurePath:
    # Lexical only: symlinks are not resolved and nothing is read from disk.
    return PurePath(os.path.normpath(os.path.abspath(value)))


def relative_to_root(root: str | os.PathLike, file_path: str | os.PathLike) -> PurePath | None:
    """Return ``file_path`` relative to ``root``, or None when it is not a descendant."""
    root_path = absolute_path(root)
    target = absolute_path(file_path)
    try:
        relative = target.relative_to(root_path)
    except ValueError:
        return None
    if not relative.parts:
        return None
    return relative


def strip_extension(name: str) -> str:
    # Dot-files lose their suffix too: ".md" becomes "".
    head, dot, suffix = name.rpartition(".")
    if not dot or not suffix:
        return name
    return head


def content_parts(relative: PurePath) -> list[str]:
    parts = list(relative.parts)
    parts[-1] = strip_extension(parts[-1])
    return parts


def default_content_dir() -> Path:
    return Path(os.path.abspath("./content"))

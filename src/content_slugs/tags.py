import re


def normalize_tag(tag: str) -> str:
    """Lowercase, trim, hyphenate whitespace and drop anything outside [a-z0-9-]."""
    value = tag.lower().strip()
    value = re.sub(r"\s+", "-", value)
    return re.sub(r"[^a-z0-9-]", "", value)

import re

from content_slugs.partition import ParseState


def normalize_slug(value: str) -> str:
    value = re.sub(r"-+", "-", value)
    value = re.sub(r"-*/-*", "/", value)
    return value.strip("-")


def assemble_slug(folder_structure: list[str], slug_parts: list[str]) -> str:
    prefix = "/".join(folder_structure)
    body = "-".join(slug_parts)
    if prefix and body:
        slug = f"{prefix}/{body}"
    else:
        slug = prefix or body
    return normalize_slug(slug)


def assemble_state(state: ParseState) -> str:
    return assemble_slug(state.folder_structure, state.slug_parts)

from content_slugs.assemble import assemble_slug, normalize_slug
from content_slugs.partition import partition_segments


def test_folders_before_date_are_kept() -> None:
    state = partition_segments(["deep-dives", "2023-08-10-some-text", "some-file"])
    assert state.found_date
    assert state.folder_structure == ["deep-dives"]
    assert state.slug_parts == ["some-text", "some-file"]


def test_date_at_root_flattens() -> None:
    state = partition_segments(["2023-08-10-deep-dives", "some-text", "some-file"])
    assert state.folder_structure == []
    assert state.slug_parts == ["deep-dives", "some-text", "some-file"]


def test_date_only_segment_contributes_nothing() -> None:
    state = partition_segments(["a", "2023-08-10", "index"])
    assert state.folder_structure == ["a"]
    assert state.slug_parts == []


def test_no_date_collapses_into_slug_parts() -> None:
    state = partition_segments(["guides", "python", "index"])
    assert not state.found_date
    assert state.folder_structure == []
    assert state.slug_parts == ["guides", "python"]


def test_later_date_segments_are_classified_too() -> None:
    state = partition_segments(["js", "2025-01-23-backoff", "2025-01-23", "simple-retry"])
    assert state.folder_structure == ["js"]
    assert state.slug_parts == ["backoff", "simple-retry"]


def test_dates_disabled() -> None:
    state = partition_segments(["notes", "2023-08-10-idea"], dates_enabled=False)
    assert state.slug_parts == ["notes", "2023-08-10-idea"]


def test_assemble_slug() -> None:
    assert assemble_slug(["a", "b"], ["c", "d"]) == "a/b/c-d"
    assert assemble_slug([], ["c", "d"]) == "c-d"
    assert assemble_slug(["a"], []) == "a"
    assert assemble_slug([], []) == ""


def test_assemble_drops_stray_separators() -> None:
    assert assemble_slug(["a"], ["", "b", ""]) == "a/b"
    assert assemble_slug([], ["-x-", "--y"]) == "x-y"


def test_normalize_slug_is_idempotent() -> None:
    for raw in ["-a--b-/-c-", "a/-b", "--", "a-/b--c", "plain"]:
        once = normalize_slug(raw)
        assert normalize_slug(once) == once
    assert normalize_slug("-a--b-/-c-") == "a-b/c"


def test_several_folders_before_date_keep_their_order() -> None:
    state = partition_segments(["a", "b", "c", "2023-08-10-x", "y"])
    assert state.folder_structure == ["a", "b", "c"]
    assert assemble_slug(state.folder_structure, state.slug_parts) == "a/b/c/x-y"

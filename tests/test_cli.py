import pytest

from content_slugs.cli import main


def test_slug_command(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(
        [
            "--content-dir",
            "/srv/site/content",
            "slug",
            "/srv/site/content/posts/programming/2023-03-01-js-pub-sub.md",
            "/srv/site/content/posts/2023-08-10-some-slug/index.md",
        ]
    )
    assert code == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "/srv/site/content/posts/programming/2023-03-01-js-pub-sub.md\tprogramming/js-pub-sub",
        "/srv/site/content/posts/2023-08-10-some-slug/index.md\tsome-slug",
    ]


def test_slug_command_readme_collection(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(
        [
            "--content-dir",
            "/srv/site/content",
            "slug",
            "--collection",
            "readme",
            "/srv/site/content/projects/inker/README.md",
        ]
    )
    assert code == 0
    assert capsys.readouterr().out.strip().endswith("\tinker")


def test_slug_command_fails_outside_root(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--content-dir", "/srv/site/content", "slug", "/tmp/elsewhere.md"])
    assert code == 1
    assert capsys.readouterr().out == ""


def test_date_and_tag_commands(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--content-dir", "/srv/site/content", "date", "/srv/site/content/posts/2023-08-10/index.md"]) == 0
    assert main(["tag", "System Design"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "/srv/site/content/posts/2023-08-10/index.md\t2023-08-10",
        "System Design\tsystem-design",
    ]

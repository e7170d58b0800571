"""Tests for genreadme.github."""

from __future__ import annotations

import pytest

from genreadme.github import parse_repository, repository_url


@pytest.mark.parametrize(
    "value",
    [
        "https://github.com/octo/widget",
        "https://github.com/octo/widget.git",
        "git+https://github.com/octo/widget.git",
        "git://github.com/octo/widget.git",
        "git+ssh://git@github.com/octo/widget.git",
        "git@github.com:octo/widget.git",
        "github.com/octo/widget",
        "github:octo/widget",
        "octo/widget",
        {"type": "git", "url": "https://github.com/octo/widget.git"},
    ],
)
def test_parse_repository_accepts_common_forms(value) -> None:
    gh = parse_repository(value)

    assert gh is not None
    assert (gh.user, gh.repo) == ("octo", "widget")
    assert gh.branch == "master"


def test_parse_repository_reads_branch() -> None:
    assert parse_repository("https://github.com/octo/widget/tree/dev").branch == "dev"
    assert parse_repository("octo/widget#next").branch == "next"


def test_repository_urls() -> None:
    gh = parse_repository("octo/widget")

    assert gh.https_url == "https://github.com/octo/widget"
    assert gh.travis_url == "https://travis-ci.org/octo/widget"
    assert gh.tarball_url == "https://api.github.com/repos/octo/widget/tarball/master"


@pytest.mark.parametrize(
    "value",
    [None, "", 42, {"url": None}, "https://gitlab.com/octo/widget", "not a url", "github.com/octo"],
)
def test_parse_repository_returns_none_for_unrecognised_values(value) -> None:
    assert parse_repository(value) is None


def test_repository_url_strips_whitespace() -> None:
    assert repository_url({"url": " https://github.com/a/b "}) == "https://github.com/a/b"

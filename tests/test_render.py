import pytest

from vault_secret_search.render import HEADER, filter_paths, render

SECRETS = ["a", "b/c", "b/d/e"]


@pytest.mark.parametrize(
    "search, expected",
    [
        ("", ["a", "b/c", "b/d/e"]),
        ("d", ["b/d/e"]),
        ("B/", ["b/c", "b/d/e"]),
        ("missing", []),
    ],
)
def test_filter_paths(search, expected):
    assert filter_paths(SECRETS, search) == expected


def test_filter_paths_ignores_case_of_secret_names():
    assert filter_paths(["Prod/DB", "dev/api"], "db") == ["Prod/DB"]


def test_render_prefixes_mount():
    assert list(render("secret", ["a", "b/d/e"])) == [HEADER, "secret/a", "secret/b/d/e"]


def test_render_nothing_found():
    assert list(render("kv", [])) == [HEADER]

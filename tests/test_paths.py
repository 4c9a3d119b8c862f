"""Tests for path resolution and context scoping."""

import os

import pytest

from boilerplater.paths import PathResolver, clean_name, format_slashes


class TestPathResolver:
    def test_resolve_string(self, tmp_path):
        resolver = PathResolver(str(tmp_path))
        assert resolver.resolve("a.txt") == os.path.join(str(tmp_path), "a.txt")

    def test_resolve_parts(self, tmp_path):
        resolver = PathResolver(str(tmp_path))
        assert resolver.resolve(["src", "ui", "a.txt"]) == os.path.join(
            str(tmp_path), "src", "ui", "a.txt"
        )

    def test_explicit_context(self, tmp_path):
        resolver = PathResolver(str(tmp_path))
        assert resolver.resolve("a", context="/other") == os.path.join("/other", "a")
        assert resolver.context == str(tmp_path)

    def test_defaults_to_cwd(self):
        assert PathResolver().context == os.getcwd()

    def test_scoped_restores(self, tmp_path):
        resolver = PathResolver(str(tmp_path))
        with resolver.scoped("/templates") as context:
            assert context == "/templates"
            assert resolver.resolve("x") == os.path.join("/templates", "x")
        assert resolver.context == str(tmp_path)

    def test_scoped_restores_after_error(self, tmp_path):
        resolver = PathResolver(str(tmp_path))
        with pytest.raises(RuntimeError):
            with resolver.scoped("/templates"):
                raise RuntimeError("boom")
        assert resolver.context == str(tmp_path)

    def test_scoped_none_keeps_context(self, tmp_path):
        resolver = PathResolver(str(tmp_path))
        with resolver.scoped(None) as context:
            assert context == str(tmp_path)


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/a/b/_partial.scss", "partial.scss"),
        ("C:\\work\\__init__", "init__"),
        ("name", "name"),
    ],
)
def test_clean_name(path, expected):
    assert clean_name(path) == expected


def test_format_slashes():
    assert format_slashes("C:\\a\\b") == "C:/a/b"

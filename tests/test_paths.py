"""Tests for request path sanitizing."""

import sys
from pathlib import Path

import pytest

from elm_reactor.core.paths import resolve, sanitize


class TestSanitize:
    """Tests for sanitize()."""

    def test__leading_slash__removed(self) -> None:
        assert sanitize("/src/Main.elm") == "src/Main.elm"

    def test__empty_and_dot_segments__dropped(self) -> None:
        assert sanitize("//src/./Main.elm") == "src/Main.elm"

    def test__root__is_empty(self) -> None:
        assert sanitize("") == ""
        assert sanitize("/") == ""

    @pytest.mark.parametrize("raw", ["../secret", "src/../../secret", "a/.."])
    def test__parent_segments__rejected(self, raw: str) -> None:
        assert sanitize(raw) is None

    def test__dots_inside_names__allowed(self) -> None:
        assert sanitize("archive..tar") == "archive..tar"

    @pytest.mark.parametrize("raw", ["a\x00b", "..\\secret"])
    def test__nul_and_backslash__rejected(self, raw: str) -> None:
        assert sanitize(raw) is None


class TestResolve:
    """Tests for resolve()."""

    def test__inside_root__resolved(self, tmp_path: Path) -> None:
        (tmp_path / "src").mkdir()

        assert resolve(tmp_path, sanitize("src")) == (tmp_path / "src").resolve()

    def test__root_itself(self, tmp_path: Path) -> None:
        assert resolve(tmp_path, sanitize("")) == tmp_path.resolve()

    @pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges on Windows")
    def test__symlink_outside_root__rejected(self, tmp_path: Path) -> None:
        root = tmp_path / "root"
        root.mkdir()
        secret = tmp_path / "secret.txt"
        secret.write_text("secret")
        (root / "leak.txt").symlink_to(secret)

        assert resolve(root, sanitize("leak.txt")) is None

"""Tests for countinggame.core.assets – asset lookup order."""

from __future__ import annotations

from pathlib import Path

import pytest

from countinggame.core.assets import (
    ASSET_ROOT_ENV,
    SEARCH_BASES,
    AssetResolver,
    default_asset_root,
)


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x")
    return path


@pytest.fixture()
def resolver(tmp_path: Path) -> AssetResolver:
    return AssetResolver(tmp_path)


# ---------------------------------------------------------------------------
# candidates
# ---------------------------------------------------------------------------

class TestCandidates:
    def test_order_most_specific_first(self, tmp_path: Path, resolver: AssetResolver):
        assert resolver.candidates("1.png") == [
            tmp_path / "countinggame" / "resources" / "1.png",
            tmp_path / "countinggame" / "1.png",
            tmp_path / "resources" / "1.png",
            tmp_path / "1.png",
        ]

    def test_one_candidate_per_base(self, resolver: AssetResolver):
        assert len(resolver.candidates("7.mp3")) == len(SEARCH_BASES)


# ---------------------------------------------------------------------------
# resolve
# ---------------------------------------------------------------------------

class TestResolve:
    def test_finds_file_in_top_level_root(self, tmp_path: Path, resolver: AssetResolver):
        expected = _touch(tmp_path / "3.png")
        assert resolver.resolve("3.png") == expected

    def test_game_resources_beat_everything(self, tmp_path: Path, resolver: AssetResolver):
        expected = _touch(tmp_path / "countinggame" / "resources" / "1.mp3")
        _touch(tmp_path / "countinggame" / "1.mp3")
        _touch(tmp_path / "resources" / "1.mp3")
        _touch(tmp_path / "1.mp3")
        assert resolver.resolve("1.mp3") == expected

    def test_game_root_beats_generic_resources(self, tmp_path: Path, resolver: AssetResolver):
        expected = _touch(tmp_path / "countinggame" / "5.png")
        _touch(tmp_path / "resources" / "5.png")
        assert resolver.resolve("5.png") == expected

    def test_generic_resources_beat_root(self, tmp_path: Path, resolver: AssetResolver):
        expected = _touch(tmp_path / "resources" / "2.png")
        _touch(tmp_path / "2.png")
        assert resolver.resolve("2.png") == expected

    def test_missing_returns_none(self, resolver: AssetResolver):
        assert resolver.resolve("missing.png") is None

    def test_directory_is_not_a_match(self, tmp_path: Path, resolver: AssetResolver):
        (tmp_path / "resources" / "4.png").mkdir(parents=True)
        expected = _touch(tmp_path / "4.png")
        assert resolver.resolve("4.png") == expected

    def test_not_cached(self, tmp_path: Path, resolver: AssetResolver):
        assert resolver.resolve("6.png") is None
        expected = _touch(tmp_path / "6.png")
        assert resolver.resolve("6.png") == expected
        expected.unlink()
        assert resolver.resolve("6.png") is None

    def test_repeated_calls_agree(self, tmp_path: Path, resolver: AssetResolver):
        _touch(tmp_path / "countinggame" / "8.png")
        _touch(tmp_path / "8.png")
        assert resolver.resolve("8.png") == resolver.resolve("8.png")

    @pytest.mark.parametrize("name", ["", "../1.png", "resources/1.png"])
    def test_odd_names_return_none(self, tmp_path: Path, resolver: AssetResolver, name: str):
        _touch(tmp_path / "resources" / "1.png")
        assert resolver.resolve(name) is None


# ---------------------------------------------------------------------------
# default root
# ---------------------------------------------------------------------------

class TestDefaultRoot:
    def test_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(ASSET_ROOT_ENV, str(tmp_path))
        assert default_asset_root() == tmp_path
        assert AssetResolver().root == tmp_path

    def test_blank_env_is_ignored(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(ASSET_ROOT_ENV, "   ")
        assert (default_asset_root() / "countinggame" / "core" / "assets.py").is_file()

    def test_defaults_to_project_root(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv(ASSET_ROOT_ENV, raising=False)
        assert (default_asset_root() / "countinggame").is_dir()

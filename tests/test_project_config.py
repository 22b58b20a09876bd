from __future__ import annotations

import pytest

import project_config


@pytest.fixture(autouse=True)
def _fresh_config():
    project_config.reload()
    yield
    project_config.reload()


def test_reads_repository_config(monkeypatch):
    monkeypatch.delenv("SUDOKU_CONFIG", raising=False)
    assert project_config.get_section("generator.default_difficulty") == "medium"
    assert project_config.get_section("store.root") == "artifacts"


def test_missing_path_uses_default_or_raises(monkeypatch):
    monkeypatch.delenv("SUDOKU_CONFIG", raising=False)
    assert project_config.get_section("generator.nope", "fallback") == "fallback"
    with pytest.raises(KeyError):
        project_config.get_section("generator.nope")


def test_env_override_and_missing_file(tmp_path, monkeypatch):
    custom = tmp_path / "custom.toml"
    custom.write_text('[generator]\ndefault_difficulty = "expert"\n', "utf-8")
    monkeypatch.setenv("SUDOKU_CONFIG", str(custom))
    assert project_config.get_section("generator.default_difficulty") == "expert"

    project_config.reload()
    monkeypatch.setenv("SUDOKU_CONFIG", str(tmp_path / "absent.toml"))
    assert project_config.get_config() == {}


def test_resolve_path(tmp_path):
    assert project_config.resolve_path(tmp_path) == tmp_path
    assert project_config.resolve_path("logs") == project_config.project_root() / "logs"


def test_generator_option_profiles(tmp_path, monkeypatch):
    custom = tmp_path / "profiles.toml"
    custom.write_text(
        "[generator]\nstrict_uniqueness = false\n\n"
        "[generator.by_profile.curated]\nstrict_uniqueness = true\n",
        "utf-8",
    )
    monkeypatch.setenv("SUDOKU_CONFIG", str(custom))

    assert project_config.get_generator_option("strict_uniqueness") is False
    assert project_config.get_generator_option("strict_uniqueness", profile="curated") is True
    assert project_config.get_generator_option("strict_uniqueness", profile="unknown") is False
    assert project_config.get_generator_option("missing", profile="curated", default=7) == 7


def test_repository_defaults_to_non_strict(monkeypatch):
    monkeypatch.delenv("SUDOKU_CONFIG", raising=False)
    assert project_config.get_generator_option("strict_uniqueness", profile="default") is False
    assert project_config.get_generator_option("strict_uniqueness", profile="curated") is True

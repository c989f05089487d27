"""Tests for environment-driven configuration."""

from pathlib import Path

import pytest

from topic_search import config


class TestSettings:
    """Test typed setting accessors."""

    def test_defaults(self, monkeypatch):
        for name in ("TOPIC_SEARCH_LIMIT", "TOPIC_MIN_QUERY_LENGTH",
                     "TOPIC_SUGGESTION_COUNT", "TOPIC_CATALOG_PATH"):
            monkeypatch.delenv(name, raising=False)

        assert config.get_search_limit() == 8
        assert config.get_min_query_length() == 2
        assert config.get_suggestion_count() == 6
        assert config.get_catalog_path() == config.DEFAULT_CATALOG_PATH

    def test_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TOPIC_SEARCH_LIMIT", " 3 ")
        monkeypatch.setenv("TOPIC_SUGGESTION_COUNT", "0")
        monkeypatch.setenv("TOPIC_CATALOG_PATH", str(tmp_path / "topics.json"))

        assert config.get_search_limit() == 3
        assert config.get_suggestion_count() == 0
        assert config.get_catalog_path() == Path(tmp_path / "topics.json")

    def test_blank_value_uses_default(self, monkeypatch):
        monkeypatch.setenv("TOPIC_MIN_QUERY_LENGTH", "")
        assert config.get_min_query_length() == 2

    def test_not_an_integer(self, monkeypatch):
        monkeypatch.setenv("TOPIC_SEARCH_LIMIT", "eight")
        with pytest.raises(ValueError, match="TOPIC_SEARCH_LIMIT"):
            config.get_search_limit()

    def test_negative(self, monkeypatch):
        monkeypatch.setenv("TOPIC_MIN_QUERY_LENGTH", "-1")
        with pytest.raises(ValueError, match="must not be negative"):
            config.get_min_query_length()


class TestPaths:
    """Test project paths."""

    def test_bundled_catalog_exists(self):
        assert config.DEFAULT_CATALOG_PATH.exists()
        assert config.DEFAULT_CATALOG_PATH.parent == config.DATA_DIR

    def test_env_file_is_loaded(self, monkeypatch, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("TOPIC_SEARCH_LIMIT=4\n", encoding="utf-8")
        # Record the original value so teardown restores it
        monkeypatch.setenv("TOPIC_SEARCH_LIMIT", "0")
        monkeypatch.delenv("TOPIC_SEARCH_LIMIT")
        monkeypatch.setattr(config, "PROJECT_ROOT", tmp_path)

        assert config.load_env() is True
        assert config.get_search_limit() == 4

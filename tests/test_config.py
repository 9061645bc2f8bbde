"""
Tests for configuration loading.
"""

import json

import pytest

from open_notify.config import DEFAULT_CONFIG, Config


class TestConfig:
    """Tests for Config."""

    def test_defaults(self):
        config = Config()

        assert config.base_url == "http://api.open-notify.org"
        assert config.timeout == DEFAULT_CONFIG["timeout"]
        assert config.strict_people_count is True
        assert config.endpoint_url("iss-pass") == "http://api.open-notify.org/iss-pass.json"

    def test_load_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"base_url": "https://mirror.test/", "timeout": 3}))

        config = Config(str(path))

        assert config.base_url == "https://mirror.test"
        assert config.timeout == 3.0
        assert config.user_agent == DEFAULT_CONFIG["user_agent"]

    def test_missing_file_uses_defaults(self, tmp_path):
        config = Config(str(tmp_path / "absent.json"))

        assert config.base_url == DEFAULT_CONFIG["base_url"]

    def test_invalid_file_uses_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")

        config = Config(str(path))

        assert config.base_url == DEFAULT_CONFIG["base_url"]

    def test_non_object_file_uses_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")

        assert Config(str(path)).timeout == DEFAULT_CONFIG["timeout"]

    def test_overrides_win_and_none_is_ignored(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"timeout": 3}))

        config = Config(str(path), timeout=None, base_url="http://localhost:8080")

        assert config.timeout == 3.0
        assert config.base_url == "http://localhost:8080"

    @pytest.mark.parametrize("value", ["false", 0, None])
    def test_non_boolean_strict_falls_back(self, tmp_path, value):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"strict_people_count": value}))

        assert Config(str(path)).strict_people_count is True

    def test_strict_false(self):
        assert Config(strict_people_count=False).strict_people_count is False

    def test_unknown_endpoint(self):
        config = Config()

        try:
            config.endpoint_url("iss-later")
        except KeyError as ex:
            assert "iss-later" in str(ex)
        else:
            raise AssertionError("expected KeyError")

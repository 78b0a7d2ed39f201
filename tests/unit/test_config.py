"""
Unit tests for configuration loading.
"""

import pytest
import yaml

from config import Settings, load_config, get_default_config_path, CONFIG_ENV_VAR


class TestSettings:
    """Tests for the Settings dataclass."""

    def test_defaults(self):
        settings = Settings()

        assert settings.default_metric == "euclidean"
        assert settings.minkowski_order == 3.0
        assert settings.log_level == "INFO"
        assert settings.log_file is None

    def test_round_trip_dict(self):
        settings = Settings(default_metric="minkowski", minkowski_order=4)
        assert Settings.from_dict(settings.to_dict()) == settings

    def test_unknown_key(self):
        with pytest.raises(TypeError):
            Settings.from_dict({"metric": "euclidean"})


class TestLoadConfig:
    """Tests for load_config."""

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump({"default_metric": "l1", "log_level": "DEBUG"}))

        settings = load_config(str(path))

        assert settings.default_metric == "l1"
        assert settings.log_level == "DEBUG"
        assert settings.minkowski_order == 3.0

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(str(tmp_path / "missing.yaml")) == Settings()

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_config(str(path)) == Settings()

    def test_packaged_default(self, monkeypatch, tmp_path):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        monkeypatch.chdir(tmp_path)

        path = get_default_config_path()

        assert path.name == "default_config.yaml"
        assert load_config() == Settings()

    def test_env_var_overrides_default_path(self, monkeypatch, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("default_metric: minkowski\nminkowski_order: 1.5\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

        settings = load_config()

        assert get_default_config_path() == path
        assert settings.default_metric == "minkowski"
        assert settings.minkowski_order == 1.5

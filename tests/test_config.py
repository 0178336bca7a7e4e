from pathlib import Path

from model_defaults.config import HOME_ENV_VAR, load_home_settings, resolve_config_path


def test_explicit_home_wins(tmp_path, monkeypatch):
    monkeypatch.setenv(HOME_ENV_VAR, str(tmp_path / "env"))
    settings = load_home_settings(tmp_path / "explicit")
    assert settings.home == tmp_path / "explicit"
    assert settings.config_path == tmp_path / "explicit" / "config.toml"


def test_env_home_used_when_no_argument(tmp_path, monkeypatch):
    monkeypatch.setenv(HOME_ENV_VAR, str(tmp_path / "env"))
    assert resolve_config_path() == tmp_path / "env" / "config.toml"


def test_default_home_expands_user(monkeypatch, tmp_path):
    monkeypatch.delenv(HOME_ENV_VAR, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert load_home_settings().home == Path(tmp_path) / ".model-defaults"

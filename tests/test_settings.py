import pytest
from pydantic import ValidationError

from typeunify.config.settings import Settings, load_settings


def test_defaults() -> None:
    settings = Settings()
    assert settings.max_steps == 1000
    assert settings.mathjax is False
    assert settings.log_profile == "default"


def test_environment(monkeypatch) -> None:
    monkeypatch.setenv("TYPEUNIFY_MAX_STEPS", "25")
    monkeypatch.setenv("TYPEUNIFY_LOG_PROFILE", "rich")
    settings = load_settings()
    assert settings.max_steps == 25
    assert settings.log_profile == "rich"


def test_overrides_win_and_none_is_ignored(monkeypatch) -> None:
    monkeypatch.setenv("TYPEUNIFY_MAX_STEPS", "25")
    assert load_settings(max_steps=3).max_steps == 3
    assert load_settings(max_steps=None).max_steps == 25


def test_dotenv_file(tmp_path) -> None:
    (tmp_path / ".env").write_text("TYPEUNIFY_MATHJAX=true\n")
    assert load_settings().mathjax is True


def test_rejects_non_positive_steps() -> None:
    with pytest.raises(ValidationError):
        load_settings(max_steps=0)

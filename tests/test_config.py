# tests/test_config.py
import os

from payment_optimizer.config import Settings, get_settings


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.delenv("PAYMENT_OPTIMIZER_POINTS_ID", raising=False)
    monkeypatch.delenv("PAYMENT_OPTIMIZER_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    try:
        assert get_settings(str(tmp_path / "absent.env")) == Settings()
    finally:
        get_settings.cache_clear()


def test_env_file_and_environment(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("PAYMENT_OPTIMIZER_POINTS_ID=BONUS\nPAYMENT_OPTIMIZER_LOG_LEVEL=debug\n", encoding="utf-8")
    monkeypatch.delenv("PAYMENT_OPTIMIZER_POINTS_ID", raising=False)
    monkeypatch.setenv("PAYMENT_OPTIMIZER_LOG_LEVEL", "error")
    get_settings.cache_clear()
    try:
        settings = get_settings(str(env_file))
    finally:
        get_settings.cache_clear()
        os.environ.pop("PAYMENT_OPTIMIZER_POINTS_ID", None)

    assert settings.points_method_id == "BONUS"
    # the real environment wins over the file
    assert settings.log_level == "ERROR"


def test_unknown_log_level_falls_back_to_default(monkeypatch, tmp_path):
    monkeypatch.setenv("PAYMENT_OPTIMIZER_LOG_LEVEL", "verbose")
    get_settings.cache_clear()
    try:
        assert get_settings(str(tmp_path / "absent.env")).log_level == "WARNING"
    finally:
        get_settings.cache_clear()


def test_env_file_in_working_directory(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("PAYMENT_OPTIMIZER_POINTS_ID=LOYALTY\n", encoding="utf-8")
    monkeypatch.delenv("PAYMENT_OPTIMIZER_POINTS_ID", raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    try:
        settings = get_settings()
    finally:
        get_settings.cache_clear()
        os.environ.pop("PAYMENT_OPTIMIZER_POINTS_ID", None)

    assert settings.points_method_id == "LOYALTY"

"""Tests for ffgraph settings loading."""

from ffgraph.config import Settings, clear_settings_cache, get_settings


class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.safe_logging is True

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("FFGRAPH_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("FFGRAPH_SAFE_LOGGING", "0")

        settings = Settings()

        assert settings.log_level == "DEBUG"
        assert settings.safe_logging is False

    def test_ignores_unprefixed_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert Settings().log_level == "INFO"

    def test_reads_env_file(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("FFGRAPH_LOG_LEVEL=WARNING\n")
        monkeypatch.chdir(tmp_path)

        assert Settings().log_level == "WARNING"

    def test_ignores_unknown_prefixed_keys(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("FFGRAPH_STRICT_VALIDATION=true\n")
        monkeypatch.chdir(tmp_path)

        assert not hasattr(Settings(), "strict_validation")


class TestSettingsCache:
    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_clear_forces_reload(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("FFGRAPH_LOG_LEVEL", "ERROR")

        assert get_settings() is first
        clear_settings_cache()
        assert get_settings().log_level == "ERROR"

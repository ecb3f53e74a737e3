"""Tests for configuration loading."""

from bookshelf.config import Settings


class TestSettingsDefaults:
    def test_defaults(self) -> None:
        settings = Settings()
        assert settings.host == "localhost"
        assert settings.port == 9000
        assert settings.cors_origins == ["*"]
        assert settings.log_level == "INFO"
        assert settings.reload is False


class TestSettingsFromEnv:
    def test_prefixed_environment_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("BOOKSHELF_PORT", "8080")
        monkeypatch.setenv("BOOKSHELF_HOST", "0.0.0.0")
        monkeypatch.setenv("BOOKSHELF_CORS_ORIGINS", '["http://a.test", "http://b.test"]')
        settings = Settings()
        assert settings.port == 8080
        assert settings.host == "0.0.0.0"
        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_unprefixed_variables_are_ignored(self, monkeypatch) -> None:
        monkeypatch.setenv("PORT", "1234")
        assert Settings().port == 9000

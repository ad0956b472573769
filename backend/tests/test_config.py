"""Settings tests."""

from biztime.core.config import Settings


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.APP_NAME == "biztime"
        assert settings.APP_DATABASE_DSN.startswith("sqlite")
        assert settings.DEBUG is False

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("APP_DATABASE_DSN", "postgresql://localhost/biztime_test")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        settings = Settings(_env_file=None)
        assert settings.APP_DATABASE_DSN == "postgresql://localhost/biztime_test"
        assert settings.LOG_LEVEL == "DEBUG"

    def test_cors_origins(self):
        settings = Settings(_env_file=None, CORS_ORIGINS=" http://a.test, ,http://b.test ")
        assert settings.cors_origins == ["http://a.test", "http://b.test"]

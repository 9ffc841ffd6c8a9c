"""
Tests for environment-driven settings.
"""
from shorturl_app.config import Settings


class TestSettings:

    def test_default_port(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)  # no stray .env
        monkeypatch.delenv("PORT", raising=False)
        assert Settings().port == 3000

    def test_port_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("PORT", "8080")
        assert Settings().port == 8080

    def test_resolver_settings_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("RESOLVER_BACKEND", "static")
        monkeypatch.setenv("RESOLVER_TIMEOUT", "1.5")
        monkeypatch.setenv("RESOLVER_STATIC_HOSTS", '["a.example.com", "b.example.com"]')

        settings = Settings()
        assert settings.resolver_backend == "static"
        assert settings.resolver_timeout == 1.5
        assert settings.resolver_static_hosts == ["a.example.com", "b.example.com"]

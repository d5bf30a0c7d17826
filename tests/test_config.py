from core.config import Settings


def test_defaults(monkeypatch):
    for var in ("SIGNALING_SERVER_URL", "CORS_ORIGINS", "PORT", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    settings = Settings.from_env()
    assert settings.SIGNALING_SERVER_URL == "http://localhost:4000"
    assert settings.CORS_ORIGINS == ["http://localhost:3000", "http://localhost:3001"]
    assert settings.PORT == 8080


def test_from_env(monkeypatch):
    monkeypatch.setenv("SIGNALING_SERVER_URL", "https://signal.example.com")
    monkeypatch.setenv("CORS_ORIGINS", "https://app.example.com, ,https://admin.example.com")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = Settings.from_env()
    assert settings.SIGNALING_SERVER_URL == "https://signal.example.com"
    assert settings.CORS_ORIGINS == ["https://app.example.com", "https://admin.example.com"]
    assert settings.PORT == 9000
    assert settings.LOG_LEVEL == "DEBUG"

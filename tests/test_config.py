from keyskeeper.config import Settings


def test_defaults_without_key(monkeypatch):
    monkeypatch.delenv("RESEND_API_KEY", raising=False)

    s = Settings(_env_file=None)

    assert s.resend_api_key == ""
    assert s.email_timeout_seconds == 10.0
    assert s.notification_recipient == "admin@keyskeeper.co.nz"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("RESEND_API_KEY", "re_live_abc")
    monkeypatch.setenv("EMAIL_TIMEOUT_SECONDS", "3.5")
    monkeypatch.setenv("CORS_ORIGINS", '["https://keyskeeper.co.nz"]')

    s = Settings(_env_file=None)

    assert s.resend_api_key == "re_live_abc"
    assert s.email_timeout_seconds == 3.5
    assert s.cors_origins == ["https://keyskeeper.co.nz"]

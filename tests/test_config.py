from app.core.config import Settings


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("RESEND_API_KEY", "re_from_env")
    monkeypatch.setenv("ADMIN_EMAIL", "owner@acme.com")
    monkeypatch.setenv("BUSINESS_NAME", "Acme")
    monkeypatch.setenv("BRAND_COLOR", "#123456")

    settings = Settings(_env_file=None)

    assert settings.resend_api_key == "re_from_env"
    assert settings.email_enabled
    assert settings.admin_recipients == ["owner@acme.com"]
    assert settings.brand_color == "#123456"
    assert settings.effective_mail_from == "Acme <onboarding@resend.dev>"


def test_defaults_without_environment(monkeypatch):
    for name in ("RESEND_API_KEY", "ADMIN_EMAIL", "MAIL_FROM", "BUSINESS_NAME", "RESEND_API_URL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert not settings.email_enabled
    assert settings.admin_recipients == []
    assert settings.resend_api_url == "https://api.resend.com/emails"
    assert settings.effective_mail_from == "Website <onboarding@resend.dev>"


def test_admin_recipients_split_on_commas():
    settings = Settings(_env_file=None, admin_email=" a@acme.com ,, b@acme.com ")

    assert settings.admin_recipients == ["a@acme.com", "b@acme.com"]

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import List, Optional

RESEND_API_URL = "https://api.resend.com/emails"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    # Resend credentials - when missing, submissions are only logged
    resend_api_key: Optional[str] = Field(default=None, alias="RESEND_API_KEY")
    resend_api_url: str = Field(default=RESEND_API_URL, alias="RESEND_API_URL")

    # Per-site branding (replaces the template placeholders of the landing page)
    business_name: str = Field(default="Website", alias="BUSINESS_NAME")
    admin_email: Optional[str] = Field(default=None, alias="ADMIN_EMAIL")
    brand_color: str = Field(default="#1d4ed8", alias="BRAND_COLOR")
    mail_from: Optional[str] = Field(default=None, alias="MAIL_FROM")

    # CORS settings
    allowed_origins: list[str] = Field(default=["*"], alias="ALLOWED_ORIGINS")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @property
    def email_enabled(self) -> bool:
        """True when a non-blank Resend API key is configured"""
        return bool(self.resend_api_key and self.resend_api_key.strip())

    @property
    def admin_recipients(self) -> List[str]:
        """ADMIN_EMAIL split on commas, blanks dropped"""
        if not self.admin_email:
            return []
        return [addr.strip() for addr in self.admin_email.split(",") if addr.strip()]

    @property
    def effective_mail_from(self) -> str:
        """Sender address, defaulting to Resend's shared onboarding domain"""
        return self.mail_from or f"{self.business_name} <onboarding@resend.dev>"


@lru_cache
def get_settings():
    return Settings()

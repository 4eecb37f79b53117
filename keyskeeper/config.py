from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Email (Resend)
    resend_api_key: str = Field(default="", description="Resend API key")
    resend_base_url: str = Field(
        default="https://api.resend.com",
        description="Resend API base URL",
    )
    email_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for a single Resend send call",
    )

    # Addresses
    notification_recipient: str = Field(
        default="admin@keyskeeper.co.nz",
        description="Business inbox that receives every enquiry",
    )
    appraisal_sender: str = Field(default="Keyskeeper <noreply@keyskeeper.co.nz>")
    viewing_sender: str = Field(default="Keyskeeper Viewings <noreply@keyskeeper.co.nz>")
    maintenance_sender: str = Field(default="Keyskeeper Maintenance <noreply@keyskeeper.co.nz>")

    # Web
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://127.0.0.1:3000"],
        description="Origins allowed to call the API (Next.js frontend)",
    )
    log_level: str = Field(default="INFO", description="Loguru sink level")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "frozen": True}


settings = Settings()

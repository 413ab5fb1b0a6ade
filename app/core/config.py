"""
Application configuration.
All settings are loaded from environment variables (or .env).
Every field has a default: the simulator must answer with no environment set.
"""
from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """

    # ===========================================
    # APPLICATION
    # ===========================================
    app_env: str = "local"
    app_title: str = "Paywall Origin Simulator"

    # ===========================================
    # PAYWALL CONTRACT
    # ===========================================
    # Article id placed in the Paywall locator emitted by the content origin.
    paywall_article_id: str = "premium-kittens"
    # Path of the decision endpoint the locator points back at.
    paywall_path: str = "/paywall"

    # ===========================================
    # LOGGING
    # ===========================================
    log_level: str = "INFO"
    request_id_header: str = "X-Request-Id"
    log_file: str | None = None
    log_max_bytes: int = 10_000_000
    log_backup_count: int = 5

    @field_validator("paywall_path")
    @classmethod
    def validate_paywall_path(cls, v: str) -> str:
        """Locator is built as origin + path, so the path must be absolute."""
        v = v.strip().rstrip("/")
        if not v.startswith("/"):
            raise ValueError("paywall_path must start with '/' and not be the root")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper()

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


settings = Settings()

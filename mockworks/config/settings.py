from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    accepted_formats: list[str] = ["4.0", "3.1"]
    freshness_months: int = 1

    recognizer: str = "json"
    cryptographer: str = "hmac"
    signing_algorithm: str = "sha256"
    signing_subject: str = "mockworks"
    signing_secret: str = ""

    sender: str = "outbox"
    sender_url: str = ""
    sender_timeout_seconds: int = 30
    outbox_dir: str = "/app/outbox"
    inbox_dir: str = "/app/inbox"

    thing_service: str = "memory"
    thing_service_url: str = ""
    thing_service_timeout_seconds: int = 30

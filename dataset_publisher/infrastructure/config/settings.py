"""Application settings."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # Dataset storage: "memory" for local runs and tests, "s3" for deployments
    storage_backend: Literal["memory", "s3"] = "memory"
    aws_region: str = "eu-west-2"
    aws_s3_bucket: str | None = None
    dataset_key_prefix: str = "datasets"
    topics_key: str = "topics/topics.json"

    # External catalog receiving best-effort metadata syncs (disabled when unset)
    ckan_url: str | None = None
    ckan_api_key: str | None = None

    # Legacy internal API
    legacy_host: str | None = None
    legacy_api_key: str | None = None

    http_timeout_seconds: float = 10.0

    sentry_dsn: str | None = None
    sentry_environment: str = "development"
    log_level: str = "INFO"
    log_json: bool = False
    prometheus_enabled: bool = False
    prometheus_port: int = 9300

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="",
        # Allow extra fields to be loaded but not validated
        extra="ignore",
    )

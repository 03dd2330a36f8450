"""
Configuration and settings for the blog backend.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed settings for the FastAPI service."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    api_prefix: str = Field(default="/api")
    log_level: str = Field(default="INFO", env="LOG_LEVEL")

    # Blog post store (any SQLAlchemy URL)
    database_url: Optional[str] = Field(default=None, env="DATABASE_URL")
    blog_page_size: int = Field(default=5, ge=1, env="BLOG_PAGE_SIZE")

    # S3-compatible storage for blog images
    s3_bucket: Optional[str] = Field(default=None, env="S3_BUCKET")
    aws_region: Optional[str] = Field(default=None, env="AWS_REGION")
    s3_endpoint: Optional[str] = Field(default=None, env="S3_ENDPOINT")
    aws_access_key_id: Optional[str] = Field(
        default=None, env="AWS_ACCESS_KEY_ID"
    )
    aws_secret_access_key: Optional[str] = Field(
        default=None, env="AWS_SECRET_ACCESS_KEY"
    )
    blog_image_prefix: str = Field(default="blog_images", env="BLOG_IMAGE_PREFIX")

    # Google Docs API (OAuth refresh-token grant)
    google_client_id: Optional[str] = Field(default=None, env="GOOGLE_CLIENT_ID")
    google_client_secret: Optional[str] = Field(
        default=None, env="GOOGLE_CLIENT_SECRET"
    )
    google_refresh_token: Optional[str] = Field(
        default=None, env="GOOGLE_REFRESH_TOKEN"
    )

    # Image side-loading
    media_fetch_timeout: float = Field(default=30.0, gt=0, env="MEDIA_FETCH_TIMEOUT")
    media_workers: int = Field(default=4, ge=1, env="MEDIA_WORKERS")

    # Development toggles
    use_in_memory_backends: bool = Field(
        default=False, env="USE_IN_MEMORY_BACKENDS"
    )

    @property
    def google_docs_configured(self) -> bool:
        return bool(
            self.google_client_id
            and self.google_client_secret
            and self.google_refresh_token
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()

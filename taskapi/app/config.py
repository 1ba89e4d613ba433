from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # HTTP listener (the reverse proxy in front of us forwards to this port)
    app_host: str = Field("0.0.0.0", validation_alias="APP_HOST")
    app_port: int = Field(3000, validation_alias="PORT")
    root_message: str = Field("Backend is running!", validation_alias="ROOT_MESSAGE")

    # Browser frontend is served from another origin
    cors_allow_origins: List[str] = Field(
        default_factory=lambda: ["*"],
        validation_alias="CORS_ALLOW_ORIGINS",
    )

    # === Task store ===
    task_repo_backend: str = Field("file", validation_alias="TASK_REPO_BACKEND")  # file | sql | s3
    workspace_root: str = Field("./data", validation_alias="WORKSPACE_ROOT")
    database_url: str = Field("sqlite:///./taskapi.db", validation_alias="DATABASE_URL")

    # Cloudflare R2 / S3 credentials
    r2_endpoint: str = Field("", validation_alias="R2_ENDPOINT")
    r2_access_key: str = Field("", validation_alias="R2_ACCESS_KEY")
    r2_secret_key: str = Field("", validation_alias="R2_SECRET_KEY")
    r2_bucket_name: str = Field("taskapi-tasks", validation_alias="R2_BUCKET_NAME")

    log_level: str = Field("INFO", validation_alias="APP_LOG_LEVEL")


@lru_cache()
def get_settings() -> Settings:
    return Settings()

from pydantic_settings import BaseSettings
from typing import List, Optional, Union
from pydantic import field_validator
import json


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # API Settings
    PROJECT_NAME: str = "Job Tracker API"
    VERSION: str = "1.0.0"

    # Server Settings
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # MongoDB Settings
    # Required at startup, but optional here so the settings object can be
    # built (and the error reported) without it
    MONGODB_URI: Optional[str] = None
    MONGODB_DB: str = "jobs"
    MONGODB_COLLECTION: str = "jobs"
    MONGODB_TIMEOUT_MS: int = 5000

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = False

    # CORS Settings - can be set as JSON string or comma-separated in .env
    CORS_ORIGINS: Union[List[str], str] = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: Union[List[str], str] = [
        "GET", "POST", "HEAD", "PUT", "DELETE", "PATCH", "OPTIONS",
    ]
    CORS_ALLOW_HEADERS: Union[List[str], str] = [
        "Origin",
        "Content-Type",
        "Accept",
        "Content-Length",
        "Accept-Language",
        "Accept-Encoding",
        "Connection",
        "Access-Control-Allow-Origin",
    ]

    @field_validator("CORS_ORIGINS", "CORS_ALLOW_METHODS", "CORS_ALLOW_HEADERS", mode="before")
    @classmethod
    def parse_list(cls, v: Union[List[str], str]) -> List[str]:
        """Parse list settings from JSON string or comma-separated list"""
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                # If not valid JSON, split by comma
                return [item.strip() for item in v.split(",") if item.strip()]
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()

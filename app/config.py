"""
Configuration management for DevConnector API
Loads settings from environment variables
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
import json


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Database
    DATABASE_URL: str

    # Security
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_SECONDS: int = 360000  # 100 hours
    BCRYPT_ROUNDS: int = 10

    # API Configuration
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "DevConnector API"
    VERSION: str = "1.0.0"

    # CORS
    BACKEND_CORS_ORIGINS: str = '["http://localhost:3000"]'

    # GitHub repository lookup
    GITHUB_API_BASE: str = "https://api.github.com"
    GITHUB_CLIENT_ID: str = ""
    GITHUB_CLIENT_SECRET: str = ""
    GITHUB_USER_AGENT: str = "DevConnector-API/1.0"
    GITHUB_REPOS_PER_PAGE: int = 5
    GITHUB_TIMEOUT: int = 10

    # Application
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="allow"
    )

    @property
    def cors_origins(self) -> List[str]:
        """Parse CORS origins from JSON string"""
        try:
            return json.loads(self.BACKEND_CORS_ORIGINS)
        except ValueError:
            return ["http://localhost:3000"]


# Global settings instance
settings = Settings()

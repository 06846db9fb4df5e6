from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DATABASE_URL: str = "sqlite:///./movietheater.db"
    SQL_ECHO: bool = False

    BACKEND_CORS_ORIGINS: List[str] = []

    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # bcrypt cost factor for account passwords
    PASSWORD_HASH_ROUNDS: int = 12


settings = Settings()

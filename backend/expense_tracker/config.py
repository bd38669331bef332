from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DATABASE_URL: str = "sqlite:///./expenses.db"
    LOG_LEVEL: str = "INFO"
    DEFAULT_BANK_CODE: str = "revolut"
    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:3000"]

settings = Settings()

# app/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    APP_NAME: str = "Airplanes"
    ENV: str = "dev"

    # DB
    DATABASE_URL: str = Field(default="sqlite:///./airplanes.db")  # or mysql+pymysql://...

    # Signs the session cookie (flashes + CSRF token)
    SECRET_KEY: str = "change-me"

    LOG_LEVEL: str = "INFO"

    # Seed loader
    SEED_COUNT: int = 20

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,  # allow DATABASE_URL or database_url, etc.
        extra="ignore",
    )


settings = Settings()

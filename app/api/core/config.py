import os
from pathlib import Path

from decouple import Config, RepositoryEnv
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = next(p for p in Path(__file__).resolve().parents if (p / "main.py").exists())

# Determine which env file to load
env_file = os.getenv("ENV_FILE", ".env")
env_path = PROJECT_ROOT / env_file

# Only use RepositoryEnv if the env file exists
if env_path.exists():
    config = Config(RepositoryEnv(env_path))
else:
    # fallback: read directly from os.environ using decouple's AutoConfig
    from decouple import AutoConfig

    config = AutoConfig(search_path=None)


class Settings(BaseSettings):
    # App general
    DEBUG: bool = config("DEBUG", default=False, cast=bool)
    APP_NAME: str = config("APP_NAME", default="Portfolio")
    APP_VERSION: str = config("APP_VERSION", default="1.0.0")
    PORT: int = config("PORT", default=5000, cast=int)
    LOG_LEVEL: str = config("LOG_LEVEL", default="INFO")

    # CORS
    FRONTEND_URL: str = config("FRONTEND_URL", default="http://127.0.0.1:5500")

    # Database
    DATABASE_URL: str = config("DATABASE_URL", default="sqlite+aiosqlite:///./portfolio.db")

    # Contact notification email
    EMAIL_USER: str = config("EMAIL_USER", default="")
    EMAIL_PASS: str = config("EMAIL_PASS", default="")
    NOTIFY_EMAIL: str = config("NOTIFY_EMAIL", default="")
    SMTP_SERVER: str = config("SMTP_SERVER", default="smtp.gmail.com")
    SMTP_PORT: int = config("SMTP_PORT", default=587, cast=int)
    SMTP_TIMEOUT: float = config("SMTP_TIMEOUT", default=10, cast=float)

    @property
    def OPERATOR_EMAIL(self) -> str:
        return self.NOTIFY_EMAIL or self.EMAIL_USER

    model_config = SettingsConfigDict(extra="allow")


settings = Settings()

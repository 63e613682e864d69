# yellowpages/settings.py
import logging
import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGED_ROSTER = Path(__file__).resolve().parent / "data" / "contacts.json"


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="Yellow Pages")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="INFO")

    # dev server
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8000)

    # roster
    DATA_PATH: Path = Field(default=PACKAGED_ROSTER)
    DEFAULT_LIMIT: int | None = None

    # read root-level .env.dev
    model_config = SettingsConfigDict(
        env_file=".env.dev",
        extra="ignore",
    )

    @property
    def app_name(self) -> str:
        return self.APP_NAME


settings = Settings()


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach one stream handler to the package logger (once) and set its level."""
    logger = logging.getLogger("yellowpages")
    if not logger.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("%(asctime)s %(levelname)s: %(message)s"))
        logger.addHandler(h)
    logger.setLevel((level or settings.LOG_LEVEL).upper())
    return logger

# core/config.py
from __future__ import annotations
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Published Google Sheet (File -> Share -> Publish to web -> CSV)
    CSV_URL: Optional[str] = None
    FETCH_TIMEOUT: float = 10.0
    # Display
    CURRENCY_SYMBOL: str = "฿"
    # Misc
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"  # optional
        env_file_encoding = "utf-8"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()

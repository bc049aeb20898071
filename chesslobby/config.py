"""Application configuration, read from the environment (and .env)."""
import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent / ".env")


@lru_cache
def get_config():
    return type("Config", (), {
        "database_url": os.environ.get("DATABASE_URL", "sqlite:///./chesslobby.db"),
        "auth_header": os.environ.get("AUTH_HEADER", "x-authentication").lower(),
        "allowed_origins": os.environ.get("ALLOWED_ORIGINS", "*").split(","),
        "log_level": os.environ.get("LOG_LEVEL", "INFO").upper(),
    })()

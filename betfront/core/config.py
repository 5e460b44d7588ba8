"""Frontend configuration loaded from environment and .env file."""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings


def find_project_root() -> Path:
    """Return the nearest ancestor directory that contains a .env file.

    Starts at the directory of this file and walks up to the filesystem root.
    Falls back to two levels above this file if no .env is found.
    """
    current_dir = Path(__file__).parent
    while current_dir != current_dir.parent:
        if (current_dir / ".env").exists():
            return current_dir
        current_dir = current_dir.parent
    return Path(__file__).parent.parent.parent


# Pre-load .env so code reading os.getenv(...) sees the same values
PROJECT_ROOT: Path = find_project_root()
load_dotenv(PROJECT_ROOT / ".env")


class Settings(BaseSettings):
    """Strongly-typed frontend settings loaded from environment and .env."""

    # Auth endpoints (absolute URLs)
    API_LOGIN_URL: str = "http://localhost:8000/api/login/"
    API_REGISTER_URL: str = "http://localhost:8000/api/register/"

    # Bets
    API_COMPLETED_BETS_URL: str = "http://localhost:8000/api/completed-bets"
    COMPLETED_BETS_LIMIT: int = 3

    # HTTP; None means wait until the transport reports an error
    REQUEST_TIMEOUT_SECONDS: float | None = None
    DEBUG_HTTP: bool = False

    # Token persistence; None keeps tokens in the Streamlit session
    TOKEN_STORE_PATH: str | None = None

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = str(PROJECT_ROOT / ".env")
        env_file_encoding = "utf-8"
        extra = "ignore"


# Singleton settings instance
settings = Settings()

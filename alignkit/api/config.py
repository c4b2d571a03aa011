"""
config.py — Environment configuration for alignkit.

Values come from environment variables, with a ``.env`` file at the project
root filling in whatever the environment does not set.
"""

import os
from functools import lru_cache
from pathlib import Path


# Load .env file if it exists
def _load_dotenv():
    env_path = Path(__file__).parent.parent.parent / ".env"
    if env_path.exists():
        with open(env_path) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, value = line.split("=", 1)
                    key = key.strip()
                    value = value.strip()
                    if key and value and key not in os.environ:
                        os.environ[key] = value

_load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        # App
        self.app_name: str = os.environ.get("APP_NAME", "alignkit")
        self.app_version: str = os.environ.get("APP_VERSION", "0.1.0")
        self.debug: bool = _flag("DEBUG", "false")
        self.api_prefix: str = os.environ.get("API_PREFIX", "/api/v1")
        self.log_level: str = os.environ.get("LOG_LEVEL", "INFO").upper()

        # CORS settings
        self.allowed_origins: list = os.environ.get(
            "CORS_ORIGINS",
            "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000,http://127.0.0.1:5173"
        ).split(",")

        # Alignment defaults
        self.include_node_reference: bool = _flag("INCLUDE_NODE_REFERENCE", "true")
        self.include_border: bool = _flag("INCLUDE_BORDER", "true")


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

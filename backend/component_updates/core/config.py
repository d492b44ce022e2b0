"""
Component Update Helper — Configuration
Loads .env automatically, then reads all settings from environment variables.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_env_path = Path(__file__).resolve().parent.parent.parent / ".env"
load_dotenv(_env_path)


@dataclass(frozen=True)
class Settings:
    """Top-level helper configuration."""
    github_api_host: str
    github_token: str
    user_agent: str
    http_timeout: float


def _load_config() -> Settings:
    return Settings(
        github_api_host=os.getenv("GITHUB_API_HOST", "api.github.com"),
        github_token=os.getenv("GITHUB_TOKEN", ""),
        user_agent=os.getenv("HELPER_USER_AGENT", "ComponentUpdateHelper/0.1"),
        http_timeout=float(os.getenv("HTTP_TIMEOUT", "30.0")),
    )


settings = _load_config()

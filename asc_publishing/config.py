"""Client settings loaded from the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

ASC_BASE_URL = "https://api.appstoreconnect.apple.com/v1"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    """Immutable client settings. `token` is an already signed bearer token."""
    token: str
    base_url: str = ASC_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        token = os.getenv("ASC_TOKEN")
        if not token:
            raise ValueError("ASC_TOKEN is not set")
        return cls(
            token=token,
            base_url=os.getenv("ASC_BASE_URL", ASC_BASE_URL),
            timeout=float(os.getenv("ASC_TIMEOUT", DEFAULT_TIMEOUT)),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()

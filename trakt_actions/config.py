"""Configuration and shared state."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

SUPPORTED_EPISODE_NUMBER_FORMATS = ("default", "padded", "english")
EPISODE_NUMBER_FORMAT = os.getenv("EPISODE_NUMBER_FORMAT", "default").strip().lower()
if EPISODE_NUMBER_FORMAT not in SUPPORTED_EPISODE_NUMBER_FORMATS:
    _stderr_print(
        f"Unsupported EPISODE_NUMBER_FORMAT={EPISODE_NUMBER_FORMAT!r}, falling back to 'default'"
    )
    EPISODE_NUMBER_FORMAT = "default"

CONFIG = {
    "port": int(os.getenv("PORT", "3000")),
    # trakt
    "trakt_api_base": os.getenv("TRAKT_API_BASE", "https://api.trakt.tv").rstrip("/"),
    "trakt_api_key": os.getenv("TRAKT_API_KEY", ""),
    "trakt_username": os.getenv("TRAKT_USERNAME", ""),
    "trakt_password": os.getenv("TRAKT_PASSWORD", ""),
    # Pre-hashed password; wins over TRAKT_PASSWORD when both are set
    "trakt_password_sha1": os.getenv("TRAKT_PASSWORD_SHA1", ""),
    "trakt_timeout": float(os.getenv("TRAKT_TIMEOUT", "15")),
    # Connectivity probe
    "network_probe_timeout": float(os.getenv("NETWORK_PROBE_TIMEOUT", "3")),
    "episode_number_format": EPISODE_NUMBER_FORMAT,
}


# ── Typed config ────────────────────────────────────────────


@dataclass
class TraktConfig:
    api_base: str = "https://api.trakt.tv"
    api_key: str = ""
    username: str = ""
    password: str = ""
    password_sha1: str = ""
    timeout: float = 15.0
    network_probe_timeout: float = 3.0


@dataclass
class AppConfig:
    """Typed configuration for the dispatcher and the web app."""

    port: int = 3000
    episode_number_format: str = "default"
    trakt: TraktConfig = field(default_factory=TraktConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            port=CONFIG["port"],
            episode_number_format=CONFIG["episode_number_format"],
            trakt=TraktConfig(
                api_base=CONFIG["trakt_api_base"],
                api_key=CONFIG["trakt_api_key"],
                username=CONFIG["trakt_username"],
                password=CONFIG["trakt_password"],
                password_sha1=CONFIG["trakt_password_sha1"],
                timeout=CONFIG["trakt_timeout"],
                network_probe_timeout=CONFIG["network_probe_timeout"],
            ),
        )

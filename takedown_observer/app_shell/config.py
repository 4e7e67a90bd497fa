import logging
import os
from functools import lru_cache
from pathlib import Path

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"

DEFAULT_CORS_ORIGINS = (
    "https://twitter.com",
    "https://x.com",
    "http://localhost:8080",
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings:
    """Runtime configuration, read from the environment with local-dev defaults."""

    def __init__(self) -> None:
        self.base_url = os.environ.get("OBSERVER_BASE_URL", "http://localhost:8080")
        self.static_prefix = os.environ.get("OBSERVER_STATIC_PREFIX", "/static")
        self.timezone = os.environ.get("OBSERVER_TIMEZONE", "UTC")
        self.http_timeout = float(os.environ.get("OBSERVER_HTTP_TIMEOUT", "10"))
        self.log_level = os.environ.get("OBSERVER_LOG_LEVEL", "INFO").upper()
        self.static_dir = Path(os.environ.get("OBSERVER_STATIC_DIR", str(STATIC_DIR)))

        origins = os.environ.get("OBSERVER_CORS_ORIGINS")
        if origins:
            self.cors_origins = [o.strip() for o in origins.split(",") if o.strip()]
        else:
            self.cors_origins = list(DEFAULT_CORS_ORIGINS)


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

"""Environment-driven settings and logging setup for the HTTP service."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

from .change import DEFAULT_EQUALITY_THRESHOLD
from .errors import ConfigurationError

LOGGER = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _env_number(name: str, default: str, cast):
    raw = os.getenv(name, default)
    try:
        return cast(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a {cast.__name__}, got {raw!r}") from exc


@dataclass
class Settings:
    """Runtime settings for the monthpace service."""

    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    log_dir: Optional[str] = None
    equality_threshold: float = DEFAULT_EQUALITY_THRESHOLD

    @classmethod
    def from_environment(cls) -> "Settings":
        return cls(
            host=os.getenv("MONTHPACE_HOST", "127.0.0.1"),
            port=_env_number("MONTHPACE_PORT", "8000", int),
            log_level=os.getenv("MONTHPACE_LOG_LEVEL", "INFO").upper(),
            log_dir=os.getenv("MONTHPACE_LOG_DIR") or None,
            equality_threshold=_env_number(
                "MONTHPACE_EQUALITY_THRESHOLD", str(DEFAULT_EQUALITY_THRESHOLD), float
            ),
        )


def configure_logging(settings: Settings) -> None:
    """Log to the console, and to ``monthpace.log`` when a log dir is usable."""

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    file_logging_status = "console only"
    if settings.log_dir:
        log_file = os.path.join(settings.log_dir, "monthpace.log")
        try:
            os.makedirs(settings.log_dir, exist_ok=True)
            handlers.append(logging.FileHandler(log_file, mode="a"))
            file_logging_status = f"logging to {log_file}"
        except OSError as exc:
            file_logging_status = f"WARNING: file logging disabled for {settings.log_dir}: {exc}"

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, handlers=handlers)

    if file_logging_status.startswith("WARNING"):
        LOGGER.warning(file_logging_status)
    else:
        LOGGER.info("Logging configuration: %s", file_logging_status)

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Dict, Literal, Mapping, Optional, get_args

from dotenv import dotenv_values, load_dotenv
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

LogLevel = Literal["NONE", "BASIC", "HEADERS", "BODY", "ALL"]
LOG_LEVELS = get_args(LogLevel)

DEFAULT_BASE_URL = "https://practice.expandtesting.com/notes/api"
DEFAULT_LOG_LEVEL: LogLevel = "BASIC"
DEFAULT_CONFIG_FILE = Path(__file__).resolve().parent.parent / "config" / "local.properties"

# property-file keys and their environment overrides
BASE_URL_KEY = "baseUrl"
LOG_LEVEL_KEY = "log.level"
BASE_URL_ENV = "NOTES_BASE_URL"
LOG_LEVEL_ENV = "NOTES_LOG_LEVEL"
CONFIG_FILE_ENV = "NOTES_CONFIG_FILE"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    log_level: LogLevel = DEFAULT_LOG_LEVEL


def _normalize_log_level(value: Optional[str]) -> LogLevel:
    if not value:
        return DEFAULT_LOG_LEVEL
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        logger.warning("unknown log level %r, falling back to %s", value, DEFAULT_LOG_LEVEL)
        return DEFAULT_LOG_LEVEL
    return level  # type: ignore[return-value]


def _normalize_base_url(value: Optional[str]) -> str:
    if not value or not value.strip():
        return DEFAULT_BASE_URL
    return value.strip().rstrip("/")


def _read_properties(path: Path) -> Dict[str, Optional[str]]:
    # only `key=value` lines are understood; `.properties` files are often Latin-1
    for encoding in ("utf-8", "latin-1"):
        try:
            return dotenv_values(path, interpolate=False, encoding=encoding)
        except UnicodeDecodeError:
            logger.debug("%s is not %s, retrying", path, encoding)
        except (OSError, ValueError) as exc:
            logger.warning("could not read %s: %s", path, exc)
            return {}
    return {}


def load_settings(path: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Resolves settings from the environment, then the properties file, then the
    built-in defaults. A missing or unreadable file simply contributes nothing.
    """
    env = os.environ if environ is None else environ
    if path is None:
        path = Path(env.get(CONFIG_FILE_ENV) or DEFAULT_CONFIG_FILE)

    file_values = _read_properties(path)
    if Path(path).is_file() and not (file_values.get(BASE_URL_KEY) or file_values.get(LOG_LEVEL_KEY)):
        logger.warning("%s has no %s or %s entry (only key=value lines are read)", path, BASE_URL_KEY, LOG_LEVEL_KEY)

    base_url = env.get(BASE_URL_ENV) or file_values.get(BASE_URL_KEY)
    log_level = env.get(LOG_LEVEL_ENV) or file_values.get(LOG_LEVEL_KEY)
    return Settings(
        base_url=_normalize_base_url(base_url),
        log_level=_normalize_log_level(log_level),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv()
    settings = load_settings()
    logger.debug("resolved settings: base_url=%s log_level=%s", settings.base_url, settings.log_level)
    return settings


def base_url() -> str:
    return get_settings().base_url


def log_level() -> LogLevel:
    return get_settings().log_level

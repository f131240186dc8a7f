from pydantic import BaseModel
import os
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def _load_env_file(path: Path) -> int:
    """Copy KEY=VALUE lines from path into os.environ. Returns the number set.

    Variables already in the environment win over the file.
    """
    if not path.exists():
        return 0
    loaded = 0
    with open(path) as f:
        for raw in f:
            raw = raw.strip()
            if not raw or raw.startswith("#") or "=" not in raw:
                continue
            key, _, value = raw.partition("=")
            key = key.strip()
            if key and key not in os.environ:
                os.environ[key] = value.strip().strip("'\"")
                loaded += 1
    return loaded


def _sanitize_ascii(val: str) -> str:
    """Strip non-ASCII characters from config values used as hosts or levels."""
    return val.encode('ascii', errors='ignore').decode('ascii').strip()


def _env_flag(name: str, default: str = "false") -> bool:
    """Read a boolean env var ("1", "true", "yes", "on" are truthy)."""
    return _sanitize_ascii(os.getenv(name, default)).lower() in ("1", "true", "yes", "on")


# Load .env before the Settings defaults read os.getenv
_load_env_file(Path(__file__).resolve().parent.parent / ".env")


class Settings(BaseModel):
    # HTTP adapter
    http_host: str = _sanitize_ascii(os.getenv("TOOLCHAT_HTTP_HOST", "0.0.0.0"))
    http_port: int = int(os.getenv("TOOLCHAT_HTTP_PORT", "8000"))
    log_level: str = _sanitize_ascii(os.getenv("TOOLCHAT_LOG_LEVEL", "INFO")).upper()

    # Weather: location used when the utterance names none (may be non-ASCII)
    weather_default_city: str = os.getenv("WEATHER_DEFAULT_CITY", "New York").strip()

    # Currency: reject unknown codes instead of falling back to rate 1.0
    strict_currency_codes: bool = _env_flag("STRICT_CURRENCY_CODES")

settings = Settings()

logger.debug(
    f"Config: http={settings.http_host}:{settings.http_port}, "
    f"weather_default_city={settings.weather_default_city}, "
    f"strict_currency_codes={settings.strict_currency_codes}"
)

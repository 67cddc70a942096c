import json
import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from utils.constants import (
    API_BASE_URL,
    API_USER_AGENT,
    BASE_DELAY_MS,
    MAX_ATTEMPTS,
    REQUEST_TIMEOUT_SECONDS,
    SETTINGS_FILE,
    SETTINGS_SECTION,
    VALID_POSITION,
)

logger = logging.getLogger(__name__)

if os.environ.get("CI") is None:
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class ApiSettings:
    base_url: str = API_BASE_URL
    position: str = VALID_POSITION
    user_agent: str = API_USER_AGENT
    max_attempts: int = MAX_ATTEMPTS
    base_delay_ms: int = BASE_DELAY_MS
    timeout_seconds: float = REQUEST_TIMEOUT_SECONDS

    @property
    def position_url(self) -> str:
        return f"{self.base_url}{self.position}"


def read_settings_file(path: Path | None = None) -> dict:
    """Return the ``CareerApi`` section of appsettings.json, or {} when the file is absent."""
    settings_path = path or Path.cwd() / SETTINGS_FILE
    if not settings_path.is_file():
        logger.debug("No settings file at %s, using defaults", settings_path)
        return {}

    try:
        data = json.loads(settings_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        error_msg = f"Malformed settings file {settings_path}: {e}"
        raise ConfigError(error_msg) from e

    section = data.get(SETTINGS_SECTION, {}) if isinstance(data, dict) else {}
    if not isinstance(section, dict):
        error_msg = f"'{SETTINGS_SECTION}' in {settings_path} must be an object"
        raise ConfigError(error_msg)
    return section


def _parse_int(name: str, raw: object, minimum: int) -> int:
    if isinstance(raw, bool) or (isinstance(raw, float) and not raw.is_integer()):
        error_msg = f"{name} must be an integer, got {raw!r}"
        raise ConfigError(error_msg)
    try:
        value = int(raw)
    except (TypeError, ValueError) as e:
        error_msg = f"{name} must be an integer, got {raw!r}"
        raise ConfigError(error_msg) from e
    if value < minimum:
        error_msg = f"{name} must be >= {minimum}, got {value}"
        raise ConfigError(error_msg)
    return value


def _parse_timeout(raw: object) -> float:
    if isinstance(raw, bool):
        error_msg = f"TimeoutSeconds must be a number, got {raw!r}"
        raise ConfigError(error_msg)
    try:
        value = float(raw)
    except (TypeError, ValueError) as e:
        error_msg = f"TimeoutSeconds must be a number, got {raw!r}"
        raise ConfigError(error_msg) from e
    if not math.isfinite(value) or value <= 0:
        error_msg = f"TimeoutSeconds must be a positive finite number, got {value}"
        raise ConfigError(error_msg)
    return value


def load_settings(path: Path | None = None) -> ApiSettings:
    file_section = read_settings_file(path)

    def pick(env_name: str, file_key: str, default: object) -> object:
        return os.getenv(env_name, file_section.get(file_key, default))

    base_url = str(pick("CAREER_API_BASE_URL", "BaseUrl", API_BASE_URL))
    if not base_url.endswith("/"):
        base_url += "/"

    settings = ApiSettings(
        base_url=base_url,
        position=str(pick("CAREER_API_POSITION", "Position", VALID_POSITION)),
        user_agent=str(pick("CAREER_API_USER_AGENT", "UserAgent", API_USER_AGENT)),
        max_attempts=_parse_int("MaxAttempts", pick("CAREER_API_MAX_ATTEMPTS", "MaxAttempts", MAX_ATTEMPTS), 1),
        base_delay_ms=_parse_int("BaseDelayMs", pick("CAREER_API_BASE_DELAY_MS", "BaseDelayMs", BASE_DELAY_MS), 0),
        timeout_seconds=_parse_timeout(
            pick("CAREER_API_TIMEOUT_SECONDS", "TimeoutSeconds", REQUEST_TIMEOUT_SECONDS)
        ),
    )
    logger.debug("Loaded settings for %s", settings.position_url)
    return settings

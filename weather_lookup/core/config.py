import os
from pathlib import Path
from typing import Callable, Optional

from dotenv import load_dotenv

from .error import ConfigError, MissingCredentialError

SEARCH_ENDPOINT = "https://api.waqi.info/search/"
TOKEN_ENV_VAR = "API_TOKEN"
DEFAULT_USER_AGENT: Optional[str] = None
DEFAULT_LOG_LEVEL = "WARNING"

EnvLookup = Callable[[str], Optional[str]]


def _resolve(lookup: Optional[EnvLookup]) -> EnvLookup:
    return lookup if lookup is not None else os.environ.get


def get_api_token(lookup: Optional[EnvLookup] = None) -> str:
    """
    Read the search credential.
    - API_TOKEN: required, no default. An empty value is passed through as is.
    """
    token = _resolve(lookup)(TOKEN_ENV_VAR)
    if token is None:
        raise MissingCredentialError(
            f"{TOKEN_ENV_VAR} is not set",
            details={"variable": TOKEN_ENV_VAR},
        )
    return token


def get_endpoint(lookup: Optional[EnvLookup] = None) -> str:
    """
    - WEATHER_LOOKUP_ENDPOINT: optional override of the search URL
    """
    endpoint = (_resolve(lookup)("WEATHER_LOOKUP_ENDPOINT") or "").strip()
    return endpoint or SEARCH_ENDPOINT


def get_user_agent(lookup: Optional[EnvLookup] = None) -> Optional[str]:
    """
    - WEATHER_LOOKUP_USER_AGENT: optional User-Agent header value
    """
    user_agent = (_resolve(lookup)("WEATHER_LOOKUP_USER_AGENT") or "").strip()
    return user_agent or DEFAULT_USER_AGENT


def get_timeout(lookup: Optional[EnvLookup] = None) -> Optional[float]:
    """
    Request timeout in seconds.
    - WEATHER_LOOKUP_TIMEOUT: unset means the transport default (no timeout)
    """
    raw = (_resolve(lookup)("WEATHER_LOOKUP_TIMEOUT") or "").strip()
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigError(
            f"WEATHER_LOOKUP_TIMEOUT must be a number, got {raw!r}",
            details={"variable": "WEATHER_LOOKUP_TIMEOUT"},
        ) from exc
    if timeout <= 0:
        raise ConfigError(
            f"WEATHER_LOOKUP_TIMEOUT must be positive, got {raw!r}",
            details={"variable": "WEATHER_LOOKUP_TIMEOUT"},
        )
    return timeout


def get_log_file(lookup: Optional[EnvLookup] = None) -> Optional[Path]:
    """
    - WEATHER_LOOKUP_LOG_FILE: optional file that also receives log records
    """
    log_file = (_resolve(lookup)("WEATHER_LOOKUP_LOG_FILE") or "").strip()
    return Path(log_file) if log_file else None


def get_log_level(lookup: Optional[EnvLookup] = None) -> str:
    """
    - WEATHER_LOOKUP_LOG_LEVEL: DEBUG | INFO | WARNING | ERROR
    """
    level = (_resolve(lookup)("WEATHER_LOOKUP_LOG_LEVEL") or "").strip().upper()
    return level or DEFAULT_LOG_LEVEL


def load_env_file(path: Optional[Path] = None) -> bool:
    """
    Load variables from a .env file without overriding the real environment.
    Defaults to .env in the current working directory.
    """
    env_path = Path(path) if path else Path.cwd() / ".env"
    if not env_path.exists():
        return False
    return load_dotenv(env_path, override=False)

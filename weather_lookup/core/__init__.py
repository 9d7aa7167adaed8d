"""Core module: configuration, logging, and error handling."""
from .config import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_USER_AGENT,
    SEARCH_ENDPOINT,
    TOKEN_ENV_VAR,
    EnvLookup,
    get_api_token,
    get_endpoint,
    get_log_file,
    get_log_level,
    get_timeout,
    get_user_agent,
    load_env_file,
)
from .error import (
    EXIT_FAILURE,
    EXIT_SUCCESS,
    ConfigError,
    DecodeError,
    ErrorType,
    MissingCredentialError,
    TransportError,
    WeatherLookupError,
    classify_error,
    format_error,
    log_error,
)
from .logger import get_logger, setup_logger

__all__ = [
    # Config
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_USER_AGENT",
    "SEARCH_ENDPOINT",
    "TOKEN_ENV_VAR",
    "EnvLookup",
    "get_api_token",
    "get_endpoint",
    "get_log_file",
    "get_log_level",
    "get_timeout",
    "get_user_agent",
    "load_env_file",
    # Error handling
    "EXIT_FAILURE",
    "EXIT_SUCCESS",
    "ConfigError",
    "DecodeError",
    "ErrorType",
    "MissingCredentialError",
    "TransportError",
    "WeatherLookupError",
    "classify_error",
    "format_error",
    "log_error",
    # Logging
    "setup_logger",
    "get_logger",
]

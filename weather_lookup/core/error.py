"""
Error management module.

Every failure of the lookup pipeline is one of a few kinds, each tied to the
expectation it broke. Callers decide whether a failure ends the process.
"""
import logging
import traceback
from enum import Enum
from typing import Any, Dict, Optional

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class ErrorType(Enum):
    """Error classification types."""
    MISSING_CREDENTIAL = "missing_credential"
    TRANSPORT = "transport"
    DECODE = "decode"
    CONFIG = "config"
    UNKNOWN = "unknown"


class WeatherLookupError(Exception):
    """Base exception for weather lookup errors."""

    error_type = ErrorType.UNKNOWN
    expectation = "the lookup to succeed"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error_type": self.error_type.value,
            "expectation": self.expectation,
            "message": str(self),
            "details": self.details,
        }


class MissingCredentialError(WeatherLookupError):
    error_type = ErrorType.MISSING_CREDENTIAL
    expectation = "API_TOKEN environment variable must be set"


class TransportError(WeatherLookupError):
    error_type = ErrorType.TRANSPORT
    expectation = "a successful request"


class DecodeError(WeatherLookupError):
    error_type = ErrorType.DECODE
    expectation = "expected the body to be json"


class ConfigError(WeatherLookupError):
    error_type = ErrorType.CONFIG
    expectation = "a valid configuration"


def classify_error(error: Exception) -> ErrorType:
    """
    Classify error type from exception.

    Args:
        error: Exception instance

    Returns:
        ErrorType enum value
    """
    if isinstance(error, WeatherLookupError):
        return error.error_type
    return ErrorType.UNKNOWN


def format_error(error: Exception) -> str:
    """One-line diagnostic naming the failed expectation."""
    if isinstance(error, WeatherLookupError):
        return f"{error.expectation}: {error}"
    return f"{type(error).__name__}: {error}"


def log_error(
    error: Exception,
    logger: Optional[logging.Logger] = None,
    context: Optional[Dict[str, Any]] = None,
    level: str = "ERROR",
) -> Dict[str, Any]:
    """
    Log error with context and return error info.

    Args:
        error: Exception instance
        logger: Logger instance (if None, uses default)
        context: Additional context information
        level: Logging level

    Returns:
        Dictionary with error information
    """
    if logger is None:
        logger = logging.getLogger("weather_lookup")

    error_type = classify_error(error)
    error_info = {
        "error_type": error_type.value,
        "error_class": type(error).__name__,
        "message": str(error),
        "context": context or {},
    }

    log_method = getattr(logger, level.lower(), logger.error)
    log_method(
        f"[{error_type.value}] {type(error).__name__}: {error}",
        extra={"error_info": error_info},
    )

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Traceback:\n%s",
            "".join(traceback.format_exception(type(error), error, error.__traceback__)),
        )

    return error_info

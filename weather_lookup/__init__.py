"""weather-lookup - search weather stations by keyword from the command line."""
from .cli import main, run
from .client import WeatherSearchClient, build_headers, build_params, decode_response, search
from .core.config import SEARCH_ENDPOINT, get_api_token
from .core.error import DecodeError, MissingCredentialError, TransportError, WeatherLookupError
from .debug import debug_print
from .query import collect_keyword
from .schema import DecodedResponse, JsonKind, kind_of

__all__ = [
    "main",
    "run",
    "WeatherSearchClient",
    "build_headers",
    "build_params",
    "decode_response",
    "search",
    "SEARCH_ENDPOINT",
    "get_api_token",
    "DecodeError",
    "MissingCredentialError",
    "TransportError",
    "WeatherLookupError",
    "debug_print",
    "collect_keyword",
    "DecodedResponse",
    "JsonKind",
    "kind_of",
]

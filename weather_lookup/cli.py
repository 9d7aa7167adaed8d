import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

import requests

from .client import WeatherSearchClient
from .core.config import (
    EnvLookup,
    get_api_token,
    get_endpoint,
    get_log_file,
    get_log_level,
    get_timeout,
    get_user_agent,
    load_env_file,
)
from .core.error import EXIT_FAILURE, EXIT_SUCCESS, WeatherLookupError, format_error, log_error
from .core.logger import setup_logger
from .debug import debug_print
from .query import collect_keyword
from .schema import DecodedResponse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weather-lookup",
        description="Search weather stations by keyword. Reads the API token from API_TOKEN.",
    )
    parser.add_argument(
        "keyword",
        nargs="*",
        help=(
            "Search words, joined without spaces (san francisco -> sanfrancisco). "
            "Words may be mixed with options; put words starting with - after --"
        ),
    )
    parser.add_argument("--user-agent", default=None, help="Custom User-Agent header")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WEATHER_LOOKUP_LOG_LEVEL or WARNING)",
    )
    parser.add_argument("--env-file", type=Path, default=None, help="Path to a .env file")
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file (default: WEATHER_LOOKUP_LOG_FILE)",
    )
    return parser


def run(
    argv: Sequence[str],
    lookup: Optional[EnvLookup] = None,
    session: Optional[requests.Session] = None,
    stream: Optional[TextIO] = None,
) -> DecodedResponse:
    """
    Run the lookup pipeline once. argv includes the program name.

    Raises WeatherLookupError on any failure; the credential is checked
    before anything touches the network.
    """
    prog = argv[0] if argv else "weather-lookup"
    args = build_parser().parse_intermixed_args(list(argv[1:]))
    logger = setup_logger(
        level=args.log_level or get_log_level(lookup),
        log_file=args.log_file or get_log_file(lookup),
    )

    token = get_api_token(lookup)
    keyword = collect_keyword([prog, *args.keyword])
    logger.debug("Keyword: %r", keyword)

    with WeatherSearchClient(
        endpoint=get_endpoint(lookup),
        user_agent=args.user_agent or get_user_agent(lookup),
        timeout=get_timeout(lookup),
        session=session,
    ) as client:
        decoded = client.lookup(token, keyword)

    debug_print(decoded["value"], stream=stream)
    return decoded


def _env_file_arg(argv: List[str]) -> Optional[Path]:
    return build_parser().parse_intermixed_args(argv[1:]).env_file


def main(
    argv: Optional[Sequence[str]] = None,
    lookup: Optional[EnvLookup] = None,
    session: Optional[requests.Session] = None,
) -> int:
    argv = list(sys.argv if argv is None else argv)
    if lookup is None:
        load_env_file(_env_file_arg(argv))

    try:
        run(argv, lookup=lookup, session=session)
    except WeatherLookupError as exc:
        log_error(exc, context={"argv": argv[1:]}, level="INFO")
        print(f"error: {format_error(exc)}", file=sys.stderr)
        return EXIT_FAILURE
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())

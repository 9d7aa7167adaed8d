from typing import Dict, Optional

import requests

from .core.config import SEARCH_ENDPOINT
from .core.error import DecodeError, TransportError
from .core.logger import get_logger
from .schema import DecodedResponse, build_decoded_response

logger = get_logger(__name__)


def build_params(token: str, keyword: str) -> Dict[str, str]:
    return {"token": token, "keyword": keyword}


def build_headers(user_agent: Optional[str] = None) -> Dict[str, str]:
    if user_agent:
        return {"User-Agent": user_agent}
    return {}


def search(
    token: str,
    keyword: str,
    *,
    endpoint: str = SEARCH_ENDPOINT,
    user_agent: Optional[str] = None,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None,
) -> requests.Response:
    """
    Send one blocking GET to the search endpoint.

    Transport failures (DNS, refused connection, TLS, timeout) raise
    TransportError. HTTP error statuses are returned like any other response.
    """
    getter = session.get if session is not None else requests.get
    logger.info("GET %s keyword=%r", endpoint, keyword)
    try:
        resp = getter(
            endpoint,
            params=build_params(token, keyword),
            headers=build_headers(user_agent),
            timeout=timeout,
        )
    except requests.RequestException as exc:
        raise TransportError(
            f"request to {endpoint} failed: {exc}",
            details={"endpoint": endpoint},
        ) from exc

    if not resp.ok:
        logger.warning("Search endpoint answered HTTP %s", resp.status_code)
    return resp


def decode_response(resp: requests.Response) -> DecodedResponse:
    """
    Parse the body as any JSON document.
    """
    try:
        value = resp.json()
    except ValueError as exc:
        raise DecodeError(
            f"body is not valid JSON: {exc}",
            details={"status_code": resp.status_code},
        ) from exc
    return build_decoded_response(value=value, status_code=resp.status_code, url=resp.url)


class WeatherSearchClient:
    """Reusable search client holding the transport settings and a session."""

    def __init__(
        self,
        endpoint: str = SEARCH_ENDPOINT,
        user_agent: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.endpoint = endpoint
        self.user_agent = user_agent
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def lookup(self, token: str, keyword: str) -> DecodedResponse:
        resp = search(
            token,
            keyword,
            endpoint=self.endpoint,
            user_agent=self.user_agent,
            timeout=self.timeout,
            session=self.session,
        )
        return decode_response(resp)

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "WeatherSearchClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

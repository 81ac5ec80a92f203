import json
import logging
from typing import Any, Protocol

import requests

from .errors import DecodeError, NetworkError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5


class Fetcher(Protocol):
    def fetch(self, url: str) -> bytes: ...


class RequestsFetcher:
    """Single GET over requests. No retries."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, session: requests.Session = None):
        self.timeout = timeout
        self._session = session

    def fetch(self, url: str) -> bytes:
        get = self._session.get if self._session is not None else requests.get
        try:
            resp = get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            logger.debug("GET %s failed: %s", url, e)
            raise NetworkError(url, e) from e
        return resp.content


def decode_json(data: bytes) -> Any:
    try:
        return json.loads(data)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"Received data could not be parsed: {e}") from e

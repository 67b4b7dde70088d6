import logging
from typing import Any

import requests

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


class HttpClient:
    """Thin JSON-over-HTTP wrapper around a ``requests.Session``.

    Errors are not translated here: callers get ``requests`` exceptions
    (``requests.JSONDecodeError`` for bad bodies, ``HTTPError`` for error
    statuses) and decide what they mean in their own domain.
    """

    def __init__(self, base_url: str, headers: dict[str, str] | None = None, *,
                 verify: bool = True, session: requests.Session | None = None):
        self.session = session or requests.Session()
        self.base_url = base_url.rstrip("/")
        self.headers = headers or {}
        self.verify = verify

    def url(self, path: str = "") -> str:
        if not path:
            return self.base_url
        return f"{self.base_url}/{path.lstrip('/')}"

    def _request(self, method: str, path: str, *, timeout: float, **kwargs) -> Any:
        url = self.url(path)
        log.debug("%s %s", method, url)
        r = self.session.request(method, url, headers=self.headers, verify=self.verify,
                                 timeout=timeout, **kwargs)
        r.raise_for_status()
        return r.json()

    def get(self, path: str = "", *, params: dict | None = None, timeout: float = DEFAULT_TIMEOUT):
        return self._request("GET", path, params=params, timeout=timeout)

    def put(self, path: str, payload: dict, *, timeout: float = DEFAULT_TIMEOUT):
        return self._request("PUT", path, json=payload, timeout=timeout)

    def post(self, path: str, payload: dict, *, timeout: float = DEFAULT_TIMEOUT):
        return self._request("POST", path, json=payload, timeout=timeout)

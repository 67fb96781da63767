"""HTTP/JSON round trips to the front-desk API."""
from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from .errors import NotFound, TransportFailure

logger = logging.getLogger(__name__)


class Transport:
    """One request, one JSON response.

    ``session`` is anything with the ``requests.Session.request``
    signature; tests pass an adapter over Django's test client.
    """

    def __init__(self, base_url: str, timeout: Optional[float] = None, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(self, method: str, path: str, payload: Optional[dict] = None) -> Any:
        url = self.url(path)
        logger.debug("%s %s", method, url)
        try:
            resp = self.session.request(method, url, json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            raise TransportFailure(f"{method} {path} failed: {exc}") from exc

        try:
            body = resp.json()
        except ValueError:
            body = None
        message = body.get("message") if isinstance(body, dict) else None

        if resp.status_code == 404:
            raise NotFound(message or f"{path} not found")
        if not 200 <= resp.status_code < 300:
            raise TransportFailure(
                message or f"{method} {path} answered {resp.status_code}",
                status_code=resp.status_code,
            )
        if body is None:
            raise TransportFailure(f"{method} {path} returned a non-JSON body", status_code=resp.status_code)
        return body

    def get(self, path: str) -> Any:
        return self.request("GET", path)

    def post(self, path: str, payload: dict) -> Any:
        return self.request("POST", path, payload)

    def put(self, path: str, payload: dict) -> Any:
        return self.request("PUT", path, payload)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)

    def close(self) -> None:
        self.session.close()

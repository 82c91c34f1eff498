"""
HTTP transport.

``HttpClient`` is the interface the resource operations call. Any object
implementing it can be passed in; ``RequestsHttpClient`` is the default
implementation, built on a ``requests.Session``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import logging
from typing import Any, Mapping, Optional

import requests
import simplejson as json

from .errors import ParcelError, error_for_status

LOG = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.oasislabs.com/parcel/v1"


class HttpClient(ABC):
    """
    Abstract transport for the API.

    Paths are relative to the API root. Implementations raise on any
    failed request; callers never see an error response as a value.
    """

    @abstractmethod
    def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """
        GET a resource.

        Args:
            path: Endpoint path, relative to the API root
            params: Query parameters

        Returns:
            The decoded JSON response body
        """

    @abstractmethod
    def post(self, path: str, body: Any) -> Any:
        """
        POST a JSON body.

        Returns:
            The decoded JSON response body
        """

    @abstractmethod
    def create(self, path: str, body: Any) -> Any:
        """
        POST a JSON body that creates a resource.

        Same as ``post`` but the server must answer ``201 Created``.
        """

    @abstractmethod
    def delete(self, path: str) -> None:
        """DELETE a resource."""


class RequestsHttpClient(HttpClient):
    """HttpClient backed by a requests Session."""

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize client.

        Args:
            api_url: Root URL that endpoint paths are resolved against
            token: Bearer token sent with every request
            session: Session to use (a new one is created if not provided)
            timeout: Per-request timeout in seconds (None = wait forever)
        """
        self.api_url = api_url.rstrip("/") + "/"
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"Accept": "application/json"})
        if token:
            self._session.headers.update({"Authorization": f"Bearer {token}"})

    def url_for(self, path: str) -> str:
        return self.api_url + path.lstrip("/")

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
    ) -> requests.Response:
        url = self.url_for(path)
        kwargs: dict = {}
        if params:
            kwargs["params"] = dict(params)
        if body is not None:
            kwargs["data"] = json.dumps(body)
            kwargs["headers"] = {"Content-Type": "application/json; charset=UTF-8"}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout

        LOG.debug("%s %s params=%r", method, url, params)
        response = self._session.request(method, url, **kwargs)
        LOG.debug("%s %s -> %d", method, url, response.status_code)
        if not response.ok:
            raise self._error(response)
        return response

    @staticmethod
    def _error(response: requests.Response) -> ParcelError:
        message = response.reason or "request failed"
        try:
            payload = json.loads(response.text)
        except json.JSONDecodeError:
            payload = None
        if isinstance(payload, dict) and payload.get("error"):
            message = str(payload["error"])
        error_cls = error_for_status(response.status_code)
        return error_cls(message, status_code=response.status_code, response=response)

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        if response.status_code == 204 or not response.text:
            return None
        try:
            return json.loads(response.text)
        except json.JSONDecodeError as error:
            raise ParcelError("invalid JSON response: {}".format(error),
                              status_code=response.status_code,
                              response=response) from None

    def get(self, path, params=None):
        return self._decode(self._request("GET", path, params=params))

    def post(self, path, body):
        return self._decode(self._request("POST", path, body=body))

    def create(self, path, body):
        response = self._request("POST", path, body=body)
        if response.status_code != 201:
            raise ParcelError(
                f"expected 201 Created, got {response.status_code}",
                status_code=response.status_code,
                response=response,
            )
        return self._decode(response)

    def delete(self, path):
        self._request("DELETE", path)

    def close(self) -> None:
        self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        _ = (exc_type, exc_val, exc_tb)
        self.close()
        return False

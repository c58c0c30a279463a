"""HTTP client for the roster REST API."""

import logging
from typing import Any

import requests

from roster.config import RosterConfig
from roster.exceptions import ApiError, NetworkError

logger = logging.getLogger(__name__)


class ApiClient:
    """Thin JSON client over a requests session.

    Session credentials are cookie based: whatever cookies the session
    carries are sent with every request.
    """

    def __init__(
        self,
        base_url: str = "",
        session: requests.Session | None = None,
        timeout: float | None = 10.0,
    ):
        """
        Initialize client.

        Args:
            base_url: Service root, e.g. "http://localhost:5000"
            session: Session to send requests with (dependency injection)
            timeout: Per-request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: RosterConfig) -> "ApiClient":
        """Build a client whose session carries the configured session cookie."""
        session = requests.Session()
        if config.session_cookie:
            session.cookies.set(config.session_cookie_name, config.session_cookie)
        return cls(config.api_base_url, session=session, timeout=config.request_timeout)

    def url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def request(self, method: str, path: str, data: Any = None) -> Any:
        """
        Send a request and decode the response.

        Args:
            method: HTTP method
            path: API path starting with "/"
            data: Optional JSON body

        Returns:
            None for empty responses, decoded JSON for JSON responses,
            otherwise the response text.

        Raises:
            ApiError: On a non-success status
            NetworkError: If the request could not be completed
        """
        logger.debug(f"API request: {method} {path}")
        kwargs = {"timeout": self.timeout}
        if data is not None:
            kwargs["json"] = data

        try:
            response = self.session.request(method, self.url(path), **kwargs)
        except requests.RequestException as e:
            logger.warning(f"API request failed: {method} {path}: {e}")
            raise NetworkError(f"Could not reach {path}: {e}") from e

        logger.debug(f"API response: {response.status_code} for {method} {path}")
        if not response.ok:
            raise _error_from_response(response)

        if response.status_code == 204 or not response.content:
            return None

        content_type = response.headers.get("Content-Type", "")
        if "application/json" in content_type:
            return response.json()
        return response.text

    def get(self, path: str) -> Any:
        return self.request("GET", path)

    def post(self, path: str, data: Any = None) -> Any:
        return self.request("POST", path, data)

    def put(self, path: str, data: Any = None) -> Any:
        return self.request("PUT", path, data)

    def patch(self, path: str, data: Any = None) -> Any:
        return self.request("PATCH", path, data)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)


def _error_from_response(response) -> ApiError:
    """Build an ApiError, extracting the server's message field if present."""
    body = response.text or getattr(response, "reason", None) or None
    message = None
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict) and payload.get("message"):
        message = str(payload["message"])
    return ApiError(response.status_code, message=message, body=body)

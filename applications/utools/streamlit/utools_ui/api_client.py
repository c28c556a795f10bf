"""Generic HTTP client shared by every tool form."""

import logging
import os
from typing import Any, Optional

import requests

BACKEND_URL = os.environ.get("BACKEND_URL", "http://localhost:8000")
# The ping tool waits up to 5s on the server side.
REQUEST_TIMEOUT_SECONDS = 15

logger = logging.getLogger(__name__)


class ToolApiError(Exception):
    """A tool request failed in transport or returned a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code


def _error_from_response(response: requests.Response) -> ToolApiError:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        error = body["error"]
        return ToolApiError(
            str(error.get("message") or response.reason),
            status_code=response.status_code,
            code=error.get("code"),
        )
    return ToolApiError(
        f"HTTP {response.status_code}: {response.reason}",
        status_code=response.status_code,
    )


class ToolApi:
    """Request helper bound to one tool's base path."""

    def __init__(
        self,
        base_path: str,
        base_url: str | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = (base_url or BACKEND_URL).rstrip("/")
        self.base_path = base_path
        self._session = session

    def url_for(self, endpoint: str) -> str:
        return f"{self.base_url}{self.base_path}{endpoint}"

    def request(self, method: str, endpoint: str, data: Any = None) -> Any:
        url = self.url_for(endpoint)
        kwargs: dict[str, Any] = {
            "headers": {"Content-Type": "application/json"},
            "timeout": REQUEST_TIMEOUT_SECONDS,
        }
        if data is not None and method in ("POST", "PUT"):
            kwargs["json"] = data

        sender = self._session or requests
        try:
            response = sender.request(method, url, **kwargs)
        except requests.RequestException as exc:
            logger.error("api_request_failed", extra={"method": method, "url": url, "error": str(exc)})
            raise ToolApiError(str(exc)) from exc

        if not response.ok:
            error = _error_from_response(response)
            logger.error(
                "api_request_failed",
                extra={"method": method, "url": url, "status_code": response.status_code},
            )
            raise error

        try:
            return response.json()
        except ValueError as exc:
            raise ToolApiError(
                f"Invalid JSON response from {url}", status_code=response.status_code
            ) from exc

    def get(self, endpoint: str) -> Any:
        return self.request("GET", endpoint)

    def post(self, endpoint: str, data: Any = None) -> Any:
        return self.request("POST", endpoint, data)

    def put(self, endpoint: str, data: Any = None) -> Any:
        return self.request("PUT", endpoint, data)

    def delete(self, endpoint: str) -> Any:
        return self.request("DELETE", endpoint)

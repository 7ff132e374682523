"""
Outline API Client - Low-level HTTP client for the Outline REST API.

This handles the raw HTTP communication with Outline.
The OutlineAdapter uses this to implement AuthPort and DocumentReaderPort.

Outline's API is RPC style: every method is a POST with a JSON body.
Outline API documentation:
https://www.getoutline.com/developers
"""

import logging
from typing import Any

import requests
from requests.adapters import HTTPAdapter

from outline_cli.core.exceptions import OutlineError
from outline_cli.core.ports.config_provider import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

from .envelope import DataEnvelope


class OutlineApiError(OutlineError):
    """
    A request to the Outline API failed.

    ``status_code`` is set when the server answered with a non-2xx status,
    and is None for transport and decoding failures.
    """

    def __init__(
        self,
        action: str,
        status_code: int | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(f"Failed to make request when trying to {action}", cause)
        self.action = action
        self.status_code = status_code


class OutlineApiClient:
    """
    Low-level Outline REST API client.

    Handles authentication, request/response and error handling.

    Features:
    - Bearer token authentication
    - Envelope unwrapping
    - Connection pooling
    - No retries: one request per call
    """

    DEFAULT_POOL_CONNECTIONS = 1
    DEFAULT_POOL_MAXSIZE = 1

    def __init__(
        self,
        token: str,
        url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the Outline client.

        Args:
            token: API key used as a Bearer token
            url: Outline instance URL (e.g., https://app.getoutline.com)
            timeout: Request timeout in seconds
        """
        self.base_url = url.rstrip("/")
        self.api_url = f"{self.base_url}/api"
        self.timeout = timeout
        self.logger = logging.getLogger("OutlineApiClient")

        self.headers = {
            "Accept": "application/json",
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

        self._session = requests.Session()
        self._session.headers.update(self.headers)

        adapter = HTTPAdapter(
            pool_connections=self.DEFAULT_POOL_CONNECTIONS,
            pool_maxsize=self.DEFAULT_POOL_MAXSIZE,
        )
        self._session.mount("https://", adapter)
        self._session.mount("http://", adapter)

    # -------------------------------------------------------------------------
    # Core Request Methods
    # -------------------------------------------------------------------------

    def request(
        self,
        method: str,
        action: str,
        payload: dict[str, Any] | None = None,
    ) -> DataEnvelope:
        """
        Call an Outline API method.

        Args:
            method: API method name (e.g., 'documents.list')
            action: What the call is trying to do, used in error messages
            payload: JSON body, if any

        Returns:
            The unwrapped response envelope

        Raises:
            OutlineApiError: On transport, status or decoding errors
        """
        url = f"{self.api_url}/{method}"
        self.logger.debug(f"POST {url}")

        try:
            response = self._session.post(url, json=payload, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise OutlineApiError(f"{action} (timed out)", cause=e) from e
        except requests.exceptions.RequestException as e:
            raise OutlineApiError(f"{action} (send failure)", cause=e) from e

        return self._handle_response(response, action)

    # -------------------------------------------------------------------------
    # Response Handling
    # -------------------------------------------------------------------------

    def _handle_response(self, response: requests.Response, action: str) -> DataEnvelope:
        """Check the status and unwrap the JSON envelope."""
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            self.logger.debug(f"Outline answered {response.status_code} while trying to {action}")
            raise OutlineApiError(
                f"{action} (bad status)", status_code=response.status_code, cause=e
            ) from e

        try:
            return DataEnvelope.from_json(response.json())
        except ValueError as e:
            raise OutlineApiError(f"read the response to {action}", cause=e) from e

    # -------------------------------------------------------------------------
    # API Methods
    # -------------------------------------------------------------------------

    def auth_info(self) -> dict[str, Any]:
        """Retrieve information about the currently authenticated user."""
        return self.request("auth.info", "get authentication data").data

    def list_documents(
        self,
        offset: int = 0,
        limit: int = 15,
        user: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        Fetch a list of documents available to the current user.

        Args:
            offset: Pagination offset from the beginning of the results
            limit: Number of results to return
            user: Only return documents written by this user ID
        """
        payload: dict[str, Any] = {"offset": offset, "limit": limit}
        if user is not None:
            payload["user"] = user

        data = self.request("documents.list", "list documents in Outline", payload).data
        if not isinstance(data, list):
            raise OutlineApiError(
                "read list of documents in Outline",
                cause=ValueError(f"Expected a list, got {type(data).__name__}"),
            )
        return data

    def document_info(self, document_id: str) -> dict[str, Any]:
        """Retrieve a single document, including its text, by ID."""
        data = self.request(
            "documents.info", "request the content of a document", {"id": document_id}
        ).data
        if not isinstance(data, dict):
            raise OutlineApiError(
                "parse document content request",
                cause=ValueError(f"Expected an object, got {type(data).__name__}"),
            )
        return data

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

"""
Shared HTTP plumbing for the NASA POWER and geocoding clients.

A single requests session per client, retried with urllib3 on throttling and
server errors, returning decoded JSON.
"""

import logging
from typing import Any, Dict, Optional, Sequence

import requests  # type: ignore
from requests.adapters import HTTPAdapter  # type: ignore
from urllib3.util.retry import Retry  # type: ignore

RETRY_STATUSES = (429, 500, 502, 503, 504)


class APIClient:
    """JSON-over-HTTP client bound to one base URL."""

    def __init__(
        self,
        base_url: str,
        timeout: int = 30,
        max_retries: int = 3,
        headers: Optional[Dict[str, str]] = None,
        logger: Optional[logging.Logger] = None,
        retry_statuses: Sequence[int] = RETRY_STATUSES
    ):
        """
        Initialize API client.

        Args:
            base_url: Service root, e.g. https://power.larc.nasa.gov/api
            timeout: Per-request timeout in seconds
            max_retries: Retries for GET requests hitting a retry status
            headers: Extra headers sent with every request
            logger: Logger instance
            retry_statuses: HTTP statuses that trigger a retry
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)
        self.session = self._build_session(max_retries, retry_statuses)
        self.session.headers["Accept"] = "application/json"
        self.session.headers.update(headers or {})

    @staticmethod
    def _build_session(max_retries: int, retry_statuses: Sequence[int]) -> requests.Session:
        retry = Retry(
            total=max_retries,
            backoff_factor=1,
            status_forcelist=list(retry_statuses),
            allowed_methods=["GET"],
        )
        session = requests.Session()
        for prefix in ("http://", "https://"):
            session.mount(prefix, HTTPAdapter(max_retries=retry))
        return session

    def url_for(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def _make_request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """
        Send a request and fail on non-2xx responses.

        Raises:
            requests.exceptions.RequestException: Connection errors, timeouts
                and HTTP error statuses after retries are exhausted
        """
        url = self.url_for(endpoint)
        self.logger.debug(f"{method} {url} params={kwargs.get('params')}")

        try:
            response = self.session.request(method=method, url=url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            self.logger.error(f"{method} {url} failed: {e}")
            raise

        self.logger.debug(f"{method} {url} -> {response.status_code}")
        return response

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        GET an endpoint and decode the JSON body.

        Raises:
            requests.exceptions.RequestException: On request failure
            ValueError: If the body is not valid JSON
        """
        return self._make_request("GET", endpoint, params=params).json()

    def close(self) -> None:
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

"""HTTP client for the garage backend: weather proxy, tips and featured vehicles."""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


class BackendError(Exception):
    """A backend request failed; the message is meant for the user."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class BackendClient:
    """Thin wrapper over the backend's JSON endpoints. No retries."""

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get(self, path: str) -> Any:
        url = f"{self.base_url}{path}"
        logger.info("GET %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("Request to %s failed: %s", url, e)
            raise BackendError(f"Could not reach the backend: {e}") from e

        if not response.ok:
            message = f"Error {response.status_code}"
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict) and body.get("error"):
                message = body["error"]
            logger.warning("Backend returned %s for %s: %s", response.status_code, url, message)
            raise BackendError(message, response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise BackendError(f"Backend sent an invalid response for {path}") from e

    def forecast(self, city: str) -> Dict[str, Any]:
        """Raw forecast payload for a city."""
        city = (city or "").strip()
        if not city:
            raise BackendError("Please enter a city name.")
        return self._get(f"/weather/forecast/{quote(city, safe='')}")

    def tips(self, vehicle_type: Optional[str] = None) -> List[str]:
        """General maintenance tips, or the tips for one vehicle type."""
        path = "/tips" if not vehicle_type else f"/tips/{quote(vehicle_type.lower(), safe='')}"
        items = self._get_list(path)
        return [item["tip"] for item in items if isinstance(item, dict) and "tip" in item]

    def featured(self) -> List[Dict[str, Any]]:
        return [item for item in self._get_list("/garage/featured") if isinstance(item, dict)]

    def _get_list(self, path: str) -> List[Any]:
        body = self._get(path)
        if not isinstance(body, list):
            logger.warning("Expected a list from %s, got %s", path, type(body).__name__)
            raise BackendError(f"Backend sent an invalid response for {path}")
        return body

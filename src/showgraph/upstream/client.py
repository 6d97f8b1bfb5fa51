"""
Async client for the TVmaze REST API
"""

from __future__ import annotations

from typing import Any

import httpx

from ..logging import get_logger

logger = get_logger(__name__)


class UpstreamError(Exception):
    """Raised when the upstream API cannot be reached or answered badly."""

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class UpstreamStatusError(UpstreamError):
    """Raised when the upstream API answers with a non-2xx status."""

    def __init__(self, message: str, *, url: str | None = None, status_code: int) -> None:
        super().__init__(message, url=url)
        self.status_code = status_code


class UpstreamPayloadError(UpstreamError):
    """Raised when an upstream body is not JSON or has the wrong shape."""


class TVMazeClient:
    """Thin wrapper over a shared ``httpx.AsyncClient`` for the three routes we consume.

    The client keeps no per-request state; one instance is created at startup
    and shared by all resolvers.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={"accept": "application/json"},
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> TVMazeClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def get_json(
        self,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        check_status: bool = True,
    ) -> Any:
        """GET ``path`` and decode its JSON body.

        Args:
            path: Route relative to the base URL
            params: Optional query parameters
            check_status: When False the body is decoded whatever the status code

        Raises:
            UpstreamError: On transport failures and timeouts
            UpstreamStatusError: On non-2xx responses when ``check_status`` is set
            UpstreamPayloadError: When the body is not valid JSON
        """
        url = f"{self.base_url}{path}"
        logger.debug("Upstream request", url=url, params=params)

        try:
            response = await self._client.get(path, params=params)
        except httpx.TimeoutException as e:
            logger.warning("Upstream request timed out", url=url)
            raise UpstreamError(f"Upstream request to {url} timed out", url=url) from e
        except httpx.HTTPError as e:
            logger.error("Upstream request failed", url=url, error=str(e))
            raise UpstreamError(f"Upstream request to {url} failed: {e}", url=url) from e

        if check_status and not response.is_success:
            logger.warning("Upstream returned error status", url=url, status_code=response.status_code)
            raise UpstreamStatusError(
                f"Upstream request to {url} returned HTTP {response.status_code}",
                url=url,
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            logger.error("Upstream returned invalid JSON", url=url, status_code=response.status_code)
            raise UpstreamPayloadError(f"Upstream response from {url} is not valid JSON", url=url) from e

    async def fetch_schedule(self, date: str) -> list[Any]:
        """Fetch the web/streaming schedule for ``date`` (YYYY-MM-DD)."""
        data = await self.get_json("/schedule/web", params={"date": date})
        if not isinstance(data, list):
            raise UpstreamPayloadError(
                "Upstream schedule response is not a list", url=f"{self.base_url}/schedule/web"
            )
        return data

    async def fetch_show(self, show_id: int) -> Any:
        """Fetch show details."""
        return await self.get_json(f"/shows/{show_id}")

    async def fetch_cast(self, show_id: int) -> Any:
        """Fetch the cast list of a show.

        The body is returned even for error statuses; callers treat any
        non-list value as an empty cast.
        """
        return await self.get_json(f"/shows/{show_id}/cast", check_status=False)

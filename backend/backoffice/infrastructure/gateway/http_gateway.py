"""HTTP DataGateway — talks to the relation REST API of a backoffice server.

Uses httpx; an injected ``httpx.AsyncClient`` is reused across calls,
otherwise a short-lived client is opened per request.
"""

import logging
from typing import Any

import httpx

from backoffice.application.interfaces import DataGateway, Join, Row, encode_filter
from backoffice.domain.exceptions import GatewayError

logger = logging.getLogger(__name__)


class HttpDataGateway(DataGateway):
    """Infrastructure adapter — remote relations over ``/relations/{relation}``."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client

    def _url(self, relation: str, record_id: str | None = None) -> str:
        url = f"{self._base_url}/relations/{relation}"
        return f"{url}/{record_id}" if record_id is not None else url

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        client = self._http_client or httpx.AsyncClient(timeout=self._timeout)
        should_close = self._http_client is None
        try:
            response = await client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise GatewayError(f"Could not reach the data service: {exc}", status_code=503) from exc
        finally:
            if should_close:
                await client.aclose()

        if response.status_code >= 400:
            self._raise_gateway_error(response)
        return response

    @staticmethod
    def _raise_gateway_error(response: httpx.Response) -> None:
        """Raise a GatewayError from the service's ``{"detail": ...}`` body."""
        try:
            body = response.json()
        except ValueError:
            body = None
        detail = body.get("detail") if isinstance(body, dict) else None
        if detail is None:
            detail = response.text or f"HTTP {response.status_code}"
        elif not isinstance(detail, str):
            detail = str(detail)
        raise GatewayError(detail, status_code=response.status_code)

    async def select(
        self,
        relation: str,
        *,
        columns: tuple[str, ...] | None = None,
        joins: tuple[Join, ...] = (),
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[Row]:
        params: list[tuple[str, str]] = []
        if columns:
            params.append(("select", ",".join(columns)))
        params.extend(("join", join.encode()) for join in joins)
        params.extend(
            ("eq", encode_filter(name, value)) for name, value in (filters or {}).items()
        )
        if order_by:
            params.append(("order", order_by))
            params.append(("desc", "true" if descending else "false"))

        response = await self._request("GET", self._url(relation), params=params)
        return response.json()

    async def insert(self, relation: str, rows: list[Row]) -> list[Row]:
        response = await self._request("POST", self._url(relation), json=rows)
        return response.json()

    async def update(self, relation: str, patch: Row, record_id: str) -> list[Row]:
        response = await self._request("PATCH", self._url(relation, record_id), json=patch)
        return response.json()

    async def delete(self, relation: str, record_id: str) -> None:
        await self._request("DELETE", self._url(relation, record_id))

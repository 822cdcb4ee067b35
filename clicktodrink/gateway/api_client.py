from __future__ import annotations

from typing import Any, List, Optional

import httpx

from clicktodrink.config import AppConfig, get_config
from clicktodrink.errors import ConfigurationError, NetworkError, RemoteRejection
from clicktodrink.logging import get_logger
from clicktodrink.models import Establishment, OrderConfirmation, OrderRequest, Product

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class ApiClient:
    """Async gateway to the remote commerce API.

    Every operation is a single request/response exchange: no retry, no
    caching, and the transport's default timeout.
    """
    def __init__(
        self,
        config: Optional[AppConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initializes the gateway using the given config or the AppConfig singleton.

        Args:
            config (AppConfig, optional): Configuration to use. Defaults to get_config().
            transport (httpx.AsyncBaseTransport, optional): Transport override, used to
                point the client at a mock service.
        """
        self.config = config or get_config()
        self.logger = get_logger(__name__)
        self._client = httpx.AsyncClient(
            base_url=self.config.api_base_url.rstrip("/"),
            headers=DEFAULT_HEADERS,
            transport=transport,
            follow_redirects=True,
        )

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def _establishment_path(self) -> str:
        if not self.config.establishment_id:
            self.logger.error("Missing establishment id configuration.")
            raise ConfigurationError("Missing establishment id configuration (ESTABLISHMENT_ID).")
        return f"/establishments/{self.config.establishment_id}"

    def _url(self, path: str) -> str:
        return str(self._client.base_url.join(path.lstrip("/")))

    async def _request(self, method: str, path: str, json: Any = None) -> Any:
        """Issue one request and return the response body.

        A 2xx body is decoded as JSON. An empty body gives None and a body that
        is not JSON is returned as text.

        Raises:
            NetworkError: If no usable response could be obtained.
            RemoteRejection: If the final response status is not 2xx.
        """
        self.logger.debug(f"{method} {path}")
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.RequestError as exc:
            self.logger.error(f"{method} {path} failed: {exc!r}")
            raise NetworkError(f"Could not reach {path}: {exc}", url=self._url(path)) from exc

        if not response.is_success:
            self.logger.warning(f"{method} {path} rejected with status {response.status_code}")
            raise RemoteRejection(response.status_code, response.text, url=str(response.request.url))

        self.logger.debug(f"{method} {path} -> {response.status_code}")
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            self.logger.debug(f"{method} {path} returned a body that is not JSON")
            return response.text

    async def fetch_establishment(self) -> Establishment:
        """Return the configured establishment record, unmodified."""
        return await self._request("GET", self._establishment_path())

    async def fetch_products(self) -> List[Product]:
        """Return the establishment's products, unmodified. Empty remote array gives []."""
        return await self._request("GET", f"{self._establishment_path()}/products")

    async def submit_order(self, request: OrderRequest) -> OrderConfirmation:
        """Submit an order and return the remote confirmation verbatim.

        The request is validated when the caller builds the OrderRequest; here it
        is only serialised and forwarded.
        """
        payload = request.to_payload()
        self.logger.info(f"Submitting order with {len(payload['items'])} item(s)")
        self.logger.debug(f"Order payload: {payload}")
        return await self._request("POST", "/orders", json=payload)

    create_order = submit_order


def get_api_client(config: Optional[AppConfig] = None) -> ApiClient:
    """Returns a new ApiClient using the given or the latest config."""
    return ApiClient(config=config)


async def fetch_establishment(client: Optional[ApiClient] = None) -> Establishment:
    """Fetch the configured establishment, using a short-lived client unless one is given."""
    if client is not None:
        return await client.fetch_establishment()
    async with get_api_client() as api:
        return await api.fetch_establishment()


async def fetch_products(client: Optional[ApiClient] = None) -> List[Product]:
    """Fetch the establishment's products, using a short-lived client unless one is given."""
    if client is not None:
        return await client.fetch_products()
    async with get_api_client() as api:
        return await api.fetch_products()


async def submit_order(request: OrderRequest, client: Optional[ApiClient] = None) -> OrderConfirmation:
    """Submit an order, using a short-lived client unless one is given."""
    if client is not None:
        return await client.submit_order(request)
    async with get_api_client() as api:
        return await api.submit_order(request)


create_order = submit_order

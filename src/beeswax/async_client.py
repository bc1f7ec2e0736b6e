"""Async Beeswax API client built on httpx.

Same operations as ``BeeswaxClient``; the login cookie lives in the
``httpx.AsyncClient`` cookie jar.
"""

import logging
from typing import Any

import httpx

from beeswax.client import BaseBeeswaxClient
from beeswax.config import BeeswaxConnectionConfig
from beeswax.errors import BeeswaxAPIError
from beeswax.resources.authenticate import Authenticate
from beeswax.resources.base import CreatePayload, DeletePayload, ReadPayload, Resource, ResponseEnvelope

logger = logging.getLogger(__name__)


class AsyncBeeswaxClient(BaseBeeswaxClient):
    """Async client for the Beeswax API.

    Usage:
        async with await AsyncBeeswaxClient.authenticated(url, auth) as client:
            advertisers = await client.read(Advertiser.read_request(advertiser_name="Example"))
    """

    def __init__(
        self,
        base_url: str,
        timeout: int = BaseBeeswaxClient.DEFAULT_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
    ):
        super().__init__(base_url, timeout)
        self.http_client = http_client or httpx.AsyncClient(timeout=timeout)
        self.http_client.headers.update(self._default_headers())

    @classmethod
    async def authenticated(cls, base_url: str, auth: Authenticate, **kwargs: Any) -> "AsyncBeeswaxClient":
        """Create a client and log it in."""
        client = cls(base_url, **kwargs)
        try:
            await client.authenticate(auth)
        except BeeswaxAPIError:
            await client.aclose()
            raise
        return client

    @classmethod
    async def from_config(
        cls,
        config: BeeswaxConnectionConfig,
        http_client: httpx.AsyncClient | None = None,
    ) -> "AsyncBeeswaxClient":
        return await cls.authenticated(
            config.base_url,
            config.to_authenticate(),
            timeout=config.timeout,
            http_client=http_client,
        )

    async def _request(
        self,
        method: str,
        resource_name: str,
        data: dict[str, Any] | None = None,
        query_params: dict[str, Any] | None = None,
    ) -> ResponseEnvelope:
        url = self._build_url(resource_name)
        logger.debug("%s %s params=%s", method, url, query_params)

        try:
            response = await self.http_client.request(
                method,
                url,
                json=data,
                params=query_params,
                timeout=self.timeout,
            )
        except httpx.HTTPError as e:
            raise BeeswaxAPIError(f"Request failed: {e}") from e
        return self._handle_response(response)

    async def authenticate(self, auth: Authenticate) -> None:
        try:
            await self._request("POST", Authenticate.NAME, data=auth.to_body())
        except BeeswaxAPIError as e:
            if e.response_body is None and e.status_code is None:
                raise
            raise self._authentication_failed(e) from e
        logger.info("Authenticated with Beeswax at %s as %s", self.base_url, auth.email)

    async def read(self, criteria: ReadPayload) -> list[Resource]:
        resource_type = criteria.resource_type
        envelope = await self._request("GET", resource_type.NAME, query_params=criteria.to_query_params())
        return self._parse_resources(resource_type, envelope)

    async def create(self, payload: CreatePayload) -> Resource:
        envelope = await self._request("POST", payload.resource_type.NAME, data=payload.to_body())
        return self._parse_created(payload, envelope)

    async def update(self, resource: Resource) -> Resource:
        await self._request("PUT", resource.NAME, data=resource.to_body())
        logger.info("Updated Beeswax %s: %s", resource.NAME, resource.resource_id)
        return resource

    async def delete(self, target: DeletePayload | Resource) -> None:
        payload = self._as_delete_payload(target)
        await self._request("DELETE", payload.resource_type.NAME, data=payload.to_body())
        logger.info("Deleted Beeswax %s: %s", payload.resource_type.NAME, payload.to_body())

    async def aclose(self) -> None:
        await self.http_client.aclose()

    async def __aenter__(self) -> "AsyncBeeswaxClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

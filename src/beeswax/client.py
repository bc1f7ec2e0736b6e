"""Beeswax API client.

Handles authentication and CRUD requests against the Buzz REST API.
Endpoint: {base_url}/rest/{resource_name}
Auth: credentials POSTed to /rest/authenticate, session cookie kept by the HTTP session.
Every response body is wrapped as {"success": bool, "payload": ...}.
"""

import logging
from typing import Any

import requests
from pydantic import ValidationError
from requests.exceptions import RequestException

from beeswax.config import BeeswaxConnectionConfig
from beeswax.errors import BeeswaxAPIError, BeeswaxAuthenticationError
from beeswax.resources.authenticate import Authenticate
from beeswax.resources.base import (
    CreatedId,
    CreatePayload,
    DeletePayload,
    ReadPayload,
    Resource,
    ResponseEnvelope,
)
from beeswax.version import user_agent

logger = logging.getLogger(__name__)


class BaseBeeswaxClient:
    """URL building and response handling shared by the sync and async clients.

    Attributes:
        base_url: Base URL of the Buzz instance (e.g. https://buzzkey.api.beeswax.com)
        timeout: Request timeout in seconds
    """

    DEFAULT_TIMEOUT = 30
    REST_PATH = "rest"

    def __init__(self, base_url: str, timeout: int = DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _build_url(self, resource_name: str) -> str:
        """Build the endpoint URL for a resource name."""
        return f"{self.base_url}/{self.REST_PATH}/{resource_name}"

    @staticmethod
    def _default_headers() -> dict[str, str]:
        return {"User-Agent": user_agent(), "Accept": "application/json"}

    @staticmethod
    def _error_message(body: Any) -> str | None:
        if not isinstance(body, dict):
            return None
        if body.get("message"):
            return str(body["message"])
        if body.get("errors"):
            return "; ".join(str(error) for error in body["errors"])
        return None

    def _handle_response(self, response: Any) -> ResponseEnvelope:
        """Handle API response and raise errors if needed.

        Args:
            response: A requests or httpx response object

        Returns:
            The parsed response envelope

        Raises:
            BeeswaxAPIError: If the HTTP status or the envelope indicates an error
        """
        try:
            body = response.json() if response.content else None
        except ValueError:
            body = response.text

        status_code = response.status_code
        if status_code in (401, 403):
            raise BeeswaxAuthenticationError(
                f"Beeswax API Auth Denied (HTTP {status_code})",
                status_code=status_code,
                response_body=body,
            )

        if status_code == 404:
            raise BeeswaxAPIError(
                "Resource not found (HTTP 404)",
                status_code=404,
                response_body=body,
            )

        if status_code >= 500:
            raise BeeswaxAPIError(
                f"Beeswax API server error (HTTP {status_code})",
                status_code=status_code,
                response_body=body,
            )

        if status_code >= 400:
            raise BeeswaxAPIError(
                f"Beeswax API error (HTTP {status_code}): {self._error_message(body) or body}",
                status_code=status_code,
                response_body=body,
            )

        if not isinstance(body, dict):
            raise BeeswaxAPIError(
                "Beeswax API returned a body without a response envelope",
                status_code=status_code,
                response_body=body,
            )

        try:
            envelope = ResponseEnvelope.model_validate(body)
        except ValidationError as e:
            raise BeeswaxAPIError(
                f"Malformed Beeswax response envelope: {e}",
                status_code=status_code,
                response_body=body,
            ) from e

        if not envelope.success:
            message = self._error_message(body) or "request was not successful"
            logger.warning("Beeswax API reported failure: %s", message)
            raise BeeswaxAPIError(
                f"Beeswax API error: {message}",
                status_code=status_code,
                response_body=body,
            )

        return envelope

    @staticmethod
    def _parse_resources(resource_type: type[Resource], envelope: ResponseEnvelope) -> list[Resource]:
        payload = envelope.payload if envelope.payload is not None else []
        if not isinstance(payload, list):
            raise BeeswaxAPIError(
                f"Expected a list of {resource_type.NAME} objects, got {type(payload).__name__}",
                response_body=envelope.model_dump(),
            )
        try:
            return [resource_type.model_validate(item) for item in payload]
        except ValidationError as e:
            raise BeeswaxAPIError(
                f"Could not parse {resource_type.NAME} response: {e}",
                response_body=envelope.model_dump(),
            ) from e

    @staticmethod
    def _parse_created(payload: CreatePayload, envelope: ResponseEnvelope) -> Resource:
        try:
            created = CreatedId.model_validate(envelope.payload)
        except ValidationError as e:
            raise BeeswaxAPIError(
                f"Create {payload.resource_type.NAME} response carried no id: {e}",
                response_body=envelope.model_dump(),
            ) from e
        logger.info("Created Beeswax %s: %s", payload.resource_type.NAME, created.id)
        return payload.into_resource(created.id)

    @staticmethod
    def _as_delete_payload(target: DeletePayload | Resource) -> DeletePayload:
        if isinstance(target, Resource):
            return target.to_delete()
        return target

    @staticmethod
    def _authentication_failed(error: BeeswaxAPIError) -> BeeswaxAuthenticationError:
        if isinstance(error, BeeswaxAuthenticationError):
            return error
        return BeeswaxAuthenticationError(
            f"Authentication failed: {error}",
            status_code=error.status_code,
            response_body=error.response_body,
        )


class BeeswaxClient(BaseBeeswaxClient):
    """Client for interacting with the Beeswax API.

    Usage:
        client = BeeswaxClient.authenticated(url, Authenticate.simple(user, password))
        advertiser = client.create(Advertiser.create_request(advertiser_name="Example"))
        advertiser.active = True
        client.update(advertiser)
        client.read(Advertiser.read_request(advertiser_id=advertiser.advertiser_id))
        client.delete(advertiser)
    """

    def __init__(
        self,
        base_url: str,
        timeout: int = BaseBeeswaxClient.DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ):
        """Initialize the Beeswax client.

        Args:
            base_url: Base URL of the Buzz instance
            timeout: Request timeout in seconds
            session: Optional requests session; its cookie jar holds the login session
        """
        super().__init__(base_url, timeout)
        self.session = session or requests.Session()
        self.session.headers.update(self._default_headers())

    @classmethod
    def authenticated(cls, base_url: str, auth: Authenticate, **kwargs: Any) -> "BeeswaxClient":
        """Create a client and log it in."""
        client = cls(base_url, **kwargs)
        try:
            client.authenticate(auth)
        except BeeswaxAPIError:
            client.close()
            raise
        return client

    @classmethod
    def from_config(cls, config: BeeswaxConnectionConfig, session: requests.Session | None = None) -> "BeeswaxClient":
        """Create a client logged in with the credentials of ``config``."""
        return cls.authenticated(config.base_url, config.to_authenticate(), timeout=config.timeout, session=session)

    def _request(
        self,
        method: str,
        resource_name: str,
        data: dict[str, Any] | None = None,
        query_params: dict[str, Any] | None = None,
    ) -> ResponseEnvelope:
        """Make an API request.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            resource_name: Endpoint name of the resource
            data: JSON request body
            query_params: Query parameters

        Returns:
            Parsed response envelope

        Raises:
            BeeswaxAPIError: If request fails
        """
        url = self._build_url(resource_name)
        logger.debug("%s %s params=%s", method, url, query_params)

        try:
            response = self.session.request(
                method=method,
                url=url,
                json=data,
                params=query_params,
                timeout=self.timeout,
            )
        except RequestException as e:
            raise BeeswaxAPIError(f"Request failed: {e}") from e
        return self._handle_response(response)

    def authenticate(self, auth: Authenticate) -> None:
        """Open a session. Later requests are authorized by the session cookie.

        Raises:
            BeeswaxAuthenticationError: If Buzz rejects the credentials
        """
        try:
            self._request("POST", Authenticate.NAME, data=auth.to_body())
        except BeeswaxAPIError as e:
            if e.response_body is None and e.status_code is None:
                raise
            raise self._authentication_failed(e) from e
        logger.info("Authenticated with Beeswax at %s as %s", self.base_url, auth.email)

    def read(self, criteria: ReadPayload) -> list[Resource]:
        """Find resources matching the search criteria."""
        resource_type = criteria.resource_type
        envelope = self._request("GET", resource_type.NAME, query_params=criteria.to_query_params())
        return self._parse_resources(resource_type, envelope)

    def create(self, payload: CreatePayload) -> Resource:
        """Create a resource and return it with its new ID."""
        envelope = self._request("POST", payload.resource_type.NAME, data=payload.to_body())
        return self._parse_created(payload, envelope)

    def update(self, resource: Resource) -> Resource:
        """Replace the remote object with ``resource``."""
        self._request("PUT", resource.NAME, data=resource.to_body())
        logger.info("Updated Beeswax %s: %s", resource.NAME, resource.resource_id)
        return resource

    def delete(self, target: DeletePayload | Resource) -> None:
        """Delete a resource, given either its delete payload or the resource itself."""
        payload = self._as_delete_payload(target)
        self._request("DELETE", payload.resource_type.NAME, data=payload.to_body())
        logger.info("Deleted Beeswax %s: %s", payload.resource_type.NAME, payload.to_body())

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "BeeswaxClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

"""In-memory Beeswax clients for fast unit tests without network calls.

Both clients keep resources in a process-local list and answer reads with
the same "unset means any value" filtering the payloads define.
"""

import logging
import random
from typing import Any

from beeswax.errors import BeeswaxAPIError
from beeswax.resources.authenticate import Authenticate
from beeswax.resources.base import CreatePayload, DeletePayload, ReadPayload, Resource

logger = logging.getLogger(__name__)


class InMemoryBeeswaxClient:
    """Test double with the interface of ``BeeswaxClient``.

    IDs are drawn at random from ``[1, MAX_ID)``, never reusing one that is
    still stored for the same resource type.
    """

    MAX_ID = 100000

    def __init__(self, seed: int | None = None):
        self._store: list[Resource] = []
        self._random = random.Random(seed)
        self.authenticated_as: str | None = None

    def authenticate(self, auth: Authenticate) -> None:
        self.authenticated_as = auth.email

    def read(self, criteria: ReadPayload) -> list[Resource]:
        return [
            resource.model_copy(deep=True)
            for resource in self._store
            if isinstance(resource, criteria.resource_type) and criteria.matches(resource)
        ]

    def create(self, payload: CreatePayload) -> Resource:
        resource = payload.into_resource(self._new_id(payload.resource_type))
        self._store.append(resource.model_copy(deep=True))
        logger.debug("Stored %s %s", resource.NAME, resource.resource_id)
        return resource

    def update(self, resource: Resource) -> Resource:
        index = self._index_of(type(resource), resource.resource_id)
        self._store[index] = resource.model_copy(deep=True)
        return resource

    def delete(self, target: DeletePayload | Resource) -> None:
        payload = target.to_delete() if isinstance(target, Resource) else target
        resource_type = payload.resource_type
        index = self._index_of(resource_type, getattr(payload, resource_type.ID_FIELD))
        del self._store[index]

    def _new_id(self, resource_type: type[Resource]) -> int:
        taken = {r.resource_id for r in self._store if isinstance(r, resource_type)}
        if len(taken) >= self.MAX_ID - 1:
            raise BeeswaxAPIError(f"No free {resource_type.NAME} ids left")
        while True:
            candidate = self._random.randrange(1, self.MAX_ID)
            if candidate not in taken:
                return candidate

    def _index_of(self, resource_type: type[Resource], resource_id: Any) -> int:
        for index, stored in enumerate(self._store):
            if type(stored) is resource_type and stored.resource_id == resource_id:
                return index
        raise BeeswaxAPIError(
            f"{resource_type.NAME} {resource_id} not found",
            status_code=404,
        )


class AsyncInMemoryBeeswaxClient:
    """Async test double with the interface of ``AsyncBeeswaxClient``."""

    def __init__(self, seed: int | None = None):
        self._client = InMemoryBeeswaxClient(seed)

    @property
    def authenticated_as(self) -> str | None:
        return self._client.authenticated_as

    async def authenticate(self, auth: Authenticate) -> None:
        self._client.authenticate(auth)

    async def read(self, criteria: ReadPayload) -> list[Resource]:
        return self._client.read(criteria)

    async def create(self, payload: CreatePayload) -> Resource:
        return self._client.create(payload)

    async def update(self, resource: Resource) -> Resource:
        return self._client.update(resource)

    async def delete(self, target: DeletePayload | Resource) -> None:
        self._client.delete(target)

    async def aclose(self) -> None:
        return None

    async def __aenter__(self) -> "AsyncInMemoryBeeswaxClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        return None

"""Base models for Beeswax resources and their request payloads.

Every Buzz entity is a ``Resource`` with a fixed endpoint ``NAME`` and an
``ID_FIELD`` holding the server-assigned identifier. Requests against it are
built from three payload shapes:

- ``CreatePayload``: the fields accepted on POST, without the ID
- ``ReadPayload``: optional filters sent as a query string on GET
- ``DeletePayload``: the ID only, sent as the DELETE body

Invariants such as "advertiser names are unique per account" belong to the
remote API and are not checked here.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from beeswax.errors import UnsupportedOperationError


class Resource(BaseModel):
    """A remote Buzz entity.

    Unknown fields returned by the server are kept so that a PUT, which
    replaces the whole object, sends back everything that was read.
    """

    model_config = ConfigDict(extra="allow")

    NAME: ClassVar[str]
    ID_FIELD: ClassVar[str | None] = None

    @property
    def resource_id(self) -> Any:
        """Value of the server-assigned identifier."""
        if not self.ID_FIELD:
            raise UnsupportedOperationError(f"{type(self).__name__} has no identifier field")
        return getattr(self, self.ID_FIELD)

    @classmethod
    def create_request(cls, **fields: Any) -> "CreatePayload":
        """Build the create payload for this resource."""
        return cls._payload_type("create")(**fields)

    @classmethod
    def read_request(cls, **fields: Any) -> "ReadPayload":
        """Build a read filter for this resource. Unset fields match anything."""
        return cls._payload_type("read")(**fields)

    @classmethod
    def delete_request(cls, resource_id: Any) -> "DeletePayload":
        """Build the delete payload for the resource with ``resource_id``."""
        return cls._payload_type("delete")(**{cls.ID_FIELD: resource_id})

    @classmethod
    def _payload_type(cls, kind: str) -> type:
        from beeswax.resources.registry import get_resource_schemas

        schemas = get_resource_schemas(cls.NAME)
        payload_type = getattr(schemas, kind, None) if schemas else None
        if payload_type is None:
            raise UnsupportedOperationError(f"Resource '{cls.NAME}' does not support {kind} requests")
        return payload_type

    def to_delete(self) -> "DeletePayload":
        """Reduce this resource to its delete payload."""
        return self.delete_request(self.resource_id)

    def to_body(self) -> dict[str, Any]:
        """Serialize for a PUT body."""
        return self.model_dump(mode="json")


class FreeformResource(Resource):
    """A resource whose rows have no fixed schema (views).

    Row values are reachable by key, like a read-only mapping.
    """

    def __getitem__(self, key: str) -> Any:
        return (self.model_extra or {})[key]

    def __contains__(self, key: object) -> bool:
        return key in (self.model_extra or {})

    def get(self, key: str, default: Any = None) -> Any:
        return (self.model_extra or {}).get(key, default)

    def to_dict(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


class RequestPayload(BaseModel):
    """Base for the typed request shapes sent to the API."""

    model_config = ConfigDict(extra="forbid")

    resource_type: ClassVar[type[Resource]]

    def to_body(self) -> dict[str, Any]:
        """Serialize as a JSON request body."""
        return self.model_dump(mode="json")


class CreatePayload(RequestPayload):
    """Fields sent on POST. The server answers with the new ID."""

    def into_resource(self, resource_id: int) -> Resource:
        """Combine this payload with the server-assigned ID.

        Server-managed fields (dates, account, buzz key) keep their defaults.
        """
        data = self.model_dump()
        data[self.resource_type.ID_FIELD] = resource_id
        return self.resource_type.model_validate(data)


class ReadPayload(RequestPayload):
    """Search criteria. ``None`` means "any value"."""

    def to_query_params(self) -> dict[str, Any]:
        """Serialize the set fields as query-string parameters."""
        params: dict[str, Any] = {}
        for key, value in self.model_dump(mode="json", exclude_none=True).items():
            if isinstance(value, bool):
                value = "true" if value else "false"
            params[key] = value
        return params

    def matches(self, resource: Resource) -> bool:
        """Equality predicate against a resource, unset fields being wildcards."""
        if not isinstance(resource, self.resource_type):
            return False
        for field_name in type(self).model_fields:
            expected = getattr(self, field_name)
            if expected is None:
                continue
            if getattr(resource, field_name, None) != expected:
                return False
        return True


class DeletePayload(RequestPayload):
    """Identifies the resource to remove."""

    @classmethod
    def from_resource(cls, resource: Resource) -> "DeletePayload":
        return cls(**{cls.resource_type.ID_FIELD: resource.resource_id})


class ResponseEnvelope(BaseModel):
    """The ``{"success": ..., "payload": ...}`` wrapper around every response."""

    model_config = ConfigDict(extra="allow")

    success: bool
    payload: Any = None
    message: str | None = None
    errors: list[Any] | None = None


class CreatedId(BaseModel):
    """Payload of a successful POST."""

    model_config = ConfigDict(extra="allow")

    id: int

"""
Resource schema registry.

Maps each resource endpoint name to its model and the payload classes
available for it. Resources without a create, read or delete shape leave the
slot empty, and asking for it raises ``UnsupportedOperationError``.
"""

from dataclasses import dataclass

from beeswax.resources.base import CreatePayload, DeletePayload, ReadPayload, Resource

__all__ = [
    "ResourceSchemas",
    "RESOURCE_REGISTRY",
    "get_resource_schemas",
    "register_resource_schemas",
    "registered_resource_names",
]


@dataclass
class ResourceSchemas:
    """Container for a resource's model and payload classes."""

    resource: type[Resource]
    create: type[CreatePayload] | None = None
    read: type[ReadPayload] | None = None
    delete: type[DeletePayload] | None = None


# Registry mapping resource name -> ResourceSchemas
# Populated lazily on first access
RESOURCE_REGISTRY: dict[str, ResourceSchemas] = {}
_REGISTRY_INITIALIZED = False


def register_resource_schemas(
    resource: type[Resource],
    create: type[CreatePayload] | None = None,
    read: type[ReadPayload] | None = None,
    delete: type[DeletePayload] | None = None,
) -> None:
    """Register the payload classes of a resource under its ``NAME``.

    Args:
        resource: The resource model
        create: Optional create payload class
        read: Optional read filter class
        delete: Optional delete payload class
    """
    for payload in (create, read, delete):
        if payload is not None and payload.resource_type is not resource:
            raise ValueError(f"{payload.__name__} does not target {resource.__name__}")

    RESOURCE_REGISTRY[resource.NAME] = ResourceSchemas(
        resource=resource,
        create=create,
        read=read,
        delete=delete,
    )


def get_resource_schemas(name: str) -> ResourceSchemas | None:
    """Get schemas for a resource name.

    Lazily registers the built-in resources on first access to avoid
    circular imports.

    Args:
        name: Resource endpoint name (e.g., "advertiser")

    Returns:
        ResourceSchemas if registered, None otherwise
    """
    _ensure_registered()
    return RESOURCE_REGISTRY.get(name)


def registered_resource_names() -> list[str]:
    """Names of every registered resource, sorted."""
    _ensure_registered()
    return sorted(RESOURCE_REGISTRY)


def _ensure_registered() -> None:
    global _REGISTRY_INITIALIZED
    if not _REGISTRY_INITIALIZED:
        _register_all_resources()
        _REGISTRY_INITIALIZED = True


def _register_all_resources() -> None:
    """Register the resources shipped with this package."""
    from beeswax.resources.account_alert import AccountAlert, CreateAccountAlert, DeleteAccountAlert
    from beeswax.resources.advertiser import Advertiser, CreateAdvertiser, DeleteAdvertiser, ReadAdvertiser
    from beeswax.resources.authenticate import Authenticate
    from beeswax.resources.campaign import Campaign, CreateCampaign, DeleteCampaign, ReadCampaign
    from beeswax.resources.creative import CreateCreative, Creative, DeleteCreative, ReadCreative
    from beeswax.resources.creative_line_item import (
        CreateCreativeLineItem,
        CreativeLineItem,
        DeleteCreativeLineItem,
        ReadCreativeLineItem,
    )
    from beeswax.resources.line_item import CreateLineItem, DeleteLineItem, LineItem, ReadLineItem
    from beeswax.resources.view import ReadView, ReadViewList, View, ViewList

    register_resource_schemas(AccountAlert, create=CreateAccountAlert, delete=DeleteAccountAlert)
    register_resource_schemas(Advertiser, create=CreateAdvertiser, read=ReadAdvertiser, delete=DeleteAdvertiser)
    register_resource_schemas(Authenticate)
    register_resource_schemas(Campaign, create=CreateCampaign, read=ReadCampaign, delete=DeleteCampaign)
    register_resource_schemas(Creative, create=CreateCreative, read=ReadCreative, delete=DeleteCreative)
    register_resource_schemas(
        CreativeLineItem,
        create=CreateCreativeLineItem,
        read=ReadCreativeLineItem,
        delete=DeleteCreativeLineItem,
    )
    register_resource_schemas(LineItem, create=CreateLineItem, read=ReadLineItem, delete=DeleteLineItem)
    register_resource_schemas(View, read=ReadView)
    register_resource_schemas(ViewList, read=ReadViewList)

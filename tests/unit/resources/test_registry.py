"""Tests for the resource schema registry."""

from typing import ClassVar

import pytest

from beeswax.resources import (
    Advertiser,
    CreateAdvertiser,
    DeleteAdvertiser,
    ReadAdvertiser,
    ReadView,
    View,
    get_resource_schemas,
    register_resource_schemas,
    registered_resource_names,
)
from beeswax.resources.base import ReadPayload, Resource
from beeswax.resources.registry import RESOURCE_REGISTRY


class TestResourceRegistry:
    """Tests for resource schema lookup and registration."""

    def test_builtin_resources_registered(self):
        assert registered_resource_names() == [
            "account_alert",
            "advertiser",
            "authenticate",
            "campaign",
            "creative",
            "creative_line_item",
            "line_item",
            "view",
            "view_list",
        ]

    def test_get_resource_schemas(self):
        schemas = get_resource_schemas("advertiser")

        assert schemas.resource is Advertiser
        assert schemas.create is CreateAdvertiser
        assert schemas.read is ReadAdvertiser
        assert schemas.delete is DeleteAdvertiser

    def test_views_are_read_only(self):
        schemas = get_resource_schemas("view")

        assert schemas.resource is View
        assert schemas.read is ReadView
        assert schemas.create is None
        assert schemas.delete is None

    def test_unknown_resource(self):
        assert get_resource_schemas("segment") is None

    def test_register_custom_resource(self):
        class Segment(Resource):
            NAME: ClassVar[str] = "segment"
            ID_FIELD: ClassVar[str] = "segment_id"

            segment_id: int

        class ReadSegment(ReadPayload):
            resource_type: ClassVar[type[Resource]] = Segment

            segment_id: int | None = None

        try:
            register_resource_schemas(Segment, read=ReadSegment)

            assert get_resource_schemas("segment").read is ReadSegment
            assert isinstance(Segment.read_request(segment_id=1), ReadSegment)
        finally:
            RESOURCE_REGISTRY.pop("segment", None)

    def test_register_rejects_mismatched_payload(self):
        class Segment(Resource):
            NAME: ClassVar[str] = "segment"

        with pytest.raises(ValueError, match="does not target"):
            register_resource_schemas(Segment, read=ReadAdvertiser)

        assert get_resource_schemas("segment") is None

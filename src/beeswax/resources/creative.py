"""Creatives.

A Creative defines the payload delivered to the end user. Creatives belong
to Advertisers and are attached to Line Items through Creative Line Items.
"""

from typing import Any, ClassVar

from pydantic import Field

from beeswax.resources.advertiser import Advertiser
from beeswax.resources.base import CreatePayload, DeletePayload, ReadPayload, Resource
from beeswax.resources.common import CreativeType


class Creative(Resource):
    NAME: ClassVar[str] = "creative"
    ID_FIELD: ClassVar[str] = "creative_id"

    creative_id: int
    advertiser_id: int
    creative_name: str = Field(..., description='e.g. "Blue Banner Ad"')
    creative_type: CreativeType = CreativeType.BANNER
    width: int | None = Field(default=None, description="See the creative_sizes view for valid sizes")
    height: int | None = None
    sizeless: bool | None = Field(default=None, description="Matches any interstitial placement; native is sizeless")
    secure: bool = False
    click_url: str | None = Field(default=None, description="Required when the template is not a tag")
    primary_asset: int | None = None
    secondary_asset: int | None = None
    native_offer: int | None = None
    creative_content: dict[str, Any] | None = None
    creative_content_tag: str | None = None
    creative_template_id: int = 0
    creative_rule_id: int | None = None
    creative_rule_key: str | None = None
    attributes: dict[str, Any] | None = None
    pixels: list[str] | None = None
    events: Any = None
    progress_events: Any = None
    creative_addons: list[int] | None = None
    creative_thumbnail_url: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    alternative_id: str | None = None
    notes: str | None = None
    active: bool | None = None

    # Server-managed
    creative_status_id: Any = None
    creative_attributes: Any = None
    creative_content_munge: str | None = None
    preview_token: str | None = None
    push_status: int | None = None
    push_update: bool | None = None
    account_id: int | None = None
    create_date: str | None = None
    update_date: str | None = None
    buzz_key: str | None = None


class ReadCreative(ReadPayload):
    resource_type: ClassVar[type[Resource]] = Creative

    creative_id: int | None = None
    advertiser_id: int | None = None
    creative_name: str | None = None
    creative_type: CreativeType | None = None
    creative_template_id: int | None = None
    alternative_id: str | None = None
    active: bool | None = None
    create_date: str | None = None
    update_date: str | None = None

    @classmethod
    def for_advertiser(cls, advertiser: Advertiser) -> "ReadCreative":
        """All creatives owned by ``advertiser``."""
        return cls(advertiser_id=advertiser.advertiser_id)


class CreateCreative(CreatePayload):
    resource_type: ClassVar[type[Resource]] = Creative

    advertiser_id: int
    creative_name: str
    creative_type: CreativeType = CreativeType.BANNER
    width: int | None = None
    height: int | None = None
    sizeless: bool | None = None
    secure: bool = False
    click_url: str | None = None
    primary_asset: int | None = None
    secondary_asset: int | None = None
    native_offer: int | None = None
    creative_content: dict[str, Any] | None = None
    creative_content_tag: str | None = None
    creative_template_id: int
    creative_rule_id: int | None = None
    creative_rule_key: str | None = None
    attributes: dict[str, Any] | None = None
    pixels: list[str] | None = None
    events: Any = None
    progress_events: Any = None
    creative_addons: list[int] | None = None
    creative_thumbnail_url: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    alternative_id: str | None = None
    notes: str | None = None
    active: bool | None = None


class DeleteCreative(DeletePayload):
    resource_type: ClassVar[type[Resource]] = Creative

    creative_id: int

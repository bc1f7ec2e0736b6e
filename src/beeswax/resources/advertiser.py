"""Advertisers.

Every Campaign, Line Item and Creative belongs to an Advertiser, typically
the entity paying the bills for the ads that run.
"""

from typing import Any, ClassVar

from pydantic import Field

from beeswax.resources.base import CreatePayload, DeletePayload, ReadPayload, Resource
from beeswax.resources.common import ContinentCode, ConversionMethod, CurrencyCode


class Advertiser(Resource):
    NAME: ClassVar[str] = "advertiser"
    ID_FIELD: ClassVar[str] = "advertiser_id"

    advertiser_id: int
    advertiser_name: str = Field(..., description="Unique name for the advertiser, must be unique per account")
    attributes: dict[str, Any] | None = Field(
        default=None,
        description="Attributes by module, e.g. {'advertiser': {'advertiser_domain': ['example.com']}}",
    )
    conversion_method_id: ConversionMethod = Field(
        default=ConversionMethod.LAST_CLICK,
        description="Conversion attribution for events owned by this advertiser. Cannot be changed once chosen.",
    )
    default_click_url: str | None = None
    default_continent: ContinentCode | None = None
    default_currency: CurrencyCode | None = None
    default_creative_thumbnail_url: str | None = None
    default_campaign_preset_id: int | None = None
    default_line_item_preset_id: int | None = None
    alternative_id: str | None = None
    notes: str | None = Field(default=None, description="Free-text notes, less than 255 chars")
    active: bool = False

    # Server-managed
    account_id: int | None = None
    create_date: str | None = None
    update_date: str | None = None
    buzz_key: str | None = None


class ReadAdvertiser(ReadPayload):
    resource_type: ClassVar[type[Resource]] = Advertiser

    advertiser_id: int | None = None
    alternative_id: str | None = None
    advertiser_name: str | None = Field(default=None, description="Supports %LIKE% syntax on the server")
    create_date: str | None = None
    update_date: str | None = None


class CreateAdvertiser(CreatePayload):
    resource_type: ClassVar[type[Resource]] = Advertiser

    advertiser_name: str
    attributes: dict[str, Any] | None = None
    conversion_method_id: ConversionMethod = ConversionMethod.LAST_CLICK
    default_click_url: str | None = None
    default_continent: ContinentCode | None = None
    default_currency: CurrencyCode | None = None
    default_creative_thumbnail_url: str | None = None
    default_campaign_preset_id: int | None = None
    default_line_item_preset_id: int | None = None
    alternative_id: str | None = None
    notes: str | None = None
    active: bool = False


class DeleteAdvertiser(DeletePayload):
    resource_type: ClassVar[type[Resource]] = Advertiser

    advertiser_id: int

"""Line Items.

A Line Item defines the objectives, budget and timing for a portion of a
Campaign. It belongs to one Campaign, is tied to one Targeting Template and
serves the Creatives attached to it through Creative Line Items.
"""

from typing import ClassVar

from pydantic import Field

from beeswax.resources.base import CreatePayload, DeletePayload, ReadPayload, Resource
from beeswax.resources.campaign import Campaign
from beeswax.resources.common import BiddingStrategy, FrequencyCap, RevenueType, WeightingMethod


class LineItem(Resource):
    NAME: ClassVar[str] = "line_item"
    ID_FIELD: ClassVar[str] = "line_item_id"

    line_item_id: int
    campaign_id: int
    advertiser_id: int
    line_item_type_id: int = Field(default=0, description="See the line_item_types view")
    targeting_template_id: int | None = None
    line_item_name: str
    line_item_budget: float = 0.0
    daily_budget: float | None = None
    budget_type: int | None = None
    revenue_type: RevenueType | None = None
    revenue_amount: float | None = None
    bid_modifier_id: int | None = None
    delivery_modifier_id: int | None = None
    max_bid: float | None = None
    bidding: BiddingStrategy = Field(default_factory=BiddingStrategy)
    creative_weighting_method: WeightingMethod | None = None
    test_group_id: int | None = None
    start_date: str = ""
    end_date: str | None = None
    frequency_cap: list[FrequencyCap] | None = None
    frequency_cap_type: int | None = None
    user_timezones: list[str] | None = None
    alternative_id: str | None = None
    notes: str | None = None
    active: bool = False

    # Server-managed
    line_item_version: int = 0
    line_item_spend: float = 0.0
    currency: str = ""
    push_status: int = 0
    push_update: bool = False
    account_id: int = 0
    create_date: str | None = None
    update_date: str | None = None
    buzz_key: str = ""


class ReadLineItem(ReadPayload):
    resource_type: ClassVar[type[Resource]] = LineItem

    line_item_id: int | None = None
    campaign_id: int | None = None
    advertiser_id: int | None = None
    line_item_type_id: int | None = None
    line_item_name: str | None = None
    bid_modifier_id: int | None = None
    delivery_modifier_id: int | None = None
    start_date: str | None = None
    end_date: str | None = None
    alternative_id: str | None = None
    active: bool | None = None
    create_date: str | None = None
    update_date: str | None = None

    @classmethod
    def for_campaign(cls, campaign: Campaign) -> "ReadLineItem":
        return cls(campaign_id=campaign.campaign_id, advertiser_id=campaign.advertiser_id)


class CreateLineItem(CreatePayload):
    resource_type: ClassVar[type[Resource]] = LineItem

    campaign_id: int
    advertiser_id: int
    line_item_type_id: int = 0
    targeting_template_id: int | None = None
    line_item_name: str
    line_item_budget: float = 0.0
    daily_budget: float | None = None
    budget_type: int | None = None
    revenue_type: RevenueType | None = None
    revenue_amount: float | None = None
    bid_modifier_id: int | None = None
    delivery_modifier_id: int | None = None
    max_bid: float | None = None
    bidding: BiddingStrategy = Field(default_factory=BiddingStrategy)
    creative_weighting_method: WeightingMethod | None = None
    test_group_id: int | None = None
    start_date: str = ""
    end_date: str | None = None
    frequency_cap: list[FrequencyCap] | None = None
    frequency_cap_type: int | None = None
    user_timezones: list[str] | None = None
    alternative_id: str | None = None
    notes: str | None = None
    active: bool = False


class DeleteLineItem(DeletePayload):
    resource_type: ClassVar[type[Resource]] = LineItem

    line_item_id: int

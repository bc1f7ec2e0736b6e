"""Campaigns.

A Campaign defines the overall budget and timing for one or more Line Items
and belongs to a single Advertiser.
"""

from typing import ClassVar

from pydantic import Field

from beeswax.resources.advertiser import Advertiser
from beeswax.resources.base import CreatePayload, DeletePayload, ReadPayload, Resource
from beeswax.resources.common import (
    BudgetType,
    ContinentCode,
    CurrencyCode,
    FrequencyCap,
    FrequencyCapType,
    RevenueType,
)


class Campaign(Resource):
    NAME: ClassVar[str] = "campaign"
    ID_FIELD: ClassVar[str] = "campaign_id"

    campaign_id: int
    advertiser_id: int = Field(..., description="Must belong to the same account and be active")
    campaign_name: str
    campaign_budget: float = Field(default=0.0, description="Maximum amount to spend on this campaign")
    daily_budget: float | None = Field(
        default=None,
        description="Cannot exceed campaign_budget or be lower than the daily_budget of any of its line items",
    )
    budget_type: BudgetType | None = None
    revenue_type: RevenueType | None = None
    revenue_amount: float | None = Field(
        default=None,
        description="Basis of the revenue calculation, e.g. a 5.12 CPM when revenue_type is CPM",
    )
    bid_modifier_id: int | None = Field(default=None, description="If set, max_bid must also be set")
    delivery_modifier_id: int | None = None
    max_bid: float | None = None
    start_date: str = Field(default="", description="No line item may start before this date")
    end_date: str | None = Field(default=None, description="Required in order to pace")
    frequency_cap: list[FrequencyCap] | None = None
    frequency_cap_type: FrequencyCapType | None = None
    continents: list[ContinentCode] | None = Field(default=None, description="Inherited from the advertiser if blank")
    currency: CurrencyCode | None = Field(default=None, description="Cannot be changed once set")
    alternative_id: str | None = None
    notes: str | None = None
    active: bool = False

    # Server-managed
    campaign_spend: float = 0.0
    push_status: int = 0
    push_update: bool | int | None = None
    account_id: int = 0
    create_date: str | None = None
    update_date: str | None = None
    buzz_key: str = ""


class ReadCampaign(ReadPayload):
    resource_type: ClassVar[type[Resource]] = Campaign

    campaign_id: int | None = None
    advertiser_id: int | None = None
    campaign_name: str | None = None
    bid_modifier_id: int | None = None
    delivery_modifier_id: int | None = None
    alternative_id: str | None = None
    active: bool | None = None
    create_date: str | None = None
    update_date: str | None = None

    @classmethod
    def for_advertiser(cls, advertiser: Advertiser) -> "ReadCampaign":
        return cls(advertiser_id=advertiser.advertiser_id)


class CreateCampaign(CreatePayload):
    resource_type: ClassVar[type[Resource]] = Campaign

    advertiser_id: int
    campaign_name: str
    campaign_budget: float = 0.0
    daily_budget: float | None = None
    budget_type: BudgetType | None = None
    revenue_type: RevenueType | None = None
    revenue_amount: float | None = None
    bid_modifier_id: int | None = None
    delivery_modifier_id: int | None = None
    max_bid: float | None = None
    start_date: str = ""
    end_date: str | None = None
    frequency_cap: list[FrequencyCap] | None = None
    frequency_cap_type: FrequencyCapType | None = None
    continents: list[ContinentCode] | None = None
    currency: CurrencyCode | None = None
    alternative_id: str | None = None
    notes: str | None = None
    active: bool = False


class DeleteCampaign(DeletePayload):
    resource_type: ClassVar[type[Resource]] = Campaign

    campaign_id: int

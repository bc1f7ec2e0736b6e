"""Enumerations and sub-objects shared by several Buzz resources."""

from enum import Enum, IntEnum
from typing import Annotated

from pydantic import BaseModel, Field


class ConversionMethod(IntEnum):
    """Conversion attribution method. Only last click is supported by Buzz."""

    LAST_CLICK = 1


class CreativeType(IntEnum):
    BANNER = 0
    VIDEO = 1
    NATIVE = 2


class BudgetType(IntEnum):
    SPEND = 0
    IMPRESSIONS = 1
    SPEND_WITH_VENDOR_FEES = 2


class FrequencyCapType(IntEnum):
    """How users are identified when frequency capping."""

    STANDARD = 0
    IP_ADDRESS = 1


class RevenueType(str, Enum):
    CPM = "CPM"
    CPC = "CPC"
    CPCV = "CPCV"
    CPI = "CPI"
    CPA = "CPA"


class WeightingMethod(str, Enum):
    RANDOM = "RANDOM"
    WEIGHTED = "WEIGHTED"


class Currency(str, Enum):
    """ISO-4217 currencies accepted by Buzz."""

    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    CAD = "CAD"
    AUD = "AUD"
    NZD = "NZD"
    JPY = "JPY"
    CNY = "CNY"
    HKD = "HKD"
    SGD = "SGD"
    INR = "INR"
    BRL = "BRL"
    MXN = "MXN"
    CHF = "CHF"
    SEK = "SEK"
    NOK = "NOK"
    DKK = "DKK"
    PLN = "PLN"
    ZAR = "ZAR"


class Continent(str, Enum):
    """Regions a campaign can serve in (see the ``continents`` view)."""

    NORTH_AMERICA = "NAM"
    LATIN_AMERICA = "LATAM"
    EUROPE_MIDDLE_EAST_AFRICA = "EMEA"
    ASIA_PACIFIC = "APAC"


# Codes missing from the enums validate as plain strings.
CurrencyCode = Annotated[Currency | str, Field(union_mode="left_to_right")]
ContinentCode = Annotated[Continent | str, Field(union_mode="left_to_right")]


class ViewName(str, Enum):
    """Buzz views used for lookups. Any other view name may be passed as a string."""

    CONTINENTS = "continents"
    CURRENCY = "currency"
    CREATIVE_SIZES = "creative_sizes"
    CREATIVE_TYPES = "creative_types"
    CONVERSION_ATTRIBUTION_METHODS = "conversion_attribution_methods"
    LINE_ITEM_TYPES = "line_item_types"


class FrequencyCap(BaseModel):
    """One frequency cap rule."""

    duration: int | None = Field(
        default=None,
        description="Duration of time in which to cap impressions, in seconds. 30-day (2592000) max.",
    )
    impressions: int | None = Field(
        default=None,
        description="Number of impressions to allow within the duration set",
    )


class BiddingStrategy(BaseModel):
    """Line item bidding configuration."""

    bidding_strategy: str | None = Field(default=None, description="The strategy to use, for example CPM")
    values: dict[str, float] | None = Field(
        default=None,
        description='Up to five strategy-specific keys, for example {"cpm_bid": 1.21}',
    )
    custom: bool | None = Field(default=None, description="Whether this is a custom strategy of the account")
    pacing: str | None = Field(default=None, description="daily, flight, lifetime or none")

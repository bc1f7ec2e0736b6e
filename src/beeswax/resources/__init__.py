"""Beeswax resources and their create/read/delete payloads."""

from .account_alert import AccountAlert, CreateAccountAlert, DeleteAccountAlert
from .advertiser import Advertiser, CreateAdvertiser, DeleteAdvertiser, ReadAdvertiser
from .authenticate import Authenticate
from .base import CreatePayload, DeletePayload, FreeformResource, ReadPayload, RequestPayload, Resource
from .campaign import Campaign, CreateCampaign, DeleteCampaign, ReadCampaign
from .common import (
    BiddingStrategy,
    BudgetType,
    Continent,
    ContinentCode,
    ConversionMethod,
    CreativeType,
    Currency,
    CurrencyCode,
    FrequencyCap,
    FrequencyCapType,
    RevenueType,
    ViewName,
    WeightingMethod,
)
from .creative import CreateCreative, Creative, DeleteCreative, ReadCreative
from .creative_line_item import CreateCreativeLineItem, CreativeLineItem, DeleteCreativeLineItem, ReadCreativeLineItem
from .line_item import CreateLineItem, DeleteLineItem, LineItem, ReadLineItem
from .registry import ResourceSchemas, get_resource_schemas, register_resource_schemas, registered_resource_names
from .view import ReadView, ReadViewList, View, ViewList

__all__ = [
    "AccountAlert",
    "Advertiser",
    "Authenticate",
    "BiddingStrategy",
    "BudgetType",
    "Campaign",
    "Continent",
    "ContinentCode",
    "ConversionMethod",
    "CreateAccountAlert",
    "CreateAdvertiser",
    "CreateCampaign",
    "CreateCreative",
    "CreateCreativeLineItem",
    "CreateLineItem",
    "CreatePayload",
    "Creative",
    "CreativeLineItem",
    "CreativeType",
    "Currency",
    "CurrencyCode",
    "DeleteAccountAlert",
    "DeleteAdvertiser",
    "DeleteCampaign",
    "DeleteCreative",
    "DeleteCreativeLineItem",
    "DeleteLineItem",
    "DeletePayload",
    "FreeformResource",
    "FrequencyCap",
    "FrequencyCapType",
    "LineItem",
    "ReadAdvertiser",
    "ReadCampaign",
    "ReadCreative",
    "ReadCreativeLineItem",
    "ReadLineItem",
    "ReadPayload",
    "ReadView",
    "ReadViewList",
    "RequestPayload",
    "Resource",
    "ResourceSchemas",
    "RevenueType",
    "View",
    "ViewList",
    "ViewName",
    "WeightingMethod",
    "get_resource_schemas",
    "register_resource_schemas",
    "registered_resource_names",
]

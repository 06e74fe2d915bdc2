"""Data models for Google Ads reports."""

from .account import Account, AccountFilters
from .ad import (
    Ad,
    AdFilters,
    AdMetrics,
    CallOnlyAd,
    ExpandedTextAd,
    ResponsiveSearchAd,
)
from .ad_group import AdGroup, AdGroupFilters, AdGroupMetrics
from .base import SearchResult
from .campaign import Campaign, CampaignFilters, CampaignMetrics

__all__ = [
    "Account",
    "AccountFilters",
    "Ad",
    "AdFilters",
    "AdMetrics",
    "CallOnlyAd",
    "ExpandedTextAd",
    "ResponsiveSearchAd",
    "AdGroup",
    "AdGroupFilters",
    "AdGroupMetrics",
    "Campaign",
    "CampaignFilters",
    "CampaignMetrics",
    "SearchResult",
]

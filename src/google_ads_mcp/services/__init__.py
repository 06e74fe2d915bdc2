"""Report services for the Google Ads search endpoint."""

from .base import BaseReportService
from .list_ad_accounts import ListAdAccountsService
from .search_ad_groups import SearchAdGroupsService
from .search_ads import SearchAdsService
from .search_campaigns import SearchCampaignsService

__all__ = [
    "BaseReportService",
    "ListAdAccountsService",
    "SearchAdGroupsService",
    "SearchAdsService",
    "SearchCampaignsService",
]

"""Tool adapters exposed by the MCP server."""

from .base import ReportTool
from .list_ad_accounts import ListAdAccountsInput, ListAdAccountsTool
from .search_ad_groups import SearchAdGroupsInput, SearchAdGroupsTool
from .search_ads import SearchAdsInput, SearchAdsTool
from .search_campaigns import SearchCampaignsInput, SearchCampaignsTool

__all__ = [
    "ReportTool",
    "ListAdAccountsInput",
    "ListAdAccountsTool",
    "SearchAdGroupsInput",
    "SearchAdGroupsTool",
    "SearchAdsInput",
    "SearchAdsTool",
    "SearchCampaignsInput",
    "SearchCampaignsTool",
]

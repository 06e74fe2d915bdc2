"""Builds the tool adapters and their dependencies from settings."""

import logging
from dataclasses import dataclass

from google_ads_mcp.clients.auth import ServiceAccountTokenManager
from google_ads_mcp.clients.http import ReliableHTTPClient
from google_ads_mcp.core.config import Settings
from google_ads_mcp.services import (
    ListAdAccountsService,
    SearchAdGroupsService,
    SearchAdsService,
    SearchCampaignsService,
)
from google_ads_mcp.tools import (
    ListAdAccountsTool,
    SearchAdGroupsTool,
    SearchAdsTool,
    SearchCampaignsTool,
)

logger = logging.getLogger(__name__)


@dataclass
class ToolRegistry:
    """The four report tools plus the clients they share."""

    list_ad_accounts: ListAdAccountsTool
    search_campaigns: SearchCampaignsTool
    search_ad_groups: SearchAdGroupsTool
    search_ads: SearchAdsTool
    token_manager: ServiceAccountTokenManager
    http_client: ReliableHTTPClient

    async def aclose(self) -> None:
        await self.http_client.aclose()


def build_tools(settings: Settings) -> ToolRegistry:
    """Wire services and tool adapters around one token manager and HTTP client.

    Raises:
        ConfigurationError: If Google Ads credentials are missing or invalid
    """
    settings.validate_required_settings()
    google_ads = settings.google_ads
    assert google_ads is not None

    token_manager = ServiceAccountTokenManager.from_service_account_json(
        google_ads.service_account_json.get_secret_value()
    )
    http_client = ReliableHTTPClient(settings.http)

    def service(cls):
        return cls(google_ads, http_client, token_manager)

    logger.info(
        f"Google Ads tools configured for API {google_ads.api_version} "
        f"at {google_ads.base_url}"
    )
    return ToolRegistry(
        list_ad_accounts=ListAdAccountsTool(service(ListAdAccountsService)),
        search_campaigns=SearchCampaignsTool(service(SearchCampaignsService)),
        search_ad_groups=SearchAdGroupsTool(service(SearchAdGroupsService)),
        search_ads=SearchAdsTool(service(SearchAdsService)),
        token_manager=token_manager,
        http_client=http_client,
    )

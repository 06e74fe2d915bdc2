"""search_campaigns tool."""

from pydantic import Field

from google_ads_mcp.models.base import SearchResult
from google_ads_mcp.models.campaign import Campaign, CampaignFilters
from google_ads_mcp.tools.base import CustomerScopedInput, ReportTool, ToolOutput


class SearchCampaignsInput(CustomerScopedInput):
    campaign_ids: list[str] = Field(
        default_factory=list,
        description="Campaign IDs or resource names (customers/X/campaigns/Y)",
    )
    campaign_names: list[str] = Field(
        default_factory=list,
        description="Case-insensitive substrings of the campaign name",
    )
    statuses: list[str] = Field(
        default_factory=list, description="Any of ENABLED, PAUSED, REMOVED"
    )
    date_range_start: str = Field("", description="Start date in YYYY-MM-DD format")
    date_range_end: str = Field("", description="End date in YYYY-MM-DD format")


class SearchCampaignsOutput(ToolOutput):
    campaigns: list[Campaign] = Field(default_factory=list)


class SearchCampaignsTool(ReportTool[SearchCampaignsInput]):
    name = "search_campaigns"
    input_model = SearchCampaignsInput

    def to_filters(self, params: SearchCampaignsInput) -> CampaignFilters:
        return CampaignFilters(
            customer_id=params.customer_id,
            campaign_ids=params.campaign_ids,
            campaign_names=params.campaign_names,
            statuses=params.statuses,
            date_range_start=params.date_range_start,
            date_range_end=params.date_range_end,
        )

    def to_output(self, result: SearchResult[Campaign]) -> SearchCampaignsOutput:
        return SearchCampaignsOutput(
            campaigns=result.rows,
            next_page_token=result.next_page_token or None,
            total_count=result.total_results_count,
        )

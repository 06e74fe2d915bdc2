"""search_ad_groups tool."""

from pydantic import Field

from google_ads_mcp.models.ad_group import AdGroup, AdGroupFilters
from google_ads_mcp.models.base import SearchResult
from google_ads_mcp.tools.base import CustomerScopedInput, ReportTool, ToolOutput


class SearchAdGroupsInput(CustomerScopedInput):
    ad_group_ids: list[str] = Field(
        default_factory=list,
        description="Ad group IDs or resource names (customers/X/adGroups/Y)",
    )
    ad_group_names: list[str] = Field(
        default_factory=list,
        description="Case-insensitive substrings of the ad group name",
    )
    statuses: list[str] = Field(
        default_factory=list, description="Any of ENABLED, PAUSED, REMOVED"
    )
    campaign_ids: list[str] = Field(default_factory=list)
    campaign_names: list[str] = Field(default_factory=list)
    date_range_start: str = Field("", description="Start date in YYYY-MM-DD format")
    date_range_end: str = Field("", description="End date in YYYY-MM-DD format")


class SearchAdGroupsOutput(ToolOutput):
    ad_groups: list[AdGroup] = Field(default_factory=list)


class SearchAdGroupsTool(ReportTool[SearchAdGroupsInput]):
    name = "search_ad_groups"
    input_model = SearchAdGroupsInput

    def to_filters(self, params: SearchAdGroupsInput) -> AdGroupFilters:
        return AdGroupFilters(
            customer_id=params.customer_id,
            ad_group_ids=params.ad_group_ids,
            ad_group_names=params.ad_group_names,
            statuses=params.statuses,
            campaign_ids=params.campaign_ids,
            campaign_names=params.campaign_names,
            date_range_start=params.date_range_start,
            date_range_end=params.date_range_end,
        )

    def to_output(self, result: SearchResult[AdGroup]) -> SearchAdGroupsOutput:
        return SearchAdGroupsOutput(
            ad_groups=result.rows,
            next_page_token=result.next_page_token or None,
            total_count=result.total_results_count,
        )

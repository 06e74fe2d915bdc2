"""search_ads tool."""

from typing import Any

from pydantic import Field

from google_ads_mcp.models.ad import Ad, AdFilters
from google_ads_mcp.models.base import SearchResult
from google_ads_mcp.tools.base import CustomerScopedInput, ReportTool, ToolOutput


class SearchAdsInput(CustomerScopedInput):
    campaign_ids: list[str] = Field(default_factory=list)
    campaign_names: list[str] = Field(default_factory=list)
    ad_group_ids: list[str] = Field(default_factory=list)
    ad_group_names: list[str] = Field(default_factory=list)
    statuses: list[str] = Field(
        default_factory=list,
        description="Any of ENABLED, PAUSED, REMOVED, PENDING, DISAPPROVED",
    )
    ad_types: list[str] = Field(
        default_factory=list,
        description="Ad types such as RESPONSIVE_SEARCH_AD or EXPANDED_TEXT_AD",
    )
    date_range_start: str = Field("", description="Start date in YYYY-MM-DD format")
    date_range_end: str = Field("", description="End date in YYYY-MM-DD format")


def serialize_ad(ad: Ad) -> dict[str, Any]:
    """Flatten an ad, exposing its creative under a key named after its kind."""
    data = ad.model_dump(mode="json", exclude={"creative"})
    if ad.creative is not None:
        data[ad.creative.kind] = ad.creative.model_dump(mode="json", exclude={"kind"})
    return data


class SearchAdsOutput(ToolOutput):
    ads: list[Ad] = Field(default_factory=list)

    def to_response(self) -> dict[str, Any]:
        data = super().to_response()
        data["ads"] = [serialize_ad(ad) for ad in self.ads]
        return data


class SearchAdsTool(ReportTool[SearchAdsInput]):
    name = "search_ads"
    input_model = SearchAdsInput

    def to_filters(self, params: SearchAdsInput) -> AdFilters:
        return AdFilters(
            customer_id=params.customer_id,
            campaign_ids=params.campaign_ids,
            campaign_names=params.campaign_names,
            ad_group_ids=params.ad_group_ids,
            ad_group_names=params.ad_group_names,
            statuses=params.statuses,
            ad_types=params.ad_types,
            date_range_start=params.date_range_start,
            date_range_end=params.date_range_end,
        )

    def to_output(self, result: SearchResult[Ad]) -> SearchAdsOutput:
        return SearchAdsOutput(
            ads=result.rows,
            next_page_token=result.next_page_token or None,
            total_count=result.total_results_count,
        )

"""Campaign performance report."""

from google_ads_mcp.models.base import strip_enum_prefix
from google_ads_mcp.models.campaign import (
    Campaign,
    CampaignFilters,
    CampaignMetrics,
)
from google_ads_mcp.models.google_ads_rows import GoogleAdsRow, Metrics
from google_ads_mcp.services.base import (
    BaseReportService,
    apply_date_window,
    metric_values,
    requests_removed,
)

CAMPAIGN_FIELDS = (
    "campaign.id",
    "campaign.resource_name",
    "campaign.name",
    "campaign.status",
    "campaign.advertising_channel_type",
    "campaign.bidding_strategy_type",
    "campaign_budget.amount_micros",
    "campaign.optimization_score",
    "metrics.clicks",
    "metrics.impressions",
    "metrics.ctr",
    "metrics.average_cpc",
    "metrics.cost_micros",
    "metrics.conversions",
    "metrics.conversions_value",
    "metrics.cost_per_conversion",
    "metrics.all_conversions",
    "metrics.all_conversions_value",
    "metrics.all_conversions_from_interactions_rate",
    "metrics.all_conversions_value_per_cost",
    "metrics.cost_per_all_conversions",
    "metrics.interactions",
    "metrics.engagement_rate",
    "metrics.search_impression_share",
    "metrics.search_rank_lost_impression_share",
)


class SearchCampaignsService(BaseReportService[CampaignFilters, Campaign]):
    report_name = "searchcampaigns"
    resource = "campaign"
    fields = CAMPAIGN_FIELDS

    def customer_id_for(self, filters: CampaignFilters) -> str:
        return filters.customer_id

    def build_query(self, filters: CampaignFilters) -> str:
        builder = self.new_query()
        apply_date_window(builder, filters.date_range_start, filters.date_range_end)
        if not requests_removed(filters.statuses):
            builder.where("campaign.status != REMOVED")

        builder.where_campaign_ids(filters.campaign_ids)
        builder.where_campaign_names(filters.campaign_names)
        builder.where_status(filters.statuses)
        return builder.build()

    def map_row(self, row: GoogleAdsRow) -> Campaign | None:
        campaign = row.campaign
        if campaign is None:
            return None

        budget = row.campaign_budget
        return Campaign(
            id=campaign.id,
            resource_name=campaign.resource_name,
            name=campaign.name,
            status=strip_enum_prefix(campaign.status, "CAMPAIGN_STATUS_"),
            advertising_channel_type=strip_enum_prefix(
                campaign.advertising_channel_type, "ADVERTISING_CHANNEL_TYPE_"
            ),
            bidding_strategy_type=strip_enum_prefix(
                campaign.bidding_strategy_type, "BIDDING_STRATEGY_TYPE_"
            ),
            budget_amount_micros=budget.amount_micros if budget else 0,
            optimization_score=campaign.optimization_score,
            metrics=CampaignMetrics(**metric_values(row.metrics or Metrics())),
        )

"""Ad group performance report."""

from google_ads_mcp.models.ad_group import AdGroup, AdGroupFilters, AdGroupMetrics
from google_ads_mcp.models.base import strip_enum_prefix, to_micros
from google_ads_mcp.models.google_ads_rows import GoogleAdsRow, Metrics
from google_ads_mcp.services.base import (
    BaseReportService,
    apply_date_window,
    requests_removed,
)

AD_GROUP_FIELDS = (
    "ad_group.id",
    "ad_group.resource_name",
    "ad_group.name",
    "ad_group.status",
    "ad_group.type",
    "campaign.id",
    "campaign.name",
    "campaign.resource_name",
    "metrics.clicks",
    "metrics.impressions",
    "metrics.ctr",
    "metrics.average_cpc",
    "metrics.cost_micros",
)


class SearchAdGroupsService(BaseReportService[AdGroupFilters, AdGroup]):
    report_name = "searchadgroups"
    resource = "ad_group"
    fields = AD_GROUP_FIELDS

    def customer_id_for(self, filters: AdGroupFilters) -> str:
        return filters.customer_id

    def build_query(self, filters: AdGroupFilters) -> str:
        builder = self.new_query()
        apply_date_window(builder, filters.date_range_start, filters.date_range_end)
        if not requests_removed(filters.statuses):
            builder.where("ad_group.status != REMOVED")

        builder.where_ad_group_ids(filters.ad_group_ids)
        builder.where_ad_group_names(filters.ad_group_names)
        builder.where_ad_group_status(filters.statuses)
        builder.where_campaign_ids(filters.campaign_ids)
        builder.where_campaign_names(filters.campaign_names)
        return builder.build()

    def map_row(self, row: GoogleAdsRow) -> AdGroup | None:
        ad_group = row.ad_group
        if ad_group is None:
            return None

        campaign = row.campaign
        metrics = row.metrics or Metrics()
        return AdGroup(
            id=ad_group.id,
            resource_name=ad_group.resource_name,
            name=ad_group.name,
            status=strip_enum_prefix(ad_group.status, "AD_GROUP_STATUS_"),
            type=strip_enum_prefix(ad_group.type, "AD_GROUP_TYPE_"),
            campaign_id=campaign.id if campaign else "",
            campaign_name=campaign.name if campaign else "",
            campaign_resource_name=campaign.resource_name if campaign else "",
            metrics=AdGroupMetrics(
                clicks=metrics.clicks,
                impressions=metrics.impressions,
                ctr=metrics.ctr,
                average_cpc_micros=to_micros(metrics.average_cpc),
                cost_micros=metrics.cost_micros,
            ),
        )

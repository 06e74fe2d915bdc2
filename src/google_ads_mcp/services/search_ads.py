"""Ad performance report."""

from google_ads_mcp.models.ad import (
    Ad,
    AdCreative,
    AdFilters,
    AdMetrics,
    CallOnlyAd,
    ExpandedTextAd,
    ResponsiveSearchAd,
)
from google_ads_mcp.models.base import strip_enum_prefix
from google_ads_mcp.models.google_ads_rows import (
    Ad as AdInfo,
    CallAdInfo,
    ExpandedTextAdInfo,
    GoogleAdsRow,
    Metrics,
    ResponsiveSearchAdInfo,
)
from google_ads_mcp.services.base import (
    BaseReportService,
    apply_date_window,
    metric_values,
    requests_removed,
)

AD_FIELDS = (
    "ad_group_ad.ad.id",
    "ad_group_ad.ad.resource_name",
    "ad_group_ad.ad.name",
    "ad_group_ad.ad.type",
    "ad_group_ad.ad.final_urls",
    "ad_group_ad.resource_name",
    "ad_group_ad.status",
    "ad_group_ad.policy_summary.approval_status",
    "campaign.id",
    "campaign.name",
    "campaign.resource_name",
    "ad_group.id",
    "ad_group.name",
    "ad_group.resource_name",
    "ad_group_ad.ad.expanded_text_ad.headline_part1",
    "ad_group_ad.ad.expanded_text_ad.headline_part2",
    "ad_group_ad.ad.expanded_text_ad.headline_part3",
    "ad_group_ad.ad.expanded_text_ad.description",
    "ad_group_ad.ad.expanded_text_ad.description2",
    "ad_group_ad.ad.expanded_text_ad.path1",
    "ad_group_ad.ad.expanded_text_ad.path2",
    "ad_group_ad.ad.responsive_search_ad.headlines",
    "ad_group_ad.ad.responsive_search_ad.descriptions",
    "ad_group_ad.ad.responsive_search_ad.path1",
    "ad_group_ad.ad.responsive_search_ad.path2",
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
    "metrics.cost_per_all_conversions",
    "metrics.interactions",
    "metrics.engagement_rate",
    "metrics.search_impression_share",
    "metrics.search_rank_lost_impression_share",
)

CALL_AD_TYPES = ("call_ad", "call_only_ad")


def _expanded_text_ad(info: ExpandedTextAdInfo) -> ExpandedTextAd:
    return ExpandedTextAd(
        headline_part1=info.headline_part1,
        headline_part2=info.headline_part2,
        headline_part3=info.headline_part3,
        description=info.description,
        description2=info.description2,
        path1=info.path1,
        path2=info.path2,
    )


def _responsive_search_ad(info: ResponsiveSearchAdInfo) -> ResponsiveSearchAd:
    return ResponsiveSearchAd(
        headlines=[asset.text for asset in info.headlines if asset.text],
        descriptions=[asset.text for asset in info.descriptions if asset.text],
        path1=info.path1,
        path2=info.path2,
    )


def _call_only_ad(info: CallAdInfo) -> CallOnlyAd:
    return CallOnlyAd(
        headline1=info.headline1,
        headline2=info.headline2,
        description1=info.description1,
        description2=info.description2,
        phone_number=info.phone_number,
        call_tracked=info.call_tracked,
        disable_call_conversion=info.disable_call_conversion,
    )


def creative_for(ad_type: str, ad: AdInfo) -> AdCreative | None:
    """Pick the creative payload matching the (normalized) ad type.

    Returns None when the row carries no payload for that type.
    """
    if ad_type == "expanded_text_ad" and ad.expanded_text_ad is not None:
        return _expanded_text_ad(ad.expanded_text_ad)
    if ad_type == "responsive_search_ad" and ad.responsive_search_ad is not None:
        return _responsive_search_ad(ad.responsive_search_ad)
    if ad_type in CALL_AD_TYPES and ad.call_ad is not None:
        return _call_only_ad(ad.call_ad)
    return None


class SearchAdsService(BaseReportService[AdFilters, Ad]):
    report_name = "searchads"
    resource = "ad_group_ad"
    fields = AD_FIELDS

    def customer_id_for(self, filters: AdFilters) -> str:
        return filters.customer_id

    def build_query(self, filters: AdFilters) -> str:
        builder = self.new_query()
        apply_date_window(builder, filters.date_range_start, filters.date_range_end)
        if not requests_removed(filters.statuses):
            builder.where("ad_group_ad.status != 'REMOVED'")

        builder.where_campaign_ids(filters.campaign_ids)
        builder.where_campaign_names(filters.campaign_names)
        builder.where_ad_group_ids(filters.ad_group_ids)
        builder.where_ad_group_names(filters.ad_group_names)
        builder.where_ad_group_ad_status(filters.statuses)
        builder.where_ad_types(filters.ad_types)
        return builder.build()

    def map_row(self, row: GoogleAdsRow) -> Ad | None:
        ad_group_ad = row.ad_group_ad
        if ad_group_ad is None or ad_group_ad.ad is None:
            return None

        ad = ad_group_ad.ad
        ad_type = strip_enum_prefix(ad.type, "AD_TYPE_")
        campaign = row.campaign
        ad_group = row.ad_group
        policy = ad_group_ad.policy_summary

        metrics = metric_values(row.metrics or Metrics())
        del metrics["all_conversions_value_per_cost"]

        return Ad(
            id=ad.id,
            resource_name=ad_group_ad.resource_name or ad.resource_name,
            name=ad.name,
            type=ad_type,
            status=strip_enum_prefix(ad_group_ad.status, "AD_GROUP_AD_STATUS_"),
            final_urls=list(ad.final_urls),
            approval_status=strip_enum_prefix(
                policy.approval_status if policy else "", "POLICY_APPROVAL_STATUS_"
            ),
            campaign_id=campaign.id if campaign else "",
            campaign_name=campaign.name if campaign else "",
            campaign_resource_name=campaign.resource_name if campaign else "",
            ad_group_id=ad_group.id if ad_group else "",
            ad_group_name=ad_group.name if ad_group else "",
            ad_group_resource_name=ad_group.resource_name if ad_group else "",
            creative=creative_for(ad_type, ad),
            metrics=AdMetrics(**metrics),
        )

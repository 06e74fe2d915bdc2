"""Models for rows returned by the ``googleAds:search`` REST endpoint.

Only the fields selected by the report queries are modelled. Every
sub-resource is optional because the API leaves out objects that have no
selected values for a row.
"""

from pydantic import Field

from google_ads_mcp.models.base import GoogleAdsWireModel


class Metrics(GoogleAdsWireModel):
    clicks: int = 0
    impressions: int = 0
    ctr: float = 0.0
    average_cpc: float = 0.0
    cost_micros: int = 0
    conversions: float = 0.0
    conversions_value: float = 0.0
    cost_per_conversion: float = 0.0
    all_conversions: float = 0.0
    all_conversions_value: float = 0.0
    all_conversions_from_interactions_rate: float = 0.0
    all_conversions_value_per_cost: float = 0.0
    cost_per_all_conversions: float = 0.0
    interactions: int = 0
    engagement_rate: float = 0.0
    search_impression_share: float = 0.0
    search_rank_lost_impression_share: float = 0.0


class CustomerClient(GoogleAdsWireModel):
    resource_name: str = ""
    client_customer: str = ""
    id: str = ""
    descriptive_name: str = ""
    currency_code: str = ""
    time_zone: str = ""
    level: int = 0
    manager: bool = False
    status: str = ""


class Campaign(GoogleAdsWireModel):
    resource_name: str = ""
    id: str = ""
    name: str = ""
    status: str = ""
    advertising_channel_type: str = ""
    bidding_strategy_type: str = ""
    optimization_score: float = 0.0


class CampaignBudget(GoogleAdsWireModel):
    resource_name: str = ""
    amount_micros: int = 0


class AdGroup(GoogleAdsWireModel):
    resource_name: str = ""
    id: str = ""
    name: str = ""
    status: str = ""
    type: str = ""


class AdTextAsset(GoogleAdsWireModel):
    text: str = ""


class ExpandedTextAdInfo(GoogleAdsWireModel):
    headline_part1: str = ""
    headline_part2: str = ""
    headline_part3: str = ""
    description: str = ""
    description2: str = ""
    path1: str = ""
    path2: str = ""


class ResponsiveSearchAdInfo(GoogleAdsWireModel):
    headlines: list[AdTextAsset] = Field(default_factory=list)
    descriptions: list[AdTextAsset] = Field(default_factory=list)
    path1: str = ""
    path2: str = ""


class CallAdInfo(GoogleAdsWireModel):
    headline1: str = ""
    headline2: str = ""
    description1: str = ""
    description2: str = ""
    phone_number: str = ""
    call_tracked: bool = False
    disable_call_conversion: bool = False


class Ad(GoogleAdsWireModel):
    resource_name: str = ""
    id: str = ""
    name: str = ""
    type: str = ""
    final_urls: list[str] = Field(default_factory=list)
    expanded_text_ad: ExpandedTextAdInfo | None = None
    responsive_search_ad: ResponsiveSearchAdInfo | None = None
    call_ad: CallAdInfo | None = None


class PolicySummary(GoogleAdsWireModel):
    approval_status: str = ""


class AdGroupAd(GoogleAdsWireModel):
    resource_name: str = ""
    status: str = ""
    ad: Ad | None = None
    policy_summary: PolicySummary | None = None


class GoogleAdsRow(GoogleAdsWireModel):
    customer_client: CustomerClient | None = None
    campaign: Campaign | None = None
    campaign_budget: CampaignBudget | None = None
    ad_group: AdGroup | None = None
    ad_group_ad: AdGroupAd | None = None
    metrics: Metrics | None = None


class SearchGoogleAdsResponse(GoogleAdsWireModel):
    results: list[GoogleAdsRow] = Field(default_factory=list)
    next_page_token: str = ""
    total_results_count: int = 0

"""Campaign records for the campaign report."""

from dataclasses import dataclass, field

from pydantic import Field

from google_ads_mcp.models.base import RecordModel


@dataclass
class CampaignFilters:
    customer_id: str
    campaign_ids: list[str] = field(default_factory=list)
    campaign_names: list[str] = field(default_factory=list)
    statuses: list[str] = field(default_factory=list)
    date_range_start: str = ""
    date_range_end: str = ""


class CampaignMetrics(RecordModel):
    clicks: int = 0
    impressions: int = 0
    ctr: float = 0.0
    average_cpc_micros: int = 0
    cost_micros: int = 0
    conversions: float = 0.0
    conversions_value: float = 0.0
    cost_per_conversion: float = 0.0
    conversion_rate: float = 0.0
    all_conversions: float = 0.0
    all_conversions_value: float = 0.0
    all_conversions_from_interactions_rate: float = 0.0
    all_conversions_value_per_cost: float = 0.0
    cost_per_all_conversions: float = 0.0
    interactions: int = 0
    engagement_rate: float = 0.0
    search_impression_share: float = 0.0
    search_rank_lost_impression_share: float = 0.0


class Campaign(RecordModel):
    id: str = ""
    resource_name: str = ""
    name: str = ""
    status: str = ""
    advertising_channel_type: str = ""
    bidding_strategy_type: str = ""
    budget_amount_micros: int = 0
    optimization_score: float = 0.0
    metrics: CampaignMetrics = Field(default_factory=CampaignMetrics)

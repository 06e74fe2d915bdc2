"""Ad group records for the ad group report."""

from dataclasses import dataclass, field

from pydantic import Field

from google_ads_mcp.models.base import RecordModel


@dataclass
class AdGroupFilters:
    customer_id: str
    ad_group_ids: list[str] = field(default_factory=list)
    ad_group_names: list[str] = field(default_factory=list)
    statuses: list[str] = field(default_factory=list)
    campaign_ids: list[str] = field(default_factory=list)
    campaign_names: list[str] = field(default_factory=list)
    date_range_start: str = ""
    date_range_end: str = ""


class AdGroupMetrics(RecordModel):
    clicks: int = 0
    impressions: int = 0
    ctr: float = 0.0
    average_cpc_micros: int = 0
    cost_micros: int = 0


class AdGroup(RecordModel):
    id: str = ""
    resource_name: str = ""
    name: str = ""
    status: str = ""
    type: str = ""
    campaign_id: str = ""
    campaign_name: str = ""
    campaign_resource_name: str = ""
    metrics: AdGroupMetrics = Field(default_factory=AdGroupMetrics)

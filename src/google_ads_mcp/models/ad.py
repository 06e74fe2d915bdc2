"""Ad records for the ad report.

An ad carries at most one creative payload. Which one is decided by the
ad type, so the payload is modelled as a tagged union on ``kind`` rather
than as three independent optional fields.
"""

from dataclasses import dataclass, field
from typing import Annotated, Literal, Union

from pydantic import Field

from google_ads_mcp.models.base import RecordModel


@dataclass
class AdFilters:
    customer_id: str
    campaign_ids: list[str] = field(default_factory=list)
    campaign_names: list[str] = field(default_factory=list)
    ad_group_ids: list[str] = field(default_factory=list)
    ad_group_names: list[str] = field(default_factory=list)
    statuses: list[str] = field(default_factory=list)
    ad_types: list[str] = field(default_factory=list)
    date_range_start: str = ""
    date_range_end: str = ""


class ExpandedTextAd(RecordModel):
    kind: Literal["expanded_text_ad"] = "expanded_text_ad"
    headline_part1: str = ""
    headline_part2: str = ""
    headline_part3: str = ""
    description: str = ""
    description2: str = ""
    path1: str = ""
    path2: str = ""


class ResponsiveSearchAd(RecordModel):
    kind: Literal["responsive_search_ad"] = "responsive_search_ad"
    headlines: list[str] = Field(default_factory=list)
    descriptions: list[str] = Field(default_factory=list)
    path1: str = ""
    path2: str = ""


class CallOnlyAd(RecordModel):
    kind: Literal["call_only_ad"] = "call_only_ad"
    headline1: str = ""
    headline2: str = ""
    description1: str = ""
    description2: str = ""
    phone_number: str = ""
    call_tracked: bool = False
    disable_call_conversion: bool = False


AdCreative = Annotated[
    Union[ExpandedTextAd, ResponsiveSearchAd, CallOnlyAd], Field(discriminator="kind")
]


class AdMetrics(RecordModel):
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
    cost_per_all_conversions: float = 0.0
    interactions: int = 0
    engagement_rate: float = 0.0
    search_impression_share: float = 0.0
    search_rank_lost_impression_share: float = 0.0


class Ad(RecordModel):
    id: str = ""
    resource_name: str = ""
    name: str = ""
    type: str = ""
    status: str = ""
    final_urls: list[str] = Field(default_factory=list)
    approval_status: str = ""
    campaign_id: str = ""
    campaign_name: str = ""
    campaign_resource_name: str = ""
    ad_group_id: str = ""
    ad_group_name: str = ""
    ad_group_resource_name: str = ""
    creative: AdCreative | None = None
    metrics: AdMetrics = Field(default_factory=AdMetrics)

"""Tests for the ad report service."""

import httpx
import pytest
import respx

from google_ads_mcp.models.ad import AdFilters, CallOnlyAd, ExpandedTextAd, ResponsiveSearchAd
from google_ads_mcp.models.google_ads_rows import Ad as AdInfo
from google_ads_mcp.services.search_ads import SearchAdsService, creative_for


@pytest.fixture
def service(google_ads_config, http_client, token_provider):
    return SearchAdsService(google_ads_config, http_client, token_provider)


def ad_row(ad: dict, **extra) -> dict:
    return {
        "adGroupAd": {
            "resourceName": "customers/1234567890/adGroupAds/7~99",
            "status": "ENABLED",
            "policySummary": {"approvalStatus": "APPROVED"},
            "ad": ad,
        },
        "campaign": {"id": "3", "name": "Brand"},
        "adGroup": {"id": "7", "name": "Shoes"},
        **extra,
    }


class TestBuildQuery:
    def test_filter_order(self, service):
        query = service.build_query(
            AdFilters(
                customer_id="1",
                campaign_ids=["3"],
                campaign_names=["Brand"],
                ad_group_ids=["7", "8"],
                ad_group_names=["Shoes"],
                statuses=["pending"],
                ad_types=["responsive_search_ad"],
                date_range_end="2024-01-31",
            )
        )

        assert query.split(" WHERE ", 1)[1] == (
            "segments.date <= '2024-01-31' "
            "AND ad_group_ad.status != 'REMOVED' "
            "AND campaign.id = 3 "
            "AND campaign.name LIKE '%brand%' "
            "AND ad_group.id IN (7,8) "
            "AND ad_group.name LIKE '%shoes%' "
            "AND ad_group_ad.status IN ('PENDING') "
            "AND ad_group_ad.ad.type IN (RESPONSIVE_SEARCH_AD)"
        )

    def test_removed_requested(self, service):
        query = service.build_query(AdFilters(customer_id="1", statuses=["REMOVED"]))
        assert "!= 'REMOVED'" not in query
        assert "ad_group_ad.status IN ('REMOVED')" in query


class TestCreativeFor:
    def test_responsive_search_ad_skips_empty_text(self):
        ad = AdInfo.model_validate(
            {
                "responsiveSearchAd": {
                    "headlines": [{"text": "Buy shoes"}, {"text": ""}, {}],
                    "descriptions": [{"text": "Free shipping"}],
                    "path1": "shoes",
                }
            }
        )
        creative = creative_for("responsive_search_ad", ad)
        assert isinstance(creative, ResponsiveSearchAd)
        assert creative.headlines == ["Buy shoes"]
        assert creative.descriptions == ["Free shipping"]
        assert creative.path1 == "shoes"

    def test_expanded_text_ad(self):
        ad = AdInfo.model_validate(
            {"expandedTextAd": {"headlinePart1": "H1", "description2": "D2"}}
        )
        creative = creative_for("expanded_text_ad", ad)
        assert isinstance(creative, ExpandedTextAd)
        assert creative.headline_part1 == "H1"
        assert creative.description2 == "D2"

    @pytest.mark.parametrize("ad_type", ["call_ad", "call_only_ad"])
    def test_call_ads(self, ad_type):
        ad = AdInfo.model_validate(
            {"callAd": {"phoneNumber": "+15551234567", "callTracked": True}}
        )
        creative = creative_for(ad_type, ad)
        assert isinstance(creative, CallOnlyAd)
        assert creative.phone_number == "+15551234567"
        assert creative.call_tracked is True

    def test_other_types_have_no_creative(self):
        assert creative_for("image_ad", AdInfo()) is None

    def test_missing_payload_gives_no_creative(self):
        assert creative_for("expanded_text_ad", AdInfo()) is None

    @pytest.mark.parametrize(
        "ad_type", ["expanded_text_ad", "responsive_search_ad", "call_ad", "call_only_ad"]
    )
    def test_row_without_payload_has_no_creative(self, ad_type):
        ad = AdInfo.model_validate({"id": "1", "type": ad_type.upper()})
        assert creative_for(ad_type, ad) is None


class TestSearch:
    @pytest.mark.asyncio
    async def test_maps_rows(self, service, search_url):
        rsa = {
            "id": "99",
            "resourceName": "customers/1234567890/ads/99",
            "type": "RESPONSIVE_SEARCH_AD",
            "finalUrls": ["https://example.com"],
            "responsiveSearchAd": {"headlines": [{"text": "Buy"}]},
        }
        rows = [
            ad_row(rsa, metrics={"clicks": "4", "allConversionsValuePerCost": 2.0}),
            {"adGroupAd": {"status": "ENABLED"}},
            {"campaign": {"id": "3"}},
        ]
        with respx.mock:
            respx.post(search_url).mock(
                return_value=httpx.Response(200, json={"results": rows})
            )
            result = await service.search(AdFilters(customer_id="1234567890"))

        assert len(result.rows) == 1
        ad = result.rows[0]
        assert ad.id == "99"
        assert ad.type == "responsive_search_ad"
        assert ad.status == "enabled"
        assert ad.approval_status == "approved"
        assert ad.resource_name == "customers/1234567890/adGroupAds/7~99"
        assert ad.final_urls == ["https://example.com"]
        assert ad.campaign_id == "3"
        assert ad.ad_group_name == "Shoes"
        assert isinstance(ad.creative, ResponsiveSearchAd)
        assert ad.creative.headlines == ["Buy"]
        assert ad.metrics.clicks == 4
        assert not hasattr(ad.metrics, "all_conversions_value_per_cost")

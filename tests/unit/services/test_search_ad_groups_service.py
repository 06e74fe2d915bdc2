"""Tests for the ad group report service."""

import httpx
import pytest
import respx

from google_ads_mcp.core.exceptions import ValidationError
from google_ads_mcp.models.ad_group import AdGroupFilters
from google_ads_mcp.services.search_ad_groups import SearchAdGroupsService


@pytest.fixture
def service(google_ads_config, http_client, token_provider):
    return SearchAdGroupsService(google_ads_config, http_client, token_provider)


class TestBuildQuery:
    def test_filter_order(self, service):
        query = service.build_query(
            AdGroupFilters(
                customer_id="1",
                ad_group_ids=["customers/1/adGroups/7"],
                ad_group_names=["Shoes", "Boots"],
                statuses=["ENABLED"],
                campaign_ids=["3"],
                campaign_names=["Brand"],
            )
        )

        assert query.split(" WHERE ", 1)[1] == (
            "segments.date DURING LAST_7_DAYS "
            "AND ad_group.status != REMOVED "
            "AND ad_group.id = 7 "
            "AND (ad_group.name LIKE '%shoes%' OR ad_group.name LIKE '%boots%') "
            "AND ad_group.status IN (ENABLED) "
            "AND campaign.id = 3 "
            "AND campaign.name LIKE '%brand%'"
        )

    def test_removed_requested(self, service):
        query = service.build_query(AdGroupFilters(customer_id="1", statuses=["REMOVED"]))
        assert "ad_group.status != REMOVED" not in query

    def test_invalid_status(self, service):
        with pytest.raises(ValidationError, match="ad group status"):
            service.build_query(AdGroupFilters(customer_id="1", statuses=["PENDING"]))


class TestSearch:
    @pytest.mark.asyncio
    async def test_maps_rows(self, service, search_url):
        row = {
            "adGroup": {
                "resourceName": "customers/1234567890/adGroups/7",
                "id": "7",
                "name": "Shoes",
                "status": "ENABLED",
                "type": "SEARCH_STANDARD",
            },
            "campaign": {
                "resourceName": "customers/1234567890/campaigns/3",
                "id": "3",
                "name": "Brand",
            },
            "metrics": {
                "clicks": "10",
                "impressions": "100",
                "ctr": 0.1,
                "averageCpc": 0.25,
                "costMicros": "2500000",
            },
        }
        with respx.mock:
            respx.post(search_url).mock(
                return_value=httpx.Response(200, json={"results": [row]})
            )
            result = await service.search(AdGroupFilters(customer_id="1234567890"))

        ad_group = result.rows[0]
        assert ad_group.id == "7"
        assert ad_group.status == "enabled"
        assert ad_group.type == "search_standard"
        assert ad_group.campaign_id == "3"
        assert ad_group.campaign_name == "Brand"
        assert ad_group.campaign_resource_name == "customers/1234567890/campaigns/3"
        assert ad_group.metrics.clicks == 10
        assert ad_group.metrics.average_cpc_micros == 250_000
        assert ad_group.metrics.cost_micros == 2_500_000

    @pytest.mark.asyncio
    async def test_rows_without_ad_group_are_skipped(self, service, search_url):
        with respx.mock:
            respx.post(search_url).mock(
                return_value=httpx.Response(
                    200, json={"results": [{"campaign": {"id": "3"}}]}
                )
            )
            result = await service.search(AdGroupFilters(customer_id="1234567890"))

        assert result.rows == []

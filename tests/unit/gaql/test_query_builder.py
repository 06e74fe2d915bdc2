"""Unit tests for the GAQL query builder."""

import pytest

from google_ads_mcp.core.exceptions import ValidationError
from google_ads_mcp.gaql import QueryBuilder


def where_clause(builder: QueryBuilder) -> str:
    return builder.build().split(" WHERE ", 1)[1]


class TestBuild:
    """Test clause serialization."""

    def test_select_only(self):
        """Test that empty clauses are omitted."""
        query = QueryBuilder("campaign").select("campaign.id", "campaign.name").build()
        assert query == "SELECT campaign.id, campaign.name FROM campaign"

    def test_all_clauses(self):
        """Test WHERE, ORDER BY and LIMIT rendering."""
        query = (
            QueryBuilder("campaign")
            .select("campaign.id")
            .where("campaign.status != REMOVED")
            .where("metrics.clicks > 0")
            .order_by("campaign.id", "campaign.name")
            .limit(10)
            .build()
        )
        assert query == (
            "SELECT campaign.id FROM campaign "
            "WHERE campaign.status != REMOVED AND metrics.clicks > 0 "
            "ORDER BY campaign.id, campaign.name LIMIT 10"
        )

    def test_build_is_repeatable(self):
        """Test that build does not change the builder."""
        builder = (
            QueryBuilder("ad_group")
            .select("ad_group.id")
            .where_ad_group_ids(["1", "2"])
            .where_date_range("2024-01-01", "")
        )
        assert builder.build() == builder.build()
        assert str(builder) == builder.build()

    def test_predicates_keep_insertion_order(self):
        builder = QueryBuilder("campaign").select("campaign.id")
        builder.where("a.b = 1").where_campaign_ids(["5"]).where("c.d = 2")
        assert where_clause(builder) == "a.b = 1 AND campaign.id = 5 AND c.d = 2"


class TestAccountIDs:
    """Test account ID filtering."""

    def test_dedupes_formatted_and_resource_ids(self):
        """Test that dashed and resource-path forms collapse to one ID."""
        builder = QueryBuilder("customer_client").select("customer_client.id")
        builder.where_account_ids(["123-456", "customers/123456"])
        assert where_clause(builder) == (
            "customer_client.client_customer IN ('customers/123456')"
        )

    def test_multiple_accounts(self):
        builder = QueryBuilder("customer_client").select("customer_client.id")
        builder.where_account_ids([" 111 ", "222", "111"])
        assert where_clause(builder) == (
            "customer_client.client_customer IN ('customers/111','customers/222')"
        )

    def test_invalid_account_id(self):
        """Test that non-numeric IDs are rejected and nothing is added."""
        builder = QueryBuilder("customer_client").select("customer_client.id")
        with pytest.raises(ValidationError, match='account ID "abc" is invalid'):
            builder.where_account_ids(["123", "abc"])
        assert builder.predicates == ()

    @pytest.mark.parametrize("ids", [[], ["", "   "], None])
    def test_empty_input_adds_nothing(self, ids):
        builder = QueryBuilder("customer_client").select("customer_client.id")
        builder.where_account_ids(ids)
        assert builder.build() == "SELECT customer_client.id FROM customer_client"


class TestCampaignAndAdGroupIDs:
    """Test campaign and ad group ID filtering."""

    def test_single_id_uses_equality(self):
        builder = QueryBuilder("campaign").select("campaign.id")
        builder.where_campaign_ids(["12-34"])
        assert where_clause(builder) == "campaign.id = 1234"

    def test_resource_paths_and_dedupe(self):
        builder = QueryBuilder("campaign").select("campaign.id")
        builder.where_campaign_ids(["customers/123/campaigns/456", "789", "456"])
        assert where_clause(builder) == "campaign.id IN (456,789)"

    def test_malformed_resource_path(self):
        builder = QueryBuilder("campaign").select("campaign.id")
        with pytest.raises(ValidationError, match="expected format"):
            builder.where_campaign_ids(["customers/1/campaigns/2/campaigns/3"])
        assert builder.predicates == ()

    def test_non_numeric_campaign_id(self):
        builder = QueryBuilder("campaign").select("campaign.id")
        with pytest.raises(ValidationError, match='campaign ID "abc" is invalid'):
            builder.where_campaign_ids(["abc"])
        assert builder.predicates == ()

    def test_non_numeric_tail_of_resource_path(self):
        builder = QueryBuilder("campaign").select("campaign.id")
        with pytest.raises(ValidationError, match="must be numeric"):
            builder.where_campaign_ids(["customers/1/campaigns/x1"])

    def test_resource_path_tail_is_trimmed(self):
        builder = QueryBuilder("campaign").select("campaign.id")
        builder.where_campaign_ids(["customers/1/campaigns/ 456 "])
        assert where_clause(builder) == "campaign.id = 456"

    @pytest.mark.parametrize("raw", ["１２３", "¹²³", "customers/1/campaigns/٤٥٦"])
    def test_non_ascii_digits_are_rejected(self, raw):
        builder = QueryBuilder("campaign").select("campaign.id")
        with pytest.raises(ValidationError, match=f'"{raw}" is invalid: must be numeric'):
            builder.where_campaign_ids([raw])
        assert builder.predicates == ()

    def test_non_ascii_account_id_is_rejected(self):
        builder = QueryBuilder("customer_client").select("customer_client.id")
        with pytest.raises(ValidationError, match="account ID"):
            builder.where_account_ids(["customers/１２３"])
        assert builder.predicates == ()

    def test_ad_group_resource_path(self):
        builder = QueryBuilder("ad_group").select("ad_group.id")
        builder.where_ad_group_ids(["customers/1/adGroups/55"])
        assert where_clause(builder) == "ad_group.id = 55"

    def test_ad_group_ids_list(self):
        builder = QueryBuilder("ad_group").select("ad_group.id")
        builder.where_ad_group_ids(["1", "2", ""])
        assert where_clause(builder) == "ad_group.id IN (1,2)"


class TestNames:
    """Test name filtering and escaping."""

    def test_apostrophe_is_doubled(self):
        """Test that quotes cannot break out of the string literal."""
        builder = QueryBuilder("customer_client").select("customer_client.id")
        builder.where_account_names(["O'Brien"])
        assert where_clause(builder) == (
            "customer_client.descriptive_name LIKE '%o''brien%'"
        )

    def test_wildcards_and_backslash_are_escaped(self):
        builder = QueryBuilder("campaign").select("campaign.id")
        builder.where_campaign_names(["100%_Off\\"])
        assert where_clause(builder) == "campaign.name LIKE '%100\\%\\_off\\\\%'"

    def test_multiple_names_are_alternatives(self):
        builder = QueryBuilder("campaign").select("campaign.id")
        builder.where_campaign_names(["Brand", "  ", "Generic "])
        assert where_clause(builder) == (
            "(campaign.name LIKE '%brand%' OR campaign.name LIKE '%generic%')"
        )

    def test_no_names(self):
        builder = QueryBuilder("ad_group").select("ad_group.id")
        builder.where_ad_group_names(["", " "])
        assert builder.predicates == ()

    def test_ad_group_names(self):
        builder = QueryBuilder("ad_group").select("ad_group.id")
        builder.where_ad_group_names(["Shoes"])
        assert where_clause(builder) == "ad_group.name LIKE '%shoes%'"


class TestStatuses:
    """Test status filtering."""

    def test_case_fold_trim_and_dedupe(self):
        builder = QueryBuilder("campaign").select("campaign.id")
        builder.where_status(["enabled", "ENABLED", " paused "])
        assert where_clause(builder) == "campaign.status IN (ENABLED,PAUSED)"

    def test_single_status(self):
        builder = QueryBuilder("campaign").select("campaign.id")
        builder.where_status(["ENABLED"])
        assert where_clause(builder) == "campaign.status IN (ENABLED)"

    def test_unknown_status_leaves_builder_unchanged(self):
        builder = QueryBuilder("campaign").select("campaign.id")
        before = builder.build()
        with pytest.raises(ValidationError, match='invalid status "bogus"'):
            builder.where_status(["bogus"])
        assert builder.build() == before

    def test_pending_is_not_a_campaign_status(self):
        builder = QueryBuilder("campaign").select("campaign.id")
        with pytest.raises(ValidationError):
            builder.where_status(["PENDING"])

    def test_ad_group_status(self):
        builder = QueryBuilder("ad_group").select("ad_group.id")
        builder.where_ad_group_status(["removed"])
        assert where_clause(builder) == "ad_group.status IN (REMOVED)"

    def test_ad_group_ad_status_is_quoted(self):
        builder = QueryBuilder("ad_group_ad").select("ad_group_ad.ad.id")
        builder.where_ad_group_ad_status(["pending", "enabled", "PENDING"])
        assert where_clause(builder) == "ad_group_ad.status IN ('PENDING','ENABLED')"

    def test_ad_group_ad_status_rejects_unknown(self):
        builder = QueryBuilder("ad_group_ad").select("ad_group_ad.ad.id")
        with pytest.raises(ValidationError, match="DISAPPROVED"):
            builder.where_ad_group_ad_status(["archived"])
        assert builder.predicates == ()


class TestAdTypes:
    """Test ad type filtering."""

    def test_unknown_types_are_kept(self):
        builder = QueryBuilder("ad_group_ad").select("ad_group_ad.ad.id")
        builder.where_ad_types(
            ["responsive_search_ad", "NEW_FANCY_AD", "RESPONSIVE_SEARCH_AD"]
        )
        assert where_clause(builder) == (
            "ad_group_ad.ad.type IN (RESPONSIVE_SEARCH_AD,NEW_FANCY_AD)"
        )

    def test_malformed_type_token_is_rejected(self):
        builder = QueryBuilder("ad_group_ad").select("ad_group_ad.ad.id")
        with pytest.raises(ValidationError):
            builder.where_ad_types(["TEXT_AD) OR (1=1"])
        assert builder.predicates == ()


class TestDateRange:
    """Test date range filtering."""

    def test_between(self):
        builder = QueryBuilder("campaign").select("campaign.id")
        builder.where_date_range("2024-01-01", "2024-01-31")
        assert where_clause(builder) == (
            "segments.date BETWEEN '2024-01-01' AND '2024-01-31'"
        )

    def test_start_only(self):
        builder = QueryBuilder("campaign").select("campaign.id")
        builder.where_date_range("2024-01-01", "")
        assert where_clause(builder) == "segments.date >= '2024-01-01'"

    def test_end_only(self):
        builder = QueryBuilder("campaign").select("campaign.id")
        builder.where_date_range(None, "2024-01-31")
        assert where_clause(builder) == "segments.date <= '2024-01-31'"

    def test_no_dates(self):
        builder = QueryBuilder("campaign").select("campaign.id")
        builder.where_date_range("", "")
        assert builder.predicates == ()

    def test_bad_start_date(self):
        builder = QueryBuilder("campaign").select("campaign.id")
        with pytest.raises(ValidationError, match="start date"):
            builder.where_date_range("bad-date", "")
        assert builder.predicates == ()

    @pytest.mark.parametrize("end", ["2024-02-30", "2024-1-31", "31/01/2024"])
    def test_bad_end_date(self, end):
        builder = QueryBuilder("campaign").select("campaign.id")
        with pytest.raises(ValidationError, match="end date"):
            builder.where_date_range("2024-01-01", end)
        assert builder.predicates == ()

    @pytest.mark.parametrize("start", ["２０２４-01-01", "2024-٠١-01"])
    def test_non_ascii_date_digits(self, start):
        builder = QueryBuilder("campaign").select("campaign.id")
        with pytest.raises(ValidationError, match="start date"):
            builder.where_date_range(start, "")
        assert builder.predicates == ()

"""Unit tests for the shared filter normalization rules."""

import pytest

from google_ads_mcp.core.exceptions import ValidationError
from google_ads_mcp.gaql.filters import (
    EnumFilter,
    IDFilter,
    date_range_predicate,
    enum_predicate,
    id_predicate,
    name_predicate,
    normalize_id,
    validate_date,
)

CAMPAIGNS = IDFilter(field="campaign.id", label="campaign ID", path_infix="/campaigns/")
ACCOUNTS = IDFilter(
    field="customer_client.client_customer",
    label="account ID",
    strip_prefix="customers/",
    resource_name_prefix="customers/",
)


class TestNormalizeID:
    def test_strips_whitespace_and_dashes(self):
        assert normalize_id(" 123-456 ", CAMPAIGNS) == "123456"

    def test_resource_path(self):
        assert normalize_id("customers/1/campaigns/42", CAMPAIGNS) == "42"

    def test_strip_prefix(self):
        assert normalize_id("customers/987", ACCOUNTS) == "987"

    def test_double_infix_reports_expected_format(self):
        with pytest.raises(ValidationError) as exc_info:
            normalize_id("x/campaigns/1/campaigns/2", CAMPAIGNS)
        assert "'customers/XXX/campaigns/YYY' or numeric ID" in str(exc_info.value)

    def test_expected_format_without_infix(self):
        assert ACCOUNTS.expected_format == "numeric ID"


class TestIDPredicate:
    def test_none_when_empty(self):
        assert id_predicate(None, CAMPAIGNS) is None
        assert id_predicate(["", " "], CAMPAIGNS) is None

    def test_resource_names_render_as_in_list(self):
        predicate = id_predicate(["5"], ACCOUNTS)
        assert predicate.render() == (
            "customer_client.client_customer IN ('customers/5')"
        )


class TestNamePredicate:
    def test_none_when_empty(self):
        assert name_predicate([], "campaign.name") is None

    def test_lowercases(self):
        predicate = name_predicate(["BRAND"], "campaign.name")
        assert predicate.render() == "campaign.name LIKE '%brand%'"


class TestEnumPredicate:
    def test_open_vocabulary_logs_unknown(self, caplog):
        rule = EnumFilter(field="ad_group_ad.ad.type", label="ad type", known=("TEXT_AD",))
        with caplog.at_level("DEBUG", logger="google_ads_mcp.gaql.filters"):
            predicate = enum_predicate(["brand_new_ad"], rule)
        assert predicate.render() == "ad_group_ad.ad.type IN (BRAND_NEW_AD)"
        assert "BRAND_NEW_AD" in caplog.text

    def test_closed_vocabulary_error_lists_allowed(self):
        rule = EnumFilter(field="campaign.status", label="status", allowed=("ENABLED",))
        with pytest.raises(ValidationError) as exc_info:
            enum_predicate(["nope"], rule)
        assert str(exc_info.value) == 'invalid status "nope": must be one of ENABLED'

    def test_quoted_tokens(self):
        rule = EnumFilter(
            field="ad_group_ad.status", label="ad status", allowed=("PAUSED",), quoted=True
        )
        assert enum_predicate(["paused"], rule).render() == (
            "ad_group_ad.status IN ('PAUSED')"
        )

    def test_blank_values_are_ignored(self):
        rule = EnumFilter(field="campaign.status", label="status", allowed=("ENABLED",))
        assert enum_predicate(["", None, "  "], rule) is None


class TestDates:
    def test_validate_date_returns_value(self):
        assert validate_date("2024-02-29", "start") == "2024-02-29"

    def test_validate_date_message(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_date("2023-02-29", "start")
        assert str(exc_info.value) == (
            'invalid date format for start date "2023-02-29": expected YYYY-MM-DD'
        )

    def test_dates_are_trimmed(self):
        predicate = date_range_predicate(" 2024-01-01 ", None)
        assert predicate.render() == "segments.date >= '2024-01-01'"

    def test_no_dates(self):
        assert date_range_predicate(None, None) is None

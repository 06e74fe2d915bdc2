"""Fluent builder for Google Ads Query Language statements."""

from collections.abc import Sequence

from google_ads_mcp.gaql.filters import (
    EnumFilter,
    IDFilter,
    date_range_predicate,
    enum_predicate,
    id_predicate,
    name_predicate,
)
from google_ads_mcp.gaql.predicates import Predicate, RawPredicate

RESOURCE_STATUSES = ("ENABLED", "PAUSED", "REMOVED")
AD_GROUP_AD_STATUSES = ("ENABLED", "PAUSED", "REMOVED", "PENDING", "DISAPPROVED")

# Reference list only; unrecognized ad types are still sent to the API.
KNOWN_AD_TYPES = (
    "TEXT_AD",
    "EXPANDED_TEXT_AD",
    "RESPONSIVE_SEARCH_AD",
    "CALL_AD",
    "CALL_ONLY_AD",
    "RESPONSIVE_DISPLAY_AD",
    "IMAGE_AD",
    "VIDEO_AD",
    "APP_AD",
    "SHOPPING_PRODUCT_AD",
    "SMART_CAMPAIGN_AD",
    "DISCOVERY_MULTI_ASSET_AD",
)

ACCOUNT_IDS = IDFilter(
    field="customer_client.client_customer",
    label="account ID",
    strip_prefix="customers/",
    resource_name_prefix="customers/",
)
CAMPAIGN_IDS = IDFilter(
    field="campaign.id", label="campaign ID", path_infix="/campaigns/"
)
AD_GROUP_IDS = IDFilter(
    field="ad_group.id", label="ad group ID", path_infix="/adGroups/"
)

CAMPAIGN_STATUS = EnumFilter(
    field="campaign.status", label="status", allowed=RESOURCE_STATUSES
)
AD_GROUP_STATUS = EnumFilter(
    field="ad_group.status", label="ad group status", allowed=RESOURCE_STATUSES
)
AD_GROUP_AD_STATUS = EnumFilter(
    field="ad_group_ad.status",
    label="ad status",
    allowed=AD_GROUP_AD_STATUSES,
    quoted=True,
)
AD_TYPES = EnumFilter(
    field="ad_group_ad.ad.type", label="ad type", known=KNOWN_AD_TYPES
)


class QueryBuilder:
    """Accumulates the clauses of one GAQL statement.

    Unconditional appenders (``select``, ``where``, ``order_by``, ``limit``)
    are for trusted internal callers. The ``where_*`` filter methods take
    untrusted input, validate it and raise ``ValidationError`` without
    touching the builder when it is malformed. Every method returns the
    builder so calls can be chained.

    A builder is single-use and not safe to share between tasks.

    Example:
        >>> QueryBuilder("campaign").select("campaign.id").where_status(["enabled"]).build()
        'SELECT campaign.id FROM campaign WHERE campaign.status IN (ENABLED)'
    """

    def __init__(self, resource: str):
        self._resource = resource
        self._selects: list[str] = []
        self._wheres: list[Predicate] = []
        self._order_bys: list[str] = []
        self._limit: int | None = None

    @property
    def resource(self) -> str:
        return self._resource

    @property
    def predicates(self) -> tuple[Predicate, ...]:
        return tuple(self._wheres)

    def select(self, *fields: str) -> "QueryBuilder":
        self._selects.extend(fields)
        return self

    def where(self, predicate: Predicate | str) -> "QueryBuilder":
        if isinstance(predicate, str):
            predicate = RawPredicate(predicate)
        self._wheres.append(predicate)
        return self

    def order_by(self, *fields: str) -> "QueryBuilder":
        self._order_bys.extend(fields)
        return self

    def limit(self, n: int) -> "QueryBuilder":
        self._limit = n
        return self

    def _where_optional(self, predicate: Predicate | None) -> "QueryBuilder":
        if predicate is not None:
            self._wheres.append(predicate)
        return self

    # Filter methods

    def where_account_ids(self, ids: Sequence[str] | None) -> "QueryBuilder":
        return self._where_optional(id_predicate(ids, ACCOUNT_IDS))

    def where_account_names(self, names: Sequence[str] | None) -> "QueryBuilder":
        return self._where_optional(
            name_predicate(names, "customer_client.descriptive_name")
        )

    def where_campaign_ids(self, ids: Sequence[str] | None) -> "QueryBuilder":
        return self._where_optional(id_predicate(ids, CAMPAIGN_IDS))

    def where_campaign_names(self, names: Sequence[str] | None) -> "QueryBuilder":
        return self._where_optional(name_predicate(names, "campaign.name"))

    def where_ad_group_ids(self, ids: Sequence[str] | None) -> "QueryBuilder":
        return self._where_optional(id_predicate(ids, AD_GROUP_IDS))

    def where_ad_group_names(self, names: Sequence[str] | None) -> "QueryBuilder":
        return self._where_optional(name_predicate(names, "ad_group.name"))

    def where_status(self, statuses: Sequence[str] | None) -> "QueryBuilder":
        return self._where_optional(enum_predicate(statuses, CAMPAIGN_STATUS))

    def where_ad_group_status(self, statuses: Sequence[str] | None) -> "QueryBuilder":
        return self._where_optional(enum_predicate(statuses, AD_GROUP_STATUS))

    def where_ad_group_ad_status(
        self, statuses: Sequence[str] | None
    ) -> "QueryBuilder":
        return self._where_optional(enum_predicate(statuses, AD_GROUP_AD_STATUS))

    def where_ad_types(self, ad_types: Sequence[str] | None) -> "QueryBuilder":
        return self._where_optional(enum_predicate(ad_types, AD_TYPES))

    def where_date_range(self, start: str | None, end: str | None) -> "QueryBuilder":
        return self._where_optional(date_range_predicate(start, end))

    def build(self) -> str:
        """Render the accumulated clauses; never fails and never mutates."""
        query = f"SELECT {', '.join(self._selects)} FROM {self._resource}"
        if self._wheres:
            query += " WHERE " + " AND ".join(p.render() for p in self._wheres)
        if self._order_bys:
            query += " ORDER BY " + ", ".join(self._order_bys)
        if self._limit is not None:
            query += f" LIMIT {self._limit}"
        return query

    def __str__(self) -> str:
        return self.build()

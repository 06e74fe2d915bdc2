"""Shared plumbing for Google Ads report services.

A report service turns a filters object into a GAQL query, POSTs it to the
``googleAds:search`` endpoint of one customer and maps the returned rows to
normalized records. Subclasses supply the query and the row mapping; this
module owns endpoint construction, headers, status checks and parsing.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from pydantic import ValidationError as PydanticValidationError

from google_ads_mcp.clients.auth import TokenProvider
from google_ads_mcp.clients.http import HTTPResponse, ReliableHTTPClient
from google_ads_mcp.core.config import GoogleAdsConfig
from google_ads_mcp.core.exceptions import (
    APIError,
    AuthenticationError,
    RateLimitError,
    ResponseFormatError,
    ValidationError,
)
from google_ads_mcp.gaql import QueryBuilder
from google_ads_mcp.models.base import SearchResult, conversion_rate, to_micros
from google_ads_mcp.models.google_ads_rows import (
    GoogleAdsRow,
    Metrics,
    SearchGoogleAdsResponse,
)

logger = logging.getLogger(__name__)

FiltersT = TypeVar("FiltersT")
RecordT = TypeVar("RecordT")

DEFAULT_DATE_WINDOW = "segments.date DURING LAST_7_DAYS"


def normalize_customer_id(customer_id: str) -> str:
    """Strip whitespace, a ``customers/`` prefix and dashes from a customer ID.

    Raises:
        ValueError: If nothing is left or the rest is not numeric
    """
    cleaned = (customer_id or "").strip().removeprefix("customers/").replace("-", "")
    if not cleaned:
        raise ValueError("customer ID is required")
    if not (cleaned.isascii() and cleaned.isdigit()):
        raise ValueError(f"customer ID {customer_id!r} must be numeric")
    return cleaned


def requests_removed(statuses: list[str] | None) -> bool:
    """True when the caller explicitly asked for REMOVED entities."""
    return any((s or "").strip().upper() == "REMOVED" for s in statuses or ())


def apply_date_window(
    builder: QueryBuilder, start: str | None, end: str | None
) -> QueryBuilder:
    """Filter on the given dates, or the last 7 days when neither is set."""
    if (start or "").strip() or (end or "").strip():
        return builder.where_date_range(start, end)
    return builder.where(DEFAULT_DATE_WINDOW)


class BaseReportService(ABC, Generic[FiltersT, RecordT]):
    """Runs one kind of report against the Google Ads search endpoint.

    Args:
        config: Google Ads credentials and endpoint settings
        http_client: Client used for the search POST
        token_provider: Source of OAuth bearer tokens

    Subclasses set ``report_name`` (used to prefix error messages),
    ``resource`` and ``fields``, and implement ``build_query``,
    ``customer_id_for`` and ``map_row``.
    """

    report_name: str = ""
    resource: str = ""
    fields: tuple[str, ...] = ()
    # Reports scoped to a client account send login-customer-id
    scoped: bool = True

    def __init__(
        self,
        config: GoogleAdsConfig,
        http_client: ReliableHTTPClient,
        token_provider: TokenProvider,
    ):
        self.config = config
        self.http_client = http_client
        self.token_provider = token_provider

    def new_query(self) -> QueryBuilder:
        return QueryBuilder(self.resource).select(*self.fields)

    @abstractmethod
    def build_query(self, filters: FiltersT) -> str:
        """Return the GAQL text for ``filters``; raises ``ValidationError``."""

    @abstractmethod
    def customer_id_for(self, filters: FiltersT) -> str:
        """Customer whose search endpoint the report runs against."""

    @abstractmethod
    def map_row(self, row: GoogleAdsRow) -> RecordT | None:
        """Map one response row, or return None to skip a partial row."""

    def build_endpoint(self, customer_id: str) -> str:
        try:
            cleaned = normalize_customer_id(customer_id)
        except ValueError as e:
            raise ValidationError(
                f"{self.report_name}: invalid customer ID: {e}"
            ) from e
        return (
            f"{self.config.base_url}/{self.config.api_version}"
            f"/customers/{cleaned}/googleAds:search"
        )

    def build_headers(self, access_token: str) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {access_token}",
            "developer-token": self.config.developer_token.get_secret_value(),
        }
        if self.scoped and self.config.login_customer_id:
            headers["login-customer-id"] = self.config.login_customer_id
        return headers

    async def search(self, filters: FiltersT) -> SearchResult[RecordT]:
        """Run the report for ``filters``.

        Raises:
            ValidationError: If a filter or the customer ID is malformed
            AuthenticationError: If no access token could be obtained
            APIError: If the API answered with status >= 400
            TransportError: If the API could not be reached
            ResponseFormatError: If the response could not be parsed
        """
        endpoint = self.build_endpoint(self.customer_id_for(filters))

        try:
            query = self.build_query(filters)
        except ValidationError as e:
            raise ValidationError(f"{self.report_name}: building query: {e}") from e

        try:
            access_token = await self.token_provider.get_access_token()
        except AuthenticationError as e:
            raise AuthenticationError(
                f"{self.report_name}: failed to get access token: {e}"
            ) from e

        logger.debug(f"{self.report_name}: executing query: {query}")
        try:
            response = await self.http_client.post(
                endpoint, {"query": query}, self.build_headers(access_token)
            )
        except APIError as e:
            raise type(e)(
                f"{self.report_name}: executing request: {e}",
                status_code=e.status_code,
                body=e.body,
            ) from e

        self.check_status(response)
        parsed = self.parse_response(response)

        logger.info(
            f"{self.report_name}: request-id={response.headers.get('request-id', '')} "
            f"rows={len(parsed.results)}"
        )

        records = []
        for row in parsed.results:
            record = self.map_row(row)
            if record is not None:
                records.append(record)

        return SearchResult(
            rows=records,
            next_page_token=parsed.next_page_token,
            total_results_count=parsed.total_results_count,
        )

    def check_status(self, response: HTTPResponse) -> None:
        status = response.status_code
        if status < 400:
            return

        message = f"{self.report_name}: api error status {status} body {response.text}"
        if status == 429:
            raise RateLimitError(message, status_code=status, body=response.text)
        if status in (401, 403):
            raise AuthenticationError(message, status_code=status, body=response.text)
        raise APIError(message, status_code=status, body=response.text)

    def parse_response(self, response: HTTPResponse) -> SearchGoogleAdsResponse:
        try:
            return SearchGoogleAdsResponse.model_validate_json(response.body or b"{}")
        except PydanticValidationError as e:
            raise ResponseFormatError(
                f"{self.report_name}: unmarshal response: {e}",
                status_code=response.status_code,
                body=response.text,
            ) from e


def metric_values(metrics: Metrics) -> dict[str, Any]:
    """Fields shared by every metrics record, derived the same way everywhere."""
    return {
        "clicks": metrics.clicks,
        "impressions": metrics.impressions,
        "ctr": metrics.ctr,
        "average_cpc_micros": to_micros(metrics.average_cpc),
        "cost_micros": metrics.cost_micros,
        "conversions": metrics.conversions,
        "conversions_value": metrics.conversions_value,
        "cost_per_conversion": metrics.cost_per_conversion,
        "conversion_rate": conversion_rate(metrics.conversions, metrics.clicks),
        "all_conversions": metrics.all_conversions,
        "all_conversions_value": metrics.all_conversions_value,
        "all_conversions_from_interactions_rate": (
            metrics.all_conversions_from_interactions_rate
        ),
        "all_conversions_value_per_cost": metrics.all_conversions_value_per_cost,
        "cost_per_all_conversions": metrics.cost_per_all_conversions,
        "interactions": metrics.interactions,
        "engagement_rate": metrics.engagement_rate,
        "search_impression_share": metrics.search_impression_share,
        "search_rank_lost_impression_share": metrics.search_rank_lost_impression_share,
    }

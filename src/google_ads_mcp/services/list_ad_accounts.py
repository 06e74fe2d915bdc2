"""Lists the client accounts below the configured manager account."""

from google_ads_mcp.gaql import BooleanLiteral, Comparison, EnumLiteral
from google_ads_mcp.models.account import Account, AccountFilters
from google_ads_mcp.models.base import strip_enum_prefix
from google_ads_mcp.models.google_ads_rows import GoogleAdsRow
from google_ads_mcp.services.base import BaseReportService

ACCOUNT_FIELDS = (
    "customer_client.client_customer",
    "customer_client.descriptive_name",
    "customer_client.currency_code",
    "customer_client.time_zone",
    "customer_client.level",
    "customer_client.manager",
    "customer_client.status",
    "customer_client.id",
)


class ListAdAccountsService(BaseReportService[AccountFilters, Account]):
    """Enabled, non-manager accounts reachable from the root customer."""

    report_name = "listadaccounts"
    resource = "customer_client"
    fields = ACCOUNT_FIELDS
    scoped = False

    def customer_id_for(self, filters: AccountFilters) -> str:
        return self.config.customer_id

    def build_query(self, filters: AccountFilters) -> str:
        builder = (
            self.new_query()
            .where(Comparison("customer_client.status", "=", EnumLiteral("ENABLED")))
            .where(Comparison("customer_client.manager", "=", BooleanLiteral(False)))
        )
        builder.where_account_ids(filters.account_ids)
        builder.where_account_names(filters.account_names)
        return builder.build()

    def map_row(self, row: GoogleAdsRow) -> Account | None:
        client = row.customer_client
        if client is None:
            return None

        customer_id = client.id or client.client_customer.rpartition("/")[2]
        return Account(
            customer_id=customer_id,
            customer_name=client.descriptive_name,
            currency_code=client.currency_code,
            time_zone=client.time_zone,
            status=strip_enum_prefix(client.status, "CUSTOMER_STATUS_"),
            resource_name=client.resource_name,
            level=client.level,
            manager=client.manager,
        )

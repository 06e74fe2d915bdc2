"""Ad account records for the account listing report."""

from dataclasses import dataclass, field

from google_ads_mcp.models.base import RecordModel


@dataclass
class AccountFilters:
    """Caller-supplied filters for listing accounts under the root customer."""

    account_ids: list[str] = field(default_factory=list)
    account_names: list[str] = field(default_factory=list)


class Account(RecordModel):
    """A client account below the configured manager account."""

    customer_id: str = ""
    customer_name: str = ""
    currency_code: str = ""
    time_zone: str = ""
    status: str = ""
    resource_name: str = ""
    level: int = 0
    manager: bool = False

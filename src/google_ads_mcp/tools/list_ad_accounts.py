"""list_ad_accounts tool."""

from pydantic import BaseModel, Field

from google_ads_mcp.models.account import Account, AccountFilters
from google_ads_mcp.models.base import SearchResult
from google_ads_mcp.tools.base import ReportTool, ToolOutput


class ListAdAccountsInput(BaseModel):
    account_ids: list[str] = Field(
        default_factory=list,
        description="Account IDs (digits, dashes allowed, or customers/<id>)",
    )
    account_names: list[str] = Field(
        default_factory=list,
        description="Case-insensitive substrings of the account name",
    )


class ListAdAccountsOutput(ToolOutput):
    accounts: list[Account] = Field(default_factory=list)


class ListAdAccountsTool(ReportTool[ListAdAccountsInput]):
    name = "list_ad_accounts"
    input_model = ListAdAccountsInput

    def to_filters(self, params: ListAdAccountsInput) -> AccountFilters:
        return AccountFilters(
            account_ids=params.account_ids, account_names=params.account_names
        )

    def to_output(self, result: SearchResult[Account]) -> ListAdAccountsOutput:
        return ListAdAccountsOutput(
            accounts=result.rows,
            next_page_token=result.next_page_token or None,
            total_count=result.total_results_count,
        )

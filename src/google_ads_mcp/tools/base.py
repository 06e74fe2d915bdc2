"""Common behaviour of the tool adapters.

A tool adapter sits between the MCP layer and a report service. It checks
the raw arguments payload, validates it with a pydantic input model, turns
it into the service's filters, runs the report and serializes the result.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from google_ads_mcp.core.exceptions import ValidationError
from google_ads_mcp.models.base import SearchResult
from google_ads_mcp.services.base import BaseReportService

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT", bound=BaseModel)


class CustomerScopedInput(BaseModel):
    """Input for reports that run against a single client account."""

    customer_id: str = Field(
        ...,
        description="Google Ads customer ID, with or without dashes "
        "(e.g. 1234567890 or 123-456-7890)",
    )

    @field_validator("customer_id")
    @classmethod
    def customer_id_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("customer_id is required")
        return v.strip()


class ToolOutput(BaseModel):
    """Pagination metadata echoed unchanged from the API."""

    next_page_token: str | None = None
    total_count: int = 0

    def to_response(self) -> dict[str, Any]:
        """JSON-ready payload; an empty page token is left out."""
        data = self.model_dump(mode="json")
        if not data.get("next_page_token"):
            data.pop("next_page_token", None)
        return data


class ReportTool(ABC, Generic[InputT]):
    """Adapter from MCP tool arguments to one report service."""

    name: str = ""
    input_model: type[BaseModel]

    def __init__(self, service: BaseReportService):
        self.service = service

    @property
    def report_name(self) -> str:
        return self.service.report_name

    def parse_arguments(self, arguments: dict[str, Any] | None) -> InputT:
        """Validate the raw arguments payload.

        Raises:
            ValidationError: If the payload is missing or does not validate
        """
        if arguments is None:
            raise ValidationError(f"{self.report_name}: arguments payload is required")
        try:
            return self.input_model.model_validate(arguments)  # type: ignore[return-value]
        except PydanticValidationError as e:
            raise ValidationError(f"{self.report_name}: validation error: {e}") from e

    @abstractmethod
    def to_filters(self, params: InputT) -> Any:
        """Map validated input to the service's filters."""

    @abstractmethod
    def to_output(self, result: SearchResult) -> ToolOutput:
        """Wrap the service result in the tool's output schema."""

    async def run(self, arguments: dict[str, Any] | None) -> dict[str, Any]:
        params = self.parse_arguments(arguments)
        result = await self.service.search(self.to_filters(params))
        logger.info(f"{self.name}: returned {len(result.rows)} rows")
        return self.to_output(result).to_response()

"""FastMCP server exposing Google Ads reporting tools."""

import logging
import re
from enum import Enum
from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from google_ads_mcp import __version__
from google_ads_mcp.core.config import Transport, get_settings, setup_logging
from google_ads_mcp.core.exceptions import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    RateLimitError,
    TransportError,
    ValidationError,
)
from google_ads_mcp.tools.base import ReportTool
from google_ads_mcp.wiring import ToolRegistry, build_tools

logger = logging.getLogger(__name__)

SERVER_NAME = "Google Ads MCP"
SERVER_INSTRUCTIONS = "This is a Google Ads MCP server."

TOOL_NAMES = ["list_ad_accounts", "search_campaigns", "search_ad_groups", "search_ads"]


# ============================================================================
# Error Codes
# ============================================================================


class ErrorCode(str, Enum):
    """Error codes for programmatic error handling."""

    INVALID_INPUT = "INVALID_INPUT"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
    UPSTREAM_UNAVAILABLE = "UPSTREAM_UNAVAILABLE"
    API_ERROR = "API_ERROR"


# Initialize MCP server
mcp = FastMCP(SERVER_NAME, instructions=SERVER_INSTRUCTIONS)


# ============================================================================
# Helper Functions
# ============================================================================


def sanitize_error_message(msg: str) -> str:
    """Remove potential credentials from error messages.

    Args:
        msg: Original error message

    Returns:
        Sanitized error message with credentials redacted

    Examples:
        >>> sanitize_error_message("user@example.com authentication failed")
        '[EMAIL_REDACTED] authentication failed'
    """
    # Bearer tokens and other long opaque strings
    msg = re.sub(r"[A-Za-z0-9_-]{20,}", "[REDACTED]", msg)
    msg = re.sub(r"\b[\w.-]+@[\w.-]+\.\w+\b", "[EMAIL_REDACTED]", msg)
    # Google Ads customer IDs
    msg = re.sub(r"\b\d{10}\b", "[CUSTOMER_ID_REDACTED]", msg)
    msg = re.sub(
        r"(api[_-]?key|token|secret|password|credential)[\"']?\s*[:=]\s*[\"']?[^\s\"']+",
        r"\1=[REDACTED]",
        msg,
        flags=re.IGNORECASE,
    )
    return msg


# Tool registry shared across requests so the token cache and HTTP pool are reused
_tools_instance: ToolRegistry | None = None


def reset_tools_for_testing() -> None:
    """Reset the singleton tool registry (for testing only)."""
    global _tools_instance
    _tools_instance = None


def _get_tools() -> ToolRegistry:
    """Get or create the tool registry (singleton pattern).

    Raises:
        ConfigurationError: If settings or Google Ads credentials are invalid
    """
    global _tools_instance

    if _tools_instance is None:
        _tools_instance = build_tools(get_settings())
    return _tools_instance


def _error_code(error: Exception) -> ErrorCode:
    if isinstance(error, ValidationError):
        return ErrorCode.INVALID_INPUT
    if isinstance(error, ConfigurationError):
        return ErrorCode.CONFIGURATION_ERROR
    if isinstance(error, AuthenticationError):
        return ErrorCode.INVALID_CREDENTIALS
    if isinstance(error, RateLimitError):
        return ErrorCode.RATE_LIMIT_EXCEEDED
    if isinstance(error, TransportError):
        return ErrorCode.UPSTREAM_UNAVAILABLE
    return ErrorCode.API_ERROR


async def _run_tool(name: str, arguments: dict[str, Any]) -> dict[str, Any]:
    """Run one tool adapter, turning library errors into ToolError."""
    try:
        tool: ReportTool = getattr(_get_tools(), name)
        return await tool.run(arguments)
    except ValidationError as e:
        logger.warning(f"{name}: invalid input: {sanitize_error_message(str(e))}")
        raise ToolError(f"{ErrorCode.INVALID_INPUT.value}: {e}") from e
    except (ConfigurationError, APIError) as e:
        code = _error_code(e)
        logger.error(
            f"{name} failed ({code.value}): {sanitize_error_message(str(e))}",
            exc_info=True,
        )
        raise ToolError(f"{code.value}: {e}") from e


def _arguments(**kwargs: Any) -> dict[str, Any]:
    return {key: value for key, value in kwargs.items() if value is not None}


# ============================================================================
# Tools - Google Ads
# ============================================================================


@mcp.tool()
async def list_ad_accounts(
    account_ids: list[str] | None = None,
    account_names: list[str] | None = None,
) -> dict[str, Any]:
    """
    List the enabled client accounts under the configured manager account.

    Optionally narrow the list by account IDs (digits, dashes allowed, or
    customers/<id>) and by case-insensitive substrings of the account name.
    """
    return await _run_tool(
        "list_ad_accounts",
        _arguments(account_ids=account_ids, account_names=account_names),
    )


@mcp.tool()
async def search_campaigns(
    customer_id: str,
    campaign_ids: list[str] | None = None,
    campaign_names: list[str] | None = None,
    statuses: list[str] | None = None,
    date_range_start: str | None = None,
    date_range_end: str | None = None,
) -> dict[str, Any]:
    """
    Search campaigns of a Google Ads account with performance metrics.

    Filters by campaign IDs, name substrings and statuses (ENABLED, PAUSED,
    REMOVED). Removed campaigns are excluded unless REMOVED is requested.
    Metrics cover the given YYYY-MM-DD date range, or the last 7 days.
    """
    return await _run_tool(
        "search_campaigns",
        _arguments(
            customer_id=customer_id,
            campaign_ids=campaign_ids,
            campaign_names=campaign_names,
            statuses=statuses,
            date_range_start=date_range_start,
            date_range_end=date_range_end,
        ),
    )


@mcp.tool()
async def search_ad_groups(
    customer_id: str,
    ad_group_ids: list[str] | None = None,
    ad_group_names: list[str] | None = None,
    statuses: list[str] | None = None,
    campaign_ids: list[str] | None = None,
    campaign_names: list[str] | None = None,
    date_range_start: str | None = None,
    date_range_end: str | None = None,
) -> dict[str, Any]:
    """
    Search ad groups of a Google Ads account with performance metrics.

    Filters by ad group and campaign IDs or name substrings and by ad group
    status. Metrics cover the given date range, or the last 7 days.
    """
    return await _run_tool(
        "search_ad_groups",
        _arguments(
            customer_id=customer_id,
            ad_group_ids=ad_group_ids,
            ad_group_names=ad_group_names,
            statuses=statuses,
            campaign_ids=campaign_ids,
            campaign_names=campaign_names,
            date_range_start=date_range_start,
            date_range_end=date_range_end,
        ),
    )


@mcp.tool()
async def search_ads(
    customer_id: str,
    campaign_ids: list[str] | None = None,
    campaign_names: list[str] | None = None,
    ad_group_ids: list[str] | None = None,
    ad_group_names: list[str] | None = None,
    statuses: list[str] | None = None,
    ad_types: list[str] | None = None,
    date_range_start: str | None = None,
    date_range_end: str | None = None,
) -> dict[str, Any]:
    """
    Search ads of a Google Ads account with creative details and metrics.

    Filters by campaign and ad group, ad status (ENABLED, PAUSED, REMOVED,
    PENDING, DISAPPROVED) and ad type (e.g. RESPONSIVE_SEARCH_AD). Metrics
    cover the given date range, or the last 7 days.
    """
    return await _run_tool(
        "search_ads",
        _arguments(
            customer_id=customer_id,
            campaign_ids=campaign_ids,
            campaign_names=campaign_names,
            ad_group_ids=ad_group_ids,
            ad_group_names=ad_group_names,
            statuses=statuses,
            ad_types=ad_types,
            date_range_start=date_range_start,
            date_range_end=date_range_end,
        ),
    )


# ============================================================================
# Resources
# ============================================================================


@mcp.resource("resource://health")
def health_check() -> dict[str, Any]:
    """
    Provides server health status and configuration information.
    """
    try:
        configured = get_settings().google_ads is not None
    except ConfigurationError:
        configured = False

    health: dict[str, Any] = {
        "status": "healthy",
        "version": __version__,
        "server": SERVER_NAME,
        "google_ads_configured": configured,
        "tools_available": TOOL_NAMES,
    }
    if _tools_instance is not None:
        health["token"] = _tools_instance.token_manager.token_info()
    return health


@mcp.resource("resource://config")
def get_config() -> dict[str, Any]:
    """
    Provides the server's configuration status (without exposing secrets).
    """
    settings = get_settings()
    google_ads = settings.google_ads
    return {
        "server_version": __version__,
        "server": {
            "host": settings.server.host,
            "port": settings.server.port,
            "path": settings.server.path,
            "transport": settings.server.transport.value,
        },
        "google_ads": {
            "enabled": google_ads is not None,
            "api_version": google_ads.api_version if google_ads else None,
            "login_customer_id_configured": bool(
                google_ads and google_ads.login_customer_id
            ),
        },
        "http": {
            "timeout": settings.http.timeout,
            "max_retries": settings.http.max_retries,
            "retry_delay": settings.http.retry_delay,
            "max_retry_delay": settings.http.max_retry_delay,
        },
    }


# ============================================================================
# Server Factory
# ============================================================================


def create_mcp_server() -> FastMCP:
    """
    Create and return the configured MCP server instance.

    Returns:
        FastMCP: The configured server instance ready to run.
    """
    return mcp


def main() -> None:
    """Run the server with the configured transport."""
    settings = get_settings()
    setup_logging(settings)

    server = settings.server
    if server.transport == Transport.STDIO:
        logger.info(f"Starting {SERVER_NAME} on stdio")
        mcp.run(transport="stdio")
        return

    logger.info(
        f"Starting {SERVER_NAME} on http://{server.host}:{server.port}{server.path}"
    )
    mcp.run(
        transport=server.transport.value,
        host=server.host,
        port=server.port,
        path=server.path,
    )


# ============================================================================
# Entry Point
# ============================================================================

if __name__ == "__main__":
    main()

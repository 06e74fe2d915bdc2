"""Pytest configuration and shared fixtures for Google Ads MCP tests."""

import pytest
import pytest_asyncio

from google_ads_mcp.clients.http import ReliableHTTPClient
from google_ads_mcp.core.config import GoogleAdsConfig, HTTPConfig, get_settings
from google_ads_mcp.server import reset_tools_for_testing

ROOT_CUSTOMER_ID = "1112223333"
CUSTOMER_ID = "1234567890"
ACCESS_TOKEN = "test-access-token"
SEARCH_URL = f"https://googleads.googleapis.com/v22/customers/{CUSTOMER_ID}/googleAds:search"
ROOT_SEARCH_URL = (
    f"https://googleads.googleapis.com/v22/customers/{ROOT_CUSTOMER_ID}/googleAds:search"
)


class StaticTokenProvider:
    """Token provider that always hands out the same token."""

    def __init__(self, token: str = ACCESS_TOKEN):
        self.token = token
        self.calls = 0

    async def get_access_token(self) -> str:
        self.calls += 1
        return self.token


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached settings and the tool registry before each test."""
    get_settings.cache_clear()
    reset_tools_for_testing()
    yield
    get_settings.cache_clear()
    reset_tools_for_testing()


@pytest.fixture
def google_ads_config() -> GoogleAdsConfig:
    return GoogleAdsConfig(
        customer_id=ROOT_CUSTOMER_ID,
        developer_token="test-developer-token",
        service_account_json="{}",
    )


@pytest.fixture
def token_provider() -> StaticTokenProvider:
    return StaticTokenProvider()


@pytest_asyncio.fixture
async def http_client():
    client = ReliableHTTPClient(HTTPConfig(max_retries=0))
    yield client
    await client.aclose()


@pytest.fixture
def search_url() -> str:
    return SEARCH_URL


@pytest.fixture
def root_search_url() -> str:
    return ROOT_SEARCH_URL

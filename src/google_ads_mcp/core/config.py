"""Configuration management for the Google Ads MCP server."""

import json
import logging
import os
import sys
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import (
    BaseModel,
    Field,
    SecretStr,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

from google_ads_mcp.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "google-ads-config.json"
DEFAULT_SECRET_NAME = "GOOGLE_ADS_CONFIG"


class LogFormat(str, Enum):
    """Log format options."""

    JSON = "json"
    TEXT = "text"


class Transport(str, Enum):
    """MCP transports the server can run on."""

    STREAMABLE_HTTP = "streamable-http"
    STDIO = "stdio"


class ServerConfig(BaseModel):
    """Bind address and transport for the MCP server."""

    host: str = Field(default="0.0.0.0", description="Interface to listen on")
    port: int = Field(default=8080, ge=1, le=65535, description="Port to listen on")
    path: str = Field(default="/mcp", description="HTTP path of the MCP endpoint")
    transport: Transport = Transport.STREAMABLE_HTTP

    @field_validator("path")
    @classmethod
    def ensure_leading_slash(cls, v: str) -> str:
        """Make sure the endpoint path is absolute."""
        v = v.strip() or "/mcp"
        if not v.startswith("/"):
            v = "/" + v
        return v


class HTTPConfig(BaseModel):
    """Settings for the reliable HTTP client."""

    timeout: float = Field(
        default=30.0, gt=0, description="Per-request timeout in seconds"
    )
    max_retries: int = Field(
        default=3, ge=0, le=10, description="Retries after the first attempt"
    )
    retry_delay: float = Field(
        default=1.0, ge=0, description="Base delay for exponential backoff in seconds"
    )
    max_retry_delay: float = Field(
        default=30.0, ge=0, description="Upper bound for a single backoff wait"
    )
    user_agent: str = Field(default="google-ads-mcp/1.0")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO")
    format: LogFormat = LogFormat.TEXT

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level


def _clean_customer_id(value: str) -> str:
    cleaned = value.strip().removeprefix("customers/").replace("-", "")
    if not (cleaned.isascii() and cleaned.isdigit()):
        raise ValueError(f"Customer ID must contain only digits: {value}")
    return cleaned


class GoogleAdsConfig(BaseModel):
    """Google Ads API credentials and endpoint settings."""

    customer_id: str = Field(
        ..., min_length=1, description="Root (manager) customer ID"
    )
    developer_token: SecretStr = Field(..., min_length=1)
    service_account_json: SecretStr = Field(
        ..., min_length=1, description="Service account key file contents"
    )
    login_customer_id: str | None = Field(
        default=None,
        description="Manager account used for login-customer-id; defaults to customer_id",
    )
    api_version: str = Field(default="v22")
    base_url: str = Field(default="https://googleads.googleapis.com")

    @field_validator("customer_id")
    @classmethod
    def validate_customer_id(cls, v: str) -> str:
        """Validate and clean customer ID."""
        return _clean_customer_id(v)

    @field_validator("login_customer_id")
    @classmethod
    def validate_login_customer_id(cls, v: str | None) -> str | None:
        if v:
            return _clean_customer_id(v)
        return None

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @model_validator(mode="after")
    def default_login_customer_id(self) -> "GoogleAdsConfig":
        if not self.login_customer_id:
            self.login_customer_id = self.customer_id
        return self


def _credentials_from_mapping(data: dict[str, Any], source: str) -> dict[str, Any]:
    """Normalize a credentials document read from a file or secret."""
    if not isinstance(data, dict):
        raise ConfigurationError(f"Google Ads config from {source} must be an object")

    service_account = data.get("service_account_json")
    if isinstance(service_account, dict):
        service_account = json.dumps(service_account)

    credentials = {
        "customer_id": str(data.get("customer_id") or ""),
        "developer_token": data.get("developer_token") or "",
        "service_account_json": service_account or "",
    }
    missing = [key for key, value in credentials.items() if not value]
    if missing:
        raise ConfigurationError(
            f"Google Ads config from {source} is missing: {', '.join(missing)}"
        )
    if data.get("login_customer_id"):
        credentials["login_customer_id"] = str(data["login_customer_id"])
    return credentials


def load_google_ads_from_env(env: dict[str, str]) -> dict[str, Any] | None:
    """Read Google Ads credentials from environment variables."""
    customer_id = env.get("GOOGLE_ADS_CUSTOMER_ID")
    developer_token = env.get("GOOGLE_ADS_DEVELOPER_TOKEN")
    service_account_json = env.get("GOOGLE_ADS_SERVICE_ACCOUNT_JSON")

    if not (customer_id and developer_token and service_account_json):
        return None

    credentials: dict[str, Any] = {
        "customer_id": customer_id,
        "developer_token": developer_token,
        "service_account_json": service_account_json,
    }
    if env.get("GOOGLE_ADS_LOGIN_CUSTOMER_ID"):
        credentials["login_customer_id"] = env["GOOGLE_ADS_LOGIN_CUSTOMER_ID"]
    return credentials


def load_google_ads_from_file(path: Path) -> dict[str, Any] | None:
    """Read Google Ads credentials from a local JSON file, if it exists."""
    if not path.is_file():
        return None

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Failed to read Google Ads config {path}: {e}") from e

    logger.info(f"Loaded Google Ads config from {path}")
    return _credentials_from_mapping(data, str(path))


def load_google_ads_from_secret_manager(
    project_id: str, secret_name: str = DEFAULT_SECRET_NAME
) -> dict[str, Any]:
    """Read Google Ads credentials from GCP Secret Manager."""
    from google.cloud import secretmanager

    name = f"projects/{project_id}/secrets/{secret_name}/versions/latest"
    try:
        client = secretmanager.SecretManagerServiceClient()
        response = client.access_secret_version(request={"name": name})
        data = json.loads(response.payload.data.decode("UTF-8"))
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Secret {secret_name} is not valid JSON: {e}") from e
    except Exception as e:
        raise ConfigurationError(
            f"Failed to access secret {secret_name} in project {project_id}: {e}"
        ) from e

    logger.info(f"Loaded Google Ads config from Secret Manager: {secret_name}")
    return _credentials_from_mapping(data, f"secret {secret_name}")


class Settings(BaseSettings):
    """Application settings.

    Environment Variables:
        Server:
            PORT=8080
            MCP_SERVER_HOST=0.0.0.0
            MCP_SERVER_PATH=/mcp
            MCP_TRANSPORT=streamable-http  (or stdio)

        Google Ads credentials (first source that provides them wins):
            GOOGLE_ADS_CUSTOMER_ID, GOOGLE_ADS_DEVELOPER_TOKEN,
            GOOGLE_ADS_SERVICE_ACCOUNT_JSON, GOOGLE_ADS_LOGIN_CUSTOMER_ID (optional)
            GOOGLE_ADS_CONFIG_FILE=google-ads-config.json
            GOOGLE_CLOUD_PROJECT=my-project  (Secret Manager)
            GOOGLE_ADS_SECRET_NAME=GOOGLE_ADS_CONFIG

        Tuning:
            GOOGLE_ADS_MCP_LOG_LEVEL=INFO
            GOOGLE_ADS_MCP_LOG_FORMAT=text
            GOOGLE_ADS_MCP_HTTP_TIMEOUT=30
            GOOGLE_ADS_MCP_HTTP_MAX_RETRIES=3
    """

    model_config = SettingsConfigDict(
        env_prefix="GOOGLE_ADS_MCP_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    server: ServerConfig = Field(default_factory=ServerConfig)
    http: HTTPConfig = Field(default_factory=HTTPConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    google_ads: GoogleAdsConfig | None = None

    gcp_project_id: str | None = None
    google_ads_config_file: Path = Field(default=Path(DEFAULT_CONFIG_FILE))
    google_ads_secret_name: str = DEFAULT_SECRET_NAME

    @classmethod
    def from_env(cls, env_file: Path | None = None) -> "Settings":
        """Load settings from the environment, a local file or Secret Manager."""
        if env_file:
            load_dotenv(env_file)
        elif Path(".env").exists():
            load_dotenv(".env")

        env = dict(os.environ)

        server: dict[str, Any] = {
            "host": env.get("MCP_SERVER_HOST", "0.0.0.0"),
            "port": int(env.get("PORT", "8080")),
            "path": env.get("MCP_SERVER_PATH", "/mcp"),
            "transport": env.get("MCP_TRANSPORT", Transport.STREAMABLE_HTTP.value),
        }

        http: dict[str, Any] = {}
        if env.get("GOOGLE_ADS_MCP_HTTP_TIMEOUT"):
            http["timeout"] = float(env["GOOGLE_ADS_MCP_HTTP_TIMEOUT"])
        if env.get("GOOGLE_ADS_MCP_HTTP_MAX_RETRIES"):
            http["max_retries"] = int(env["GOOGLE_ADS_MCP_HTTP_MAX_RETRIES"])

        config_data: dict[str, Any] = {
            "server": server,
            "http": http,
            "logging": {
                "level": env.get("GOOGLE_ADS_MCP_LOG_LEVEL", "INFO"),
                "format": env.get("GOOGLE_ADS_MCP_LOG_FORMAT", LogFormat.TEXT.value),
            },
            "gcp_project_id": env.get("GOOGLE_CLOUD_PROJECT"),
            "google_ads_secret_name": env.get(
                "GOOGLE_ADS_SECRET_NAME", DEFAULT_SECRET_NAME
            ),
            "google_ads_config_file": Path(
                env.get("GOOGLE_ADS_CONFIG_FILE", DEFAULT_CONFIG_FILE)
            ),
        }

        credentials = load_google_ads_from_env(env)
        if credentials is None:
            credentials = load_google_ads_from_file(
                config_data["google_ads_config_file"]
            )
        if credentials is None and config_data["gcp_project_id"]:
            credentials = load_google_ads_from_secret_manager(
                config_data["gcp_project_id"], config_data["google_ads_secret_name"]
            )

        if credentials is not None:
            config_data["google_ads"] = credentials

        return cls(**config_data)

    def validate_required_settings(self) -> None:
        """Validate that all required settings are present."""
        if self.google_ads is None:
            raise ConfigurationError(
                "Google Ads configuration is required: set GOOGLE_ADS_CUSTOMER_ID, "
                "GOOGLE_ADS_DEVELOPER_TOKEN and GOOGLE_ADS_SERVICE_ACCOUNT_JSON, "
                f"provide {self.google_ads_config_file}, or set GOOGLE_CLOUD_PROJECT "
                f"with a {self.google_ads_secret_name} secret"
            )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    try:
        return Settings.from_env()
    except (ValidationError, ValueError) as e:
        logger.error(f"Configuration error: {e}")
        raise ConfigurationError(f"Invalid configuration: {e}") from e


class JsonFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings."""
    log_level = getattr(logging, settings.logging.level)

    if settings.logging.format == LogFormat.JSON:
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    # stdout carries the MCP protocol when running over stdio
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

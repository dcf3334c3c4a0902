"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import AliasChoices, Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the status service runtime and its client commands.

    Settings are read once at process start and stay fixed for the process
    lifetime. Environment variable names map to field names in uppercase, and
    a few fields also accept a short conventional name. The field name wins
    when both are set.
    Example: `application_port` reads from `APPLICATION_PORT` or `PORT`,
    `environment_name` reads from `ENVIRONMENT_NAME`, `NODE_ENV` or `APP_ENV`.

    Attributes:
        application_port: Web server port.
        application_host: Host interface for web server binding.
        environment_name: Runtime environment label reported by the root endpoint.
        service_name: Service identifier reported by health and info endpoints.
        service_version: Service version reported by root and info endpoints.
        welcome_message: Greeting reported by the root endpoint.
        log_level: Root logger level name.
        log_json: Emit JSON log lines when enabled, plain text otherwise.
        shutdown_grace_seconds: Time allowed for in-flight requests to finish on shutdown.
        server_url: Base URL used by `healthcheck` and `smoke` client commands. Defaults to
            `http://localhost:<application_port>` when unset.
        client_timeout_seconds: Request timeout used by client commands.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    application_port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("application_port", "PORT"),
    )
    application_host: str = Field(
        default="0.0.0.0",
        validation_alias=AliasChoices("application_host", "HOST"),
    )
    environment_name: str = Field(
        default="development",
        validation_alias=AliasChoices("environment_name", "NODE_ENV", "APP_ENV"),
    )
    service_name: str = Field(default="node-devops-server")
    service_version: str = Field(default="1.0.0")
    welcome_message: str = Field(default="Welcome to Node.js DevOps Server")
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=True)
    shutdown_grace_seconds: float = Field(default=10.0, gt=0)
    server_url: str | None = Field(default=None)
    client_timeout_seconds: float = Field(default=3.0, gt=0)

    @field_validator(
        "application_host",
        "environment_name",
        "service_name",
        "service_version",
        "welcome_message",
    )
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in _SUPPORTED_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_SUPPORTED_LOG_LEVELS)}")
        return normalized_value

    @field_validator("server_url")
    @classmethod
    def _validate_server_url(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        if not value:
            raise ValueError("value must not be blank")
        if not value.startswith(("http://", "https://")):
            raise ValueError("server_url must start with http:// or https://")
        return value.rstrip("/")

    @model_validator(mode="after")
    def _default_server_url_to_local_port(self) -> "AppSettings":
        if self.server_url is None:
            self.server_url = f"http://localhost:{self.application_port}"
        return self


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error

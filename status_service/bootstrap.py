"""Application bootstrap wiring for startup validation and dependency assembly."""

from __future__ import annotations

from fastapi import FastAPI

from status_service.api import create_api_application
from status_service.config import AppSettings, config_load_settings
from status_service.domain import ServiceContext, domain_create_service_context
from status_service.runtime import ProcessRuntimeProbe, RuntimeProbePort
from status_service.service import StatusService


def bootstrap_create_service_context(settings: AppSettings) -> ServiceContext:
    """Build the immutable process context from validated settings.

    Args:
        settings: Validated application settings.

    Returns:
        ServiceContext: Context with the process start instants recorded now.

    Raises:
        ValueError: Raised when settings carry blank labels.
    """

    return domain_create_service_context(
        service_name=settings.service_name,
        service_version=settings.service_version,
        environment_name=settings.environment_name,
        welcome_message=settings.welcome_message,
    )


def bootstrap_create_application(
    settings: AppSettings | None = None,
    runtime_probe: RuntimeProbePort | None = None,
) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings; loaded from the environment when omitted.
        runtime_probe: Optional runtime probe override.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    status_service = StatusService(
        context=bootstrap_create_service_context(resolved_settings),
        runtime_probe=runtime_probe or ProcessRuntimeProbe(),
    )
    return create_api_application(settings=resolved_settings, status_service=status_service)

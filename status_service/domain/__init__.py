"""Domain models used across application layer boundaries."""

from .models import (
    EchoEnvelope,
    HealthState,
    InfoReport,
    JsonValue,
    RootReport,
    ServiceContext,
    StatusReport,
    domain_create_service_context,
)
from .timestamps import domain_format_timestamp

__all__ = [
    "EchoEnvelope",
    "HealthState",
    "InfoReport",
    "JsonValue",
    "RootReport",
    "ServiceContext",
    "StatusReport",
    "domain_create_service_context",
    "domain_format_timestamp",
]

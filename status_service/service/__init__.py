"""Service layer package for status reporting operations."""

from .errors import BadRequestError, ServiceError, UnhandledServiceError
from .results import ServiceReport, ServiceResult, service_result_failure, service_result_success
from .status_service import ECHO_MESSAGE, HEALTHY_STATUS, StatusService, service_parse_json_body

__all__ = [
    "BadRequestError",
    "ECHO_MESSAGE",
    "HEALTHY_STATUS",
    "ServiceError",
    "ServiceReport",
    "ServiceResult",
    "StatusService",
    "UnhandledServiceError",
    "service_parse_json_body",
    "service_result_failure",
    "service_result_success",
]

"""Health endpoint router composition for orchestrator liveness probes."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from status_service.service import StatusService

from ..responses import api_render_service_result


def api_create_health_router(status_service: StatusService) -> APIRouter:
    """Create health-check router answering liveness probes.

    The endpoint has no dependency checks: it reports `healthy` whenever the
    process can execute code to answer.

    Args:
        status_service: Service producing status reports.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when status_service is invalid.
    """

    if status_service is None:
        raise ValueError("status_service must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return the liveness report.

        Returns:
            JSONResponse: Status report with HTTP 200.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        return api_render_service_result(status_service.service_get_health())

    return router

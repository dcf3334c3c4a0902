"""Main module entrypoint for local and container runtime execution.

This module validates startup configuration and either launches the FastAPI
service or runs one of the client commands against a running instance.
"""

from __future__ import annotations

import argparse
import json
import logging

import uvicorn
from fastapi import FastAPI

from status_service.bootstrap import bootstrap_create_application
from status_service.client import StatusServiceClient, client_run_healthcheck, client_run_smoke_test
from status_service.config import AppSettings, config_load_settings
from status_service.observability import observability_configure_logging

_LOGGER = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Run selected runtime command with validated startup configuration.

    Args:
        argv: Optional argument list; defaults to process arguments.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with a non-zero status when a command fails.
    """

    argument_parser = argparse.ArgumentParser(description="Status service runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "healthcheck", "smoke"),
        help="Runtime command: `api` starts server, `healthcheck` probes /health once, "
        "`smoke` calls every endpoint of a running server",
        type=str,
    )
    argument_parser.add_argument(
        "--url",
        dest="server_url",
        type=str,
        help="Optional server base URL override for `healthcheck` and `smoke`",
    )
    parsed_arguments = argument_parser.parse_args(argv)

    settings = config_load_settings()
    server_url = (parsed_arguments.server_url or settings.server_url).rstrip("/")

    if parsed_arguments.command == "healthcheck":
        exit_code = client_run_healthcheck(server_url, timeout_seconds=settings.client_timeout_seconds)
        if exit_code != 0:
            raise SystemExit(exit_code)
        return

    if parsed_arguments.command == "smoke":
        if not main_print_smoke_test(server_url, timeout_seconds=settings.client_timeout_seconds):
            raise SystemExit(1)
        return

    observability_configure_logging(level=settings.log_level, json_output=settings.log_json)
    application = bootstrap_create_application(settings=settings)
    main_serve(settings=settings, application=application)


def main_build_server_config(settings: AppSettings, application: FastAPI) -> uvicorn.Config:
    """Build uvicorn server configuration with graceful shutdown enabled.

    On SIGTERM or SIGINT uvicorn stops accepting connections and waits up to
    `shutdown_grace_seconds` for in-flight requests before exiting.

    Args:
        settings: Validated application settings.
        application: Application to serve.

    Returns:
        uvicorn.Config: Server configuration.

    Raises:
        ValueError: Raised when application is None.
    """

    if application is None:
        raise ValueError("application must not be None")

    return uvicorn.Config(
        application,
        host=settings.application_host,
        port=settings.application_port,
        timeout_graceful_shutdown=int(max(1, round(settings.shutdown_grace_seconds))),
        log_config=None,
    )


def main_serve(settings: AppSettings, application: FastAPI) -> None:
    """Serve the application until a termination signal is received.

    Args:
        settings: Validated application settings.
        application: Application to serve.

    Returns:
        None: Returns after graceful shutdown.

    Raises:
        SystemExit: Raised with status 1 when the server cannot start, for
            example when the port cannot be bound.
    """

    server = uvicorn.Server(main_build_server_config(settings=settings, application=application))
    try:
        server.run()
    except SystemExit as error:
        if error.code not in (0, None):
            _LOGGER.error(
                "server.startup_failed",
                extra={"host": settings.application_host, "port": settings.application_port},
            )
        raise
    if not server.started:
        _LOGGER.error(
            "server.startup_failed",
            extra={"host": settings.application_host, "port": settings.application_port},
        )
        raise SystemExit(1)


def main_print_smoke_test(server_url: str, timeout_seconds: float) -> bool:
    """Run the smoke test and print one line per endpoint to stdout.

    Args:
        server_url: Service base URL.
        timeout_seconds: Per-request timeout.

    Returns:
        bool: True when every endpoint passed.

    Raises:
        ValueError: Raised when server_url is blank.
    """

    print(f"Testing status service at {server_url}")
    with StatusServiceClient(server_url, timeout_seconds=timeout_seconds) as client:
        report = client_run_smoke_test(client)

    for step in report.steps:
        marker = "PASS" if step.passed else "FAIL"
        rendered_detail = json.dumps(step.detail, sort_keys=True) if step.passed else step.detail
        print(f"{marker} {step.name}: {rendered_detail}")

    print("All checks passed" if report.passed else "Smoke test failed")
    return report.passed


if __name__ == "__main__":
    main()

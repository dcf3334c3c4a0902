"""Typed interfaces for process runtime introspection."""

from typing import Protocol


class RuntimeProbePort(Protocol):
    """Port definition for reading read-only process runtime counters."""

    def runtime_memory_stats(self) -> dict[str, int]:
        """Return current memory usage grouped by region.

        Returns:
            dict[str, int]: Memory region name to byte count.

        Raises:
            RuntimeError: Raised when memory counters are unavailable.
        """

    def runtime_platform_name(self) -> str:
        """Return the operating system platform identifier.

        Returns:
            str: Platform identifier such as `linux`.

        Raises:
            RuntimeError: Raised when platform metadata is unavailable.
        """

    def runtime_version(self) -> str:
        """Return the interpreter version string.

        Returns:
            str: Interpreter version such as `3.12.4`.

        Raises:
            RuntimeError: Raised when interpreter metadata is unavailable.
        """

"""Process runtime probe backed by procfs and resource usage counters."""

from __future__ import annotations

import os
import platform
import sys
from pathlib import Path

try:
    import resource
except ImportError:  # not available on Windows
    resource = None

from .interfaces import RuntimeProbePort

_PROC_STATM_PATH = Path("/proc/self/statm")


class ProcessRuntimeProbe(RuntimeProbePort):
    """Runtime probe reading counters of the current interpreter process."""

    def __init__(self, statm_path: Path = _PROC_STATM_PATH, page_size: int | None = None):
        """Initialize runtime probe.

        Args:
            statm_path: Location of the procfs memory status file.
            page_size: Optional page size override in bytes.

        Raises:
            ValueError: Raised when page size is not positive.
        """

        resolved_page_size = page_size if page_size is not None else _runtime_detect_page_size()
        if resolved_page_size <= 0:
            raise ValueError("page_size must be > 0")
        self._statm_path = statm_path
        self._page_size = resolved_page_size

    def runtime_memory_stats(self) -> dict[str, int]:
        """Return resident, virtual, shared and peak resident memory in bytes.

        Regions that cannot be read on the current platform are omitted.

        Returns:
            dict[str, int]: Memory region name to byte count.

        Raises:
            RuntimeError: This probe does not raise runtime errors.
        """

        memory_stats: dict[str, int] = {}
        memory_stats.update(self._runtime_read_statm())
        peak_rss = _runtime_read_peak_rss()
        if peak_rss is not None:
            memory_stats["peakRss"] = peak_rss
        return memory_stats

    def runtime_platform_name(self) -> str:
        """Return the interpreter platform identifier.

        Returns:
            str: Value of `sys.platform`.

        Raises:
            RuntimeError: This probe does not raise runtime errors.
        """

        return sys.platform

    def runtime_version(self) -> str:
        """Return implementation-qualified interpreter version.

        Returns:
            str: Version such as `CPython 3.12.4`.

        Raises:
            RuntimeError: This probe does not raise runtime errors.
        """

        return f"{platform.python_implementation()} {platform.python_version()}"

    def _runtime_read_statm(self) -> dict[str, int]:
        try:
            raw_fields = self._statm_path.read_text(encoding="ascii").split()
        except OSError:
            return {}
        if len(raw_fields) < 3:
            return {}
        try:
            virtual_pages, resident_pages, shared_pages = (int(value) for value in raw_fields[:3])
        except ValueError:
            return {}
        return {
            "rss": resident_pages * self._page_size,
            "virtual": virtual_pages * self._page_size,
            "shared": shared_pages * self._page_size,
        }


def _runtime_detect_page_size() -> int:
    try:
        return int(os.sysconf("SC_PAGE_SIZE"))
    except (AttributeError, ValueError, OSError):
        return 4096


def _runtime_read_peak_rss() -> int | None:
    if resource is None:
        return None
    max_rss = int(resource.getrusage(resource.RUSAGE_SELF).ru_maxrss)
    # macOS reports bytes, Linux reports kilobytes.
    if sys.platform == "darwin":
        return max_rss
    return max_rss * 1024

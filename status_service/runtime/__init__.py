"""Runtime layer package for process introspection boundaries."""

from .interfaces import RuntimeProbePort
from .process import ProcessRuntimeProbe

__all__ = ["ProcessRuntimeProbe", "RuntimeProbePort"]

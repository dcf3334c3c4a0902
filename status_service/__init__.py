"""Status service: liveness, introspection and echo endpoints for orchestrated deployments."""

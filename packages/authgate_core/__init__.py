"""authgate service assembly: handler errors, shutdown supervision and app wiring."""

from .app import build_app, build_registry
from .supervisor import ShutdownSupervisor

__all__ = ["ShutdownSupervisor", "build_app", "build_registry"]

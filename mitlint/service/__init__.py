"""HTTP service mode for mit-lint."""

from .app import create_app, run_service

__all__ = ["create_app", "run_service"]

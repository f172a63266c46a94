"""FastAPI dependency injection."""

from __future__ import annotations

from plansight.config import Settings, settings


def get_settings() -> Settings:
    """Process-wide settings, loaded once at import.

    Endpoints take limits through this dependency rather than the module
    global so tests can swap them with ``app.dependency_overrides``.
    """
    return settings

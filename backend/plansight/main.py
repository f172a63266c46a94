"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from plansight.config import settings
from plansight.engine.registry import get_registry

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.plansight_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)

# Step modules live one per file under these engine packages.
_LAYER_PACKAGES = ["layer0", "layer1", "layer2"]


def create_app() -> FastAPI:
    app = FastAPI(
        title="PlanSight",
        description="Drawing interpretation engine: rooms, corridors and a plain-language reading",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all step modules to trigger registration
    _register_transforms()

    from plansight.api.router import api_router

    app.include_router(api_router)

    logger.info(
        "PlanSight (%s): %d steps, max_elements=%d, room_search_max_pairs=%d",
        settings.plansight_env,
        get_registry().count,
        settings.max_elements,
        settings.room_search_max_pairs,
    )

    return app


def _register_transforms() -> None:
    """Import all step modules so @transform decorators fire."""
    import importlib
    import pkgutil

    for layer_name in _LAYER_PACKAGES:
        package_name = f"plansight.engine.{layer_name}"
        package = importlib.import_module(package_name)
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package_name}.{module_name}")


app = create_app()

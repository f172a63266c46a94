"""Application configuration from environment variables.

Every field can be set as an upper-case environment variable or in ``.env``
(``MAX_ELEMENTS=2000``, ``ROOM_SEARCH_MAX_PAIRS=50000``). Geometric
tolerances are not settings; see ``engine/spatial_constants.py``.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

from plansight.engine.config import PipelineConfig


class Settings(BaseSettings):
    plansight_env: str = "development"
    plansight_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Request limits: drawing elements or document sections per request (413 above)
    max_elements: int = Field(default=5000, ge=1)

    # Adaptive gate: wall-pair combinations the room search may test before
    # the drawing is reported without rooms.
    room_search_max_pairs: int = Field(
        default=PipelineConfig.room_search_max_pairs, ge=0
    )

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def pipeline_config(self) -> PipelineConfig:
        return PipelineConfig(room_search_max_pairs=self.room_search_max_pairs)


settings = Settings()

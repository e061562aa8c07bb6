"""Application configuration and settings management."""

from typing import Any, Literal, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="TOUR_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Tourist Route Planner API"
    api_prefix: str = "/api"
    log_level: str = Field(default="INFO", description="Root logging level applied by the app factory.")
    osrm_base_url: Optional[str] = Field(
        default="https://router.project-osrm.org",
        description="Base URL for the OSRM routing service (e.g., http://localhost:5000).",
    )
    osrm_timeout_seconds: float = Field(default=10.0, gt=0.0, description="HTTP timeout for a single route lookup.")
    osrm_geometries: Literal["geojson", "polyline"] = Field(
        default="geojson",
        description="Geometry encoding requested from the OSRM route endpoint.",
    )
    max_parallel_requests: int = Field(
        default=8,
        ge=1,
        description="Upper bound on concurrent route lookups for a single request.",
    )
    route_timeout_seconds: float = Field(
        default=60.0,
        gt=0.0,
        description="Deadline for resolving every leg of one optimization request.",
    )
    distance_threshold_km: float = Field(
        default=50.0,
        ge=0.0,
        description="Legs longer than this are flagged as too far.",
    )
    reachability_max_distance_km: float = Field(default=100.0, ge=0.0)
    explore_max_depth: int = Field(default=5, ge=1)
    explore_max_depth_limit: int = Field(
        default=8,
        ge=1,
        description="Largest max_depth a caller may request for path exploration.",
    )
    explore_max_places: int = Field(default=25, ge=1, description="Largest place list accepted for path exploration.")
    explore_max_paths: int = Field(
        default=10_000,
        ge=1,
        description="Upper bound on the number of paths one exploration request may enumerate.",
    )
    default_travel_mode: str = Field(default="car", description="Travel mode key used when a request omits one.")
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:8080",
            "http://127.0.0.1:8080",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("osrm_base_url", mode="before")
    @classmethod
    def _strip_trailing_slash(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        text = str(value).strip()
        return text.rstrip("/") or None

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            # Try JSON first
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()

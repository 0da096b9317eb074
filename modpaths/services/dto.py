"""
Centralized DTOs for serialising path registry state.
"""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import ConfigDict

from modpaths.services.path_registry import PathRegistry


class PathSnapshotDTO(BaseModel):
    model_config = ConfigDict(extra="forbid")

    app_id: str
    initialized: bool
    paths: dict[str, str]

    @classmethod
    def from_registry(cls, registry: PathRegistry) -> "PathSnapshotDTO":
        return cls(
            app_id=registry.bound_app_id,
            initialized=registry.is_initialized,
            paths=registry.snapshot(),
        )


class LegacyPathsDTO(BaseModel):
    model_config = ConfigDict(extra="forbid")

    legacy_dirs: list[str]


__all__ = ["LegacyPathsDTO", "PathSnapshotDTO"]

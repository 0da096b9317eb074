"""Service layer modules for modpaths."""

from .path_registry import (  # noqa: F401
    PathRegistry,
    get_registry,
    init_paths,
    substitute_game_version,
)

__all__ = ["PathRegistry", "get_registry", "init_paths", "substitute_game_version"]

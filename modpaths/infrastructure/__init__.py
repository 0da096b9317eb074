"""Infrastructure layer for modpaths.

Holds the configuration loader and the observability facade. Nothing here
touches the paths the registry computes.
"""

from . import config, observability

__all__ = ["config", "observability"]

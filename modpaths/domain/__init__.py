"""Domain layer for modpaths.

Pure models describing which paths exist and how each one is derived. No
module here holds process-wide state.
"""

from . import models

__all__ = ["models"]

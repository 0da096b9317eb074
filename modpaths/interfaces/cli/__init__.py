"""CLI interface for modpaths.

This package is the home for all Click commands. Use
``python -m modpaths.interfaces.cli`` or the ``modpaths`` console script.
"""

from .__main__ import cli
from .legacy import legacy
from .paths import get_cmd, packages, show

__all__ = ["cli", "get_cmd", "legacy", "packages", "show"]

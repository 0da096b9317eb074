"""Domain models package.

This package contains the path slot, template and layout models.
"""

from .layout import DEFAULT_LAYOUT, LEGACY_DIRS, Layout, resolution_order
from .paths import (
    VERSION_PLACEHOLDER,
    LayoutError,
    PathSlot,
    PathSlotName,
    PathTemplate,
    TemplateKind,
)

__all__ = [
    "DEFAULT_LAYOUT",
    "LEGACY_DIRS",
    "Layout",
    "LayoutError",
    "PathSlot",
    "PathSlotName",
    "PathTemplate",
    "TemplateKind",
    "VERSION_PLACEHOLDER",
    "resolution_order",
]

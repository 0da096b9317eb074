"""Path slot and template models."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from string import Formatter
from typing import Mapping

# Token left inside the mod packages directory for the game version.
VERSION_PLACEHOLDER = "$"


class LayoutError(ValueError):
    """Raised when a path layout cannot be resolved into a population order."""


class PathSlotName(str, Enum):
    """Names of every path the registry tracks."""

    APP_ID = "app_id"
    MOD_PACKAGES_DIR = "mod_packages_dir"
    LEGACY_MOD_PACKAGES_DIR = "legacy_mod_packages_dir"
    MODDATA_NOMEDIA = "moddata_nomedia"
    MODLOADER_DIR = "modloader_dir"
    LATE_MODS_DIR = "late_mods_dir"
    EARLY_MODS_DIR = "early_mods_dir"
    LIBS_DIR = "libs_dir"
    APP_FILES_DIR = "app_files_dir"
    PLAYER_DATA = "player_data"
    PLAYER_DATA_BACKUP = "player_data_backup"
    OBB_DIR = "obb_dir"
    DATAKEEPER_PLAYER_DATA = "datakeeper_player_data"
    AUX_DATA_BACKUP = "aux_data_backup"
    CUSTOM_LEVELS_DIR = "custom_levels_dir"
    DOWNLOADS_DIR = "downloads_dir"
    TEMP_DIR = "temp_dir"
    RES_CACHE_DIR = "res_cache_dir"

    @classmethod
    def from_string(cls, value: "str | PathSlotName") -> "PathSlotName":
        """Look up a slot by its value, accepting dashes for underscores.

        Raises:
            KeyError: If no slot carries that name.
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("-", "_")
        try:
            return cls(normalized)
        except ValueError:
            raise KeyError(value) from None


class TemplateKind(str, Enum):
    """How a slot's value is derived."""

    LITERAL = "literal"
    APP_ID = "app_id"
    SLOT = "slot"


# Format fields each template kind may reference.
_ALLOWED_FIELDS = {
    TemplateKind.APP_ID: "app_id",
    TemplateKind.SLOT: "base",
}


def _check_fields(template: "PathTemplate") -> None:
    allowed = _ALLOWED_FIELDS.get(template.kind)
    if allowed is None:
        return
    try:
        fields = list(Formatter().parse(template.pattern))
    except ValueError as exc:
        raise LayoutError(f"Malformed template {template.pattern!r}: {exc}") from exc
    for _, field_name, format_spec, conversion in fields:
        if field_name is None:
            continue
        if field_name != allowed or format_spec or conversion:
            raise LayoutError(
                f"{template.kind.value} template {template.pattern!r} may only "
                f"reference {{{allowed}}}"
            )


@dataclass(frozen=True)
class PathTemplate:
    """Rule for deriving one slot value.

    ``APP_ID`` patterns reference ``{app_id}``; ``SLOT`` patterns reference
    ``{base}``, the already computed value of ``depends_on``.
    """

    kind: TemplateKind
    pattern: str
    depends_on: PathSlotName | None = None

    def __post_init__(self) -> None:
        if self.kind is TemplateKind.SLOT and self.depends_on is None:
            raise LayoutError(f"Slot template {self.pattern!r} has no dependency")
        if self.kind is not TemplateKind.SLOT and self.depends_on is not None:
            raise LayoutError(
                f"{self.kind.value} template {self.pattern!r} cannot depend on "
                f"{self.depends_on.value}"
            )
        _check_fields(self)

    @classmethod
    def literal(cls, value: str) -> "PathTemplate":
        return cls(TemplateKind.LITERAL, value)

    @classmethod
    def from_app_id(cls, pattern: str) -> "PathTemplate":
        return cls(TemplateKind.APP_ID, pattern)

    @classmethod
    def from_slot(cls, slot: PathSlotName, pattern: str) -> "PathTemplate":
        return cls(TemplateKind.SLOT, pattern, slot)

    def render(self, app_id: str, resolved: Mapping[PathSlotName, str]) -> str:
        """Return the slot value for ``app_id`` given already resolved slots."""
        if self.kind is TemplateKind.LITERAL:
            return self.pattern
        if self.kind is TemplateKind.APP_ID:
            return self.pattern.format(app_id=app_id)
        if self.depends_on is None:
            raise LayoutError(f"Slot template {self.pattern!r} has no dependency")
        return self.pattern.format(base=resolved[self.depends_on])


class PathSlot:
    """Write-once storage for a single path.

    The first :meth:`set_once` wins; later calls leave the value untouched
    and return the stored one.
    """

    __slots__ = ("name", "_value", "_lock")

    def __init__(self, name: PathSlotName) -> None:
        self.name = name
        self._value: str | None = None
        self._lock = threading.Lock()

    @property
    def is_set(self) -> bool:
        return self._value is not None

    @property
    def value(self) -> str:
        """The stored path, or an empty string before population."""
        return self._value if self._value is not None else ""

    def set_once(self, value: str) -> str:
        with self._lock:
            if self._value is None:
                self._value = value
            return self._value

    def __repr__(self) -> str:
        return f"PathSlot({self.name.value!r}, {self._value!r})"


__all__ = [
    "LayoutError",
    "PathSlot",
    "PathSlotName",
    "PathTemplate",
    "TemplateKind",
    "VERSION_PLACEHOLDER",
]

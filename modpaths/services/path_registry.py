"""Registry of every filesystem path the mod installation agent touches.

A :class:`PathRegistry` is bound to one application identifier the first
time :meth:`PathRegistry.initialize` runs. Each slot is computed once, in
dependency order, and never changes afterwards. Later ``initialize`` calls
are no-ops, even with a different identifier.

Most callers use the process-wide registry::

    from modpaths.services.path_registry import init_paths

    paths = init_paths("com.beatgames.beatsaber")
    paths.late_mods_dir  # "/sdcard/ModData/com.beatgames.beatsaber/Modloader/mods"

Reading a slot before initialization returns an empty string.
"""

from __future__ import annotations

import threading
from types import MappingProxyType

from modpaths.domain.models import (
    DEFAULT_LAYOUT,
    LEGACY_DIRS,
    VERSION_PLACEHOLDER,
    Layout,
    PathSlot,
    PathSlotName,
    resolution_order,
)
from modpaths.infrastructure.observability import get_logger, log_context

_logger = get_logger(__name__)


def _slot_property(name: PathSlotName, doc: str) -> property:
    def getter(self: "PathRegistry") -> str:
        return self.get(name)

    return property(getter, doc=doc)


class PathRegistry:
    """Write-once set of named paths derived from an application identifier."""

    legacy_dirs: tuple[str, ...] = LEGACY_DIRS

    def __init__(self, layout: Layout | None = None) -> None:
        """Build an empty registry for ``layout``.

        Args:
            layout: Slot templates to resolve; defaults to the agent's
                device layout.

        Raises:
            LayoutError: If the layout references unknown slots or contains
                a dependency cycle.
        """
        self._layout: Layout = MappingProxyType(
            dict(DEFAULT_LAYOUT if layout is None else layout)
        )
        self._order = resolution_order(self._layout)
        self._slots = {name: PathSlot(name) for name in self._layout}
        self._app_id: str | None = None
        self._lock = threading.Lock()
        self._initialized = threading.Event()

    @property
    def is_initialized(self) -> bool:
        return self._initialized.is_set()

    @property
    def bound_app_id(self) -> str:
        """The identifier the registry was initialized with, or ``""``."""
        return self._app_id or ""

    @property
    def slot_names(self) -> list[PathSlotName]:
        return list(self._layout)

    def initialize(self, app_id: str) -> None:
        """Bind ``app_id`` and populate every slot, once.

        Concurrent callers block until the first one has finished, so every
        caller sees a fully populated registry when this returns.
        """
        if self._initialized.is_set():
            self._ignore(app_id)
            return
        with self._lock:
            if self._initialized.is_set():
                self._ignore(app_id)
                return
            with log_context(app_id=app_id):
                _logger.info("Initializing path registry")
                # Render everything first so a failing template binds nothing.
                resolved: dict[PathSlotName, str] = {}
                for name in self._order:
                    resolved[name] = self._layout[name].render(app_id, resolved)
                self._app_id = app_id
                for name in self._order:
                    value = self._slots[name].set_once(resolved[name])
                    _logger.debug("Resolved %s -> %s", name.value, value)
            self._initialized.set()

    def _ignore(self, app_id: str) -> None:
        if app_id != self._app_id:
            _logger.warning(
                "Path registry already bound to %s; ignoring %s", self._app_id, app_id
            )
        else:
            _logger.debug("Path registry already initialized")

    def get(self, name: PathSlotName | str) -> str:
        """Return the value of slot ``name`` (``""`` before initialization).

        Raises:
            KeyError: If ``name`` is not a slot of this registry's layout.
        """
        slot = self._slots.get(PathSlotName.from_string(name))
        if slot is None:
            raise KeyError(name)
        return slot.value

    def snapshot(self) -> dict[str, str]:
        """Return every slot value keyed by slot name, in layout order."""
        return {name.value: slot.value for name, slot in self._slots.items()}

    app_id = _slot_property(PathSlotName.APP_ID, "Identifier of the modded app.")
    mod_packages_dir = _slot_property(
        PathSlotName.MOD_PACKAGES_DIR,
        "Directory holding mod packages. Keeps the ``$`` game version "
        "placeholder; see :func:`substitute_game_version`.",
    )
    legacy_mod_packages_dir = _slot_property(
        PathSlotName.LEGACY_MOD_PACKAGES_DIR,
        "Mod package directory used by older agent builds.",
    )
    moddata_nomedia = _slot_property(
        PathSlotName.MODDATA_NOMEDIA, "The ``.nomedia`` marker inside ModData."
    )
    modloader_dir = _slot_property(
        PathSlotName.MODLOADER_DIR, "Directory containing the modloader."
    )
    late_mods_dir = _slot_property(
        PathSlotName.LATE_MODS_DIR, "Installed late mod files."
    )
    early_mods_dir = _slot_property(
        PathSlotName.EARLY_MODS_DIR, "Installed early mod files."
    )
    libs_dir = _slot_property(PathSlotName.LIBS_DIR, "Installed library files.")
    app_files_dir = _slot_property(
        PathSlotName.APP_FILES_DIR, "Android ``files`` directory of the app."
    )
    player_data = _slot_property(
        PathSlotName.PLAYER_DATA, "``PlayerData.dat`` of the unmodded game."
    )
    player_data_backup = _slot_property(
        PathSlotName.PLAYER_DATA_BACKUP, "The game's own ``PlayerData.dat`` backup."
    )
    obb_dir = _slot_property(PathSlotName.OBB_DIR, "OBB directory of the app.")
    datakeeper_player_data = _slot_property(
        PathSlotName.DATAKEEPER_PLAYER_DATA,
        "``PlayerData.dat`` kept by the datakeeper mod.",
    )
    aux_data_backup = _slot_property(
        PathSlotName.AUX_DATA_BACKUP,
        "Extra copy of ``PlayerData.dat`` taken before modding.",
    )
    custom_levels_dir = _slot_property(
        PathSlotName.CUSTOM_LEVELS_DIR, "SongCore custom levels directory."
    )
    downloads_dir = _slot_property(
        PathSlotName.DOWNLOADS_DIR, "Scratch directory for downloads."
    )
    temp_dir = _slot_property(PathSlotName.TEMP_DIR, "Temporary directory for patching.")
    res_cache_dir = _slot_property(PathSlotName.RES_CACHE_DIR, "Resource cache.")


def substitute_game_version(path: str, game_version: str) -> str:
    """Replace the game version placeholder in ``path``.

    The registry leaves ``$`` in :attr:`PathRegistry.mod_packages_dir`; the
    code that knows the installed game version resolves it with this.
    """
    return path.replace(VERSION_PLACEHOLDER, game_version)


_default_registry = PathRegistry()


def get_registry() -> PathRegistry:
    """Return the process-wide registry."""
    return _default_registry


def init_paths(app_id: str) -> PathRegistry:
    """Initialize the process-wide registry and return it."""
    registry = get_registry()
    registry.initialize(app_id)
    return registry


__all__ = [
    "PathRegistry",
    "get_registry",
    "init_paths",
    "substitute_game_version",
]

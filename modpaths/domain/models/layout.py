"""Path layout of the modding agent on the device.

``DEFAULT_LAYOUT`` lists every slot in declaration order. Slot-derived
entries may appear in any position; :func:`resolution_order` sorts them
after their dependencies.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .paths import LayoutError, PathSlotName, PathTemplate, TemplateKind

S = PathSlotName
T = PathTemplate

Layout = Mapping[PathSlotName, PathTemplate]

DEFAULT_LAYOUT: Layout = MappingProxyType(
    {
        S.APP_ID: T.from_app_id("{app_id}"),
        S.MOD_PACKAGES_DIR: T.from_app_id("/sdcard/ModData/{app_id}/Packages/$"),
        S.LEGACY_MOD_PACKAGES_DIR: T.literal("/sdcard/ModsBeforeFriday/Mods"),
        S.MODDATA_NOMEDIA: T.from_app_id("/sdcard/ModData/{app_id}/.nomedia"),
        S.MODLOADER_DIR: T.from_app_id("/sdcard/ModData/{app_id}/Modloader"),
        S.LATE_MODS_DIR: T.from_slot(S.MODLOADER_DIR, "{base}/mods"),
        S.EARLY_MODS_DIR: T.from_slot(S.MODLOADER_DIR, "{base}/early_mods"),
        S.LIBS_DIR: T.from_slot(S.MODLOADER_DIR, "{base}/libs"),
        S.APP_FILES_DIR: T.from_app_id("/sdcard/Android/data/{app_id}/files"),
        S.PLAYER_DATA: T.from_slot(S.APP_FILES_DIR, "{base}/PlayerData.dat"),
        S.PLAYER_DATA_BACKUP: T.from_slot(S.APP_FILES_DIR, "{base}/PlayerData.dat.bak"),
        S.OBB_DIR: T.from_app_id("/sdcard/Android/obb/{app_id}/"),
        S.DATAKEEPER_PLAYER_DATA: T.from_app_id(
            "/sdcard/ModData/{app_id}/Mods/datakeeper/PlayerData.dat"
        ),
        S.AUX_DATA_BACKUP: T.literal("/sdcard/ModsBeforeFriday/PlayerData.backup.dat"),
        S.CUSTOM_LEVELS_DIR: T.from_app_id(
            "/sdcard/ModData/{app_id}/Mods/SongCore/CustomLevels"
        ),
        S.DOWNLOADS_DIR: T.literal("/data/local/tmp/mbf/downloads"),
        S.TEMP_DIR: T.literal("/data/local/tmp/mbf/tmp"),
        S.RES_CACHE_DIR: T.literal("/data/local/tmp/mbf/res-cache"),
    }
)

# Directories from older agent builds, deleted on startup when present.
LEGACY_DIRS: tuple[str, ...] = (
    "/data/local/tmp/mbf-downloads",
    "/data/local/tmp/mbf-res-cache",
    "/data/local/tmp/mbf-tmp",
    "/data/local/tmp/mbf-uploads",
)


def resolution_order(layout: Layout) -> list[PathSlotName]:
    """Return the slots of ``layout`` with every dependency before its dependents.

    Slots keep their declaration order except where a dependency forces an
    earlier position.

    Raises:
        LayoutError: If a template depends on a slot missing from ``layout``
            or the dependencies form a cycle.
    """
    order: list[PathSlotName] = []
    done: set[PathSlotName] = set()

    for start in layout:
        chain: list[PathSlotName] = []
        current: PathSlotName | None = start
        while current is not None and current not in done:
            if current in chain:
                cycle = " -> ".join(s.value for s in chain + [current])
                raise LayoutError(f"Dependency cycle in path layout: {cycle}")
            if current not in layout:
                raise LayoutError(
                    f"{chain[-1].value} depends on {current.value}, "
                    "which is not part of the layout"
                )
            chain.append(current)
            template = layout[current]
            current = template.depends_on if template.kind is TemplateKind.SLOT else None
        for slot in reversed(chain):
            order.append(slot)
            done.add(slot)

    return order


__all__ = ["DEFAULT_LAYOUT", "LEGACY_DIRS", "Layout", "resolution_order"]

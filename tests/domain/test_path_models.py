"""Tests for the path slot, template and layout models."""

import threading

import pytest

from modpaths.domain.models import (
    DEFAULT_LAYOUT,
    LEGACY_DIRS,
    LayoutError,
    PathSlot,
    PathSlotName,
    PathTemplate,
    TemplateKind,
    resolution_order,
)


class TestPathSlotName:
    """Tests for PathSlotName lookup."""

    @pytest.mark.parametrize(
        "input_value,expected",
        [
            ("late_mods_dir", PathSlotName.LATE_MODS_DIR),
            ("late-mods-dir", PathSlotName.LATE_MODS_DIR),
            ("  Player_Data ", PathSlotName.PLAYER_DATA),
            (PathSlotName.TEMP_DIR, PathSlotName.TEMP_DIR),
        ],
    )
    def test_from_string(self, input_value, expected):
        assert PathSlotName.from_string(input_value) is expected

    def test_from_string_unknown_raises_key_error(self):
        with pytest.raises(KeyError):
            PathSlotName.from_string("saves_dir")


class TestPathTemplate:
    """Tests for PathTemplate construction and rendering."""

    def test_literal_ignores_app_id(self):
        template = PathTemplate.literal("/data/local/tmp/mbf/tmp")
        assert template.kind is TemplateKind.LITERAL
        assert template.render("com.example.game", {}) == "/data/local/tmp/mbf/tmp"

    def test_app_id_template_substitutes_identifier(self):
        template = PathTemplate.from_app_id("/sdcard/Android/obb/{app_id}/")
        assert template.render("com.example.game", {}) == "/sdcard/Android/obb/com.example.game/"

    def test_slot_template_substitutes_dependency(self):
        template = PathTemplate.from_slot(PathSlotName.MODLOADER_DIR, "{base}/libs")
        resolved = {PathSlotName.MODLOADER_DIR: "/sdcard/ModData/x/Modloader"}
        assert template.render("x", resolved) == "/sdcard/ModData/x/Modloader/libs"

    def test_slot_template_requires_dependency(self):
        with pytest.raises(LayoutError):
            PathTemplate(TemplateKind.SLOT, "{base}/mods")

    def test_literal_cannot_declare_dependency(self):
        with pytest.raises(LayoutError):
            PathTemplate(TemplateKind.LITERAL, "/tmp", PathSlotName.TEMP_DIR)

    @pytest.mark.parametrize(
        "pattern",
        ["/x/{appid}", "/x/{}", "/x/{app_id}/{base}", "/x/{app_id!r}", "/x/{app_id", "/x/{app_id:>40}"],
    )
    def test_app_id_template_rejects_other_fields(self, pattern):
        with pytest.raises(LayoutError):
            PathTemplate.from_app_id(pattern)

    @pytest.mark.parametrize("pattern", ["{app_id}/mods", "{base.name}/mods", "{0}/mods"])
    def test_slot_template_rejects_other_fields(self, pattern):
        with pytest.raises(LayoutError):
            PathTemplate.from_slot(PathSlotName.MODLOADER_DIR, pattern)

    def test_escaped_braces_and_literal_braces_are_allowed(self):
        template = PathTemplate.from_app_id("/x/{{app_id}}/{app_id}")
        assert template.render("game", {}) == "/x/{app_id}/game"
        assert PathTemplate.literal("/x/{anything}").render("game", {}) == "/x/{anything}"

    def test_version_placeholder_survives_rendering(self):
        template = DEFAULT_LAYOUT[PathSlotName.MOD_PACKAGES_DIR]
        assert template.render("com.example.game", {}).endswith("/Packages/$")


class TestPathSlot:
    """Tests for write-once slot storage."""

    def test_empty_before_first_write(self):
        slot = PathSlot(PathSlotName.TEMP_DIR)
        assert slot.is_set is False
        assert slot.value == ""

    def test_first_write_wins(self):
        slot = PathSlot(PathSlotName.TEMP_DIR)
        assert slot.set_once("/first") == "/first"
        assert slot.set_once("/second") == "/first"
        assert slot.value == "/first"
        assert slot.is_set is True

    def test_concurrent_writers_agree_on_one_value(self):
        slot = PathSlot(PathSlotName.TEMP_DIR)
        barrier = threading.Barrier(16)
        results: list[str] = []
        lock = threading.Lock()

        def writer(index: int) -> None:
            barrier.wait()
            value = slot.set_once(f"/tmp/{index}")
            with lock:
                results.append(value)

        threads = [threading.Thread(target=writer, args=(i,)) for i in range(16)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 16
        assert set(results) == {slot.value}


class TestResolutionOrder:
    """Tests for dependency ordering of layouts."""

    def test_default_layout_covers_every_slot(self):
        order = resolution_order(DEFAULT_LAYOUT)
        assert sorted(order) == sorted(PathSlotName)

    def test_dependencies_come_first_in_default_layout(self):
        order = resolution_order(DEFAULT_LAYOUT)
        for name, template in DEFAULT_LAYOUT.items():
            if template.depends_on is not None:
                assert order.index(template.depends_on) < order.index(name)

    def test_dependent_declared_before_dependency(self):
        layout = {
            PathSlotName.LATE_MODS_DIR: PathTemplate.from_slot(
                PathSlotName.MODLOADER_DIR, "{base}/mods"
            ),
            PathSlotName.MODLOADER_DIR: PathTemplate.from_app_id("/m/{app_id}"),
            PathSlotName.TEMP_DIR: PathTemplate.literal("/tmp"),
        }
        assert resolution_order(layout) == [
            PathSlotName.MODLOADER_DIR,
            PathSlotName.LATE_MODS_DIR,
            PathSlotName.TEMP_DIR,
        ]

    def test_unknown_dependency_raises(self):
        layout = {
            PathSlotName.LATE_MODS_DIR: PathTemplate.from_slot(
                PathSlotName.MODLOADER_DIR, "{base}/mods"
            ),
        }
        with pytest.raises(LayoutError, match="not part of the layout"):
            resolution_order(layout)

    def test_cycle_raises(self):
        layout = {
            PathSlotName.LATE_MODS_DIR: PathTemplate.from_slot(
                PathSlotName.EARLY_MODS_DIR, "{base}/mods"
            ),
            PathSlotName.EARLY_MODS_DIR: PathTemplate.from_slot(
                PathSlotName.LATE_MODS_DIR, "{base}/early_mods"
            ),
        }
        with pytest.raises(LayoutError, match="cycle"):
            resolution_order(layout)


def test_legacy_dirs_are_fixed():
    assert LEGACY_DIRS == (
        "/data/local/tmp/mbf-downloads",
        "/data/local/tmp/mbf-res-cache",
        "/data/local/tmp/mbf-tmp",
        "/data/local/tmp/mbf-uploads",
    )

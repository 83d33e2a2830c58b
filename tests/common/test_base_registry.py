from __future__ import annotations

import pytest

from common.base_registry import BaseRegistry, normalize_key


@pytest.mark.parametrize(
    "name, key",
    [
        ("drawSvgPath", "draw_svg_path"),
        ("DrawRectangle", "draw_rectangle"),
        ("draw-line", "draw_line"),
        ("draw_text", "draw_text"),
        # ハイフン→アンダースコア + キャメル→スネークの合成で '_' が二重になる
        ("My-Drawing", "my__drawing"),
    ],
)
def test_normalize_key(name: str, key: str) -> None:
    assert normalize_key(name) == key


def test_normalize_key_rejects_invalid_input() -> None:
    with pytest.raises(ValueError):
        normalize_key("")
    with pytest.raises(TypeError):
        normalize_key(42)  # type: ignore[arg-type]


def test_register_infers_name_and_resolves_variants() -> None:
    reg: BaseRegistry = BaseRegistry()

    @reg.register()
    def drawBadge():  # noqa: N802 (テスト用)
        return []

    assert reg.get("draw_badge") is drawBadge
    assert reg.get("draw-badge") is drawBadge
    assert "DrawBadge" in reg
    assert len(reg) == 1
    assert list(reg) == ["draw_badge"]


def test_duplicate_and_unregister() -> None:
    reg: BaseRegistry = BaseRegistry()

    @reg.register()
    def sample():  # noqa: ANN001 - テスト用
        return 1

    # 同一オブジェクトの再登録は許容
    reg.register("sample")(sample)
    with pytest.raises(ValueError):
        reg.register("sample")(lambda: 2)

    reg.unregister("Sample")
    assert not reg.is_registered("sample")
    reg.unregister("nonexistent")  # 例外にならない


def test_missing_key_lists_known_names() -> None:
    reg: BaseRegistry = BaseRegistry()
    reg.register("draw_dot")(len)
    with pytest.raises(KeyError) as ei:
        reg.get("draw_spiral")
    assert "draw_dot" in str(ei.value)


def test_contains_tolerates_non_keys() -> None:
    reg: BaseRegistry = BaseRegistry()
    assert 3 not in reg
    assert "" not in reg


def test_snapshot_is_read_only_copy_and_clear() -> None:
    reg: BaseRegistry = BaseRegistry()
    reg.register("a")(len)
    snap = reg.snapshot()
    with pytest.raises(TypeError):
        snap["b"] = abs  # type: ignore[index]
    reg.clear()
    assert snap["a"] is len
    assert reg.list_all() == []

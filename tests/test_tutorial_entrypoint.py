from __future__ import annotations

import importlib
import logging

import pytest

from engine.export.content_stream import check_balanced


@pytest.mark.smoke
def test_basic_drawings_tutorial_builds_balanced_page():
    mod = importlib.import_module("tutorials.basic_drawings")
    ops = mod.build_page()
    check_balanced(ops)
    assert [op.name for op in ops].count("Q") == 5


def test_basic_drawings_tutorial_writes_file(tmp_path, monkeypatch):
    mod = importlib.import_module("tutorials.basic_drawings")
    calls: list[object] = []
    monkeypatch.setattr(mod, "setup_default_logging", lambda *a, **k: calls.append(a))
    out = tmp_path / "page.txt"
    assert mod.main([str(out)]) == 0
    assert calls == [()]
    data = out.read_bytes()
    assert data.startswith(b"q\n") and data.endswith(b"Q\n")
    assert b"0.2 0.4 0.8 rg" in data


def test_setup_default_logging_configures_bare_root(monkeypatch):
    from common.logging import setup_default_logging

    root = logging.RootLogger(logging.WARNING)
    monkeypatch.setattr(logging, "root", root)
    setup_default_logging("debug")
    assert len(root.handlers) == 1
    assert root.level == logging.DEBUG

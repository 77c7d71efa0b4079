"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory for every test."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def scan_tree(tmp_path: Path) -> Path:
    """Directory with file A (1000 bytes), file B (2000 bytes) and empty dir C."""
    root = tmp_path / "tree"
    root.mkdir()
    (root / "A").write_bytes(b"a" * 1000)
    (root / "B").write_bytes(b"b" * 2000)
    (root / "C").mkdir()
    return root


@pytest.fixture
def nested_tree(tmp_path: Path) -> Path:
    """Two-level tree used for depth and recursion tests.

    Layout (sizes in bytes)::

        nested/
            top.bin          50
            docs/
                readme.txt   100
                deep/
                    a.bin    200
                    b.bin    300
            media/
                clip.bin     400
    """
    root = tmp_path / "nested"
    (root / "docs" / "deep").mkdir(parents=True)
    (root / "media").mkdir()
    (root / "top.bin").write_bytes(b"t" * 50)
    (root / "docs" / "readme.txt").write_bytes(b"r" * 100)
    (root / "docs" / "deep" / "a.bin").write_bytes(b"a" * 200)
    (root / "docs" / "deep" / "b.bin").write_bytes(b"b" * 300)
    (root / "media" / "clip.bin").write_bytes(b"c" * 400)
    return root

"""Shared test fixtures for docdiff."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from docdiff.services.config_manager import ConfigManager


def paragraph(*fragments: str, kind: str = "paragraph") -> dict[str, Any]:
    """Build an editor-style paragraph node from text fragments."""
    return {"type": kind, "content": [{"type": "text", "text": f} for f in fragments]}


def heading(text: str, level: int = 1) -> dict[str, Any]:
    node = paragraph(text, kind="heading")
    node["attrs"] = {"level": level}
    return node


def make_doc(*lines: str) -> dict[str, Any]:
    """Build an editor-style document with one paragraph per line.

    An empty string produces an empty paragraph (no text children).
    """
    content = []
    for line in lines:
        content.append(paragraph(line) if line else {"type": "paragraph"})
    return {"type": "doc", "content": content}


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config singleton at an isolated directory."""
    directory = tmp_path / "config"
    monkeypatch.setenv("DOCDIFF_CONFIG_DIR", str(directory))
    ConfigManager.reset_instance()
    yield directory
    ConfigManager.reset_instance()


@pytest.fixture
def client(config_dir: Path):
    """TestClient with the lifespan running and an empty result cache."""
    from fastapi.testclient import TestClient

    from docdiff.main import app
    from docdiff.routers import diff

    diff.diff_cache.clear()
    with TestClient(app) as test_client:
        yield test_client
    diff.diff_cache.clear()

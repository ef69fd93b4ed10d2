# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import pytest

from portfolio.config import PROJECT_ROOT, Settings

HPC_POST = "# Intro to HPC\nTags: HPC, Learning\nBody text.\n"


def write_post(content_dir: Path, identifier: str, text: str) -> Path:
    path = content_dir / f"{identifier}.md"
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    d = tmp_path / "blogs"
    d.mkdir()
    write_post(d, "hpc", HPC_POST)
    return d


@pytest.fixture
def settings(content_dir: Path) -> Settings:
    return Settings(
        content_dir=content_dir,
        templates_dir=PROJECT_ROOT / "templates",
        static_dir=PROJECT_ROOT / "static",
        site_title="Test Portfolio",
    )

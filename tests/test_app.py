# tests/test_app.py
from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pytest

from portfolio.app import create_app
from portfolio.config import Settings


@pytest.fixture
def client(settings: Settings):
    return create_app(settings).test_client()


def test_home_page(client) -> None:
    resp = client.get("/")
    assert resp.status_code == 200
    assert b"Test Portfolio" in resp.data


def test_blog_page(client) -> None:
    resp = client.get("/blogs/hpc")
    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert "<h1>Intro to HPC</h1>" in body
    assert "Body text." in body
    assert "Tags:" not in body
    assert '<li class="tag">HPC</li>' in body


@pytest.mark.parametrize("path", ["/blogs/", "/blogs/missing", "/blogs/hpc%00"])
def test_missing_post_is_404(client, path: str) -> None:
    assert client.get(path).status_code == 404


def test_template_failure_is_500(settings: Settings, tmp_path: Path) -> None:
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "blog.html").write_text("{% if %}", encoding="utf-8")
    client = create_app(replace(settings, templates_dir=templates)).test_client()

    resp = client.get("/blogs/hpc")
    assert resp.status_code == 500
    assert b"Template rendering error" in resp.data

    # The app keeps serving after a failure
    assert client.get("/blogs/missing").status_code == 404


def test_highlight_css(client) -> None:
    resp = client.get("/highlight.css")
    assert resp.status_code == 200
    assert resp.mimetype == "text/css"
    assert b".codehilite" in resp.data


def test_static_files(client) -> None:
    resp = client.get("/static/css/site.css")
    assert resp.status_code == 200
    resp.close()

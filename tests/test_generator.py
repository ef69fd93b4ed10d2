# tests/test_generator.py
from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pytest
from markupsafe import Markup

from portfolio.config import Settings
from portfolio.errors import TemplateFailure
from portfolio.generator import PageRenderer, SiteGenerator
from portfolio.home import build_page_data
from portfolio.models import Post
from tests.conftest import write_post


def test_render_blog_injects_body_verbatim_and_escapes_fields(settings: Settings) -> None:
    renderer = PageRenderer(settings.templates_dir)
    post = Post(identifier="x", title="A <b>title</b>", tags=["<tag>"], next_identifier="y")
    html = renderer.render_blog(post, Markup("<p class=\"trusted\">hi</p>"))

    assert '<p class="trusted">hi</p>' in html
    assert "A &lt;b&gt;title&lt;/b&gt;" in html
    assert "&lt;tag&gt;" in html
    assert 'href="/blogs/y"' in html
    assert 'class="prev"' not in html


def test_render_home(settings: Settings) -> None:
    html = PageRenderer(settings.templates_dir).render_home(build_page_data(settings))
    assert "Test Portfolio" in html
    assert "/blogs/hpc" in html
    assert "Kubernetes" in html


def test_broken_template_raises_template_failure(tmp_path: Path) -> None:
    (tmp_path / "blog.html").write_text("{% if %}", encoding="utf-8")
    renderer = PageRenderer(tmp_path)
    with pytest.raises(TemplateFailure) as excinfo:
        renderer.render_blog(Post(identifier="x"), Markup(""))
    assert excinfo.value.template == "blog.html"


def test_missing_template_raises_template_failure(tmp_path: Path) -> None:
    with pytest.raises(TemplateFailure):
        PageRenderer(tmp_path).render_home(None)


def test_site_generator_writes_every_page(settings: Settings, tmp_path: Path) -> None:
    write_post(settings.content_dir, "second", "# Second\n\nMore.\n")
    out = tmp_path / "site"

    written = SiteGenerator(replace(settings, sort_posts=True), str(out)).generate()

    assert len(written) == 3
    assert (out / "index.html").exists()
    hpc = (out / "blogs" / "hpc.html").read_text(encoding="utf-8")
    assert "Body text." in hpc
    assert 'href="/blogs/second"' in hpc
    assert (out / "blogs" / "second.html").exists()

    # Pages link these, so the export carries them too
    assert (out / "static" / "css" / "site.css").exists()
    assert ".codehilite" in (out / "highlight.css").read_text(encoding="utf-8")


def test_site_generator_skips_failed_posts(settings: Settings, tmp_path: Path) -> None:
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "home.html").write_text("home", encoding="utf-8")
    (templates / "blog.html").write_text("{{ post.missing() }}", encoding="utf-8")
    out = tmp_path / "site"

    written = SiteGenerator(replace(settings, templates_dir=templates), str(out)).generate()

    assert [Path(p).name for p in written] == ["index.html"]

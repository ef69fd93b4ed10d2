import os
import shutil

from jinja2 import Environment, FileSystemLoader, select_autoescape

from portfolio.errors import PortfolioError, TemplateFailure
from portfolio.home import build_page_data
from portfolio.logger import get_logger
from portfolio.parser import ContentParser
from portfolio.resolver import BlogResolver

logger = get_logger("generator")


class PageRenderer:
    """
    Renders full pages from the Jinja2 templates.

    Autoescaping is on for every value except the blog body, which arrives as
    ``Markup`` and is written verbatim.
    """

    def __init__(self, templates_dir):
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(['html']),
        )

    def _render(self, template_name, **context):
        try:
            template = self.env.get_template(template_name)
            return template.render(**context)
        except Exception as e:
            raise TemplateFailure(template_name, e) from e

    def render_blog(self, post, body):
        return self._render('blog.html', post=post, content=body)

    def render_home(self, data):
        return self._render('home.html', data=data)


class SiteGenerator:
    """Writes the whole site as static files."""

    def __init__(self, settings, output_dir):
        self.settings = settings
        self.output_dir = output_dir
        self.renderer = PageRenderer(settings.templates_dir)
        self.resolver = BlogResolver.from_settings(settings)

    def generate(self):
        """Returns the list of written paths."""
        os.makedirs(os.path.join(self.output_dir, "blogs"), exist_ok=True)

        # 1. Home page
        written = [self._render_index()]

        # 2. One page per post
        written.extend(self._render_posts())

        # 3. Stylesheets and images the pages link to
        self._copy_assets()

        logger.info(f"✅ Site written to {self.output_dir} ({len(written)} pages)")
        return written

    def _write(self, relative_path, text):
        path = os.path.join(self.output_dir, relative_path)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path

    def _copy_assets(self):
        static_dir = self.settings.static_dir
        if os.path.isdir(static_dir):
            shutil.copytree(static_dir, os.path.join(self.output_dir, "static"), dirs_exist_ok=True)
        css = ContentParser(code_style=self.settings.code_style).highlight_css()
        self._write("highlight.css", css)

    def _render_index(self):
        html = self.renderer.render_home(build_page_data(self.settings))
        return self._write("index.html", html)

    def _render_posts(self):
        try:
            identifiers = self.resolver.navigator.identifiers()
        except OSError as e:
            logger.warning(f"⚠️ Could not list posts in {self.settings.content_dir}: {e}")
            return []

        written = []
        for identifier in identifiers:
            try:
                html = self.resolver.render_page(identifier, self.renderer)
            except PortfolioError as e:
                logger.warning(f"⚠️ Skipping {identifier}: {e}")
                continue
            written.append(self._write(os.path.join("blogs", f"{identifier}.html"), html))
        return written

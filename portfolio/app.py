from flask import Flask, Response, abort

from portfolio.config import load_settings
from portfolio.errors import PostNotFound, TemplateFailure
from portfolio.generator import PageRenderer
from portfolio.home import build_page_data
from portfolio.logger import get_logger
from portfolio.parser import ContentParser
from portfolio.resolver import BlogResolver

logger = get_logger("app")


def create_app(settings=None):
    settings = settings or load_settings()

    app = Flask(
        __name__,
        static_folder=str(settings.static_dir),
        static_url_path='/static',
    )
    app.config['PORTFOLIO_SETTINGS'] = settings
    renderer = PageRenderer(settings.templates_dir)

    @app.route('/')
    def home():
        try:
            return renderer.render_home(build_page_data(settings))
        except TemplateFailure as e:
            logger.exception(f"❌ {e}")
            return "Error rendering template", 500

    @app.route('/blogs/')
    def no_blog():
        abort(404)

    @app.route('/blogs/<identifier>')
    def blog(identifier):
        # Nothing is cached: every request reads and renders the post again
        resolver = BlogResolver.from_settings(settings)
        try:
            return resolver.render_page(identifier, renderer)
        except PostNotFound:
            abort(404)
        except TemplateFailure as e:
            logger.exception(f"❌ {e}")
            return "Template rendering error", 500

    @app.route('/highlight.css')
    def highlight_css():
        css = ContentParser(code_style=settings.code_style).highlight_css()
        return Response(css, mimetype='text/css')

    return app

import os

from portfolio.config import MARKDOWN_EXTENSION
from portfolio.errors import PostNotFound
from portfolio.logger import get_logger
from portfolio.models import Post
from portfolio.navigator import CorpusNavigator
from portfolio.parser import ContentParser

logger = get_logger("resolver")


class BlogResolver:
    """Loads a post from the content store and renders it, one request at a time."""

    def __init__(self, content_dir, parser=None, navigator=None):
        self.content_dir = content_dir
        self.parser = parser or ContentParser()
        self.navigator = navigator or CorpusNavigator(content_dir)

    @classmethod
    def from_settings(cls, settings):
        return cls(
            settings.content_dir,
            parser=ContentParser(code_style=settings.code_style),
            navigator=CorpusNavigator(settings.content_dir, sort=settings.sort_posts),
        )

    def _load(self, identifier):
        # Anything that isn't a plain file name can't be in the store
        if not identifier or identifier.startswith('.') or any(c in identifier for c in '/\\\x00'):
            raise PostNotFound(identifier)

        md_path = os.path.join(self.content_dir, f"{identifier}{MARKDOWN_EXTENSION}")
        try:
            with open(md_path, 'r', encoding='utf-8') as f:
                return f.read()
        except (OSError, UnicodeDecodeError, ValueError) as e:
            raise PostNotFound(identifier) from e

    def resolve(self, identifier):
        """
        Returns ``(post, body)`` for ``identifier``.

        Raises PostNotFound for an empty identifier or a missing file. Render
        and navigation problems never escape: they degrade to an inline error
        body and empty sibling links.
        """
        raw_md = self._load(identifier)

        title, tags = self.parser.extract_metadata(raw_md)
        markdown_text = self.parser.clean_content(raw_md)
        body = self.parser.convert(markdown_text)
        prev_post, next_post = self.navigator.siblings(identifier)

        post = Post(
            identifier=identifier,
            title=title,
            tags=tags,
            date=self.parser.extract_date(raw_md),
            previous_identifier=prev_post,
            next_identifier=next_post,
        )
        logger.debug(f"Resolved post {identifier!r} ({title})")
        return post, body

    def render_page(self, identifier, renderer):
        """Resolves ``identifier`` and renders the full blog page with ``renderer``."""
        post, body = self.resolve(identifier)
        return renderer.render_blog(post, body)

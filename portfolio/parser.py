import re

import markdown
from markupsafe import Markup
from pygments.formatters import HtmlFormatter

from portfolio.config import DEFAULT_CODE_STYLE
from portfolio.logger import get_logger
from portfolio.models import UNTITLED

logger = get_logger("parser")

TITLE_RE = re.compile(r'^# (.+)$', re.MULTILINE)
TAGS_RE = re.compile(r'^Tags:\s*(.+)$', re.MULTILINE)
TAGS_PREFIX = "Tags:"
CSS_CLASS = "codehilite"


class ContentParser:
    """
    Turns the raw Markdown of a post into metadata and an HTML fragment.

    Metadata lives in the body itself: the first ``# Heading`` is the title
    and a ``Tags: a, b`` line holds the tags.
    """

    def __init__(self, code_style=DEFAULT_CODE_STYLE):
        self.code_style = code_style
        self.md = markdown.Markdown(
            extensions=['extra', 'codehilite'],
            extension_configs={
                'codehilite': {
                    'css_class': CSS_CLASS,
                    'linenums': True,
                    'guess_lang': False,
                    'pygments_style': code_style,
                }
            },
        )

    def extract_title(self, raw_md):
        match = TITLE_RE.search(raw_md)
        if match:
            return match.group(1).strip()
        return UNTITLED

    def extract_tags(self, raw_md):
        match = TAGS_RE.search(raw_md)
        if not match:
            return []
        return [tag.strip() for tag in match.group(1).strip().split(',')]

    def extract_date(self, raw_md):
        # No date source yet
        return ""

    def extract_metadata(self, raw_md):
        """Returns ``(title, tags)``."""
        return self.extract_title(raw_md), self.extract_tags(raw_md)

    def clean_content(self, raw_md):
        """Drops the metadata lines so they don't show up in the rendered body."""
        lines = raw_md.split("\n")
        return "\n".join(line for line in lines if not line.startswith(TAGS_PREFIX))

    def convert(self, markdown_text):
        """
        Converts Markdown to an HTML fragment.

        Failures don't propagate: the fragment becomes an inline error message
        so the page still renders.
        """
        try:
            html_content = self.md.convert(markdown_text)
        except Exception as e:
            logger.warning(f"⚠️ Markdown conversion failed: {e}")
            return Markup('<p class="render-error">Error rendering markdown: {}</p>').format(str(e))
        finally:
            self.md.reset()

        # Output of the converter is trusted: posts are written by the site owner
        return Markup(html_content)

    def highlight_css(self):
        """Stylesheet for the highlighted code blocks."""
        return HtmlFormatter(style=self.code_style).get_style_defs(f'.{CSS_CLASS}')

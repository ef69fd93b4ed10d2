import os

from portfolio.config import MARKDOWN_EXTENSION
from portfolio.logger import get_logger

logger = get_logger("navigator")


def list_identifiers(content_dir, sort=False):
    """
    Identifiers of every post in ``content_dir``.

    The order is whatever the directory listing returns, which depends on the
    filesystem. Pass ``sort=True`` for a lexicographic order instead.
    """
    identifiers = [
        name[:-len(MARKDOWN_EXTENSION)]
        for name in os.listdir(content_dir)
        if name.endswith(MARKDOWN_EXTENSION)
    ]
    if sort:
        identifiers.sort()
    return identifiers


def adjacent_posts(current, identifiers):
    """Returns ``(previous, next)`` around ``current``; empty strings when there is none."""
    try:
        index = identifiers.index(current)
    except ValueError:
        return "", ""

    prev_post = identifiers[index - 1] if index > 0 else ""
    next_post = identifiers[index + 1] if index < len(identifiers) - 1 else ""
    return prev_post, next_post


class CorpusNavigator:
    def __init__(self, content_dir, sort=False):
        self.content_dir = content_dir
        self.sort = sort

    def identifiers(self):
        return list_identifiers(self.content_dir, sort=self.sort)

    def siblings(self, identifier):
        try:
            identifiers = self.identifiers()
        except OSError as e:
            # No listing means no navigation links, the post still renders
            logger.debug(f"Could not list {self.content_dir}: {e}")
            return "", ""
        return adjacent_posts(identifier, identifiers)

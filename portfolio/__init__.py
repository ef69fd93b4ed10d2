"""Personal portfolio site with a Markdown blog."""

__version__ = "0.1.0"

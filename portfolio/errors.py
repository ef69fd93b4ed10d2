class PortfolioError(Exception):
    """Base class for errors raised by the site."""


class PostNotFound(PortfolioError):
    """The requested post identifier is empty or has no file in the content store."""

    def __init__(self, identifier):
        self.identifier = identifier
        super().__init__(f"Blog post not found: {identifier!r}")


class TemplateFailure(PortfolioError):
    """A page template could not be rendered."""

    def __init__(self, template, cause):
        self.template = template
        self.cause = cause
        super().__init__(f"Error rendering template {template}: {cause}")

"""Building blocks for rendering Markdown books to HTML and to external renderers."""

__version__ = "0.1.0"
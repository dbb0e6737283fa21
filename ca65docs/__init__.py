"""Convert the ca65 HTML manual into per-keyword Markdown documentation as JSON."""

__version__ = "0.1.0"
__all__ = ["cli", "parser", "stream"]
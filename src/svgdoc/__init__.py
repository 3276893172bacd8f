"""SVG document generator: lay out translated text as a vector document."""

__version__ = "0.1.0"

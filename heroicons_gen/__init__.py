"""Build-time compiler from heroicons SVG sources to Python shape modules."""

__version__ = "0.1.0"

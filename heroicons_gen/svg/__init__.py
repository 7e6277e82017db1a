"""SVG source discovery and parsing."""

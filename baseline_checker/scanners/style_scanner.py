"""
CSS feature detection.
"""

from ..scanner_base import BaseScanner


class StyleScanner(BaseScanner):
    """Detects selectors, at-rules, properties and units in stylesheets."""

    category = "css"

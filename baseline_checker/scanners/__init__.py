"""
Scanners package: one scanner per catalog category.
"""

from .markup_scanner import MarkupScanner
from .script_scanner import ScriptScanner
from .style_scanner import StyleScanner

__all__ = [
    'MarkupScanner',
    'ScriptScanner',
    'StyleScanner',
]

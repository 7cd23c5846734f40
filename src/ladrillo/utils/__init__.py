"""Utility modules for Ladrillo.

Provides:
- text: escape_html, the single escaping point for rendered markup
- logger: get_logger for logging
"""

from ladrillo.utils.logger import get_logger
from ladrillo.utils.text import ENTITY_MAP, escape_html

__all__ = [
    "ENTITY_MAP",
    "escape_html",
    "get_logger",
]

"""Parser package - Converts raw configuration text into markup nodes.

Parsers do NOT read files - they structure text handed to them.
"""

from confform.parser.config_file import ConfigParser, LineClassifier
from confform.parser.controls import TYPES_MAP, build_control

__all__ = ["ConfigParser", "LineClassifier", "TYPES_MAP", "build_control"]

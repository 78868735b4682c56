"""Model package - Core data structures for confform."""

from confform.model.lines import Comment, Ignored, Instruction, Line, Separator
from confform.model.markup import BOOLEAN, Flag, MarkupNode
from confform.model.section import Section, SettingRow, sections_from_nodes

__all__ = [
    "BOOLEAN",
    "Comment",
    "Flag",
    "Ignored",
    "Instruction",
    "Line",
    "MarkupNode",
    "Section",
    "Separator",
    "SettingRow",
    "sections_from_nodes",
]

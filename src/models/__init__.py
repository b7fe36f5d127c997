"""
Models package for semdoc

Contains data structures and type definitions shared by the document model,
the renderers and the command line pipeline.
"""

from .state import ProgramState, pipeline
from .document import (
    LogicalBlock,
    StyleKind,
    BlockStart,
    BlockEnd,
    Style,
    Tag,
    LIST_BLOCKS,
)
from .roff import Escape, Apostrophes, Font, ManSection, RESTORE_FONT
from .source import ManMeta, LoadedSource

__all__ = [
    "ProgramState",
    "pipeline",
    "LogicalBlock",
    "StyleKind",
    "BlockStart",
    "BlockEnd",
    "Style",
    "Tag",
    "LIST_BLOCKS",
    "Escape",
    "Apostrophes",
    "Font",
    "ManSection",
    "RESTORE_FONT",
    "ManMeta",
    "LoadedSource",
]

"""
Semantic tag models

Defines the closed set of tags stored next to every text fragment in a
document buffer: logical block markers and styled text spans.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Union


class LogicalBlock(Enum):
    """
    Logical blocks of a semantic document

    Blocks nest (a LIST_ITEM lives inside a list), but the buffer stores no
    tree: nesting is implied by the order of BlockStart/BlockEnd markers.
    """
    SECTION = "section"                  # section header
    SUBSECTION = "subsection"            # subsection header
    PARAGRAPH = "paragraph"              # paragraph of text
    PRE = "pre"                          # preformatted text, newlines kept
    UNNUMBERED_LIST = "unnumbered_list"  # holds LIST_ITEM
    NUMBERED_LIST = "numbered_list"      # holds LIST_ITEM
    DEFINITION_LIST = "definition_list"  # holds LIST_KEY / LIST_ITEM pairs
    LIST_KEY = "list_key"                # definition list term
    LIST_ITEM = "list_item"              # item of any list


LIST_BLOCKS = frozenset({
    LogicalBlock.UNNUMBERED_LIST,
    LogicalBlock.NUMBERED_LIST,
    LogicalBlock.DEFINITION_LIST,
})


class StyleKind(Enum):
    """
    Style and meaning of a snippet of text

    Describes what the text is rather than how it looks; every renderer maps
    each kind to exactly one presentation.
    """
    LITERAL = "literal"      # something typed literally: -f, --foo
    METAVAR = "metavar"      # placeholder the user replaces: FOO in --foo FOO
    MONO = "mono"            # monospaced text
    TEXT = "text"            # plain text, no decorations
    IMPORTANT = "important"  # highlighted text


@dataclass(frozen=True)
class BlockStart:
    """Opening marker of a logical block, carries no text"""
    block: LogicalBlock


@dataclass(frozen=True)
class BlockEnd:
    """Closing marker of a logical block, carries no text"""
    block: LogicalBlock


@dataclass(frozen=True)
class Style:
    """Styled text span; the buffer holds the span's text next to this tag"""
    kind: StyleKind


Tag = Union[BlockStart, BlockEnd, Style]

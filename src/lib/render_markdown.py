"""
Markdown renderer for semantic documents

Walks a document buffer once, left to right, and emits HTML-flavoured
markdown. Block markers map to headings and HTML block tags; styled spans
map to combinations of <tt>, <b> and <i>.

State carried across fragments:
- list context: whether list items close as <dd> (definition list) or <li>
- open inline styles, so neighbouring spans share wrappers they have in
  common (a literal followed by a metavar keeps the <tt> open)
- newline hygiene: block elements start on a fresh line, separated
  elements get exactly one blank line before them, never at the start
"""

from typing import Dict, List, Tuple

from ..models.document import BlockEnd, BlockStart, LIST_BLOCKS, LogicalBlock, Style, StyleKind, Tag
from .log import LOG
from .monoid import FreeMonoid

MONO = "tt"
BOLD = "b"
ITALIC = "i"

# Inline tags per style, outermost first
INLINE_TAGS: Dict[StyleKind, Tuple[str, ...]] = {
    StyleKind.LITERAL: (MONO, BOLD),
    StyleKind.METAVAR: (MONO, ITALIC),
    StyleKind.MONO: (MONO,),
    StyleKind.TEXT: (),
    StyleKind.IMPORTANT: (BOLD,),
}

# Blocks preceded by a blank line, with their opening and closing markup
SEPARATED_BLOCKS: Dict[LogicalBlock, Tuple[str, str]] = {
    LogicalBlock.SECTION: ("# ", ""),
    LogicalBlock.SUBSECTION: ("## ", ""),
    LogicalBlock.PARAGRAPH: ("<p>", "</p>"),
    LogicalBlock.PRE: ("<pre>", "</pre>"),
    LogicalBlock.UNNUMBERED_LIST: ("<ul>", "</ul>"),
    LogicalBlock.NUMBERED_LIST: ("<ol>", "</ol>"),
    LogicalBlock.DEFINITION_LIST: ("<dl>", "</dl>"),
}


def style_toTags(style: StyleKind) -> Tuple[str, ...]:
    """Inline tags wrapping a style, outermost first"""
    return INLINE_TAGS[style]


class MarkdownRenderer:
    """
    Renders a document buffer to HTML-flavoured markdown

    A renderer holds per-render state; the buffer itself is only read, so
    several renderers may work on the same buffer.

    Attributes:
        buffer: Fragments to render
        out: Output pieces
        open_tags: Inline tags currently open, outermost first
        lists: Kinds of the open lists, innermost last
        blocks: Open blocks, innermost last
    """

    def __init__(self, buffer: FreeMonoid[Tag]) -> None:
        self.buffer = buffer
        self.out: List[str] = []
        self.open_tags: List[str] = []
        self.lists: List[LogicalBlock] = []
        self.blocks: List[LogicalBlock] = []

    @property
    def is_dlist(self) -> bool:
        """True while the innermost open list is a definition list"""
        return bool(self.lists) and self.lists[-1] is LogicalBlock.DEFINITION_LIST

    def render(self) -> str:
        """
        Render the whole buffer

        Returns:
            Markdown text; rendering never fails
        """
        LOG(f"Rendering {len(self.buffer.labels)} fragments to markdown", level=3)
        self.out = []
        self.open_tags = []
        self.lists = []
        self.blocks = []

        for tag, payload in self.buffer:
            if isinstance(tag, Style):
                self.styles_switch(style_toTags(tag.kind))
                self.out.append(payload)
            else:
                self.styles_switch(())
                if isinstance(tag, BlockStart):
                    self.block_start(tag.block)
                elif isinstance(tag, BlockEnd):
                    self.block_end(tag.block)

        self.styles_switch(())
        assert not self.blocks, f"Unclosed blocks: {self.blocks}"
        return "".join(self.out)

    def block_start(self, block: LogicalBlock) -> None:
        self.blocks.append(block)
        if block in SEPARATED_BLOCKS:
            self.blankLine_ensure()
            self.out.append(SEPARATED_BLOCKS[block][0])
            if block in LIST_BLOCKS:
                self.lists.append(block)
        elif block is LogicalBlock.LIST_ITEM:
            self.lineFresh_ensure()
            self.out.append("<dd>" if self.is_dlist else "<li>")
        elif block is LogicalBlock.LIST_KEY:
            self.lineFresh_ensure()
            self.out.append("<dt>")

    def block_end(self, block: LogicalBlock) -> None:
        assert self.blocks and self.blocks[-1] is block, \
            f"Block end {block} does not match open blocks {self.blocks}"
        self.blocks.pop()
        if block in SEPARATED_BLOCKS:
            self.out.append(SEPARATED_BLOCKS[block][1])
            if self.lists and self.lists[-1] is block:
                self.lists.pop()
        elif block is LogicalBlock.LIST_ITEM:
            self.out.append("</dd>" if self.is_dlist else "</li>")
        elif block is LogicalBlock.LIST_KEY:
            self.out.append("</dt>")

    def styles_switch(self, wanted: Tuple[str, ...]) -> None:
        """
        Move from the open inline tags to the wanted ones

        Tags shared as a common prefix stay open; the rest of the open tags
        close innermost first and the missing ones open outermost first.

        Args:
            wanted: Inline tags for the next span, outermost first
        """
        keep = 0
        while keep < len(self.open_tags) and keep < len(wanted) \
                and self.open_tags[keep] == wanted[keep]:
            keep += 1
        for tag in reversed(self.open_tags[keep:]):
            self.out.append(f"</{tag}>")
        for tag in wanted[keep:]:
            self.out.append(f"<{tag}>")
        self.open_tags = list(wanted)

    def lineFresh_ensure(self) -> None:
        """Start a new line unless output is already at a line start"""
        if self.output_has() and not self.out_endswith("\n"):
            self.out.append("\n")

    def blankLine_ensure(self) -> None:
        """Make sure one blank line precedes the next element"""
        if not self.output_has() or self.out_endswith("\n\n"):
            return
        self.out.append("\n" if self.out_endswith("\n") else "\n\n")

    def output_has(self) -> bool:
        return any(self.out)

    def out_endswith(self, suffix: str) -> bool:
        """Check the end of the output produced so far"""
        tail = ""
        for piece in reversed(self.out):
            tail = piece + tail
            if len(tail) >= len(suffix):
                break
        return tail.endswith(suffix)

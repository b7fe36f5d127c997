r"""
ROFF renderer for semantic documents

Walks a document buffer once, left to right, writing into a low-level Roff
composer (a bare one, or the one inside a Manpage).

State carried across fragments:
- title capture: inside a section or subsection, styled text is collected
  instead of written, then emitted as the single argument of ``.SH``
  (uppercased) or ``.SS`` (as is)
- list state: definition, unnumbered, or numbered with a running counter;
  decides the prefix written at the start of each list item
- pending style run: consecutive styled spans are written with one
  Roff.text() call so a repeated font is not switched again

Nested lists are not supported in ROFF output; opening a list inside
another one raises NotImplementedError.

Example:
    >>> from semdoc.lib.document import Document, literal
    >>> doc = Document().section("Options").dlist(
    ...     [Document().definition(literal("-v"), "verbose output")])
    >>> print(RoffRenderer(doc.buffer).render().render(Apostrophes.DONT_HANDLE))
    .SH OPTIONS
    .TP
    \fB\-v\fP
    \fRverbose output\fP
    .PP
    <BLANKLINE>
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..config import appsettings
from ..models.document import BlockEnd, BlockStart, LIST_BLOCKS, LogicalBlock, Style, Tag
from ..models.roff import Apostrophes, Font
from .log import LOG
from .man import style_toFont
from .monoid import FreeMonoid
from .roff import Roff


@dataclass
class ListState:
    """
    Kind of the open list

    Attributes:
        kind: One of the list blocks
        counter: Items written so far, used for numbering
    """
    kind: LogicalBlock
    counter: int = 0


class RoffRenderer:
    """
    Renders a document buffer into a Roff composer

    Attributes:
        buffer: Fragments to render
        roff: Composer receiving the output
        capture: Collected title text and whether capture is active
        list_state: Open list, None outside lists
        pending: Styled spans waiting to be written as one run
        blocks: Open blocks, innermost last
    """

    def __init__(self, buffer: FreeMonoid[Tag], roff: Optional[Roff] = None) -> None:
        self.buffer = buffer
        self.roff = roff if roff is not None else Roff()
        self.capture: Tuple[List[str], bool] = ([], False)
        self.list_state: Optional[ListState] = None
        self.pending: List[Tuple[Font, str]] = []
        self.blocks: List[LogicalBlock] = []

    def render(self) -> Roff:
        """
        Render the whole buffer

        Returns:
            The Roff composer holding the rendered document

        Raises:
            NotImplementedError: a list is opened inside another list
        """
        LOG(f"Rendering {len(self.buffer.labels)} fragments to ROFF", level=3)

        for tag, payload in self.buffer:
            if isinstance(tag, Style):
                if self.capture[1]:
                    self.capture[0].append(payload)
                else:
                    self.pending.append((style_toFont(tag.kind), payload))
                continue

            self.pending_flush()
            if isinstance(tag, BlockStart):
                self.block_start(tag.block)
            elif isinstance(tag, BlockEnd):
                self.block_end(tag.block)

        self.pending_flush()
        assert not self.blocks, f"Unclosed blocks: {self.blocks}"
        return self.roff

    def pending_flush(self) -> None:
        """Write the pending styled spans as one font run"""
        if self.pending:
            self.roff.text(self.pending)
            self.pending = []

    def block_start(self, block: LogicalBlock) -> None:
        self.blocks.append(block)
        roff = self.roff

        if block is LogicalBlock.SECTION or block is LogicalBlock.SUBSECTION:
            self.capture = ([], True)
        elif block is LogicalBlock.PARAGRAPH:
            roff.control("PP")
        elif block is LogicalBlock.PRE:
            roff.control("PP").control("nf").newlines_strip(False)
        elif block in LIST_BLOCKS:
            if self.list_state is not None:
                raise NotImplementedError(
                    "Nested lists are not supported in ROFF output"
                )
            self.list_state = ListState(block)
            if block is not LogicalBlock.DEFINITION_LIST:
                # first item starts its own paragraph
                roff.control("PP")
        elif block is LogicalBlock.LIST_ITEM:
            self.itemPrefix_write()
        elif block is LogicalBlock.LIST_KEY:
            roff.control("TP").newlines_strip(True)

    def block_end(self, block: LogicalBlock) -> None:
        assert self.blocks and self.blocks[-1] is block, \
            f"Block end {block} does not match open blocks {self.blocks}"
        self.blocks.pop()
        roff = self.roff

        if block is LogicalBlock.SECTION or block is LogicalBlock.SUBSECTION:
            title = "".join(self.capture[0])
            self.capture = ([], False)
            if block is LogicalBlock.SECTION:
                roff.control("SH", title.upper())
            else:
                roff.control("SS", title)
            roff.newlines_strip(False)
        elif block is LogicalBlock.PRE:
            roff.control("fi").newlines_strip(True)
        elif block in LIST_BLOCKS:
            self.list_state = None
        elif block is LogicalBlock.LIST_ITEM:
            roff.control("PP").newlines_strip(True)
        elif block is LogicalBlock.LIST_KEY:
            roff.linebreak().newlines_strip(True)

    def itemPrefix_write(self) -> None:
        """Write the ordinal or bullet starting a list item"""
        state = self.list_state
        if state is None or state.kind is LogicalBlock.DEFINITION_LIST:
            return
        if state.kind is LogicalBlock.NUMBERED_LIST:
            state.counter += 1
            self.roff.plaintext(appsettings.ordinal_make(state.counter))
        else:
            self.roff.escape(appsettings.roff_bullet).plaintext(" ")


def document_renderToRoff(buffer: FreeMonoid[Tag], apostrophes: Apostrophes) -> str:
    """Render a buffer straight to ROFF source"""
    return RoffRenderer(buffer).render().render(apostrophes)

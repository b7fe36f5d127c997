"""
Semantic document model

A Document is built from slices of styled text grouped into possibly nested
logical blocks:

- section and subsection headers
- paragraphs and preformatted blocks
- numbered, unnumbered and definition lists whose items are nested blocks

Every building call appends tagged fragments to a FreeMonoid; nothing is
rendered until render_to_markdown() or render_to_roff() is called.

Example:
    >>> doc = Document()
    >>> _ = doc.section("Usage").paragraph([text("Program takes "), literal("--help")])
    >>> _ = doc.ulist([
    ...     Scoped(LogicalBlock.LIST_ITEM, "program is written in Python"),
    ...     write_with(lambda d: d.item([text("pass "), literal("--version")])),
    ... ])
    >>> print(doc.render_to_markdown())
    # Usage
    <BLANKLINE>
    <p>Program takes <tt><b>--help</b></tt></p>
    <BLANKLINE>
    <ul>
    <li>program is written in Python</li>
    <li>pass <tt><b>--version</b></tt></li></ul>

Fragments
---------
Anything written into a document is one of a closed set of fragments,
dispatched by fragment_write():

- ``str``: plain text span (one-character strings included)
- ``Styled``: styled text span, see literal(), metavar(), mono(), text(),
  important()
- ``Scoped``: fragment wrapped in a block start/end pair
- ``WriteWith``: deferred closure receiving the document, see write_with()
- ``Document``: another document, appended as is
- any other iterable of fragments: each one in order
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Tuple, Union, TYPE_CHECKING

from ..config import appsettings
from ..models.document import BlockEnd, BlockStart, LogicalBlock, Style, StyleKind, Tag
from ..models.roff import Apostrophes
from .monoid import FreeMonoid
from .render_markdown import MarkdownRenderer
from .render_roff import RoffRenderer, document_renderToRoff
from .roff import Roff

if TYPE_CHECKING:
    from .man import Manpage


@dataclass(frozen=True)
class Styled:
    """
    Text span with a style

    Attributes:
        kind: Style of the span
        payload: Span text
    """
    kind: StyleKind
    payload: str

    def write_into(self, doc: "Document") -> None:
        doc.buffer.push(Style(self.kind), self.payload)


@dataclass(frozen=True)
class Scoped:
    """
    Fragment wrapped in a logical block

    Writing a Scoped always emits a matched BlockStart/BlockEnd pair around
    its content, which keeps the tag stream well nested.
    """
    block: LogicalBlock
    content: Any

    def write_into(self, doc: "Document") -> None:
        doc.buffer.push(BlockStart(self.block), "")
        fragment_write(self.content, doc)
        doc.buffer.push(BlockEnd(self.block), "")


@dataclass(frozen=True)
class WriteWith:
    """Deferred write: calls action with the document being built"""
    action: Callable[["Document"], Any]

    def write_into(self, doc: "Document") -> None:
        self.action(doc)


Fragment = Union[str, Styled, Scoped, WriteWith, "Document", Any]


def fragment_write(fragment: Fragment, doc: "Document") -> None:
    """
    Append a fragment to a document

    Args:
        fragment: Any member of the fragment set (see module docstring)
        doc: Document receiving the fragment

    Raises:
        TypeError: fragment is not a string, fragment object or iterable
    """
    if isinstance(fragment, str):
        doc.buffer.push(Style(StyleKind.TEXT), fragment)
    elif isinstance(fragment, (Styled, Scoped, WriteWith)):
        fragment.write_into(doc)
    elif isinstance(fragment, Document):
        doc.buffer += fragment.buffer
    else:
        try:
            items = iter(fragment)
        except TypeError:
            raise TypeError(
                f"Cannot write {type(fragment).__name__!r} into a document"
            ) from None
        for item in items:
            fragment_write(item, doc)


def literal(payload: str) -> Styled:
    """Something the user types literally, e.g. ``--help``"""
    return Styled(StyleKind.LITERAL, payload)


def metavar(payload: str) -> Styled:
    """Placeholder the user replaces, e.g. FILE in ``--output FILE``"""
    return Styled(StyleKind.METAVAR, payload)


def mono(payload: str) -> Styled:
    """Monospaced text"""
    return Styled(StyleKind.MONO, payload)


def text(payload: str) -> Styled:
    """Plain text"""
    return Styled(StyleKind.TEXT, payload)


def important(payload: str) -> Styled:
    """Highlighted text"""
    return Styled(StyleKind.IMPORTANT, payload)


def write_with(action: Callable[["Document"], Any]) -> WriteWith:
    """Wrap a callable so it can be used wherever a fragment is expected"""
    return WriteWith(action)


class Document:
    """
    Semantic document that can be rendered to markdown or ROFF

    Building methods return the document so calls can be chained. Documents
    built independently combine with ``+`` (new document) or ``+=``
    (in place); building order is kept exactly.

    Attributes:
        buffer: Tagged text fragments in building order
    """

    def __init__(self) -> None:
        self.buffer: FreeMonoid[Tag] = FreeMonoid()

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------

    def write(self, fragment: Fragment) -> "Document":
        """Append any fragment"""
        fragment_write(fragment, self)
        return self

    def scope(self, block: LogicalBlock, content: Fragment) -> "Document":
        """Append content wrapped in a block"""
        Scoped(block, content).write_into(self)
        return self

    def section(self, name: Fragment) -> "Document":
        """Insert a section header"""
        return self.scope(LogicalBlock.SECTION, name)

    def subsection(self, name: Fragment) -> "Document":
        """Insert a subsection header"""
        return self.scope(LogicalBlock.SUBSECTION, name)

    def paragraph(self, content: Fragment) -> "Document":
        """
        Add a paragraph of text

        Paragraphs are separated from each other by blank lines or
        indentation, depending on the output format.
        """
        return self.scope(LogicalBlock.PARAGRAPH, content)

    def pre(self, content: Fragment) -> "Document":
        """Add preformatted text; newlines are kept in every output format"""
        return self.scope(LogicalBlock.PRE, content)

    def nlist(self, items: Fragment) -> "Document":
        """Add a numbered list, items should be written with item()"""
        return self.scope(LogicalBlock.NUMBERED_LIST, items)

    def ulist(self, items: Fragment) -> "Document":
        """Add an unnumbered list, items should be written with item()"""
        return self.scope(LogicalBlock.UNNUMBERED_LIST, items)

    def dlist(self, items: Fragment) -> "Document":
        """Add a definition list, items should be written with definition()"""
        return self.scope(LogicalBlock.DEFINITION_LIST, items)

    numbered_list = nlist
    unnumbered_list = ulist
    definition_list = dlist

    def item(self, content: Fragment) -> "Document":
        """Add a list item"""
        return self.scope(LogicalBlock.LIST_ITEM, content)

    def term(self, content: Fragment) -> "Document":
        """Add a definition list term"""
        return self.scope(LogicalBlock.LIST_KEY, content)

    def definition(self, term: Fragment, body: Fragment) -> "Document":
        """Add a term and its definition as two sibling blocks"""
        return self.term(term).item(body)

    def text(self, content: Fragment) -> "Document":
        """Append text fragments without any block around them"""
        return self.write(content)

    # ------------------------------------------------------------------
    # Buffer access and composition
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[Tuple[Tag, str]]:
        return iter(self.buffer)

    def __len__(self) -> int:
        return len(self.buffer)

    def is_empty(self) -> bool:
        return self.buffer.is_empty()

    def clear(self) -> None:
        self.buffer.clear()

    def __iadd__(self, fragment: Fragment) -> "Document":
        fragment_write(fragment, self)
        return self

    def concat(self, other: "Document") -> "Document":
        """New document holding self followed by other"""
        result = Document()
        result.buffer = self.buffer + other.buffer
        return result

    def __add__(self, other: "Document") -> "Document":
        if not isinstance(other, Document):
            return NotImplemented
        return self.concat(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self.buffer == other.buffer

    def __repr__(self) -> str:
        return f"Document({len(self.buffer.labels)} fragments)"

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_to_markdown(self) -> str:
        """Render to HTML-flavoured markdown"""
        return MarkdownRenderer(self.buffer).render()

    def render_to_roff(self, apostrophes: Optional[Apostrophes] = None) -> str:
        """
        Render to a ROFF body without a ``.TH`` header

        Args:
            apostrophes: Apostrophe mode, defaults to the configured one

        Raises:
            NotImplementedError: the document contains nested lists
        """
        return document_renderToRoff(self.buffer, apostrophes or appsettings.apostrophes_get())

    def render_to_manpage(self, manpage: "Manpage") -> str:
        """
        Render into a copy of a man page, after its header

        The page itself is left as it was, so one header can be reused for
        several documents.

        Raises:
            NotImplementedError: the document contains nested lists
        """
        roff = RoffRenderer(self.buffer, manpage.raw + Roff()).render()
        return roff.render(Apostrophes.HANDLE)


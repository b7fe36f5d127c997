"""
semdoc - Semantic document markup rendered to markdown and man pages

Build a document once from styled text and logical blocks, render it as
HTML-flavoured markdown or as ROFF.
"""

__version__ = "0.3.0"

from .monoid import FreeMonoid
from .roff import Roff
from .man import Manpage
from .document import (
    Document,
    Styled,
    Scoped,
    WriteWith,
    literal,
    metavar,
    mono,
    text,
    important,
    write_with,
)
from .render_markdown import MarkdownRenderer
from .render_roff import RoffRenderer
from .files import write_updated
from .source import SourceLoader, SourceError, source_loadFile
from .log import LOG, state_connectToLogger

__all__ = [
    "FreeMonoid",
    "Roff",
    "Manpage",
    "Document",
    "Styled",
    "Scoped",
    "WriteWith",
    "literal",
    "metavar",
    "mono",
    "text",
    "important",
    "write_with",
    "MarkdownRenderer",
    "RoffRenderer",
    "write_updated",
    "SourceLoader",
    "SourceError",
    "source_loadFile",
    "LOG",
    "state_connectToLogger",
    "__version__",
]

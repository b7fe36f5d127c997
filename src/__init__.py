"""
semdoc - Semantic document markup

Compose a document from styled text and nested logical blocks, then render
it as HTML-flavoured markdown or as a ROFF man page.
"""

__version__ = "0.3.0"

from .lib import (
    Document,
    Manpage,
    Roff,
    literal,
    metavar,
    mono,
    text,
    important,
    write_with,
    write_updated,
    LOG,
    state_connectToLogger,
)
from .models import Apostrophes, Font, ManSection, StyleKind

__all__ = [
    "Document",
    "Manpage",
    "Roff",
    "literal",
    "metavar",
    "mono",
    "text",
    "important",
    "write_with",
    "write_updated",
    "Apostrophes",
    "Font",
    "ManSection",
    "StyleKind",
    "LOG",
    "state_connectToLogger",
    "__version__",
]

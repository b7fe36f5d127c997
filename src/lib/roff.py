r"""
Low-level ROFF composer

ROFF is the family of Unix text-formatting languages implemented by
``nroff``, ``troff`` and ``groff``. A Roff object accumulates control
lines, font escapes and text in a FreeMonoid tagged with escaping classes,
and renders it in one pass through the escaping primitive.

Example:
    >>> roff = Roff().control("TH", "FOO", "1").control("SH", "NAME")
    >>> roff.text([(Font.CURRENT, "foo - do a foo thing")]).render(Apostrophes.DONT_HANDLE)
    '.TH FOO 1\n.SH NAME\nfoo \\- do a foo thing'
"""

from typing import Iterable, Optional, Tuple

from ..models.roff import Apostrophes, Escape, Font, RESTORE_FONT
from .escape import APOSTROPHE_PREAMBLE, escape
from .monoid import FreeMonoid


class Roff:
    """
    ROFF document with a low-level interface

    Attributes:
        payload: Fragments tagged with their escaping class
        strip_newlines: When True, plaintext() folds newlines into spaces
    """

    def __init__(self) -> None:
        self.payload: FreeMonoid[Escape] = FreeMonoid()
        self.strip_newlines = False

    def newlines_strip(self, state: bool) -> "Roff":
        r"""
        Chainable setter for strip_newlines

        Example:
            >>> Roff().plaintext("kept\n").newlines_strip(True).plaintext("folded\nhere").render(
            ...     Apostrophes.DONT_HANDLE)
            'kept\nfolded here'
        """
        self.strip_newlines = state
        return self

    def clear(self) -> None:
        """Remove all contents"""
        self.payload.clear()

    def __len__(self) -> int:
        """Size of the textual payload; rendered output is usually bigger"""
        return len(self.payload)

    def is_empty(self) -> bool:
        return self.payload.is_empty()

    def control(self, name: str, *args: str) -> "Roff":
        r"""
        Insert a control line

        Args:
            name: Request or macro name without the leading '.'
            *args: Arguments, each escaped as a single argument

        Example:
            >>> Roff().control("SH", "Section\nname").render(Apostrophes.DONT_HANDLE)
            '.SH Section\\ name\n'
        """
        self.payload.push(Escape.UNESCAPED_AT_NEWLINE, ".")
        self.payload.push(Escape.UNESCAPED, name)
        for arg in args:
            self.payload.push(Escape.UNESCAPED, " ").push(Escape.SPACES, arg)
        self.payload.push(Escape.UNESCAPED_AT_NEWLINE, "")
        return self

    def linebreak(self) -> "Roff":
        """End the current source line; invisible in formatted output"""
        self.payload.push(Escape.UNESCAPED_AT_NEWLINE, "")
        return self

    def comment(self, text: str) -> "Roff":
        """Insert a source comment; invisible in formatted output"""
        self.payload.push(Escape.UNESCAPED_AT_NEWLINE, '.\\" ')
        self.payload.push(Escape.SPECIAL_NO_NEWLINE, text)
        return self

    def escape(self, raw: str) -> "Roff":
        """Insert a raw escape sequence, copied to the output as is"""
        self.payload.push(Escape.UNESCAPED, raw)
        return self

    def plaintext(self, text: str) -> "Roff":
        """Insert text with special characters escaped"""
        kind = Escape.SPECIAL_NO_NEWLINE if self.strip_newlines else Escape.SPECIAL
        self.payload.push(kind, text)
        return self

    def text(self, pairs: Iterable[Tuple[Font, str]]) -> "Roff":
        r"""
        Insert text slices, each in its own font

        A font escape is only written when the font changes, Font.CURRENT
        writes none, and the previous font is restored at the end of the run.

        Example:
            >>> Roff().text([(Font.ROMAN, "an "), (Font.BOLD, "emphasis")]).render(
            ...     Apostrophes.DONT_HANDLE)
            '\\fRan \\fBemphasis\\fP'
        """
        previous: Optional[Font] = None
        for font, item in pairs:
            switch = font.escape()
            if previous is font or switch is None:
                self.plaintext(item)
            else:
                self.escape(switch).plaintext(item)
                previous = font
        if previous is not None:
            self.escape(RESTORE_FONT)
        return self

    def render(self, apostrophes: Apostrophes) -> str:
        """
        Render the document to ROFF source

        Args:
            apostrophes: HANDLE prepends the apostrophe preamble

        Returns:
            Complete ROFF source
        """
        body = escape(self.payload, apostrophes)
        if apostrophes is Apostrophes.HANDLE:
            return APOSTROPHE_PREAMBLE + body
        return body

    def __iadd__(self, other: "Roff") -> "Roff":
        if not isinstance(other, Roff):
            return NotImplemented
        self.payload += other.payload
        self.strip_newlines = other.strip_newlines
        return self

    def __add__(self, other: "Roff") -> "Roff":
        if not isinstance(other, Roff):
            return NotImplemented
        result = Roff()
        result.payload = self.payload + other.payload
        result.strip_newlines = other.strip_newlines
        return result

    def __repr__(self) -> str:
        return f"Roff(len={len(self)}, strip_newlines={self.strip_newlines})"

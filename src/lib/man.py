r"""
Man page adapter over the low-level ROFF composer

Turns page metadata into the ``.TH`` header line and offers a few
convenience calls for writing a man page by hand.

Example:
    >>> page = Manpage("CORRUPT", ManSection.GENERAL)
    >>> _ = page.section("NAME").paragraph([(StyleKind.TEXT, "corrupt - flip bits")])
    >>> page.render().splitlines()[2:]
    ['.TH CORRUPT 1', '.SH NAME', '\\fRcorrupt \\- flip bits\\fP', '.PP']
"""

from typing import Iterable, Optional, Sequence, Tuple, Union

from ..models.document import StyleKind
from ..models.roff import Apostrophes, Font, ManSection
from .roff import Roff

# Extra header/footer strings: date, suite, long application name
EXTRA_LIMIT = 3

FONT_BY_STYLE = {
    StyleKind.LITERAL: Font.BOLD,
    StyleKind.METAVAR: Font.ITALIC,
    StyleKind.MONO: Font.MONO,
    StyleKind.TEXT: Font.ROMAN,
    StyleKind.IMPORTANT: Font.BOLD_ITALIC,
}


def style_toFont(style: StyleKind) -> Font:
    """Font used to render a style in ROFF output"""
    return FONT_BY_STYLE[style]


def section_code(section: Union[ManSection, str]) -> str:
    """
    Section code as written in the ``.TH`` line

    Custom sections are plain strings starting with a digit 1..8, optionally
    followed by a suffix (e.g., "3p").
    """
    if isinstance(section, ManSection):
        return section.value
    return section


class Manpage:
    """
    Man page ROFF document

    Attributes:
        roff: Underlying ROFF composer, exposed through ``raw``
    """

    def __init__(
        self,
        title: str,
        section: Union[ManSection, str],
        extra: Sequence[str] = (),
    ) -> None:
        """
        Create a man page and write its header

        Args:
            title: Page title
            section: ManSection or custom section string
            extra: Up to three strings for the header and footer corners:
                   last update date, suite name, human readable name.
                   Anything past the third is ignored.
        """
        self.roff = Roff()
        self.roff.control("TH", title, section_code(section), *list(extra)[:EXTRA_LIMIT])

    @property
    def raw(self) -> Roff:
        """Underlying ROFF stream"""
        return self.roff

    def section(self, title: str) -> "Manpage":
        """Add an unnumbered section header"""
        self.roff.control("SH", title)
        return self

    def subsection(self, title: str) -> "Manpage":
        """Add an unnumbered subsection header"""
        self.roff.control("SS", title)
        return self

    def label(
        self, text: Iterable[Tuple[StyleKind, str]], offset: Optional[str] = None
    ) -> "Manpage":
        """Add an indented label, the next paragraph is its body"""
        strip = self.roff.strip_newlines
        args = [offset] if offset is not None else []
        self.roff.control("TP", *args).newlines_strip(True)
        self.roff.text((style_toFont(style), item) for style, item in text)
        self.roff.control("PP").newlines_strip(strip)
        return self

    def paragraph(self, text: Iterable[Tuple[StyleKind, str]]) -> "Manpage":
        """Add a paragraph of styled text"""
        self.roff.newlines_strip(True)
        self.roff.text((style_toFont(style), item) for style, item in text)
        self.roff.control("PP")
        return self

    def render(self) -> str:
        """Render the page, with apostrophe handling for real formatters"""
        return self.roff.render(Apostrophes.HANDLE)

"""
ROFF-level models

Escape classes, apostrophe handling modes, font selectors and man page
sections used by the low-level ROFF composer and the man page adapter.
"""

from enum import Enum
from typing import Optional


class Escape(Enum):
    """
    Escaping class of a fragment in a ROFF payload

    Attributes:
        UNESCAPED: copied verbatim (control names, font switches)
        UNESCAPED_AT_NEWLINE: copied verbatim, starting on a fresh line
        SPECIAL: text visible to the formatter, newlines kept
        SPECIAL_NO_NEWLINE: like SPECIAL, but newlines become spaces
        SPACES: a single control line argument, spaces become non-breaking
    """
    UNESCAPED = "unescaped"
    UNESCAPED_AT_NEWLINE = "unescaped_at_newline"
    SPECIAL = "special"
    SPECIAL_NO_NEWLINE = "special_no_newline"
    SPACES = "spaces"


class Apostrophes(Enum):
    """
    Apostrophe handling mode

    HANDLE emits a preamble defining a portable apostrophe string and uses it
    in control arguments. DONT_HANDLE leaves apostrophes alone, which keeps
    golden outputs small.
    """
    HANDLE = "handle"
    DONT_HANDLE = "dont_handle"


class Font(Enum):
    """Font selector, value is the escape that switches to it"""
    CURRENT = ""
    ROMAN = "\\fR"
    BOLD = "\\fB"
    ITALIC = "\\fI"
    BOLD_ITALIC = "\\f(BI"
    MONO = "\\f(CR"
    MONO_BOLD = "\\f(CB"
    MONO_ITALIC = "\\f(CI"

    def escape(self) -> Optional[str]:
        """Escape sequence selecting this font, None for the current font"""
        return self.value or None


# Escape returning to the previously selected font
RESTORE_FONT = "\\fP"


class ManSection(Enum):
    """Manual page sections"""
    GENERAL = "1"            # general commands
    SYSTEM_CALL = "2"        # system calls
    LIBRARY_FUNCTION = "3"   # library functions
    SPECIAL_FILE = "4"       # special files and drivers
    FILE_FORMAT = "5"        # file formats and conventions
    GAME = "6"               # games and screensavers
    MISC = "7"               # miscellaneous
    SYSADMIN = "8"           # system administration commands and daemons

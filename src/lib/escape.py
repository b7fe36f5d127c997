r"""
ROFF escaping primitive

Turns a sequence of (Escape, text) fragments into ROFF source. Escaping
rules:

- ``\`` becomes ``\\`` and ``-`` becomes ``\-`` in every escaped class
- a line starting with ``.``, ``'`` or a space gets a ``\&`` prefix so the
  formatter does not read it as a control line
- SPECIAL_NO_NEWLINE folds newlines into spaces
- SPACES makes spaces and newlines non-breaking (``\ ``) and, with
  Apostrophes.HANDLE, replaces ``'`` with ``\*(Aq``
- UNESCAPED_AT_NEWLINE starts a new line first when needed

Example:
    >>> escape([(Escape.SPECIAL, "foo\n.bar")], Apostrophes.DONT_HANDLE)
    'foo\n\\&.bar'
"""

from typing import Iterable, List, Tuple

from ..models.roff import Apostrophes, Escape

# Defines \*(Aq as a real apostrophe on groff and a plain one elsewhere
APOSTROPHE_PREAMBLE = ".ie \\n(.g .ds Aq \\(aq\n.el .ds Aq '\n"

_CHAR_ESCAPES = {
    "\\": "\\\\",
    "-": "\\-",
}

_CONTROL_CHARS = ".'"


def escape(fragments: Iterable[Tuple[Escape, str]], apostrophes: Apostrophes) -> str:
    """
    Render escaped ROFF source from annotated fragments

    Args:
        fragments: (Escape, text) pairs, usually a FreeMonoid[Escape]
        apostrophes: Apostrophe handling mode for SPACES fragments

    Returns:
        ROFF source text (without the apostrophe preamble)
    """
    out: List[str] = []
    at_line_start = True

    for kind, text in fragments:
        if kind is Escape.UNESCAPED:
            if text:
                out.append(text)
                at_line_start = text.endswith("\n")
        elif kind is Escape.UNESCAPED_AT_NEWLINE:
            if not at_line_start:
                out.append("\n")
                at_line_start = True
            if text:
                out.append(text)
                at_line_start = text.endswith("\n")
        elif kind is Escape.SPACES:
            at_line_start = spaces_escape(text, out, at_line_start, apostrophes)
        else:
            at_line_start = special_escape(
                text, out, at_line_start, keep_newlines=kind is Escape.SPECIAL
            )

    return "".join(out)


def special_escape(text: str, out: List[str], at_line_start: bool, keep_newlines: bool) -> bool:
    """
    Escape formatter-visible text into ``out``

    Returns:
        Whether the output ends at a line start
    """
    for char in text:
        if char == "\n":
            if keep_newlines:
                out.append(char)
                at_line_start = True
                continue
            char = " "
        if at_line_start and (char in _CONTROL_CHARS or char == " "):
            out.append("\\&")
        out.append(_CHAR_ESCAPES.get(char, char))
        at_line_start = False
    return at_line_start


def spaces_escape(text: str, out: List[str], at_line_start: bool, apostrophes: Apostrophes) -> bool:
    """
    Escape a control line argument into ``out``

    Returns:
        Whether the output ends at a line start
    """
    for char in text:
        if at_line_start and char in _CONTROL_CHARS:
            out.append("\\&")
        if char in " \n":
            out.append("\\ ")
        elif char == "'" and apostrophes is Apostrophes.HANDLE:
            out.append("\\*(Aq")
        else:
            out.append(_CHAR_ESCAPES.get(char, char))
        at_line_start = False
    return at_line_start

"""
Source-loader data models

Type-safe structures returned by SourceLoader when reading a YAML
document source.
"""

from dataclasses import dataclass, field
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..lib.document import Document


@dataclass
class ManMeta:
    """
    Man page header metadata from the ``man:`` mapping of a source file

    Attributes:
        title: Page title (e.g., "CORRUPT")
        section: Section code, "1".."8" optionally followed by a suffix
        extra: Up to three header/footer strings (date, suite, long name)

    Example:
        man: {title: CORRUPT, section: "1", extra: ["2024-01-01"]}
        ManMeta(title="CORRUPT", section="1", extra=["2024-01-01"])
    """
    title: str
    section: str = "1"
    extra: List[str] = field(default_factory=list)


@dataclass
class LoadedSource:
    """
    Result of loading a document source

    Attributes:
        document: Document built from the ``body:`` list
        man: Man page metadata, None when the source has no ``man:`` mapping
    """
    document: 'Document'
    man: Optional[ManMeta] = None

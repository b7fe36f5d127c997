"""
YAML document sources

Builds a Document from a YAML description so documentation can live in a
data file and be regenerated into markdown and man pages.

Format:
    man:                          # optional, needed for man page output
      title: CORRUPT
      section: "1"
      extra: ["2024-01-01"]
    body:
      - section: Name
      - paragraph: ["corrupt ", {literal: "--help"}, " for usage"]
      - dlist:
          - definition:
              term: [{literal: "-n"}, " ", {metavar: BITS}]
              body: Number of bits to flip
      - pre: "line one\\nline two"

Content is recursive:
- a string is plain text
- a list is a sequence of content
- a single-key mapping is either a style ({literal: "-v"}), a block
  ({paragraph: ...}) or a definition ({definition: {term: ..., body: ...}})
"""

from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from ..models.document import LogicalBlock, StyleKind
from ..models.source import LoadedSource, ManMeta
from .document import Document, Fragment, Scoped, Styled
from .log import LOG

STYLE_KEYS: Dict[str, StyleKind] = {kind.value: kind for kind in StyleKind}

BLOCK_KEYS: Dict[str, LogicalBlock] = {
    "section": LogicalBlock.SECTION,
    "subsection": LogicalBlock.SUBSECTION,
    "paragraph": LogicalBlock.PARAGRAPH,
    "pre": LogicalBlock.PRE,
    "ulist": LogicalBlock.UNNUMBERED_LIST,
    "nlist": LogicalBlock.NUMBERED_LIST,
    "dlist": LogicalBlock.DEFINITION_LIST,
    "item": LogicalBlock.LIST_ITEM,
    "term": LogicalBlock.LIST_KEY,
}


class SourceError(Exception):
    """Raised when a document source cannot be read or understood"""
    pass


class SourceLoader:
    """
    Loads a YAML document source into a Document

    Attributes:
        source: Raw YAML text
        origin: Name used in error messages (file name or "<string>")
    """

    def __init__(self, source: str, origin: str = "<string>") -> None:
        self.source = source
        self.origin = origin

    def load(self) -> LoadedSource:
        """
        Parse the source and build the document

        Returns:
            LoadedSource with the document and optional man page metadata

        Raises:
            SourceError: invalid YAML or unknown content
        """
        try:
            data: Any = yaml.safe_load(self.source)
        except yaml.YAMLError as e:
            raise SourceError(f"{self.origin}: failed to parse YAML: {e}")

        if data is None:
            data = {}
        if not isinstance(data, dict):
            self.error("top level must be a mapping with a 'body' list", "")

        body = data.get("body", [])
        if not isinstance(body, list):
            self.error("'body' must be a list", "body")

        document = Document()
        for index, entry in enumerate(body):
            document.write(self.content_build(entry, f"body[{index}]"))
        LOG(f"Loaded {len(body)} top-level entries from {self.origin}", level=2)

        man = self.man_build(data["man"]) if "man" in data else None
        return LoadedSource(document=document, man=man)

    def man_build(self, node: Any) -> ManMeta:
        """Build man page metadata from the 'man' mapping"""
        if not isinstance(node, dict) or "title" not in node:
            self.error("'man' must be a mapping with a 'title'", "man")
        extra = node.get("extra", [])
        if isinstance(extra, str):
            extra = [extra]
        if not isinstance(extra, list):
            self.error("'extra' must be a string or a list", "man.extra")
        return ManMeta(
            title=str(node["title"]),
            section=str(node.get("section", "1")),
            extra=[str(item) for item in extra],
        )

    def content_build(self, node: Any, where: str) -> Fragment:
        """
        Turn one content node into a document fragment

        Args:
            node: Parsed YAML node
            where: Location of the node, for error messages

        Returns:
            Fragment ready for Document.write()
        """
        if isinstance(node, str):
            return node
        if isinstance(node, (int, float)) and not isinstance(node, bool):
            return str(node)
        if isinstance(node, list):
            return [self.content_build(item, f"{where}[{i}]") for i, item in enumerate(node)]
        if isinstance(node, dict) and len(node) == 1:
            key, value = next(iter(node.items()))
            path = f"{where}.{key}"
            if key in STYLE_KEYS:
                if not isinstance(value, (str, int, float)):
                    self.error(f"style '{key}' takes a string", path)
                return Styled(STYLE_KEYS[key], str(value))
            if key in BLOCK_KEYS:
                return Scoped(BLOCK_KEYS[key], self.content_build(value, path))
            if key == "definition":
                return self.definition_build(value, path)
            self.error(f"unknown element '{key}'", path)
        self.error("expected a string, a list or a single-key mapping", where)

    def definition_build(self, node: Any, where: str) -> List[Scoped]:
        """Definition as sibling term and item blocks"""
        if isinstance(node, dict) and "term" in node:
            term, body = node["term"], node.get("body", "")
        elif isinstance(node, list) and len(node) == 2:
            term, body = node
        else:
            self.error("definition needs 'term' and 'body' (or a two-item list)", where)
        return [
            Scoped(LogicalBlock.LIST_KEY, self.content_build(term, f"{where}.term")),
            Scoped(LogicalBlock.LIST_ITEM, self.content_build(body, f"{where}.body")),
        ]

    def error(self, message: str, where: str) -> None:
        """
        Report a source error with its location

        Raises:
            SourceError: Always
        """
        location = f"{self.origin}:{where}" if where else self.origin
        raise SourceError(f"{location}: {message}")


def source_loadFile(path: Union[str, Path]) -> LoadedSource:
    """
    Load a document source file

    Raises:
        SourceError: file cannot be read or its content is invalid
    """
    path = Path(path)
    try:
        source = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SourceError(f"Failed to read {path}: {e}")
    return SourceLoader(source, origin=path.name).load()

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass
class Block:
    """Base class for block-level nodes."""


@dataclass
class Document:
    """Root container block produced by the parser."""

    blocks: List[Block] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Paragraph(Block):
    inline: Optional["InlineContainer"] = None


@dataclass
class Heading(Block):
    level: int
    inline: Optional["InlineContainer"] = None


@dataclass
class Quote(Block):
    blocks: List[Block] = field(default_factory=list)


@dataclass
class ListItem:
    blocks: List[Block] = field(default_factory=list)


@dataclass
class ListBlock(Block):
    items: List[ListItem]
    ordered: bool


@dataclass
class TableCell:
    blocks: List[Block] = field(default_factory=list)


@dataclass
class TableRow:
    cells: List[TableCell] = field(default_factory=list)


@dataclass
class Table(Block):
    rows: List[TableRow] = field(default_factory=list)


@dataclass
class ThematicBreak(Block):
    """Horizontal rule / thematic break."""


@dataclass
class CodeBlock(Block):
    language: str | None
    code: str


@dataclass
class HtmlBlock(Block):
    html: str


@dataclass
class Inline:
    """Base class for inline nodes."""


@dataclass
class InlineContainer(Inline):
    """Ordered run of inline nodes, the content root of a leaf block."""

    children: List[Inline] = field(default_factory=list)


@dataclass
class Literal(Inline):
    text: str


@dataclass
class RawHtml(Inline):
    html: str


@dataclass
class LineBreak(Inline):
    """Hard line break."""


@dataclass
class CodeSpan(Inline):
    text: str


@dataclass
class Emphasis(InlineContainer):
    delimiter: str = "*"
    count: int = 1


@dataclass
class Link(InlineContainer):
    url: str = ""
    is_image: bool = False

"""Render a Markdown block/inline tree into an output tree of elements and widgets.

Headings, links and thematic breaks become widgets; everything else becomes a
plain tag element. Block kinds and inline kinds that have no mapping are
omitted, as are malformed structures such as a table cell whose content is not
a paragraph. Nothing in a document makes rendering fail.

Raw inline HTML is emitted as :class:`~MarkdownTree.tree.RawMarkup` without
escaping or sanitizing. Sources that are not trusted must be sanitized before
parsing or by whatever consumes the output tree.

Recursion follows the nesting depth of lists and block quotes, so extremely
deep nesting can exhaust the interpreter's recursion limit.
"""

from __future__ import annotations

import logging
from typing import Iterable, Protocol

from . import markup
from .emphasis import classify
from .markdown_parser import MarkdownParser
from .model import (
    Block,
    CodeSpan,
    Document,
    Emphasis,
    Heading,
    InlineContainer,
    LineBreak,
    Link,
    ListBlock,
    Literal,
    Paragraph,
    Quote,
    RawHtml,
    Table,
    TableRow,
    ThematicBreak,
)
from .tree import Element, OutputSink, Sequencer, TreeBuilder

logger = logging.getLogger(__name__)


class DocumentParser(Protocol):
    def parse(self, text: str) -> Document: ...


class MarkdownRenderer:
    """Reusable renderer. Owns the sequence counter for its render passes.

    Passes on one instance must not overlap; callers running renders from
    several threads serialize them per instance or use one instance each.
    """

    def __init__(self, parser: DocumentParser | None = None) -> None:
        self.parser = parser or MarkdownParser()
        self.sequencer = Sequencer()

    def render(self, source: str | None) -> Element | None:
        if not source:
            return None
        document = self.parser.parse(source)
        if not document.blocks:
            return None

        self.sequencer.reset()
        builder = TreeBuilder(self.sequencer)
        with builder.element(markup.ROOT_TAG):
            render_blocks(document.blocks, builder)
        logger.debug("Rendered %d top-level blocks using %d sequence keys", len(document.blocks), self.sequencer.value)
        return builder.root


def render_document(source: str | None, parser: DocumentParser | None = None) -> Element | None:
    return MarkdownRenderer(parser).render(source)


def render_blocks(blocks: Iterable[Block], sink: OutputSink) -> None:
    for block in blocks:
        render_block(block, sink)


def render_block(block: Block, sink: OutputSink) -> None:
    if isinstance(block, Paragraph):
        _render_paragraph(block, sink)
    elif isinstance(block, Heading):
        _render_heading(block, sink)
    elif isinstance(block, Quote):
        _render_quote(block, sink)
    elif isinstance(block, Table):
        _render_table(block, sink)
    elif isinstance(block, ListBlock):
        _render_list(block, sink)
    elif isinstance(block, ThematicBreak):
        _render_thematic_break(sink)
    else:
        logger.debug("Skipping unsupported block %s", type(block).__name__)


def _render_paragraph(paragraph: Paragraph, sink: OutputSink) -> None:
    if paragraph.inline is None:
        return
    with sink.element(markup.PARAGRAPH_TAG):
        render_inlines(paragraph.inline, sink)


def _render_heading(heading: Heading, sink: OutputSink) -> None:
    if heading.inline is None:
        return
    with sink.widget(markup.heading_widget(heading.level)):
        render_inlines(heading.inline, sink)


def _render_quote(quote: Quote, sink: OutputSink) -> None:
    with sink.element(markup.BLOCKQUOTE_TAG):
        render_blocks(quote.blocks, sink)


def _render_list(block: ListBlock, sink: OutputSink) -> None:
    if not block.items:
        return
    tag = markup.ORDERED_LIST_TAG if block.ordered else markup.UNORDERED_LIST_TAG
    with sink.element(tag):
        for item in block.items:
            for child in item.blocks:
                if isinstance(child, ListBlock):
                    # Nested lists sit beside the item's <li>, not inside it.
                    _render_list(child, sink)
                elif isinstance(child, Paragraph):
                    if child.inline is None:
                        continue
                    with sink.element(markup.LIST_ITEM_TAG):
                        render_inlines(child.inline, sink)
                else:
                    logger.debug("Skipping %s inside list item", type(child).__name__)


def _render_table(table: Table, sink: OutputSink) -> None:
    if not table.rows:
        return
    header, *body = table.rows
    with sink.element(markup.TABLE_TAG):
        sink.add_attribute("class", markup.TABLE_CLASS)
        with sink.element(markup.TABLE_HEAD_TAG):
            render_row(header, markup.HEADER_CELL_TAG, sink)
        with sink.element(markup.TABLE_BODY_TAG):
            for row in body:
                render_row(row, markup.BODY_CELL_TAG, sink)


def render_row(row: TableRow, cell_tag: str, sink: OutputSink) -> None:
    """Emit one table row. Only the first block of each cell is considered."""
    with sink.element(markup.TABLE_ROW_TAG):
        sink.add_attribute("class", markup.TABLE_ROW_CLASS)
        sink.add_attribute("style", markup.TABLE_ROW_STYLE)
        for cell in row.cells:
            with sink.element(cell_tag):
                first = cell.blocks[0] if cell.blocks else None
                if isinstance(first, Paragraph) and first.inline is not None:
                    render_inlines(first.inline, sink)
                elif first is not None:
                    logger.debug("Leaving %s cell empty: first child is %s", cell_tag, type(first).__name__)


def _render_thematic_break(sink: OutputSink) -> None:
    sink.open_widget(markup.WidgetKind.DIVIDER)
    sink.close_node()


def render_inlines(container: InlineContainer, sink: OutputSink) -> None:
    for inline in container.children:
        if isinstance(inline, Literal):
            sink.add_text(inline.text)
        elif isinstance(inline, RawHtml):
            sink.add_raw_markup(inline.html)
        elif isinstance(inline, LineBreak):
            sink.open_element(markup.LINE_BREAK_TAG)
            sink.close_node()
        elif isinstance(inline, CodeSpan):
            with sink.element(markup.CODE_TAG):
                sink.add_text(inline.text)
        elif isinstance(inline, Emphasis):
            _render_emphasis(inline, sink)
        elif isinstance(inline, Link):
            _render_link(inline, sink)
        else:
            logger.debug("Skipping unsupported inline %s", type(inline).__name__)


def _render_emphasis(emphasis: Emphasis, sink: OutputSink) -> None:
    tag = classify(emphasis.delimiter, emphasis.count)
    if tag is None:
        render_inlines(emphasis, sink)
        return
    with sink.element(tag):
        render_inlines(emphasis, sink)


def _render_link(link: Link, sink: OutputSink) -> None:
    if link.is_image:
        with sink.element(markup.IMAGE_TAG):
            sink.add_attribute("src", link.url)
            sink.add_attribute("alt", image_alt_text(link))
        return
    with sink.widget(markup.WidgetKind.ANCHOR):
        sink.add_attribute(markup.HREF_PROP, link.url)
        render_inlines(link, sink)


def image_alt_text(image: Link) -> str:
    """Join the image's literal children. Text inside nested emphasis is not included."""
    return "".join(child.text for child in image.children if isinstance(child, Literal))

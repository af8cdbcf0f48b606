from __future__ import annotations

import logging
from typing import Any, List, Sequence

import yaml
from markdown_it import MarkdownIt
from mdit_py_plugins.front_matter import front_matter_plugin

from .model import (
    Block,
    CodeBlock,
    CodeSpan,
    Document,
    Emphasis,
    Heading,
    HtmlBlock,
    Inline,
    InlineContainer,
    LineBreak,
    Link,
    ListBlock,
    ListItem,
    Literal,
    Paragraph,
    Quote,
    RawHtml,
    Table,
    TableCell,
    TableRow,
    ThematicBreak,
)

logger = logging.getLogger(__name__)

# Inline container tokens and the token type that closes each of them.
_INLINE_CONTAINERS = {
    "em_open": "em_close",
    "strong_open": "strong_close",
    "s_open": "s_close",
    "link_open": "link_close",
}


class MarkdownParser:
    """CommonMark parser with pipe tables and strikethrough.

    Turns markdown-it-py's flat token stream into the block/inline tree in
    :mod:`MarkdownTree.model`.

    With ``front_matter=True`` a leading ``---`` fence is read as YAML front
    matter into :attr:`Document.metadata`. An unclosed leading fence then runs
    to the end of the document, so a lone ``---`` no longer parses as a
    thematic break.
    """

    def __init__(self, front_matter: bool = False) -> None:
        self.md = MarkdownIt("commonmark").enable(["table", "strikethrough"])
        if front_matter:
            self.md.use(front_matter_plugin)

    def parse(self, text: str) -> Document:
        tokens = self.md.parse(text)
        metadata: dict[str, Any] = {}
        if tokens and tokens[0].type == "front_matter":
            metadata = _load_front_matter(tokens[0].content)
            tokens = tokens[1:]
        blocks, _ = _parse_blocks(tokens, 0, stop_types=set())
        return Document(blocks=blocks, metadata=metadata)


def parse_markdown(text: str, front_matter: bool = False) -> Document:
    return MarkdownParser(front_matter=front_matter).parse(text)


def _load_front_matter(text: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        logger.warning("Ignoring unparsable front matter: %s", exc)
        return {}
    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring front matter that is not a mapping (%s)", type(data).__name__)
        return {}
    return data


def _parse_blocks(tokens: Sequence, index: int, stop_types: set[str]) -> tuple[List[Block], int]:
    blocks: List[Block] = []
    i = index
    while i < len(tokens):
        tok = tokens[i]
        if tok.type in stop_types:
            break
        if tok.type == "paragraph_open":
            blocks.append(Paragraph(inline=_inline_content(tokens[i + 1])))
            i += 3
        elif tok.type == "heading_open":
            level = int(tok.tag[1:])
            blocks.append(Heading(level=level, inline=_inline_content(tokens[i + 1])))
            i += 3
        elif tok.type == "blockquote_open":
            children, i = _parse_blocks(tokens, i + 1, stop_types={"blockquote_close"})
            blocks.append(Quote(blocks=children))
            i += 1  # skip blockquote_close
        elif tok.type in ("bullet_list_open", "ordered_list_open"):
            list_block, i = _parse_list(tokens, i)
            blocks.append(list_block)
        elif tok.type == "table_open":
            table, i = _parse_table(tokens, i)
            blocks.append(table)
        elif tok.type == "hr":
            blocks.append(ThematicBreak())
            i += 1
        elif tok.type in ("fence", "code_block"):
            blocks.append(CodeBlock(language=tok.info.strip() or None, code=tok.content))
            i += 1
        elif tok.type == "html_block":
            blocks.append(HtmlBlock(html=tok.content))
            i += 1
        else:
            logger.debug("Skipping unmapped block token %s", tok.type)
            i += 1
    return blocks, i


def _parse_list(tokens: Sequence, index: int) -> tuple[ListBlock, int]:
    tok = tokens[index]
    ordered = tok.type == "ordered_list_open"
    close_type = "ordered_list_close" if ordered else "bullet_list_close"
    items: list[ListItem] = []
    i = index + 1
    while i < len(tokens) and tokens[i].type != close_type:
        if tokens[i].type == "list_item_open":
            item_blocks, i = _parse_blocks(tokens, i + 1, stop_types={"list_item_close"})
            items.append(ListItem(blocks=item_blocks))
            i += 1  # skip list_item_close
        else:
            i += 1
    return ListBlock(items=items, ordered=ordered), i + 1


def _parse_table(tokens: Sequence, index: int) -> tuple[Table, int]:
    rows: list[TableRow] = []
    i = index + 1
    while i < len(tokens) and tokens[i].type != "table_close":
        if tokens[i].type == "tr_open":
            row = TableRow()
            i += 1
            while tokens[i].type != "tr_close":
                if tokens[i].type in {"th_open", "td_open"}:
                    inline = _inline_content(tokens[i + 1])
                    cell = TableCell(blocks=[Paragraph(inline=inline)] if inline is not None else [])
                    row.cells.append(cell)
                    i += 3  # skip cell open, inline, cell close
                else:
                    i += 1
            rows.append(row)
        i += 1
    return Table(rows=rows), i + 1


def _inline_content(tok) -> InlineContainer | None:
    if tok.type != "inline" or not tok.children:
        return None
    children, _ = _parse_inline(tok.children, 0, stop_type=None)
    return InlineContainer(children=children)


def _parse_inline(tokens: Sequence, index: int, stop_type: str | None) -> tuple[List[Inline], int]:
    result: List[Inline] = []
    i = index
    while i < len(tokens):
        tok = tokens[i]
        if tok.type == stop_type:
            break
        if tok.type in ("text", "text_special"):
            # text_special (escapes, entities) is only merged into text at the top level
            result.append(Literal(tok.content))
        elif tok.type == "softbreak":
            result.append(Literal(" "))
        elif tok.type == "hardbreak":
            result.append(LineBreak())
        elif tok.type == "code_inline":
            result.append(CodeSpan(tok.content))
        elif tok.type == "html_inline":
            result.append(RawHtml(tok.content))
        elif tok.type == "image":
            alt, _ = _parse_inline(tok.children or [], 0, stop_type=None)
            result.append(Link(children=alt, url=tok.attrGet("src") or "", is_image=True))
        elif tok.type in _INLINE_CONTAINERS:
            children, i = _parse_inline(tokens, i + 1, stop_type=_INLINE_CONTAINERS[tok.type])
            if tok.type == "link_open":
                result.append(Link(children=children, url=tok.attrGet("href") or ""))
            else:
                result.append(Emphasis(children=children, delimiter=tok.markup[:1], count=len(tok.markup)))
        else:
            logger.debug("Skipping unmapped inline token %s", tok.type)
        i += 1
    return result, i

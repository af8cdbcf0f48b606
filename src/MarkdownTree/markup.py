from __future__ import annotations

from enum import Enum

ROOT_TAG = "article"
PARAGRAPH_TAG = "p"
BLOCKQUOTE_TAG = "blockquote"
ORDERED_LIST_TAG = "ol"
UNORDERED_LIST_TAG = "ul"
LIST_ITEM_TAG = "li"
LINE_BREAK_TAG = "br"
CODE_TAG = "code"
IMAGE_TAG = "img"
ITALIC_TAG = "i"
BOLD_TAG = "b"

TABLE_TAG = "table"
TABLE_HEAD_TAG = "thead"
TABLE_BODY_TAG = "tbody"
TABLE_ROW_TAG = "tr"
HEADER_CELL_TAG = "th"
BODY_CELL_TAG = "td"

TABLE_CLASS = "mdc-table"
TABLE_ROW_CLASS = "mdc-table-header-row"
TABLE_ROW_STYLE = "white-space: nowrap;"

HREF_PROP = "href"


class WidgetKind(str, Enum):
    """Pre-styled components the consumer maps onto its own widget library."""

    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    H4 = "h4"
    H5 = "h5"
    H6 = "h6"
    ANCHOR = "anchor"
    DIVIDER = "divider"


HEADING_WIDGETS = (
    WidgetKind.H1,
    WidgetKind.H2,
    WidgetKind.H3,
    WidgetKind.H4,
    WidgetKind.H5,
    WidgetKind.H6,
)


def heading_widget(level: int) -> WidgetKind:
    """Map a heading level to its widget; anything outside 1-6 becomes H6."""
    if 1 <= level <= len(HEADING_WIDGETS):
        return HEADING_WIDGETS[level - 1]
    return WidgetKind.H6

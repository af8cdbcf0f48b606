import textwrap

from MarkdownTree import markdown_parser
from MarkdownTree.model import (
    CodeBlock,
    CodeSpan,
    Emphasis,
    Heading,
    HtmlBlock,
    LineBreak,
    Link,
    ListBlock,
    Literal,
    Paragraph,
    Quote,
    RawHtml,
    Table,
    ThematicBreak,
)


def test_parse_blocks():
    md_text = textwrap.dedent(
        """
        # Introduction

        Text with *italic* and **bold**.

        > quoted

        - First
        - Second

        | A | B |
        |---|---|
        | 1 | 2 |

        ---

        ```python
        print("hi")
        ```

        <div>block</div>
        """
    )
    document = markdown_parser.parse_markdown(md_text)
    kinds = [type(block) for block in document.blocks]
    assert kinds == [Heading, Paragraph, Quote, ListBlock, Table, ThematicBreak, CodeBlock, HtmlBlock]
    assert document.blocks[0].level == 1
    assert document.blocks[6].language == "python"
    assert document.metadata == {}


def test_parse_inline_variants():
    document = markdown_parser.parse_markdown("a *b* __c__ `d` <span>e</span>  \nf [g](http://h) ![i](j.png)")
    children = document.blocks[0].inline.children
    assert isinstance(children[0], Literal) and children[0].text == "a "
    emphasis = children[1]
    assert isinstance(emphasis, Emphasis)
    assert (emphasis.delimiter, emphasis.count) == ("*", 1)
    strong = children[3]
    assert isinstance(strong, Emphasis)
    assert (strong.delimiter, strong.count) == ("_", 2)
    assert any(isinstance(child, CodeSpan) and child.text == "d" for child in children)
    assert any(isinstance(child, RawHtml) and child.html == "<span>" for child in children)
    assert any(isinstance(child, LineBreak) for child in children)
    links = [child for child in children if isinstance(child, Link)]
    assert [(link.url, link.is_image) for link in links] == [("http://h", False), ("j.png", True)]
    assert links[1].children == [Literal("i")]


def test_soft_break_becomes_space():
    document = markdown_parser.parse_markdown("one\ntwo")
    assert document.blocks[0].inline.children == [Literal("one"), Literal(" "), Literal("two")]


def test_strikethrough_keeps_delimiter():
    document = markdown_parser.parse_markdown("~~gone~~")
    strike = document.blocks[0].inline.children[0]
    assert isinstance(strike, Emphasis)
    assert (strike.delimiter, strike.count) == ("~", 2)
    assert strike.children == [Literal("gone")]


def test_nested_list_structure():
    document = markdown_parser.parse_markdown("- item1\n  - nested\n- item2")
    outer = document.blocks[0]
    assert isinstance(outer, ListBlock) and not outer.ordered
    assert len(outer.items) == 2
    first_item = outer.items[0]
    assert isinstance(first_item.blocks[0], Paragraph)
    assert isinstance(first_item.blocks[1], ListBlock)


def test_ordered_list_from_any_start():
    document = markdown_parser.parse_markdown("3. three\n4. four")
    block = document.blocks[0]
    assert block.ordered
    assert len(block.items) == 2


def test_table_rows_and_empty_cells():
    document = markdown_parser.parse_markdown("| H1 | H2 |\n|----|----|\n| a |  |\n")
    table = document.blocks[0]
    assert isinstance(table, Table)
    assert len(table.rows) == 2
    header, body = table.rows
    assert [cell.blocks[0].inline.children for cell in header.cells] == [[Literal("H1")], [Literal("H2")]]
    assert isinstance(body.cells[0].blocks[0], Paragraph)
    assert body.cells[1].blocks == []


def test_empty_heading_has_no_inline():
    document = markdown_parser.parse_markdown("#\n")
    assert isinstance(document.blocks[0], Heading)
    assert document.blocks[0].inline is None


def test_whitespace_parses_to_no_blocks():
    assert markdown_parser.parse_markdown("   \n\n  ").blocks == []


def test_front_matter_metadata():
    md_text = "---\ntitle: Notes\ntags: [a, b]\n---\n# Heading\n"
    document = markdown_parser.parse_markdown(md_text, front_matter=True)
    assert document.metadata == {"title": "Notes", "tags": ["a", "b"]}
    assert len(document.blocks) == 1
    assert isinstance(document.blocks[0], Heading)


def test_front_matter_must_be_mapping():
    document = markdown_parser.parse_markdown("---\n- a\n- b\n---\ntext\n", front_matter=True)
    assert document.metadata == {}
    assert isinstance(document.blocks[0], Paragraph)


def test_leading_rule_without_front_matter():
    document = markdown_parser.parse_markdown("---")
    assert document.blocks == [ThematicBreak()]

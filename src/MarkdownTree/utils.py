from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .tree import Element, OutputNode, RawMarkup, Text, Widget


def configure_logging(verbose: bool = False) -> None:
    """Configure a simple console logger."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(message)s",
    )


def resolve_output_path(input_path: Path, output: Optional[str], suffix: str) -> Path | None:
    """Return where to write the dump, or None for stdout."""
    if not output:
        return None
    out_path = Path(output)
    if out_path.is_dir():
        out_path = out_path / f"{input_path.stem}{suffix}"
    return out_path


def read_markdown(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def format_outline(node: OutputNode | None, keys: bool = True, indent: int = 0) -> str:
    """Render an output tree as an indented, one-node-per-line outline."""
    if node is None:
        return ""
    lines: list[str] = []
    _outline(node, keys, indent, lines)
    return "\n".join(lines)


def _outline(node: OutputNode, keys: bool, depth: int, lines: list[str]) -> None:
    pad = "  " * depth
    key = f"[{node.sequence}] " if keys else ""
    if isinstance(node, Text):
        lines.append(f"{pad}{key}{node.content!r}")
        return
    if isinstance(node, RawMarkup):
        lines.append(f"{pad}{key}raw {node.content!r}")
        return
    if isinstance(node, Widget):
        label = f"widget:{node.kind.value}"
        attrs = node.props
    else:
        label = node.tag
        attrs = node.attributes
    rendered = " ".join(f"{a.name}={a.value!r}" + (f"[{a.sequence}]" if keys else "") for a in attrs)
    lines.append(f"{pad}{key}<{label}{' ' + rendered if rendered else ''}>")
    for child in node.children:
        _outline(child, keys, depth + 1, lines)

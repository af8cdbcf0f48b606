from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from .markdown_parser import MarkdownParser
from .renderer import MarkdownRenderer
from .utils import configure_logging, format_outline, read_markdown, resolve_output_path

SUFFIXES = {"json": ".json", "outline": ".txt"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markdowntree",
        description="Render Markdown into an output tree and dump it for inspection.",
    )
    parser.add_argument("input", type=str, help="Path to Markdown file")
    parser.add_argument("-o", "--output", type=str, help="Output path (default: stdout)")
    parser.add_argument("--format", choices=sorted(SUFFIXES), default="json", help="Dump format")
    parser.add_argument("--no-keys", action="store_true", help="Omit sequence keys from the dump")
    parser.add_argument("--front-matter", action="store_true", help="Read a leading YAML front matter block")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)
    input_path = Path(args.input).expanduser()
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")
    output_path = resolve_output_path(input_path, args.output, SUFFIXES[args.format])

    logging.info("Reading %s", input_path)
    markdown_text = read_markdown(input_path)
    logging.debug("Markdown length: %d chars", len(markdown_text))

    renderer = MarkdownRenderer(MarkdownParser(front_matter=args.front_matter))
    root = renderer.render(markdown_text)
    if root is None:
        logging.info("Nothing to render")

    keys = not args.no_keys
    if args.format == "json":
        dump = json.dumps(root.to_dict(keys) if root is not None else None, indent=2, ensure_ascii=False)
    else:
        dump = format_outline(root, keys=keys)

    if output_path is None:
        print(dump)
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dump + "\n", encoding="utf-8")
    logging.info("Done. Saved to %s", output_path)


if __name__ == "__main__":
    main()

import json
from pathlib import Path

import pytest

from MarkdownTree import cli


def test_cli_writes_json(tmp_path: Path):
    source = tmp_path / "note.md"
    source.write_text("# Hi\n\nText", encoding="utf-8")
    out_dir = tmp_path / "out"
    out_dir.mkdir()
    cli.main([str(source), "-o", str(out_dir)])
    data = json.loads((out_dir / "note.json").read_text(encoding="utf-8"))
    assert data["tag"] == "article"
    assert data["sequence"] == 0
    assert [child["type"] for child in data["children"]] == ["widget", "element"]


def test_cli_outline_to_stdout(tmp_path: Path, capsys):
    source = tmp_path / "note.md"
    source.write_text("a *b*", encoding="utf-8")
    cli.main([str(source), "--format", "outline", "--no-keys"])
    out = capsys.readouterr().out
    assert out.splitlines() == ["<article>", "  <p>", "    'a '", "    <i>", "      'b'"]


def test_cli_empty_document(tmp_path: Path, capsys):
    source = tmp_path / "empty.md"
    source.write_text("", encoding="utf-8")
    cli.main([str(source)])
    assert capsys.readouterr().out.strip() == "null"


def test_cli_front_matter(tmp_path: Path, capsys):
    source = tmp_path / "fm.md"
    source.write_text("---\ntitle: x\n---\nbody\n", encoding="utf-8")
    cli.main([str(source), "--front-matter", "--no-keys"])
    data = json.loads(capsys.readouterr().out)
    assert [child["tag"] for child in data["children"]] == ["p"]


def test_cli_missing_input(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        cli.main([str(tmp_path / "missing.md")])

from pathlib import Path

import pytest
from docx import Document as DocxReader

from RenderMark import cli
from RenderMark.utils import make_header_id


@pytest.fixture
def markdown_file(tmp_path: Path) -> Path:
    path = tmp_path / "notes.md"
    path.write_text("# Notes\n\nSome **bold** text.\n", encoding="utf-8")
    return path


def test_writes_html_next_to_input(markdown_file: Path):
    cli.main([str(markdown_file)])
    html = markdown_file.with_suffix(".html").read_text(encoding="utf-8")
    assert html == (
        f'<h1 id="{make_header_id("Notes")}">Notes</h1>\n'
        "<p>Some <strong>bold</strong> text.</p>\n"
    )


def test_output_directory(markdown_file: Path, tmp_path: Path):
    out_dir = tmp_path / "out"
    out_dir.mkdir()
    cli.main([str(markdown_file), "-o", str(out_dir)])
    assert (out_dir / "notes.html").exists()


def test_docx_format(markdown_file: Path):
    cli.main([str(markdown_file), "--format", "docx"])
    reader = DocxReader(markdown_file.with_suffix(".docx"))
    assert reader.paragraphs[0].text == "Notes"


def test_config_file_and_overrides(markdown_file: Path, tmp_path: Path):
    config_path = tmp_path / "render.yaml"
    config_path.write_text("standalone: true\ntitle: From config\n", encoding="utf-8")
    out = tmp_path / "page.html"

    cli.main([str(markdown_file), "--config", str(config_path), "-o", str(out)])
    assert "<title>From config</title>" in out.read_text(encoding="utf-8")

    cli.main([str(markdown_file), "--config", str(config_path), "--title", "CLI", "-o", str(out)])
    assert "<title>CLI</title>" in out.read_text(encoding="utf-8")


def test_missing_input(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        cli.main([str(tmp_path / "absent.md")])

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from docx import Document as DocxDocument
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Cm, Pt

from . import docx_format
from .config import RenderConfig
from .errors import RenderError
from .model import (
    Block,
    BlockQuote,
    Bold,
    BoldItalic,
    CodeBlock,
    Document,
    Header,
    HorizontalRule,
    Image,
    InlineCode,
    InlineElement,
    Italic,
    LineBreak,
    Link,
    OrderedList,
    Paragraph,
    PlainText,
    Strikethrough,
    Underlined,
    UnorderedList,
)

logger = logging.getLogger(__name__)


@dataclass
class RenderState:
    config: RenderConfig = field(default_factory=RenderConfig)
    asset_root: Path | None = None
    quote_depth: int = 0
    bookmark_id: int = 0
    bookmark_names: set[str] = field(default_factory=set)


def render_document(
    doc: Document,
    output_path: str | Path,
    asset_root: Path | None = None,
    config: RenderConfig | None = None,
) -> None:
    output_path = Path(output_path)
    state = RenderState(config=config or RenderConfig(), asset_root=asset_root)
    docx = DocxDocument()
    docx_format.apply_page_layout(docx)
    if state.config.title:
        docx.core_properties.title = state.config.title

    for block in doc.blocks:
        _dispatch_block(docx, block, state)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    docx.save(output_path)
    logger.debug("Wrote %d top-level blocks to %s", len(doc.blocks), output_path)


def _dispatch_block(docx: DocxDocument, block: Block, state: RenderState) -> None:
    if isinstance(block, Header):
        _render_heading(docx, block, state)
    elif isinstance(block, Paragraph):
        _render_paragraph(docx, block.children, state)
    elif isinstance(block, BlockQuote):
        state.quote_depth += 1
        try:
            for child in block.children:
                _dispatch_block(docx, child, state)
        finally:
            state.quote_depth -= 1
    elif isinstance(block, (UnorderedList, OrderedList)):
        _render_list(docx, block, state)
    elif isinstance(block, CodeBlock):
        _render_code_block(docx, block, state)
    elif isinstance(block, HorizontalRule):
        _render_horizontal_rule(docx, state)
    else:
        raise RenderError(block, "DOCX")


def _render_heading(docx: DocxDocument, heading: Header, state: RenderState) -> None:
    paragraph = docx.add_paragraph(heading.text)
    docx_format.apply_heading_format(paragraph, heading.level, state.config)
    if state.quote_depth:
        paragraph.paragraph_format.left_indent = Cm(state.config.quote_indent_cm * state.quote_depth)
    _add_bookmark(paragraph, f"h{heading.id}", state)


def _render_paragraph(docx: DocxDocument, inline_elements: Iterable[InlineElement], state: RenderState) -> None:
    paragraph = docx.add_paragraph()
    config = state.config
    for inline in inline_elements:
        if isinstance(inline, PlainText):
            run = paragraph.add_run(inline.text)
            docx_format.set_run_font(run, config)
        elif isinstance(inline, Bold):
            run = paragraph.add_run(inline.text)
            docx_format.set_run_font(run, config, bold=True)
        elif isinstance(inline, Italic):
            run = paragraph.add_run(inline.text)
            docx_format.set_run_font(run, config, italic=True)
        elif isinstance(inline, BoldItalic):
            run = paragraph.add_run(inline.text)
            docx_format.set_run_font(run, config, bold=True, italic=True)
        elif isinstance(inline, Strikethrough):
            run = paragraph.add_run(inline.text)
            docx_format.set_run_font(run, config)
            run.font.strike = True
        elif isinstance(inline, Underlined):
            run = paragraph.add_run(inline.text)
            docx_format.set_run_font(run, config)
            run.underline = True
        elif isinstance(inline, LineBreak):
            paragraph.add_run().add_break()
        elif isinstance(inline, Link):
            run = paragraph.add_run(inline.text)
            run.font.underline = True
            docx_format.set_run_font(run, config)
        elif isinstance(inline, InlineCode):
            run = paragraph.add_run(inline.text)
            docx_format.set_run_font(run, config, code=True)
        elif isinstance(inline, Image):
            _render_image(paragraph, inline, state)
        else:
            raise RenderError(inline, "DOCX")
    docx_format.apply_body_paragraph_format(paragraph, state.quote_depth, config)


def _render_image(paragraph, image: Image, state: RenderState) -> None:
    image_path = Path(image.url)
    if state.asset_root and not image_path.is_absolute():
        image_path = state.asset_root / image.url

    run = paragraph.add_run()
    if image_path.exists():
        run.add_picture(str(image_path))
    else:
        logger.warning("Image not found: %s", image_path)
        run.add_text(f"[Missing image: {image.alt or image.url}]")
        docx_format.set_run_font(run, state.config, italic=True)


def _render_list(docx: DocxDocument, block: UnorderedList | OrderedList, state: RenderState) -> None:
    ordered = isinstance(block, OrderedList)
    for idx, item in enumerate(block.items, start=1):
        prefix = f"{idx}. " if ordered else "– "
        paragraph = docx.add_paragraph()
        run = paragraph.add_run(prefix + item.strip())
        docx_format.set_run_font(run, state.config)
        docx_format.apply_body_paragraph_format(paragraph, state.quote_depth + 1, state.config)
        paragraph.paragraph_format.space_after = Pt(0)


def _render_code_block(docx: DocxDocument, block: CodeBlock, state: RenderState) -> None:
    paragraph = docx.add_paragraph()
    run = paragraph.add_run(block.text)
    docx_format.set_run_font(run, state.config, code=True)
    docx_format.apply_code_format(paragraph, state.quote_depth, state.config)


def _render_horizontal_rule(docx: DocxDocument, state: RenderState) -> None:
    paragraph = docx.add_paragraph()
    run = paragraph.add_run("-" * 20)
    docx_format.set_run_font(run, state.config)
    paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER


def _add_bookmark(paragraph, name: str, state: RenderState) -> None:
    """Wrap the paragraph content in a bookmark so the header id is addressable."""
    bookmark_id = str(state.bookmark_id)
    state.bookmark_id += 1
    # Repeated header text shares one id; bookmark names must stay unique.
    unique = name
    suffix = 1
    while unique in state.bookmark_names:
        suffix += 1
        unique = f"{name}_{suffix}"
    state.bookmark_names.add(unique)

    start = OxmlElement("w:bookmarkStart")
    start.set(qn("w:id"), bookmark_id)
    start.set(qn("w:name"), unique)
    end = OxmlElement("w:bookmarkEnd")
    end.set(qn("w:id"), bookmark_id)

    p = paragraph._p
    p.insert(0 if p.pPr is None else 1, start)
    p.append(end)

from __future__ import annotations

from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Cm, Pt

from .config import RenderConfig

A4_WIDTH_MM = 210
A4_HEIGHT_MM = 297

CODE_FONT_NAME = "Courier New"
LINE_SPACING = 1.15
PARAGRAPH_SPACE_AFTER_PT = 6

MARGIN_CM = 2.0

# Heading size relative to body text, indexed by header level.
HEADING_SCALE = {1: 2.0, 2: 1.5, 3: 1.25, 4: 1.1, 5: 1.0, 6: 0.9}


def apply_page_layout(doc) -> None:
    """Apply A4 page setup with even margins."""
    section = doc.sections[0]
    section.page_height = Cm(A4_HEIGHT_MM / 10)
    section.page_width = Cm(A4_WIDTH_MM / 10)
    section.left_margin = Cm(MARGIN_CM)
    section.right_margin = Cm(MARGIN_CM)
    section.top_margin = Cm(MARGIN_CM)
    section.bottom_margin = Cm(MARGIN_CM)


def set_run_font(
    run,
    config: RenderConfig,
    bold: bool = False,
    italic: bool = False,
    code: bool = False,
    size_pt: float | None = None,
) -> None:
    run.font.name = CODE_FONT_NAME if code else config.font_name
    run.font.size = Pt(size_pt or config.font_size_pt)
    run.bold = bold
    run.italic = italic


def apply_body_paragraph_format(paragraph, indent_level: int = 0, config: RenderConfig | None = None) -> None:
    paragraph.alignment = WD_ALIGN_PARAGRAPH.LEFT
    paragraph.paragraph_format.space_before = Pt(0)
    paragraph.paragraph_format.space_after = Pt(PARAGRAPH_SPACE_AFTER_PT)
    paragraph.paragraph_format.line_spacing = LINE_SPACING
    if indent_level and config is not None:
        paragraph.paragraph_format.left_indent = Cm(config.quote_indent_cm * indent_level)


def apply_heading_format(paragraph, level: int, config: RenderConfig) -> None:
    paragraph.alignment = WD_ALIGN_PARAGRAPH.LEFT
    paragraph.paragraph_format.space_before = Pt(PARAGRAPH_SPACE_AFTER_PT * 2)
    paragraph.paragraph_format.space_after = Pt(PARAGRAPH_SPACE_AFTER_PT)
    size = config.font_size_pt * HEADING_SCALE[level]
    for run in paragraph.runs:
        set_run_font(run, config, bold=True, size_pt=size)


def apply_code_format(paragraph, indent_level: int = 0, config: RenderConfig | None = None) -> None:
    apply_body_paragraph_format(paragraph, indent_level, config)
    paragraph.paragraph_format.line_spacing = 1.0

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from .inline_parser import parse_inline
from .model import (
    Block,
    BlockQuote,
    Document,
    Header,
    HorizontalRule,
    InlineElement,
    Paragraph,
)
from .utils import make_header_id

logger = logging.getLogger(__name__)

RULE_CHARS = frozenset("*-_")


def parse_markdown(text: str) -> Document:
    blocks = parse_lines(text.splitlines())
    logger.debug("Parsed %d top-level blocks", len(blocks))
    return Document(blocks=tuple(blocks))


def parse_lines(lines: Sequence[str]) -> List[Block]:
    """Segment an ordered sequence of lines into top-level block nodes."""
    blocks: List[Block] = []
    pending: List[str] = []
    i = _skip_blank(lines, 0)
    while i < len(lines):
        line = lines[i]
        if _is_blank(line):
            _flush_paragraph(pending, blocks)
            i = _skip_blank(lines, i)
        elif _is_quote_line(line):
            start = i
            while i < len(lines) and _is_quote_line(lines[i]):
                i += 1
            _flush_paragraph(pending, blocks)
            quoted = [_strip_quote_marker(quote_line) for quote_line in lines[start:i]]
            blocks.append(BlockQuote(tuple(_parse_quote_content(quoted))))
        elif _is_header_line(line):
            _flush_paragraph(pending, blocks)
            blocks.append(parse_header(line))
            i += 1
        elif _is_horizontal_rule(line):
            _flush_paragraph(pending, blocks)
            blocks.append(HorizontalRule())
            i += 1
        elif i + 1 < len(lines) and _setext_level(lines[i + 1]):
            _flush_paragraph(pending, blocks)
            text = line.strip()
            blocks.append(Header(level=_setext_level(lines[i + 1]), text=text, id=make_header_id(text)))
            i += 2
        else:
            pending.append(line)
            i += 1
    _flush_paragraph(pending, blocks)
    return blocks


def parse_header(line: str) -> Header:
    """Parse an ATX header line; closing hashes are discarded."""
    stripped = line.lstrip("#")
    level = min(6, len(line) - len(stripped))
    text = stripped.strip().rstrip("#").strip()
    return Header(level=level, text=text, id=make_header_id(text))


def _parse_quote_content(lines: Sequence[str]) -> List[Block]:
    blocks: List[Block] = []
    for group in _group_by_depth(lines):
        if _quote_depth(group[0]) > 0:
            nested = [_strip_quote_marker(line) for line in group]
            blocks.append(BlockQuote(tuple(_parse_quote_content(nested))))
            continue
        content = [line.lstrip() for line in group]
        if _is_header_line(content[0]):
            blocks.append(parse_header(content[0]))
            content = content[1:]
        paragraph = _paragraph_from_lines(line for line in content if not _is_blank(line))
        if paragraph is not None:
            blocks.append(paragraph)
    return blocks


def _group_by_depth(lines: Sequence[str]) -> List[List[str]]:
    # Deeper lines stay together; the nested parse splits them by level again.
    groups: List[List[str]] = []
    for line in lines:
        if groups and (_quote_depth(groups[-1][0]) > 0) == (_quote_depth(line) > 0):
            groups[-1].append(line)
        else:
            groups.append([line])
    return groups


def _flush_paragraph(pending: List[str], blocks: List[Block]) -> None:
    paragraph = _paragraph_from_lines(pending)
    if paragraph is not None:
        blocks.append(paragraph)
    pending.clear()


def _paragraph_from_lines(lines: Iterable[str]) -> Paragraph | None:
    line_list = list(lines)
    if not line_list:
        return None
    children: List[InlineElement] = []
    for line in line_list:
        children.extend(parse_inline(line))
    return Paragraph(tuple(children))


def _skip_blank(lines: Sequence[str], index: int) -> int:
    while index < len(lines) and _is_blank(lines[index]):
        index += 1
    return index


def _is_blank(line: str) -> bool:
    return not line.strip()


def _is_quote_line(line: str) -> bool:
    return line.strip().startswith(">")


def _is_header_line(line: str) -> bool:
    return line.startswith("#")


def _is_horizontal_rule(line: str) -> bool:
    stripped = line.strip()
    return len(stripped) >= 3 and stripped[0] in RULE_CHARS and stripped == stripped[0] * len(stripped)


def _setext_level(line: str) -> int:
    stripped = line.strip()
    if not stripped:
        return 0
    if stripped == "=" * len(stripped):
        return 1
    if stripped == "-" * len(stripped):
        return 2
    return 0


def _quote_depth(line: str) -> int:
    stripped = line.lstrip()
    return len(stripped) - len(stripped.lstrip(">"))


def _strip_quote_marker(line: str) -> str:
    stripped = line.lstrip()
    if stripped.startswith(">"):
        stripped = stripped[1:]
    return stripped.lstrip()

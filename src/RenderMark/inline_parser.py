from __future__ import annotations

from typing import List

from .model import (
    Bold,
    BoldItalic,
    InlineElement,
    Italic,
    LineBreak,
    PlainText,
    Strikethrough,
    Underlined,
)

SPECIAL_CHARS = frozenset("*_~<")

_EMPHASIS_BY_RUN = {3: BoldItalic, 2: Bold, 1: Italic}


def parse_inline(line: str) -> List[InlineElement]:
    """Parse one line of paragraph content into inline nodes.

    Explicit breaks are found first (trailing double space, trailing backslash,
    then ``<br>`` tags); each text segment around a break is decoration-scanned
    on its own. Never raises: unmatched markup degrades to PlainText.
    """
    result: List[InlineElement] = []
    rest = line
    while rest:
        if rest.endswith("  "):
            result.extend(scan_decorations(rest[:-2]))
            result.append(LineBreak())
            break
        if rest.endswith("\\"):
            result.extend(scan_decorations(rest[:-1]))
            result.append(LineBreak())
            break
        before, tag, after = rest.partition("<br>")
        if not tag:
            result.extend(scan_decorations(rest))
            break
        result.extend(scan_decorations(before))
        result.append(LineBreak())
        rest = after
    return result


def scan_decorations(text: str) -> List[InlineElement]:
    """Split text into PlainText and emphasis-style spans."""
    nodes: List[InlineElement] = []
    pos = 0
    while pos < len(text):
        char = text[pos]
        if char in "*_":
            pos = _scan_emphasis(text, pos, char, nodes)
        elif text.startswith("~~", pos):
            pos = _scan_delimited(text, pos, "~~", "~~", Strikethrough, nodes)
        elif text.startswith("<u>", pos):
            pos = _scan_delimited(text, pos, "<u>", "</u>", Underlined, nodes)
        else:
            pos = _scan_plain(text, pos, nodes)
    return nodes


def _scan_emphasis(text: str, pos: int, char: str, nodes: List[InlineElement]) -> int:
    # Longest run first; a failed run is emitted literally and never retried shorter.
    size = next(n for n in (3, 2, 1) if text.startswith(char * n, pos))
    delimiter = char * size
    return _scan_delimited(text, pos, delimiter, delimiter, _EMPHASIS_BY_RUN[size], nodes)


def _scan_delimited(
    text: str,
    pos: int,
    opener: str,
    closer: str,
    node_type: type,
    nodes: List[InlineElement],
) -> int:
    start = pos + len(opener)
    end = text.find(closer, start)
    if end == -1:
        nodes.append(PlainText(opener))
        return start
    nodes.append(node_type(text[start:end].strip()))
    return end + len(closer)


def _scan_plain(text: str, pos: int, nodes: List[InlineElement]) -> int:
    # The first character is always consumed, so a lone "~" or "<" is plain text.
    end = pos + 1
    while end < len(text) and text[end] not in SPECIAL_CHARS:
        end += 1
    nodes.append(PlainText(text[pos:end]))
    return end

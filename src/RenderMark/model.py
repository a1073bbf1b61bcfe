from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Block:
    """Base class for block-level nodes."""


@dataclass(frozen=True)
class InlineElement:
    """Base class for inline nodes."""


DocumentNode = Union[Block, InlineElement]


@dataclass(frozen=True)
class Document:
    blocks: Tuple[Block, ...]


@dataclass(frozen=True)
class Paragraph(Block):
    children: Tuple[InlineElement, ...]


@dataclass(frozen=True)
class BlockQuote(Block):
    children: Tuple[Block, ...]


@dataclass(frozen=True)
class Header(Block):
    level: int
    text: str
    id: str

    def __post_init__(self) -> None:
        if not 1 <= self.level <= 6:
            raise ValueError(f"Header level must be between 1 and 6, got {self.level}")


@dataclass(frozen=True)
class HorizontalRule(Block):
    """Horizontal rule / thematic break."""


@dataclass(frozen=True)
class UnorderedList(Block):
    items: Tuple[str, ...]


@dataclass(frozen=True)
class OrderedList(Block):
    items: Tuple[str, ...]


@dataclass(frozen=True)
class CodeBlock(Block):
    text: str


@dataclass(frozen=True)
class PlainText(InlineElement):
    text: str


@dataclass(frozen=True)
class LineBreak(InlineElement):
    """Explicit hard break inside a paragraph."""


@dataclass(frozen=True)
class Bold(InlineElement):
    text: str


@dataclass(frozen=True)
class Italic(InlineElement):
    text: str


@dataclass(frozen=True)
class BoldItalic(InlineElement):
    text: str


@dataclass(frozen=True)
class Strikethrough(InlineElement):
    text: str


@dataclass(frozen=True)
class Underlined(InlineElement):
    text: str


@dataclass(frozen=True)
class Link(InlineElement):
    text: str
    url: str


@dataclass(frozen=True)
class Image(InlineElement):
    alt: str
    url: str
    title: str = ""


@dataclass(frozen=True)
class InlineCode(InlineElement):
    text: str

from __future__ import annotations

from typing import Iterable

from markdown_it.common.utils import escapeHtml

from . import markdown_parser
from .errors import RenderError
from .model import (
    Block,
    BlockQuote,
    Bold,
    BoldItalic,
    CodeBlock,
    Document,
    DocumentNode,
    Header,
    HorizontalRule,
    Image,
    InlineCode,
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

_SIMPLE_INLINE_TAGS = {
    Bold: ("<strong>", "</strong>"),
    Italic: ("<em>", "</em>"),
    BoldItalic: ("<strong><em>", "</em></strong>"),
    Strikethrough: ("<s>", "</s>"),
    Underlined: ("<u>", "</u>"),
    InlineCode: ("<code>", "</code>"),
}

_STANDALONE_TEMPLATE = (
    "<!DOCTYPE html>\n"
    "<html>\n"
    "<head>\n"
    '<meta charset="utf-8" />\n'
    "<title>{title}</title>\n"
    "</head>\n"
    "<body>\n"
    "{body}"
    "</body>\n"
    "</html>\n"
)


def markdown_to_html(text: str, standalone: bool = False, title: str | None = None) -> str:
    document = markdown_parser.parse_markdown(text)
    return render_html(document, standalone=standalone, title=title)


def render_html(doc: Document, standalone: bool = False, title: str | None = None) -> str:
    body = render_nodes(doc.blocks)
    if not standalone:
        return body
    page_title = title if title is not None else _first_header_text(doc.blocks)
    return _STANDALONE_TEMPLATE.format(title=escapeHtml(page_title), body=body)


def render_nodes(nodes: Iterable[DocumentNode]) -> str:
    return "".join(render_node(node) for node in nodes)


def render_node(node: DocumentNode) -> str:
    tags = _SIMPLE_INLINE_TAGS.get(type(node))
    if tags is not None:
        opening, closing = tags
        return f"{opening}{escapeHtml(node.text)}{closing}"
    if isinstance(node, PlainText):
        return escapeHtml(node.text)
    if isinstance(node, Paragraph):
        return f"<p>{render_nodes(node.children)}</p>\n"
    if isinstance(node, BlockQuote):
        return f"<blockquote>\n{render_nodes(node.children)}</blockquote>\n"
    if isinstance(node, Header):
        return f'<h{node.level} id="{escapeHtml(node.id)}">{escapeHtml(node.text)}</h{node.level}>\n'
    if isinstance(node, LineBreak):
        return "<br />\n"
    if isinstance(node, HorizontalRule):
        return "<hr />\n"
    if isinstance(node, Link):
        return f'<a href="{escapeHtml(node.url)}">{escapeHtml(node.text)}</a>'
    if isinstance(node, Image):
        title_attr = f' title="{escapeHtml(node.title)}"' if node.title else ""
        return f'<img src="{escapeHtml(node.url)}" alt="{escapeHtml(node.alt)}"{title_attr} />'
    if isinstance(node, UnorderedList):
        return f"<ul>\n{_render_list_items(node.items)}</ul>\n"
    if isinstance(node, OrderedList):
        return f"<ol>\n{_render_list_items(node.items)}</ol>\n"
    if isinstance(node, CodeBlock):
        return f"<pre><code>{escapeHtml(node.text)}</code></pre>\n"
    raise RenderError(node, "HTML")


def _render_list_items(items: Iterable[str]) -> str:
    return "".join(f"  <li>{escapeHtml(item)}</li>\n" for item in items)


def _first_header_text(blocks: Iterable[Block]) -> str:
    for block in blocks:
        if isinstance(block, Header):
            return block.text
    return ""

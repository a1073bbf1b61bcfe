import pytest

from RenderMark.errors import RenderError
from RenderMark.model import (
    CodeBlock,
    Document,
    Image,
    InlineCode,
    Link,
    OrderedList,
    Paragraph,
    PlainText,
    UnorderedList,
)
from RenderMark.renderer_html import markdown_to_html, render_html, render_node
from RenderMark.utils import make_header_id


def test_header_carries_hash_id():
    assert markdown_to_html("# Title #") == f'<h1 id="{make_header_id("Title")}">Title</h1>\n'


def test_paragraph_with_decorations():
    html = markdown_to_html("Hello **world**, *it* ***both*** ~~old~~ <u>under</u>")
    assert html == (
        "<p>Hello <strong>world</strong>, <em>it</em> <strong><em>both</em></strong> "
        "<s>old</s> <u>under</u></p>\n"
    )


def test_text_is_escaped_by_renderer():
    assert markdown_to_html('a & b < c "d"') == "<p>a &amp; b &lt; c &quot;d&quot;</p>\n"


def test_blockquote_and_rule():
    html = markdown_to_html("> outer\n>> inner\n\n---")
    assert html == (
        "<blockquote>\n<p>outer</p>\n<blockquote>\n<p>inner</p>\n</blockquote>\n</blockquote>\n"
        "<hr />\n"
    )


def test_line_breaks():
    assert markdown_to_html("a  \nb<br>c") == "<p>a<br />\nb<br />\nc</p>\n"


def test_extension_nodes():
    assert render_node(Link("x &", "http://e.com/?a=1&b=2")) == '<a href="http://e.com/?a=1&amp;b=2">x &amp;</a>'
    assert render_node(Image("alt", "img.png")) == '<img src="img.png" alt="alt" />'
    assert render_node(Image("alt", "img.png", "T")) == '<img src="img.png" alt="alt" title="T" />'
    assert render_node(UnorderedList(("a", "b<"))) == "<ul>\n  <li>a</li>\n  <li>b&lt;</li>\n</ul>\n"
    assert render_node(OrderedList(("one",))) == "<ol>\n  <li>one</li>\n</ol>\n"
    assert render_node(CodeBlock("x < y")) == "<pre><code>x &lt; y</code></pre>\n"
    assert render_node(InlineCode("a&b")) == "<code>a&amp;b</code>"


def test_standalone_document_uses_first_header_as_title():
    html = markdown_to_html("Intro\n\n## Section & More", standalone=True)
    assert html.startswith("<!DOCTYPE html>\n")
    assert "<title>Section &amp; More</title>" in html
    assert "<body>\n<p>Intro</p>\n" in html
    assert html.endswith("</body>\n</html>\n")


def test_standalone_explicit_title():
    doc = Document(blocks=(Paragraph((PlainText("x"),)),))
    html = render_html(doc, standalone=True, title="Report")
    assert "<title>Report</title>" in html


def test_unknown_node_raises():
    with pytest.raises(RenderError):
        render_node(object())

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the HTML renderer."""

from io import BytesIO, StringIO

import pytest

from markbook.ast import (
    Blockquote,
    Bold,
    BulletList,
    CodeBlock,
    Document,
    Heading,
    Image,
    InlineCode,
    Italic,
    LineBreak,
    Link,
    ListItem,
    OrderedList,
    Paragraph,
    Strikethrough,
    Text,
)
from markbook.exceptions import InvalidOptionsError, OutputWriteError
from markbook.options import ChatRendererOptions, HtmlRendererOptions
from markbook.renderers.html import HtmlRenderer, escape_html


def render(*children, **option_kwargs) -> str:
    """Render a document built from ``children``."""
    return HtmlRenderer(HtmlRendererOptions(**option_kwargs)).render_to_string(Document(children=children))


@pytest.mark.unit
class TestEscaping:
    """Test entity escaping."""

    def test_escape_order(self) -> None:
        """Ampersand is escaped once, before the other entities."""
        assert escape_html("<script>&") == "&lt;script&gt;&amp;"

    def test_all_five_entities(self) -> None:
        """Exactly the five special characters are replaced."""
        assert escape_html("& < > \" ' x") == "&amp; &lt; &gt; &quot; &#39; x"

    def test_escaping_disabled(self) -> None:
        """Disabled escaping returns the text unchanged."""
        assert escape_html("<b>", enabled=False) == "<b>"

    def test_text_is_escaped(self) -> None:
        """Text leaves are escaped in rendered output."""
        assert render(Paragraph(children=(Text("<script>&"),))) == "<p>&lt;script&gt;&amp;</p>"

    def test_attributes_are_escaped(self) -> None:
        """Link urls and image alt text are escaped."""
        output = render(Paragraph(children=(Link(text="x", url='a"b'), Image(alt_text="<i>", url="p.png"))))
        assert output == '<p><a href="a&quot;b">x</a><img src="p.png" alt="&lt;i&gt;"></p>'

    def test_escape_option_off(self) -> None:
        """With escaping off text passes through."""
        assert render(Paragraph(children=(Text("<b>"),)), escape_html=False) == "<p><b></p>"


@pytest.mark.unit
class TestBlocks:
    """Test block rendering."""

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_heading(self, level: int) -> None:
        """Headings use the level-sized tag."""
        assert render(Heading(level=level, text="T")) == f"<h{level}>T</h{level}>"

    def test_empty_paragraph_omitted(self) -> None:
        """Blank paragraphs render to the empty string."""
        assert render(Paragraph(children=(Text("   "),))) == ""
        assert render(Paragraph()) == ""

    def test_document_joins_with_newline(self) -> None:
        """Blocks are separated by newlines."""
        assert render(Heading(level=1, text="A"), Paragraph(children=(Text("b"),))) == "<h1>A</h1>\n<p>b</p>"

    def test_code_block_with_language(self) -> None:
        """Code blocks carry a language class."""
        assert render(CodeBlock(code="x < 1", language="py")) == '<pre><code class="language-py">x &lt; 1</code></pre>'

    def test_code_block_without_language(self) -> None:
        """No class attribute without a language."""
        assert render(CodeBlock(code="x")) == "<pre><code>x</code></pre>"

    def test_language_class_prefix(self) -> None:
        """The class prefix is configurable."""
        output = render(CodeBlock(code="x", language="py"), language_class_prefix="lang-")
        assert output == '<pre><code class="lang-py">x</code></pre>'

    def test_blockquote(self) -> None:
        """Blockquotes wrap their text."""
        assert render(Blockquote(text="q")) == "<blockquote>q</blockquote>"

    def test_bullet_list(self) -> None:
        """One li per line inside ul."""
        items = (ListItem(children=(Text("a"),)), ListItem(children=(Text("b"),)))
        assert render(BulletList(items=items)) == "<ul>\n<li>a</li>\n<li>b</li>\n</ul>"

    def test_ordered_list(self) -> None:
        """Ordered lists use ol."""
        assert render(OrderedList(items=(ListItem(children=(Text("a"),)),))) == "<ol>\n<li>a</li>\n</ol>"

    def test_empty_list(self) -> None:
        """A list with no items still renders its tags."""
        assert render(BulletList()) == "<ul>\n</ul>"

    def test_line_break(self) -> None:
        """Line breaks render as br."""
        assert render(LineBreak()) == "<br>"

    def test_empty_document(self) -> None:
        """An empty document renders to the empty string."""
        assert render() == ""


@pytest.mark.unit
class TestInline:
    """Test inline rendering."""

    def test_nested_emphasis(self) -> None:
        """Spans nest recursively."""
        para = Paragraph(children=(Bold(children=(Italic(children=(Strikethrough(children=(Text("x"),)),)),)),))
        assert render(para) == "<p><strong><em><del>x</del></em></strong></p>"

    def test_inline_code(self) -> None:
        """Inline code is escaped inside code tags."""
        assert render(Paragraph(children=(InlineCode(code="a&b"),))) == "<p><code>a&amp;b</code></p>"


@pytest.mark.unit
class TestStandaloneAndOutput:
    """Test standalone documents and writing output."""

    def test_standalone_document(self) -> None:
        """Standalone output is a complete HTML5 document."""
        output = render(Heading(level=1, text="A"), standalone=True, title="My <Book>")
        assert output.startswith("<!DOCTYPE html>\n<html lang=\"en\">")
        assert "<title>My &lt;Book&gt;</title>" in output
        assert "<body>\n<h1>A</h1>\n</body>" in output

    def test_wrong_options_type(self) -> None:
        """Options for another renderer are rejected."""
        with pytest.raises(InvalidOptionsError):
            HtmlRenderer(ChatRendererOptions())  # type: ignore[arg-type]

    def test_render_to_text_stream(self) -> None:
        """render writes to text streams."""
        buffer = StringIO()
        HtmlRenderer().render(Document(children=(Heading(level=1, text="A"),)), buffer)
        assert buffer.getvalue() == "<h1>A</h1>"

    def test_render_to_binary_stream(self) -> None:
        """render encodes UTF-8 for binary streams."""
        buffer = BytesIO()
        HtmlRenderer().render(Document(children=(Paragraph(children=(Text("é"),)),)), buffer)
        assert buffer.getvalue() == "<p>é</p>".encode("utf-8")

    def test_render_to_path(self, tmp_path) -> None:
        """render writes files as UTF-8."""
        target = tmp_path / "out.html"
        HtmlRenderer().render(Document(children=(Heading(level=1, text="A"),)), target)
        assert target.read_text(encoding="utf-8") == "<h1>A</h1>"

    def test_render_to_missing_directory(self, tmp_path) -> None:
        """Unwritable paths raise OutputWriteError."""
        with pytest.raises(OutputWriteError):
            HtmlRenderer().render(Document(), tmp_path / "missing" / "out.html")

    def test_render_to_unsupported_output(self) -> None:
        """Objects without write are rejected."""
        with pytest.raises(TypeError):
            HtmlRenderer().render(Document(), 42)  # type: ignore[arg-type]

"""Property-based tests for the renderers using Hypothesis.

These tests verify invariants that should hold for any token stream:
1. Escaping is lossless for both output formats
2. Inline HTML never carries block structure
3. Line numbering depends only on the options and the line count
4. Rendering is deterministic
"""

import html
import re

from hypothesis import given, settings
from hypothesis import strategies as st

from tinta.config import FormatOption, NumberFrom
from tinta.renderers.html import format_as_html
from tinta.renderers.latex import COMMANDCHARS, format_as_latex
from tinta.tokens import Token, TokenType
from tinta.utils.text import escape_html, escape_latex, unescape_latex

# Source text never contains a line terminator
line_text = st.text(alphabet=st.characters(exclude_characters="\n\r"), max_size=40)
tokens = st.builds(Token, st.sampled_from(list(TokenType)), line_text)
normal_tokens = st.builds(Token, st.just(TokenType.NORMAL), line_text)
lines = st.lists(st.lists(tokens, max_size=6), max_size=8)
normal_lines = st.lists(st.lists(normal_tokens, max_size=6), max_size=8)
flags = st.lists(st.sampled_from(list(FormatOption)), max_size=4)


class TestEscapingProperties:
    """Round trips through the escapers."""

    @given(st.text())
    def test_html_escape_round_trip(self, text: str) -> None:
        assert html.unescape(escape_html(text)) == text

    @given(st.text())
    def test_html_escape_removes_markup_chars(self, text: str) -> None:
        escaped = escape_html(text)
        assert "<" not in escaped
        assert ">" not in escaped
        assert '"' not in escaped

    @given(st.text())
    def test_latex_escape_round_trip(self, text: str) -> None:
        assert unescape_latex(escape_latex(text)) == text

    @given(st.text())
    def test_latex_escape_leaves_no_bare_braces(self, text: str) -> None:
        escaped = escape_latex(text)
        stripped = escaped.replace("\\textbackslash{}", "").replace("\\{", "").replace("\\}", "")
        assert "{" not in stripped
        assert "}" not in stripped
        assert "\\" not in stripped


class TestNormalTextProperties:
    """NORMAL-only input comes back verbatim after unescaping."""

    @given(normal_lines)
    @settings(max_examples=100)
    def test_html_inline_recovers_text(self, doc: list[list[Token]]) -> None:
        out = format_as_html([FormatOption.INLINE], "x", doc)
        inner = out.removeprefix('<code class="sourceCode x">').removesuffix("</code>")
        expected = "\n".join("".join(t.text for t in line) for line in doc)
        assert html.unescape(inner) == expected

    @given(normal_lines)
    @settings(max_examples=100)
    def test_latex_recovers_text(self, doc: list[list[Token]]) -> None:
        out = format_as_latex([], "", doc)
        head = f"\\begin{{Verbatim}}[{COMMANDCHARS}]\n"
        inner = out.removeprefix(head).removesuffix("\\end{Verbatim}")
        expected = "".join("".join(t.text for t in line) + "\n" for line in doc)
        assert unescape_latex(inner) == expected


class TestLayoutProperties:
    """Structure depends only on options and line count."""

    @given(lines, flags)
    @settings(max_examples=100)
    def test_inline_html_has_no_block_structure(
        self, doc: list[list[Token]], opts: list[FormatOption]
    ) -> None:
        out = format_as_html([*opts, FormatOption.INLINE], "x", doc)
        assert out.startswith("<code ")
        assert out.endswith("</code>")
        assert "<pre" not in out
        assert "<table" not in out

    @given(lines, st.integers(min_value=-1000, max_value=100_000), st.booleans())
    @settings(max_examples=100)
    def test_html_gutter_numbers(self, doc: list[list[Token]], start: int, anchors: bool) -> None:
        opts = [FormatOption.NUMBER_LINES, NumberFrom(start)]
        if anchors:
            opts.append(FormatOption.LINE_ANCHORS)
        out = format_as_html(opts, "x", doc)
        gutter = re.search(r'<td class="lineNumbers"[^>]*><pre>(.*?)</pre></td>', out, re.DOTALL)
        assert gutter is not None
        entries = gutter.group(1).split("\n")
        assert entries[-1] == ""
        entries = entries[:-1]
        expected = [str(n) for n in range(start, start + len(doc))]
        if anchors:
            assert entries == [f'<a id="{n}">{n}</a>' for n in expected]
        else:
            assert entries == expected

    @given(lines, st.integers(min_value=-1000, max_value=100_000))
    @settings(max_examples=100)
    def test_latex_firstnumber(self, doc: list[list[Token]], start: int) -> None:
        out = format_as_latex([FormatOption.NUMBER_LINES, NumberFrom(start)], "", doc)
        header = out.split("\n", 1)[0]
        if start == 1:
            assert header == f"\\begin{{Verbatim}}[numbers=left,{COMMANDCHARS}]"
        else:
            assert header == (
                f"\\begin{{Verbatim}}[numbers=left,firstnumber={start},{COMMANDCHARS}]"
            )

    @given(lines, flags)
    @settings(max_examples=50)
    def test_deterministic(self, doc: list[list[Token]], opts: list[FormatOption]) -> None:
        assert format_as_html(opts, "x", doc) == format_as_html(opts, "x", doc)
        assert format_as_latex(opts, "x", doc) == format_as_latex(opts, "x", doc)

    @given(lines)
    @settings(max_examples=50)
    def test_latex_one_newline_per_line(self, doc: list[list[Token]]) -> None:
        out = format_as_latex([FormatOption.INLINE], "", doc)
        assert out.count("\n") == len(doc)

"""Tests for HtmlRenderer."""

from __future__ import annotations

import re

import pytest

from tinta.config import FormatConfig, FormatOption, NumberFrom
from tinta.errors import InvalidTokenError
from tinta.renderers.html import HtmlRenderer, format_as_html
from tinta.tokens import Token, TokenType

IF_X = [Token(TokenType.KEYWORD, "if"), Token(TokenType.NORMAL, " "), Token(TokenType.NORMAL, "x")]

GUTTER_OPEN = (
    '<td class="lineNumbers" title="Click to toggle line numbers"'
    " onclick=\"with (this.firstChild.style) { display = (display == &#x27;&#x27;)"
    ' ? &#x27;none&#x27; : &#x27;&#x27; }">'
)


def _gutter_numbers(html: str) -> list[str]:
    match = re.search(r'<td class="lineNumbers"[^>]*><pre>(.*?)</pre></td>', html, re.DOTALL)
    assert match is not None
    return match.group(1).splitlines()


class TestTokens:
    """Per-token markup."""

    def test_keyword_then_normal(self) -> None:
        html = format_as_html([], "haskell", [IF_X])
        assert html == (
            '<pre class="sourceCode"><code class="sourceCode haskell">'
            '<span class="kw">if</span> x</code></pre>'
        )

    def test_normal_is_unwrapped(self) -> None:
        html = format_as_html([FormatOption.INLINE], "c", [[Token(TokenType.NORMAL, "a b")]])
        assert html == '<code class="sourceCode c">a b</code>'

    @pytest.mark.parametrize("token_type", [t for t in TokenType if t is not TokenType.NORMAL])
    def test_every_category_uses_short_code(self, token_type: TokenType) -> None:
        html = format_as_html([FormatOption.INLINE], "c", [[Token(token_type, "t")]])
        assert f'<span class="{token_type.short}">t</span>' in html

    def test_escaping(self) -> None:
        line = [
            Token(TokenType.STRING, "\"<a href='x'>&</a>\""),
            Token(TokenType.NORMAL, " < & >"),
        ]
        html = format_as_html([FormatOption.INLINE], "html", [line])
        assert html == (
            '<code class="sourceCode html"><span class="st">'
            "&quot;&lt;a href=&#x27;x&#x27;&gt;&amp;&lt;/a&gt;&quot;</span>"
            " &lt; &amp; &gt;</code>"
        )

    def test_language_is_escaped(self) -> None:
        html = format_as_html([FormatOption.INLINE], 'a"b', [])
        assert html == '<code class="sourceCode a&quot;b"></code>'

    def test_empty_language(self) -> None:
        html = format_as_html([FormatOption.INLINE], "", [IF_X])
        assert html.startswith('<code class="sourceCode ">')

    def test_title_attributes(self) -> None:
        html = format_as_html(
            [FormatOption.TITLE_ATTRIBUTES, FormatOption.INLINE], "c", [IF_X]
        )
        assert '<span class="kw" title="KeywordTok">if</span> x' in html

    def test_title_attributes_skip_normal(self) -> None:
        html = format_as_html([FormatOption.TITLE_ATTRIBUTES], "c", [IF_X])
        assert "NormalTok" not in html

    def test_empty_token_text(self) -> None:
        html = format_as_html([FormatOption.INLINE], "c", [[Token(TokenType.COMMENT, "")]])
        assert html == '<code class="sourceCode c"><span class="co"></span></code>'

    def test_tuple_tokens(self) -> None:
        html = format_as_html([FormatOption.INLINE], "c", [[(TokenType.KEYWORD, "if")]])
        assert '<span class="kw">if</span>' in html

    def test_invalid_category(self) -> None:
        with pytest.raises(InvalidTokenError):
            format_as_html([], "c", [[("kw", "if")]])  # type: ignore[list-item]


class TestLines:
    """Joining lines."""

    def test_lines_joined_by_newline(self) -> None:
        lines = [
            [Token(TokenType.NORMAL, "a")],
            [],
            [Token(TokenType.NORMAL, "b")],
        ]
        html = format_as_html([FormatOption.INLINE], "c", lines)
        assert html == '<code class="sourceCode c">a\n\nb</code>'

    def test_no_trailing_newline(self) -> None:
        html = format_as_html([], "c", [IF_X, IF_X])
        assert html.endswith("x</code></pre>")

    def test_empty_document(self) -> None:
        assert format_as_html([], "c", []) == (
            '<pre class="sourceCode"><code class="sourceCode c"></code></pre>'
        )


class TestLayout:
    """Inline, block, and numbered layouts."""

    def test_inline_has_no_block_structure(self) -> None:
        html = format_as_html([FormatOption.INLINE, FormatOption.NUMBER_LINES], "c", [IF_X])
        assert html.startswith("<code")
        assert "<pre" not in html
        assert "<table" not in html

    def test_block_without_numbers(self) -> None:
        html = format_as_html([], "c", [IF_X])
        assert html.startswith('<pre class="sourceCode"><code')
        assert "<table" not in html

    def test_numbered(self) -> None:
        lines = [[Token(TokenType.NORMAL, "a")], [Token(TokenType.NORMAL, "b")]]
        html = format_as_html([FormatOption.NUMBER_LINES], "c", lines)
        assert html == (
            '<table class="sourceCode"><tr class="sourceCode">'
            + GUTTER_OPEN
            + "<pre>1\n2\n</pre></td>"
            '<td class="sourceCode"><pre class="sourceCode">'
            '<code class="sourceCode c">a\nb</code></pre></td></tr></table>'
        )

    def test_numbered_from(self) -> None:
        lines = [[Token(TokenType.NORMAL, "x")]] * 3
        html = format_as_html([FormatOption.NUMBER_LINES, NumberFrom(41)], "c", lines)
        assert _gutter_numbers(html) == ["41", "42", "43"]

    def test_first_number_from_wins(self) -> None:
        lines = [[Token(TokenType.NORMAL, "x")]] * 2
        html = format_as_html(
            [NumberFrom(5), FormatOption.NUMBER_LINES, NumberFrom(100)], "c", lines
        )
        assert _gutter_numbers(html) == ["5", "6"]

    def test_anchors(self) -> None:
        lines = [[Token(TokenType.NORMAL, "x")]] * 2
        html = format_as_html(
            [FormatOption.NUMBER_LINES, FormatOption.LINE_ANCHORS, NumberFrom(9)], "c", lines
        )
        assert '<pre><a id="9">9</a>\n<a id="10">10</a>\n</pre>' in html

    def test_anchors_without_numbering_do_nothing(self) -> None:
        html = format_as_html([FormatOption.LINE_ANCHORS], "c", [IF_X])
        assert "<a " not in html
        assert html == format_as_html([], "c", [IF_X])

    def test_numbered_empty_document(self) -> None:
        html = format_as_html([FormatOption.NUMBER_LINES], "c", [])
        assert "<pre></pre></td>" in html
        assert '<code class="sourceCode c"></code>' in html


class TestHtmlRenderer:
    """The class-based API."""

    def test_reusable(self) -> None:
        renderer = HtmlRenderer([FormatOption.INLINE])
        first = renderer.render([IF_X], "c")
        second = renderer.render([IF_X], "c")
        assert first == second

    def test_numbering_is_per_call(self) -> None:
        renderer = HtmlRenderer([FormatOption.NUMBER_LINES])
        renderer.render([IF_X] * 5, "c")
        assert _gutter_numbers(renderer.render([IF_X], "c")) == ["1"]

    def test_accepts_config(self) -> None:
        config = FormatConfig(inline=True)
        renderer = HtmlRenderer(config)
        assert renderer.config is config
        assert renderer.render([IF_X]) == (
            '<code class="sourceCode "><span class="kw">if</span> x</code>'
        )

    def test_default_options(self) -> None:
        assert HtmlRenderer().config == FormatConfig()

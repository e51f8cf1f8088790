"""HTML renderer using StringBuilder pattern.

Renders tokenized source lines to an HTML fragment. Each non-NORMAL
token becomes ``<span class="xx">`` where ``xx`` is the category's short
code; NORMAL text is emitted escaped and unwrapped. Lines are joined by
``\\n`` inside a single ``<code class="sourceCode LANG">``.

Layouts:
- inline: the ``<code>`` element alone
- numbered: ``table.sourceCode`` with a ``td.lineNumbers`` gutter and a
  ``td.sourceCode`` cell holding ``<pre class="sourceCode"><code>``
- otherwise: ``<pre class="sourceCode"><code>``

Thread Safety:
The renderer holds only its frozen FormatConfig. Each render() call
builds output in a local StringBuilder, so a single HtmlRenderer can be
shared across threads.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from tinta.config import FormatConfig, Option, resolve_options
from tinta.stringbuilder import StringBuilder
from tinta.tokens import SourceLine, TokenType, as_token
from tinta.utils.logger import get_logger
from tinta.utils.text import escape_html

logger = get_logger(__name__)

CODE_CLASS = "sourceCode"

_TOGGLE_TITLE = "Click to toggle line numbers"
_TOGGLE_SCRIPT = "with (this.firstChild.style) { display = (display == '') ? 'none' : '' }"


class HtmlRenderer:
    """Render tokenized lines to HTML.

    Usage:
        >>> from tinta.tokens import Token, TokenType
        >>> renderer = HtmlRenderer()
        >>> renderer.render([[Token(TokenType.KEYWORD, "if"), Token(TokenType.NORMAL, " x")]], "c")
        '<pre class="sourceCode"><code class="sourceCode c"><span class="kw">if</span> x</code></pre>'

    Thread Safety:
        Multiple threads can safely share a single HtmlRenderer instance.
    """

    __slots__ = ("_config",)

    def __init__(self, options: FormatConfig | Iterable[Option] | None = None) -> None:
        """Initialize renderer.

        Args:
            options: FormatConfig or option collection (None = defaults)
        """
        self._config = resolve_options(options)

    @property
    def config(self) -> FormatConfig:
        """The resolved options."""
        return self._config

    def render(self, lines: Sequence[SourceLine], language: str = "") -> str:
        """Render source lines to an HTML fragment.

        Args:
            lines: Tokenized lines, top to bottom
            language: Language name, added as a class on ``<code>``

        Returns:
            HTML string

        Raises:
            InvalidTokenError: If a token's category is not a TokenType
        """
        cfg = self._config
        logger.debug(
            "Rendering %d lines as HTML (language=%r, config=%r)", len(lines), language, cfg
        )

        code = StringBuilder()
        self._render_code(lines, language, code)

        if cfg.inline:
            return code.build()

        sb = StringBuilder()
        if cfg.number_lines:
            sb.append(f'<table class="{CODE_CLASS}"><tr class="{CODE_CLASS}">')
            self._render_line_numbers(len(lines), sb)
            sb.append(f'<td class="{CODE_CLASS}">')
            sb.append(f'<pre class="{CODE_CLASS}">').append(code.build()).append("</pre>")
            sb.append("</td></tr></table>")
        else:
            sb.append(f'<pre class="{CODE_CLASS}">').append(code.build()).append("</pre>")
        return sb.build()

    # =========================================================================
    # Code container
    # =========================================================================

    def _render_code(self, lines: Sequence[SourceLine], language: str, sb: StringBuilder) -> None:
        """Render ``<code>`` with lines joined by newlines."""
        classes = " ".join((CODE_CLASS, language))
        sb.append(f'<code class="{escape_html(classes)}">')
        for i, line in enumerate(lines):
            if i:
                sb.append("\n")
            self._render_line(line, sb)
        sb.append("</code>")

    def _render_line(self, line: SourceLine, sb: StringBuilder) -> None:
        """Render the tokens of one line, no separator."""
        for item in line:
            token = as_token(item)
            text = escape_html(token.text)
            if token.type is TokenType.NORMAL:
                sb.append(text)
                continue
            sb.append(f'<span class="{token.type.short}"')
            if self._config.title_attributes:
                sb.append(f' title="{token.type.title}"')
            sb.append(">").append(text).append("</span>")

    # =========================================================================
    # Line-number gutter
    # =========================================================================

    def _render_line_numbers(self, count: int, sb: StringBuilder) -> None:
        """Render the ``td.lineNumbers`` cell, one number per line."""
        cfg = self._config
        sb.append(
            f'<td class="lineNumbers" title="{escape_html(_TOGGLE_TITLE)}"'
            f' onclick="{escape_html(_TOGGLE_SCRIPT)}">'
        )
        sb.append("<pre>")
        for n in range(cfg.number_from, cfg.number_from + count):
            number = str(n)
            if cfg.line_anchors:
                sb.append(f'<a id="{number}">{number}</a>')
            else:
                sb.append(number)
            sb.append("\n")
        sb.append("</pre></td>")


def format_as_html(
    options: FormatConfig | Iterable[Option] | None,
    language: str,
    lines: Sequence[SourceLine],
) -> str:
    """Format a list of tokenized source lines as HTML.

    Args:
        options: FormatConfig or option collection
        language: Language name
        lines: Source lines to format

    Returns:
        HTML string
    """
    return HtmlRenderer(options).render(lines, language)

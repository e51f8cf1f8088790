"""LaTeX renderer for fancyvrb.

Renders tokenized source lines as a ``Verbatim`` environment (or an
inline ``\\Verb``) declared with ``commandchars=\\\\\\{\\}``, so that
``\\kw{...}``-style macros inside the listing are expanded. The macros
themselves come from :func:`tinta.stylesheet.highlighting_latex_macros`.

Every line, including the last, is followed by a newline.

Thread Safety:
Stateless apart from the frozen FormatConfig; safe to share.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from tinta.config import FormatConfig, Option, resolve_options
from tinta.stringbuilder import StringBuilder
from tinta.tokens import SourceLine, TokenType, as_token
from tinta.utils.logger import get_logger
from tinta.utils.text import escape_latex

logger = get_logger(__name__)

COMMANDCHARS = r"commandchars=\\\{\}"


class LatexRenderer:
    """Render tokenized lines to LaTeX.

    Usage:
        >>> from tinta.tokens import Token, TokenType
        >>> print(LatexRenderer().render([[Token(TokenType.KEYWORD, "if"), Token(TokenType.NORMAL, " x")]]))
        \\begin{Verbatim}[commandchars=\\\\\\{\\}]
        \\kw{if} x
        \\end{Verbatim}

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
        """Render source lines to LaTeX source.

        Args:
            lines: Tokenized lines, top to bottom
            language: Accepted for symmetry with HtmlRenderer; unused

        Returns:
            LaTeX string

        Raises:
            InvalidTokenError: If a token's category is not a TokenType
        """
        cfg = self._config
        logger.debug("Rendering %d lines as LaTeX (config=%r)", len(lines), cfg)

        sb = StringBuilder()
        if cfg.inline:
            sb.append(f"\\Verb[{COMMANDCHARS}]{{")
            self._render_lines(lines, sb)
            sb.append("}")
            return sb.build()

        sb.append("\\begin{Verbatim}[").append(self._verbatim_options()).append("]\n")
        self._render_lines(lines, sb)
        sb.append("\\end{Verbatim}")
        return sb.build()

    def _verbatim_options(self) -> str:
        """Bracket options for the Verbatim environment."""
        cfg = self._config
        parts: list[str] = []
        if cfg.number_lines:
            parts.append("numbers=left,")
            if cfg.number_from != 1:
                parts.append(f"firstnumber={cfg.number_from},")
        parts.append(COMMANDCHARS)
        return "".join(parts)

    def _render_lines(self, lines: Sequence[SourceLine], sb: StringBuilder) -> None:
        for line in lines:
            for item in line:
                token = as_token(item)
                text = escape_latex(token.text)
                if token.type is TokenType.NORMAL:
                    sb.append(text)
                else:
                    sb.append(f"\\{token.type.short}{{").append(text).append("}")
            sb.append_line()


def format_as_latex(
    options: FormatConfig | Iterable[Option] | None,
    language: str,
    lines: Sequence[SourceLine],
) -> str:
    """Format a list of tokenized source lines as LaTeX.

    Args:
        options: FormatConfig or option collection
        language: Not used; kept parallel with format_as_html
        lines: Source lines to format

    Returns:
        LaTeX string
    """
    return LatexRenderer(options).render(lines, language)

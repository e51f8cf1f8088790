"""
Tinta — HTML and LaTeX output for tokenized source code.

Tinta is the back half of a syntax highlighter: given source lines that a
lexer has already split into classified tokens, it renders an HTML
fragment or a LaTeX listing, and derives matching CSS or LaTeX macros
from a color theme. Zero runtime dependencies.

Quick Start:
    >>> from tinta import Token, TokenType, format_as_html, highlighting_css, get_theme
    >>> line = [Token(TokenType.KEYWORD, "if"), Token(TokenType.NORMAL, " x")]
    >>> format_as_html([], "python", [line])
    '<pre class="sourceCode"><code class="sourceCode python"><span class="kw">if</span> x</code></pre>'
    >>> css = highlighting_css(get_theme("tango"))

    >>> # Options
    >>> from tinta import FormatOption, NumberFrom, format_as_latex
    >>> latex = format_as_latex([FormatOption.NUMBER_LINES, NumberFrom(10)], "python", [line])
"""

from tinta.color import Color, parse_color, to_hex_color, to_normalized_rgb
from tinta.config import DEFAULT_CONFIG, FormatConfig, FormatOption, NumberFrom, resolve_options
from tinta.errors import (
    ColorError,
    FormatOptionError,
    InvalidTokenError,
    RenderError,
    ThemeError,
    TintaError,
    UnknownThemeError,
)
from tinta.renderers.html import HtmlRenderer, format_as_html
from tinta.renderers.latex import LatexRenderer, format_as_latex
from tinta.renderers.protocol import SourceRenderer
from tinta.serialization import theme_from_dict, theme_from_json, theme_to_dict, theme_to_json
from tinta.stylesheet import (
    default_highlighting_css,
    default_latex_macros,
    highlighting_css,
    highlighting_latex_macros,
)
from tinta.theme import Theme, TokenStyle
from tinta.themes import (
    BUILTIN_THEMES,
    DEFAULT_THEME,
    ESPRESSO,
    KATE,
    PYGMENTS,
    TANGO,
    get_theme,
    theme_names,
)
from tinta.tokens import SourceLine, Token, TokenType, short_code

__version__ = "0.1.0"


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Tokens
    "SourceLine",
    "Token",
    "TokenType",
    "short_code",
    # Colors
    "Color",
    "parse_color",
    "to_hex_color",
    "to_normalized_rgb",
    # Themes
    "Theme",
    "TokenStyle",
    "BUILTIN_THEMES",
    "DEFAULT_THEME",
    "ESPRESSO",
    "KATE",
    "PYGMENTS",
    "TANGO",
    "get_theme",
    "theme_names",
    # Options
    "DEFAULT_CONFIG",
    "FormatConfig",
    "FormatOption",
    "NumberFrom",
    "resolve_options",
    # Renderers
    "HtmlRenderer",
    "LatexRenderer",
    "SourceRenderer",
    "format_as_html",
    "format_as_latex",
    # Stylesheets
    "default_highlighting_css",
    "default_latex_macros",
    "highlighting_css",
    "highlighting_latex_macros",
    # Serialization
    "theme_from_dict",
    "theme_from_json",
    "theme_to_dict",
    "theme_to_json",
    # Errors
    "ColorError",
    "FormatOptionError",
    "InvalidTokenError",
    "RenderError",
    "ThemeError",
    "TintaError",
    "UnknownThemeError",
]

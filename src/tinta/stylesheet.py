"""Stylesheets derived from a Theme.

- :func:`highlighting_css` produces CSS for :class:`~tinta.renderers.html.HtmlRenderer`
  output: an optional ``pre > code`` rule for the document colors, then
  one ``code > span.xx`` rule per styled category.
- :func:`highlighting_latex_macros` produces a LaTeX preamble for
  :class:`~tinta.renderers.latex.LatexRenderer` output: package imports,
  an optional ``shadecolor`` definition, then one ``\\newcommand`` per
  styled category.

Both emit rules in the theme's mapping order, one per line, each line
newline-terminated. Fields a TokenStyle leaves unset produce nothing.

NORMAL tokens are never wrapped by the renderers, so a NORMAL entry in a
theme has no selector or macro to attach to and is skipped.

Example:
    >>> from tinta.themes import KATE
    >>> highlighting_css(KATE).splitlines()[0]
    'code > span.kw { font-weight: bold; }'
"""

from __future__ import annotations

from collections.abc import Callable

from tinta.theme import Theme, TokenStyle
from tinta.themes import DEFAULT_THEME
from tinta.tokens import TokenType
from tinta.utils.logger import get_logger

logger = get_logger(__name__)

LATEX_PACKAGES = (
    "\\usepackage{color}",
    "\\usepackage{framed}",
    "\\usepackage{fancyvrb}",
)


# =============================================================================
# CSS
# =============================================================================


def highlighting_css(theme: Theme) -> str:
    """CSS for a theme.

    Args:
        theme: Theme to convert

    Returns:
        CSS text, one rule per line
    """
    lines = _document_css(theme)
    for token_type, style in theme.token_styles.items():
        if token_type is TokenType.NORMAL:
            logger.debug("Skipping NORMAL style in theme %r", theme.name)
            continue
        lines.append(_token_css(token_type, style))
    return "".join(f"{line}\n" for line in lines)


def _document_css(theme: Theme) -> list[str]:
    """Zero or one ``pre > code`` rule for the document colors."""
    decls = []
    if theme.default_color is not None:
        decls.append(f"color: {theme.default_color.to_hex()}; ")
    if theme.background_color is not None:
        decls.append(f"background-color: {theme.background_color.to_hex()}; ")
    if not decls:
        return []
    return ["pre > code { " + "".join(decls) + "}"]


def _token_css(token_type: TokenType, style: TokenStyle) -> str:
    decls = []
    if style.color is not None:
        decls.append(f"color: {style.color.to_hex()}; ")
    if style.background is not None:
        decls.append(f"background-color: {style.background.to_hex()}; ")
    if style.bold:
        decls.append("font-weight: bold; ")
    if style.italic:
        decls.append("font-style: italic; ")
    if style.underline:
        decls.append("text-decoration: underline; ")
    return f"code > span.{token_type.short} {{ " + "".join(decls) + "}"


# =============================================================================
# LaTeX
# =============================================================================


def highlighting_latex_macros(theme: Theme) -> str:
    """LaTeX preamble for a theme.

    Args:
        theme: Theme to convert

    Returns:
        Preamble text, one declaration per line
    """
    lines = list(LATEX_PACKAGES)
    bg = theme.background_color
    if bg is not None:
        lines.append(f"\\definecolor{{shadecolor}}{{RGB}}{{{bg.red},{bg.green},{bg.blue}}}")
    for token_type, style in theme.token_styles.items():
        if token_type is TokenType.NORMAL:
            logger.debug("Skipping NORMAL style in theme %r", theme.name)
            continue
        lines.append(latex_macro(token_type, style))
    return "".join(f"{line}\n" for line in lines)


def latex_macro(token_type: TokenType, style: TokenStyle) -> str:
    """The ``\\newcommand`` for one category.

    Layers nest in a fixed order regardless of category: underline
    outermost, then italic, bold, background, and foreground innermost.

    Example:
        >>> from tinta.color import Color
        >>> latex_macro(TokenType.ALERT, TokenStyle(color=Color(255, 0, 0), bold=True))
        '\\\\newcommand{\\\\al}[1]{\\\\textbf{\\\\textcolor[rgb]{1.00,0.00,0.00}{{#1}}}}'
    """
    layers: list[Callable[[str], str]] = []
    if style.underline:
        layers.append(lambda x: f"\\underline{{{x}}}")
    if style.italic:
        layers.append(lambda x: f"\\textit{{{x}}}")
    if style.bold:
        layers.append(lambda x: f"\\textbf{{{x}}}")
    if style.background is not None:
        bg = style.background.to_latex_rgb()
        layers.append(lambda x: f"\\colorbox[rgb]{{{bg}}}{{{x}}}")
    if style.color is not None:
        fg = style.color.to_latex_rgb()
        layers.append(lambda x: f"\\textcolor[rgb]{{{fg}}}{{{x}}}")

    body = "{#1}"
    for wrap in reversed(layers):
        body = wrap(body)
    return f"\\newcommand{{\\{token_type.short}}}[1]{{{body}}}"


def default_highlighting_css() -> str:
    """CSS for the default (pygments) theme."""
    return highlighting_css(DEFAULT_THEME)


def default_latex_macros() -> str:
    """LaTeX preamble for the default (pygments) theme."""
    return highlighting_latex_macros(DEFAULT_THEME)


__all__ = [
    "LATEX_PACKAGES",
    "default_highlighting_css",
    "default_latex_macros",
    "highlighting_css",
    "highlighting_latex_macros",
    "latex_macro",
]

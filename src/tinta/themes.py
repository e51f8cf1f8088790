"""Built-in themes and the theme registry.

Themes:
- pygments: loosely based on Pygments' default colors (the default)
- kate: loosely based on Kate's default colors
- tango: loosely based on Pygments' tango colors
- espresso: loosely based on Ultraviolet's espresso_libre (dark)

The palettes are literal data and part of the rendered output; do not
adjust them.

Usage:
    >>> from tinta.themes import get_theme
    >>> get_theme("tango").background_color.to_hex()
    '#f8f8f8'

Thread Safety:
The registry is a read-only mapping built at import time.

"""

from __future__ import annotations

from types import MappingProxyType

from tinta.color import Color
from tinta.errors import UnknownThemeError
from tinta.theme import Theme, TokenStyle
from tinta.tokens import TokenType
from tinta.utils.logger import get_logger

logger = get_logger(__name__)

_hex = Color.from_hex


PYGMENTS = Theme(
    name="pygments",
    token_styles={
        TokenType.KEYWORD: TokenStyle(color=_hex("#007020"), bold=True),
        TokenType.DATA_TYPE: TokenStyle(color=_hex("#902000")),
        TokenType.DEC_VAL: TokenStyle(color=_hex("#40a070")),
        TokenType.BASE_N: TokenStyle(color=_hex("#40a070")),
        TokenType.FLOAT: TokenStyle(color=_hex("#40a070")),
        TokenType.CHAR: TokenStyle(color=_hex("#4070a0")),
        TokenType.STRING: TokenStyle(color=_hex("#4070a0")),
        TokenType.COMMENT: TokenStyle(color=_hex("#60a0b0"), italic=True),
        TokenType.OTHER: TokenStyle(color=_hex("#007020")),
        TokenType.ALERT: TokenStyle(color=_hex("#ff0000"), bold=True),
        TokenType.FUNCTION: TokenStyle(color=_hex("#06287e")),
        TokenType.ERROR: TokenStyle(color=_hex("#ff0000"), bold=True),
    },
)

KATE = Theme(
    name="kate",
    token_styles={
        TokenType.KEYWORD: TokenStyle(bold=True),
        TokenType.DATA_TYPE: TokenStyle(color=_hex("#800000")),
        TokenType.DEC_VAL: TokenStyle(color=_hex("#0000FF")),
        TokenType.BASE_N: TokenStyle(color=_hex("#0000FF")),
        TokenType.FLOAT: TokenStyle(color=_hex("#800080")),
        TokenType.CHAR: TokenStyle(color=_hex("#FF00FF")),
        TokenType.STRING: TokenStyle(color=_hex("#DD0000")),
        TokenType.COMMENT: TokenStyle(color=_hex("#808080"), italic=True),
        TokenType.ALERT: TokenStyle(color=_hex("#00ff00"), bold=True),
        TokenType.FUNCTION: TokenStyle(color=_hex("#000080")),
        TokenType.ERROR: TokenStyle(color=_hex("#ff0000"), bold=True),
    },
)

TANGO = Theme(
    name="tango",
    background_color=_hex("#f8f8f8"),
    token_styles={
        TokenType.KEYWORD: TokenStyle(color=_hex("#204a87"), bold=True),
        TokenType.DATA_TYPE: TokenStyle(color=_hex("#204a87")),
        TokenType.DEC_VAL: TokenStyle(color=_hex("#0000cf")),
        TokenType.BASE_N: TokenStyle(color=_hex("#0000cf")),
        TokenType.FLOAT: TokenStyle(color=_hex("#0000cf")),
        TokenType.CHAR: TokenStyle(color=_hex("#4e9a06")),
        TokenType.STRING: TokenStyle(color=_hex("#4e9a06")),
        TokenType.COMMENT: TokenStyle(color=_hex("#8f5902"), italic=True),
        TokenType.OTHER: TokenStyle(color=_hex("#8f5902")),
        TokenType.ALERT: TokenStyle(color=_hex("#ef2929")),
        TokenType.FUNCTION: TokenStyle(color=_hex("#000000")),
        TokenType.ERROR: TokenStyle(color=_hex("a40000"), bold=True),
    },
)

ESPRESSO = Theme(
    name="espresso",
    default_color=_hex("#BDAE9D"),
    background_color=_hex("#2A211C"),
    token_styles={
        TokenType.KEYWORD: TokenStyle(color=_hex("#43A8ED"), bold=True),
        TokenType.DATA_TYPE: TokenStyle(underline=True),
        TokenType.DEC_VAL: TokenStyle(color=_hex("#44AA43")),
        TokenType.BASE_N: TokenStyle(color=_hex("#44AA43")),
        TokenType.FLOAT: TokenStyle(color=_hex("#44AA43")),
        TokenType.CHAR: TokenStyle(color=_hex("#049B0A")),
        TokenType.STRING: TokenStyle(color=_hex("#049B0A")),
        TokenType.COMMENT: TokenStyle(color=_hex("#0066FF"), italic=True),
        TokenType.ALERT: TokenStyle(color=_hex("#ffff00")),
        TokenType.FUNCTION: TokenStyle(color=_hex("#FF9358"), bold=True),
        TokenType.ERROR: TokenStyle(color=_hex("ffff00"), bold=True),
    },
)

DEFAULT_THEME = PYGMENTS

BUILTIN_THEMES: MappingProxyType[str, Theme] = MappingProxyType(
    {theme.name: theme for theme in (PYGMENTS, KATE, TANGO, ESPRESSO)}
)


def get_theme(name: str) -> Theme:
    """Get a built-in theme by name.

    Args:
        name: Theme name (e.g., "pygments", "espresso"), case-insensitive

    Returns:
        The Theme

    Raises:
        UnknownThemeError: If the name is not registered

    """
    theme = BUILTIN_THEMES.get(name.lower()) if isinstance(name, str) else None
    if theme is None:
        raise UnknownThemeError(name, theme_names())
    logger.debug("Resolved theme %r", theme.name)
    return theme


def theme_names() -> list[str]:
    """Registered theme names, sorted."""
    return sorted(BUILTIN_THEMES)


__all__ = [
    "BUILTIN_THEMES",
    "DEFAULT_THEME",
    "ESPRESSO",
    "KATE",
    "PYGMENTS",
    "TANGO",
    "get_theme",
    "theme_names",
]

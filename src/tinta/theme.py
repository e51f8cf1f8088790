"""Theme and TokenStyle value types.

A Theme maps token categories to TokenStyles and optionally sets the
document's default text and background colors. Categories missing from
the mapping render without any override, like NORMAL text.

Both types are frozen. The style mapping is exposed read-only and keeps
insertion order, which is the order stylesheet rules are emitted in.

Thread Safety:
Themes are immutable after creation and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from tinta.color import Color
from tinta.tokens import TokenType


@dataclass(frozen=True, slots=True)
class TokenStyle:
    """How one token category is displayed.

    Every field is optional. An unset field produces no CSS declaration
    and no LaTeX wrapper at all, rather than a declaration set to a
    default value.

    Attributes:
        color: Foreground color
        background: Background color
        bold: Bold weight
        italic: Italic shape
        underline: Underlined

    """

    color: Color | None = None
    background: Color | None = None
    bold: bool = False
    italic: bool = False
    underline: bool = False

    @property
    def is_plain(self) -> bool:
        """True if the style sets nothing."""
        return (
            self.color is None
            and self.background is None
            and not (self.bold or self.italic or self.underline)
        )


@dataclass(frozen=True, slots=True)
class Theme:
    """A named bundle of token styles and document colors.

    Attributes:
        name: Registry name (may be empty for ad-hoc themes)
        default_color: Document text color
        background_color: Document background color
        token_styles: Category to style mapping, read-only

    Example:
        >>> theme = Theme(
        ...     name="mono",
        ...     token_styles={TokenType.KEYWORD: TokenStyle(bold=True)},
        ... )
        >>> theme.style_for(TokenType.KEYWORD).bold
        True
        >>> theme.style_for(TokenType.STRING).is_plain
        True

    """

    name: str = ""
    default_color: Color | None = None
    background_color: Color | None = None
    token_styles: Mapping[TokenType, TokenStyle] = field(default_factory=dict)

    def __post_init__(self) -> None:
        styles = self.token_styles
        if isinstance(styles, Mapping):
            items: Iterable[tuple[TokenType, TokenStyle]] = styles.items()
        else:
            items = styles
        frozen = {}
        for token_type, style in items:
            if not isinstance(token_type, TokenType):
                raise TypeError(f"Theme keys must be TokenType, got {token_type!r}")
            if not isinstance(style, TokenStyle):
                raise TypeError(f"Theme values must be TokenStyle, got {style!r}")
            frozen[token_type] = style
        # Copy so later mutation of the caller's dict cannot leak in
        object.__setattr__(self, "token_styles", MappingProxyType(frozen))

    def style_for(self, token_type: TokenType) -> TokenStyle:
        """Style for a category, plain if the theme does not cover it."""
        return self.token_styles.get(token_type, _PLAIN)

    def __hash__(self) -> int:
        return hash(
            (
                self.name,
                self.default_color,
                self.background_color,
                tuple(self.token_styles.items()),
            )
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Theme):
            return NotImplemented
        return (
            self.name == other.name
            and self.default_color == other.default_color
            and self.background_color == other.background_color
            and list(self.token_styles.items()) == list(other.token_styles.items())
        )


_PLAIN = TokenStyle()


__all__ = ["Theme", "TokenStyle"]

"""Exception classes for Tinta.

Provides standardized exceptions for error handling throughout Tinta.
Each concrete error also derives from the closest built-in exception,
so callers can catch ``ValueError``/``KeyError``/``TypeError`` as usual.
"""

from __future__ import annotations


class TintaError(Exception):
    """Base exception for all Tinta errors.

    Subclass this for specific error categories.
    """

    pass


class ColorError(TintaError, ValueError):
    """Invalid color value.

    Raised by the strict color constructors. The lenient
    :func:`tinta.color.parse_color` never raises; it returns None instead.
    """

    pass


class UnknownThemeError(TintaError, KeyError):
    """Theme name not found in the registry."""

    def __init__(self, name: str, available: list[str]) -> None:
        """Initialize unknown theme error.

        Args:
            name: The requested theme name
            available: Names that are registered
        """
        self.name = name
        self.available = available
        super().__init__(f"Unknown theme: {name!r}. Available: {', '.join(available)}")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable
        return str(self.args[0])


class FormatOptionError(TintaError, TypeError):
    """Invalid format option.

    Raised when an option collection contains something that is not a
    format option, or when ``NumberFrom`` is given a non-integer.
    """

    pass


class ThemeError(TintaError, ValueError):
    """Malformed theme data.

    Raised when deserializing a theme from a dict or JSON string.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize theme error with optional field path.

        Args:
            message: Error description
            field: Dotted path of the offending field (optional)
        """
        self.message = message
        self.field = field
        location = f"{field}: " if field else ""
        super().__init__(f"{location}{message}")


class RenderError(TintaError):
    """Error during rendering.

    Raised when the input cannot be rendered.
    """

    pass


class InvalidTokenError(RenderError, TypeError):
    """Token category outside the closed ``TokenType`` set.

    Raised when a Token is constructed, or a ``(category, text)`` pair is
    rendered, with a category that is not a ``TokenType`` member.
    """

    def __init__(self, category: object) -> None:
        """Initialize invalid token error.

        Args:
            category: The offending category value
        """
        self.category = category
        super().__init__(f"Token category must be a TokenType, got {category!r}")

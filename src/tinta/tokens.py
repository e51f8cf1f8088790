"""Token and TokenType definitions.

A tokenizer (outside this package) classifies each piece of a source
line into one of a fixed set of categories. Tinta consumes those
classified pieces as Token objects, one sequence per source line.

Each category carries two stable names:

- ``short``: a two-letter code used as CSS class and LaTeX macro name
  (empty for ``NORMAL``, which is never wrapped)
- ``title``: the full category name, used for title attributes

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from tinta.errors import InvalidTokenError


class TokenType(Enum):
    """Token categories, closed set.

    Member values are ``(short, title)`` pairs.
    """

    KEYWORD = ("kw", "KeywordTok")
    DATA_TYPE = ("dt", "DataTypeTok")
    DEC_VAL = ("dv", "DecValTok")
    BASE_N = ("bn", "BaseNTok")  # non-decimal numeric literal
    FLOAT = ("fl", "FloatTok")
    CHAR = ("ch", "CharTok")
    STRING = ("st", "StringTok")
    COMMENT = ("co", "CommentTok")
    OTHER = ("ot", "OtherTok")
    ALERT = ("al", "AlertTok")
    FUNCTION = ("fu", "FunctionTok")
    REGION_MARKER = ("re", "RegionMarkerTok")
    ERROR = ("er", "ErrorTok")
    NORMAL = ("", "NormalTok")

    @property
    def short(self) -> str:
        """Two-letter display code (empty for NORMAL)."""
        return self.value[0]

    @property
    def title(self) -> str:
        """Full category name."""
        return self.value[1]

    @classmethod
    def from_title(cls, title: str) -> TokenType:
        """Look up a category by its full name (e.g. ``"KeywordTok"``).

        Raises:
            ValueError: If no category has that name
        """
        for member in cls:
            if member.title == title:
                return member
        raise ValueError(f"Unknown token type: {title!r}")


def short_code(token_type: TokenType) -> str:
    """Return the display code for a token category.

    Example:
        >>> short_code(TokenType.KEYWORD)
        'kw'
    """
    return token_type.short


@dataclass(frozen=True, slots=True)
class Token:
    """A classified piece of one source line.

    Attributes:
        type: The token category
        text: The literal source text the token spans (no line terminator)

    """

    type: TokenType
    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.type, TokenType):
            raise InvalidTokenError(self.type)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r})"


def as_token(item: Token | tuple[TokenType, str]) -> Token:
    """Normalize a Token or a ``(category, text)`` pair to a Token.

    Raises:
        InvalidTokenError: If the category is not a TokenType
    """
    if isinstance(item, Token):
        return item
    category, text = item
    return Token(category, text)


# One line of source text, left to right. Plain ``(TokenType, str)``
# tuples are accepted anywhere a Token is.
SourceLine = Sequence[Token | tuple[TokenType, str]]


__all__ = ["SourceLine", "Token", "TokenType", "as_token", "short_code"]

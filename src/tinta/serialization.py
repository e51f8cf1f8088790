"""Theme serialization — JSON round-trip for Themes.

Converts Themes to/from JSON-compatible dicts. Useful for:
- Shipping custom themes as data files alongside an application
- Inspecting or diffing the built-in palettes

Colors are written as ``#rrggbb``; token categories by full name
(``"KeywordTok"``). Unset style fields are omitted. Category order is
preserved, since it is the order stylesheet rules are emitted in.

Example:
    from tinta.themes import TANGO
    from tinta.serialization import theme_to_json, theme_from_json

    restored = theme_from_json(theme_to_json(TANGO))
    assert restored == TANGO

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

from __future__ import annotations

import json
from typing import Any

from tinta.color import Color, parse_color
from tinta.errors import ThemeError
from tinta.theme import Theme, TokenStyle
from tinta.tokens import TokenType
from tinta.utils.logger import get_logger

logger = get_logger(__name__)

_FLAG_FIELDS = ("bold", "italic", "underline")


def style_to_dict(style: TokenStyle) -> dict[str, Any]:
    """Convert a TokenStyle to a dict, omitting unset fields."""
    result: dict[str, Any] = {}
    if style.color is not None:
        result["color"] = style.color.to_hex()
    if style.background is not None:
        result["background"] = style.background.to_hex()
    for name in _FLAG_FIELDS:
        if getattr(style, name):
            result[name] = True
    return result


def theme_to_dict(theme: Theme) -> dict[str, Any]:
    """Convert a Theme to a JSON-compatible dict.

    Args:
        theme: Theme to serialize.

    Returns:
        Dict with ``name``, ``default_color``, ``background_color`` and
        ``token_styles`` (a list of ``[category, style]`` pairs).

    """
    return {
        "name": theme.name,
        "default_color": theme.default_color.to_hex() if theme.default_color else None,
        "background_color": (
            theme.background_color.to_hex() if theme.background_color else None
        ),
        "token_styles": [
            [token_type.title, style_to_dict(style)]
            for token_type, style in theme.token_styles.items()
        ],
    }


def style_from_dict(data: dict[str, Any], field: str = "style") -> TokenStyle:
    """Reconstruct a TokenStyle from a dict.

    Raises:
        ThemeError: If a field has the wrong type or an unknown key is present.
    """
    if not isinstance(data, dict):
        raise ThemeError(f"expected an object, got {type(data).__name__}", field)

    unknown = set(data) - {"color", "background", *_FLAG_FIELDS}
    if unknown:
        raise ThemeError(f"unknown style fields: {', '.join(sorted(unknown))}", field)

    kwargs: dict[str, Any] = {}
    for name in ("color", "background"):
        if data.get(name) is not None:
            kwargs[name] = _color(data[name], f"{field}.{name}")
    for name in _FLAG_FIELDS:
        value = data.get(name, False)
        if not isinstance(value, bool):
            raise ThemeError(f"expected a boolean, got {value!r}", f"{field}.{name}")
        kwargs[name] = value
    return TokenStyle(**kwargs)


def theme_from_dict(data: dict[str, Any]) -> Theme:
    """Reconstruct a Theme from a dict.

    Accepts ``token_styles`` either as a list of pairs (as produced by
    theme_to_dict) or as an object keyed by category name.

    Args:
        data: Dict as produced by theme_to_dict.

    Returns:
        Theme (frozen dataclass).

    Raises:
        ThemeError: If a category name, color, or field type is invalid.

    """
    if not isinstance(data, dict):
        raise ThemeError(f"expected an object, got {type(data).__name__}")

    name = data.get("name", "")
    if not isinstance(name, str):
        raise ThemeError(f"expected a string, got {name!r}", "name")

    raw_styles = data.get("token_styles", [])
    if isinstance(raw_styles, dict):
        pairs = list(raw_styles.items())
    elif isinstance(raw_styles, list):
        pairs = raw_styles
    else:
        raise ThemeError("expected a list or object", "token_styles")

    styles: dict[TokenType, TokenStyle] = {}
    for i, pair in enumerate(pairs):
        path = f"token_styles[{i}]"
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise ThemeError("expected a [category, style] pair", path)
        title, raw_style = pair
        try:
            token_type = TokenType.from_title(title)
        except ValueError as e:
            raise ThemeError(str(e), path) from e
        styles[token_type] = style_from_dict(raw_style, path)

    theme = Theme(
        name=name,
        default_color=_optional_color(data.get("default_color"), "default_color"),
        background_color=_optional_color(data.get("background_color"), "background_color"),
        token_styles=styles,
    )
    logger.debug("Loaded theme %r with %d token styles", theme.name, len(styles))
    return theme


def _optional_color(value: Any, field: str) -> Color | None:
    if value is None:
        return None
    return _color(value, field)


def _color(value: Any, field: str) -> Color:
    color = parse_color(value)
    if color is None:
        raise ThemeError(f"invalid color {value!r}", field)
    return color


def theme_to_json(theme: Theme, *, indent: int | None = None) -> str:
    """Serialize a Theme to a JSON string.

    Output is deterministic (sorted keys) for stable diffs.

    Args:
        theme: Theme to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(theme_to_dict(theme), sort_keys=True, indent=indent)


def theme_from_json(data: str) -> Theme:
    """Deserialize a Theme from a JSON string.

    Raises:
        ThemeError: If the JSON is invalid or doesn't describe a Theme.

    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as e:
        raise ThemeError(f"invalid JSON: {e}") from e
    return theme_from_dict(raw)


__all__ = [
    "style_from_dict",
    "style_to_dict",
    "theme_from_dict",
    "theme_from_json",
    "theme_to_dict",
    "theme_to_json",
]

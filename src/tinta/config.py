"""Format options and their resolved configuration.

Options are supplied as a small collection of values:

- ``FormatOption.NUMBER_LINES``: render a line-number gutter
- ``NumberFrom(n)``: number of the first line (default 1)
- ``FormatOption.LINE_ANCHORS``: make each line number an anchor
- ``FormatOption.TITLE_ATTRIBUTES``: add category names as title attributes
- ``FormatOption.INLINE``: render a span-level fragment, not a block

The collection is scanned in order. Flags are order-independent; for
``NumberFrom`` the first occurrence wins and later ones are ignored.
That tie-break is why options are a sequence and not a mapping.

Usage:
    >>> from tinta.config import FormatConfig, FormatOption, NumberFrom
    >>> cfg = FormatConfig.from_options([FormatOption.NUMBER_LINES, NumberFrom(5), NumberFrom(9)])
    >>> cfg.number_from
    5

Thread Safety:
Configs are frozen and passed with every call; there is no global state.

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from tinta.errors import FormatOptionError


class FormatOption(Enum):
    """Flag options."""

    NUMBER_LINES = "number_lines"
    LINE_ANCHORS = "line_anchors"
    TITLE_ATTRIBUTES = "title_attributes"
    INLINE = "inline"


def _check_start(value: object, what: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise FormatOptionError(f"{what} requires an int, got {value!r}")


@dataclass(frozen=True, slots=True)
class NumberFrom:
    """Number of the first line when numbering is enabled."""

    start: int

    def __post_init__(self) -> None:
        _check_start(self.start, "NumberFrom")


Option = FormatOption | NumberFrom


@dataclass(frozen=True, slots=True)
class FormatConfig:
    """Immutable, resolved format options.

    Attributes:
        number_lines: Render a line-number gutter
        number_from: Number of the first line
        line_anchors: Wrap each line number in an anchor
        title_attributes: Add the category name as a title on styled spans
        inline: Span-level output (no pre/table wrapper, no Verbatim block)

    """

    number_lines: bool = False
    number_from: int = 1
    line_anchors: bool = False
    title_attributes: bool = False
    inline: bool = False

    def __post_init__(self) -> None:
        _check_start(self.number_from, "number_from")

    @classmethod
    def from_options(cls, options: Iterable[Option]) -> FormatConfig:
        """Resolve an option collection.

        Args:
            options: Option values in any order

        Returns:
            FormatConfig with flags set and the first NumberFrom applied

        Raises:
            FormatOptionError: If an item is not an option value
        """
        flags: set[FormatOption] = set()
        number_from: int | None = None
        for option in options:
            if isinstance(option, FormatOption):
                flags.add(option)
            elif isinstance(option, NumberFrom):
                if number_from is None:
                    number_from = option.start
            else:
                raise FormatOptionError(f"Not a format option: {option!r}")
        return cls(
            number_lines=FormatOption.NUMBER_LINES in flags,
            number_from=1 if number_from is None else number_from,
            line_anchors=FormatOption.LINE_ANCHORS in flags,
            title_attributes=FormatOption.TITLE_ATTRIBUTES in flags,
            inline=FormatOption.INLINE in flags,
        )

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> FormatConfig:
        """Create FormatConfig from dictionary.

        Useful for framework integration where options come from an
        external source (YAML files, CLI flags, etc.).

        Only includes keys that are valid FormatConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> FormatConfig.from_dict({"number_lines": True, "colour": "x"}).number_lines
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    def to_options(self) -> tuple[Option, ...]:
        """Canonical option tuple equivalent to this config."""
        options: list[Option] = []
        if self.number_lines:
            options.append(FormatOption.NUMBER_LINES)
        if self.number_from != 1:
            options.append(NumberFrom(self.number_from))
        if self.line_anchors:
            options.append(FormatOption.LINE_ANCHORS)
        if self.title_attributes:
            options.append(FormatOption.TITLE_ATTRIBUTES)
        if self.inline:
            options.append(FormatOption.INLINE)
        return tuple(options)


# Module-level default config (reused, never recreated)
DEFAULT_CONFIG: FormatConfig = FormatConfig()


def resolve_options(options: FormatConfig | Iterable[Option] | None) -> FormatConfig:
    """Accept a FormatConfig, an option collection, or None.

    Returns:
        The resolved FormatConfig (DEFAULT_CONFIG for None)
    """
    if options is None:
        return DEFAULT_CONFIG
    if isinstance(options, FormatConfig):
        return options
    if isinstance(options, (FormatOption, NumberFrom)):
        return FormatConfig.from_options((options,))
    return FormatConfig.from_options(options)


__all__ = [
    "DEFAULT_CONFIG",
    "FormatConfig",
    "FormatOption",
    "NumberFrom",
    "Option",
    "resolve_options",
]

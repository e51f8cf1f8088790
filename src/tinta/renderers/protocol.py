"""SourceRenderer protocol — stable interface for token-line renderers.

Any renderer that implements ``render(lines, language) -> str`` conforms
to this protocol. ``HtmlRenderer`` and ``LatexRenderer`` both do.

Example:
    from tinta.renderers.protocol import SourceRenderer

    def render_listing(renderer: SourceRenderer, lines) -> str:
        return renderer.render(lines, "python")

"""

from collections.abc import Sequence
from typing import Protocol

from tinta.tokens import SourceLine


class SourceRenderer(Protocol):
    """Protocol for renderers of tokenized source lines."""

    def render(self, lines: Sequence[SourceLine], language: str = "") -> str:
        """Render source lines to a document string.

        Args:
            lines: Tokenized lines, top to bottom.
            language: Language name of the source.

        Returns:
            Rendered string output.

        """
        ...

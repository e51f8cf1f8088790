"""Tinta renderers.

Renderers convert tokenized source lines into output documents.

Available Renderers:
- HtmlRenderer: HTML fragment with ``<span class="xx">`` per token
- LatexRenderer: fancyvrb ``Verbatim`` with ``\\xx{...}`` macros per token

Thread Safety:
All renderers use a StringBuilder local to each render() call.
Safe for concurrent use from multiple threads.

"""

from tinta.renderers.html import HtmlRenderer, format_as_html
from tinta.renderers.latex import LatexRenderer, format_as_latex
from tinta.renderers.protocol import SourceRenderer

__all__ = ["HtmlRenderer", "LatexRenderer", "SourceRenderer", "format_as_html", "format_as_latex"]

"""Escaping primitives for the output formats.

HTML escaping follows the usual text rules (``&``, ``<``, ``>`` and both
quote characters). LaTeX escaping is deliberately minimal: only the three
characters that are special inside a ``fancyvrb`` Verbatim environment
declared with ``commandchars=\\\\\\{\\}`` are rewritten.

Example:
    >>> from tinta.utils.text import escape_html, escape_latex
    >>> escape_html('a < "b"')
    'a &lt; &quot;b&quot;'
    >>> escape_latex("{x}")
    '\\\\{x\\\\}'
"""

from __future__ import annotations

import html as html_module

_LATEX_BACKSLASH = "\\textbackslash{}"

_LATEX_ESCAPES = str.maketrans(
    {
        "\\": _LATEX_BACKSLASH,
        "{": "\\{",
        "}": "\\}",
    }
)


def escape_html(text: str) -> str:
    """Escape HTML special characters for safe use in text and attributes.

    Converts special characters to HTML entities:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;
    - ' becomes &#x27;

    Args:
        text: Text to escape

    Returns:
        HTML-escaped text

    Examples:
        >>> escape_html("<script>alert('xss')</script>")
        '&lt;script&gt;alert(&#x27;xss&#x27;)&lt;/script&gt;'
    """
    if not text:
        return ""

    return html_module.escape(text, quote=True)


def escape_latex(text: str) -> str:
    """Escape the characters that would break a ``commandchars`` Verbatim.

    Backslash becomes ``\\textbackslash{}``; braces get a leading
    backslash. Everything else passes through unchanged.

    Args:
        text: Text to escape

    Returns:
        LaTeX-escaped text
    """
    if not text:
        return ""

    return text.translate(_LATEX_ESCAPES)


def unescape_latex(text: str) -> str:
    """Invert :func:`escape_latex`.

    Scans left to right so that an escaped backslash followed by an
    escaped brace is decoded correctly.

    Args:
        text: Text produced by escape_latex

    Returns:
        The original text
    """
    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        if text.startswith(_LATEX_BACKSLASH, i):
            out.append("\\")
            i += len(_LATEX_BACKSLASH)
        elif text[i] == "\\" and i + 1 < n and text[i + 1] in "{}":
            out.append(text[i + 1])
            i += 2
        else:
            out.append(text[i])
            i += 1
    return "".join(out)

"""Render one tokenized line as HTML and LaTeX, plus matching styles."""

from tinta import Token, TokenType, format_as_html, format_as_latex, get_theme, highlighting_css

line = [
    Token(TokenType.KEYWORD, "return"),
    Token(TokenType.NORMAL, " "),
    Token(TokenType.DEC_VAL, "42"),
    Token(TokenType.NORMAL, "  "),
    Token(TokenType.COMMENT, "# <answer>"),
]

print(format_as_html([], "python", [line]))
print(format_as_latex([], "python", [line]))
print(highlighting_css(get_theme("tango")))

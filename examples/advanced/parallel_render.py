"""Thread safe — one shared renderer, 1000 listings in parallel."""

from concurrent.futures import ThreadPoolExecutor

from tinta import FormatOption, HtmlRenderer, NumberFrom, Token, TokenType

renderer = HtmlRenderer([FormatOption.NUMBER_LINES, FormatOption.LINE_ANCHORS, NumberFrom(10)])

listings = [
    [[Token(TokenType.FUNCTION, "f" + str(i)), Token(TokenType.NORMAL, "()")]] * (i % 5 + 1)
    for i in range(1000)
]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(lambda lines: renderer.render(lines, "python"), listings))

print(f"Rendered {len(results)} listings in parallel")
print("First listing:", results[0])

"""Tests for StringBuilder."""

from tinta.stringbuilder import StringBuilder


class TestStringBuilder:
    def test_build_joins_in_order(self) -> None:
        sb = StringBuilder()
        sb.append("<code>").append("x").append("</code>")
        assert sb.build() == "<code>x</code>"

    def test_empty_strings_skipped(self) -> None:
        sb = StringBuilder()
        sb.append("").append("a")
        assert sb.build() == "a"

    def test_append_line(self) -> None:
        sb = StringBuilder()
        sb.append_line("a").append_line()
        assert sb.build() == "a\n\n"

    def test_surface_is_what_the_renderers_use(self) -> None:
        public = {name for name in dir(StringBuilder) if not name.startswith("_")}
        assert public == {"append", "append_line", "build"}
        assert "__len__" not in vars(StringBuilder)
        assert "__bool__" not in vars(StringBuilder)

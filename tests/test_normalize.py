"""Tests for the HTML normalizer."""

import pytest

from html2rsx import Normalizer, ScanConfig, normalize, scan_config_context


class TestAliasRewrite:
    """Aliases are rewritten in attribute-name position only."""

    def test_class_name_with_whitespace_collapse(self) -> None:
        source = '<div  className="a   b">  Hi   there  </div>'
        assert normalize(source) == '<div  class="a   b"> Hi there </div>'

    def test_html_for(self) -> None:
        assert normalize('<label htmlFor="x">Name</label>') == '<label for="x">Name</label>'

    def test_unquoted_value(self) -> None:
        assert normalize("<div className=a>") == "<div class=a>"

    def test_single_quoted_value(self) -> None:
        assert normalize("<div className='a'>") == "<div class='a'>"

    def test_every_attribute_position(self) -> None:
        source = '<a className="x"\n   className="y">'
        assert normalize(source) == '<a class="x"\n   class="y">'

    def test_not_inside_quoted_value(self) -> None:
        source = '<div title="className=x">'
        assert normalize(source) == source

    def test_not_in_text_content(self) -> None:
        source = "<p>set className=foo</p>"
        assert normalize(source) == source

    def test_not_in_comment(self) -> None:
        source = '<!-- className="x" -->'
        assert normalize(source) == source

    def test_not_in_tag_name_position(self) -> None:
        source = '<className="x">'
        assert normalize(source) == source

    def test_requires_equals(self) -> None:
        source = "<div className>"
        assert normalize(source) == source

    def test_longer_name_with_alias_prefix(self) -> None:
        source = '<div classNames="x">'
        assert normalize(source) == source

    def test_configured_aliases(self) -> None:
        config = ScanConfig(attribute_aliases={"onClick": "onclick"})
        with scan_config_context(config):
            assert normalize('<b onClick="f()" className="c">') == '<b onclick="f()" className="c">'

    def test_explicit_aliases_argument(self) -> None:
        result = Normalizer('<i tabIndex="1">', aliases={"tabIndex": "tabindex"}).normalize()
        assert result == '<i tabindex="1">'


class TestWhitespace:
    """Whitespace collapsing in text content."""

    @pytest.mark.parametrize(
        "source,expected",
        [
            ("a   b", "a b"),
            ("a\n\t b", "a b"),
            ("   x", " x"),
            ("x   ", "x "),
            ("a   <b>", "a <b>"),
            ("<p>  ", "<p> "),
            ("<p>   x", "<p> x"),
            ("", ""),
            ("   ", " "),
        ],
    )
    def test_text_runs_collapse(self, source: str, expected: str) -> None:
        assert normalize(source) == expected

    def test_blank_between_tags_dropped(self) -> None:
        assert normalize("<ul>\n  <li>a</li>\n</ul>") == "<ul><li>a</li></ul>"

    def test_blank_after_comment_before_tag_dropped(self) -> None:
        assert normalize("<!-- c -->\n<p>") == "<!-- c --><p>"

    def test_blank_after_text_angle_bracket_kept(self) -> None:
        assert normalize("a > <b>") == "a > <b>"

    def test_attribute_spacing_preserved(self) -> None:
        source = '<input  type="text"\n   value="a  b" >'
        assert normalize(source) == source

    def test_quote_types_independent(self) -> None:
        source = "<a title='say \"hi  there\"'  href=\"it's\">x</a>"
        assert normalize(source) == source

    def test_comment_preserved(self) -> None:
        assert normalize("<!--  a   b  -->") == "<!--  a   b  -->"

    def test_angle_bracket_inside_comment(self) -> None:
        assert normalize("<!-- a > b -->  x") == "<!-- a > b --> x"

    @pytest.mark.parametrize("comment", ["<!-->", "<!--->"])
    def test_abrupt_comment_close(self, comment: str) -> None:
        assert normalize(f"{comment}  <p>a   b</p>") == f"{comment}<p>a b</p>"

    def test_apostrophe_in_text_does_not_open_quote(self) -> None:
        assert normalize("<p>don't   worry</p>") == "<p>don't worry</p>"


class TestMalformed:
    """Truncated input is copied, never dropped."""

    @pytest.mark.parametrize(
        "source",
        ['<div class="a  b', "<div  class", "<!--  open", "<", "<p a='x  y"],
    )
    def test_unterminated_constructs_copied(self, source: str) -> None:
        assert normalize(source) == source

    def test_idempotent_examples(self) -> None:
        for source in [
            '<div  className="a   b">  Hi   there  </div>',
            "<ul>\n  <li>a</li>\n</ul>",
            "  text  <!-- c -->  <b> x </b>  ",
        ]:
            once = normalize(source)
            assert normalize(once) == once

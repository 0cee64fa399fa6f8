"""Property-based tests using Hypothesis.

These tests verify invariants that should hold for any input:
1. Escaped text parses back to exactly that text
2. Serialized trees parse back to the same displayed runs
3. Parsing arbitrary input either succeeds or raises a MiniMessageError
4. Stripping markdown is the same as stripping the tags it produces

"""

from hypothesis import given, settings
from hypothesis import strategies as st

from minimessage import deserialize, escape_tokens, serialize, strip_tokens
from minimessage.errors import MiniMessageError
from minimessage.lexer import Lexer, format_argument
from minimessage.markdown import parse_markdown, strip_markdown
from minimessage.nodes import NAMED_COLORS, ClickAction, ClickEvent, Style, Text, TextColor
from minimessage.text import flatten

# Characters that exercise escapes, tag starts and argument separators
markup_chars = st.sampled_from(list("<>/\\:'\"!#abcr ed*_~|\n"))
markup_text = st.text(markup_chars, max_size=40)
tricky_text = st.text(st.sampled_from(list("<>\\:'\"ab \n")), max_size=12)

colors = st.one_of(
    st.none(),
    st.sampled_from(list(NAMED_COLORS.values())),
    st.integers(0, 0xFFFFFF).map(TextColor),
)
decorations = st.sampled_from([None, True, False])
styles = st.builds(
    Style,
    color=colors,
    bold=decorations,
    italic=decorations,
    underlined=decorations,
    strikethrough=decorations,
    obfuscated=decorations,
    click_event=st.one_of(
        st.none(),
        st.builds(ClickEvent, st.sampled_from(list(ClickAction)), tricky_text),
    ),
    insertion=st.one_of(st.none(), tricky_text),
    font=st.sampled_from([None, "uniform", "minecraft:alt"]),
)
trees = st.recursive(
    st.builds(lambda content, style: Text(content, style=style), tricky_text, styles),
    lambda children: st.builds(
        lambda content, style, kids: Text(content, style=style, children=tuple(kids)),
        tricky_text,
        styles,
        st.lists(children, max_size=3),
    ),
    max_leaves=8,
)


class TestEscapeProperties:
    @given(st.text(max_size=60))
    def test_escaped_text_parses_to_itself(self, text: str) -> None:
        assert deserialize(escape_tokens(text)) == Text(text)

    @given(st.text(max_size=60))
    def test_escaped_text_strips_to_itself(self, text: str) -> None:
        assert strip_tokens(escape_tokens(text)) == text

    @given(st.text(max_size=30))
    def test_formatted_argument_lexes_back(self, value: str) -> None:
        token = next(Lexer(f"<insert:{format_argument(value)}>").tokenize())
        assert [a.value for a in token.arguments] == [value]


class TestRoundTripProperties:
    @given(trees)
    @settings(max_examples=200)
    def test_serialize_then_parse(self, component: Text) -> None:
        assert flatten(deserialize(serialize(component))) == flatten(component)


class TestRobustness:
    @given(markup_text)
    @settings(max_examples=300)
    def test_parse_fails_only_with_library_errors(self, markup: str) -> None:
        try:
            deserialize(markup)
        except MiniMessageError:
            pass

    @given(markup_text)
    def test_strip_fails_only_with_library_errors(self, markup: str) -> None:
        try:
            strip_tokens(markup)
        except MiniMessageError:
            pass

    @given(st.text(st.sampled_from(list("*_~|ab ")), max_size=30))
    def test_markdown_strip_matches_tag_strip(self, text: str) -> None:
        assert strip_tokens(parse_markdown(text)) == strip_markdown(text)

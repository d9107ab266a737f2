"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from nashlex import tokenize
from nashlex.charsets import is_arg
from nashlex.lexer import Lexer
from nashlex.tokens import TokenType

# Alphabet rich in nash syntax
SHELL_CHARS = 'abcXYZ019_-./$=<>!+|,;()[]{}"\\# \t\n'

# No quotes, escapes, comments or $: every token's value is its source text
PLAIN_CHARS = "abcXYZ019_-./=<>!+|,;()[]{} \t\n"

words = st.text(alphabet="abcdefgh_0123456789-./:", min_size=1, max_size=12)

# Words that always end a statement (a bare digit run does not)
commands = st.builds(
    lambda head, tail: head + tail,
    st.sampled_from("abcdefgh"),
    st.text(alphabet="abcdefgh_0123456789-./:", max_size=11),
)


class TestBasicInvariants:
    """Test basic invariants that should always hold."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_always_ends_with_eof(self, source: str) -> None:
        """Every tokenization must end with exactly one EOF token."""
        tokens = tokenize(source)

        assert tokens[-1].type == TokenType.EOF, "Last token must be EOF"
        eof_count = sum(1 for t in tokens if t.type == TokenType.EOF)
        assert eof_count == 1, "Must have exactly one EOF token"

    @given(st.text(alphabet=SHELL_CHARS, max_size=300))
    @settings(max_examples=200)
    def test_illegal_is_followed_by_eof(self, source: str) -> None:
        """An ILLEGAL token is the last token before EOF, and there is at most one."""
        tokens = tokenize(source, "prop")
        illegal = [i for i, t in enumerate(tokens) if t.type == TokenType.ILLEGAL]

        assert len(illegal) <= 1
        if illegal:
            assert illegal[0] == len(tokens) - 2
            assert tokens[illegal[0]].value.startswith("prop:")

    @given(st.text(max_size=500))
    @settings(max_examples=100)
    def test_position_never_negative(self, source: str) -> None:
        """Lines are 1-based and columns 0-based."""
        for token in tokenize(source):
            assert token.line >= 1, f"Line number must be >= 1, got {token.line}"
            assert token.column >= 0, f"Column must be >= 0, got {token.column}"

    @given(st.text(alphabet=SHELL_CHARS, max_size=300))
    @settings(max_examples=100)
    def test_deterministic(self, source: str) -> None:
        """Lexing the same input twice yields the same tokens."""
        assert tokenize(source) == tokenize(source)


class TestSemicolonInsertion:
    """Implicit statement terminators."""

    @given(st.text(alphabet="abc -\n(", max_size=200))
    @settings(max_examples=200)
    def test_no_implicit_semicolon_inside_parens(self, source: str) -> None:
        """No SEMICOLON is produced while a parenthesis is open."""
        depth = 0
        for token in tokenize(source):
            if token.type == TokenType.LPAREN:
                depth += 1
            elif token.type == TokenType.SEMICOLON:
                assert depth == 0

    @given(st.lists(commands, min_size=1, max_size=8))
    @settings(max_examples=100)
    def test_one_semicolon_per_line(self, lines: list[str]) -> None:
        """Each non-empty line of plain words ends with exactly one SEMICOLON."""
        tokens = tokenize("\n".join(lines))
        semicolons = [t for t in tokens if t.type == TokenType.SEMICOLON]
        assert len(semicolons) == len(lines)

    @given(st.text(alphabet=SHELL_CHARS, max_size=200))
    @settings(max_examples=100)
    def test_disabled_insertion_only_drops_semicolons(self, source: str) -> None:
        """auto_semicolons=False removes implicit SEMICOLONs and nothing else."""
        from nashlex.config import LexConfig

        with_auto = [
            (t.type, t.value)
            for t in tokenize(source)
            if t.type not in (TokenType.SEMICOLON, TokenType.ILLEGAL)
        ]
        without = [
            (t.type, t.value)
            for t in tokenize(source, config=LexConfig(auto_semicolons=False))
            if t.type not in (TokenType.SEMICOLON, TokenType.ILLEGAL)
        ]
        assert with_auto == without


class TestStrings:
    """Quoted string termination."""

    @given(st.text(alphabet=st.characters(exclude_characters='"\\'), max_size=100))
    @settings(max_examples=100)
    def test_closed_string_yields_one_string(self, body: str) -> None:
        tokens = tokenize(f'"{body}"')
        assert [(t.type, t.value) for t in tokens] == [
            (TokenType.STRING, body),
            (TokenType.EOF, ""),
        ]

    @given(st.text(alphabet=st.characters(exclude_characters='"\\'), max_size=100))
    @settings(max_examples=100)
    def test_unclosed_string_yields_one_error(self, body: str) -> None:
        tokens = tokenize(f'"{body}', "s")
        assert [t.type for t in tokens] == [TokenType.ILLEGAL, TokenType.EOF]
        assert tokens[0].value.endswith(f"Quoted string not finished: {body}")


class TestSourceCoverage:
    """Token source text plus ignored text reproduces the input."""

    @given(st.text(alphabet=PLAIN_CHARS, max_size=300))
    @settings(max_examples=200)
    def test_tokens_cover_source(self, source: str) -> None:
        """Without strings, escapes and comments, token values spell out the input.

        Whitespace is ignored text, and SEMICOLON appears both as an explicit
        token and as an inserted one, so both are dropped before comparing.
        """
        tokens = tokenize(source)
        assert all(t.type != TokenType.ILLEGAL for t in tokens)

        def strip(text: str) -> str:
            return "".join(c for c in text if c not in " \t\n;")

        assert strip("".join(t.value for t in tokens)) == strip(source)


class TestRoundTrip:
    """Re-lexing space-joined token values keeps token kinds."""

    @given(st.lists(words, min_size=1, max_size=10))
    @settings(max_examples=100)
    def test_relex_words(self, parts: list[str]) -> None:
        first = [t for t in tokenize(" ".join(parts)) if t.type != TokenType.SEMICOLON]
        again = tokenize(" ".join(t.value for t in first if t.type != TokenType.EOF))
        again = [t for t in again if t.type != TokenType.SEMICOLON]

        assert [t.type for t in again] == [t.type for t in first]


class TestCharacterClasses:
    """Rune classification properties."""

    @given(st.characters())
    @settings(max_examples=300)
    def test_identifier_runes_are_arg_runes(self, r: str) -> None:
        from nashlex.charsets import is_identifier

        if is_identifier(r):
            assert is_arg(r)

    @given(st.characters(exclude_categories=("Cs",)))
    @settings(max_examples=300)
    def test_every_rune_is_handled(self, r: str) -> None:
        """No rune outside the surrogates makes the lexer raise or stall."""
        tokens = list(Lexer("", f"x {r} y").tokens)
        assert tokens[-1].type == TokenType.EOF

from pytest import mark

from mdeck.components.highlighting import (
    Segment,
    SyntaxHighlighter,
    capture_kind,
    merge_tokens,
    tokens_for_line,
)
from mdeck.components.pygments_oracle import PygmentsOracle, capture_name
from mdeck.models import SyntaxToken, TokenKind

from .fakes import FakeOracle

K = TokenKind


@mark.parametrize(
    ("name", "kind"),
    [
        ("keyword", K.KEYWORD),
        ("keyword.declaration", K.KEYWORD),
        ("keyword.constant", K.CONSTANT),
        ("keyword.conditional", K.CONDITIONAL),
        ("name.function.magic", K.FUNCTION),
        ("name.builtin.pseudo", K.VARIABLE),
        ("literal.string.double", K.STRING),
        ("literal.number.integer", K.NUMBER),
        ("comment.single", K.COMMENT),
        ("punctuation.bracket", K.BRACKET),
        ("Operator", K.OPERATOR),
        ("generic.heading", K.DEFAULT),
        ("", K.DEFAULT),
    ],
)
def test_capture_kind(name: str, kind: TokenKind) -> None:
    assert capture_kind(name) == kind


def test_highlight_unsupported_language() -> None:
    highlighter = SyntaxHighlighter(FakeOracle())

    assert highlighter.highlight("whatever", "brainfuck") == []
    assert highlighter.highlight("whatever", "") == []


def test_highlight_maps_and_sorts_captures() -> None:
    oracle = FakeOracle(
        {"toy": [("literal.number", 8, 10), ("keyword", 0, 3), ("name", 0, 7)]}
    )

    tokens = SyntaxHighlighter(oracle).highlight("let abc 42", "toy")

    assert tokens == [
        SyntaxToken(K.KEYWORD, 0, 3),
        SyntaxToken(K.VARIABLE, 0, 7),
        SyntaxToken(K.NUMBER, 8, 10),
    ]


def test_highlight_drops_out_of_range_captures() -> None:
    oracle = FakeOracle(
        {
            "toy": [
                ("keyword", 0, 3),
                ("literal.string", 50, 60),
                ("name", 5, 2),
                ("comment", -1, 2),
                ("name", 4, 99),
            ]
        }
    )

    tokens = SyntaxHighlighter(oracle).highlight("let x", "toy")

    assert tokens == [SyntaxToken(K.KEYWORD, 0, 3), SyntaxToken(K.VARIABLE, 4, 5)]


def test_merge_without_tokens() -> None:
    assert merge_tokens("plain line", []) == [Segment("plain line", None)]
    assert merge_tokens("", []) == []


def test_merge_fills_gaps() -> None:
    tokens = [SyntaxToken(K.KEYWORD, 0, 3), SyntaxToken(K.NUMBER, 8, 10)]

    assert merge_tokens("let x = 42;", tokens) == [
        Segment("let", K.KEYWORD),
        Segment(" x = ", None),
        Segment("42", K.NUMBER),
        Segment(";", None),
    ]


def test_merge_overlap_smallest_start_wins() -> None:
    tokens = [SyntaxToken(K.FUNCTION, 0, 6), SyntaxToken(K.BRACKET, 4, 8)]

    assert merge_tokens("main()  ", tokens) == [
        Segment("main()", K.FUNCTION),
        Segment("  ", K.BRACKET),
    ]


def test_merge_overlap_ties_go_to_first_token() -> None:
    tokens = [SyntaxToken(K.TYPE, 0, 3), SyntaxToken(K.KEYWORD, 0, 5)]

    assert merge_tokens("Self.x", tokens) == [
        Segment("Sel", K.TYPE),
        Segment("f.", K.KEYWORD),
        Segment("x", None),
    ]


def test_merge_skips_empty_and_past_end_tokens() -> None:
    tokens = [
        SyntaxToken(K.KEYWORD, 2, 2),
        SyntaxToken(K.STRING, 2, 100),
        SyntaxToken(K.COMMENT, 50, 60),
    ]

    assert merge_tokens("ab\"cd\"", tokens) == [
        Segment("ab", None),
        Segment("\"cd\"", K.STRING),
    ]


@mark.parametrize(
    "tokens",
    [
        [],
        [SyntaxToken(K.KEYWORD, 0, 12)],
        [SyntaxToken(K.KEYWORD, 1, 4), SyntaxToken(K.TYPE, 2, 9)],
        [SyntaxToken(K.STRING, 3, 5), SyntaxToken(K.STRING, 3, 5)],
        [SyntaxToken(K.NUMBER, 0, 1), SyntaxToken(K.NUMBER, 11, 30)],
        [SyntaxToken(K.COMMENT, 6, 6), SyntaxToken(K.DEFAULT, 7, 8)],
    ],
)
def test_merge_reconstructs_line(tokens: list[SyntaxToken]) -> None:
    line = "let v = f(1);"

    assert "".join(segment.text for segment in merge_tokens(line, tokens)) == line


def test_tokens_for_line_rebases_and_clips() -> None:
    content = "let a = \"x\ny\";"
    tokens = [SyntaxToken(K.KEYWORD, 0, 3), SyntaxToken(K.STRING, 8, 13)]

    assert tokens_for_line(tokens, 0, 10) == [
        SyntaxToken(K.KEYWORD, 0, 3),
        SyntaxToken(K.STRING, 8, 10),
    ]
    assert tokens_for_line(tokens, 11, len(content) - 11) == [
        SyntaxToken(K.STRING, 0, 2)
    ]


def test_pygments_oracle_unsupported_language() -> None:
    assert PygmentsOracle().captures("definitely-not-a-language", "x") is None


def test_pygments_oracle_rust() -> None:
    content = "fn main() {\n    let answer = 42;\n}"

    tokens = SyntaxHighlighter(PygmentsOracle()).highlight(content, "rust")
    kinds = {content[t.start : t.end]: t.kind for t in tokens}

    assert kinds["fn"] == K.KEYWORD
    assert kinds["main"] == K.FUNCTION
    assert kinds["42"] == K.NUMBER
    assert [t.start for t in tokens] == sorted(t.start for t in tokens)


def test_capture_name_refines_keywords_and_punctuation() -> None:
    assert capture_name(("Keyword",), "if") == "keyword.conditional"
    assert capture_name(("Keyword",), "while") == "keyword.repeat"
    assert capture_name(("Keyword",), "fn") == "keyword"
    assert capture_name(("Punctuation",), "(") == "punctuation.bracket"
    assert capture_name(("Punctuation",), ";") == "punctuation.delimiter"
    assert capture_name(("Name", "Function"), "main") == "name.function"

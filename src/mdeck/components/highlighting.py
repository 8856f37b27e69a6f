"""Syntax highlighting of code blocks.

Highlighting is done in two steps. When a code block is rendered, the
[`SyntaxHighlighter`][mdeck.components.highlighting.SyntaxHighlighter] asks an oracle
for captures over the whole block and maps them onto
[`TokenKind`][mdeck.models.TokenKind]s. Then, for every line of the block,
[`merge_tokens`][mdeck.components.highlighting.merge_tokens] resolves overlapping
tokens so that each character of the line is emitted exactly once.
"""

from collections.abc import Iterable, Iterator, Sequence
from logging import getLogger
from typing import NamedTuple

from ..models import SyntaxToken, TokenKind
from .protocols import Capture, HighlightOracleProtocol

_logger = getLogger(__name__)

CAPTURE_KINDS: dict[str, TokenKind] = {
    "keyword": TokenKind.KEYWORD,
    "keyword.namespace": TokenKind.KEYWORD,
    "keyword.constant": TokenKind.CONSTANT,
    "keyword.type": TokenKind.TYPE,
    "keyword.conditional": TokenKind.CONDITIONAL,
    "keyword.repeat": TokenKind.REPEAT,
    "name": TokenKind.VARIABLE,
    "name.attribute": TokenKind.VARIABLE,
    "name.builtin": TokenKind.FUNCTION,
    "name.builtin.pseudo": TokenKind.VARIABLE,
    "name.class": TokenKind.TYPE,
    "name.constant": TokenKind.CONSTANT,
    "name.decorator": TokenKind.FUNCTION,
    "name.entity": TokenKind.CONSTANT,
    "name.exception": TokenKind.TYPE,
    "name.function": TokenKind.FUNCTION,
    "name.label": TokenKind.CONSTANT,
    "name.namespace": TokenKind.TYPE,
    "name.tag": TokenKind.KEYWORD,
    "name.variable": TokenKind.VARIABLE,
    "name.variable.parameter": TokenKind.PARAMETER,
    "literal": TokenKind.CONSTANT,
    "literal.number": TokenKind.NUMBER,
    "literal.string": TokenKind.STRING,
    "comment": TokenKind.COMMENT,
    "operator": TokenKind.OPERATOR,
    "operator.word": TokenKind.KEYWORD,
    "punctuation": TokenKind.DELIMITER,
    "punctuation.bracket": TokenKind.BRACKET,
    "punctuation.delimiter": TokenKind.DELIMITER,
}
"""Capture names to token kinds. The longest matching dotted prefix wins."""


def capture_kind(name: str) -> TokenKind:
    """Map a capture name onto a token kind.

    Args:
        name: Dotted capture name, such as `name.function.magic`.

    Returns:
        Kind of the longest prefix of `name` present in `CAPTURE_KINDS`, \
        `TokenKind.DEFAULT` if there is none.
    """
    parts = name.lower().split(".")
    for end in range(len(parts), 0, -1):
        kind = CAPTURE_KINDS.get(".".join(parts[:end]))
        if kind is not None:
            return kind
    return TokenKind.DEFAULT


class SyntaxHighlighter:
    def __init__(self, oracle: HighlightOracleProtocol) -> None:
        self._oracle = oracle

    def highlight(self, content: str, language: str) -> list[SyntaxToken]:
        """Compute the tokens of a code block.

        Args:
            content: Content of the code block, fences excluded.
            language: Language tag of the block. Unsupported languages are not an \
                error, the block is just not highlighted.

        Returns:
            Tokens sorted by start offset. They can overlap. Captures starting \
            outside of `content` or with a negative length are dropped, the others \
            are clipped to `content`.
        """
        if not language:
            return []
        captures = self._oracle.captures(language, content)
        if captures is None:
            _logger.debug("No highlighting available for language %s", language)
            return []
        tokens = [
            token
            for capture in captures
            if (token := self._to_token(capture, len(content))) is not None
        ]
        tokens.sort(key=lambda token: token.start)
        return tokens

    def _to_token(self, capture: Capture, length: int) -> SyntaxToken | None:
        name, start, end = capture
        if not 0 <= start <= end or start > length:
            _logger.debug("Dropping capture %s with range [%d, %d)", name, start, end)
            return None
        return SyntaxToken(capture_kind(name), start, min(end, length))


class Segment(NamedTuple):
    """Piece of a line and the kind it is colored with, None if uncolored."""

    text: str
    kind: TokenKind | None


def tokens_for_line(
    tokens: Iterable[SyntaxToken], line_start: int, line_length: int
) -> list[SyntaxToken]:
    """Rebase block tokens on a single line of the block.

    Args:
        tokens: Tokens of the whole block, sorted by start.
        line_start: Offset of the first character of the line in the block.
        line_length: Length of the line, line break excluded.

    Returns:
        Tokens overlapping the line, clipped to it, offsets relative to the line. \
        The relative order of the input is preserved.
    """
    line_end = line_start + line_length
    return [
        SyntaxToken(
            token.kind,
            max(token.start, line_start) - line_start,
            min(token.end, line_end) - line_start,
        )
        for token in tokens
        if token.start < line_end and token.end > line_start
    ]


def merge_tokens(line: str, tokens: Sequence[SyntaxToken]) -> list[Segment]:
    """Resolve overlapping tokens into a flat list of segments.

    Every character of `line` ends up in exactly one segment, so joining the texts \
    of the segments gives `line` back. A character covered by several tokens takes \
    the kind of the covering token with the smallest start, ties going to the \
    earliest token of `tokens`. That token then colors everything up to its end.

    Args:
        line: Text of the line.
        tokens: Tokens with offsets relative to `line`, sorted by start.

    Returns:
        Segments of the line, in order.
    """
    usable = [
        SyntaxToken(token.kind, token.start, min(token.end, len(line)))
        for token in tokens
        if 0 <= token.start < min(token.end, len(line))
    ]
    usable.sort(key=lambda token: token.start)
    return list(_merge(line, usable))


def _merge(line: str, tokens: list[SyntaxToken]) -> Iterator[Segment]:
    position = 0
    while position < len(line):
        covering = next(
            (t for t in tokens if t.start <= position < t.end),
            None,
        )
        if covering is not None:
            yield Segment(line[position : covering.end], covering.kind)
            position = covering.end
            continue
        next_start = min(
            (t.start for t in tokens if t.start > position), default=len(line)
        )
        yield Segment(line[position:next_start], None)
        position = next_start

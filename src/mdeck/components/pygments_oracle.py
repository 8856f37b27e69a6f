"""Highlight oracle backed by Pygments lexers."""

from collections.abc import Iterator
from functools import cache

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from .protocols import Capture, HighlightOracleProtocol

_IGNORED_CAPTURES = frozenset(("text", "text.whitespace", "whitespace"))
_CONDITIONALS = frozenset(("if", "else", "elif", "match", "case", "switch"))
_REPEATS = frozenset(("for", "while", "loop", "do", "in"))
_BRACKETS = frozenset("()[]{}<>")


@cache
def _lexer(language: str) -> Lexer | None:
    try:
        return get_lexer_by_name(language)
    except ClassNotFound:
        return None


def capture_name(token_type: tuple[str, ...], value: str) -> str:
    """Name a Pygments token the way highlight queries name their captures.

    `Token.Name.Function` becomes `name.function`. Keywords and punctuation are \
    refined from their text since Pygments does not distinguish conditionals, loops \
    and brackets.
    """
    name = ".".join(token_type).lower()
    if name == "keyword":
        if value in _CONDITIONALS:
            return "keyword.conditional"
        if value in _REPEATS:
            return "keyword.repeat"
    if name == "punctuation":
        stripped = value.strip()
        if stripped and all(c in _BRACKETS for c in stripped):
            return "punctuation.bracket"
        return "punctuation.delimiter"
    return name


class PygmentsOracle(HighlightOracleProtocol):
    def captures(self, language: str, source: str) -> Iterator[Capture] | None:
        lexer = _lexer(language.lower())
        if lexer is None:
            return None
        return self._captures(lexer, source)

    def _captures(self, lexer: Lexer, source: str) -> Iterator[Capture]:
        for index, token_type, value in lexer.get_tokens_unprocessed(source):
            name = capture_name(token_type, value)
            if not value or name in _IGNORED_CAPTURES:
                continue
            yield name, index, index + len(value)

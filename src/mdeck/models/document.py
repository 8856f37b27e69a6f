"""Model classes for parsed documents and the lines of a slide."""

from dataclasses import dataclass
from pathlib import Path

from .styling import TokenKind


@dataclass(frozen=True)
class Metadata:
    """Values read from the front matter of a document."""

    author: str | None = None
    title: str | None = None
    subtitle: str | None = None


@dataclass(frozen=True)
class CodeBlock:
    """Content of a fenced region, recomputed on every render."""

    language: str
    content: str


@dataclass(frozen=True)
class SyntaxToken:
    """Highlighted span of a code block.

    Offsets are half-open and relative to the content of the block, not to the \
    slide.
    """

    kind: TokenKind
    start: int
    end: int


@dataclass(frozen=True)
class Heading:
    line: int
    """Index of the line in the slide, leading blank lines excluded."""

    level: int
    text: str


@dataclass(frozen=True)
class CodeFence:
    line: int
    """Index of the opening fence in the slide, leading blank lines excluded."""

    block: CodeBlock


@dataclass(frozen=True)
class ImageDirective:
    line: int
    """Index of the line in the slide, leading blank lines excluded."""

    path: Path


@dataclass(frozen=True)
class PlainText:
    line: int
    """Index of the line in the slide, leading blank lines excluded."""

    text: str


ClassifiedLine = Heading | CodeFence | ImageDirective | PlainText
"""Any element produced when classifying a slide."""

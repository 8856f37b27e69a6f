from collections.abc import Iterable, Iterator, Sequence
from contextlib import AbstractContextManager
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..models import Operation

Capture = tuple[str, int, int]
"""Capture name and half-open range over the highlighted source."""


class HighlightOracleProtocol(Protocol):
    """Parse source code and report highlight captures over it."""

    def captures(self, language: str, source: str) -> Iterable[Capture] | None:
        """Run the highlight query of `language` over `source`.

        Args:
            language: Language tag of a code block.
            source: Code to highlight.

        Returns:
            Captures in no particular order, possibly overlapping. None if the \
            language is not supported.
        """


class ImagePrinterProtocol(Protocol):
    def print_image(self, path: Path, max_width: int, max_height: int) -> str:
        """Encode an image for display at the current cursor position.

        Args:
            path: Resolved path of the image.
            max_width: Number of columns available.
            max_height: Number of rows available.

        Returns:
            Escape sequences drawing the image.
        """


class TerminalProtocol(Protocol):
    def size(self) -> tuple[int, int]:
        """Width and height of the terminal, in cells."""

    def apply(self, operations: Sequence["Operation"]) -> None:
        """Write a batch of operations atomically with respect to other batches."""

    def keys(self) -> Iterator[str]:
        """Block on key presses and yield them, one character at a time."""

    def session(self) -> AbstractContextManager[None]:
        """Hold the terminal in raw mode for the duration of the context."""

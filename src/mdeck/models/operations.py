"""Model classes for the positioned writes produced by the layout."""

from dataclasses import dataclass
from pathlib import Path

from .styling import Paint


@dataclass(frozen=True)
class ClearScreen:
    pass


@dataclass(frozen=True)
class MoveTo:
    """Move the cursor. Coordinates are 1-based, like the terminal's."""

    column: int
    row: int


@dataclass(frozen=True)
class SetPaint:
    paint: Paint


@dataclass(frozen=True)
class SetBold:
    bold: bool


@dataclass(frozen=True)
class ResetStyle:
    pass


@dataclass(frozen=True)
class Write:
    text: str


@dataclass(frozen=True)
class DrawImage:
    """Print an image at the current cursor position, within a bounding box."""

    path: Path
    max_width: int
    max_height: int


Operation = ClearScreen | MoveTo | SetPaint | SetBold | ResetStyle | Write | DrawImage
"""Any write that a terminal knows how to apply."""

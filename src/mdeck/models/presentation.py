"""Model class holding a loaded document and the position of the audience in it."""

from dataclasses import dataclass, field
from pathlib import Path

from .document import Metadata


@dataclass
class Presentation:
    """Slides of a document and navigation state.

    All transitions are total: moving past either end of the deck saturates instead \
    of failing, and theme indices wrap around.
    """

    path: Path
    """Path of the source document. Relative image paths are resolved from its \
    directory."""

    slides: tuple[str, ...]
    theme_count: int
    metadata: Metadata = field(default_factory=Metadata)
    slide_index: int = 0
    theme_index: int = 0

    def __post_init__(self) -> None:
        if not self.slides:
            self.slides = ("",)
        if self.theme_count < 1:
            msg = "a presentation needs at least one theme"
            raise ValueError(msg)
        self.slide_index = min(max(self.slide_index, 0), len(self.slides) - 1)
        self.theme_index %= self.theme_count

    @property
    def current_slide(self) -> str:
        return self.slides[self.slide_index]

    @property
    def base_dir(self) -> Path:
        return self.path.parent

    def next(self) -> None:
        self.slide_index = min(self.slide_index + 1, len(self.slides) - 1)

    def prev(self) -> None:
        self.slide_index = max(self.slide_index - 1, 0)

    def cycle_theme(self) -> None:
        self.theme_index = (self.theme_index + 1) % self.theme_count

"""Load a document and run the interactive render loop over it."""

from collections.abc import Iterator
from contextlib import contextmanager
from logging import Handler, LogRecord, getLogger
from pathlib import Path

from .components.highlighting import SyntaxHighlighter
from .components.layout import LayoutRenderer
from .components.notifications import NotificationOverlay
from .components.parsing import parse_metadata, read_document, split_into_slides
from .components.protocols import HighlightOracleProtocol, TerminalProtocol
from .components.themes import Theme, ThemeCatalog
from .configuring.settings import Settings
from .models import Presentation, Role

_logger = getLogger(__name__)


class _RecordBuffer(Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records: list[LogRecord] = []

    def emit(self, record: LogRecord) -> None:
        self.records.append(record)


def load_presentation(
    path: Path,
    settings: Settings,
    catalog: ThemeCatalog,
    slide_index: int = 0,
) -> Presentation:
    """Read a document and split it into a presentation.

    Args:
        path: Path to the markdown document.
        settings: Settings providing the slide delimiter and initial theme.
        catalog: Themes the presentation cycles through.
        slide_index: Slide to start on. Out of range values are clamped.

    Returns:
        The presentation, positioned on `slide_index`.
    """
    metadata, body = parse_metadata(read_document(path))
    slides = split_into_slides(body, settings.slide_delimiter)
    _logger.info("Loaded %d slides from %s", len(slides), path)
    return Presentation(
        path=path.resolve(),
        slides=tuple(slides),
        theme_count=len(catalog),
        metadata=metadata,
        slide_index=slide_index,
        theme_index=catalog.index_of(settings.theme),
    )


@contextmanager
def deferred_logging() -> Iterator[None]:
    """Hold log records back while the screen belongs to the presentation.

    The records are handed back to their loggers once the context exits, so they \
    reach the usual handlers after the terminal has been restored.
    """
    root = getLogger()
    handlers = root.handlers[:]
    buffer = _RecordBuffer()
    for handler in handlers:
        root.removeHandler(handler)
    root.addHandler(buffer)
    try:
        yield
    finally:
        root.removeHandler(buffer)
        for handler in handlers:
            root.addHandler(handler)
        buffer.close()
        for record in buffer.records:
            getLogger(record.name).handle(record)


class Presenter:
    def __init__(
        self,
        presentation: Presentation,
        terminal: TerminalProtocol,
        settings: Settings,
        oracle: HighlightOracleProtocol,
        catalog: ThemeCatalog | None = None,
    ) -> None:
        self._presentation = presentation
        self._terminal = terminal
        self._catalog = catalog or ThemeCatalog()
        self._layout = LayoutRenderer(SyntaxHighlighter(oracle), settings)
        self._overlay = NotificationOverlay(terminal, settings.notification_delay)

    @property
    def presentation(self) -> Presentation:
        return self._presentation

    @property
    def overlay(self) -> NotificationOverlay:
        return self._overlay

    @property
    def theme(self) -> Theme:
        return self._catalog[self._presentation.theme_index]

    def render(self) -> None:
        width, height = self._terminal.size()
        self._terminal.apply(
            self._layout.render(self._presentation, self.theme, width, height)
        )

    def handle_key(self, key: str) -> bool:
        """Apply the command bound to a key and redraw.

        Args:
            key: Character typed by the user. Unbound keys only trigger a redraw.

        Returns:
            False if the key asks to quit, True otherwise.
        """
        match key:
            case "q":
                self._overlay.cancel()
                return False
            case "h":
                self._overlay.cancel()
                self._presentation.prev()
                self.render()
            case "l":
                self._overlay.cancel()
                self._presentation.next()
                self.render()
            case "t":
                self._presentation.cycle_theme()
                self.render()
                theme = self.theme
                _logger.debug("Switched to theme %s", theme.get_name())
                self._overlay.show(theme.get_name(), theme.resolve(Role.TEXT))
            case _:
                self.render()
        return True

    def run(self) -> None:
        """Present until the quit key is pressed or the input is exhausted."""
        with deferred_logging(), self._terminal.session():
            try:
                self.render()
                for key in self._terminal.keys():
                    if not self.handle_key(key):
                        break
            finally:
                self._overlay.close()

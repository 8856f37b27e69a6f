"""Lay a slide out as a list of positioned writes.

Nothing here touches the terminal: [`LayoutRenderer.render`]\
[mdeck.components.layout.LayoutRenderer.render] only depends on its arguments and
produces [`Operation`][mdeck.models.Operation]s that a terminal applies afterwards.
The screen is organized as follows:

- row 1: title, centered
- row 2: subtitle, centered
- from `body_row`: the slide, one row per line of the source
- row `height - 1`: slide counter, centered
- row `height`: progress bar
"""

from collections.abc import Iterator
from logging import getLogger
from pathlib import Path

from ..configuring.settings import Settings
from ..models import (
    ClearScreen,
    CodeBlock,
    CodeFence,
    DefaultColor,
    DrawImage,
    Heading,
    ImageDirective,
    MoveTo,
    Operation,
    Paint,
    PlainText,
    Presentation,
    ResetStyle,
    Rgb,
    Role,
    SetBold,
    SetPaint,
    TokenKind,
    Write,
)
from ..utils import centering_padding
from .classifying import LineClassifier
from .highlighting import SyntaxHighlighter, merge_tokens, tokens_for_line
from .themes import Theme

_logger = getLogger(__name__)

HEADING_ROLES = {1: Role.PRIMARY, 2: Role.SECONDARY, 3: Role.TERTIARY, 4: Role.ACCENT}

THEMED_KINDS = {
    TokenKind.KEYWORD: Role.PRIMARY,
    TokenKind.FUNCTION: Role.SECONDARY,
    TokenKind.TYPE: Role.TERTIARY,
    TokenKind.VARIABLE: Role.TEXT,
    TokenKind.DEFAULT: Role.TEXT,
}

# These kinds have no role, so they keep the same color whatever the theme.
FIXED_KIND_COLORS = {
    TokenKind.STRING: Rgb.from_hex("#a6e3a1"),
    TokenKind.NUMBER: Rgb.from_hex("#fab387"),
    TokenKind.COMMENT: Rgb.from_hex("#7f849c"),
    TokenKind.PARAMETER: Rgb.from_hex("#eba0ac"),
    TokenKind.OPERATOR: Rgb.from_hex("#89dceb"),
    TokenKind.CONSTANT: Rgb.from_hex("#f9e2af"),
    TokenKind.CONDITIONAL: Rgb.from_hex("#cba6f7"),
    TokenKind.REPEAT: Rgb.from_hex("#cba6f7"),
    TokenKind.BRACKET: Rgb.from_hex("#9399b2"),
    TokenKind.DELIMITER: Rgb.from_hex("#9399b2"),
}

WARNING_COLOR = Rgb.from_hex("#f38ba8")


def kind_paint(kind: TokenKind | None, theme: Theme) -> Paint:
    if kind is None:
        return DefaultColor()
    if kind in THEMED_KINDS:
        return theme.resolve(THEMED_KINDS[kind])
    return FIXED_KIND_COLORS[kind]


def progress_length(width: int, index: int, total: int) -> int:
    """Number of filled cells of the progress bar, halves rounded up.

    Args:
        width: Width of the bar.
        index: 0-based index of the current slide.
        total: Number of slides.

    Returns:
        `round(width * (index + 1) / total)`, clamped to `[0, width]`.
    """
    if total <= 0 or width <= 0:
        return 0
    filled = (2 * width * (index + 1) + total) // (2 * total)
    return min(max(filled, 0), width)


def styled(
    column: int, row: int, text: str, paint: Paint, bold: bool = False
) -> list[Operation]:
    return [
        MoveTo(column, row),
        SetBold(bold),
        SetPaint(paint),
        Write(text),
        ResetStyle(),
    ]


def centered(
    row: int, width: int, text: str, paint: Paint, bold: bool = False
) -> list[Operation]:
    return styled(1 + centering_padding(text, width), row, text, paint, bold)


class LayoutRenderer:
    def __init__(self, highlighter: SyntaxHighlighter, settings: Settings) -> None:
        self._highlighter = highlighter
        self._settings = settings

    def render(
        self, presentation: Presentation, theme: Theme, width: int, height: int
    ) -> list[Operation]:
        """Lay out the current slide of a presentation.

        Args:
            presentation: Presentation whose current slide is rendered.
            theme: Theme resolving the colors.
            width: Width of the terminal.
            height: Height of the terminal.

        Returns:
            The writes reproducing the whole screen, starting with a clear.
        """
        width, height = max(width, 1), max(height, 1)
        operations: list[Operation] = [ClearScreen(), MoveTo(1, 1)]
        operations.extend(self._header(presentation, theme, width))
        operations.extend(self._body(presentation, theme, width, height))
        operations.extend(self._footer(presentation, theme, width, height))
        return operations

    def _header(
        self, presentation: Presentation, theme: Theme, width: int
    ) -> Iterator[Operation]:
        metadata = presentation.metadata
        title = metadata.title or self._settings.title_placeholder
        subtitle = metadata.subtitle or self._settings.subtitle_placeholder
        yield from centered(1, width, title, theme.resolve(Role.PRIMARY), bold=True)
        if subtitle:
            yield from centered(2, width, subtitle, theme.resolve(Role.SECONDARY))

    def _body(
        self, presentation: Presentation, theme: Theme, width: int, height: int
    ) -> Iterator[Operation]:
        last_row = max(height - 2, 1)
        classifier = LineClassifier(presentation.base_dir)
        for element in classifier.iter_classify(presentation.current_slide):
            row = self._settings.body_row + element.line
            if row > last_row:
                _logger.debug("Slide does not fit, dropping lines from row %d", row)
                return
            match element:
                case Heading(level=level, text=text):
                    paint = theme.resolve(HEADING_ROLES[level])
                    yield from styled(1, row, text, paint, bold=True)
                case PlainText(text=text):
                    yield from styled(1, row, text, DefaultColor(), bold=True)
                case CodeFence(block=block):
                    yield from self._code_block(block, row, last_row, theme)
                case ImageDirective(path=path):
                    yield from self._image(path, row, width, height)

    def _code_block(
        self, block: CodeBlock, row: int, last_row: int, theme: Theme
    ) -> Iterator[Operation]:
        if block.language:
            label_paint = theme.resolve(Role.PRIMARY)
            yield from styled(1, row, block.language, label_paint, bold=True)
        tokens = self._highlighter.highlight(block.content, block.language)
        line_start = 0
        lines = block.content.split("\n") if block.content else []
        for line_row, line in enumerate(lines, start=row + 1):
            if line_row > last_row:
                return
            yield MoveTo(1, line_row)
            line_tokens = tokens_for_line(tokens, line_start, len(line))
            for segment in merge_tokens(line, line_tokens):
                yield SetPaint(kind_paint(segment.kind, theme))
                yield Write(segment.text)
            yield ResetStyle()
            line_start += len(line) + 1

    def _image(
        self, path: Path, row: int, width: int, height: int
    ) -> Iterator[Operation]:
        if not path.is_file():
            _logger.warning("Image %s does not exist", path)
            yield from styled(1, row, f"[missing image: {path}]", WARNING_COLOR)
            return
        yield MoveTo(1, row)
        yield DrawImage(path, max_width=width, max_height=max(height - 1 - row, 1))

    def _footer(
        self, presentation: Presentation, theme: Theme, width: int, height: int
    ) -> Iterator[Operation]:
        accent = theme.resolve(Role.ACCENT)
        total = len(presentation.slides)
        counter = f"{presentation.slide_index + 1}/{total} slides"
        yield from centered(max(height - 1, 1), width, counter, accent)
        filled = progress_length(width, presentation.slide_index, total)
        yield MoveTo(1, height)
        yield SetPaint(accent)
        yield Write(self._settings.progress_glyph * filled)
        yield ResetStyle()
        yield Write(" " * (width - filled))

"""Print images in the terminal with half-block characters."""

from logging import getLogger
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from .protocols import ImagePrinterProtocol

_logger = getLogger(__name__)

_UPPER_HALF_BLOCK = "▀"


def _fg(pixel: tuple[int, int, int]) -> str:
    return f"\x1b[38;2;{pixel[0]};{pixel[1]};{pixel[2]}m"


def _bg(pixel: tuple[int, int, int]) -> str:
    return f"\x1b[48;2;{pixel[0]};{pixel[1]};{pixel[2]}m"


class HalfBlockImagePrinter(ImagePrinterProtocol):
    """Draw two vertical pixels per cell: the top one as foreground of `▀`, the \
    bottom one as its background."""

    def print_image(self, path: Path, max_width: int, max_height: int) -> str:
        try:
            with Image.open(path) as image:
                rgb = image.convert("RGB")
        except (OSError, UnidentifiedImageError) as e:
            _logger.warning("Cannot display image %s: %s", path, e)
            return f"[unreadable image: {path}]"
        width, height = rgb.size
        scale = min(max_width / width, 2 * max_height / height, 1.0)
        size = (max(int(width * scale), 1), max(int(height * scale), 1))
        rgb = rgb.resize(size, Image.Resampling.LANCZOS)
        pixels = rgb.load()
        if pixels is None:
            _logger.warning("Cannot read the pixels of image %s", path)
            return f"[unreadable image: {path}]"

        rows = []
        for y in range(0, size[1], 2):
            cells = []
            for x in range(size[0]):
                top = _fg(pixels[x, y])
                bottom = _bg(pixels[x, y + 1]) if y + 1 < size[1] else "\x1b[49m"
                cells.append(f"{top}{bottom}{_UPPER_HALF_BLOCK}")
            rows.append("".join(cells) + "\x1b[0m")
        return "\r\n".join(rows)

"""ANSI terminal driver."""

from codecs import getincrementaldecoder
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from logging import getLogger
from os import read as os_read
from shutil import get_terminal_size
from sys import stdin, stdout
from threading import Lock
from typing import TextIO

from ..models import (
    ClearScreen,
    DefaultColor,
    DrawImage,
    MoveTo,
    Operation,
    ResetStyle,
    Rgb,
    SetBold,
    SetPaint,
    Write,
)
from .protocols import ImagePrinterProtocol, TerminalProtocol

_logger = getLogger(__name__)

_CSI = "\x1b["
_ENTER_SCREEN = f"{_CSI}?1049h{_CSI}?25l"
_LEAVE_SCREEN = f"{_CSI}0m{_CSI}?25h{_CSI}?1049l"


def encode(operation: Operation, image_printer: ImagePrinterProtocol) -> str:
    """Translate an operation into the escape sequences performing it."""
    match operation:
        case ClearScreen():
            return f"{_CSI}2J"
        case MoveTo(column=column, row=row):
            return f"{_CSI}{max(row, 1)};{max(column, 1)}H"
        case SetPaint(paint=Rgb(red=red, green=green, blue=blue)):
            return f"{_CSI}38;2;{red};{green};{blue}m"
        case SetPaint(paint=DefaultColor()):
            return f"{_CSI}39m"
        case SetBold(bold=bold):
            return f"{_CSI}1m" if bold else f"{_CSI}22m"
        case ResetStyle():
            return f"{_CSI}0m"
        case Write(text=text):
            return text
        case DrawImage(path=path, max_width=max_width, max_height=max_height):
            return image_printer.print_image(path, max_width, max_height)
    msg = f"unknown operation {operation!r}"
    raise TypeError(msg)


class AnsiTerminal(TerminalProtocol):
    """Terminal writing ANSI escape sequences to a text stream.

    Every batch of operations is written while holding a lock, so the render loop \
    and the notification timer never interleave their output.
    """

    def __init__(
        self,
        image_printer: ImagePrinterProtocol,
        output: TextIO = stdout,
        input_stream: TextIO = stdin,
    ) -> None:
        self._image_printer = image_printer
        self._output = output
        self._input = input_stream
        self._lock = Lock()

    def size(self) -> tuple[int, int]:
        columns, lines = get_terminal_size()
        return columns, lines

    def apply(self, operations: Sequence[Operation]) -> None:
        encoded = "".join(encode(op, self._image_printer) for op in operations)
        with self._lock:
            self._output.write(encoded)
            self._output.flush()

    def keys(self) -> Iterator[str]:
        decoder = getincrementaldecoder("utf8")(errors="replace")
        fd = self._input.fileno()
        while data := os_read(fd, 1):
            yield from decoder.decode(data)

    @contextmanager
    def session(self) -> Iterator[None]:
        """Switch to the alternate screen in raw mode, restoring everything on exit."""
        from termios import TCSADRAIN, tcgetattr, tcsetattr
        from tty import setraw

        fd = self._input.fileno()
        saved = tcgetattr(fd)
        _logger.debug("Entering raw mode")
        try:
            setraw(fd)
            with self._lock:
                self._output.write(_ENTER_SCREEN)
                self._output.flush()
            yield
        finally:
            with self._lock:
                self._output.write(_LEAVE_SCREEN)
                self._output.flush()
            tcsetattr(fd, TCSADRAIN, saved)
            _logger.debug("Restored terminal mode")

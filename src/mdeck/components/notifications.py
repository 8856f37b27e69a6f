"""Transient message shown in the top-right corner of the screen."""

from logging import getLogger
from threading import Lock, Timer, current_thread

from rich.cells import cell_len

from ..models import MoveTo, Operation, ResetStyle, Rgb, SetPaint, Write
from .protocols import TerminalProtocol

_logger = getLogger(__name__)


def notification_operations(message: str, color: Rgb, width: int) -> list[Operation]:
    return [
        MoveTo(max(width - cell_len(message) + 1, 1), 1),
        SetPaint(color),
        Write(message),
        ResetStyle(),
    ]


def clear_operations(message: str, width: int) -> list[Operation]:
    length = cell_len(message)
    return [MoveTo(max(width - length + 1, 1), 1), ResetStyle(), Write(" " * length)]


class NotificationOverlay:
    """Show a message and blank it again after a delay.

    At most one clear is pending at any time. Showing a new message, or calling \
    [`cancel`][mdeck.components.notifications.NotificationOverlay.cancel], cancels \
    the previous one so that a stale clear never blanks a region that was redrawn \
    since. The clear runs on a timer thread and writes through the same terminal as \
    the render loop, which serializes both writers.
    """

    def __init__(self, terminal: TerminalProtocol, delay: float) -> None:
        self._terminal = terminal
        self._delay = delay
        self._lock = Lock()
        self._timer: Timer | None = None

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def show(self, message: str, color: Rgb) -> None:
        width, _ = self._terminal.size()
        with self._lock:
            self._cancel_timer()
            self._terminal.apply(notification_operations(message, color, width))
            timer = Timer(self._delay, self._clear, args=(message, width))
            timer.daemon = True
            self._timer = timer
            timer.start()

    def cancel(self) -> None:
        with self._lock:
            self._cancel_timer()

    def close(self) -> None:
        """Cancel the pending clear and wait for its thread to finish."""
        with self._lock:
            timer = self._cancel_timer()
        if timer is not None:
            timer.join()

    def _cancel_timer(self) -> Timer | None:
        timer, self._timer = self._timer, None
        if timer is not None:
            timer.cancel()
        return timer

    def _clear(self, message: str, width: int) -> None:
        with self._lock:
            if self._timer is not current_thread():
                return
            self._timer = None
            _logger.debug("Clearing notification %r", message)
            self._terminal.apply(clear_operations(message, width))

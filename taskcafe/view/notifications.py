import time
from dataclasses import dataclass
from typing import Callable, Optional

DEFAULT_DURATION = 3.0


@dataclass(frozen=True)
class Notification:
    message: str
    kind: str
    shown_at: float


class Notifier:
    """Holds at most one transient status message.

    A new message replaces the current one immediately; a message is gone once
    ``duration`` seconds have passed since it was shown.
    """

    def __init__(self, duration: float = DEFAULT_DURATION, clock: Callable[[], float] = time.monotonic):
        self.duration = duration
        self._clock = clock
        self._current: Optional[Notification] = None

    def notify(self, message: str, kind: str = "success") -> Notification:
        self._current = Notification(message=message, kind=kind, shown_at=self._clock())
        return self._current

    def success(self, message: str) -> Notification:
        return self.notify(message, "success")

    def error(self, message: str) -> Notification:
        return self.notify(message, "error")

    def current(self) -> Optional[Notification]:
        if self._current is None:
            return None
        if self._clock() - self._current.shown_at >= self.duration:
            self._current = None
        return self._current

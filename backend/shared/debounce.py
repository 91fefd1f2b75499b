import logging
import threading

from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class Debouncer:
    """Runs `fn` once input has been quiet for `delay` seconds."""

    def __init__(self, delay: float, fn: Callable[..., Any]):
        self.delay  = delay
        self.fn     = fn
        self._lock  = threading.Lock()
        self._timer: Optional[threading.Timer] = None

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def call(self, *args: Any) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()

            timer = threading.Timer(self.delay, self._fire, args=(args,))
            timer.daemon = True
            self._timer  = timer
            timer.start()

    def _fire(self, args: tuple) -> None:
        with self._lock:
            if self._timer is not threading.current_thread():
                return
            self._timer = None

        self.fn(*args)

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                logger.debug("Cancelled pending call to %s", getattr(self.fn, "__name__", self.fn))
            self._timer = None

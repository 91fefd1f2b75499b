import logging
import threading

from typing          import Callable, List, Optional
from shared.config   import settings
from shared.debounce import Debouncer
from shared.models   import AddressSuggestion

logger = logging.getLogger(__name__)

SearchFn = Callable[[str], List[AddressSuggestion]]
SelectFn = Callable[[str, Optional[AddressSuggestion]], None]


class AutocompleteSession:
    """
    Caller-owned state for one address input.

    Each `update` reschedules a lookup on the debouncer, so only the last
    value typed within `delay` seconds reaches `search`. Results that arrive
    for an input value the user has since changed, or after `close`, are
    dropped.

    `saved_value` is the address the caller last stored. `blur` only hands
    free text to `on_select` when it differs from it.
    """

    def __init__(self, search: SearchFn, on_select: SelectFn, delay: float = settings.DEBOUNCE_SECONDS, value: str = ""):
        self.search      = search
        self.on_select   = on_select
        self.input_value = value
        self.saved_value = value
        self.closed      = False
        self.suggestions : List[AddressSuggestion] = []
        self._lock       = threading.Lock()
        self._debouncer  = Debouncer(delay, self._run_search)

    def update(self, text: str) -> None:
        with self._lock:
            if self.closed:
                return
            self.input_value = text
        self._debouncer.call(text)

    def refresh(self) -> List[AddressSuggestion]:
        self._debouncer.cancel()
        self._run_search(self.input_value)
        return self.suggestions

    def _run_search(self, text: str) -> None:
        try:
            results = self.search(text)
        except Exception:
            logger.exception("Address search failed for %r", text)
            results = []

        with self._lock:
            if self.closed:
                logger.debug("Session closed, dropping suggestions for %r", text)
                return
            if text != self.input_value:
                logger.debug("Dropping stale suggestions for %r", text)
                return
            self.suggestions = list(results)

    def select(self, index: int) -> None:
        with self._lock:
            chosen = self.suggestions[index] if 0 <= index < len(self.suggestions) else None

        if chosen is None:
            self.commit()
            return

        self._debouncer.cancel()
        with self._lock:
            self.input_value = chosen.display_name
            self.suggestions = []

        self.on_select(chosen.display_name, chosen)

    def set_value(self, value: str) -> None:
        with self._lock:
            self.saved_value = value
            self.input_value = value

    def commit(self) -> None:
        self.on_select(self.input_value, None)

    def blur(self) -> None:
        if self.input_value != self.saved_value:
            self.commit()

    def dismiss(self) -> None:
        with self._lock:
            self.suggestions = []

    def close(self) -> None:
        with self._lock:
            self.closed = True
        self._debouncer.cancel()
        self.dismiss()

"""Result notifier: tells result consumers a filter state has settled."""

from typing import Callable, List

from config.logging_config import get_logger
from src.filters.state import FilterState

logger = get_logger("filters.notifier")

ResultCallback = Callable[[FilterState], None]


class ResultNotifier:
    """Fan-out of settled filter states to the listing consumers."""

    def __init__(self):
        self._subscribers: List[ResultCallback] = []
        self.notify_count = 0

    def subscribe(self, callback: ResultCallback) -> Callable[[], None]:
        """
        Register a consumer.

        Args:
            callback: Called with the full settled FilterState.

        Returns:
            A function that removes the subscription.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def notify(self, state: FilterState) -> None:
        """
        Deliver a settled state to every consumer.

        Runs on the debounce timer's thread, so a failing consumer is logged
        and the remaining consumers still receive the state.
        """
        self.notify_count += 1
        logger.debug(f"Notifying {len(self._subscribers)} consumer(s): {state.get_summary()}")

        for callback in list(self._subscribers):
            try:
                callback(state)
            except Exception:
                logger.exception(f"Result consumer {callback!r} failed")

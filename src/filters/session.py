"""Filter session: the single owner of the current FilterState.

Both filter surfaces (sidebar and mobile sheet) read from one session and
dispatch through it, so they can never hold diverging copies of the filters.
"""

from typing import Any, Callable, List, Optional, Union

from config.logging_config import get_logger
from src.filters import store
from src.filters.debounce import TimerFactory
from src.filters.facets import DEFAULT_CATALOG, FacetCatalog
from src.filters.notifier import ResultCallback, ResultNotifier
from src.filters.reconciler import Navigate, UrlReconciler
from src.filters.state import DEFAULT_FILTER_STATE, FilterState
from src.filters.url_params import QueryInput

logger = get_logger("filters.session")

StateListener = Callable[[FilterState], None]
Operation = Union[str, Callable[..., FilterState]]


def _discard_url(url: str) -> None:
    logger.debug(f"No navigator attached, dropping URL {url!r}")


class FilterSession:
    """Holds filter state and routes every update through the store operations."""

    def __init__(
        self,
        catalog: FacetCatalog = DEFAULT_CATALOG,
        reconciler: Optional[UrlReconciler] = None,
        navigate: Optional[Navigate] = None,
        path: str = "",
        notifier: Optional[ResultNotifier] = None,
        delay: Optional[float] = None,
        timer_factory: Optional[TimerFactory] = None,
    ):
        """
        Initialize a filter session.

        Args:
            catalog: Facet catalog that set-valued selections are validated against.
            reconciler: Prebuilt URL reconciler; built from the remaining
                arguments when omitted.
            navigate: URL replace callback for a new reconciler.
            path: Page path for a new reconciler.
            notifier: Result notifier for a new reconciler.
            delay: Debounce window in seconds for a new reconciler.
            timer_factory: Timer constructor for a new reconciler.
        """
        self.catalog = catalog
        self.reconciler = reconciler or UrlReconciler(
            navigate=navigate or _discard_url,
            path=path,
            notifier=notifier,
            delay=delay,
            timer_factory=timer_factory,
        )
        self._state: FilterState = DEFAULT_FILTER_STATE
        self._listeners: List[StateListener] = []

    @property
    def state(self) -> FilterState:
        """Current (possibly unsettled) filter state."""
        return self._state

    @property
    def notifier(self) -> ResultNotifier:
        return self.reconciler.notifier

    def hydrate(self, query: QueryInput) -> FilterState:
        """Initialize state from the incoming URL without writing it back."""
        self._state = self.reconciler.hydrate(query, self.catalog)
        return self._state

    def add_listener(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a callback for every state change (before settling).

        Returns:
            A function that removes the listener.
        """
        self._listeners.append(listener)

        def remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    def on_settled(self, callback: ResultCallback) -> Callable[[], None]:
        """Subscribe a result consumer to settled states."""
        return self.notifier.subscribe(callback)

    def dispatch(self, operation: Operation, *args: Any) -> FilterState:
        """
        Apply a store operation to the current state.

        Args:
            operation: Operation name from ``store.OPERATIONS`` or a callable
                ``op(state, *args) -> FilterState``.
            *args: Operation arguments.

        Returns:
            The resulting state (the current one if nothing changed).
        """
        if callable(operation):
            func = operation
            kwargs = {}
        else:
            func = store.OPERATIONS.get(operation)
            if func is None:
                logger.warning(f"Ignoring unknown filter operation: {operation!r}")
                return self._state
            kwargs = {"catalog": self.catalog} if operation in store.CATALOG_OPERATIONS else {}

        try:
            new_state = func(self._state, *args, **kwargs)
        except TypeError as e:
            logger.warning(f"Ignoring malformed call to {operation!r}: {e}")
            return self._state

        if new_state is self._state or new_state == self._state:
            return self._state

        self._state = new_state
        self.reconciler.state_changed(new_state)
        for listener in list(self._listeners):
            try:
                listener(new_state)
            except Exception:
                logger.exception(f"Filter listener {listener!r} failed")
        return new_state

    def set_genre(self, genre_id: str, included: bool) -> FilterState:
        return self.dispatch("set_genre", genre_id, included)

    def set_platform(self, platform_id: str, included: bool) -> FilterState:
        return self.dispatch("set_platform", platform_id, included)

    def set_publisher(self, publisher_id: str, included: bool) -> FilterState:
        return self.dispatch("set_publisher", publisher_id, included)

    def set_price_range(self, low: Any, high: Any) -> FilterState:
        return self.dispatch("set_price_range", low, high)

    def set_rating(self, value: Any) -> FilterState:
        return self.dispatch("set_rating", value)

    def set_release_year(self, value: Any) -> FilterState:
        return self.dispatch("set_release_year", value)

    def set_sort_by(self, value: Any) -> FilterState:
        return self.dispatch("set_sort_by", value)

    def set_search(self, text: Any) -> FilterState:
        return self.dispatch("set_search", text)

    def set_on_sale(self, on_sale: Any) -> FilterState:
        return self.dispatch("set_on_sale", on_sale)

    def reset(self) -> FilterState:
        return self.dispatch("reset")

    def poll(self) -> bool:
        """Settle if the debounce window has elapsed (polled timers only)."""
        return self.reconciler.poll()

    def flush(self) -> bool:
        """Settle the pending state now."""
        return self.reconciler.flush()

    def teardown(self) -> None:
        """Cancel pending work when the page goes away."""
        self.reconciler.teardown()
        self._listeners.clear()

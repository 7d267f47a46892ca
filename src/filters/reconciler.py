"""URL reconciler: two-way mapping between FilterState and the page URL.

Ordering rules:

1. ``hydrate`` parses the incoming URL exactly once, before first paint. It
   sets an explicit ``hydrated`` flag and never writes the URL back.
2. Every later change restarts a debounce window. Only the state present when
   the window elapses is written, so dragging a slider produces one write.
3. A candidate URL equal to the last written one is skipped, which also
   suppresses the write when a change is reverted inside the window.
4. The navigate callback must replace the current history entry without
   scrolling, keeping one history entry per filter session.

The result notifier is called from the same settled tick as the URL write, so
the rendered results and the visible URL always describe one snapshot.
"""

from typing import Callable, Optional

from config import config
from config.logging_config import get_logger
from src.filters.debounce import Debouncer, TimerFactory
from src.filters.facets import DEFAULT_CATALOG, FacetCatalog
from src.filters.notifier import ResultNotifier
from src.filters.state import DEFAULT_FILTER_STATE, FilterState
from src.filters.url_params import QueryInput, build_url, from_query, has_filter_params

logger = get_logger("filters.reconciler")

Navigate = Callable[[str], None]


class UrlReconciler:
    """Keeps the URL and the result consumers in step with filter state."""

    def __init__(
        self,
        navigate: Navigate,
        path: str = "",
        notifier: Optional[ResultNotifier] = None,
        delay: Optional[float] = None,
        timer_factory: Optional[TimerFactory] = None,
    ):
        """
        Initialize the reconciler.

        Args:
            navigate: Replaces the current URL (no new history entry, no scroll).
            path: Page path the query string is appended to.
            notifier: Result notifier invoked with each settled state.
            delay: Debounce window in seconds; defaults to configuration.
            timer_factory: Timer constructor for the debounce window.
        """
        self.navigate = navigate
        self.path = path
        self.notifier = notifier or ResultNotifier()
        self.delay = config.filters.debounce_seconds if delay is None else delay
        self._debouncer = Debouncer(self.delay, self._settle, timer_factory)
        self._hydrated = False
        self._torn_down = False
        self._initial_state: FilterState = DEFAULT_FILTER_STATE
        self.last_url: Optional[str] = None
        self.write_count = 0

    @property
    def hydrated(self) -> bool:
        """Check if the initial URL has been parsed."""
        return self._hydrated

    @property
    def pending(self) -> bool:
        """Check if a settled write is waiting on the debounce window."""
        return self._debouncer.pending

    def hydrate(self, query: QueryInput, catalog: Optional[FacetCatalog] = DEFAULT_CATALOG) -> FilterState:
        """
        Parse the incoming URL into the initial filter state.

        Runs once; later calls return the first result. Never schedules a
        URL write.

        Args:
            query: Current URL query parameters.
            catalog: Facet catalog to drop unknown ids against.

        Returns:
            Initial FilterState.
        """
        if self._hydrated:
            logger.debug("Ignoring repeated hydration")
            return self._initial_state

        state = from_query(query, catalog)
        self._initial_state = state
        self.last_url = build_url(state, self.path)
        self._hydrated = True

        if has_filter_params(query):
            logger.info(f"Hydrated filters from URL: {state.get_summary()}")
        else:
            logger.debug("Hydrated default filters")
        return state

    def state_changed(self, state: FilterState) -> None:
        """
        Restart the debounce window for a new state.

        Ignored before hydration, so the mount-time parse cannot echo back
        into the URL, and after teardown.
        """
        if not self._hydrated:
            logger.debug("Ignoring state change before hydration")
            return
        if self._torn_down:
            logger.debug("Ignoring state change after teardown")
            return
        self._debouncer.call(state)

    def poll(self) -> bool:
        """Settle now if a polled debounce timer is due."""
        return self._debouncer.poll()

    def flush(self) -> bool:
        """Settle the pending state immediately."""
        return self._debouncer.flush()

    def teardown(self) -> None:
        """Cancel any pending write; the view is going away."""
        self._torn_down = True
        self._debouncer.cancel()

    def _settle(self, state: FilterState) -> None:
        if self._torn_down:
            return

        url = build_url(state, self.path)
        if url == self.last_url:
            logger.debug(f"Skipping unchanged URL: {url!r}")
            return

        self.last_url = url
        self.write_count += 1
        logger.info(f"Filters settled, replacing URL: {url!r}")
        self.navigate(url)
        self.notifier.notify(state)

"""State and interactions of the mod listing view."""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from mindustry_mods.domain.mod import Mod, SortDirective, STARS_ASCENDING, STARS_DESCENDING

logger = logging.getLogger(__name__)


@dataclass
class ViewState:
    """Current listing order, remembered sort directive and last load failure."""

    mods: List[Mod] = field(default_factory=list)
    sort: Optional[SortDirective] = None
    error: Optional[Exception] = None


@dataclass(frozen=True)
class LoadResult:
    """Outcome of one listing fetch: either mods or the failure."""

    mods: Optional[Sequence[Mod]] = None
    error: Optional[Exception] = None

    def __post_init__(self):
        if (self.mods is None) == (self.error is None):
            raise ValueError("LoadResult needs exactly one of mods or error")

    @classmethod
    def success(cls, mods: Sequence[Mod]) -> "LoadResult":
        return cls(mods=list(mods))

    @classmethod
    def failure(cls, error: Exception) -> "LoadResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None


class ListingController:
    """Owns the ViewState and applies data loads and sort toggles to it."""

    def __init__(self, state: Optional[ViewState] = None):
        self._state = state if state is not None else ViewState()
        self._subscribers: List[Callable[[ViewState], None]] = []

    @property
    def state(self) -> ViewState:
        return self._state

    def subscribe(self, callback: Callable[[ViewState], None]):
        """Register a re-render callback, called after every state change."""
        self._subscribers.append(callback)

    def _notify(self):
        for callback in self._subscribers:
            callback(self._state)

    def mount(self, load: Callable[[], Sequence[Mod]]) -> LoadResult:
        """
        Run the initial fetch and dispatch its single outcome.

        Args:
            load: Zero-argument loader returning the mods

        Returns:
            The LoadResult handed to on_data_loaded
        """
        try:
            result = LoadResult.success(load())
        except Exception as e:
            result = LoadResult.failure(e)
        self.on_data_loaded(result)
        return result

    def on_data_loaded(self, result: LoadResult):
        """Replace the listing on success; keep it and record the error on failure."""
        if result.ok:
            self._state.mods = list(result.mods)
            self._state.error = None
            logger.info(f"Listing loaded with {len(self._state.mods)} mods")
        else:
            self._state.error = result.error
            logger.error(f"Listing failed to load: {result.error}")
        self._notify()

    def on_sort_stars_toggle(self):
        """
        Sort by stars ascending, then reverse if the listing was already ascending.

        Unset and descending both lead to ascending; only ascending leads to descending.
        """
        self._state.mods.sort(key=lambda mod: mod.stars)
        if self._state.sort == STARS_ASCENDING:
            self._state.mods.reverse()
            self._state.sort = STARS_DESCENDING
        else:
            self._state.sort = STARS_ASCENDING
        self._notify()

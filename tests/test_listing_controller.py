"""
Tests for the listing view state, data loading and the stars sort toggle.
"""
import pytest

from mindustry_mods.application.listing_controller import ListingController, LoadResult, ViewState
from mindustry_mods.domain.mod import STARS_ASCENDING, STARS_DESCENDING

from conftest import make_mod


def names(controller):
    return [m.name for m in controller.state.mods]


def stars(controller):
    return [m.stars for m in controller.state.mods]


@pytest.fixture
def mods():
    return [
        make_mod(name="a", stars=5),
        make_mod(name="b", stars=1),
        make_mod(name="c", stars=5),
        make_mod(name="d", stars=3),
        make_mod(name="e", stars=1),
    ]


@pytest.fixture
def controller(mods):
    controller = ListingController()
    controller.on_data_loaded(LoadResult.success(mods))
    return controller


class TestDataLoading:

    def test_initial_state(self):
        controller = ListingController()
        assert controller.state.mods == []
        assert controller.state.sort is None
        assert controller.state.error is None

    def test_success_keeps_server_order(self, controller):
        assert names(controller) == ["a", "b", "c", "d", "e"]
        assert controller.state.sort is None

    def test_success_leaves_sort_directive(self, controller, mods):
        controller.on_sort_stars_toggle()
        controller.on_data_loaded(LoadResult.success(list(reversed(mods))))
        assert names(controller) == ["e", "d", "c", "b", "a"]
        assert controller.state.sort == STARS_ASCENDING

    def test_failure_on_first_load_leaves_empty(self):
        controller = ListingController()
        error = ConnectionError("offline")
        controller.on_data_loaded(LoadResult.failure(error))
        assert controller.state.mods == []
        assert controller.state.error is error

    def test_failure_keeps_previous_listing(self, controller):
        controller.on_data_loaded(LoadResult.failure(ValueError("bad json")))
        assert names(controller) == ["a", "b", "c", "d", "e"]

    def test_success_clears_previous_error(self, controller, mods):
        controller.on_data_loaded(LoadResult.failure(ValueError("bad json")))
        controller.on_data_loaded(LoadResult.success(mods))
        assert controller.state.error is None

    def test_loaded_sequence_is_copied(self, mods):
        controller = ListingController()
        controller.on_data_loaded(LoadResult.success(mods))
        controller.on_sort_stars_toggle()
        assert [m.name for m in mods] == ["a", "b", "c", "d", "e"]


class TestMount:

    def test_mount_calls_loader_once(self, mods):
        calls = []

        def load():
            calls.append(1)
            return mods

        controller = ListingController()
        result = controller.mount(load)

        assert result.ok
        assert len(calls) == 1
        assert names(controller) == ["a", "b", "c", "d", "e"]

    def test_mount_turns_exception_into_failure(self):
        error = RuntimeError("boom")

        def load():
            raise error

        controller = ListingController()
        result = controller.mount(load)

        assert not result.ok
        assert result.error is error
        assert controller.state.error is error


class TestSortStarsToggle:

    def test_first_toggle_sorts_ascending_and_is_stable(self, controller):
        controller.on_sort_stars_toggle()
        assert names(controller) == ["b", "e", "d", "a", "c"]
        assert controller.state.sort == STARS_ASCENDING

    def test_second_toggle_sorts_descending(self, controller):
        controller.on_sort_stars_toggle()
        controller.on_sort_stars_toggle()
        assert [m.stars for m in controller.state.mods] == [5, 5, 3, 1, 1]
        assert controller.state.sort == STARS_DESCENDING

    def test_third_toggle_returns_to_ascending(self, controller):
        for _ in range(3):
            controller.on_sort_stars_toggle()
        assert [m.stars for m in controller.state.mods] == [1, 1, 3, 5, 5]
        assert controller.state.sort == STARS_ASCENDING

    def test_toggle_is_periodic_after_first_call(self, controller):
        controller.on_sort_stars_toggle()
        ascending = stars(controller)
        controller.on_sort_stars_toggle()
        descending = stars(controller)
        assert descending == list(reversed(ascending))
        for _ in range(3):
            controller.on_sort_stars_toggle()
            assert stars(controller) == ascending
            controller.on_sort_stars_toggle()
            assert stars(controller) == descending

    def test_toggle_from_descending_gives_ascending(self, mods):
        state = ViewState(mods=list(mods), sort=STARS_DESCENDING)
        controller = ListingController(state)
        controller.on_sort_stars_toggle()
        assert [m.stars for m in controller.state.mods] == [1, 1, 3, 5, 5]
        assert controller.state.sort == STARS_ASCENDING

    def test_toggle_on_empty_listing(self):
        controller = ListingController()
        controller.on_sort_stars_toggle()
        assert controller.state.mods == []
        assert controller.state.sort == STARS_ASCENDING


class TestSubscribers:

    def test_notified_on_every_change(self, mods):
        seen = []
        controller = ListingController()
        controller.subscribe(lambda state: seen.append([m.name for m in state.mods]))

        controller.on_data_loaded(LoadResult.success(mods))
        controller.on_sort_stars_toggle()
        controller.on_data_loaded(LoadResult.failure(OSError("gone")))

        assert seen == [
            ["a", "b", "c", "d", "e"],
            ["b", "e", "d", "a", "c"],
            ["b", "e", "d", "a", "c"],
        ]

    def test_controllers_do_not_share_state(self, mods):
        first = ListingController()
        second = ListingController()
        first.on_data_loaded(LoadResult.success(mods))
        assert second.state.mods == []


class TestLoadResult:

    def test_requires_mods_or_error(self):
        with pytest.raises(ValueError):
            LoadResult()

    def test_rejects_both_mods_and_error(self):
        with pytest.raises(ValueError):
            LoadResult(mods=[], error=RuntimeError("boom"))

    def test_empty_listing_is_a_success(self):
        assert LoadResult.success([]).ok

    def test_mount_with_loader_returning_none_fails(self):
        controller = ListingController()
        result = controller.mount(lambda: None)
        assert not result.ok
        assert isinstance(result.error, TypeError)
        assert controller.state.mods == []

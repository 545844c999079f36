"""
Unit tests for PublicBrowseController: public scoping, category selection
and favorite toggling.
"""
from datetime import datetime, timezone

import pytest
from eventboard.application.controllers.public_browse_controller import (
    MSG_LOAD_FAILED,
    PublicBrowseController,
)
from eventboard.application.dto.event_dto import NoticeKind
from eventboard.application.state.catalog_state import CatalogState
from eventboard.application.use_cases.catalog.compose_query import QueryComposer
from eventboard.application.use_cases.catalog.load_catalog import CatalogLoader
from eventboard.application.use_cases.favorites.toggle_favorite import FavoriteReconciler
from eventboard.domain.constants import EventFields

COLLECTION = "events"


def _build(store, session) -> PublicBrowseController:
    state = CatalogState()
    return PublicBrowseController(
        session_provider=session,
        state=state,
        query_composer=QueryComposer(COLLECTION),
        catalog_loader=CatalogLoader(store, state),
        favorite_reconciler=FavoriteReconciler(store, session, state, COLLECTION),
    )


@pytest.fixture
def seeded_store(store, make_document):
    store.seed(COLLECTION, "A", make_document(
        "Jazz night", owner_id="user-2", category="Music", favorited_by=["user-1"],
        created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
    ))
    store.seed(COLLECTION, "B", make_document(
        "Private match", owner_id="user-2", category="Sports", is_private=True,
        created_at=datetime(2025, 1, 2, tzinfo=timezone.utc),
    ))
    store.seed(COLLECTION, "C", make_document(
        "Open mic", owner_id="user-1", category="Social",
        created_at=datetime(2025, 1, 3, tzinfo=timezone.utc),
    ))
    return store


@pytest.fixture
def controller(seeded_store, session):
    return _build(seeded_store, session)


class TestBrowse:
    """Only non-private events are listed"""

    @pytest.mark.asyncio
    async def test_music_filter_returns_public_music(self, controller):
        events = await controller.select_category("Music")
        assert [e.id for e in events] == ["A"]

    @pytest.mark.asyncio
    async def test_sports_filter_hides_private_event(self, controller):
        assert await controller.select_category("Sports") == []

    @pytest.mark.asyncio
    async def test_all_returns_every_public_event(self, controller):
        await controller.select_category("Music")
        events = await controller.select_category("All")
        assert [e.id for e in events] == ["C", "A"]
        assert all(not e.is_private for e in events)

    @pytest.mark.asyncio
    async def test_public_events_of_every_owner_are_listed(self, controller):
        events = await controller.mount()
        assert {e.owner_id for e in events} == {"user-1", "user-2"}

    @pytest.mark.asyncio
    async def test_query_excludes_private_events_at_store(self, controller, seeded_store):
        await controller.mount()
        (_, _, predicates, order_by) = seeded_store.calls_of("query")[0]
        assert any(p.field == EventFields.IS_PRIVATE and p.value is False for p in predicates)
        assert order_by.field == EventFields.CREATED_AT

    @pytest.mark.asyncio
    async def test_signed_out_issues_no_query(self, seeded_store, signed_out_session):
        controller = _build(seeded_store, signed_out_session)

        assert await controller.mount() is None
        assert await controller.select_category("Music") is None
        assert seeded_store.calls_of("query") == []
        assert controller.state.events == []

    @pytest.mark.asyncio
    async def test_load_failure_sets_notice(self, controller, seeded_store):
        await controller.mount()
        seeded_store.fail("query")

        assert await controller.select_category("Music") is None
        assert controller.state.notice.kind == NoticeKind.ERROR
        assert controller.state.notice.message == MSG_LOAD_FAILED
        assert len(controller.state.events) == 2

    @pytest.mark.asyncio
    async def test_unknown_category_is_reported_as_load_failure(self, controller, seeded_store):
        assert await controller.select_category("Cooking") is None
        assert controller.state.notice.message == MSG_LOAD_FAILED
        assert seeded_store.calls_of("query") == []


class TestFavorites:
    """Favorite bits follow the mirror and the toggle intent"""

    @pytest.mark.asyncio
    async def test_favorites_refreshed_after_load(self, controller):
        await controller.mount()
        assert controller.is_favorite("A")
        assert not controller.is_favorite("C")
        assert controller.favorite_count("A") == 1

    @pytest.mark.asyncio
    async def test_toggle_flips_bit(self, controller, seeded_store):
        await controller.mount()

        assert await controller.toggle_favorite("C") is True
        assert controller.is_favorite("C")
        assert seeded_store.document(COLLECTION, "C")[EventFields.FAVORITED_BY] == ["user-1"]

        assert await controller.toggle_favorite("A") is False
        assert seeded_store.document(COLLECTION, "A")[EventFields.FAVORITED_BY] == []

    @pytest.mark.asyncio
    async def test_toggle_failure_is_silent_and_rolled_back(self, controller, seeded_store):
        await controller.mount()
        seeded_store.fail("patch")

        assert await controller.toggle_favorite("C") is None
        assert not controller.is_favorite("C")
        assert controller.state.notice is None

    @pytest.mark.asyncio
    async def test_toggle_signed_out_is_noop(self, seeded_store, signed_out_session):
        controller = _build(seeded_store, signed_out_session)
        assert await controller.toggle_favorite("A") is None
        assert seeded_store.calls_of("patch") == []


class TestSessionChanges:
    """The mirror follows the session"""

    @pytest.mark.asyncio
    async def test_sign_out_empties_list_and_favorites(self, seeded_store, session):
        controller = _build(seeded_store, session)
        await controller.mount()
        assert controller.state.events
        assert controller.state.favorite_ids == {"A"}

        session.sign_out()
        assert await controller.mount() is None

        assert controller.state.events == []
        assert controller.state.favorite_ids == set()
        assert len(seeded_store.calls_of("query")) == 1

    @pytest.mark.asyncio
    async def test_sign_in_again_reloads(self, seeded_store, session):
        controller = _build(seeded_store, session)
        session.sign_out()
        await controller.mount()

        session.sign_in("user-1")
        events = await controller.mount()

        assert [e.id for e in events] == ["C", "A"]
        assert controller.is_favorite("A")

    @pytest.mark.asyncio
    async def test_unknown_category_keeps_previous_filter(self, controller):
        await controller.select_category("Music")

        assert await controller.select_category("Cooking") is None
        assert controller.selected_category == "Music"

        events = await controller.mount()
        assert [e.id for e in events] == ["A"]

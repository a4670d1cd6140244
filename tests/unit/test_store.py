"""Unit tests for the store reducer and dispatch."""

import threading

from poker_tracker.schemas.commands import (
    AddFormat,
    AddPlayer,
    AddSession,
    AddStake,
    AddTableRating,
    DeletePlayer,
    DeleteSession,
    DeleteTableRating,
    LoadData,
    SetCurrentSession,
    UpdatePlayer,
    UpdateSession,
    UpdateTableRating,
)
from poker_tracker.schemas.domain import (
    AppState,
    GameFormat,
    PartialAppState,
    Stake,
    TableRating,
)
from poker_tracker.services.store import Store, initial_state, new_id, reduce


class TestInitialState:
    """Tests for the seeded state."""

    def test_seeds_six_stakes_and_two_formats(self):
        """Test that the pristine state carries the default stakes and formats."""
        state = initial_state()

        assert [s.name for s in state.stakes] == [
            ".2/.5/1 (.2 ante)",
            ".5/1/2 (.5 ante)",
            "1/2/4 (1 ante)",
            "2/4 (1 ante)",
            "5/10 (2 ante)",
            "10/20 (2 ante)",
        ]
        assert [f.name for f in state.formats] == ["HU with ante", "8-max with ante"]

    def test_has_no_user_data(self):
        """Test that the pristine state has no sessions, players or ratings."""
        state = initial_state()

        assert state.sessions == []
        assert state.players == []
        assert state.table_ratings == []
        assert state.current_session is None
        assert state.total_net == 0


class TestReduceSessions:
    """Tests for session commands."""

    def test_add_session_appends_exactly_one(self, make_session):
        """Test that ADD_SESSION grows the list by exactly the new session."""
        state = initial_state()
        session = make_session(id="abc")

        new_state = reduce(state, AddSession(payload=session))

        assert len(new_state.sessions) == len(state.sessions) + 1
        found = [s for s in new_state.sessions if s.id == "abc"]
        assert found == [session]

    def test_add_session_does_not_mutate_input(self, make_session):
        """Test that reducing leaves the previous state untouched."""
        state = initial_state()

        reduce(state, AddSession(payload=make_session()))

        assert state.sessions == []

    def test_add_keeps_insertion_order_not_date_order(self, make_session):
        """Test that sessions stay in the order they were added."""
        later = make_session(id="later", date=make_session().date.replace(day=20))
        earlier = make_session(id="earlier")
        state = reduce(initial_state(), AddSession(payload=later))
        state = reduce(state, AddSession(payload=earlier))

        assert [s.id for s in state.sessions] == ["later", "earlier"]

    def test_update_session_replaces_only_matching_id(self, make_session):
        """Test that UPDATE_SESSION swaps only the session with the same id."""
        first, second = make_session(id="a"), make_session(id="b")
        state = reduce(initial_state(), AddSession(payload=first))
        state = reduce(state, AddSession(payload=second))
        edited = first.model_copy(update={"account_end": 999.0})

        new_state = reduce(state, UpdateSession(payload=edited))

        assert new_state.sessions[0].account_end == 999.0
        assert new_state.sessions[1] == second

    def test_update_unknown_session_is_noop(self, make_session):
        """Test that updating a missing session changes nothing."""
        state = reduce(initial_state(), AddSession(payload=make_session(id="a")))

        new_state = reduce(state, UpdateSession(payload=make_session(id="missing")))

        assert new_state == state

    def test_delete_session_removes_match(self, make_session):
        """Test that DELETE_SESSION removes the session with that id."""
        state = reduce(initial_state(), AddSession(payload=make_session(id="a")))
        state = reduce(state, AddSession(payload=make_session(id="b")))

        new_state = reduce(state, DeleteSession(payload="a"))

        assert [s.id for s in new_state.sessions] == ["b"]

    def test_delete_unknown_session_is_noop(self, make_session):
        """Test that deleting a missing session changes nothing."""
        state = reduce(initial_state(), AddSession(payload=make_session(id="a")))

        new_state = reduce(state, DeleteSession(payload="missing"))

        assert new_state == state

    def test_set_current_session_leaves_list_alone(self, make_session):
        """Test that SET_CURRENT_SESSION only moves the current pointer."""
        session = make_session(is_active=True, end_time=None)

        state = reduce(initial_state(), SetCurrentSession(payload=session))

        assert state.current_session == session
        assert state.sessions == []

        cleared = reduce(state, SetCurrentSession(payload=None))
        assert cleared.current_session is None


class TestReducePlayers:
    """Tests for player commands."""

    def test_add_and_update_player(self, make_player):
        """Test that a player can be added and then renamed."""
        player = make_player(id="v1")
        state = reduce(initial_state(), AddPlayer(payload=player))

        renamed = player.model_copy(update={"name": "Renamed"})
        state = reduce(state, UpdatePlayer(payload=renamed))

        assert [p.name for p in state.players] == ["Renamed"]

    def test_update_unknown_player_is_noop(self, make_player):
        """Test that updating a missing player changes nothing."""
        state = reduce(initial_state(), AddPlayer(payload=make_player(id="v1")))

        new_state = reduce(state, UpdatePlayer(payload=make_player(id="nope")))

        assert new_state == state

    def test_delete_player_does_not_touch_table_ratings(self, make_player):
        """Test that deleting a player keeps it in existing rating snapshots."""
        player = make_player(id="v1")
        table = TableRating(id="t1", table_name="Table 7", players=[player], rating=4)
        state = reduce(initial_state(), AddPlayer(payload=player))
        state = reduce(state, AddTableRating(payload=table))

        state = reduce(state, DeletePlayer(payload="v1"))

        assert state.players == []
        assert state.table_ratings[0].players == [player]


class TestReduceReferenceData:
    """Tests for stake and format commands."""

    def test_add_stake_and_format_append(self):
        """Test that new stakes and formats are appended after the seeds."""
        state = reduce(
            initial_state(), AddStake(payload=Stake(id="7", name="25/50", format="HU"))
        )
        state = reduce(state, AddFormat(payload=GameFormat(id="3", name="6-max")))

        assert state.stakes[-1].name == "25/50"
        assert len(state.stakes) == 7
        assert state.formats[-1].name == "6-max"


class TestReduceTableRatings:
    """Tests for table rating commands."""

    def test_add_update_delete(self, make_player):
        """Test the full lifecycle of a table rating."""
        table = TableRating(id="t1", table_name="Table 7", players=[make_player()], rating=2)
        state = reduce(initial_state(), AddTableRating(payload=table))

        state = reduce(
            state, UpdateTableRating(payload=table.model_copy(update={"rating": 5}))
        )
        assert state.table_ratings[0].rating == 5

        state = reduce(state, DeleteTableRating(payload="t1"))
        assert state.table_ratings == []

    def test_snapshot_survives_player_edit(self, make_player):
        """Test that editing a player does not change a rating's snapshot."""
        player = make_player(id="v1", name="Original")
        table = TableRating(id="t1", table_name="Table 7", players=[player], rating=3)
        state = reduce(initial_state(), AddPlayer(payload=player))
        state = reduce(state, AddTableRating(payload=table))

        state = reduce(
            state, UpdatePlayer(payload=player.model_copy(update={"name": "Edited"}))
        )

        assert state.players[0].name == "Edited"
        assert state.table_ratings[0].players[0].name == "Original"


class TestReduceLoadData:
    """Tests for LOAD_DATA merging."""

    def test_merges_only_provided_fields(self, make_session):
        """Test that fields missing from the payload keep their current value."""
        session = make_session()
        partial = PartialAppState(sessions=[session])

        state = reduce(initial_state(), LoadData(payload=partial))

        assert state.sessions == [session]
        assert len(state.stakes) == 6
        assert len(state.formats) == 2

    def test_explicit_null_current_session_is_merged(self, make_session):
        """Test that an explicit null current session clears the pointer."""
        state = reduce(
            initial_state(), SetCurrentSession(payload=make_session(is_active=True))
        )

        state = reduce(state, LoadData(payload=PartialAppState(current_session=None)))

        assert state.current_session is None

    def test_replaces_lists_wholesale(self):
        """Test that a provided list replaces the current one entirely."""
        partial = PartialAppState(stakes=[Stake(id="x", name="only", format="HU")])

        state = reduce(initial_state(), LoadData(payload=partial))

        assert [s.name for s in state.stakes] == ["only"]


class TestStoreDispatch:
    """Tests for the Store wrapper."""

    def test_unknown_command_is_rejected_without_change(self):
        """Test that an unsupported command leaves the state as it was."""
        store = Store()
        before = store.state

        applied = store.dispatch({"type": "DELETE_EVERYTHING"})

        assert applied is False
        assert store.state is before

    def test_listeners_receive_new_state(self, make_session):
        """Test that subscribers are called with the state after the change."""
        store = Store()
        seen: list[AppState] = []
        store.subscribe(seen.append)

        store.dispatch(AddSession(payload=make_session()))

        assert len(seen) == 1
        assert seen[0] is store.state

    def test_noop_command_does_not_notify(self):
        """Test that a command that changes nothing notifies nobody."""
        store = Store()
        seen: list[AppState] = []
        store.subscribe(seen.append)

        assert store.dispatch(DeleteSession(payload="missing")) is True
        assert seen == []

    def test_unsubscribe_stops_notifications(self, make_session):
        """Test that an unsubscribed listener is no longer called."""
        store = Store()
        seen: list[AppState] = []
        unsubscribe = store.subscribe(seen.append)
        unsubscribe()

        store.dispatch(AddSession(payload=make_session()))

        assert seen == []

    def test_new_id_is_unique(self):
        """Test that generated ids do not repeat."""
        ids = {new_id() for _ in range(1000)}
        assert len(ids) == 1000


class TestTransaction:
    """Tests for Store.transaction."""

    def test_dispatch_inside_transaction(self, make_session):
        """Test that the holder of a transaction can dispatch several commands."""
        store = Store()
        session = make_session(is_active=True, end_time=None)

        with store.transaction() as state:
            assert state.current_session is None
            store.dispatch(AddSession(payload=session))
            store.dispatch(SetCurrentSession(payload=session))

        assert store.state.sessions == [session]
        assert store.state.current_session == session

    def test_other_threads_wait_for_transaction(self, make_session):
        """Test that a dispatch from another thread waits until the transaction ends."""
        store = Store()
        entered = threading.Event()
        release = threading.Event()

        def hold() -> None:
            with store.transaction():
                entered.set()
                release.wait(timeout=5)

        holder = threading.Thread(target=hold)
        holder.start()
        assert entered.wait(timeout=5)

        other = threading.Thread(
            target=store.dispatch, args=(AddSession(payload=make_session()),)
        )
        other.start()
        other.join(timeout=0.1)

        assert other.is_alive()
        assert store.state.sessions == []

        release.set()
        other.join(timeout=5)
        holder.join(timeout=5)
        assert len(store.state.sessions) == 1

"""Tests for the scoreboard view state."""

import pytest

from volley_stats.client.state import MAX_ACTIVE_CARDS, PlayerFormRow, ScoreboardState


def _state_with_players(count):
    state = ScoreboardState()
    state.replace_players({"id": i, "name": f"P{i}", "jersey_number": i} for i in range(1, count + 1))
    return state


class TestActiveCards:
    def test_activate_appends_in_order(self):
        state = _state_with_players(3)

        state.activate(2)
        state.activate(1)

        assert [p.id for p in state.active_players] == [2, 1]
        assert [p.id for p in state.available_players] == [3]

    def test_at_most_six_cards(self):
        state = _state_with_players(8)

        results = [state.activate(i) for i in range(1, 9)]

        assert results == [True] * MAX_ACTIVE_CARDS + [False, False]
        assert len(state.active_ids) == MAX_ACTIVE_CARDS

    def test_activate_ignores_unknown_and_duplicates(self):
        state = _state_with_players(2)
        state.activate(1)

        assert state.activate(1) is False
        assert state.activate(99) is False
        assert state.active_ids == [1]

    def test_move_left_and_right_swap_neighbours(self):
        state = _state_with_players(3)
        for i in (1, 2, 3):
            state.activate(i)

        state.move_left(3)
        assert state.active_ids == [1, 3, 2]
        state.move_right(1)
        assert state.active_ids == [3, 1, 2]

    def test_moves_at_the_edges_are_noops(self):
        state = _state_with_players(2)
        state.activate(1)
        state.activate(2)

        state.move_left(1)
        state.move_right(2)

        assert state.active_ids == [1, 2]

    def test_moving_a_player_without_a_card_is_a_noop(self):
        state = _state_with_players(3)
        state.activate(1)
        state.activate(2)

        state.move_left(3)
        state.move_right(99)

        assert state.active_ids == [1, 2]

    def test_deactivate(self):
        state = _state_with_players(2)
        state.activate(1)

        state.deactivate(1)

        assert state.active_ids == []


class TestStats:
    def test_missing_stats_read_as_zero(self):
        stat = ScoreboardState().stats_for(5)

        assert (stat.player_id, stat.total_passes, stat.average_rating) == (5, 0, 0.0)

    def test_merge_replaces_player_entry_wholesale(self):
        state = ScoreboardState()
        state.merge_stats({"player_id": 1, "name": "Ana", "jersey_number": 7, "total_passes": 1, "average_rating": 3})
        state.merge_stats({"player_id": 1, "total_passes": 2, "average_rating": 2.5})

        stat = state.stats_for(1)
        assert stat.total_passes == 2
        assert stat.name is None

    def test_replace_stats_drops_stale_entries(self):
        state = ScoreboardState()
        state.merge_stats({"player_id": 9, "total_passes": 4, "average_rating": 1})

        state.replace_stats([{"player_id": 1, "total_passes": 0, "average_rating": 0}])

        assert list(state.stats) == [1]

    def test_remove_player_clears_cards_and_stats(self):
        state = _state_with_players(2)
        state.activate(1)
        state.merge_stats({"player_id": 1, "total_passes": 1, "average_rating": 2})

        state.remove_player(1)

        assert [p.id for p in state.players] == [2]
        assert state.active_ids == []
        assert 1 not in state.stats


class TestForm:
    def test_starts_with_one_blank_row(self):
        assert ScoreboardState().form_rows == [PlayerFormRow()]

    def test_removing_last_row_keeps_a_blank_one(self):
        state = ScoreboardState()
        state.update_form_row(0, "name", "Ana")

        state.remove_form_row(0)

        assert state.form_rows == [PlayerFormRow()]

    def test_filled_rows_need_both_fields(self):
        state = ScoreboardState()
        state.add_form_row()
        state.add_form_row()
        state.update_form_row(0, "name", "Ana")
        state.update_form_row(0, "jersey_number", "7")
        state.update_form_row(1, "name", "Bruna")

        assert state.filled_form_rows() == [PlayerFormRow(name="Ana", jersey_number="7")]

    def test_unknown_field_is_rejected(self):
        with pytest.raises(KeyError):
            ScoreboardState().update_form_row(0, "position", "libero")


def test_state_survives_json_round_trip():
    state = _state_with_players(2)
    state.session_id = 4
    state.activate(2)
    state.merge_stats({"player_id": 2, "total_passes": 3, "average_rating": 2.0})

    restored = ScoreboardState.model_validate_json(state.model_dump_json())

    assert restored == state

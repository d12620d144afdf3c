"""
Greedy - Event Classification Tests
"""

from greedy.engine.base import Action, GameConfig
from greedy.engine.game import create_game_state, game_reducer
from greedy.events.events import EventPayload, GameEvent, classify_transition


def step(state, action):
    after = game_reducer(state, action)
    return after, classify_transition(state, after, action)


def kinds(events: list[EventPayload]) -> list[GameEvent]:
    return [e.event for e in events]


class TestTurnEvents:
    def test_scoring_roll(self, two_player_game):
        _, events = step(two_player_game, Action.roll([1, 2, 3, 4, 6]))
        assert kinds(events) == [GameEvent.DICE_ROLLED]
        assert events[0].player_id == "player-1"
        assert events[0].data["dice"] == [1, 2, 3, 4, 6]

    def test_bust_roll(self, two_player_game, play):
        state = play(two_player_game, Action.roll([1, 2, 2, 4, 6]), Action.keep([1]))
        _, events = step(state, Action.roll([2, 3, 4, 6]))
        assert kinds(events) == [GameEvent.DICE_ROLLED, GameEvent.PLAYER_BUST]
        assert events[1].data["lost"] == 100

    def test_keep(self, two_player_game, play):
        state = play(two_player_game, Action.roll([1, 1, 1, 5, 2]))
        _, events = step(state, Action.keep([1, 1, 1, 5]))
        assert kinds(events) == [GameEvent.DICE_KEPT]
        assert events[0].data["points"] == 1050
        assert events[0].data["dice_remaining"] == 1
        assert events[0].data["hot_dice"] is False

    def test_hot_dice_keep(self, two_player_game, play):
        state = play(two_player_game, Action.roll([1, 1, 1, 5, 5]))
        _, events = step(state, Action.keep([1, 1, 1, 5, 5]))
        assert events[0].data["hot_dice"] is True

    def test_bank(self, two_player_game, play):
        state = play(two_player_game, Action.roll([1, 1, 1, 5, 2]), Action.keep([1, 1, 1, 5]))
        _, events = step(state, Action.bank())
        assert kinds(events) == [GameEvent.TURN_BANKED]
        assert events[0].data["turn_score"] == 1050


class TestEndTurnEvents:
    def test_bank_then_end_turn(self, two_player_game, play):
        state = play(
            two_player_game,
            Action.roll([1, 1, 1, 5, 2]),
            Action.keep([1, 1, 1, 5]),
            Action.bank(),
        )
        _, events = step(state, Action.end_turn())
        assert kinds(events) == [GameEvent.TURN_ENDED, GameEvent.CARRYOVER_CREATED]
        ended = events[0].data
        assert ended["total_score"] == 1050
        assert ended["was_on_board"] is False
        assert ended["is_on_board"] is True
        assert events[1].data == {"points": 1050, "dice_count": 1}

    def test_bust_end_turn_has_no_pot(self, two_player_game, play):
        state = play(two_player_game, Action.roll([2, 3, 4, 6, 6]))
        _, events = step(state, Action.end_turn())
        assert kinds(events) == [GameEvent.TURN_ENDED]
        assert events[0].data["turn_score"] == 0

    def test_decline(self, two_player_game, play):
        state = play(
            two_player_game,
            Action.roll([1, 1, 1, 5, 2]),
            Action.keep([1, 1, 1, 5]),
            Action.bank(),
            Action.end_turn(),
        )
        _, events = step(state, Action.decline_carryover())
        assert kinds(events) == [GameEvent.CARRYOVER_DECLINED]
        assert events[0].player_id == "player-2"
        assert events[0].data["points"] == 1050

    def test_final_round_and_win(self, make_players, play):
        state = create_game_state(make_players("Solo"), GameConfig(target_score=1000))
        state = play(
            state,
            Action.roll([1, 1, 1, 5, 2]),
            Action.keep([1, 1, 1, 5]),
            Action.bank(),
        )
        _, events = step(state, Action.end_turn())
        assert kinds(events) == [
            GameEvent.TURN_ENDED,
            GameEvent.FINAL_ROUND_STARTED,
            GameEvent.GAME_WON,
        ]
        assert events[1].data["score_to_beat"] == 1050
        assert events[2].player_id == "player-1"
        assert events[2].data == {"winner": "Solo", "scores": {"player-1": 1050}}

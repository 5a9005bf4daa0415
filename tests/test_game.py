"""
Tests for the final choice, the outcome and a single trial.
"""
import numpy as np
import pytest

from montyhall.core.doors import DOORS, GameBoard, InvalidDoorError, Prize
from montyhall.core.game import Outcome, Trial, TrialResult, change_door, determine_winner


class TestChangeDoor:

    def test_stay_keeps_pick(self):
        for pick in DOORS:
            for opened in DOORS:
                if opened != pick:
                    assert change_door(True, opened, pick) == pick

    def test_switch_takes_remaining_door(self):
        for pick in DOORS:
            for opened in DOORS:
                if opened != pick:
                    expected = ({1, 2, 3} - {opened, pick}).pop()
                    assert change_door(False, opened, pick) == expected

    def test_switch_example(self):
        assert change_door(stay=False, opened_door=3, pick=2) == 1

    def test_opened_equal_to_pick(self):
        with pytest.raises(InvalidDoorError):
            change_door(False, 2, 2)
        with pytest.raises(InvalidDoorError):
            change_door(True, 2, 2)

    @pytest.mark.parametrize("opened_door, pick", [(0, 1), (4, 1), (1, 5), (2, "3")])
    def test_out_of_range(self, opened_door, pick):
        with pytest.raises(InvalidDoorError):
            change_door(False, opened_door, pick)


class TestDetermineWinner:

    def test_car_wins(self, car_first):
        assert determine_winner(1, car_first) == Outcome.WIN
        assert determine_winner(2, car_first) == Outcome.LOSE
        assert determine_winner(3, car_first) == Outcome.LOSE

    def test_is_pure(self, car_first):
        assert {determine_winner(1, car_first) for _ in range(20)} == {Outcome.WIN}

    def test_returns_label_strings(self, car_first):
        assert determine_winner(1, car_first) == "WIN"
        assert determine_winner(3, car_first) == "LOSE"

    def test_plain_list_board(self):
        board = ["car", "goat", "goat"]
        assert determine_winner(1, board) == "WIN"
        assert determine_winner(2, board) == "LOSE"
        final_pick = change_door(stay=False, opened_door=3, pick=2)
        assert determine_winner(final_pick, board) == "WIN"

    def test_outcome_labels(self):
        assert str(Outcome.WIN) == "WIN"
        assert Outcome("LOSE") is Outcome.LOSE

    def test_invalid_final_pick(self, car_first):
        with pytest.raises(InvalidDoorError):
            determine_winner(0, car_first)


class TestTrial:

    def test_fixed_board_and_pick_on_goat(self, car_first):
        trial = Trial(np.random.default_rng(0), board=car_first, initial_pick=2)
        assert trial.state.opened_door == 3
        assert not trial.state.initial_pick_is_car
        assert trial.final_pick(stay=True) == 2
        assert trial.final_pick(stay=False) == 1
        assert trial.judge(stay=True) == Outcome.LOSE
        assert trial.judge(stay=False) == Outcome.WIN

    def test_fixed_board_and_pick_on_car(self, car_first):
        trial = Trial(np.random.default_rng(0), board=car_first, initial_pick=1)
        assert trial.state.opened_door in (2, 3)
        assert trial.judge(stay=True) == Outcome.WIN
        assert trial.judge(stay=False) == Outcome.LOSE

    def test_strategies_are_complementary(self, rng):
        for _ in range(500):
            trial = Trial(rng)
            stay, switch = trial.judge(True), trial.judge(False)
            assert {stay, switch} == {Outcome.WIN, Outcome.LOSE}
            if trial.state.initial_pick_is_car:
                assert stay == Outcome.WIN
            else:
                assert switch == Outcome.WIN
            assert trial.state.board[trial.state.opened_door] == Prize.GOAT

    def test_invalid_initial_pick(self, car_first):
        with pytest.raises(InvalidDoorError):
            Trial(board=car_first, initial_pick=4)

    def test_trial_result(self):
        assert TrialResult("switch", Outcome.WIN).won
        assert not TrialResult("stay", Outcome.LOSE).won

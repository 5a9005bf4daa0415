from dataclasses import dataclass
from typing import Optional
from enum import Enum

import numpy as np

from .doors import DOORS, GameBoard, InvalidDoorError, Prize, as_board, create_game, select_door, validate_door
from .host import open_goat_door


class Outcome(str, Enum):
    WIN = "WIN"
    LOSE = "LOSE"

    def __str__(self):
        return self.value


class StrategyName(Enum):
    """Tags for the two contestant policies."""
    STAY = "stay"
    SWITCH = "switch"


@dataclass(frozen=True)
class TrialResult:
    """Outcome of one strategy in one trial."""
    strategy: str
    outcome: Outcome

    @property
    def won(self) -> bool:
        return self.outcome == Outcome.WIN


def change_door(stay: bool, opened_door: int, pick: int) -> int:
    """Return the contestant's final door after the host has opened one."""
    opened_door = validate_door(opened_door, "opened_door")
    pick = validate_door(pick, "pick")
    if opened_door == pick:
        raise InvalidDoorError(f"Host cannot open the picked door ({pick})")

    if stay:
        return pick

    remaining = [d for d in DOORS if d not in (opened_door, pick)]
    if len(remaining) != 1:
        raise InvalidDoorError(
            f"Expected exactly one door to switch to, found {remaining} "
            f"(opened_door={opened_door}, pick={pick})"
        )
    return remaining[0]


def determine_winner(final_pick: int, board: GameBoard) -> Outcome:
    """Classify a final pick as a win (car) or a loss (goat)."""
    prize = as_board(board)[final_pick]
    if prize == Prize.CAR:
        return Outcome.WIN
    if prize == Prize.GOAT:
        return Outcome.LOSE
    raise ValueError(f"Unexpected prize behind door {final_pick}: {prize!r}")


@dataclass(frozen=True)
class TrialState:
    """Everything both strategies share within one trial."""
    board: GameBoard
    initial_pick: int
    opened_door: int

    @property
    def initial_pick_is_car(self) -> bool:
        return self.board[self.initial_pick] == Prize.CAR


class Trial:
    """Sets up one play-through: board, initial pick and the host's reveal."""

    def __init__(self, rng: Optional[np.random.Generator] = None, board: Optional[GameBoard] = None,
                 initial_pick: Optional[int] = None):
        self.rng = rng if rng is not None else np.random.default_rng()
        board = as_board(board) if board is not None else create_game(self.rng)
        pick = validate_door(initial_pick, "initial_pick") if initial_pick is not None else select_door(self.rng)
        self.state = TrialState(
            board=board,
            initial_pick=pick,
            opened_door=open_goat_door(board, pick, self.rng),
        )

    def final_pick(self, stay: bool) -> int:
        """Final door for the given stay/switch decision."""
        return change_door(stay, self.state.opened_door, self.state.initial_pick)

    def judge(self, stay: bool) -> Outcome:
        """Outcome of staying (``True``) or switching (``False``) in this trial."""
        return determine_winner(self.final_pick(stay), self.state.board)

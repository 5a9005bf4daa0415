"""The host's move: open a goat door the contestant did not pick."""
from typing import Optional

import numpy as np

from .doors import GameBoard, Prize, as_board, validate_door, _default_rng


def open_goat_door(
    board: GameBoard,
    pick: int,
    rng: Optional[np.random.Generator] = None
) -> int:
    """Return the door the host opens after the contestant's initial pick.

    If the contestant picked the car, either goat door may be shown, so the
    host picks one at random. Otherwise only one goat door is left and it is
    opened without drawing from ``rng``.
    """
    board = as_board(board)
    pick = validate_door(pick, "pick")

    if board[pick] == Prize.CAR:
        goat_doors = board.goat_doors
        opened_door = int(_default_rng(rng).choice(goat_doors))
    else:
        opened_door = next(d for d in board.goat_doors if d != pick)

    return opened_door

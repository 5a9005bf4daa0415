"""Doors, prizes and board setup for the Monty Hall game."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple, Union

import numpy as np


DOORS: Tuple[int, ...] = (1, 2, 3)


class InvalidDoorError(ValueError):
    """Raised when a door argument breaks the game's preconditions."""


class Prize(str, Enum):
    """What can stand behind a door."""
    CAR = "car"
    GOAT = "goat"

    def __str__(self):
        return self.value


def validate_door(door, name: str = "door") -> int:
    """Check that ``door`` is one of the three door numbers."""
    if isinstance(door, bool) or not isinstance(door, (int, np.integer)):
        raise InvalidDoorError(f"{name} must be an integer in {DOORS}, got {door!r}")
    if door not in DOORS:
        raise InvalidDoorError(f"{name} must be one of {DOORS}, got {door}")
    return int(door)


@dataclass(frozen=True)
class GameBoard:
    """Hidden assignment of prizes to doors for a single trial."""
    prizes: Sequence[Union[Prize, str]]

    def __post_init__(self):
        object.__setattr__(self, "prizes", tuple(Prize(p) for p in self.prizes))
        if len(self.prizes) != len(DOORS):
            raise ValueError(f"A board needs exactly {len(DOORS)} doors, got {len(self.prizes)}")
        if self.prizes.count(Prize.CAR) != 1:
            raise ValueError("A board must hold exactly one car and two goats")

    def __getitem__(self, door: int) -> Prize:
        return self.prizes[validate_door(door) - 1]

    def __len__(self) -> int:
        return len(self.prizes)

    @property
    def car_door(self) -> int:
        """Door hiding the car."""
        return self.prizes.index(Prize.CAR) + 1

    @property
    def goat_doors(self) -> Tuple[int, ...]:
        """Doors hiding a goat, in ascending order."""
        return tuple(d for d in DOORS if self[d] == Prize.GOAT)

    def __str__(self) -> str:
        return f"GameBoard({[p.value for p in self.prizes]})"


def as_board(board: Union["GameBoard", Sequence[Union[Prize, str]]]) -> "GameBoard":
    """Accept a ready board or a plain sequence of prize labels."""
    return board if isinstance(board, GameBoard) else GameBoard(board)


def _default_rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def create_game(rng: Optional[np.random.Generator] = None) -> GameBoard:
    """Shuffle one car and two goats behind the three doors."""
    rng = _default_rng(rng)
    layout = rng.permutation([Prize.CAR.value, Prize.GOAT.value, Prize.GOAT.value])
    return GameBoard([str(p) for p in layout])


def select_door(rng: Optional[np.random.Generator] = None) -> int:
    """Pick one of the three doors uniformly at random."""
    rng = _default_rng(rng)
    return int(rng.integers(DOORS[0], DOORS[-1] + 1))

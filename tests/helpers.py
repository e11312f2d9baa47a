"""Shared builders for castle-ai tests.

Boards are 9x9 unless stated otherwise, so the central place is (4, 4).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

from castle_ai.models import (
    Behavior,
    GameConfiguration,
    GameSnapshot,
    Move,
    Piece,
    PieceKind,
    Place,
    Player,
)

WHITE = Player(name="white")
BLACK = Player(name="black")

Coord = Tuple[int, int]


def knight(
    player: Player = WHITE,
    behavior: Optional[Behavior] = None,
    paused: bool = False,
) -> Piece:
    return Piece(kind=PieceKind.KNIGHT, player=player, behavior=behavior, paused=paused)


def archer(
    player: Player = WHITE,
    behavior: Optional[Behavior] = None,
    paused: bool = False,
) -> Piece:
    return Piece(kind=PieceKind.ARCHER, player=player, behavior=behavior, paused=paused)


def mv(sx: int, sy: int, dx: int, dy: int) -> Move:
    return Move(source=Place(x=sx, y=sy), destination=Place(x=dx, y=dy))


def make_view(
    pieces: Dict[Coord, Piece],
    current_player: Player = WHITE,
    num_moves: int = 10,
    num_moves_protection: int = 0,
    size: int = 9,
) -> GameSnapshot:
    """Build a snapshot from ``{(x, y): piece}``."""
    return GameSnapshot.from_pieces(
        GameConfiguration(size=size, num_moves_protection=num_moves_protection),
        {Place(x=x, y=y): piece for (x, y), piece in pieces.items()},
        current_player=current_player,
        num_moves=num_moves,
    )


class RecordingChoice:
    """Deterministic stand-in for ``random.Random``.

    Always returns ``seq[index]`` and remembers every sequence it was asked
    to choose from.
    """

    def __init__(self, index: int = 0):
        self.index = index
        self.calls: List[List[Any]] = []

    def choice(self, seq: Sequence[Any]) -> Any:
        self.calls.append(list(seq))
        return seq[self.index]

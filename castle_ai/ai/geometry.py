"""Board geometry and move classification helpers for the selectors.

Every helper is a pure function over places, moves and a
:class:`~castle_ai.interfaces.GameView`; none of them mutates its inputs.

Usage:
    from castle_ai.ai.geometry import manhattan_distance, is_greedy_move

    if is_greedy_move(move, view):
        distance = manhattan_distance(move.destination, view.central_place)
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, TypeVar

from ..models import Move, Piece, Place

if TYPE_CHECKING:
    from ..interfaces import GameView

T = TypeVar("T")

# Distance reported when either endpoint is missing; sorts after any real one.
UNREACHABLE_DISTANCE: int = sys.maxsize

# Orthogonal unit offsets used for knight blocking (no diagonals).
ORTHOGONAL_OFFSETS: list[tuple[int, int]] = [
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
]

# Smart-greedy waypoints: centre distances divisible by this are preferred.
SMART_GREEDY_MODULUS: int = 3


def manhattan_distance(a: Place | None, b: Place | None) -> int:
    """Return ``|dx| + |dy|`` between two places.

    A missing place yields :data:`UNREACHABLE_DISTANCE` so that such moves
    never win a minimisation.
    """
    if a is None or b is None:
        return UNREACHABLE_DISTANCE
    return abs(b.x - a.x) + abs(b.y - a.y)


def distance_to_centre(place: Place | None, view: GameView) -> int:
    return manhattan_distance(place, view.central_place)


def orthogonal_neighbours(place: Place) -> Iterator[tuple[int, int]]:
    """Yield the four orthogonal ``(x, y)`` coordinates around ``place``.

    Coordinates are not bounds-checked; the view returns ``None`` for cells
    off the board.
    """
    for dx, dy in ORTHOGONAL_OFFSETS:
        yield place.x + dx, place.y + dy


def is_enemy(piece: Piece | None, view: GameView) -> bool:
    return piece is not None and piece.player != view.current_player


def is_enemy_knight(piece: Piece | None, view: GameView) -> bool:
    return is_enemy(piece, view) and piece.is_knight


def count_enemy_pieces(view: GameView) -> int:
    return sum(1 for piece in view.pieces() if is_enemy(piece, view))


# -----------------------------------------------------------------------------
# Move predicates
# -----------------------------------------------------------------------------


def is_greedy_move(move: Move | None, view: GameView) -> bool:
    """True when ``move`` ends strictly closer to the centre than it starts."""
    if move is None:
        return False
    old_distance = distance_to_centre(move.source, view)
    new_distance = distance_to_centre(move.destination, view)
    return new_distance < old_distance


def is_smart_greedy_move(move: Move | None, view: GameView) -> bool:
    """Greedy move landing on a centre distance divisible by three."""
    if not is_greedy_move(move, view):
        return False
    new_distance = distance_to_centre(move.destination, view)
    return new_distance % SMART_GREEDY_MODULUS == 0


def is_capturing_move(move: Move | None, view: GameView) -> bool:
    if move is None:
        return False
    return is_enemy(view.piece_at(move.destination), view)


def is_knight_capture(move: Move | None, view: GameView) -> bool:
    if move is None:
        return False
    return is_enemy_knight(view.piece_at(move.destination), view)


def is_blocking_move(move: Move | None, view: GameView) -> bool:
    """True when the destination touches an enemy knight orthogonally.

    A piece standing next to a knight blocks the knight's leg in that
    direction (as with the Xiangqi horse).
    """
    if move is None:
        return False
    return any(
        is_enemy_knight(view.piece_at_coords(x, y), view)
        for x, y in orthogonal_neighbours(move.destination)
    )


def is_own_knight_move(move: Move | None, view: GameView) -> bool:
    if move is None:
        return False
    piece = view.piece_at(move.source)
    return (
        piece is not None
        and piece.is_knight
        and piece.player == view.current_player
    )


def is_winning_move(move: Move | None, view: GameView) -> bool:
    """True when playing ``move`` ends the game in the mover's favour.

    Two ways to win once ``num_moves_protection`` moves have been played:

    - a knight standing on the central place leaves it;
    - the move captures the last enemy piece on the board.
    """
    if move is None or view.num_moves < view.num_moves_protection:
        return False

    piece = view.piece_at(move.source)
    centre = view.central_place
    if (
        piece is not None
        and piece.is_knight
        and move.source == centre
        and move.destination != centre
    ):
        return True

    if not is_capturing_move(move, view):
        return False
    return count_enemy_pieces(view) == 1


# -----------------------------------------------------------------------------
# Selection helpers
# -----------------------------------------------------------------------------


def minimisers(items: Iterable[T], key: Callable[[T], int]) -> list[T]:
    """Return every item sharing the smallest ``key``, in input order."""
    best: list[T] = []
    best_key: int | None = None
    for item in items:
        k = key(item)
        if best_key is None or k < best_key:
            best, best_key = [item], k
        elif k == best_key:
            best.append(item)
    return best

"""
Collaborator interfaces consumed by the move selectors.

The game core owns the board; selectors see it only through
:class:`GameView`. :class:`castle_ai.models.GameSnapshot` is the bundled
implementation, but any object with these members works.
"""

from __future__ import annotations

from typing import Iterator, Optional, Protocol, runtime_checkable

from .models import Piece, Place, Player


@runtime_checkable
class GameView(Protocol):
    """Read-only query surface over the current game state."""

    @property
    def central_place(self) -> Place:
        """The central (goal) place of the board."""
        ...

    @property
    def current_player(self) -> Player:
        """The player whose turn it is."""
        ...

    @property
    def num_moves(self) -> int:
        """Number of moves played so far."""
        ...

    @property
    def num_moves_protection(self) -> int:
        """Moves that must be played before any winning condition holds."""
        ...

    def piece_at(self, place: Place) -> Optional[Piece]:
        ...

    def piece_at_coords(self, x: int, y: int) -> Optional[Piece]:
        """Like :meth:`piece_at`, but must return ``None`` off the board."""
        ...

    def pieces(self) -> Iterator[Piece]:
        """Iterate over every piece currently on the board."""
        ...

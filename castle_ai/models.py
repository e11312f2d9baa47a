"""
Pydantic Models for the castle game as seen by the move selectors.

The selectors only read these values; placing, moving and removing pieces
belongs to the game core that builds each snapshot.
"""

from pydantic import BaseModel, Field, model_validator
from typing import Dict, Iterator, List, Optional
from enum import Enum

from .errors import InvalidStateError


class PieceKind(str, Enum):
    """Piece kind enumeration"""
    KNIGHT = "knight"
    ARCHER = "archer"


class Behavior(str, Enum):
    """Per-piece move selection policy"""
    RANDOM = "random"
    GREEDY = "greedy"
    CAPTURING = "capturing"
    BLOCKING = "blocking"


class Strategy(str, Enum):
    """Per-player move aggregation policy"""
    RANDOM = "random"
    SMART = "smart"


class Place(BaseModel):
    """Board coordinate"""
    x: int
    y: int

    class Config:
        frozen = True

    def to_key(self) -> str:
        """Convert place to string key"""
        return f"{self.x},{self.y}"

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Move(BaseModel):
    """Candidate relocation of the piece on ``source`` to ``destination``.

    Applying the move is the caller's responsibility; selectors only
    compare and return these values.
    """
    source: Place
    destination: Place

    class Config:
        frozen = True

    def __str__(self) -> str:
        return f"{self.source}->{self.destination}"


class Player(BaseModel):
    """Player identity, compared by value"""
    name: str

    class Config:
        frozen = True


class Piece(BaseModel):
    """Piece on the board.

    ``behavior`` is the policy the piece uses to propose its own move when
    it acts for a computer player (the configured default when ``None``);
    ``paused`` pieces propose nothing.
    """
    kind: PieceKind
    player: Player
    behavior: Optional[Behavior] = None
    paused: bool = False

    class Config:
        frozen = True

    @property
    def is_knight(self) -> bool:
        return self.kind == PieceKind.KNIGHT


class GameConfiguration(BaseModel):
    """Static game settings"""
    size: int = Field(9, ge=3, le=25)
    num_moves_protection: int = Field(
        0, ge=0, alias="numMovesProtection"
    )

    class Config:
        populate_by_name = True
        frozen = True


class GameSnapshot(BaseModel):
    """Read-only view of a game in progress.

    Implements :class:`castle_ai.interfaces.GameView`. ``board`` is indexed
    as ``board[x][y]``.
    """
    configuration: GameConfiguration
    board: List[List[Optional[Piece]]]
    current_player: Player = Field(alias="currentPlayer")
    num_moves: int = Field(0, ge=0, alias="numMoves")

    class Config:
        populate_by_name = True

    @model_validator(mode="after")
    def _check_board_shape(self) -> "GameSnapshot":
        size = self.configuration.size
        if len(self.board) != size or any(len(column) != size for column in self.board):
            raise InvalidStateError(
                "Board does not match the configured size",
                context={"size": size, "columns": len(self.board)},
            )
        return self

    @classmethod
    def from_pieces(
        cls,
        configuration: GameConfiguration,
        pieces: Dict[Place, Piece],
        current_player: Player,
        num_moves: int = 0,
    ) -> "GameSnapshot":
        """Build a snapshot from a sparse ``place -> piece`` mapping.

        Raises:
            InvalidStateError: if any piece lies outside the board.
        """
        size = configuration.size
        board: List[List[Optional[Piece]]] = [
            [None] * size for _ in range(size)
        ]
        for place, piece in pieces.items():
            if not (0 <= place.x < size and 0 <= place.y < size):
                raise InvalidStateError(
                    "Piece placed outside the board",
                    context={"place": place.to_key(), "size": size},
                )
            board[place.x][place.y] = piece
        return cls(
            configuration=configuration,
            board=board,
            current_player=current_player,
            num_moves=num_moves,
        )

    @property
    def size(self) -> int:
        return self.configuration.size

    @property
    def central_place(self) -> Place:
        middle = self.configuration.size // 2
        return Place(x=middle, y=middle)

    @property
    def num_moves_protection(self) -> int:
        return self.configuration.num_moves_protection

    def piece_at(self, place: Place) -> Optional[Piece]:
        return self.piece_at_coords(place.x, place.y)

    def piece_at_coords(self, x: int, y: int) -> Optional[Piece]:
        """Return the piece on ``(x, y)``, or ``None`` when off the board."""
        size = self.configuration.size
        if not (0 <= x < size and 0 <= y < size):
            return None
        return self.board[x][y]

    def pieces(self) -> Iterator[Piece]:
        for column in self.board:
            for piece in column:
                if piece is not None:
                    yield piece

"""castle-ai: heuristic move selection for computer players of the castle game.

Most callers only need the factory:

    from castle_ai import Player, create_computer_player

    ai = create_computer_player(Player(name="black"))
    move = ai.next_move(snapshot, legal_moves)
"""

from castle_ai.ai.behavior_ai import BehaviorSelector
from castle_ai.ai.computer_player import ComputerPlayer
from castle_ai.ai.factory import (
    create_behavior_selector,
    create_computer_player,
    create_strategy_selector,
    parse_behavior,
    parse_strategy,
)
from castle_ai.ai.strategy_ai import StrategySelector
from castle_ai.config import SelectorConfig, load_selector_config
from castle_ai.errors import CastleError, ConfigurationError, InvalidStateError
from castle_ai.interfaces import GameView
from castle_ai.models import (
    Behavior,
    GameConfiguration,
    GameSnapshot,
    Move,
    Piece,
    PieceKind,
    Place,
    Player,
    Strategy,
)

__all__ = [
    "Behavior",
    "BehaviorSelector",
    "CastleError",
    "ComputerPlayer",
    "ConfigurationError",
    "GameConfiguration",
    "GameSnapshot",
    "GameView",
    "InvalidStateError",
    "Move",
    "Piece",
    "PieceKind",
    "Place",
    "Player",
    "SelectorConfig",
    "Strategy",
    "StrategySelector",
    "create_behavior_selector",
    "create_computer_player",
    "create_strategy_selector",
    "load_selector_config",
    "parse_behavior",
    "parse_strategy",
]

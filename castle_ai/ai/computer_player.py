"""Computer player combining per-piece behaviors with a player strategy.

Each of the player's active pieces proposes one of its own legal moves with
its :class:`~castle_ai.models.Behavior`; the player's
:class:`~castle_ai.models.Strategy` then picks the move to play from those
proposals.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Dict, List, Optional

from ..config import SelectorConfig
from ..interfaces import GameView
from ..models import Move, Place, Player, Strategy
from .behavior_ai import BehaviorSelector
from .strategy_ai import StrategySelector

logger = logging.getLogger(__name__)


class ComputerPlayer:
    """Automated participant choosing one move per turn."""

    def __init__(
        self,
        player: Player,
        strategy: Optional[Strategy] = None,
        behavior_selector: Optional[BehaviorSelector] = None,
        strategy_selector: Optional[StrategySelector] = None,
        config: Optional[SelectorConfig] = None,
    ):
        """
        Args:
            player: The player this instance moves for.
            strategy: Aggregation policy; ``config.strategy`` when omitted.
            behavior_selector: Selector for per-piece proposals.
            strategy_selector: Selector for the final choice.
            config: Defaults for behavior, strategy and seeding.
        """
        self.player = player
        if config is None:
            config = SelectorConfig()
        self.config = config
        self.strategy = Strategy(strategy) if strategy is not None else config.strategy
        self.behavior_selector = behavior_selector or BehaviorSelector(
            config=self.config, player=player
        )
        self.strategy_selector = strategy_selector or StrategySelector(
            config=self.config, player=player
        )

    def propose_moves(
        self,
        view: GameView,
        available_moves: Iterable[Move],
    ) -> List[Move]:
        """Return one proposal per active piece of this player.

        Moves starting on an empty place, an enemy piece, or a paused piece
        are ignored.
        """
        by_source: Dict[Place, List[Move]] = {}
        for move in available_moves:
            by_source.setdefault(move.source, []).append(move)

        proposals: List[Move] = []
        for source, moves in by_source.items():
            piece = view.piece_at(source)
            if piece is None or piece.player != self.player:
                continue
            if piece.paused:
                logger.debug("Skipping paused piece at %s", source)
                continue
            behavior = piece.behavior or self.config.behavior
            proposal = self.behavior_selector.select_move(moves, behavior, view)
            if proposal is not None:
                proposals.append(proposal)
        return proposals

    def next_move(
        self,
        view: GameView,
        available_moves: Iterable[Move],
    ) -> Optional[Move]:
        """Choose the move this player plays now.

        Args:
            view: Current game view; its current player should be this one.
            available_moves: Legal moves of every piece on the board.

        Returns:
            The selected :class:`Move`, or ``None`` when no active piece of
            this player has a legal move.
        """
        if view.current_player != self.player:
            logger.warning(
                "%s asked to move while it is %s's turn",
                self.player.name,
                view.current_player.name,
            )
        proposals = self.propose_moves(view, available_moves)
        if not proposals:
            logger.info("%s has no move to propose", self.player.name)
            return None
        return self.strategy_selector.select_move(proposals, self.strategy, view)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}"
            f"(player={self.player.name}, strategy={self.strategy.value})"
        )

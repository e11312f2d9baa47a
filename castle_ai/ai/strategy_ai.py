"""Per-player move aggregation for castle-ai.

A computer player collects the moves proposed by its pieces and picks the
one to play with a :class:`Strategy`:

- ``RANDOM`` draws uniformly from the proposals.
- ``SMART`` runs a fixed pipeline and returns the first stage that yields a
  move:

  1. ``win``: a move that ends the game (a knight leaving the central
     place, or capturing the last enemy piece) once the protection window
     has passed. The shortest move (source to destination) wins; ties go to
     the earliest candidate.
  2. ``greedy``: the current player's knight moves that approach the
     centre. Destinations whose centre distance is a multiple of three are
     preferred; otherwise any approaching knight move. Closest wins.
  3. ``capturing``: captures of an enemy knight, closest to the centre;
     otherwise any capture, drawn at random.
  4. ``blocking``: moves next to an enemy knight, closest to the centre.
  5. ``random``: any proposal.

Stages 2-4 break distance ties by input order, so only stages 3 (plain
captures) and 5 consume randomness.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Optional

from ..interfaces import GameView
from ..models import Move, Strategy
from .base import (
    STAGE_BLOCKING,
    STAGE_CAPTURING,
    STAGE_GREEDY,
    STAGE_NONE,
    STAGE_WIN,
    BaseSelector,
    ChoiceSource,
    Selection,
    choose,
    random_selection,
)
from .geometry import (
    distance_to_centre,
    is_blocking_move,
    is_capturing_move,
    is_greedy_move,
    is_knight_capture,
    is_own_knight_move,
    is_smart_greedy_move,
    is_winning_move,
    manhattan_distance,
)

logger = logging.getLogger(__name__)

SmartStage = Callable[[Sequence[Move], GameView, ChoiceSource], Optional[Move]]
StrategyPolicy = Callable[[Sequence[Move], GameView, ChoiceSource], Selection]


def _closest_to_centre(moves: Sequence[Move], view: GameView) -> Move | None:
    return min(
        moves,
        key=lambda move: distance_to_centre(move.destination, view),
        default=None,
    )


def winning_move(
    moves: Sequence[Move],
    view: GameView,
    rng: ChoiceSource,
) -> Move | None:
    winning = [move for move in moves if is_winning_move(move, view)]
    return min(
        winning,
        key=lambda move: manhattan_distance(move.source, move.destination),
        default=None,
    )


def smart_greedy_move(
    moves: Sequence[Move],
    view: GameView,
    rng: ChoiceSource,
) -> Move | None:
    knight_moves = [move for move in moves if is_own_knight_move(move, view)]
    waypoint = _closest_to_centre(
        [move for move in knight_moves if is_smart_greedy_move(move, view)],
        view,
    )
    if waypoint is not None:
        return waypoint
    return _closest_to_centre(
        [move for move in knight_moves if is_greedy_move(move, view)],
        view,
    )


def smart_capturing_move(
    moves: Sequence[Move],
    view: GameView,
    rng: ChoiceSource,
) -> Move | None:
    knight_captures = [move for move in moves if is_knight_capture(move, view)]
    if knight_captures:
        return _closest_to_centre(knight_captures, view)
    return choose([move for move in moves if is_capturing_move(move, view)], rng)


def smart_blocking_move(
    moves: Sequence[Move],
    view: GameView,
    rng: ChoiceSource,
) -> Move | None:
    return _closest_to_centre(
        [move for move in moves if is_blocking_move(move, view)],
        view,
    )


SMART_PIPELINE: list[tuple[str, SmartStage]] = [
    (STAGE_WIN, winning_move),
    (STAGE_GREEDY, smart_greedy_move),
    (STAGE_CAPTURING, smart_capturing_move),
    (STAGE_BLOCKING, smart_blocking_move),
]


def select_random(
    moves: Sequence[Move],
    view: GameView,
    rng: ChoiceSource,
) -> Selection:
    return random_selection(moves, rng)


def select_smart(
    moves: Sequence[Move],
    view: GameView,
    rng: ChoiceSource,
) -> Selection:
    if not moves:
        return Selection(None, STAGE_NONE)
    for stage, pick in SMART_PIPELINE:
        move = pick(moves, view, rng)
        if move is not None:
            return Selection(move, stage)
    logger.debug(
        "No smart stage matched %d candidates, falling back to random",
        len(moves),
    )
    return random_selection(moves, rng, used_fallback=True)


STRATEGY_POLICIES: dict[Strategy, StrategyPolicy] = {
    Strategy.RANDOM: select_random,
    Strategy.SMART: select_smart,
}


class StrategySelector(BaseSelector):
    """Selects the move a player plays according to a :class:`Strategy`."""

    selector_name = "strategy"

    def select_move(
        self,
        moves: Sequence[Move],
        strategy: Strategy,
        view: GameView,
    ) -> Move | None:
        """Select one of the moves proposed by all of a player's pieces.

        Args:
            moves: Candidate moves proposed by the player's pieces.
            strategy: Aggregation policy.
            view: Current game view.

        Returns:
            The :class:`Move` to play, or ``None`` if ``moves`` is empty.
        """
        strategy = Strategy(strategy)
        return self._run_policy(
            strategy.value, STRATEGY_POLICIES[strategy], list(moves), view
        )

"""Per-piece move selection for castle-ai.

A piece acting for a computer player ranks its own candidate moves with one
of four behaviors. Every behavior falls back to a uniformly random move when
none of the candidates meets its criterion, so a non-empty candidate set
always yields a move.

- ``RANDOM``: any candidate.
- ``GREEDY``: moves ending strictly closer to the central place; the
  closest destination wins, ties drawn at random.
- ``CAPTURING``: moves landing on an enemy piece, drawn at random.
- ``BLOCKING``: moves landing orthogonally next to an enemy knight, drawn
  at random.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ..interfaces import GameView
from ..models import Behavior, Move
from .base import (
    STAGE_BLOCKING,
    STAGE_CAPTURING,
    STAGE_GREEDY,
    BaseSelector,
    ChoiceSource,
    Selection,
    random_selection,
)
from .geometry import (
    distance_to_centre,
    is_blocking_move,
    is_capturing_move,
    is_greedy_move,
    minimisers,
)

logger = logging.getLogger(__name__)

BehaviorPolicy = Callable[[Sequence[Move], GameView, ChoiceSource], Selection]


def _fallback(
    behavior: Behavior,
    moves: Sequence[Move],
    rng: ChoiceSource,
) -> Selection:
    logger.debug(
        "No %s move among %d candidates, falling back to random",
        behavior.value,
        len(moves),
    )
    return random_selection(moves, rng, used_fallback=True)


def select_random(
    moves: Sequence[Move],
    view: GameView,
    rng: ChoiceSource,
) -> Selection:
    return random_selection(moves, rng)


def select_greedy(
    moves: Sequence[Move],
    view: GameView,
    rng: ChoiceSource,
) -> Selection:
    greedy = [move for move in moves if is_greedy_move(move, view)]
    closest = minimisers(
        greedy, key=lambda move: distance_to_centre(move.destination, view)
    )
    if not closest:
        return _fallback(Behavior.GREEDY, moves, rng)
    return Selection(rng.choice(closest), STAGE_GREEDY)


def select_capturing(
    moves: Sequence[Move],
    view: GameView,
    rng: ChoiceSource,
) -> Selection:
    capturing = [move for move in moves if is_capturing_move(move, view)]
    if not capturing:
        return _fallback(Behavior.CAPTURING, moves, rng)
    return Selection(rng.choice(capturing), STAGE_CAPTURING)


def select_blocking(
    moves: Sequence[Move],
    view: GameView,
    rng: ChoiceSource,
) -> Selection:
    blocking = [move for move in moves if is_blocking_move(move, view)]
    if not blocking:
        return _fallback(Behavior.BLOCKING, moves, rng)
    return Selection(rng.choice(blocking), STAGE_BLOCKING)


BEHAVIOR_POLICIES: dict[Behavior, BehaviorPolicy] = {
    Behavior.RANDOM: select_random,
    Behavior.GREEDY: select_greedy,
    Behavior.CAPTURING: select_capturing,
    Behavior.BLOCKING: select_blocking,
}


class BehaviorSelector(BaseSelector):
    """Selects one piece's move according to a :class:`Behavior`."""

    selector_name = "behavior"

    def select_move(
        self,
        moves: Sequence[Move],
        behavior: Behavior,
        view: GameView,
    ) -> Move | None:
        """Select a move from one piece's ``moves`` using ``behavior``.

        Args:
            moves: Candidate moves of a single piece.
            behavior: Policy to apply.
            view: Current game view.

        Returns:
            The preferred :class:`Move`, or ``None`` if ``moves`` is empty.
        """
        behavior = Behavior(behavior)
        return self._run_policy(
            behavior.value, BEHAVIOR_POLICIES[behavior], list(moves), view
        )

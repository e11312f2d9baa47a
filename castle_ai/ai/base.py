"""
Base selector class for castle-ai
Abstract base class shared by the behavior and strategy selectors
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, NamedTuple, Optional, Protocol, Sequence
import random

from ..config import SelectorConfig, derive_seed
from ..models import Move, Player
from .decision_log import SelectionContext

if TYPE_CHECKING:
    from ..interfaces import GameView

# Stage labels reported in decision logs
STAGE_WIN = "win"
STAGE_GREEDY = "greedy"
STAGE_CAPTURING = "capturing"
STAGE_BLOCKING = "blocking"
STAGE_RANDOM = "random"
STAGE_NONE = "none"


class ChoiceSource(Protocol):
    """Randomness capability used for tie-breaking.

    ``random.Random`` satisfies it; tests may pass any object with a
    compatible ``choice``.
    """

    def choice(self, seq: Sequence[Any]) -> Any:
        ...


class Selection(NamedTuple):
    """Outcome of one policy: the move and the stage that produced it."""
    move: Optional[Move]
    stage: str
    used_fallback: bool = False


def choose(items: Sequence[Any], rng: ChoiceSource) -> Optional[Any]:
    """Uniformly choose one of ``items``, or ``None`` when empty."""
    if not items:
        return None
    return rng.choice(items)


def random_selection(
    moves: Sequence[Move],
    rng: ChoiceSource,
    used_fallback: bool = False,
) -> Selection:
    move = choose(moves, rng)
    stage = STAGE_RANDOM if move is not None else STAGE_NONE
    return Selection(move, stage, used_fallback and move is not None)


class BaseSelector(ABC):
    """Abstract base class for move selectors"""

    selector_name: str = "base"

    def __init__(
        self,
        config: Optional[SelectorConfig] = None,
        rng: Optional[ChoiceSource] = None,
        player: Optional[Player] = None,
    ):
        """
        Initialize selector

        Args:
            config: Selector configuration (defaults used when omitted)
            rng: Randomness source for tie-breaking; overrides the seed
            player: Owner of this selector, used to derive a seed when the
                configuration does not pin one
        """
        self.config = config if config is not None else SelectorConfig()
        self.player = player

        # Prefer an injected source, then an explicit seed, then a seed
        # derived from the owning player. An unowned selector without a
        # seed draws from system entropy.
        if rng is not None:
            self.rng_seed: Optional[int] = None
            self.rng: ChoiceSource = rng
        else:
            if self.config.rng_seed is not None:
                self.rng_seed = int(self.config.rng_seed)
            elif player is not None:
                self.rng_seed = derive_seed(player)
            else:
                self.rng_seed = None
            self.rng = random.Random(self.rng_seed)

    @abstractmethod
    def select_move(
        self,
        moves: Sequence[Move],
        policy: Any,
        view: GameView,
    ) -> Optional[Move]:
        """
        Select one of ``moves`` under ``policy``

        Args:
            moves: Candidate moves
            policy: Policy enum member
            view: Read-only game view

        Returns:
            Selected move or None if ``moves`` is empty
        """
        pass

    def _run_policy(
        self,
        policy_name: str,
        policy: Callable[[Sequence[Move], GameView, ChoiceSource], Selection],
        candidates: Sequence[Move],
        view: GameView,
    ) -> Optional[Move]:
        """Apply ``policy`` to ``candidates``, timing and logging it when enabled."""
        if not self.config.log_decisions:
            return policy(candidates, view, self.rng).move
        with SelectionContext(
            selector=self.selector_name,
            policy=policy_name,
            player=view.current_player.name,
            move_number=view.num_moves,
        ) as ctx:
            selection = policy(candidates, view, self.rng)
            ctx.record_move(
                selection.move,
                stage=selection.stage,
                num_candidates=len(candidates),
                used_fallback=selection.used_fallback,
            )
        return selection.move

    def __repr__(self) -> str:
        """String representation of selector"""
        owner = self.player.name if self.player is not None else None
        return f"{self.__class__.__name__}(player={owner}, seed={self.rng_seed})"

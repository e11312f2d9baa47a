"""Factory helpers for castle-ai selectors.

Centralises policy-name parsing and selector construction so that callers
configure everything through one :class:`~castle_ai.config.SelectorConfig`.

Usage:
    from castle_ai.ai.factory import create_computer_player, parse_strategy

    player = create_computer_player(Player(name="white"))
    strategy = parse_strategy("smart")
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from ..config import SelectorConfig, load_selector_config
from ..errors import ConfigurationError
from ..models import Behavior, Player, Strategy
from .behavior_ai import BehaviorSelector
from .computer_player import ComputerPlayer
from .strategy_ai import StrategySelector

logger = logging.getLogger(__name__)


def parse_behavior(
    value: Union[str, Behavior],
    key: Optional[str] = None,
) -> Behavior:
    """Parse a behavior name (case-insensitive) or pass an enum through.

    Raises:
        ConfigurationError: if ``value`` names no behavior.
    """
    if isinstance(value, Behavior):
        return value
    try:
        return Behavior(value.strip().lower())
    except ValueError:
        valid = ", ".join(b.value for b in Behavior)
        raise ConfigurationError(
            f"Unknown behavior {value!r} (expected one of: {valid})",
            key=key,
        ) from None


def parse_strategy(
    value: Union[str, Strategy],
    key: Optional[str] = None,
) -> Strategy:
    """Parse a strategy name (case-insensitive) or pass an enum through.

    Raises:
        ConfigurationError: if ``value`` names no strategy.
    """
    if isinstance(value, Strategy):
        return value
    try:
        return Strategy(value.strip().lower())
    except ValueError:
        valid = ", ".join(s.value for s in Strategy)
        raise ConfigurationError(
            f"Unknown strategy {value!r} (expected one of: {valid})",
            key=key,
        ) from None


def create_behavior_selector(
    config: Optional[SelectorConfig] = None,
    player: Optional[Player] = None,
) -> BehaviorSelector:
    if config is None:
        config = load_selector_config()
    return BehaviorSelector(config=config, player=player)


def create_strategy_selector(
    config: Optional[SelectorConfig] = None,
    player: Optional[Player] = None,
) -> StrategySelector:
    if config is None:
        config = load_selector_config()
    return StrategySelector(config=config, player=player)


def create_computer_player(
    player: Player,
    config: Optional[SelectorConfig] = None,
) -> ComputerPlayer:
    """Create a :class:`ComputerPlayer` for ``player``.

    When ``config`` is omitted it is read from the environment (see
    :mod:`castle_ai.config`).
    """
    if config is None:
        config = load_selector_config()
    logger.debug(
        "Creating computer player %s (strategy=%s, seed=%s)",
        player.name,
        config.strategy.value,
        config.rng_seed,
    )
    return ComputerPlayer(
        player,
        behavior_selector=create_behavior_selector(config, player),
        strategy_selector=create_strategy_selector(config, player),
        config=config,
    )

"""Move selectors for castle-ai.

Architecture:
- base.py: BaseSelector abstract base class and shared RNG handling
- geometry.py: distance, adjacency and move classification helpers
- behavior_ai.py: per-piece selection (RANDOM, GREEDY, CAPTURING, BLOCKING)
- strategy_ai.py: per-player selection (RANDOM, SMART pipeline)
- computer_player.py: per-piece proposals aggregated by a strategy
- factory.py: policy parsing and configured construction
- decision_log.py: structured logging of selections
"""

from castle_ai.ai.base import BaseSelector
from castle_ai.ai.behavior_ai import BEHAVIOR_POLICIES, BehaviorSelector
from castle_ai.ai.computer_player import ComputerPlayer
from castle_ai.ai.strategy_ai import SMART_PIPELINE, STRATEGY_POLICIES, StrategySelector

__all__ = [
    "BEHAVIOR_POLICIES",
    "BaseSelector",
    "BehaviorSelector",
    "ComputerPlayer",
    "SMART_PIPELINE",
    "STRATEGY_POLICIES",
    "StrategySelector",
]

"""Structured logging for move selection decisions.

Each selector call can produce one :class:`SelectionDecision` describing
which policy ran, which stage of that policy produced the move and how
many candidates it saw.

Usage:
    from castle_ai.ai.decision_log import SelectionDecision, log_selection_decision

    decision = SelectionDecision(
        selector="strategy",
        policy="smart",
        stage="capturing",
        num_candidates=12,
        chosen_move="(1, 2)->(2, 2)",
    )
    log_selection_decision(decision)

    # Or time a selection with the context manager
    with SelectionContext(selector="behavior", policy="greedy") as ctx:
        move = selector.select_move(moves, Behavior.GREEDY, view)
        ctx.record_move(move, stage="greedy", num_candidates=len(moves))
"""

from __future__ import annotations

import logging
import time
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass
class SelectionDecision:
    """One move selection, as recorded for debugging and analysis."""

    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    selector: str = ""  # behavior, strategy, computer_player
    policy: str = ""
    player: str = ""
    move_number: int = 0

    # Outcome
    stage: str = ""  # win, greedy, capturing, blocking, random, none
    num_candidates: int = 0
    chosen_move: str = ""
    used_fallback: bool = False

    time_ms: float = 0.0
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data = asdict(self)
        data['timestamp'] = self.timestamp.isoformat()
        return data

    def to_structured_log(self) -> Dict[str, Any]:
        """Convert to structured log format for logging frameworks."""
        return {
            "event": "move_selection",
            "level": "info" if not self.error else "error",
            **self.to_dict(),
        }

    def summary(self) -> str:
        """Human-readable summary."""
        parts = [
            f"[{self.selector}:{self.policy}]",
            f"move={self.chosen_move or 'none'}",
            f"stage={self.stage}",
            f"candidates={self.num_candidates}",
        ]
        if self.player:
            parts.append(f"player={self.player}")
        if self.time_ms:
            parts.append(f"time={self.time_ms:.2f}ms")
        if self.used_fallback:
            parts.append("fallback=random")
        return " ".join(parts)


def log_selection_decision(
    decision: SelectionDecision,
    log_level: int = logging.DEBUG,
) -> None:
    """Log ``decision`` with its structured fields attached as ``extra``."""
    logger.log(log_level, decision.summary(), extra=decision.to_structured_log())


class SelectionContext:
    """Context manager timing a selection and logging it on exit.

    Usage:
        with SelectionContext(selector="strategy", policy="smart") as ctx:
            move = selector.select_move(moves, Strategy.SMART, view)
            ctx.record_move(move, stage="win", num_candidates=len(moves))
    """

    def __init__(
        self,
        selector: str = "",
        policy: str = "",
        player: str = "",
        move_number: int = 0,
        auto_log: bool = True,
        log_level: int = logging.DEBUG,
    ):
        self.decision = SelectionDecision(
            selector=selector,
            policy=policy,
            player=player,
            move_number=move_number,
        )
        self.auto_log = auto_log
        self.log_level = log_level
        self._start_time: Optional[float] = None

    def __enter__(self) -> 'SelectionContext':
        self._start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._start_time is not None:
            self.decision.time_ms = (time.perf_counter() - self._start_time) * 1000

        if exc_type is not None:
            self.decision.error = str(exc_val)

        if self.auto_log:
            log_level = logging.ERROR if self.decision.error else self.log_level
            log_selection_decision(self.decision, log_level)

        return False  # Don't suppress exceptions

    def record_move(
        self,
        move: Any,
        stage: str,
        num_candidates: int,
        used_fallback: bool = False,
    ) -> None:
        """Record the chosen move and the stage that produced it."""
        self.decision.chosen_move = str(move) if move is not None else ""
        self.decision.stage = stage
        self.decision.num_candidates = num_candidates
        self.decision.used_fallback = used_fallback

"""
Selector configuration.

``SelectorConfig`` carries the default policies and RNG seed for the move
selectors. ``load_selector_config`` layers environment overrides on top of
the defaults:

- ``CASTLE_AI_BEHAVIOR`` (default: random)
  Behavior used by pieces that do not carry their own.

- ``CASTLE_AI_STRATEGY`` (default: smart)
  Strategy used by computer players.

- ``CASTLE_AI_RNG_SEED`` (default: unset)
  Integer seed for reproducible tie-breaking.

- ``CASTLE_AI_LOG_DECISIONS=true`` (default: false)
  Log one structured record per selection.
"""

from __future__ import annotations

import os
import zlib
from collections.abc import Mapping
from typing import Optional

from pydantic import BaseModel, Field

from .errors import ConfigurationError
from .models import Behavior, Player, Strategy

ENV_BEHAVIOR = "CASTLE_AI_BEHAVIOR"
ENV_STRATEGY = "CASTLE_AI_STRATEGY"
ENV_RNG_SEED = "CASTLE_AI_RNG_SEED"
ENV_LOG_DECISIONS = "CASTLE_AI_LOG_DECISIONS"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class SelectorConfig(BaseModel):
    """Move selector configuration"""
    behavior: Behavior = Behavior.RANDOM
    strategy: Strategy = Strategy.SMART
    rng_seed: Optional[int] = Field(None, alias="rngSeed")
    log_decisions: bool = Field(False, alias="logDecisions")

    class Config:
        populate_by_name = True
        frozen = True


def derive_seed(player: Player) -> int:
    """
    Derive a deterministic RNG seed for ``player``.

    Used only when no explicit ``rng_seed`` is configured, so that two
    computer players in the same process draw from different but
    reproducible streams. CRC32 keeps the value stable across interpreter
    runs, unlike ``hash()``.
    """
    base = zlib.crc32(player.name.encode("utf-8")) * 1_000_003
    return int(base & 0xFFFFFFFF)


def _parse_bool(key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Expected a boolean, got {raw!r}", key=key)


def _parse_int(key: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigurationError(
            f"Expected an integer, got {raw!r}", key=key
        ) from None


def load_selector_config(
    environ: Mapping[str, str] | None = None,
    base: SelectorConfig | None = None,
) -> SelectorConfig:
    """Return ``base`` (or the defaults) with environment overrides applied.

    Args:
        environ: Mapping to read instead of ``os.environ``.
        base: Starting configuration.

    Raises:
        ConfigurationError: if an override cannot be parsed.
    """
    # Local import: factory imports this module.
    from .ai.factory import parse_behavior, parse_strategy

    env = os.environ if environ is None else environ
    updates: dict[str, object] = {}

    if ENV_BEHAVIOR in env:
        updates["behavior"] = parse_behavior(env[ENV_BEHAVIOR], key=ENV_BEHAVIOR)
    if ENV_STRATEGY in env:
        updates["strategy"] = parse_strategy(env[ENV_STRATEGY], key=ENV_STRATEGY)
    if ENV_RNG_SEED in env:
        updates["rng_seed"] = _parse_int(ENV_RNG_SEED, env[ENV_RNG_SEED])
    if ENV_LOG_DECISIONS in env:
        updates["log_decisions"] = _parse_bool(
            ENV_LOG_DECISIONS, env[ENV_LOG_DECISIONS]
        )

    config = base if base is not None else SelectorConfig()
    return config.model_copy(update=updates) if updates else config

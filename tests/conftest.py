"""
Shared pytest fixtures for castle-ai tests.

Snapshot fixtures are function-scoped so each test gets its own board.
"""

from pathlib import Path
import sys
from typing import Callable, Dict

import pytest

# Ensure the repository root is on sys.path so `import castle_ai` works when
# running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from castle_ai.models import GameSnapshot, Piece  # noqa: E402
from tests.helpers import (  # noqa: E402
    BLACK,
    WHITE,
    Coord,
    archer,
    knight,
    make_view,
)


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def view_factory() -> Callable[..., GameSnapshot]:
    """Factory for snapshots built from ``{(x, y): piece}`` mappings."""

    def _create_view(pieces: Dict[Coord, Piece], **kwargs) -> GameSnapshot:
        return make_view(pieces, **kwargs)

    return _create_view


# =============================================================================
# COMMON SNAPSHOT FIXTURES
# =============================================================================


@pytest.fixture
def opening_view() -> GameSnapshot:
    """Both sides at full strength, protection window still open."""
    pieces = {
        (0, 0): archer(WHITE),
        (0, 4): knight(WHITE),
        (0, 8): archer(WHITE),
        (8, 0): archer(BLACK),
        (8, 4): knight(BLACK),
        (8, 8): archer(BLACK),
    }
    return make_view(pieces, num_moves=0, num_moves_protection=5)

"""Tests for the move classification helpers."""

import sys

from castle_ai.ai.geometry import (
    count_enemy_pieces,
    is_blocking_move,
    is_capturing_move,
    is_enemy_knight,
    is_greedy_move,
    is_knight_capture,
    is_own_knight_move,
    is_smart_greedy_move,
    is_winning_move,
    manhattan_distance,
    minimisers,
    orthogonal_neighbours,
)
from castle_ai.models import Place
from tests.helpers import BLACK, WHITE, archer, knight, make_view, mv


def test_manhattan_distance():
    assert manhattan_distance(Place(x=0, y=0), Place(x=3, y=4)) == 7
    assert manhattan_distance(Place(x=5, y=2), Place(x=1, y=6)) == 8
    assert manhattan_distance(Place(x=4, y=4), Place(x=4, y=4)) == 0


def test_manhattan_distance_missing_place_is_maximal():
    assert manhattan_distance(None, Place(x=0, y=0)) == sys.maxsize
    assert manhattan_distance(Place(x=0, y=0), None) == sys.maxsize


def test_orthogonal_neighbours_exclude_diagonals():
    neighbours = set(orthogonal_neighbours(Place(x=0, y=0)))
    assert neighbours == {(1, 0), (-1, 0), (0, 1), (0, -1)}


def test_greedy_requires_strict_improvement():
    view = make_view({})
    assert is_greedy_move(mv(0, 0, 1, 0), view)
    assert not is_greedy_move(mv(4, 4, 4, 5), view)
    # (3, 4) and (4, 3) are both one step from the centre
    assert not is_greedy_move(mv(3, 4, 4, 3), view)
    assert not is_greedy_move(None, view)


def test_smart_greedy_requires_distance_multiple_of_three():
    view = make_view({})
    assert is_smart_greedy_move(mv(0, 1, 1, 1), view)  # 7 -> 6
    assert is_smart_greedy_move(mv(4, 8, 4, 7), view)  # 4 -> 3
    assert not is_smart_greedy_move(mv(0, 0, 1, 0), view)  # 8 -> 7
    assert not is_smart_greedy_move(mv(4, 3, 4, 6), view)  # not greedy


def test_capturing_only_counts_other_players_pieces():
    view = make_view({(2, 2): archer(BLACK), (1, 3): archer(WHITE)})
    assert is_capturing_move(mv(1, 2, 2, 2), view)
    assert not is_capturing_move(mv(1, 2, 1, 3), view)
    assert not is_capturing_move(mv(1, 2, 0, 2), view)


def test_knight_capture():
    view = make_view({(2, 2): knight(BLACK), (5, 5): archer(BLACK)})
    assert is_knight_capture(mv(1, 2, 2, 2), view)
    assert not is_knight_capture(mv(5, 4, 5, 5), view)


def test_enemy_knight_is_relative_to_current_player():
    black_knight = knight(BLACK)
    assert is_enemy_knight(black_knight, make_view({}, current_player=WHITE))
    assert not is_enemy_knight(black_knight, make_view({}, current_player=BLACK))
    assert not is_enemy_knight(None, make_view({}))


def test_blocking_is_orthogonal_to_enemy_knight():
    view = make_view({(2, 3): knight(BLACK), (6, 6): archer(BLACK), (7, 1): knight(WHITE)})
    assert is_blocking_move(mv(2, 0, 2, 2), view)
    assert is_blocking_move(mv(0, 3, 1, 3), view)
    # diagonal neighbour of the knight
    assert not is_blocking_move(mv(3, 5, 3, 4), view)
    # enemy archer and own knight do not count
    assert not is_blocking_move(mv(6, 3, 6, 5), view)
    assert not is_blocking_move(mv(7, 4, 7, 2), view)


def test_blocking_near_the_edge_does_not_fail():
    view = make_view({(0, 1): knight(BLACK)})
    assert is_blocking_move(mv(2, 0, 0, 0), view)
    assert not is_blocking_move(mv(8, 7, 8, 8), view)


def test_own_knight_move():
    view = make_view({(0, 1): knight(WHITE), (8, 7): knight(BLACK), (0, 0): archer(WHITE)})
    assert is_own_knight_move(mv(0, 1, 1, 3), view)
    assert not is_own_knight_move(mv(8, 7, 7, 5), view)
    assert not is_own_knight_move(mv(0, 0, 1, 0), view)
    assert not is_own_knight_move(mv(3, 3, 4, 5), view)


def test_count_enemy_pieces():
    view = make_view({(0, 0): archer(WHITE), (2, 2): archer(BLACK), (8, 8): knight(BLACK)})
    assert count_enemy_pieces(view) == 2
    assert count_enemy_pieces(make_view({(0, 0): archer(WHITE)})) == 0


def test_knight_leaving_centre_wins_after_protection():
    pieces = {(4, 4): knight(WHITE), (8, 8): archer(BLACK)}
    assert is_winning_move(mv(4, 4, 4, 5), make_view(pieces, num_moves=5, num_moves_protection=5))
    assert not is_winning_move(mv(4, 4, 4, 5), make_view(pieces, num_moves=4, num_moves_protection=5))


def test_archer_leaving_centre_does_not_win():
    view = make_view({(4, 4): archer(WHITE), (8, 8): archer(BLACK), (8, 7): archer(BLACK)})
    assert not is_winning_move(mv(4, 4, 4, 5), view)


def test_capturing_last_enemy_wins():
    view = make_view({(1, 2): archer(WHITE), (2, 2): archer(BLACK)})
    assert is_winning_move(mv(1, 2, 2, 2), view)


def test_capturing_with_enemies_left_does_not_win():
    view = make_view({(1, 2): archer(WHITE), (2, 2): archer(BLACK), (8, 8): knight(BLACK)})
    assert not is_winning_move(mv(1, 2, 2, 2), view)


def test_capturing_last_enemy_is_gated_by_protection():
    view = make_view(
        {(1, 2): archer(WHITE), (2, 2): archer(BLACK)},
        num_moves=1,
        num_moves_protection=3,
    )
    assert not is_winning_move(mv(1, 2, 2, 2), view)


def test_minimisers_keeps_every_tie_in_order():
    assert minimisers([3, 1, 2, 1], key=lambda v: v) == [1, 1]
    assert minimisers(["bb", "a", "c"], key=len) == ["a", "c"]
    assert minimisers([], key=len) == []

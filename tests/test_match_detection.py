from bejeweled.game import new_game
from bejeweled.systems.match import (col_neighbours, contiguous, find_pieces_to_remove,
                                     has_matches, row_neighbours)
from bejeweled.systems.board_ops import color_map
from tests.helpers import base_letters, paint_grid


def painted(edits):
    game = new_game(seed=5)
    letters = base_letters()
    for (r, c), letter in edits.items():
        letters[r][c] = letter
    paint_grid(game, letters)
    return game


def test_neighbours_stay_on_their_axis_and_on_the_board():
    assert row_neighbours((0, 0)) == [(1, 0)]
    assert col_neighbours((0, 0)) == [(0, 1)]
    assert sorted(row_neighbours((4, 4))) == [(3, 4), (5, 4)]
    assert sorted(col_neighbours((4, 4))) == [(4, 3), (4, 5)]
    assert row_neighbours((7, 7)) == [(6, 7)]
    assert col_neighbours((7, 7)) == [(7, 6)]


def test_base_layout_has_no_matches():
    game = painted({})
    assert find_pieces_to_remove(game.world) == []
    assert not has_matches(game.world)


def test_horizontal_triple_detected():
    game = painted({(0, 0): 'R', (0, 1): 'R', (0, 2): 'R'})
    assert find_pieces_to_remove(game.world) == [(0, 0), (0, 1), (0, 2)]


def test_vertical_triple_detected():
    game = painted({(3, 2): 'P', (4, 2): 'P', (5, 2): 'P'})
    assert find_pieces_to_remove(game.world) == [(3, 2), (4, 2), (5, 2)]


def test_pair_is_not_a_match():
    game = painted({(0, 0): 'W', (0, 1): 'W'})
    assert find_pieces_to_remove(game.world) == []


def test_crossing_runs_merge_into_one_set():
    # L shape: column 0 rows 4-6 and row 6 cols 0-2 share (6, 0).
    game = painted({(4, 0): 'W', (5, 0): 'W', (6, 0): 'W', (6, 1): 'W', (6, 2): 'W'})
    assert find_pieces_to_remove(game.world) == [(4, 0), (5, 0), (6, 0), (6, 1), (6, 2)]


def test_region_follows_only_one_axis():
    game = painted({(4, 0): 'W', (5, 0): 'W', (6, 0): 'W', (6, 1): 'W', (6, 2): 'W'})
    colors = color_map(game.world)
    assert contiguous(colors, (6, 0), row_neighbours) == {(4, 0), (5, 0), (6, 0)}
    assert contiguous(colors, (6, 0), col_neighbours) == {(6, 0), (6, 1), (6, 2)}
    assert contiguous(colors, (0, 0), col_neighbours) == {(0, 0)}


def test_full_row_is_one_run():
    game = painted({(2, c): 'G' for c in range(8)})
    assert find_pieces_to_remove(game.world) == [(2, c) for c in range(8)]


def test_result_is_ordered_top_row_first():
    game = painted({
        (7, 5): 'W', (7, 6): 'W', (7, 7): 'W',
        (0, 0): 'R', (0, 1): 'R', (0, 2): 'R',
    })
    result = find_pieces_to_remove(game.world)
    assert len(result) == 6
    assert [r for r, _ in result] == sorted(r for r, _ in result)
    assert result[:3] == [(0, 0), (0, 1), (0, 2)]


def test_detection_is_idempotent():
    game = painted({(3, 0): 'O', (3, 1): 'O', (3, 2): 'O', (3, 3): 'O'})
    first = find_pieces_to_remove(game.world)
    second = find_pieces_to_remove(game.world)
    assert first == second == [(3, 0), (3, 1), (3, 2), (3, 3)]

import random

import pytest

from tile2048.game import EMPTY, Direction, Game


def _load(game, rows):
    for r, values in enumerate(rows):
        for c, value in enumerate(values):
            game.set_cell(r, c, value)


def _random_board(rng, rows, cols):
    return [[rng.choice([0, 0, 2, 4, 8]) for _ in range(cols)] for _ in range(rows)]


def _tiles(game):
    return [v for row in game.board for v in row if v != EMPTY]


def test_new_game_has_two_tiles_of_two_or_four():
    game = Game(4, 4, random.Random(3))
    tiles = _tiles(game)
    assert len(tiles) == 2
    assert set(tiles) <= {2, 4}
    assert game.score == 0


def test_dimensions_are_kept():
    game = Game(5, 7, random.Random(0))
    assert game.rows == 5
    assert game.cols == 7
    assert len(game.board) == 5
    assert all(len(row) == 7 for row in game.board)


def test_same_seed_gives_same_board():
    first = Game(4, 4, random.Random(42))
    second = Game(4, 4, random.Random(42))
    assert len(_tiles(first)) == 2
    assert set(_tiles(first)) <= {2, 4}
    occupied_first = [
        (r, c, first.get_cell(r, c))
        for r in range(4)
        for c in range(4)
        if first.get_cell(r, c) != EMPTY
    ]
    occupied_second = [
        (r, c, second.get_cell(r, c))
        for r in range(4)
        for c in range(4)
        if second.get_cell(r, c) != EMPTY
    ]
    assert len(occupied_second) == 2
    assert occupied_first == occupied_second


def test_invalid_dimensions_raise():
    with pytest.raises(ValueError):
        Game(0, 4)


@pytest.mark.parametrize("row,col", [(4, 0), (0, 4), (-1, 0), (0, -1)])
def test_out_of_range_cells_raise(row, col):
    game = Game(4, 4, random.Random(0))
    with pytest.raises(IndexError):
        game.get_cell(row, col)
    with pytest.raises(IndexError):
        game.set_cell(row, col, 2)


def test_set_and_get_cell_round_trip():
    game = Game(4, 4, random.Random(0))
    game.set_cell(2, 3, 64)
    assert game.get_cell(2, 3) == 64


def test_reset_board_clears_score_and_spawns_two():
    game = Game(4, 4, random.Random(1))
    _load(game, [[2, 2, 2, 2]] * 4)
    game.move_left()
    assert game.score > 0
    game.reset_board()
    assert game.score == 0
    assert len(_tiles(game)) == 2


def test_move_left_merges_repeatedly_within_a_row():
    game = Game(4, 4, random.Random(0))
    _load(game, [[2, 2, 4, 0], [0] * 4, [0] * 4, [0] * 4])
    game.reset_score()
    game.move_left()
    assert game.board[0] == (8, 0, 0, 0)
    assert game.score == 12


def test_move_right_mirrors_move_left():
    rng = random.Random(7)
    for _ in range(30):
        values = _random_board(rng, 4, 5)
        left = Game(4, 5, random.Random(0))
        right = Game(4, 5, random.Random(0))
        _load(left, values)
        _load(right, [list(reversed(row)) for row in values])
        left.move_left()
        right.move_right()
        assert right.board == tuple(tuple(reversed(row)) for row in left.board)


def test_move_up_and_down_match_transposed_horizontal_moves():
    rng = random.Random(11)
    for _ in range(30):
        values = _random_board(rng, 5, 4)
        transposed = [list(col) for col in zip(*values)]
        vertical_up = Game(5, 4, random.Random(0))
        vertical_down = Game(5, 4, random.Random(0))
        horizontal_left = Game(4, 5, random.Random(0))
        horizontal_right = Game(4, 5, random.Random(0))
        _load(vertical_up, values)
        _load(vertical_down, values)
        _load(horizontal_left, transposed)
        _load(horizontal_right, transposed)
        vertical_up.move_up()
        vertical_down.move_down()
        horizontal_left.move_left()
        horizontal_right.move_right()
        assert vertical_up.board == tuple(zip(*horizontal_left.board))
        assert vertical_down.board == tuple(zip(*horizontal_right.board))


@pytest.mark.parametrize("direction", list(Direction))
def test_moves_preserve_tile_sum(direction):
    rng = random.Random(5)
    for _ in range(20):
        game = Game(4, 4, random.Random(0))
        _load(game, _random_board(rng, 4, 4))
        before = _tiles(game)
        game.move(direction)
        after = _tiles(game)
        assert sum(after) == sum(before)
        assert len(after) <= len(before)


def test_move_dispatch_matches_named_method():
    values = [[2, 0, 2, 4], [4, 4, 0, 0], [0, 2, 2, 2], [8, 0, 8, 0]]
    a = Game(4, 4, random.Random(0))
    b = Game(4, 4, random.Random(0))
    _load(a, values)
    _load(b, values)
    a.move(Direction.DOWN)
    b.move_down()
    assert a.board == b.board
    assert a.score == b.score


def _checker():
    return [[2 if (r + c) % 2 == 0 else 4 for c in range(4)] for r in range(4)]


def test_full_board_without_pairs_is_game_over():
    game = Game(4, 4, random.Random(0))
    _load(game, _checker())
    assert game.is_board_full()
    assert game.is_game_over()


def test_full_board_with_a_pair_is_not_game_over():
    game = Game(4, 4, random.Random(0))
    _load(game, _checker())
    game.set_cell(0, 0, game.get_cell(0, 1))
    assert game.is_board_full()
    assert not game.is_game_over()


def test_board_with_space_is_not_full_nor_over():
    game = Game(4, 4, random.Random(0))
    assert not game.is_board_full()
    assert not game.is_game_over()


def test_spawn_on_full_board_changes_nothing():
    game = Game(4, 4, random.Random(0))
    _load(game, _checker())
    before = game.board
    game.spawn_random_cell(3)
    assert game.board == before


def test_spawn_more_than_free_cells_fills_board():
    game = Game(4, 4, random.Random(0))
    _load(game, _checker())
    game.set_cell(1, 1, EMPTY)
    game.set_cell(2, 2, EMPTY)
    game.spawn_random_cell(5)
    assert game.is_board_full()
    assert {game.get_cell(1, 1), game.get_cell(2, 2)} <= {2, 4}
import numpy as np

from gridsnake.core import Cell, CellCode, Direction, Phase, Snapshot, game_over_message


def _snap(body, food, score=0, grid_size=3):
    return Snapshot(
        body=tuple(Cell(*c) for c in body),
        food=Cell(*food) if food is not None else None,
        direction=Direction.RIGHT,
        pending_direction=Direction.RIGHT,
        score=score,
        phase=Phase.RUNNING,
        tick_count=0,
        reason=None,
        grid_size=grid_size,
    )

def test_to_grid_codes_and_orientation():
    g = _snap([(0, 0), (1, 0)], food=(2, 2)).to_grid()
    assert g.shape == (3, 3)
    assert g.dtype == np.int8
    assert g[0, 0] == CellCode.BODY
    assert g[0, 1] == CellCode.HEAD
    assert g[2, 2] == CellCode.FOOD
    assert np.count_nonzero(g) == 3

def test_to_grid_without_food():
    g = _snap([(0, 0)], food=None, grid_size=1).to_grid()
    assert g.tolist() == [[CellCode.HEAD]]

def test_print_board():
    board = _snap([(0, 0), (1, 0)], food=(2, 2)).print_board()
    assert board == "oH.\n...\n..*"

def test_head_and_length():
    s = _snap([(0, 1), (1, 1), (2, 1)], food=(0, 0))
    assert s.head == (2, 1)
    assert s.length == 3

def test_game_over_message_pluralizes():
    assert game_over_message(_snap([(0, 0)], (1, 1), score=1)) == "Game Over! You ate 1 food!"
    assert game_over_message(_snap([(0, 0)], (1, 1), score=4)) == "Game Over! You ate 4 foods!"

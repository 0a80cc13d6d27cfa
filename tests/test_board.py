import pytest

from hex_puzzle.boards import HexBoard, axial_to_matrix, cell_key, matrix_to_axial, parse_cell_key
from hex_puzzle.boards.difficulty import FALLBACK_SIZE_RANGE, SIZE_RANGES, Difficulty, SizeRange, size_range_for


def test_matrix_to_axial_reads_ones_in_row_major_order():
    matrix = [[1, 0, 1], [1, 1], [0, 2, 1]]
    assert matrix_to_axial(matrix) == [(0, 0), (2, 0), (0, 1), (1, 1), (1, 2)]


def test_matrix_to_axial_empty():
    assert matrix_to_axial([]) == []
    assert matrix_to_axial([[0, 0], [0]]) == []


def test_axial_to_matrix_round_trip():
    matrix = [[0, 1, 1], [1, 1, 0], [0, 1, 0]]
    assert axial_to_matrix(matrix_to_axial(matrix)) == matrix


def test_axial_to_matrix_crops_and_keeps_row_parity():
    assert axial_to_matrix([(5, 0), (6, 0)]) == [[1, 1]]
    assert axial_to_matrix([(0, 1)]) == [[0], [1]]


def test_axial_to_matrix_empty_input():
    assert axial_to_matrix([]) == [[1]]


def test_cell_keys():
    assert cell_key(-2, 3) == "-2,3"
    assert parse_cell_key("-2,3") == (-2, 3)


def test_hex_board_from_matrix():
    board = HexBoard.from_matrix([[1, 1], [1, 0]])
    assert board.cell_count == 3
    assert board.contains(1, 0)
    assert not board.contains(1, 1)
    assert board.keys() == ["0,0", "0,1", "1,0"]
    assert board.to_matrix() == [[1, 1], [1, 0]]


def test_size_ranges():
    assert size_range_for(Difficulty.VERY_EASY) == SizeRange(5, 7)
    assert size_range_for(Difficulty.EASY) == SizeRange(4, 7)
    assert size_range_for(Difficulty.MEDIUM) == SizeRange(3, 5)
    assert size_range_for(Difficulty.HARD) == SizeRange(3, 5)
    assert size_range_for(Difficulty.VERY_HARD) == SizeRange(2, 4)
    assert size_range_for(2) == SizeRange(3, 5)


def test_unknown_difficulty_falls_back():
    assert size_range_for(99) == FALLBACK_SIZE_RANGE == SizeRange(2, 4)
    assert size_range_for("impossible") == FALLBACK_SIZE_RANGE


def test_size_range_rejects_bad_bounds():
    with pytest.raises(ValueError):
        SizeRange(4, 3)
    with pytest.raises(ValueError):
        SizeRange(0, 3)


def test_size_range_table_covers_every_difficulty():
    assert SIZE_RANGES == {
        Difficulty.VERY_EASY: SizeRange(5, 7),
        Difficulty.EASY: SizeRange(4, 7),
        Difficulty.MEDIUM: SizeRange(3, 5),
        Difficulty.HARD: SizeRange(3, 5),
        Difficulty.VERY_HARD: SizeRange(2, 4),
    }

import pytest

from algokit.puzzles import knapsack, n_queens


def _valid(board):
    n = len(board)
    cols = [row.index("Q") for row in board]
    return (
        all(len(row) == n and row.count("Q") == 1 for row in board)
        and len(set(cols)) == n
        and len({r - c for r, c in enumerate(cols)}) == n
        and len({r + c for r, c in enumerate(cols)}) == n
    )


def test_n_queens_one():
    assert n_queens(1) == [["Q"]]


@pytest.mark.parametrize("n", [2, 3])
def test_n_queens_no_solution(n):
    assert n_queens(n) == []


def test_n_queens_eight_count():
    assert len(n_queens(8)) == 92


@pytest.mark.parametrize("n", [4, 5, 6])
def test_n_queens_boards_are_valid_and_distinct(n):
    boards = n_queens(n)
    assert boards
    assert all(_valid(board) for board in boards)
    assert len({tuple(b) for b in boards}) == len(boards)


def test_n_queens_mirror_closed():
    boards = {tuple(b) for b in n_queens(6)}
    mirrored = {tuple(row[::-1] for row in b) for b in boards}
    assert mirrored == boards


def test_n_queens_negative_raises():
    with pytest.raises(ValueError):
        n_queens(-1)


def test_knapsack_classic():
    assert knapsack(50, [10, 20, 30], [60, 100, 120]) == 220


def test_knapsack_everything_fits():
    weights = [1, 2, 3]
    values = [4, 5, 6]
    assert knapsack(sum(weights), weights, values) == sum(values)


def test_knapsack_zero_capacity():
    assert knapsack(0, [1, 2], [10, 20]) == 0


def test_knapsack_single_item_too_heavy():
    assert knapsack(4, [5], [100]) == 0


def test_knapsack_monotone_in_capacity():
    weights = [3, 4, 5, 9, 2]
    values = [4, 5, 7, 11, 3]
    results = [knapsack(c, weights, values) for c in range(25)]
    assert results == sorted(results)


def test_knapsack_length_mismatch():
    with pytest.raises(ValueError):
        knapsack(10, [1, 2], [3])


def test_knapsack_negative_capacity():
    with pytest.raises(ValueError):
        knapsack(-1, [1], [1])
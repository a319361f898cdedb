# Local modules
import qperformance.type_grid


def test_dense_rounds_sorts_and_backfills_gaps() -> None:
	pairs = [(2, ["X"]), (0, ["A", "G"])]
	assert qperformance.type_grid.dense_rounds(pairs) == [["A", "G"], [], ["X"]]


def test_dense_rounds_first_duplicate_wins() -> None:
	pairs = [(0, ["A"]), (0, ["Q"])]
	assert qperformance.type_grid.dense_rounds(pairs) == [["A"]]


def test_build_type_grid_repaginates_first_round() -> None:
	first = list("QGAIRSXV" * 6)[:45]
	pairs = [(1, ["R"] * 20), (0, first)]

	grid = qperformance.type_grid.build_type_grid(pairs)

	assert [len(row) for row in grid] == [20, 20, 5]
	assert grid[0] == first[:20]
	assert grid[1] == first[20:40]
	assert grid[2] == first[40:]


def test_build_type_grid_page_size() -> None:
	grid = qperformance.type_grid.build_type_grid([(0, list("ABCDE"))], page_size=2)
	assert grid == [["A", "B"], ["C", "D"], ["E"]]


def test_build_type_grid_empty_inputs() -> None:
	assert qperformance.type_grid.build_type_grid([]) == []
	# No document declares round 1, so the first round is empty.
	assert qperformance.type_grid.build_type_grid([(1, ["Q", "G"])]) == []


def test_lookup_misses_are_none() -> None:
	grid = [["Q", "G", "A"]]
	assert qperformance.type_grid.lookup(grid, 0, 0) == "Q"
	assert qperformance.type_grid.lookup(grid, 0, 2) == "A"
	assert qperformance.type_grid.lookup(grid, 0, 3) is None
	assert qperformance.type_grid.lookup(grid, 1, 0) is None
	assert qperformance.type_grid.lookup(grid, -1, 0) is None
	assert qperformance.type_grid.lookup(grid, 0, -1) is None

# Standard Library

# Local modules
import qperformance.config


#============================================


def dense_rounds(pairs: list[tuple[int, list[str]]]) -> list[list[str]]:
	"""
	Return per-round type sequences indexed by round, gaps filled with [].

	When several documents declare the same round the first one wins.
	"""
	rounds: list[list[str] | None] = []
	for round_index, types in sorted(pairs, key=lambda p: p[0]):
		if round_index < 0:
			continue
		while len(rounds) <= round_index:
			rounds.append(None)
		if rounds[round_index] is None:
			rounds[round_index] = list(types)
	return [r if r is not None else [] for r in rounds]


#============================================


def build_type_grid(
	pairs: list[tuple[int, list[str]]],
	page_size: int = qperformance.config.DEFAULT_PAGE_SIZE,
) -> list[list[str]]:
	"""
	Build the round x question lookup grid.

	The answer keys form one continuous run of questions: the first round's
	sequence is re-paginated into rounds of page_size questions.
	"""
	rounds = dense_rounds(pairs)
	if not rounds:
		return []
	first = rounds[0]
	return [first[i : i + page_size] for i in range(0, len(first), page_size)]


#============================================


def lookup(grid: list[list[str]], round_index: int, question_index: int) -> str | None:
	"""
	Return the type at (round, question), or None when outside the grid.
	"""
	if round_index < 0 or round_index >= len(grid):
		return None
	row = grid[round_index]
	if question_index < 0 or question_index >= len(row):
		return None
	return row[question_index]

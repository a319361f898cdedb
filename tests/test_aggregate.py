# Local modules
import qperformance.aggregate
import qperformance.config
import qperformance.events
import qperformance.quizzers


CONFIG = qperformance.config.QuizConfig()


def _record(round_text: str, question: str, quizzer: str, team: str, code: str) -> qperformance.events.EventRecord:
	return qperformance.events.EventRecord(
		round_text=round_text,
		question_text=question,
		quizzer=quizzer,
		team_text=team,
		event_code=code,
	)


def _col(code: str) -> int:
	index = CONFIG.type_index(code)
	assert index is not None
	return index


def _nonzero(matrix: list[list[int]]) -> list[tuple[int, int, int]]:
	return [(i, j, v) for i, row in enumerate(matrix) for j, v in enumerate(row) if v]


def test_tossup_correct_and_bonus_error() -> None:
	grid = [["Q", "G", "A"]]
	records = [
		_record("1", "1", "Alice", "1", "TC"),
		_record("1", "2", "Alice", "1", "BE"),
	]
	quizzers = qperformance.quizzers.QuizzerIndex.from_records(records)

	agg = qperformance.aggregate.aggregate_records(records, grid, quizzers, CONFIG)

	assert _nonzero(agg.attempts) == [(0, _col("Q"), 1)]
	assert _nonzero(agg.correct) == [(0, _col("Q"), 1)]
	assert _nonzero(agg.bonus_attempts) == [(0, _col("G"), 1)]
	assert _nonzero(agg.bonus_correct) == []
	assert agg.warnings == []
	assert not agg.has_warnings


def test_out_of_range_record_warns_once_without_increments() -> None:
	grid = [["Q", "G", "A"]]
	records = [
		_record("1", "1", "Alice", "1", "TC"),
		_record("1", "9", "Bob", "2", "TE"),
	]
	quizzers = qperformance.quizzers.QuizzerIndex.from_records(records)

	agg = qperformance.aggregate.aggregate_records(records, grid, quizzers, CONFIG)

	assert len(agg.warnings) == 1
	warning = agg.warnings[0]
	assert warning["kind"] == qperformance.aggregate.WARNING_OUT_OF_RANGE
	assert warning["message"] == "skipped: no question type for round 1, question 9"
	assert agg.records_skipped == 1
	bob = quizzers.index_of("Bob")
	for matrix in agg.matrices().values():
		assert sum(matrix[bob]) == 0


def test_unparseable_and_round_beyond_grid_are_misses() -> None:
	grid = [["Q", "G", "A"]]
	records = [
		_record("abc", "1", "Alice", "1", "TC"),
		_record("1", "'0'", "Alice", "1", "TC"),
		_record("2", "1", "Alice", "1", "TC"),
	]
	quizzers = qperformance.quizzers.QuizzerIndex(["Alice"])

	agg = qperformance.aggregate.aggregate_records(records, grid, quizzers, CONFIG)

	assert [w["round"] for w in agg.warnings] == [0, 1, 2]
	assert _nonzero(agg.attempts) == []


def test_question_21_is_general_category() -> None:
	grid = [["Q"] * 25]
	records = [
		_record("'1'", "'21'", "Alice", "1", "TC"),
		_record("'1'", "'22'", "Alice", "1", "TC"),
	]
	quizzers = qperformance.quizzers.QuizzerIndex(["Alice"])

	agg = qperformance.aggregate.aggregate_records(records, grid, quizzers, CONFIG)

	assert agg.correct[0][_col("G")] == 1
	assert agg.correct[0][_col("Q")] == 1
	assert agg.warnings == []


def test_event_kinds_increment_matching_matrices() -> None:
	grid = [["S"]]
	records = [
		_record("1", "1", "Alice", "1", "TC"),
		_record("1", "1", "Alice", "1", "TE"),
		_record("1", "1", "Alice", "1", "BC"),
		_record("1", "1", "Alice", "1", "BE"),
		_record("1", "1", "Alice", "1", "XX"),
	]
	quizzers = qperformance.quizzers.QuizzerIndex(["Alice"])

	agg = qperformance.aggregate.aggregate_records(records, grid, quizzers, CONFIG)

	s = _col("S")
	assert agg.attempts[0][s] == 2
	assert agg.correct[0][s] == 1
	assert agg.bonus_attempts[0][s] == 2
	assert agg.bonus_correct[0][s] == 1
	assert agg.warnings == []


def test_unresolved_quizzer_is_not_charged_to_index_zero() -> None:
	grid = [["Q"]]
	quizzers = qperformance.quizzers.QuizzerIndex(["Alice"])

	agg = qperformance.aggregate.aggregate_records([_record("1", "1", "Mallory", "1", "TC")], grid, quizzers, CONFIG)

	assert [w["kind"] for w in agg.warnings] == [qperformance.aggregate.WARNING_UNRESOLVED_QUIZZER]
	assert _nonzero(agg.attempts) == []


def test_unknown_question_type_falls_back_to_first_column() -> None:
	grid = [["z"]]
	quizzers = qperformance.quizzers.QuizzerIndex(["Alice"])

	agg = qperformance.aggregate.aggregate_records([_record("1", "1", "Alice", "1", "TE")], grid, quizzers, CONFIG)

	assert agg.attempts[0][0] == 1
	assert [w["kind"] for w in agg.warnings] == [qperformance.aggregate.WARNING_UNKNOWN_QUESTION_TYPE]
	assert agg.records_skipped == 0


def test_types_outside_allow_list_are_not_counted() -> None:
	grid = [["Q", "G"]]
	records = [
		_record("1", "1", "Alice", "1", "TC"),
		_record("1", "2", "Alice", "1", "TC"),
	]
	quizzers = qperformance.quizzers.QuizzerIndex(["Alice"])

	agg = qperformance.aggregate.aggregate_records(records, grid, quizzers, CONFIG, question_types=["Q"])

	assert _nonzero(agg.correct) == [(0, _col("Q"), 1)]


def test_rounds_are_tracked_per_quizzer() -> None:
	grid = [["Q"], ["G"], ["A"]]
	records = [
		_record("3", "1", "Alice", "1", "TC"),
		_record("1", "1", "Alice", "1", "BE"),
		_record("2", "1", "Bob", "2", "TE"),
	]
	quizzers = qperformance.quizzers.QuizzerIndex.from_records(records)

	agg = qperformance.aggregate.aggregate_records(records, grid, quizzers, CONFIG)

	assert agg.rounds_by_quizzer == [{1, 3}, {2}]


def test_record_in_grid() -> None:
	grid = [["Q", "G", "A"]]
	assert qperformance.aggregate.record_in_grid(_record("1", "3", "A", "1", "TC"), grid, CONFIG)
	assert not qperformance.aggregate.record_in_grid(_record("1", "4", "A", "1", "TC"), grid, CONFIG)
	assert not qperformance.aggregate.record_in_grid(_record("", "1", "A", "1", "TC"), grid, CONFIG)


def test_format_warning() -> None:
	warning = qperformance.aggregate.make_warning("out_of_range", "skipped: x", round_number=1)
	assert warning == {"kind": "out_of_range", "message": "skipped: x", "round": 1}
	assert qperformance.aggregate.format_warning(warning) == "Warning: skipped: x"

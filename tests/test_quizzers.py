# Local modules
import qperformance.events
import qperformance.quizzers


def _record(quizzer: str, team: str) -> qperformance.events.EventRecord:
	return qperformance.events.EventRecord(
		round_text="1",
		question_text="1",
		quizzer=quizzer,
		team_text=team,
		event_code="TC",
	)


def test_order_is_team_then_first_appearance() -> None:
	records = [
		_record("Dana", "2"),
		_record("Alice", "1"),
		_record("Eve", "2"),
		_record("Bob", "1"),
		_record("Dana", "2"),
	]

	index = qperformance.quizzers.QuizzerIndex.from_records(records)

	assert index.names == ["Alice", "Bob", "Dana", "Eve"]
	assert len(index) == 4


def test_dedup_is_global_across_teams() -> None:
	records = [
		_record("Alice", "3"),
		_record("Alice", "1"),
		_record("Bob", "1"),
	]

	index = qperformance.quizzers.QuizzerIndex.from_records(records)

	assert index.names == ["Bob", "Alice"]


def test_unparseable_team_is_team_zero() -> None:
	records = [
		_record("Alice", "1"),
		_record("Zed", "'x'"),
	]

	index = qperformance.quizzers.QuizzerIndex.from_records(records)

	assert index.names == ["Zed", "Alice"]


def test_index_of_and_fallback() -> None:
	index = qperformance.quizzers.QuizzerIndex(["Alice", "Bob"])
	assert index.index_of("Bob") == 1
	assert "Bob" in index
	assert "Nobody" not in index
	assert index.index_of("Nobody") == 0

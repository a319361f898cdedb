# Standard Library

# Local modules
import qperformance.config
import qperformance.events
import qperformance.quizzers
import qperformance.type_grid


MATRIX_NAMES = ("attempts", "correct", "bonus_attempts", "bonus_correct")

WARNING_OUT_OF_RANGE = "out_of_range"
WARNING_UNRESOLVED_QUIZZER = "unresolved_quizzer"
WARNING_UNKNOWN_QUESTION_TYPE = "unknown_question_type"

# Event kind -> matrices it increments.
_EVENT_TARGETS: dict[str, tuple[str, ...]] = {
	qperformance.config.EVENT_TOSSUP_CORRECT: ("attempts", "correct"),
	qperformance.config.EVENT_TOSSUP_ERROR: ("attempts",),
	qperformance.config.EVENT_BONUS_CORRECT: ("bonus_attempts", "bonus_correct"),
	qperformance.config.EVENT_BONUS_ERROR: ("bonus_attempts",),
}


#============================================


def make_warning(
	kind: str,
	message: str,
	*,
	round_number: int | None = None,
	question_number: int | None = None,
	quizzer: str | None = None,
) -> dict[str, object]:
	"""
	Create a warning dict.

	Args:
		kind: Warning kind.
		message: Human-readable message.
		round_number: Optional 1-indexed round from the event log.
		question_number: Optional 1-indexed question from the event log.
		quizzer: Optional quizzer name.

	Returns:
		dict[str, object]: Warning dict.
	"""
	warning: dict[str, object] = {
		"kind": kind,
		"message": message,
	}
	if round_number is not None:
		warning["round"] = int(round_number)
	if question_number is not None:
		warning["question"] = int(question_number)
	if quizzer is not None:
		warning["quizzer"] = quizzer
	return warning


def format_warning(warning: dict[str, object]) -> str:
	return f"Warning: {warning.get('message', '')}"


#============================================


def zero_matrix(rows: int, cols: int) -> list[list[int]]:
	return [[0] * cols for _ in range(rows)]


#============================================


def record_in_grid(
	record: qperformance.events.EventRecord,
	grid: list[list[str]],
	config: qperformance.config.QuizConfig,
) -> bool:
	"""
	Return True when the record's round and question fall inside the grid.
	"""
	round_number = qperformance.events.parse_number(record.round_text, config.quote_char)
	question_number = qperformance.events.parse_number(record.question_text, config.quote_char)
	return qperformance.type_grid.lookup(grid, round_number - 1, question_number - 1) is not None


#============================================


class Aggregator:
	"""
	Accumulate per-quizzer, per-question-type counts from scoring events.

	Bad records never raise: they are skipped or degraded and a warning is
	recorded instead.
	"""

	def __init__(
		self,
		*,
		grid: list[list[str]],
		quizzers: qperformance.quizzers.QuizzerIndex,
		config: qperformance.config.QuizConfig,
		question_types: list[str] | None = None,
	):
		self.grid = grid
		self.quizzers = quizzers
		self.config = config
		self.question_types = list(question_types) if question_types else config.sorted_types()
		self._selected = set(self.question_types)

		num_quizzers = len(quizzers)
		num_types = len(config.question_types)
		self.attempts = zero_matrix(num_quizzers, num_types)
		self.correct = zero_matrix(num_quizzers, num_types)
		self.bonus_attempts = zero_matrix(num_quizzers, num_types)
		self.bonus_correct = zero_matrix(num_quizzers, num_types)
		self.rounds_by_quizzer: list[set[int]] = [set() for _ in range(num_quizzers)]
		self.warnings: list[dict[str, object]] = []
		self.records_skipped = 0

	@property
	def has_warnings(self) -> bool:
		return bool(self.warnings)

	def matrices(self) -> dict[str, list[list[int]]]:
		return {name: getattr(self, name) for name in MATRIX_NAMES}

	def resolve_question_type(self, round_index: int, question_index: int) -> str | None:
		"""
		Return the question type for a 0-indexed cell, or None on a miss.
		"""
		question_type = qperformance.type_grid.lookup(self.grid, round_index, question_index)
		if question_type is None:
			return None
		if question_index + 1 == self.config.general_question:
			return self.config.general_type
		return question_type

	def add_record(self, record: qperformance.events.EventRecord) -> None:
		quote_char = self.config.quote_char
		round_number = qperformance.events.parse_number(record.round_text, quote_char)
		question_number = qperformance.events.parse_number(record.question_text, quote_char)

		question_type = self.resolve_question_type(round_number - 1, question_number - 1)
		if question_type is None:
			self._skip(make_warning(
				WARNING_OUT_OF_RANGE,
				f"skipped: no question type for round {round_number}, question {question_number}",
				round_number=round_number,
				question_number=question_number,
				quizzer=record.quizzer,
			))
			return

		if record.quizzer not in self.quizzers:
			self._skip(make_warning(
				WARNING_UNRESOLVED_QUIZZER,
				f"skipped: unresolved quizzer {record.quizzer!r} in round {round_number}, question {question_number}",
				round_number=round_number,
				question_number=question_number,
				quizzer=record.quizzer,
			))
			return
		quizzer_index = self.quizzers.index_of(record.quizzer)

		type_index = self.config.type_index(question_type)
		if type_index is None:
			type_index = 0
			self.warnings.append(make_warning(
				WARNING_UNKNOWN_QUESTION_TYPE,
				f"unrecognized question type {question_type!r} for round {round_number}, "
				f"question {question_number}; counted as {self.config.question_types[0]!r}",
				round_number=round_number,
				question_number=question_number,
				quizzer=record.quizzer,
			))

		targets = _EVENT_TARGETS.get(record.event_code)
		if targets is None:
			return
		self.rounds_by_quizzer[quizzer_index].add(round_number)

		if self.config.question_types[type_index] not in self._selected:
			return
		for name in targets:
			getattr(self, name)[quizzer_index][type_index] += 1

	def _skip(self, warning: dict[str, object]) -> None:
		self.records_skipped += 1
		self.warnings.append(warning)


#============================================


def aggregate_records(
	records: list[qperformance.events.EventRecord],
	grid: list[list[str]],
	quizzers: qperformance.quizzers.QuizzerIndex,
	config: qperformance.config.QuizConfig,
	question_types: list[str] | None = None,
) -> Aggregator:
	aggregator = Aggregator(grid=grid, quizzers=quizzers, config=config, question_types=question_types)
	for record in records:
		aggregator.add_record(record)
	return aggregator

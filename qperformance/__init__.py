"""Per-quizzer question-type statistics for quiz competitions."""

from qperformance.aggregate import Aggregator, aggregate_records
from qperformance.answer_key import extract_question_types, find_round_number, read_answer_key
from qperformance.config import QuizConfig, load_config
from qperformance.events import EventRecord, filter_rows, read_event_log
from qperformance.quizzers import QuizzerIndex
from qperformance.report_tsv import render_report
from qperformance.type_grid import build_type_grid

__all__ = [
	"Aggregator",
	"aggregate_records",
	"extract_question_types",
	"find_round_number",
	"read_answer_key",
	"QuizConfig",
	"load_config",
	"EventRecord",
	"filter_rows",
	"read_event_log",
	"QuizzerIndex",
	"render_report",
	"build_type_grid",
]

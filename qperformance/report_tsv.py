# Standard Library
import os

# Local modules
import qperformance.config
import qperformance.errors


COLUMN_SUFFIXES = ("QA", "QC", "BA", "BC")


#============================================


def render_report(
	quizzer_names: list[str],
	matrices: dict[str, list[list[int]]],
	question_types: list[str],
	config: qperformance.config.QuizConfig,
	*,
	show_round: bool = False,
	rounds_by_quizzer: list[set[int]] | None = None,
) -> str:
	"""
	Render the per-quizzer table as tab-separated text.

	Args:
		quizzer_names: Quizzers in report order.
		matrices: attempts, correct, bonus_attempts, bonus_correct.
		question_types: Types to report; columns are sorted by code.
		config: Configuration holding the type -> column table.
		show_round: Include a Rounds column after the quizzer name.
		rounds_by_quizzer: Rounds each quizzer scored in, when tracked.

	Returns:
		str: Header plus one line per quizzer, each newline-terminated.
	"""
	types = sorted(question_types)
	attempts = matrices["attempts"]
	correct = matrices["correct"]
	bonus_attempts = matrices["bonus_attempts"]
	bonus_correct = matrices["bonus_correct"]

	header = ["Quizzer"]
	if show_round:
		header.append("Rounds")
	for t in types:
		header.extend(f"{t} {suffix}" for suffix in COLUMN_SUFFIXES)
	lines: list[str] = ["\t".join(header)]

	for i, name in enumerate(quizzer_names):
		cells = [name]
		if show_round:
			cells.append(_rounds_cell(rounds_by_quizzer, i))
		for t in types:
			j = config.type_index(t)
			if j is None:
				j = 0
			for matrix in (attempts, correct, bonus_attempts, bonus_correct):
				cells.append(f"{matrix[i][j]:.1f}")
		lines.append("\t".join(cells))

	return "\n".join(lines) + "\n"


def _rounds_cell(rounds_by_quizzer: list[set[int]] | None, i: int) -> str:
	if rounds_by_quizzer is None or i >= len(rounds_by_quizzer):
		return ""
	return ",".join(str(r) for r in sorted(rounds_by_quizzer[i]))


#============================================


def write_report(out_file: str, text: str) -> None:
	out_dir = os.path.dirname(out_file)
	try:
		if out_dir:
			os.makedirs(out_dir, exist_ok=True)
		with open(out_file, "w", encoding="utf-8", newline="") as f:
			f.write(text)
	except OSError as exc:
		raise qperformance.errors.WriteError(out_file, str(exc)) from exc

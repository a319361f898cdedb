# Standard Library
import os
import re

# Local modules
import qperformance.config
import qperformance.errors


ROUND_MARKER_RX = re.compile(r"SET #(\d+)")
TAB_MARKER = "\\tab"

# Round numbers in answer keys are small positive integers.
MAX_ROUND_NUMBER = 127


#============================================


def find_round_number(text: str, path: str | None = None) -> int:
	"""
	Return the 0-indexed round declared by the "SET #<n>" marker.
	"""
	m = ROUND_MARKER_RX.search(text)
	if m is None:
		raise qperformance.errors.MissingRoundNumber(path)
	raw = m.group(1)
	if len(raw) > len(str(MAX_ROUND_NUMBER)):
		raise qperformance.errors.InvalidRoundNumber(raw, path)
	value = int(raw)
	if value < 1 or value > MAX_ROUND_NUMBER:
		raise qperformance.errors.InvalidRoundNumber(raw, path)
	return value - 1


#============================================


def extract_question_types(text: str) -> list[str]:
	"""
	Return the question type codes of one answer key, in document order.

	The text is split on RTF tab markers; even-indexed segments are question
	cells whose second-to-last character is the type code.
	"""
	question_types: list[str] = []
	for i, part in enumerate(text.split(TAB_MARKER)):
		if i % 2 != 0 or not part:
			continue
		if len(part) > 1:
			question_types.append(part[-2])
	return question_types


#============================================


def read_answer_key(path: str) -> tuple[int, list[str]]:
	text = _read_text_latin1(path)
	round_index = find_round_number(text, path)
	return round_index, extract_question_types(text)


#============================================


def scan_answer_keys(directory: str, extensions: tuple[str, ...]) -> list[str]:
	"""
	Return answer-key paths in the directory, sorted by name.

	Only direct entries with a recognized extension are returned.
	"""
	if not os.path.isdir(directory):
		raise qperformance.errors.PathNotFound(directory, "question set directory")
	try:
		names = sorted(os.listdir(directory))
	except OSError as exc:
		raise qperformance.errors.ReadError(directory, str(exc)) from exc

	found: list[str] = []
	for name in names:
		path = os.path.join(directory, name)
		if not os.path.isfile(path):
			continue
		ext = os.path.splitext(name)[1].lower()
		if ext in extensions:
			found.append(path)
	return found


#============================================


def load_answer_keys(directory: str, config: qperformance.config.QuizConfig) -> list[tuple[int, list[str]]]:
	pairs: list[tuple[int, list[str]]] = []
	for path in scan_answer_keys(directory, config.document_extensions):
		pairs.append(read_answer_key(path))
	return pairs


#============================================


def _read_text_latin1(path: str) -> str:
	try:
		with open(path, "rb") as f:
			return f.read().decode("latin-1")
	except FileNotFoundError as exc:
		raise qperformance.errors.PathNotFound(path, "answer key") from exc
	except OSError as exc:
		raise qperformance.errors.ReadError(path, str(exc)) from exc

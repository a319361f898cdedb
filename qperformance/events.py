# Standard Library
import csv
import dataclasses
import io

# Local modules
import qperformance.config
import qperformance.errors


# Multi-character delimiters are mapped onto the first of these that does
# not occur in the text; private-use code points follow the C0 separators.
_SEPARATOR_CANDIDATES = "\x1f\x1e\x1d\x1c"
_PRIVATE_USE_START = 0xE000
_PRIVATE_USE_END = 0xF8FF
MAX_DELIMITER_LENGTH = 5


@dataclasses.dataclass(frozen=True)
class EventRecord:
	round_text: str
	question_text: str
	quizzer: str
	team_text: str
	event_code: str
	tournament: str = ""


#============================================


def normalize_delimiter(raw: str) -> str:
	"""
	Validate a user-supplied delimiter; the literal "\\t" means a tab.
	"""
	delimiter = "\t" if raw == "\\t" else raw
	if not delimiter:
		raise qperformance.errors.InvalidDelimiter(raw, "empty delimiter")
	if len(delimiter) > MAX_DELIMITER_LENGTH:
		raise qperformance.errors.InvalidDelimiter(raw, f"longer than {MAX_DELIMITER_LENGTH} characters")
	if "/" in delimiter or "\\" in delimiter:
		raise qperformance.errors.InvalidDelimiter(raw, "contains a path separator")
	if '"' in delimiter:
		raise qperformance.errors.InvalidDelimiter(raw, "contains the quote character")
	return delimiter


#============================================


def read_event_log(path: str, delimiter: str = ",") -> list[list[str]]:
	"""
	Read an event log and return its data rows (the header row is dropped).

	Every row must have as many fields as the header.
	"""
	try:
		with open(path, "r", encoding="utf-8", newline="") as f:
			text = f.read()
	except FileNotFoundError as exc:
		raise qperformance.errors.PathNotFound(path, "quiz data file") from exc
	except (OSError, UnicodeDecodeError) as exc:
		raise qperformance.errors.ReadError(path, str(exc)) from exc
	return parse_event_text(text, delimiter=delimiter, path=path)


def parse_event_text(text: str, *, delimiter: str = ",", path: str = "<text>") -> list[list[str]]:
	if len(delimiter) > 1:
		text, delimiter = _substitute_delimiter(text, delimiter, path)

	reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter)
	rows: list[list[str]] = []
	header_len: int | None = None
	try:
		for row in reader:
			if not row:
				continue
			if header_len is None:
				header_len = len(row)
				continue
			if len(row) != header_len:
				raise qperformance.errors.MalformedRow(
					path,
					reader.line_num,
					f"found {len(row)} fields, header has {header_len}",
				)
			rows.append(row)
	except csv.Error as exc:
		raise qperformance.errors.MalformedRow(path, reader.line_num, str(exc)) from exc
	return rows


#============================================


def filter_rows(
	rows: list[list[str]],
	config: qperformance.config.QuizConfig,
	tournament: str | None = None,
) -> list[EventRecord]:
	"""
	Keep scoring rows (TC/TE/BC/BE) and turn them into EventRecords.

	Event codes must match exactly, quotes included. With a tournament
	filter, the row's tournament field (unquoted) must equal it.
	"""
	records: list[EventRecord] = []
	for row in rows:
		if config.event_column >= len(row):
			continue
		kind = config.event_kind(row[config.event_column])
		if kind is None:
			continue
		row_tournament = _unquote(_field(row, config.tournament_column), config.quote_char)
		if tournament is not None and row_tournament != tournament:
			continue
		records.append(
			EventRecord(
				round_text=_field(row, config.round_column),
				question_text=_field(row, config.question_column),
				quizzer=_field(row, config.quizzer_column),
				team_text=_field(row, config.team_column),
				event_code=kind,
				tournament=row_tournament,
			)
		)
	return records


#============================================


def parse_number(text: str, quote_char: str = qperformance.config.DEFAULT_QUOTE_CHAR) -> int:
	"""
	Parse a 1-indexed round or question number; anything unparseable is 0.
	"""
	value = _unquote(text, quote_char)
	if not (value.isascii() and value.isdigit()):
		return 0
	return int(value)


def _unquote(text: str, quote_char: str) -> str:
	if not quote_char:
		return text
	return text.strip(quote_char)


def _field(row: list[str], index: int) -> str:
	if index < len(row):
		return row[index]
	return ""


#============================================


def _substitute_delimiter(text: str, delimiter: str, path: str) -> tuple[str, str]:
	"""
	Replace a multi-character delimiter outside quoted fields with one character.

	Returns the rewritten text and the single-character delimiter to use.
	"""
	separator = _pick_separator(text)
	if separator is None:
		raise qperformance.errors.MalformedRow(path, 0, f"no free character to stand in for delimiter {delimiter!r}")

	out: list[str] = []
	in_quotes = False
	i = 0
	while i < len(text):
		ch = text[i]
		if ch == '"':
			in_quotes = not in_quotes
			out.append(ch)
			i += 1
			continue
		if (not in_quotes) and text.startswith(delimiter, i):
			out.append(separator)
			i += len(delimiter)
			continue
		out.append(ch)
		i += 1
	return "".join(out), separator


def _pick_separator(text: str) -> str | None:
	for ch in _SEPARATOR_CANDIDATES:
		if ch not in text:
			return ch
	for code in range(_PRIVATE_USE_START, _PRIVATE_USE_END + 1):
		ch = chr(code)
		if ch not in text:
			return ch
	return None

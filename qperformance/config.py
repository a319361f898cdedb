# Standard Library
import dataclasses
import json

# Local modules
import qperformance.errors


# Column order is the index order of the count matrices.
DEFAULT_QUESTION_TYPES: tuple[str, ...] = ("A", "G", "I", "Q", "R", "S", "X", "V")
DEFAULT_GENERAL_TYPE = "G"

EVENT_TOSSUP_CORRECT = "TC"
EVENT_TOSSUP_ERROR = "TE"
EVENT_BONUS_CORRECT = "BC"
EVENT_BONUS_ERROR = "BE"

DEFAULT_QUOTE_CHAR = "'"
DEFAULT_EVENT_CODES: tuple[tuple[str, str], ...] = (
	(EVENT_TOSSUP_CORRECT, "'TC'"),
	(EVENT_TOSSUP_ERROR, "'TE'"),
	(EVENT_BONUS_CORRECT, "'BC'"),
	(EVENT_BONUS_ERROR, "'BE'"),
)

DEFAULT_COLUMNS: dict[str, int] = {
	"tournament": 0,
	"round": 4,
	"question": 5,
	"quizzer": 7,
	"team": 8,
	"event": 10,
}

DEFAULT_PAGE_SIZE = 20
DEFAULT_GENERAL_QUESTION = 21
DEFAULT_EXTENSIONS: tuple[str, ...] = (".rtf",)


#============================================


@dataclasses.dataclass(frozen=True)
class QuizConfig:
	question_types: tuple[str, ...] = DEFAULT_QUESTION_TYPES
	general_type: str = DEFAULT_GENERAL_TYPE
	event_codes: tuple[tuple[str, str], ...] = DEFAULT_EVENT_CODES
	quote_char: str = DEFAULT_QUOTE_CHAR
	tournament_column: int = DEFAULT_COLUMNS["tournament"]
	round_column: int = DEFAULT_COLUMNS["round"]
	question_column: int = DEFAULT_COLUMNS["question"]
	quizzer_column: int = DEFAULT_COLUMNS["quizzer"]
	team_column: int = DEFAULT_COLUMNS["team"]
	event_column: int = DEFAULT_COLUMNS["event"]
	page_size: int = DEFAULT_PAGE_SIZE
	general_question: int = DEFAULT_GENERAL_QUESTION
	document_extensions: tuple[str, ...] = DEFAULT_EXTENSIONS

	def type_index(self, code: str) -> int | None:
		"""
		Return the matrix column for a question type code, or None if unknown.
		"""
		if code in self.question_types:
			return self.question_types.index(code)
		return None

	def event_kind(self, token: str) -> str | None:
		"""
		Map a raw event-code field (quoted as in the log) to its event kind.
		"""
		for kind, raw in self.event_codes:
			if raw == token:
				return kind
		return None

	def sorted_types(self) -> list[str]:
		return sorted(self.question_types)


#============================================


def load_config(config_file: str | None) -> QuizConfig:
	"""
	Load a QuizConfig from JSON or fall back to defaults.

	Args:
		config_file: Optional path to a JSON config file.

	Returns:
		QuizConfig: Immutable configuration.
	"""
	if config_file is None:
		return QuizConfig()
	try:
		with open(config_file, "r", encoding="utf-8") as handle:
			data = json.load(handle)
	except FileNotFoundError as exc:
		raise qperformance.errors.PathNotFound(config_file, "config file") from exc
	except OSError as exc:
		raise qperformance.errors.ReadError(config_file, str(exc)) from exc
	except json.JSONDecodeError as exc:
		raise qperformance.errors.ConfigError(f"{config_file}: invalid JSON: {exc}") from exc
	if not isinstance(data, dict):
		raise qperformance.errors.ConfigError(f"{config_file}: expected a JSON object")
	return config_from_dict(data)


#============================================


def config_from_dict(data: dict) -> QuizConfig:
	"""
	Build a QuizConfig from a dict of overrides.
	"""
	fields: dict[str, object] = {}

	if "question_types" in data:
		types = data["question_types"]
		if isinstance(types, str):
			types = list(types)
		if not isinstance(types, list) or not types:
			raise qperformance.errors.ConfigError("question_types must be a non-empty list of codes")
		codes: list[str] = []
		for code in types:
			if not isinstance(code, str) or len(code) != 1:
				raise qperformance.errors.ConfigError(f"question type must be a single character: {code!r}")
			if code not in codes:
				codes.append(code)
		fields["question_types"] = tuple(codes)

	if "general_type" in data:
		fields["general_type"] = _single_char(data["general_type"], "general_type")

	if "quote_char" in data:
		quote_char = data["quote_char"]
		if not isinstance(quote_char, str) or len(quote_char) > 1:
			raise qperformance.errors.ConfigError("quote_char must be empty or a single character")
		fields["quote_char"] = quote_char

	if "event_codes" in data:
		event_codes = data["event_codes"]
		if not isinstance(event_codes, dict):
			raise qperformance.errors.ConfigError("event_codes must map event kinds to log tokens")
		merged = dict(DEFAULT_EVENT_CODES)
		for kind, token in event_codes.items():
			if kind not in merged:
				raise qperformance.errors.ConfigError(f"unknown event kind: {kind}")
			if not isinstance(token, str) or not token:
				raise qperformance.errors.ConfigError(f"event token for {kind} must be a non-empty string")
			merged[kind] = token
		fields["event_codes"] = tuple(merged.items())

	columns = data.get("columns", {})
	if not isinstance(columns, dict):
		raise qperformance.errors.ConfigError("columns must be an object")
	for name, index in columns.items():
		if name not in DEFAULT_COLUMNS:
			raise qperformance.errors.ConfigError(f"unknown column: {name}")
		fields[f"{name}_column"] = _non_negative_int(index, f"columns.{name}")

	if "page_size" in data:
		page_size = _non_negative_int(data["page_size"], "page_size")
		if page_size == 0:
			raise qperformance.errors.ConfigError("page_size must be positive")
		fields["page_size"] = page_size

	if "general_question" in data:
		fields["general_question"] = _non_negative_int(data["general_question"], "general_question")

	if "document_extensions" in data:
		extensions = data["document_extensions"]
		if not isinstance(extensions, list) or not all(isinstance(e, str) for e in extensions):
			raise qperformance.errors.ConfigError("document_extensions must be a list of strings")
		fields["document_extensions"] = tuple(normalize_extensions(extensions))

	config = QuizConfig(**fields)
	if config.general_type not in config.question_types:
		raise qperformance.errors.ConfigError(f"general_type {config.general_type!r} is not a question type")
	return config


#============================================


def normalize_extensions(extensions: list[str]) -> list[str]:
	normalized: list[str] = []
	for ext in extensions:
		ext = ext.strip().lower()
		if not ext:
			continue
		if not ext.startswith("."):
			ext = f".{ext}"
		normalized.append(ext)
	return normalized


def _single_char(value: object, name: str) -> str:
	if not isinstance(value, str) or len(value) != 1:
		raise qperformance.errors.ConfigError(f"{name} must be a single character")
	return value


def _non_negative_int(value: object, name: str) -> int:
	if isinstance(value, bool) or not isinstance(value, int) or value < 0:
		raise qperformance.errors.ConfigError(f"{name} must be a non-negative integer")
	return value


#============================================


def select_question_types(codes: str | None, config: QuizConfig) -> list[str]:
	"""
	Resolve a -t/--types argument into the sorted question type allow-list.

	Each character is matched case-insensitively; empty means every type.
	"""
	if not codes:
		return config.sorted_types()
	by_upper = {code.upper(): code for code in config.question_types}
	selected: list[str] = []
	for ch in codes:
		code = by_upper.get(ch.upper())
		if code is None:
			raise qperformance.errors.InvalidQuestionType(ch, config.question_types)
		if code not in selected:
			selected.append(code)
	return sorted(selected)

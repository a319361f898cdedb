# Standard Library


#============================================


class QPerformanceError(Exception):
	"""Base class for fatal setup errors."""


class PathNotFound(QPerformanceError):
	def __init__(self, path: str, what: str = "path"):
		self.path = path
		super().__init__(f"The {what} does not exist: {path}")


class ReadError(QPerformanceError):
	def __init__(self, path: str, reason: str):
		self.path = path
		super().__init__(f"Could not read {path}: {reason}")


class MalformedRow(QPerformanceError):
	def __init__(self, path: str, line: int, reason: str):
		self.path = path
		self.line = line
		super().__init__(f"{path}:{line}: malformed row: {reason}")


class MissingRoundNumber(QPerformanceError):
	def __init__(self, path: str | None = None):
		self.path = path
		where = f" in {path}" if path else ""
		super().__init__(f"No round number found{where}")


class InvalidRoundNumber(QPerformanceError):
	def __init__(self, value: str, path: str | None = None):
		self.value = value
		self.path = path
		where = f" in {path}" if path else ""
		super().__init__(f"Invalid round number: {value}{where}")


class InvalidQuestionType(QPerformanceError):
	def __init__(self, code: str, valid: tuple[str, ...]):
		self.code = code
		super().__init__(f"Invalid question type: {code!r} (valid types: {''.join(valid)})")


class InvalidDelimiter(QPerformanceError):
	def __init__(self, delimiter: str, reason: str):
		self.delimiter = delimiter
		super().__init__(f"Invalid delimiter {delimiter!r}: {reason}")


class ConfigError(QPerformanceError):
	pass


class WriteError(QPerformanceError):
	def __init__(self, path: str, reason: str):
		self.path = path
		super().__init__(f"Could not write {path}: {reason}")

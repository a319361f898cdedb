# Standard Library

# Local modules
import qperformance.events


#============================================


def parse_team(text: str) -> int:
	if text.isascii() and text.isdigit():
		return int(text)
	return 0


#============================================


class QuizzerIndex:
	"""Ordered, deduplicated quizzer names grouped by team of first appearance."""

	def __init__(self, names: list[str]) -> None:
		self._names = list(names)
		self._positions: dict[str, int] = {}
		for i, name in enumerate(self._names):
			self._positions.setdefault(name, i)

	@classmethod
	def from_records(cls, records: list[qperformance.events.EventRecord]) -> "QuizzerIndex":
		by_team: dict[int, list[str]] = {}
		seen: set[str] = set()
		for record in records:
			team = parse_team(record.team_text)
			group = by_team.setdefault(team, [])
			if record.quizzer in seen:
				continue
			seen.add(record.quizzer)
			group.append(record.quizzer)

		names: list[str] = []
		for team in sorted(by_team):
			names.extend(by_team[team])
		return cls(names)

	@property
	def names(self) -> list[str]:
		return list(self._names)

	def __len__(self) -> int:
		return len(self._names)

	def __contains__(self, name: object) -> bool:
		return name in self._positions

	def index_of(self, name: str) -> int:
		"""
		Return the row index for a quizzer; unknown names fall back to 0.
		"""
		return self._positions.get(name, 0)

#!/usr/bin/env python3

# Standard Library
import argparse
import os
import sys

# Local modules
import qperformance.aggregate
import qperformance.answer_key
import qperformance.config
import qperformance.errors
import qperformance.events
import qperformance.quizzers
import qperformance.report_tsv
import qperformance.type_grid


#============================================


def main(argv: list[str] | None = None) -> None:
	args = parse_args(argv)
	verbose = bool(args.verbose)
	if verbose:
		_log("qperformance: verbose mode enabled")

	try:
		config = qperformance.config.load_config(args.config_file)
		question_types = qperformance.config.select_question_types(args.types, config)
		delimiter = qperformance.events.normalize_delimiter(args.delimiter)
		_check_paths(args.question_sets, args.quiz_data)
		report, aggregator = run(
			args.question_sets,
			args.quiz_data,
			config=config,
			question_types=question_types,
			delimiter=delimiter,
			tournament=args.tournament,
			show_round=args.show_round,
			verbose=verbose,
		)
	except qperformance.errors.QPerformanceError as exc:
		_log(f"Error: {exc}")
		raise SystemExit(1)

	for warning in aggregator.warnings:
		_log(qperformance.aggregate.format_warning(warning))
	if aggregator.records_skipped:
		_log(f"Warning: {skipped_summary(aggregator.records_skipped)}")

	sys.stdout.write(report)
	sys.stdout.flush()

	if args.out_file:
		try:
			qperformance.report_tsv.write_report(args.out_file, report)
		except qperformance.errors.QPerformanceError as exc:
			_log(f"Error: {exc}")
			raise SystemExit(1)
		if verbose:
			_log(f"qperformance: report written to {os.path.abspath(args.out_file)}")


def skipped_summary(count: int) -> str:
	if count == 1:
		return "1 record was skipped"
	return f"{count} records were skipped"


#============================================


def _log(msg: str) -> None:
	print(msg, file=sys.stderr, flush=True)


#============================================


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse command-line arguments.

	Returns:
		argparse.Namespace: Parsed arguments.
	"""
	parser = argparse.ArgumentParser(
		prog="qperformance",
		description="qperformance - A tool for analyzing quiz performance data.",
	)
	parser.add_argument(
		"question_sets",
		help="The path to the directory containing the question sets.",
	)
	parser.add_argument(
		"quiz_data",
		help="The path to the CSV file containing the quiz data.",
	)
	parser.add_argument(
		"-v",
		"--verbose",
		dest="verbose",
		action="store_true",
		help="Enable verbose mode (diagnostics on stderr).",
	)
	parser.add_argument(
		"-t",
		"--types",
		dest="types",
		default="",
		help="Question types to report, e.g. 'QGA' (default: all types).",
	)
	parser.add_argument(
		"-d",
		"--delim",
		dest="delimiter",
		default=",",
		help="Field delimiter of the quiz data file; '\\t' means tab (default: ',').",
	)
	parser.add_argument(
		"-n",
		"--name",
		dest="tournament",
		default=None,
		help="Only count events from this tournament.",
	)
	parser.add_argument(
		"-r",
		"--round",
		dest="show_round",
		action="store_true",
		help="Include the rounds each quizzer scored in.",
	)
	parser.add_argument(
		"-c",
		"--config",
		dest="config_file",
		default=None,
		help="Optional JSON file overriding question types, event codes and columns.",
	)
	parser.add_argument(
		"-o",
		"--output",
		dest="out_file",
		default=None,
		help="Also write the report to this file.",
	)
	parser.set_defaults(verbose=False, show_round=False)
	return parser.parse_args(argv)


#============================================


def _check_paths(question_sets: str, quiz_data: str) -> None:
	if not os.path.exists(question_sets):
		raise qperformance.errors.PathNotFound(question_sets, "path to the question sets")
	if not os.path.exists(quiz_data):
		raise qperformance.errors.PathNotFound(quiz_data, "path to the quiz data")


#============================================


def run(
	question_sets: str,
	quiz_data: str,
	*,
	config: qperformance.config.QuizConfig,
	question_types: list[str],
	delimiter: str = ",",
	tournament: str | None = None,
	show_round: bool = False,
	verbose: bool = False,
) -> tuple[str, qperformance.aggregate.Aggregator]:
	"""
	Run the whole pipeline and return (report text, aggregator).
	"""
	pairs = qperformance.answer_key.load_answer_keys(question_sets, config)
	if verbose:
		_log(f"qperformance: read {len(pairs)} answer keys")
		for round_index, types in sorted(pairs, key=lambda p: p[0]):
			_log(f"qperformance:   answer key round {round_index + 1}: {len(types)} questions")

	grid = qperformance.type_grid.build_type_grid(pairs, page_size=config.page_size)
	if verbose:
		_log(f"qperformance: type grid has {len(grid)} rounds")
		for i, row in enumerate(grid, start=1):
			_log(f"qperformance:   round {i}: {''.join(row)}")

	rows = qperformance.events.read_event_log(quiz_data, delimiter=delimiter)
	records = qperformance.events.filter_rows(rows, config, tournament=tournament)
	if verbose:
		_log(f"qperformance: {len(records)} of {len(rows)} rows are scoring events")

	# Quizzers whose only events fall outside the grid are not listed.
	quizzers = qperformance.quizzers.QuizzerIndex.from_records(
		[r for r in records if qperformance.aggregate.record_in_grid(r, grid, config)]
	)
	if verbose:
		_log(f"qperformance: quizzers: {', '.join(quizzers.names)}")
		for record in records:
			_log(
				f"qperformance: event {record.event_code} round={record.round_text} "
				f"question={record.question_text} quizzer={record.quizzer} team={record.team_text}"
			)
	aggregator = qperformance.aggregate.aggregate_records(
		records,
		grid,
		quizzers,
		config,
		question_types=question_types,
	)

	report = qperformance.report_tsv.render_report(
		quizzers.names,
		aggregator.matrices(),
		aggregator.question_types,
		config,
		show_round=show_round,
		rounds_by_quizzer=aggregator.rounds_by_quizzer,
	)
	return report, aggregator


#============================================


if __name__ == "__main__":
	main()

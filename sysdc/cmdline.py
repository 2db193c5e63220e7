"""
This is a checker for SysDC system descriptions.

{0}

For example:

    sysdc check examples/shop/*.sysdc

will check those units together and either say they look plausible,
or else try to explain why not.

    sysdc -h

will explain all the arguments.
"""
import sys, argparse
from pathlib import Path

parser = argparse.ArgumentParser(
	prog="sysdc",
	description="Checker for the SysDC architecture-description language.",
)
parser.add_argument("command", choices=["check"], help="What to do. For now, only 'check'.")
parser.add_argument("units", nargs="+", help="Unit files to check together; try examples/shop for example.")
parser.add_argument('-v', "--verbose", action="count", help="Say more about what's going on.")
parser.add_argument("--max-issues", type=int, default=3, help="Give up after this many issues.")

def run(args):
	from .diagnostics import Report, TooManyIssues
	from .errors import SysDCError
	from .modularity import read_units
	from .compiler import compile_units
	report = Report(verbose=args.verbose, max_issues=args.max_issues)
	try:
		pairs = list(read_units(map(Path, args.units), report))
		if report.sick():
			report.complain_to_console()
			return 1
		try: system = compile_units(pairs)
		except SysDCError as ex:
			report.compile_error(ex)
			report.complain_to_console()
			return 1
	except TooManyIssues:
		report.complain_to_console()
		print("Giving up after a few issues. One crisis at a time, eh?", file=sys.stderr)
		return 1
	for unit in system.units:
		report.info("Checked", unit.name, "with", len(unit.data), "data and", len(unit.modules), "modules")
	print("Looks plausible to me.", file=sys.stderr)
	return 0

def main():
	if len(sys.argv) > 1:
		sys.exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))

"""
Here find the input source -- such as it is.

Each file is one unit, named for the file's stem. Imports refer to units
by that name, so it doesn't matter what order the files come in.
"""
from pathlib import Path
from typing import Iterable, Iterator

from .diagnostics import Report

SUFFIX = ".sysdc"

def read_units(paths:Iterable[Path], report:Report) -> Iterator[tuple[str, str]]:
	""" Yield (unit name, unit text) for each readable file; complain about the rest. """
	for path in paths:
		path = Path(path)
		report.info("Loading", path)
		try:
			with open(path, "r", encoding="utf-8") as fh:
				text = fh.read()
		except FileNotFoundError:
			report.no_such_file(path)
		except OSError:
			report.broken_file(path)
		else:
			report.add_source(path.stem, text)
			yield path.stem, text

def units_in_folder(folder:Path) -> list[Path]:
	""" Every unit file directly within a folder, in a stable order. """
	return sorted(Path(folder).glob("*"+SUFFIX))

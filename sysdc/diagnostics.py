import sys, random
from pathlib import Path
from boozetools.support.failureprone import SourceText, illustration

from .errors import SysDCError
from .location import Span

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]

	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Confound it', 'Crud', 'Curses', "Crikey",
		'Dag Nabbit', 'Drat', 'Fiddlesticks', 'Good Grief', "Great Scott",
		'Heavens', "Mercy", 'Nuts', 'Rats',
	]

	resignations = [
		'I am undone.',
		'I cannot continue.',
		'The diagram does not add up.',
		'I need to ask for help.',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	"""
	Collects issues for whoever is driving the compiler, and prints them when asked.
	The compiler core itself never talks to the console; it only raises.
	"""
	_issues : list["Pic"]

	def __init__(self, *, verbose:int=0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._sources = {}
		self._max_issues = max_issues

	def sick(self): return bool(self._issues)

	def issue(self, it:"Pic"):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def add_source(self, unit:str, text:str):
		""" So that pictures of trouble can show the offending line. """
		self._sources[unit] = SourceText(text, filename=unit)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)

	# Methods the input source invokes:

	def no_such_file(self, path:Path):
		self.issue(Pic("I see no file called "+str(path), []))

	def broken_file(self, path:Path):
		self.issue(Pic("Something went pear-shaped while trying to read "+str(path), []))

	# The one method the command line calls when a compile fails:

	def compile_error(self, ex:SysDCError):
		intro = "%s: %s" % (type(ex).__name__, ex)
		if ex.span is not None and ex.span.unit in self._sources:
			problem = [Annotation(self._sources[ex.span.unit], ex.span, "here")]
		else:
			problem = []
		self.issue(Pic(intro, problem))

class Annotation:
	def __init__(self, source:SourceText, span:Span, caption:str=""):
		self.source = source
		self.unit = span.unit
		self.slice = span.slice
		self.width = span.width()
		self.caption = caption
	def illustrate(self):
		row, col = self.source.find_row_col(self.slice.start)
		single_line = self.source.line_of_text(row)
		return illustration(single_line, col, self.width, prefix='% 6d |' % row, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=()):
		self._intro, self._anns, self._footer = intro, anns, footer
	def as_text(self):
		lines = [self._intro, ""]
		unit = None
		for ann in self._anns:
			if ann.unit != unit:
				unit = ann.unit
				lines.append("In unit "+unit)
			lines.append(ann.illustrate())
		lines.extend(self._footer)
		return '\n'.join(lines)

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()

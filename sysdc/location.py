"""
A light-weight way to say where in which unit's text something happened.
The tokenizer stamps each token with one of these; diagnostics uses it to draw pictures.
"""
from typing import NamedTuple

class Span(NamedTuple):
	""" Aimed at whatever prints error messages """
	unit: str
	slice: slice

	def width(self) -> int: return max(1, self.slice.stop - self.slice.start)

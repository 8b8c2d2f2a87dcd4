"""
Turn constructor-expression text into a syntax tree.

The grammar lives in Reflect.md beside this file; booze-tools compiles it
to tables the first time it's needed. This module supplies the scanner and
parser actions, and turns the parse engine's complaints into ParseError.

There is no semantic checking here. Whether "Foo" means anything is
someone else's problem.
"""
import math
import sys
from pathlib import Path
from boozetools.macroparse.runtime import TypicalApplication, make_tables
from boozetools.scanning.engine import IterableScanner
from boozetools.parsing.interface import ParseError as _GenericParseError, END_OF_TOKENS
from .diagnostics import ReflectError
from .ontology import Nom, Spot
from .values import Integer, Float, Symbol, INT64_MIN, INT64_MAX
from . import syntax

class ParseError(ReflectError, _GenericParseError):
	""" Malformed expression text. Always knows the offset where things went wrong. """
	def __init__(self, text: str, offset: int, expected: str):
		super().__init__(offset, expected)
		self.offset, self.expected = offset, expected
		self.blame(Spot(offset), text)

	def at_end(self) -> bool: return self.offset >= len(self.text)

	def describe(self):
		where = "the end of input" if self.at_end() else "offset %d" % self.offset
		return "Syntax error at %s: expected %s." % (where, self.expected)

	def caption(self): return "expected " + self.expected

	def __str__(self): return self.describe()

_tables = make_tables(Path(__file__).parent/"Reflect.md")

WANT_ROOT = "a constructor or a literal"
WANT_ARGUMENT = "a constructor, a list, or a literal"
WANT_ELEMENT = "a literal"
WANT_NUMBER = "a numeric literal that fits in 64 bits"
WANT_TOKEN = "a name, a number, a bracket, or a comma"

_LITERALS = {"name", "integer", "real"}
_PUNCTUATION_ORDER = ["(", ",", ")", "]"]

class ReflectParser(TypicalApplication):
	"""
	Holds the state of a single parse, so make a fresh one each time.
	Every error, including a bad token or an out-of-range number, is raised
	as a ParseError, and nothing gets printed.
	"""

	def fail(self, offset: int, expected: str):
		raise ParseError(self.source.content, offset, expected)

	def scan_ignore(self, yy: IterableScanner): pass

	@staticmethod
	def scan_punctuation(yy: IterableScanner):
		punctuation = sys.intern(yy.match())
		yy.token(punctuation, yy.slice())

	def scan_integer(self, yy: IterableScanner):
		number = int(yy.match())
		if not INT64_MIN <= number <= INT64_MAX: self.fail(yy.left, WANT_NUMBER)
		yy.token("integer", syntax.Literal(Integer(number), yy.left, yy.right))

	def scan_real(self, yy: IterableScanner):
		number = float(yy.match())
		if not math.isfinite(number): self.fail(yy.left, WANT_NUMBER)
		yy.token("real", syntax.Literal(Float(number), yy.left, yy.right))

	@staticmethod
	def scan_word(yy: IterableScanner):
		yy.token("name", Nom(sys.intern(yy.match()), yy.left))

	@staticmethod
	def parse_first(item): return [item]
	@staticmethod
	def parse_more(some, another):
		some.append(another)
		return some

	@staticmethod
	def parse_nullary(name: Nom, close: slice): return syntax.CtorExpr(name, (), close.stop)
	@staticmethod
	def parse_call(name: Nom, args: list, close: slice): return syntax.CtorExpr(name, args, close.stop)
	@staticmethod
	def parse_bracket(opening: slice, elements: list, close: slice):
		return syntax.ListExpr(elements, opening.start, close.stop)
	@staticmethod
	def parse_symbol(name: Nom):
		return syntax.Literal(Symbol(name.text), name.left(), name.right())

	def expectation(self, pds) -> str:
		expected = set(self.expected_tokens(pds))
		phrases = []
		if _LITERALS <= expected:
			if "[" in expected: phrases.append(WANT_ARGUMENT)
			elif self.stack_symbols(pds): phrases.append(WANT_ELEMENT)
			else: phrases.append(WANT_ROOT)
		phrases.extend("'%s'" % p for p in _PUNCTUATION_ORDER if p in expected)
		if END_OF_TOKENS in expected: phrases.append("the end of input")
		return " or ".join(phrases)

	def unexpected_token(self, kind, semantic, pds):
		self.fail(self.yy.slice().start, self.expectation(pds))

	def unexpected_eof(self, pds):
		self.fail(len(self.source.content), self.expectation(pds))

	def on_stuck(self, yy: IterableScanner):
		self.fail(yy.left, WANT_TOKEN)

def parse(text: str) -> syntax.Expression:
	""" Submit text to the parser; get back a tree, or else a ParseError. """
	assert isinstance(text, str), type(text)
	return ReflectParser(_tables).parse(text)

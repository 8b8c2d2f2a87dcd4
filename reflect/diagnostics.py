"""
Everything about complaining: the root of the error taxonomy,
the illustration of where in an expression a problem lies,
and the Report object that the command-line front end talks through.

The library proper never prints. It raises, and lets the caller decide.
"""
import sys
from typing import Optional
from boozetools.support.failureprone import SourceText, illustration
from .ontology import Phrase

class ReflectError(Exception):
	"""
	Root of everything this package raises on purpose.

	The `site` is the phrase to blame, when there is one.
	The `text` is the expression it came from, when anyone knows.
	Either may be filled in late, by whichever layer knows.
	"""
	site: Optional[Phrase] = None
	text: Optional[str] = None

	def describe(self) -> str:
		return str(self)

	def caption(self) -> str:
		return ""

	def blame(self, site: Optional[Phrase], text: Optional[str] = None) -> "ReflectError":
		""" Attach context if none is known yet. The first (innermost) blame wins. """
		if self.site is None: self.site = site
		if self.text is None: self.text = text
		return self

	def as_text(self) -> str:
		lines = [self.describe()]
		if self.site is not None and self.text:
			lines.append("")
			lines.append(Annotation(self.text, self.site, self.caption()).illustrate())
		lines.extend(self.footer())
		return "\n".join(lines)

	def footer(self) -> list[str]:
		return []

class RegistrationError(ReflectError):
	""" A descriptor was rejected by the registry. """
	def __init__(self, name: str, reason: str):
		super().__init__(name, reason)
		self.name, self.reason = name, reason
	def describe(self): return "Cannot register %r: %s" % (self.name, self.reason)
	def __str__(self): return self.describe()

class UnknownType(ReflectError):
	def __init__(self, name: str):
		super().__init__(name)
		self.name = name
	def describe(self): return "There is no registered type called %r." % self.name
	def caption(self): return "unknown type"
	def __str__(self): return self.describe()

class ResolutionError(ReflectError):
	""" Common ground for failures to pick exactly one signature. """
	def __init__(self, member: str, arguments, candidates):
		super().__init__(member, tuple(arguments), tuple(candidates))
		self.member = member
		self.arguments = tuple(arguments)
		self.candidates = tuple(candidates)
	def argument_kinds(self) -> str:
		return "(%s)" % ", ".join(a.kind_name() for a in self.arguments)
	def footer(self):
		if not self.candidates: return []
		return [self.candidate_heading()] + [" - %s" % c for c in self.candidates]
	def candidate_heading(self): return "Candidates considered:"
	def __str__(self): return self.describe()

class NoMatchingSignature(ResolutionError):
	def describe(self):
		if self.candidates:
			return "No signature of %s accepts %s." % (self.member, self.argument_kinds())
		else:
			return "There is no member %s to accept %s." % (self.member, self.argument_kinds())
	def caption(self): return "no matching signature"

class UnknownEnumSymbol(NoMatchingSignature):
	""" The nearest thing to a match failed only for want of an enum member. """
	def __init__(self, enum: str, symbol: str, member: str = "", arguments=(), candidates=()):
		super().__init__(member, arguments, candidates)
		self.enum, self.symbol = enum, symbol
	def describe(self): return "%r is not a member of enum %s." % (self.symbol, self.enum)
	def caption(self): return "not a member of " + self.enum

class UnacceptableArgument(NoMatchingSignature):
	""" A plain Python argument with no tagged form, such as a flag or an int too big for 64 bits. """
	def __init__(self, member: str, position: int, reason: str, candidates=()):
		super().__init__(member, (), candidates)
		self.position, self.reason = position, reason
	def describe(self): return "Argument %d to %s cannot be passed: %s" % (self.position, self.member, self.reason)
	def caption(self): return "unacceptable argument"

class AmbiguousSignature(ResolutionError):
	def describe(self):
		pattern = "%d signatures of %s accept %s equally well; refusing to guess."
		return pattern % (len(self.candidates), self.member, self.argument_kinds())
	def candidate_heading(self): return "All of these match:"
	def caption(self): return "ambiguous"

class CapabilityNotImplemented(ReflectError):
	def __init__(self, type_name: str, capability: str):
		super().__init__(type_name, capability)
		self.type_name, self.capability = type_name, capability
	def describe(self): return "%s does not implement capability %r." % (self.type_name, self.capability)
	def caption(self): return "lacks " + self.capability
	def __str__(self): return self.describe()

class InvocationError(ReflectError):
	""" User-supplied code blew up. The original exception is the __cause__. """
	def __init__(self, member: str, cause: BaseException):
		super().__init__(member, cause)
		self.member, self.cause = member, cause
	def describe(self): return "%s raised %s: %s" % (self.member, type(self.cause).__name__, self.cause)
	def caption(self): return "raised " + type(self.cause).__name__
	def __str__(self): return self.describe()

###############################################################################

class Annotation:
	text: str
	slice: slice
	caption: str
	def __init__(self, text: str, node: Phrase, caption: str = ""):
		left, right = node.span()
		self.text = text
		self.slice = slice(left, right)
		self.caption = caption
	def illustrate(self):
		source = SourceText(self.text)
		row, col = source.find_row_col(self.slice.start)
		single_line = source.line_of_text(row)
		width = max(1, self.slice.stop - self.slice.start)
		return illustration(single_line, col, width, prefix='% 6d |' % row, caption=self.caption)

###############################################################################

class Report:
	""" The console side of things. Only the command-line front end makes one of these. """

	def __init__(self, *, verbose: int = 0):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._failures = 0

	def ok(self): return not self._failures
	def sick(self): return bool(self._failures)

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def debug(self, *args):
		if self._verbose > 1:
			print(*args, file=sys.stderr)

	@staticmethod
	def trace(*args):
		print(*args, file=sys.stderr)

	def complain(self, error: ReflectError):
		""" Emit one failure to the console. """
		self._failures += 1
		print("*"*60, file=sys.stderr)
		print(error.as_text(), file=sys.stderr)
		sys.stderr.flush()

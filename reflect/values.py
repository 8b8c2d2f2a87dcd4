"""
This module defines the tagged run-time values that the engine operates in terms of.

Literals from the parser, lists of them, and constructed instances all travel
through resolution and dispatch as one of these classes. Code that consumes
them dispatches on the class (usually via a Visitor) rather than poking at
bare Python objects and hoping.
"""
from abc import ABC, abstractmethod
from typing import Any, Sequence

INT64_MIN = -2**63
INT64_MAX = 2**63 - 1

class Value(ABC):
	""" Root for the tagged variant of run-time values """
	@abstractmethod
	def kind_name(self) -> str:
		""" How to describe this value's tag in a diagnostic. """

	def __eq__(self, other):
		return type(self) is type(other) and self._key() == other._key()

	def __hash__(self):
		return hash((type(self), self._key()))

	def _key(self): raise NotImplementedError(type(self))

class Integer(Value):
	def __init__(self, value:int):
		assert isinstance(value, int) and not isinstance(value, bool), type(value)
		if not INT64_MIN <= value <= INT64_MAX:
			raise ValueError("Integer %d does not fit in 64 bits." % value)
		self.value = value
	def __repr__(self): return "Integer(%d)" % self.value
	def _key(self): return self.value
	def kind_name(self): return "int"

class Float(Value):
	def __init__(self, value:float):
		assert isinstance(value, float), type(value)
		self.value = value
	def __repr__(self): return "Float(%r)" % self.value
	def _key(self): return self.value
	def kind_name(self): return "float"

class Symbol(Value):
	""" An identifier-shaped literal. Resolution decides if it means an enum member. """
	def __init__(self, text:str):
		assert isinstance(text, str), type(text)
		self.text = text
	def __repr__(self): return "Symbol(%r)" % self.text
	def _key(self): return self.text
	def kind_name(self): return "symbol"

class ListValue(Value):
	""" Elements are not checked for uniformity here; that waits for a parameter to compare with. """
	elements: tuple[Value, ...]
	def __init__(self, elements:Sequence[Value]):
		assert all(isinstance(e, Value) for e in elements), elements
		self.elements = tuple(elements)
	def __repr__(self): return "ListValue(%r)" % list(self.elements)
	def __len__(self): return len(self.elements)
	def __iter__(self): return iter(self.elements)
	def _key(self): return self.elements
	def kind_name(self):
		kinds = sorted(set(e.kind_name() for e in self.elements))
		return "list[%s]" % "|".join(kinds)

class Instance(Value):
	"""
	Opaque handle on a constructed object, tagged with its type descriptor.
	Handles compare by identity: two constructions are never the same instance.
	Sharing is ordinary Python reference-sharing; the object lives as long as its longest holder.
	"""
	def __init__(self, descriptor, obj:Any):
		self.descriptor = descriptor
		self.obj = obj
	def __repr__(self): return "<Instance of %s: %r>" % (self.descriptor.name, self.obj)
	def __eq__(self, other): return self is other
	def __hash__(self): return id(self)
	def kind_name(self): return self.descriptor.name

def wrap(item) -> Value:
	"""
	Bring a plain Python argument into the tagged world.
	Values pass through unchanged. Flags are refused so True never sneaks in as 1.
	"""
	if isinstance(item, Value): return item
	if isinstance(item, bool): raise TypeError("A flag is not an acceptable argument: %r" % item)
	if isinstance(item, int): return Integer(item)
	if isinstance(item, float): return Float(item)
	if isinstance(item, str): return Symbol(item)
	if isinstance(item, (list, tuple)): return ListValue([wrap(x) for x in item])
	raise TypeError("Cannot pass %s as an argument." % type(item).__name__)

def wrap_all(args:Sequence) -> list[Value]:
	return [wrap(a) for a in args]

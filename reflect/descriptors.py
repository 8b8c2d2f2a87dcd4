"""
Descriptions of what the registry knows about each type and enum.

These are built once, during registration, and never change afterward.
A TypeDescriptor holds signatures for constructors, methods, and static functions;
each Signature carries the Python callable which actually does the work.
"""
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping, NamedTuple, Optional, Sequence, Union
from .diagnostics import RegistrationError, UnknownEnumSymbol
from .kinds import Kind

class Capability:
	""" A named interface that types may declare they satisfy. """
	def __init__(self, name: str):
		assert isinstance(name, str) and name, name
		self.name = name
	def __repr__(self): return "<Capability %s>" % self.name
	def __str__(self): return self.name
	def __eq__(self, other): return isinstance(other, Capability) and other.name == self.name
	def __hash__(self): return hash(self.name)

CAPABILITY = Union[Capability, str]

def capability_name(capability: CAPABILITY) -> str:
	return capability.name if isinstance(capability, Capability) else capability

class Signature:
	"""
	One way to call something: a member name (empty for constructors),
	the kinds expected in each position, and the callable behind it.

	For a constructor, the callable produces the new object.
	For a method, it takes the receiver first, then the arguments.
	For a static function, it takes just the arguments.
	"""
	def __init__(self, name: str, params: Sequence[Kind], function: Callable):
		assert isinstance(name, str), type(name)
		assert all(isinstance(p, Kind) for p in params), params
		assert callable(function), function
		self.name = name
		self.params = tuple(params)
		self.function = function
	def arity(self): return len(self.params)
	def __str__(self): return "%s(%s)" % (self.name or "new", ", ".join(map(str, self.params)))
	def __repr__(self): return "<Signature %s>" % self

def constructor(params: Sequence[Kind], function: Callable) -> Signature:
	return Signature("", params, function)

class TypeDescriptor:
	name: str
	constructors: tuple[Signature, ...]
	methods: tuple[Signature, ...]
	statics: tuple[Signature, ...]
	capabilities: frozenset[str]

	def __init__(
			self, name: str, *,
			constructors: Iterable[Signature] = (),
			methods: Iterable[Signature] = (),
			statics: Iterable[Signature] = (),
			capabilities: Iterable[CAPABILITY] = (),
			python_type: Optional[type] = None,
	):
		self.name = name
		self.constructors = tuple(constructors)
		self.methods = tuple(methods)
		self.statics = tuple(statics)
		self.capabilities = frozenset(capability_name(c) for c in capabilities)
		self.python_type = python_type
		if not isinstance(name, str) or not name:
			raise RegistrationError(repr(name), "a type needs a non-empty name.")
		for sig in self.constructors:
			if sig.name: raise RegistrationError(name, "constructor signatures have no member name, but got %r." % sig.name)
		for sig in self.methods + self.statics:
			if not sig.name: raise RegistrationError(name, "methods and static functions need a member name.")

	def __repr__(self): return "<TypeDescriptor %s>" % self.name

	def methods_named(self, name: str) -> tuple[Signature, ...]:
		return tuple(m for m in self.methods if m.name == name)

	def statics_named(self, name: str) -> tuple[Signature, ...]:
		return tuple(s for s in self.statics if s.name == name)

	def implements(self, capability: CAPABILITY) -> bool:
		return capability_name(capability) in self.capabilities

class EnumMember(NamedTuple):
	""" What an enum-typed parameter receives, unless the enum brings its own members. """
	enum: str
	label: str
	value: int

class EnumDescriptor:
	"""
	A closed table of symbol labels, in declaration order, with their integral values.
	The optional `factory` maps a label to whatever object the parameter should receive;
	that is how a Python Enum class gets its own members handed over.
	"""
	table: Mapping[str, int]

	def __init__(
			self, name: str, table: Union[Mapping[str, int], Iterable[tuple[str, int]]],
			factory: Optional[Callable[[str], Any]] = None, python_type: Optional[type] = None,
	):
		if not isinstance(name, str) or not name:
			raise RegistrationError(repr(name), "an enum needs a non-empty name.")
		pairs = list(table.items() if isinstance(table, Mapping) else table)
		labels = [label for label, _ in pairs]
		if len(set(labels)) != len(labels):
			raise RegistrationError(name, "enum labels must be distinct.")
		for label, value in pairs:
			if not isinstance(value, int) or isinstance(value, bool):
				raise RegistrationError(name, "the value of %r is not an integer." % label)
		self.name = name
		self.table = MappingProxyType(dict(pairs))
		self._factory = factory
		self.python_type = python_type

	def __repr__(self): return "<EnumDescriptor %s>" % self.name
	def __contains__(self, label: str) -> bool: return label in self.table
	def labels(self) -> list[str]: return list(self.table)

	def value_of(self, label: str) -> int:
		try: return self.table[label]
		except KeyError: raise UnknownEnumSymbol(self.name, label) from None

	def member(self, label: str):
		value = self.value_of(label)
		if self._factory is None: return EnumMember(self.name, label, value)
		else: return self._factory(label)

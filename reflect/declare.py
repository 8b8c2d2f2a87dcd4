"""
Declaring Python classes and enums to the registry, with decorators.

This is a convenience layer. Nothing in the core depends on it;
it only builds TypeDescriptors and EnumDescriptors and registers them.

	@reflect_enum
	class MovingAverage(enum.Enum):
		SMA = 1
		EMA = 2

	SIGNAL = Capability("Signal")

	@reflect_type(capabilities=[SIGNAL])
	class Momentum:
		@constructor
		def __init__(self, kind: MovingAverage, windows: list[int], weights: list[float]): ...

		@method
		def update(self, price: float) -> float: ...

Parameter kinds come from the annotations:
int, float, str, list[int], list[float], a reflected Enum class, or a Capability.
Anything else is refused at declaration time, not at call time.

A constructor may be `__init__` itself, or any other function taking the class
first (it becomes a classmethod). Static functions become staticmethods.
Several members may export the same name with `@method(name=...)`, as overloads.
Methods are bound late, by attribute name, so subclass overrides are honored.
"""
import enum
import inspect
import typing
from functools import partial
from typing import Callable, Iterable, NamedTuple, Optional
from .diagnostics import RegistrationError
from .descriptors import Signature, TypeDescriptor, EnumDescriptor, Capability, CAPABILITY
from .kinds import Kind, INTEGER, FLOAT, SYMBOL, EnumOf, ListOf, InstanceOf
from .registry import REGISTRY, Registry

_MARK = "__reflect_member__"

class _Member(NamedTuple):
	role: str
	name: Optional[str]

def _marker(role: str):
	def mark(fn=None, *, name: Optional[str] = None):
		def apply(f):
			target = f.__func__ if isinstance(f, (staticmethod, classmethod)) else f
			setattr(target, _MARK, _Member(role, name))
			return f
		return apply if fn is None else apply(fn)
	mark.__name__ = role
	return mark

constructor = _marker("constructor")
method = _marker("method")
static = _marker("static")

def short_name(cls: type) -> str:
	""" Types are known by their bare class name, without module or enclosing scope. """
	return cls.__name__

def reflect_type(cls=None, *, name: Optional[str] = None, capabilities: Iterable[CAPABILITY] = (), registry: Optional[Registry] = None):
	def apply(cls):
		target = REGISTRY if registry is None else registry
		target.register_type(describe_class(cls, name=name, capabilities=capabilities, registry=target))
		return cls
	return apply if cls is None else apply(cls)

def reflect_enum(enum_class=None, *, name: Optional[str] = None, registry: Optional[Registry] = None):
	def apply(enum_class):
		descriptor = describe_enum(enum_class, name=name)
		(REGISTRY if registry is None else registry).register_enum(descriptor)
		return enum_class
	return apply if enum_class is None else apply(enum_class)

def describe_enum(enum_class, *, name: Optional[str] = None) -> EnumDescriptor:
	if not (isinstance(enum_class, type) and issubclass(enum_class, enum.Enum)):
		raise RegistrationError(repr(enum_class), "only Enum classes can be reflected as enums.")
	table = [(member.name, member.value) for member in enum_class]
	return EnumDescriptor(name or short_name(enum_class), table, factory=lambda label: enum_class[label], python_type=enum_class)

def describe_class(cls: type, *, name: Optional[str] = None, capabilities: Iterable[CAPABILITY] = (), registry: Optional[Registry] = None) -> TypeDescriptor:
	"""
	Read the marked members of a class into a TypeDescriptor, without registering it.
	Enum annotations take the name their class was reflected under in `registry`.
	"""
	registry = REGISTRY if registry is None else registry
	type_name = name or short_name(cls)
	constructors, methods, statics = [], [], []
	for attr, raw in list(vars(cls).items()):
		fn = raw.__func__ if isinstance(raw, (staticmethod, classmethod)) else raw
		mark = getattr(fn, _MARK, None)
		if not isinstance(mark, _Member): continue
		if mark.role == "constructor":
			params = _param_kinds(type_name, fn, 1, registry)
			if attr == "__init__":
				constructors.append(Signature("", params, cls))
			else:
				constructors.append(Signature("", params, partial(fn, cls)))
				if not isinstance(raw, classmethod): setattr(cls, attr, classmethod(fn))
		elif mark.role == "method":
			params = _param_kinds(type_name, fn, 1, registry)
			methods.append(Signature(mark.name or attr, params, _late_bound(attr)))
		else:
			params = _param_kinds(type_name, fn, 0, registry)
			statics.append(Signature(mark.name or attr, params, fn))
			if not isinstance(raw, staticmethod): setattr(cls, attr, staticmethod(fn))
	return TypeDescriptor(
		type_name,
		constructors=constructors,
		methods=methods,
		statics=statics,
		capabilities=capabilities,
		python_type=cls,
	)

def _late_bound(attr: str) -> Callable:
	def call(receiver, *args): return getattr(receiver, attr)(*args)
	call.__name__ = attr
	return call

_ORDINARY = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)

def _param_kinds(type_name: str, fn: Callable, skip: int, registry: Registry) -> list[Kind]:
	where = "%s.%s" % (type_name, fn.__name__)
	params = list(inspect.signature(fn).parameters.values())[skip:]
	kinds = []
	for p in params:
		if p.kind not in _ORDINARY:
			raise RegistrationError(where, "parameter %r must be plain positional." % p.name)
		annotation = p.annotation
		if annotation is inspect.Parameter.empty:
			raise RegistrationError(where, "parameter %r needs an annotation." % p.name)
		if isinstance(annotation, str):
			try: annotation = eval(annotation, fn.__globals__)
			except Exception as ex: raise RegistrationError(where, "cannot evaluate the annotation of %r: %s" % (p.name, ex)) from ex
		try: kinds.append(kind_of(annotation, registry))
		except TypeError: raise RegistrationError(where, "parameter %r has unsupported annotation %r." % (p.name, annotation)) from None
	return kinds

def kind_of(annotation, registry: Optional[Registry] = None) -> Kind:
	""" Translate a Python annotation into a parameter kind, or raise TypeError. """
	if isinstance(annotation, Kind): return annotation
	if annotation is int: return INTEGER
	if annotation is float: return FLOAT
	if annotation is str: return SYMBOL
	if isinstance(annotation, Capability): return InstanceOf(annotation.name)
	if isinstance(annotation, type) and issubclass(annotation, enum.Enum):
		descriptor = (REGISTRY if registry is None else registry).enum_for(annotation)
		return EnumOf(short_name(annotation) if descriptor is None else descriptor.name)
	if typing.get_origin(annotation) is list:
		args = typing.get_args(annotation)
		if args == (int,): return ListOf(INTEGER)
		if args == (float,): return ListOf(FLOAT)
	raise TypeError(annotation)

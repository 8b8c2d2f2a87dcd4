"""
The outward face of the package, in one place.

	parse(text)                                  -> syntax tree, or ParseError
	register_type(descriptor)                    -> or RegistrationError
	register_enum(descriptor)                    -> or RegistrationError
	create(text, required_capability=None)       -> Instance, or some ReflectError
	create_from_ast(tree, required_capability)   -> Instance, or some ReflectError
	find_type(name)                              -> TypeDescriptor or None
	call_method(instance, name, args)            -> whatever the method returns
	call_static(type_name, name, args)           -> whatever the function returns

Everything but `parse` consults the process-wide registry unless handed another with `registry=`.
"""
from .diagnostics import (
	ReflectError, RegistrationError, UnknownType, ResolutionError,
	NoMatchingSignature, AmbiguousSignature, UnknownEnumSymbol, UnacceptableArgument,
	CapabilityNotImplemented, InvocationError,
)
from .front_end import parse, ParseError
from .registry import REGISTRY, Registry, register_type, register_enum, find_type, find_enum
from .descriptors import Signature, TypeDescriptor, EnumDescriptor, EnumMember, Capability
from .evaluator import create, create_from_ast
from .dispatch import call_method, call_static
from .values import Value, Integer, Float, Symbol, ListValue, Instance, wrap

__all__ = [
	"parse", "register_type", "register_enum", "create", "create_from_ast",
	"find_type", "find_enum", "call_method", "call_static",
	"REGISTRY", "Registry", "Signature", "TypeDescriptor", "EnumDescriptor", "EnumMember", "Capability",
	"Value", "Integer", "Float", "Symbol", "ListValue", "Instance", "wrap",
	"ReflectError", "ParseError", "RegistrationError", "UnknownType", "ResolutionError",
	"NoMatchingSignature", "AmbiguousSignature", "UnknownEnumSymbol", "UnacceptableArgument",
	"CapabilityNotImplemented", "InvocationError",
]

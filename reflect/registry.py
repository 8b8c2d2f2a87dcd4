"""
The type registry: names to TypeDescriptors, and names to EnumDescriptors.

Registration happens during start-up, in whatever order the application
calls register_type and register_enum. Then someone calls seal(), and from
then on the registry is read-only and safe to share among threads without
locking. Registering while other threads look things up is simply not supported.

There is one process-wide registry, REGISTRY, which the module-level functions
consult. Anything that wants its own (tests, mostly) can make a Registry().
"""
from typing import Optional
from .diagnostics import RegistrationError
from .descriptors import TypeDescriptor, EnumDescriptor
from .space import Layer, AlreadyExists, Sealed

class Registry:
	def __init__(self):
		self._types: Layer[TypeDescriptor] = Layer()
		self._enums: Layer[EnumDescriptor] = Layer()

	def register_type(self, descriptor: TypeDescriptor) -> TypeDescriptor:
		if not isinstance(descriptor, TypeDescriptor):
			raise RegistrationError(repr(descriptor), "that is not a TypeDescriptor.")
		return self._install(self._types, descriptor, "type")

	def register_enum(self, descriptor: EnumDescriptor) -> EnumDescriptor:
		if not isinstance(descriptor, EnumDescriptor):
			raise RegistrationError(repr(descriptor), "that is not an EnumDescriptor.")
		return self._install(self._enums, descriptor, "enum")

	@staticmethod
	def _install(layer: Layer, descriptor, what: str):
		try: return layer.mount(descriptor.name, descriptor)
		except AlreadyExists: raise RegistrationError(descriptor.name, "an %s by that name is already registered." % what) from None
		except Sealed: raise RegistrationError(descriptor.name, "the registry is sealed; registration is over.") from None

	def seal(self):
		""" Initialization is over. Make it so. """
		self._types.seal()
		self._enums.seal()

	def is_sealed(self) -> bool: return self._types.is_sealed()

	def find_type(self, name: str) -> Optional[TypeDescriptor]:
		return self._types.symbol(name)

	def find_enum(self, name: str) -> Optional[EnumDescriptor]:
		return self._enums.symbol(name)

	def enum_for(self, python_type: type) -> Optional[EnumDescriptor]:
		""" The enum registered here for a given Python Enum class, whatever name it went by. """
		return next((e for e in self._enums.each_symbol() if e.python_type is python_type), None)

	def type_names(self) -> list[str]: return list(self._types.each_key())
	def enum_names(self) -> list[str]: return list(self._enums.each_key())

REGISTRY = Registry()

def register_type(descriptor: TypeDescriptor) -> TypeDescriptor: return REGISTRY.register_type(descriptor)
def register_enum(descriptor: EnumDescriptor) -> EnumDescriptor: return REGISTRY.register_enum(descriptor)
def find_type(name: str) -> Optional[TypeDescriptor]: return REGISTRY.find_type(name)
def find_enum(name: str) -> Optional[EnumDescriptor]: return REGISTRY.find_enum(name)

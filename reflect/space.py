"""
A name-space that refuses to forget or overwrite.
"""
from typing import Generic, Iterable, Optional, TypeVar

T = TypeVar("T")

class AlreadyExists(KeyError): pass
class Sealed(RuntimeError): pass

class Layer(Generic[T]):
	"""
	Lightly enhanced dictionary: It does not like duplicate keys,
	and once sealed it does not like new keys at all.
	Insertion order is remembered, for the sake of deterministic listings.
	"""
	_symbol: dict[str, T]

	def __init__(self):
		self._symbol = {}
		self._sealed = False

	def __contains__(self, key: str) -> bool:
		return key in self._symbol

	def __len__(self): return len(self._symbol)

	def symbol(self, key: str) -> Optional[T]:
		return self._symbol.get(key)

	def mount(self, key: str, symbol: T) -> T:
		if self._sealed:
			raise Sealed(key)
		if key in self._symbol:
			raise AlreadyExists(key)
		self._symbol[key] = symbol
		return symbol

	def seal(self): self._sealed = True
	def is_sealed(self) -> bool: return self._sealed

	def each_key(self) -> Iterable[str]:
		return self._symbol.keys()

	def each_symbol(self) -> Iterable[T]:
		return self._symbol.values()

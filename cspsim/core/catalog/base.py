from types import MappingProxyType
from typing import Generic, Iterator, Mapping, Tuple, TypeVar

from cspsim.core.errors import ConfigurationError

T = TypeVar("T")


class Catalog(Generic[T]):
    """
    Immutable lookup table of named records.

    Lookups of unknown keys fail with a ConfigurationError instead of falling
    back to a default entry.
    """

    def __init__(self, kind: str, entries: Mapping[str, T]):
        if not entries:
            raise ConfigurationError(f"{kind} catalog must not be empty.")
        self.kind = kind
        self._entries = MappingProxyType(dict(entries))

    def __getitem__(self, key: str) -> T:
        try:
            return self._entries[key]
        except KeyError:
            raise ConfigurationError(
                f"Unknown {self.kind} '{key}'. Available: {', '.join(self._entries)}"
            ) from None

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def keys(self) -> Tuple[str, ...]:
        return tuple(self._entries)

    def items(self):
        return self._entries.items()

    def __repr__(self) -> str:
        return f"<Catalog(kind={self.kind!r}, entries={len(self)})>"

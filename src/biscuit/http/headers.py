"""Immutable, case-insensitive request headers.

Implements ``Mapping[str, str]`` over the raw byte pairs of the ASGI scope.
"""

from collections.abc import Iterator, Mapping


class Headers(Mapping[str, str]):
    """Request headers as received.

    ``__getitem__`` returns the first matching value, latin-1 decoded.
    ``get_raw_list`` returns every value for a name as undecoded bytes,
    for callers (cookie parsing) that apply their own charset rules.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: tuple[tuple[bytes, bytes], ...] = ()) -> None:
        self._raw = raw

    def __getitem__(self, key: str) -> str:
        values = self.get_raw_list(key)
        if not values:
            raise KeyError(key)
        return values[0].decode("latin-1")

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and bool(self.get_raw_list(key))

    def __iter__(self) -> Iterator[str]:
        return iter(dict.fromkeys(name.decode("latin-1").lower() for name, _ in self._raw))

    def __len__(self) -> int:
        return len(set(self))

    def get_raw_list(self, key: str) -> list[bytes]:
        """Return all raw values for *key*, in arrival order."""
        key_lower = key.lower().encode("latin-1")
        return [value for name, value in self._raw if name.lower() == key_lower]

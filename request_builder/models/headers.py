"""Case-insensitive, multi-valued HTTP header container."""

from collections.abc import Iterator


class Headers:
    """Ordered header container with case-insensitive names.

    Each name keeps the casing it was first supplied with and holds one or
    more values. ``set`` replaces every value for a name, ``add`` appends one.
    """

    __slots__ = ("_data",)

    def __init__(self, headers: dict[str, str] | None = None) -> None:
        self._data: dict[str, tuple[str, list[str]]] = {}
        for name, value in (headers or {}).items():
            self.add(name, value)

    def set(self, name: str, value: str) -> "Headers":
        key = name.lower()
        original = self._data[key][0] if key in self._data else name
        self._data[key] = (original, [value])
        return self

    def add(self, name: str, value: str) -> "Headers":
        key = name.lower()
        if key in self._data:
            self._data[key][1].append(value)
        else:
            self._data[key] = (name, [value])
        return self

    def get(self, name: str, default: str | None = None) -> str | None:
        """Get the first value for a header, or default."""
        entry = self._data.get(name.lower())
        return entry[1][0] if entry else default

    def get_all(self, name: str) -> list[str]:
        entry = self._data.get(name.lower())
        return list(entry[1]) if entry else []

    def contains(self, name: str) -> bool:
        return name.lower() in self._data

    def items(self) -> Iterator[tuple[str, str]]:
        """Yield (name, value) pairs, one per value."""
        for original, values in self._data.values():
            for value in values:
                yield original, value

    def copy(self) -> "Headers":
        clone = Headers()
        clone._data = {key: (original, list(values)) for key, (original, values) in self._data.items()}
        return clone

    def freeze(self) -> "FrozenHeaders":
        frozen = FrozenHeaders()
        frozen._data = {key: (original, list(values)) for key, (original, values) in self._data.items()}
        return frozen

    def __getitem__(self, name: str) -> str:
        try:
            return self._data[name.lower()][1][0]
        except KeyError:
            raise KeyError(name) from None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains(name)

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._data.values())

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Headers):
            return NotImplemented
        return {k: v[1] for k, v in self._data.items()} == {k: v[1] for k, v in other._data.items()}

    def __repr__(self) -> str:
        return f"Headers({list(self.items())})"


class FrozenHeaders(Headers):
    """Read-only headers carried by a built request. ``copy`` returns mutable headers."""

    __slots__ = ()

    def __init__(self, headers: dict[str, str] | None = None) -> None:
        super().__init__()
        for name, value in (headers or {}).items():
            Headers.add(self, name, value)

    def set(self, name: str, value: str) -> "Headers":
        raise TypeError("Request headers are read-only, copy() them first")

    def add(self, name: str, value: str) -> "Headers":
        raise TypeError("Request headers are read-only, copy() them first")

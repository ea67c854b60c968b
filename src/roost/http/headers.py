"""Read-only, case-insensitive view over ASGI header pairs."""

from collections.abc import Iterable, Iterator, Mapping


class Headers(Mapping[str, str]):
    """Request headers keyed by lower-cased name.

    Values are decoded once at construction. Indexing returns the first
    value sent for a name; ``get_list`` returns all of them in order.
    """

    __slots__ = ("_index",)

    def __init__(self, raw: Iterable[tuple[bytes, bytes]] = ()) -> None:
        index: dict[str, list[str]] = {}
        for name, value in raw:
            index.setdefault(name.decode("latin-1").lower(), []).append(value.decode("latin-1"))
        self._index = index

    def __getitem__(self, key: str) -> str:
        return self._index[key.lower()][0]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return f"Headers({dict(self)!r})"

    def get_list(self, key: str) -> list[str]:
        """All values sent for *key*, in arrival order."""
        return list(self._index.get(key.lower(), ()))

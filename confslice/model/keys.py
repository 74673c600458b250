"""Keys: named bindings to a Value, Array, List or Pairs shape."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from enum import StrEnum

from confslice.model.data import Data


class KeyKind(StrEnum):
    VALUE = "value"
    ARRAY = "array"
    LIST = "list"
    PAIRS = "pairs"


class Key(ABC):
    """Base for the four key shapes; the id is unique among siblings.

    Each shape sets `kind` as a class attribute; `Key` itself cannot be
    instantiated.
    """

    __slots__ = ("_id",)

    def __init__(self, key_id: str = "") -> None:
        self._id = key_id

    @property
    def id(self) -> str:
        return self._id

    def set_id(self, key_id: str) -> None:
        self._id = key_id

    @property
    @abstractmethod
    def kind(self) -> KeyKind: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r})"


class Value(Key):
    """Key holding a single scalar."""

    __slots__ = ("_value",)

    kind = KeyKind.VALUE

    def __init__(self, key_id: str = "", value: Data | None = None) -> None:
        super().__init__(key_id)
        self._value = value if value is not None else Data()

    def get(self) -> Data:
        return self._value

    def set(self, value: Data) -> None:
        self._value = value


class Array(Key):
    """Sparse mapping from non-negative index to scalar.

    Reading an index with ``array[i]`` creates an empty entry the first time,
    like writing to it does; use `get` for a read that never creates.
    The size is the number of entries, not the highest index.
    """

    __slots__ = ("_items",)

    kind = KeyKind.ARRAY

    def __init__(self, key_id: str = "") -> None:
        super().__init__(key_id)
        self._items: dict[int, Data] = {}

    def __getitem__(self, index: int) -> Data:
        _check_index(index)
        if index not in self._items:
            self._items[index] = Data()
        return self._items[index]

    def __setitem__(self, index: int, value: Data) -> None:
        _check_index(index)
        self._items[index] = value

    def __contains__(self, index: object) -> bool:
        return index in self._items

    def __len__(self) -> int:
        return len(self._items)

    def get(self, index: int) -> Data | None:
        return self._items.get(index)

    def indices(self) -> list[int]:
        return sorted(self._items)


class List(Key):
    """Recursive list of scalars and nested lists.

    Scalars and sublists live in two separate sequences, each in insertion
    order; the interleaving between them is not kept.
    """

    __slots__ = ("_data", "_lists")

    kind = KeyKind.LIST

    def __init__(self, key_id: str = "") -> None:
        super().__init__(key_id)
        self._data: deque[Data] = deque()
        self._lists: deque[List] = deque()

    def insert_data(self, data: Data) -> None:
        self._data.append(data)

    def insert_list(self, sublist: List) -> None:
        self._lists.append(sublist)

    def size_of_data(self) -> int:
        return len(self._data)

    def size_of_lists(self) -> int:
        return len(self._lists)

    def drain_next_data(self) -> Data | None:
        return self._data.popleft() if self._data else None

    def drain_next_list(self) -> List | None:
        return self._lists.popleft() if self._lists else None

    def clear_data(self) -> None:
        self._data.clear()

    def clear_lists(self) -> None:
        self._lists.clear()

    def copy(self) -> List:
        clone = List(self._id)
        for data in self._data:
            clone.insert_data(Data(data.text, data.kind))
        for sublist in self._lists:
            clone.insert_list(sublist.copy())
        return clone


class Pairs(Key):
    """Ordered ``(id, scalar)`` entries; ids are not required to be unique."""

    __slots__ = ("_entries",)

    kind = KeyKind.PAIRS

    def __init__(self, key_id: str = "") -> None:
        super().__init__(key_id)
        self._entries: deque[tuple[str, Data]] = deque()

    def insert(self, pair_id: str, value: Data) -> None:
        self._entries.append((pair_id, value))

    def drain_next(self) -> tuple[str, Data] | None:
        return self._entries.popleft() if self._entries else None

    def clear(self) -> None:
        self._entries.clear()

    def size(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def _check_index(index: int) -> None:
    if index < 0:
        raise IndexError(f"Array index must be non-negative, got {index}")


type AnyKey = Value | Array | List | Pairs


__all__ = [
    "AnyKey",
    "Array",
    "Key",
    "KeyKind",
    "List",
    "Pairs",
    "Value",
]

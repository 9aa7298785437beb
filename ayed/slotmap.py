"""A generational slot map handing out stable handles to stored values."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Generic, TypeVar

V = TypeVar("V")

_MAX_GENERATION = 2**32 - 1
_EMPTY: Any = object()


class StaleHandleError(LookupError):
    """The handle refers to a value that was removed or never existed."""


@total_ordering
@dataclass(frozen=True)
class Handle:
    """Identifies a slot and the generation of the value stored in it.

    Handles are equal only when id and generation match, but order by id.
    """

    id: int
    generation: int

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Handle):
            return NotImplemented
        return self.id < other.id

    def __repr__(self) -> str:
        return f"Handle(id: {self.id}, gen: {self.generation})"


@dataclass
class _Slot:
    generation: int
    element: Any = _EMPTY


class SlotMap(Generic[V]):
    """Stores values in reusable slots; removed slots invalidate old handles."""

    def __init__(self) -> None:
        self._slots: list[_Slot] = []
        self._free: list[int] = []

    def insert(self, value: V) -> Handle:
        if self._free:
            slot_id = self._free.pop()
            slot = self._slots[slot_id]
            slot.element = value
            return Handle(slot_id, slot.generation)
        self._slots.append(_Slot(0, value))
        return Handle(len(self._slots) - 1, 0)

    def remove(self, handle: Handle) -> V:
        """Remove and return the value behind ``handle``."""
        slot = self._live_slot(handle)
        if slot.generation >= _MAX_GENERATION:
            raise OverflowError("slot generation overflow")
        value = slot.element
        slot.element = _EMPTY
        slot.generation += 1
        self._free.append(handle.id)
        return value

    def get(self, handle: Handle) -> V:
        return self._live_slot(handle).element

    def __getitem__(self, handle: Handle) -> V:
        return self.get(handle)

    def __setitem__(self, handle: Handle, value: V) -> None:
        self._live_slot(handle).element = value

    def __contains__(self, handle: object) -> bool:
        if not isinstance(handle, Handle):
            return False
        try:
            self._live_slot(handle)
        except StaleHandleError:
            return False
        return True

    def __len__(self) -> int:
        return len(self._slots) - len(self._free)

    def items(self) -> Iterator[tuple[Handle, V]]:
        for slot_id, slot in enumerate(self._slots):
            if slot.element is not _EMPTY:
                yield Handle(slot_id, slot.generation), slot.element

    def keys(self) -> Iterator[Handle]:
        for handle, _ in self.items():
            yield handle

    def __iter__(self) -> Iterator[Handle]:
        return self.keys()

    def _live_slot(self, handle: Handle) -> _Slot:
        if 0 <= handle.id < len(self._slots):
            slot = self._slots[handle.id]
            if slot.generation == handle.generation and slot.element is not _EMPTY:
                return slot
        raise StaleHandleError(repr(handle))
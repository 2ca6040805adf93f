"""Observed-remove set CRDT with add-wins semantics."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


@dataclass
class ORSet(Generic[T]):
    """OR-Set whose adds carry unique ``node:counter`` tags.

    Removing an element drops only the tags observed locally, so an add
    seen on another replica survives a later merge.
    """

    node_id: str
    _elements: dict[T, set[str]] = field(default_factory=dict, init=False)
    _tag_counter: int = field(default=0, init=False)

    def add(self, element: T) -> None:
        """Add ``element`` under a fresh unique tag."""
        self._tag_counter += 1
        tag = f"{self.node_id}:{self._tag_counter}"
        self._elements.setdefault(element, set()).add(tag)

    def remove(self, element: T) -> None:
        """Remove ``element`` together with all its observed tags."""
        self._elements.pop(element, None)

    def __contains__(self, element: object) -> bool:
        return bool(self._elements.get(element))  # type: ignore[call-overload]

    def merge(self, other: ORSet[T]) -> None:
        """Merge another replica into this one (union of tags)."""
        for element, other_tags in other._elements.items():
            self._elements.setdefault(element, set()).update(other_tags)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)
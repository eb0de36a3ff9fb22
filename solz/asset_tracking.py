"""Tracks resources that become available once their assets have loaded."""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Generic, Hashable, List, Tuple, TypeVar

H = TypeVar("H", bound=Hashable)


class ResourceHandles(Generic[H]):
    """Queue of asset handles waiting to load, each with an insertion callback."""

    def __init__(self) -> None:
        self._waiting: Deque[Tuple[H, Callable[[H], None]]] = deque()
        self._finished: List[H] = []

    def load_resource(self, handle: H, insert: Callable[[H], None]) -> None:
        """Wait for ``handle`` to load, then call ``insert`` with it once."""
        self._waiting.append((handle, insert))

    def is_all_done(self) -> bool:
        """True once every requested resource has been inserted."""
        return not self._waiting

    @property
    def waiting(self) -> Tuple[H, ...]:
        """Handles still waiting, in queue order."""
        return tuple(handle for handle, _ in self._waiting)

    @property
    def finished(self) -> Tuple[H, ...]:
        """Handles already inserted, in the order they finished."""
        return tuple(self._finished)

    def update(self, is_loaded: Callable[[H], bool]) -> List[H]:
        """Cycle once through the waiting queue, inserting every loaded resource.

        Returns the handles that finished during this pass.
        """
        done: List[H] = []
        for _ in range(len(self._waiting)):
            handle, insert = self._waiting.popleft()
            if is_loaded(handle):
                insert(handle)
                self._finished.append(handle)
                done.append(handle)
            else:
                self._waiting.append((handle, insert))
        return done
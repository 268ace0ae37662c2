"""Track assets that must finish loading before their resources become available."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Hashable
from typing import Any

OnLoaded = Callable[[Any], None]


class ResourceHandles:
    """Queue of pending asset handles, each with a callback run once loaded."""

    def __init__(self) -> None:
        self._waiting: deque[tuple[Hashable, OnLoaded]] = deque()
        self._finished: list[Hashable] = []

    @property
    def waiting(self) -> tuple:
        return tuple(handle for handle, _ in self._waiting)

    @property
    def finished(self) -> tuple:
        return tuple(self._finished)

    def add(self, handle: Hashable, on_loaded: OnLoaded) -> None:
        """Wait for ``handle``; call ``on_loaded(handle)`` once it has loaded."""
        self._waiting.append((handle, on_loaded))

    def process(self, is_loaded: Callable[[Any], bool]) -> list:
        """Cycle once through the waiting handles, finishing those that are loaded.

        Returns the handles finished during this pass, in queue order.
        """
        done = []
        for _ in range(len(self._waiting)):
            handle, on_loaded = self._waiting.popleft()
            if is_loaded(handle):
                on_loaded(handle)
                self._finished.append(handle)
                done.append(handle)
            else:
                self._waiting.append((handle, on_loaded))
        return done

    def is_all_done(self) -> bool:
        """True once every requested asset has loaded."""
        return not self._waiting
"""The game's screen states and the transitions between them."""

from __future__ import annotations

import enum
from collections import defaultdict
from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")
Handler = Callable[[], None]


class Screen(enum.Enum):
    """The game's main screens."""

    SPLASH = "splash"
    LOADING = "loading"
    TITLE = "title"
    CREDITS = "credits"
    GAMEPLAY = "gameplay"


def _require_screen(screen: object) -> Screen:
    if not isinstance(screen, Screen):
        raise TypeError(f"expected a Screen, got {screen!r}")
    return screen


class ScreenState:
    """Current screen, a pending change, enter/exit handlers and screen-scoped objects.

    A change requested with :meth:`set` takes effect on the next :meth:`apply`.
    Objects registered with :meth:`scope` are dropped when their screen is left.
    """

    def __init__(self, initial: Screen = Screen.SPLASH) -> None:
        self._current = _require_screen(initial)
        self._next: Screen | None = None
        self._started = False
        self._enter: defaultdict[Screen, list[Handler]] = defaultdict(list)
        self._exit: defaultdict[Screen, list[Handler]] = defaultdict(list)
        self._scoped: defaultdict[Screen, list[Any]] = defaultdict(list)

    @property
    def current(self) -> Screen:
        return self._current

    @property
    def pending(self) -> Screen | None:
        return self._next

    def set(self, screen: Screen) -> None:
        """Request a change to ``screen`` on the next :meth:`apply`."""
        self._next = _require_screen(screen)

    def on_enter(self, screen: Screen, handler: Handler) -> Handler:
        """Run ``handler`` whenever ``screen`` is entered."""
        self._enter[_require_screen(screen)].append(handler)
        return handler

    def on_exit(self, screen: Screen, handler: Handler) -> Handler:
        """Run ``handler`` whenever ``screen`` is left."""
        self._exit[_require_screen(screen)].append(handler)
        return handler

    def apply(self) -> Screen | None:
        """Enter the initial screen on first call, then carry out a pending change.

        Returns the screen entered, or None if nothing changed. A request for
        the screen already current is dropped.
        """
        entered = None
        if not self._started:
            self._started = True
            for handler in list(self._enter[self._current]):
                handler()
            entered = self._current
        target, self._next = self._next, None
        if target is None or target is self._current:
            return entered
        for handler in list(self._exit[self._current]):
            handler()
        self._scoped.pop(self._current, None)
        self._current = target
        for handler in list(self._enter[target]):
            handler()
        return target

    def scope(self, screen: Screen, obj: T) -> T:
        """Keep ``obj`` alive until ``screen`` is left, and return it."""
        self._scoped[_require_screen(screen)].append(obj)
        return obj

    def scoped(self, screen: Screen) -> tuple:
        """Objects currently scoped to ``screen``, in registration order."""
        return tuple(self._scoped.get(_require_screen(screen), ()))
"""Character controller: apply movement intent and wrap around the window."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

# Extra room beyond the window edges before a character wraps around.
SCREEN_WRAP_MARGIN = 256.0


@dataclass
class MovementController:
    """Movement parameters for a character.

    ``intent`` is the direction the character wants to move in and
    ``max_speed`` is measured in pixels per second.
    """

    intent: tuple[float, float] = (0.0, 0.0)
    max_speed: float = 400.0


def apply_movement(
    controller: MovementController, position: Sequence[float], dt: float
) -> tuple[float, float]:
    """Return ``position`` moved along the controller's intent for ``dt`` seconds."""
    x, y = position
    ix, iy = controller.intent
    return (
        x + controller.max_speed * ix * dt,
        y + controller.max_speed * iy * dt,
    )


def wrap_position(
    position: Sequence[float], window_size: Sequence[float]
) -> tuple[float, float]:
    """Wrap a position centred on the origin into the (padded) window area."""
    wrapped = []
    for coordinate, extent in zip(position, window_size):
        size = extent + SCREEN_WRAP_MARGIN
        half = size / 2.0
        wrapped.append((coordinate + half) % size - half)
    x, y = wrapped
    return (x, y)
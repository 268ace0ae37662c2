"""Colour palette and interaction feedback for UI widgets."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

Color = tuple[float, float, float]

BUTTON_HOVERED_BACKGROUND: Color = (0.186, 0.328, 0.573)
BUTTON_PRESSED_BACKGROUND: Color = (0.286, 0.478, 0.773)

BUTTON_TEXT: Color = (0.925, 0.925, 0.925)
LABEL_TEXT: Color = (0.867, 0.827, 0.412)
HEADER_TEXT: Color = (0.867, 0.827, 0.412)

NODE_BACKGROUND: Color = (0.286, 0.478, 0.773)

HOVER_SOUND = "audio/sound_effects/button_hover.ogg"
PRESS_SOUND = "audio/sound_effects/button_press.ogg"


class Interaction(enum.Enum):
    """How the pointer currently relates to a widget."""

    NONE = "none"
    HOVERED = "hovered"
    PRESSED = "pressed"


def _require_interaction(interaction: object) -> Interaction:
    if not isinstance(interaction, Interaction):
        raise TypeError(f"expected an Interaction, got {interaction!r}")
    return interaction


@dataclass(frozen=True)
class InteractionPalette:
    """Background colours of a widget for each interaction state."""

    none: Color
    hovered: Color
    pressed: Color

    def color_for(self, interaction: Interaction) -> Color:
        """Background colour to show for ``interaction``."""
        interaction = _require_interaction(interaction)
        if interaction is Interaction.HOVERED:
            return self.hovered
        if interaction is Interaction.PRESSED:
            return self.pressed
        return self.none


@dataclass(frozen=True)
class InteractionAssets:
    """Sounds played when a widget becomes hovered or pressed."""

    hover: Any
    press: Any

    def sound_for(self, interaction: Interaction) -> Any:
        """Sound for entering ``interaction``, or None if it has no sound."""
        interaction = _require_interaction(interaction)
        if interaction is Interaction.HOVERED:
            return self.hover
        if interaction is Interaction.PRESSED:
            return self.press
        return None
"""Simple UI widgets laid out in a centred column."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

import pygame

from duckjam.theme import (
    BUTTON_HOVERED_BACKGROUND,
    BUTTON_PRESSED_BACKGROUND,
    BUTTON_TEXT,
    HEADER_TEXT,
    LABEL_TEXT,
    NODE_BACKGROUND,
    Color,
    Interaction,
    InteractionPalette,
)

BUTTON = "button"
HEADER = "header"
LABEL = "label"

ROW_GAP = 10

_fonts: dict[int, pygame.font.Font] = {}


def _rgb8(color: Color) -> tuple[int, int, int]:
    r, g, b = (round(channel * 255) for channel in color)
    return (r, g, b)


def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    font = _fonts.get(size)
    if font is None:
        font = _fonts[size] = pygame.font.Font(None, size)
    return font


def _wrap(text: str, font: pygame.font.Font, width: int) -> list[str]:
    lines = []
    for paragraph in text.split("\n"):
        line = ""
        for word in paragraph.split():
            candidate = f"{line} {word}" if line else word
            if line and font.size(candidate)[0] > width:
                lines.append(line)
                line = word
            else:
                line = candidate
        lines.append(line)
    return lines


@dataclass(eq=False)
class Widget:
    """A text widget; buttons also react to the pointer."""

    kind: str
    text: str
    width: int
    height: int | None
    font_size: int
    text_color: Color
    background: Color | None = None
    palette: InteractionPalette | None = None
    on_press: Callable[[], None] | None = None
    interaction: Interaction = Interaction.NONE
    rect: pygame.Rect = field(default_factory=lambda: pygame.Rect(0, 0, 0, 0))
    lines: list[str] = field(default_factory=list)


def button(text: str, on_press: Callable[[], None] | None = None) -> Widget:
    """A clickable button with centred text."""
    return Widget(
        kind=BUTTON,
        text=str(text),
        width=200,
        height=65,
        font_size=40,
        text_color=BUTTON_TEXT,
        background=NODE_BACKGROUND,
        palette=InteractionPalette(
            none=NODE_BACKGROUND,
            hovered=BUTTON_HOVERED_BACKGROUND,
            pressed=BUTTON_PRESSED_BACKGROUND,
        ),
        on_press=on_press,
    )


def header(text: str) -> Widget:
    """A header, larger than a label, on a coloured background."""
    return Widget(
        kind=HEADER,
        text=str(text),
        width=500,
        height=65,
        font_size=40,
        text_color=HEADER_TEXT,
        background=NODE_BACKGROUND,
    )


def label(text: str) -> Widget:
    """A plain text label whose height follows its wrapped text."""
    return Widget(
        kind=LABEL,
        text=str(text),
        width=500,
        height=None,
        font_size=24,
        text_color=LABEL_TEXT,
    )


class UiRoot:
    """Full-screen container centring its children in a column."""

    def __init__(self, background: Color | None = None) -> None:
        self.background = background
        self.children: list[Widget] = []
        self._held = False

    def add(self, widget: Widget) -> Widget:
        """Append ``widget`` to the column and return it."""
        self.children.append(widget)
        return widget

    def layout(self, width: int, height: int) -> None:
        """Position the children for a screen of the given size."""
        heights = []
        for widget in self.children:
            font = _font(widget.font_size)
            widget.lines = _wrap(widget.text, font, widget.width)
            if widget.height is not None:
                heights.append(widget.height)
            else:
                heights.append(font.get_linesize() * len(widget.lines))
        total = sum(heights) + ROW_GAP * max(len(heights) - 1, 0)
        top = (height - total) // 2
        for widget, widget_height in zip(self.children, heights):
            widget.rect = pygame.Rect((width - widget.width) // 2, top, widget.width, widget_height)
            top += widget_height + ROW_GAP

    def update_pointer(
        self, position: Sequence[int], pressed: bool = False, released: bool = False
    ) -> list[tuple[Widget, Interaction]]:
        """Update button interactions from the pointer.

        ``pressed`` and ``released`` tell whether the pointer button went down
        or up this frame. Buttons pressed under the pointer have their
        ``on_press`` called. Returns the buttons whose interaction changed.
        """
        self._held = (self._held or pressed) and not released
        changes = []
        to_press = []
        for widget in self.children:
            if widget.kind != BUTTON:
                continue
            inside = widget.rect.collidepoint(position)
            if not inside:
                new = Interaction.NONE
            elif self._held:
                new = Interaction.PRESSED
            else:
                new = Interaction.HOVERED
            if new is not widget.interaction:
                widget.interaction = new
                if widget.palette is not None:
                    widget.background = widget.palette.color_for(new)
                changes.append((widget, new))
            if pressed and inside and widget.on_press is not None:
                to_press.append(widget.on_press)
        for on_press in to_press:
            on_press()
        return changes

    def draw(self, surface: pygame.Surface) -> None:
        """Render the container and its children onto ``surface``."""
        if self.background is not None:
            surface.fill(_rgb8(self.background))
        for widget in self.children:
            if widget.background is not None:
                surface.fill(_rgb8(widget.background), widget.rect)
            font = _font(widget.font_size)
            lines = widget.lines or [widget.text]
            line_height = font.get_linesize()
            if widget.kind == LABEL:
                top = widget.rect.top
            else:
                top = widget.rect.centery - line_height * len(lines) // 2
            color = _rgb8(widget.text_color)
            for offset, line in enumerate(lines):
                image = font.render(line, True, color)
                if widget.kind == LABEL:
                    x = widget.rect.left
                else:
                    x = widget.rect.centerx - image.get_width() // 2
                surface.blit(image, (x, top + offset * line_height))
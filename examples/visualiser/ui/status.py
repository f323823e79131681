"""Bottom status bar."""
from __future__ import annotations

import pygame

from ui.constants import COLOR_STATUS_BG, COLOR_TEXT, STATUS_H


class StatusBar:
    """Shows the selected algorithm on the left and a message on the right."""

    def __init__(self) -> None:
        self._message = ""
        self._color = COLOR_TEXT
        self._font: pygame.font.Font | None = None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont("monospace", 14)
        return self._font

    def set(self, message: str, color: tuple[int, int, int] = COLOR_TEXT) -> None:
        self._message = message
        self._color = color

    def draw(self, surface: pygame.Surface, top: int, title: str) -> None:
        width = surface.get_width()
        pygame.draw.rect(surface, COLOR_STATUS_BG, pygame.Rect(0, top, width, STATUS_H))

        font = self._get_font()
        surface.blit(font.render(title, True, COLOR_TEXT), (8, top + 8))
        if self._message:
            text = font.render(self._message, True, self._color)
            surface.blit(text, (width - text.get_width() - 8, top + 8))

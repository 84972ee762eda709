"""Renders the game world onto a pygame surface."""

from __future__ import annotations

import pygame

from boxarena.model import Entities

BOX_COLOR = pygame.Color(255, 0, 0)


class View:
    """Draws the world state onto ``surface``."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.size: tuple[int, int] = surface.get_size()

    def draw(self, entities: Entities) -> bool:
        rect = pygame.Rect(
            entities.box_x, entities.box_y, entities.box_width, entities.box_height
        )
        pygame.draw.rect(self.surface, BOX_COLOR, rect)
        return True

    def resized(self, width: int, height: int) -> bool:
        """Record the new window size."""
        self.size = (width, height)
        return True
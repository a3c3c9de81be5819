"""The score counter shown in the top-left corner."""

from __future__ import annotations

import pygame

SCORE_COLOR = (255, 255, 255)
SCORE_POS = (10, 10)


class Score:
    """Counts collected flakes and keeps a rendered image of the count."""

    def __init__(self, font: pygame.font.Font):
        self.font = font
        self.color = SCORE_COLOR
        self.value = 0
        self.image: pygame.Surface | None = None
        self.rect = pygame.Rect(SCORE_POS, (0, 0))
        self.reset()

    def text(self) -> str:
        return f"Score: {self.value}"

    def _render(self) -> None:
        self.image = self.font.render(self.text(), True, self.color)
        self.rect.size = self.image.get_size()

    def reset(self) -> None:
        self.value = 0
        self._render()

    def increment(self) -> None:
        self.value += 1
        self._render()

    def draw(self, screen: pygame.Surface) -> None:
        screen.blit(self.image, self.rect)
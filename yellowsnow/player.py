"""The player character who walks along the bottom of the screen."""

from __future__ import annotations

import pygame

from .settings import WIN_W

PLAYER_SPEED = 300.0
PLAYER_Y = 377
TOP_OFFSET = 20
LEFT_OFFSET = 45
RIGHT_OFFSET = 45


class Player:
    """Player sprite with a hit box narrower than its image."""

    def __init__(self, image: pygame.Surface):
        self.image = image
        self._flipped_image = pygame.transform.flip(image, True, False)
        width, height = image.get_size()
        self.rect = pygame.Rect(0, 0, width, height)
        self.flip = False
        self.speed = PLAYER_SPEED
        self.pos_x = 0.0
        self.top_offset = TOP_OFFSET
        self.left_offset = LEFT_OFFSET
        self.right_offset = RIGHT_OFFSET

    def reset(self) -> None:
        """Centre the player horizontally, facing right."""
        self.flip = False
        self.rect.x = int((WIN_W - self.rect.w) / 2)
        self.pos_x = float(self.rect.x)
        self.rect.y = PLAYER_Y

    def update(self, dt: float, moving_left: bool, moving_right: bool) -> None:
        """Walk according to the held direction keys, stopping at the edges."""
        if moving_left:
            if self.left() >= 0:
                self.pos_x -= self.speed * dt
            self.flip = True

        if moving_right:
            if self.right() <= WIN_W:
                self.pos_x += self.speed * dt
            self.flip = False

        self.rect.x = int(self.pos_x)

    def draw(self, screen: pygame.Surface) -> None:
        screen.blit(self._flipped_image if self.flip else self.image, self.rect)

    def top(self) -> int:
        return self.rect.y + self.top_offset

    def left(self) -> int:
        return self.rect.x + self.left_offset

    def right(self) -> int:
        return self.rect.x + self.rect.w - self.right_offset
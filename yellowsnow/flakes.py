"""Falling snowflakes."""

from __future__ import annotations

import random

import pygame

from .settings import WIN_H, WIN_W

FLAKE_SPEED = 300.0
# Below this vertical position a flake has left the screen and is respawned.
FLOOR_Y = 514.0


class Flake:
    """A single snowflake, either white (collectable) or yellow (deadly)."""

    def __init__(self, image: pygame.Surface, is_white: bool, rng: random.Random | None = None):
        self.image = image
        self.is_white = is_white
        self.rng = rng if rng is not None else random.Random()
        width, height = image.get_size()
        self.rect = pygame.Rect(0, 0, width, height)
        self.speed = FLAKE_SPEED
        self.pos_y = 0.0

    def reset(self, full: bool) -> None:
        """Place the flake at a random spot above the screen.

        A full reset spreads flakes over twice the window height.
        """
        self.rect.x = self.rng.randrange(WIN_W) - self.rect.w
        height = WIN_H * 2 if full else WIN_H
        self.rect.y = -self.rng.randrange(height) - self.rect.h
        self.pos_y = float(self.rect.y)

    def update(self, dt: float) -> None:
        """Move the flake down, respawning it once it has passed the floor."""
        if self.pos_y > FLOOR_Y:
            self.reset(False)
        else:
            self.pos_y += self.speed * dt
            self.rect.y = int(self.pos_y)

    def draw(self, screen: pygame.Surface) -> None:
        screen.blit(self.image, self.rect)

    def left(self) -> int:
        return self.rect.x

    def right(self) -> int:
        return self.rect.x + self.rect.w

    def bottom(self) -> int:
        return self.rect.y + self.rect.h
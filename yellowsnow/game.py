"""The game itself: media loading, the main loop and the command entry point."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import pygame

from .flakes import Flake
from .fps import FrameClock
from .player import Player
from .score import Score
from .settings import FONT_SIZE, WIN_H, WIN_TITLE, WIN_W

YELLOW_FLAKES = 5
WHITE_FLAKES = 10

_BACKGROUND_FILL = (0, 0, 0)


class _Playable(Protocol):
    def play(self) -> object: ...


@dataclass
class Media:
    """Images, sounds, music and font the game draws and plays."""

    background_image: pygame.Surface
    player_image: pygame.Surface
    yellow_image: pygame.Surface
    white_image: pygame.Surface
    collect_sound: _Playable | None
    hit_sound: _Playable | None
    music: str
    font: pygame.font.Font


def _existing(path: Path) -> str:
    if not path.is_file():
        raise FileNotFoundError(f"missing asset: {path}")
    return str(path)


def _load_image(path: Path) -> pygame.Surface:
    image = pygame.image.load(_existing(path))
    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


def load_media(assets_dir: str | Path = "assets") -> Media:
    """Load every asset from assets_dir, raising if any is missing or unreadable."""
    root = Path(assets_dir)
    images = root / "images"
    sounds = root / "sounds"
    return Media(
        background_image=_load_image(images / "background.png"),
        player_image=_load_image(images / "player.png"),
        yellow_image=_load_image(images / "yellow.png"),
        white_image=_load_image(images / "white.png"),
        hit_sound=pygame.mixer.Sound(_existing(sounds / "hit.ogg")),
        collect_sound=pygame.mixer.Sound(_existing(sounds / "collect.ogg")),
        music=_existing(root / "music" / "winter_loop.ogg"),
        font=pygame.font.Font(_existing(root / "fonts" / "freesansbold.ttf"), FONT_SIZE),
    )


def _play(sound: _Playable | None) -> None:
    if sound is not None:
        sound.play()


class Game:
    """Game state: the player, the falling flakes, the score and the frame clock."""

    def __init__(self, media: Media, screen: pygame.Surface, rng: random.Random | None = None):
        self.media = media
        self.screen = screen
        self.rng = rng if rng is not None else random.Random()
        self.background_rect = media.background_image.get_rect()
        self.player = Player(media.player_image)
        self.flakes = [
            Flake(media.white_image, True, self.rng) for _ in range(WHITE_FLAKES)
        ] + [Flake(media.yellow_image, False, self.rng) for _ in range(YELLOW_FLAKES)]
        self.score = Score(media.font)
        self.clock = FrameClock()
        self.playing = False
        self.delta_time = 0.0
        self.reset()

    def reset(self) -> None:
        """Start a fresh round: scatter the flakes and zero the score."""
        for flake in self.flakes:
            flake.reset(True)
        self.score.reset()
        if pygame.mixer.get_init():
            pygame.mixer.music.unpause()
        self.playing = True

    def check_collision(self) -> None:
        """Handle every flake that overlaps the player's hit box."""
        top = self.player.top()
        left = self.player.left()
        right = self.player.right()
        for flake in self.flakes:
            if flake.bottom() > top and flake.right() > left and flake.left() < right:
                self.handle_collision(flake)

    def handle_collision(self, flake: Flake) -> None:
        """Score a white flake; a yellow one ends the round."""
        if flake.is_white:
            self.score.increment()
            _play(self.media.collect_sound)
            flake.reset(False)
        else:
            _play(self.media.hit_sound)
            if pygame.mixer.get_init():
                pygame.mixer.music.pause()
            self.playing = False

    def handle_event(self, event: pygame.event.Event) -> bool:
        """React to one event; return False when the game should quit."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key == pygame.K_SPACE:
                if not self.playing:
                    self.reset()
            elif event.key == pygame.K_f:
                self.clock.toggle_display()
        return True

    def step(self, dt: float) -> None:
        """Advance the world by dt seconds while a round is in progress."""
        if not self.playing:
            return
        keys = pygame.key.get_pressed()
        self.player.update(dt, bool(keys[pygame.K_a]), bool(keys[pygame.K_d]))
        for flake in self.flakes:
            flake.update(dt)
        self.check_collision()

    def draw(self) -> None:
        """Render the whole scene onto the screen surface."""
        self.screen.fill(_BACKGROUND_FILL)
        self.screen.blit(self.media.background_image, self.background_rect)
        self.player.draw(self.screen)
        for flake in self.flakes:
            flake.draw(self.screen)
        self.score.draw(self.screen)

    def run(self) -> None:
        """Play until the window is closed or Escape is pressed."""
        self.reset()
        self.player.reset()
        pygame.mixer.music.load(self.media.music)
        pygame.mixer.music.play(-1)

        while True:
            for event in pygame.event.get():
                if not self.handle_event(event):
                    return
            self.step(self.delta_time)
            self.draw()
            pygame.display.flip()
            self.delta_time = self.clock.update()


def _open_window(assets_dir: Path) -> pygame.Surface:
    pygame.init()
    pygame.mixer.init(48000, -16, 2, 1024)
    pygame.font.init()
    screen = pygame.display.set_mode((WIN_W, WIN_H), pygame.NOFRAME)
    pygame.display.set_caption(WIN_TITLE)
    pygame.display.set_icon(pygame.image.load(_existing(assets_dir / "images" / "yellow.png")))
    pygame.event.set_grab(True)
    return screen


def main(argv: list[str] | None = None) -> int:
    """Start the game; return the process exit status."""
    parser = argparse.ArgumentParser(prog="yellowsnow", description=WIN_TITLE)
    parser.add_argument("--assets", default="assets", help="directory holding the game assets")
    args = parser.parse_args(argv)
    assets_dir = Path(args.assets)

    try:
        screen = _open_window(assets_dir)
        game = Game(load_media(assets_dir), screen)
        game.run()
    except (pygame.error, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
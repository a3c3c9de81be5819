import pygame
import pytest

from yellowsnow.player import PLAYER_Y, Player
from yellowsnow.settings import WIN_W


def make_player(size=(120, 180)):
    image = pygame.Surface(size)
    image.fill((0, 0, 0))
    return Player(image)


def test_reset_centres_player():
    player = make_player((120, 180))
    player.pos_x = 3.0
    player.flip = True
    player.reset()
    assert player.rect.x == (WIN_W - 120) // 2
    assert player.pos_x == float(player.rect.x)
    assert player.rect.y == PLAYER_Y
    assert player.flip is False


def test_move_left():
    player = make_player()
    player.reset()
    start = player.pos_x
    player.update(0.1, True, False)
    assert player.pos_x == pytest.approx(start - player.speed * 0.1)
    assert player.rect.x == int(player.pos_x)
    assert player.flip is True


def test_move_right():
    player = make_player()
    player.reset()
    start = player.pos_x
    player.update(0.1, False, True)
    assert player.pos_x == pytest.approx(start + player.speed * 0.1)
    assert player.flip is False


def test_both_keys_cancel_and_face_right():
    player = make_player()
    player.reset()
    start = player.pos_x
    player.update(0.1, True, True)
    assert player.pos_x == pytest.approx(start)
    assert player.flip is False


def test_no_keys_keeps_position():
    player = make_player()
    player.reset()
    start = player.pos_x
    player.update(0.5, False, False)
    assert player.pos_x == start


def test_blocked_at_left_edge_but_turns():
    player = make_player()
    player.reset()
    player.pos_x = float(-player.left_offset - 1)
    player.rect.x = int(player.pos_x)
    assert player.left() < 0
    player.update(0.1, True, False)
    assert player.pos_x == float(-player.left_offset - 1)
    assert player.flip is True


def test_blocked_at_right_edge():
    player = make_player()
    player.reset()
    player.pos_x = float(WIN_W - player.rect.w + player.right_offset + 1)
    player.rect.x = int(player.pos_x)
    assert player.right() > WIN_W
    before = player.pos_x
    player.update(0.1, False, True)
    assert player.pos_x == before


def test_hit_box_edges():
    player = make_player((120, 180))
    player.reset()
    assert player.top() == player.rect.y + 20
    assert player.left() == player.rect.x + 45
    assert player.right() == player.rect.right - 45


def test_draw_flipped_mirrors_image():
    image = pygame.Surface((10, 4))
    image.fill((255, 0, 0), pygame.Rect(0, 0, 5, 4))
    image.fill((0, 0, 255), pygame.Rect(5, 0, 5, 4))
    player = Player(image)
    player.rect.topleft = (0, 0)
    screen = pygame.Surface((10, 4))

    player.flip = False
    player.draw(screen)
    assert screen.get_at((0, 0)) == (255, 0, 0, 255)

    player.flip = True
    player.draw(screen)
    assert screen.get_at((0, 0)) == (0, 0, 255, 255)
    assert screen.get_at((9, 0)) == (255, 0, 0, 255)
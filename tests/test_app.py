import pygame

from pacmaze.app import KEY_HEADINGS, KeyBuffer
from pacmaze.geometry import Heading


def test_arrows_and_wasd_map_to_headings():
    assert KEY_HEADINGS[pygame.K_LEFT] is KEY_HEADINGS[pygame.K_a] is Heading.LEFT
    assert KEY_HEADINGS[pygame.K_UP] is KEY_HEADINGS[pygame.K_w] is Heading.UP
    assert set(KEY_HEADINGS.values()) == set(Heading)


def test_release_falls_back_to_latest_held_key():
    keys = KeyBuffer()
    assert keys.press(pygame.K_LEFT) is Heading.LEFT
    assert keys.press(pygame.K_w) is Heading.UP
    assert keys.release(pygame.K_w) is Heading.LEFT
    assert keys.release(pygame.K_LEFT) is None


def test_repeated_press_moves_key_to_the_top():
    keys = KeyBuffer()
    keys.press(pygame.K_UP)
    keys.press(pygame.K_RIGHT)
    keys.press(pygame.K_UP)
    assert keys.release(pygame.K_UP) is Heading.RIGHT
    keys.clear()
    assert keys.release(pygame.K_RIGHT) is None

import pygame
import pytest

from puffbird.input_handler import Action, InputHandler


@pytest.fixture
def handler():
    return InputHandler()


@pytest.mark.parametrize("event, expected", [
    (pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE), Action.JUMP),
    (pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE), Action.QUIT),
    (pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a), None),
    (pygame.event.Event(pygame.KEYUP, key=pygame.K_SPACE), None),
    (pygame.event.Event(pygame.QUIT), Action.QUIT),
    (pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.5), Action.JUMP),
    (pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10), touch=False), Action.JUMP),
    (pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10)), Action.JUMP),
    (pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(10, 10), touch=False), Action.JUMP),
    (pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=4, pos=(10, 10), touch=False), None),
    (pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=5, pos=(10, 10), touch=False), None),
    (pygame.event.Event(pygame.MOUSEMOTION, pos=(10, 10)), None),
])
def test_translate(handler, event, expected):
    assert handler.translate(event) is expected


def test_touch_mirrored_click_is_ignored(handler):
    finger = pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.5)
    mirrored = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10), touch=True)
    actions = [handler.translate(e) for e in (finger, mirrored)]
    assert actions == [Action.JUMP, None]

import pygame
import pytest

from puffbird.assets import AssetStore
from puffbird.constants import (
    BACKGROUND_COLOR, BIRD_COLOR, PIPE_COLOR, EFFECT_POS, SCREEN_WIDTH, SCREEN_HEIGHT
)
from puffbird.data_models import Pipe
from puffbird.game import Game
from puffbird.renderer import Renderer


@pytest.fixture
def surface():
    return pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))


@pytest.fixture
def assets():
    return AssetStore(files={}, optional_files={})


@pytest.fixture
def game(state):
    return Game(state=state)


def color_at(surface, x, y):
    return tuple(surface.get_at((int(x), int(y))))[:3]


def test_draws_fallbacks_without_images(surface, assets, game, font):
    game.state.pipes.append(Pipe(x=200, y=300))
    Renderer(surface, assets, font=font).draw(game, 0)

    bird = game.state.bird
    assert color_at(surface, bird.x + 5, bird.y + 5) == BIRD_COLOR
    assert color_at(surface, 210, 310) == PIPE_COLOR
    assert color_at(surface, 300, 100) == BACKGROUND_COLOR


def test_draws_loaded_images(surface, assets, game, font):
    red = pygame.Surface((8, 8))
    red.fill((255, 0, 0))
    assets.images["bird"] = red

    Renderer(surface, assets, font=font).draw(game, 0)
    bird = game.state.bird
    assert color_at(surface, bird.x + 40, bird.y + 40) == (255, 0, 0)


def test_effect_only_inside_window(surface, assets, game, font):
    blue = pygame.Surface((8, 8))
    blue.fill((0, 0, 255))
    assets.images["effect"] = blue
    renderer = Renderer(surface, assets, font=font)
    ex, ey = EFFECT_POS

    game.jump(1000)
    renderer.draw(game, 1050)
    assert color_at(surface, ex + 5, ey + 5) == (0, 0, 255)

    renderer.draw(game, 1200)
    assert color_at(surface, ex + 5, ey + 5) == BACKGROUND_COLOR


def test_status_text_is_drawn(surface, assets, game, font):
    renderer = Renderer(surface, assets, font=font)
    renderer.draw(game, 0)
    text_area = [color_at(surface, x, y) for x in range(10, 40) for y in range(15, 40)]
    assert any(c != BACKGROUND_COLOR for c in text_area)


def test_loading_screen(surface, assets, font):
    renderer = Renderer(surface, assets, font=font)
    renderer.draw_loading()
    assert color_at(surface, 300, 600) == BACKGROUND_COLOR


def test_scaled_images_match_display_format(assets, font):
    pygame.display.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        raw = pygame.Surface((8, 8))
        raw.fill((255, 0, 0))
        assets.images["bird"] = raw

        image = Renderer(screen, assets, font=font)._image("bird", 80, 80)
        assert image.get_size() == (80, 80)
        assert image.get_flags() & pygame.SRCALPHA
        assert tuple(image.get_at((40, 40)))[:3] == (255, 0, 0)
    finally:
        pygame.display.quit()

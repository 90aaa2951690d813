from collections import deque

import numpy as np
import pygame
import pytest

from config import WIDTH, HEIGHT, GRID_SIZE, BACKGROUND, SNAKE, FOOD, TEXT_COLOR
from game import Point, SnakeGame
from render import Renderer


class RecordingFont:
    """Шрифт-заглушка: запоминает тексты, рисует прямоугольник"""

    def __init__(self):
        self.texts = []

    def render(self, text, antialias, color):
        self.texts.append(text)
        surf = pygame.Surface((len(text) * 10, 20))
        surf.fill(color)
        return surf


@pytest.fixture
def game():
    game = SnakeGame(WIDTH // GRID_SIZE, HEIGHT // GRID_SIZE, rng=np.random.default_rng(0))
    game.snake = deque([Point(3, 2), Point(2, 2)])
    game.food = Point(10, 7)
    return game


def center(x, y):
    return x * GRID_SIZE + GRID_SIZE // 2, y * GRID_SIZE + GRID_SIZE // 2


def test_draws_snake_and_food(game):
    surface = pygame.Surface((WIDTH, HEIGHT))
    large, small = RecordingFont(), RecordingFont()

    Renderer(large, small).draw(surface, game)

    assert surface.get_at(center(3, 2))[:3] == SNAKE
    assert surface.get_at(center(2, 2))[:3] == SNAKE
    assert surface.get_at(center(10, 7))[:3] == FOOD
    assert surface.get_at(center(20, 20))[:3] == BACKGROUND
    # Клетка занимает ровно GRID_SIZE пикселей
    assert surface.get_at((4 * GRID_SIZE, 2 * GRID_SIZE + 1))[:3] == BACKGROUND
    assert large.texts == [] and small.texts == []


def test_game_over_labels(game):
    surface = pygame.Surface((WIDTH, HEIGHT))
    large, small = RecordingFont(), RecordingFont()
    game.game_over = True

    Renderer(large, small).draw(surface, game)

    assert large.texts == ["Game Over!"]
    assert small.texts == ["Hit Escape to start again"]
    assert surface.get_at((WIDTH // 2, HEIGHT // 2))[:3] == TEXT_COLOR


def test_win_label(game):
    large, small = RecordingFont(), RecordingFont()
    game.game_over = True
    game.won = True
    game.food = None

    Renderer(large, small).draw(pygame.Surface((WIDTH, HEIGHT)), game)

    assert large.texts == ["You Win!"]


def test_real_fonts_render_text(game):
    pygame.font.init()
    surface = pygame.Surface((WIDTH, HEIGHT))
    renderer = Renderer(pygame.font.Font(None, 48), pygame.font.Font(None, 24))
    game.game_over = True

    renderer.draw(surface, game)

    region = [surface.get_at((x, y))[:3]
              for x in range(WIDTH // 4, 3 * WIDTH // 4, 2)
              for y in range(HEIGHT // 2 - 20, HEIGHT // 2 + 20, 2)]
    assert any(color != BACKGROUND for color in region)

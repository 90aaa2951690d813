"""
Змейка с ручным управлением.

Использование:
    python play.py                      # Обычная игра
    python play.py --seed 42            # Повторяемое положение еды
    python play.py --font myfont.ttf    # Свой шрифт для надписей

Управление: WASD (или стрелки), Escape - заново после проигрыша.
"""
import sys
import time
import argparse

import numpy as np
import pygame

from game import SnakeGame
from render import Renderer
from config import WIDTH, HEIGHT, GRID_SIZE, FPS, TITLE, FONT_LARGE, FONT_SMALL, UP, DOWN, LEFT, RIGHT


# Порядок важен: при нескольких зажатых клавишах берём первую
KEY_DIRECTIONS = [
    (pygame.K_w, UP),
    (pygame.K_s, DOWN),
    (pygame.K_a, LEFT),
    (pygame.K_d, RIGHT),
    (pygame.K_UP, UP),
    (pygame.K_DOWN, DOWN),
    (pygame.K_LEFT, LEFT),
    (pygame.K_RIGHT, RIGHT),
]
RESTART_KEY = pygame.K_ESCAPE


def held_direction(pressed):
    """Направление по зажатым клавишам (или None)"""
    for key, direction in KEY_DIRECTIONS:
        if pressed[key]:
            return direction
    return None


def load_fonts(font_path=None):
    """Загрузка шрифтов. Без шрифтов играть нельзя - выходим."""
    try:
        return pygame.font.Font(font_path, FONT_LARGE), pygame.font.Font(font_path, FONT_SMALL)
    except (pygame.error, OSError) as e:
        print(f"Failed to load font {font_path or '<default>'}: {e}", file=sys.stderr)
        sys.exit(1)


class SnakePlayer:
    def __init__(self, seed=None, fps=FPS, font_path=None):
        pygame.init()

        # Логическое разрешение 640x480, при ресайзе окна pygame масштабирует
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.SCALED | pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()

        large_font, small_font = load_fonts(font_path)
        self.renderer = Renderer(large_font, small_font, GRID_SIZE)

        self.game = SnakeGame(WIDTH // GRID_SIZE, HEIGHT // GRID_SIZE, rng=np.random.default_rng(seed))

        self.fps = fps
        self.games = 0
        self.best = 0
        self.wins = 0

    def frame(self, now):
        """Один кадр: опрос клавиш, шаг (если пора), отрисовка"""
        pressed = pygame.key.get_pressed()
        was_over = self.game.game_over

        self.game.update(now, held_direction(pressed), pressed[RESTART_KEY])

        if self.game.game_over and not was_over:
            self.on_game_over()

        self.renderer.draw(self.screen, self.game)
        pygame.display.flip()

    def on_game_over(self):
        self.games += 1
        score = self.game.score
        self.best = max(self.best, score)

        if self.game.is_win():
            self.wins += 1
            print(f"Game {self.games}: WIN!")
        else:
            print(f"Game {self.games}: Score {score}")

    def play(self):
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            if running:
                self.frame(time.monotonic())
            self.clock.tick(self.fps)

        pygame.quit()

        if self.games > 0:
            print(f"\nResults: {self.games} games")
            print(f"Best: {self.best}")
            print(f"Wins: {self.wins}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Play Snake")
    parser.add_argument("--seed", "-s", type=int, default=None,
                        help="Seed for food placement")
    parser.add_argument("--fps", type=int, default=FPS,
                        help="Frames per second")
    parser.add_argument("--font", "-f", type=str, default=None,
                        help="Path to a TTF font for the labels")
    args = parser.parse_args()

    player = SnakePlayer(seed=args.seed, fps=args.fps, font_path=args.font)
    player.play()

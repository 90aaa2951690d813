"""
Отрисовка игры на pygame.Surface.
Шрифты передаются в конструктор (загружаются один раз в play.py).
"""
import pygame

from config import GRID_SIZE, BACKGROUND, SNAKE, FOOD, TEXT_COLOR, TEXT_GAP


class Renderer:
    def __init__(self, large_font, small_font, cell_size=GRID_SIZE):
        self.large_font = large_font
        self.small_font = small_font
        self.cell_size = cell_size

    def cell_rect(self, x, y):
        return pygame.Rect(x * self.cell_size, y * self.cell_size, self.cell_size, self.cell_size)

    def draw(self, surface, game):
        surface.fill(BACKGROUND)

        # Змейка
        for x, y in game.snake:
            pygame.draw.rect(surface, SNAKE, self.cell_rect(x, y))

        # Еда
        if game.food is not None:
            pygame.draw.rect(surface, FOOD, self.cell_rect(*game.food))

        if game.game_over:
            self.draw_game_over(surface, game.is_win())

    def draw_game_over(self, surface, won=False):
        """Две надписи по центру: заголовок и подсказка про рестарт"""
        width, height = surface.get_size()

        title = self.large_font.render("You Win!" if won else "Game Over!", True, TEXT_COLOR)
        title_rect = title.get_rect(center=(width // 2, height // 2))
        surface.blit(title, title_rect)

        hint = self.small_font.render("Hit Escape to start again", True, TEXT_COLOR)
        hint_rect = hint.get_rect(midtop=(width // 2, title_rect.bottom + TEXT_GAP))
        surface.blit(hint, hint_rect)

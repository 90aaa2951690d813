"""
Логика змейки: состояние игры, очередь поворотов, столкновения, еда.

Никакого pygame - только координаты на сетке cols x rows.
Змейка - deque клеток, голова первая.
Шаг игры происходит раз в GAME_SPEED секунд, независимо от FPS.
"""
from collections import deque, namedtuple

import numpy as np

from config import GRID_WIDTH, GRID_HEIGHT, GAME_SPEED, MAX_QUEUED_DIRECTIONS, RIGHT


Point = namedtuple("Point", ["x", "y"])


def opposite(direction):
    """Обратное направление"""
    return (-direction[0], -direction[1])


def enqueue_direction(pending, current, candidate):
    """
    Добавить поворот в очередь.

    pending: deque ожидающих направлений (старые в начале)
    current: текущее направление змейки
    candidate: новое направление

    Разворот на 180 градусов относительно последнего направления
    (или текущего, если очередь пуста) и повтор последнего не принимаются.
    """
    if len(pending) >= MAX_QUEUED_DIRECTIONS:
        return pending

    last = pending[-1] if pending else current
    if tuple(candidate) == opposite(last):
        return pending
    if pending and tuple(candidate) == tuple(last):
        return pending

    pending.append(candidate)
    return pending


def collides(new_head, snake, cols=GRID_WIDTH, rows=GRID_HEIGHT):
    """Голова за границей поля или на теле змейки (хвост тоже считается)"""
    x, y = new_head
    if x < 0 or y < 0 or x >= cols or y >= rows:
        return True
    return new_head in snake


class SnakeGame:
    def __init__(self, cols=GRID_WIDTH, rows=GRID_HEIGHT, tick_interval=GAME_SPEED, rng=None):
        if cols < 1 or rows < 1:
            raise ValueError(f"grid must be at least 1x1, got {cols}x{rows}")
        self.cols = cols
        self.rows = rows
        self.tick_interval = tick_interval
        self.rng = rng if rng is not None else np.random.default_rng()
        # last_update = None: первый кадр сразу делает шаг
        self.reset()

    def reset(self, now=None):
        """Рестарт: одна клетка в центре, движение вправо"""
        self.snake = deque([Point(self.cols // 2, self.rows // 2)])
        self.direction = RIGHT
        self.pending = deque()
        self.food = None
        self.game_over = False
        self.won = False
        self.score = 0
        self.last_update = now
        self.spawn_food()

    @property
    def head(self):
        return self.snake[0]

    def spawn_food(self):
        """
        Еда в случайной свободной клетке.

        Перебор случайных клеток, пока не попадём мимо змейки:
        на редком поле быстро, худший случай не ограничен.
        Если свободных клеток нет - поле заполнено, это победа.
        """
        if len(self.snake) >= self.cols * self.rows:
            self.food = None
            self.won = True
            self.game_over = True
            return None

        while True:
            cell = Point(int(self.rng.integers(self.cols)), int(self.rng.integers(self.rows)))
            if cell not in self.snake:
                self.food = cell
                return cell

    def add_direction(self, direction):
        enqueue_direction(self.pending, self.direction, direction)

    def step(self):
        """
        Один шаг змейки.
        Возвращает False, если змейка врезалась (или игра уже окончена).
        """
        if self.game_over:
            return False

        if self.pending:
            self.direction = self.pending.popleft()

        dx, dy = self.direction
        new_head = Point(self.head.x + dx, self.head.y + dy)

        if collides(new_head, self.snake, self.cols, self.rows):
            self.game_over = True
            return False

        if new_head == self.food:
            # Рост: хвост не убираем, еду ставим уже с новой головой
            self.snake.appendleft(new_head)
            self.score += 1
            self.spawn_food()
        else:
            self.snake.appendleft(new_head)
            self.snake.pop()

        return True

    def update(self, now, direction=None, restart=False):
        """
        Вызывается каждый кадр.

        now: время в секундах (монотонное)
        direction: зажатое направление или None
        restart: зажата клавиша рестарта

        Возвращает True, если в этом кадре был шаг игры.
        """
        if self.game_over:
            if restart:
                self.reset(now)
            return False

        if direction is not None:
            self.add_direction(direction)

        if self.last_update is not None and now - self.last_update < self.tick_interval:
            return False
        self.last_update = now

        self.step()
        return True

    def is_win(self):
        """Победа = змейка заняла всё поле"""
        return self.won

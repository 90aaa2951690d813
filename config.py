# Настройки игры
# Экран 640x480, логическое разрешение не меняется при ресайзе окна
WIDTH = 640
HEIGHT = 480

# Сетка
GRID_SIZE = 20
GRID_WIDTH = WIDTH // GRID_SIZE    # 32 клетки
GRID_HEIGHT = HEIGHT // GRID_SIZE  # 24 клетки

# Цвета
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)

SNAKE = WHITE
FOOD = RED
BACKGROUND = BLACK
TEXT_COLOR = WHITE

# Направления
UP = (0, -1)
DOWN = (0, 1)
RIGHT = (1, 0)
LEFT = (-1, 0)

# Скорость: один шаг змейки раз в 1/6 секунды, кадров в секунду - 60
GAME_SPEED = 1 / 6
FPS = 60

# Очередь поворотов
MAX_QUEUED_DIRECTIONS = 3

# Текст
TITLE = "Snake Game"
FONT_LARGE = 48
FONT_SMALL = 24
TEXT_GAP = 20

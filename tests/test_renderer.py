from snake_game.config import GameConfig
from snake_game.game import DIRECTIONS, NO_FOOD, SnakeGame
from snake_game.renderer import FOOD_COLOR, SNAKE_COLOR, Renderer


class RecordingSurface:
    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.calls = []

    def clear_rect(self, x, y, w, h):
        self.calls.append(("clear", x, y, w, h))

    def fill_rect(self, x, y, w, h, color):
        self.calls.append(("fill", x, y, w, h, color))


def test_draw_clears_then_fills_snake_and_food():
    config = GameConfig()
    surface = RecordingSurface(*config.window_size)
    game = SnakeGame(grid_size=config.grid_size, seed=0)
    game.reset(snake=[(10, 10), (9, 10)], direction=DIRECTIONS["RIGHT"], food=(3, 4))

    Renderer(surface, config).draw(game)

    assert surface.calls == [
        ("clear", 0, 0, 400, 400),
        ("fill", 200, 200, 15, 15, SNAKE_COLOR),
        ("fill", 180, 200, 15, 15, SNAKE_COLOR),
        ("fill", 60, 80, 10, 10, FOOD_COLOR),
    ]


def test_draw_does_not_touch_game_state():
    surface = RecordingSurface(400, 400)
    game = SnakeGame(grid_size=20, seed=5)
    before = (list(game.snake), game.direction, game.food, game.score)
    Renderer(surface).draw(game)
    assert (list(game.snake), game.direction, game.food, game.score) == before


def test_missing_food_is_not_drawn():
    surface = RecordingSurface(40, 40)
    game = SnakeGame(grid_size=2, seed=0)
    game.reset(snake=[(0, 0)], food=NO_FOOD)
    Renderer(surface, GameConfig(grid_size=2)).draw(game)
    assert [c[0] for c in surface.calls] == ["clear", "fill"]

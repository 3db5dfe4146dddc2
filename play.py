from __future__ import annotations

import argparse
import logging
import random
import sys

import pygame

from snake_game.config import GameConfig
from snake_game.leaderboard import Leaderboard
from snake_game.pygame_io import BACKGROUND, TICK_EVENT, BannerNotifier, PygameSurface, PygameTimer
from snake_game.renderer import Renderer
from snake_game.session import GameSession, State
from snake_game.storage import JsonFileStore

KEY_NAMES = {
    pygame.K_UP: "ArrowUp",
    pygame.K_DOWN: "ArrowDown",
    pygame.K_LEFT: "ArrowLeft",
    pygame.K_RIGHT: "ArrowRight",
}

TEXT_COLOR = (230, 230, 230)
MAX_NAME_LENGTH = 16


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play Snake and compete for the local leaderboard")
    parser.add_argument("--grid", type=int, default=20, help="Board width and height in cells")
    parser.add_argument("--cell", type=int, default=20, help="Cell size in pixels")
    parser.add_argument("--speed", type=int, default=200, help="Initial tick interval in ms")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--scores", type=str, default="snake_scores.json", help="Leaderboard file")
    parser.add_argument("--name", type=str, default="", help="Prefill the player name")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args(argv)
    for option in ("grid", "cell", "speed"):
        if getattr(args, option) < 1:
            parser.error(f"--{option} must be at least 1")
    return args


def draw_lines(window, font, lines, top: int = 10) -> None:
    y = top
    for line in lines:
        text = font.render(line, True, TEXT_COLOR)
        window.blit(text, (10, y))
        y += font.get_linesize()


def idle_lines(session: GameSession, name: str, banner):
    lines = []
    if banner:
        lines += [banner, ""]
    lines += [f"Name: {name}_", "Press Enter to start", "", "Leaderboard"]
    for rank, player in enumerate(session.leaderboard.entries, start=1):
        lines.append(f"{rank:>2}. {player.name}  {player.score}")
    return lines


def draw_frame(window, font, session: GameSession, name: str, banner) -> None:
    if session.state is State.IDLE:
        window.fill(BACKGROUND)
        draw_lines(window, font, idle_lines(session, name, banner))
        return

    # Board first, then text on top.
    session.renderer.draw(session.game)
    if session.state is State.GAME_OVER:
        draw_lines(window, font, [banner or "Game Over!", "Press Enter to continue"])
    else:
        draw_lines(window, font, [f"Score: {session.score}"])


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = GameConfig(
        grid_size=args.grid,
        cell_size=args.cell,
        snake_size=max(1, args.cell * 3 // 4),
        food_size=max(1, args.cell // 2),
        initial_speed=args.speed,
    )

    pygame.init()
    window = pygame.display.set_mode(config.window_size)
    pygame.display.set_caption("Snake")
    font = pygame.font.Font(None, 24)
    clock = pygame.time.Clock()

    notifier = BannerNotifier()
    session = GameSession(
        scheduler=PygameTimer(),
        leaderboard=Leaderboard(JsonFileStore(args.scores), config.leaderboard_key, config.leaderboard_size),
        notifier=notifier,
        config=config,
        rng=random.Random(args.seed),
        renderer=Renderer(PygameSurface(window), config),
    )
    name = args.name

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                session.scheduler.stop()
                pygame.quit()
                sys.exit()
            if event.type == TICK_EVENT:
                session.tick()
            elif event.type == pygame.KEYDOWN:
                if session.running:
                    if event.key in KEY_NAMES:
                        session.handle_key(KEY_NAMES[event.key])
                elif event.key == pygame.K_RETURN:
                    if session.state is State.GAME_OVER:
                        session.reset()
                        notifier.clear()
                    elif session.start(name):
                        notifier.clear()
                elif event.key == pygame.K_BACKSPACE:
                    name = name[:-1]
                elif event.unicode and event.unicode.isprintable() and len(name) < MAX_NAME_LENGTH:
                    name += event.unicode

        draw_frame(window, font, session, name, notifier.message)
        pygame.display.flip()
        clock.tick(60)


if __name__ == "__main__":
    main()

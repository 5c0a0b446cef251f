# main.py
import argparse
import dataclasses
import logging
from typing import List, Optional, Tuple

import pygame # type: ignore

from .config import (
    WIDTH, HEIGHT, TILE_SIZE, GRID_W, GRID_H,
    BG, GRID, HEAD, BODY, FOOD, TEXT, ALERT, NOTICE,
    PAUSE_BTN, RESTART_BTN, BTN_TEXT,
    CFG, Config,
)
from .controls import RESTART, dispatch_key
from .game import BoardFullError, GameSnapshot, GameState, Phase
from .scheduler import Scheduler

logger = logging.getLogger(__name__)

PAUSE_RECT = pygame.Rect(WIDTH - 100, 10, 80, 30)
RESTART_RECT = pygame.Rect(WIDTH - 100, 50, 80, 30)


# ---------- Drawing ----------
def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * TILE_SIZE, gy * TILE_SIZE, TILE_SIZE, TILE_SIZE)
    pygame.draw.rect(screen, color, rect, border_radius=5)

def draw_button(screen: pygame.Surface, font: pygame.font.Font, rect: pygame.Rect,
                label: str, color: Tuple[int, int, int]) -> None:
    pygame.draw.rect(screen, color, rect)
    txt = font.render(label, True, BTN_TEXT)
    screen.blit(txt, txt.get_rect(center=rect.center))

def draw_centered(screen: pygame.Surface, font: pygame.font.Font,
                  lines: List[str], color: Tuple[int, int, int]) -> None:
    for i, line in enumerate(lines):
        txt = font.render(line, True, color)
        screen.blit(txt, txt.get_rect(center=(WIDTH // 2, HEIGHT // 2 + i * 30)))

def draw_game(screen: pygame.Surface, font: pygame.font.Font, snap: GameSnapshot) -> None:
    screen.fill(BG)
    # grid lines
    for i in range(max(snap.grid_width, snap.grid_height)):
        pygame.draw.line(screen, GRID, (i * TILE_SIZE, 0), (i * TILE_SIZE, HEIGHT))
        pygame.draw.line(screen, GRID, (0, i * TILE_SIZE), (WIDTH, i * TILE_SIZE))
    # food
    draw_cell(screen, snap.food[0], snap.food[1], FOOD)
    # snake
    draw_cell(screen, snap.head[0], snap.head[1], HEAD)
    for x, y in snap.body:
        draw_cell(screen, x, y, BODY)

    if snap.phase is Phase.OVER:
        draw_centered(screen, font, [f"Game Over! Score: {snap.score}", "Press 'R' to Restart"], ALERT)
    elif snap.phase is Phase.PAUSED:
        draw_centered(screen, font, ["Game Paused. Press 'P' to Resume"], NOTICE)
    else:
        screen.blit(font.render(f"Score: {snap.score}", True, TEXT), (10, 14))
        screen.blit(font.render(f"Highest Score: {snap.highest_score}", True, TEXT), (10, 34))

    screen.blit(font.render(f"Time Left: {snap.time_left}s", True, NOTICE), (WIDTH - 220, 14))
    draw_button(screen, font, PAUSE_RECT, "Pause", PAUSE_BTN)
    draw_button(screen, font, RESTART_RECT, "Restart", RESTART_BTN)


# ---------- Loop ----------
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Snake against the clock")
    parser.add_argument("--seed", type=int, default=CFG.seed)
    parser.add_argument("--tick-ms", type=int, default=CFG.tick_ms)
    parser.add_argument("--countdown-ms", type=int, default=CFG.countdown_ms)
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    return parser.parse_args(argv)

def build_config(args: argparse.Namespace) -> Config:
    return dataclasses.replace(CFG, seed=args.seed, tick_ms=args.tick_ms, countdown_ms=args.countdown_ms)

def build_scheduler(state: GameState, cfg: Config, now_ms: int) -> Scheduler:
    scheduler = Scheduler(now_ms)
    scheduler.every(cfg.tick_ms, state.tick, name="tick")
    scheduler.every(cfg.countdown_ms, state.countdown_tick, name="countdown")
    return scheduler

def handle_events(state: GameState, scheduler: Scheduler) -> bool:
    """Forward keys and button clicks to the game. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if dispatch_key(state, event.key) == RESTART:
                scheduler.reset(pygame.time.get_ticks())
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if PAUSE_RECT.collidepoint(event.pos):
                state.toggle_pause()
            elif RESTART_RECT.collidepoint(event.pos):
                state.restart()
                scheduler.reset(pygame.time.get_ticks())
    return True

def advance_clocks(scheduler: Scheduler, now_ms: int) -> bool:
    """Run due scheduled commands. Return False once the board has no room left."""
    try:
        scheduler.advance(now_ms)
    except BoardFullError as exc:
        logger.error("Stopping: %s", exc)
        return False
    return True

def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = build_config(args)

    pygame.init()
    font = pygame.font.SysFont("Arial", 18)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Snake Game")
    clock = pygame.time.Clock()

    state = GameState(GRID_W, GRID_H, cfg=cfg)
    scheduler = build_scheduler(state, cfg, pygame.time.get_ticks())
    logger.info("Started %dx%d board, tick %d ms, seed %d", GRID_W, GRID_H, cfg.tick_ms, cfg.seed)

    running = True
    while running:
        # 1) input
        running = handle_events(state, scheduler)
        if not running:
            break

        # 2) update; both clocks live in the scheduler
        running = advance_clocks(scheduler, pygame.time.get_ticks())
        if not running:
            break

        # 3) render
        draw_game(screen, font, state.snapshot())
        pygame.display.flip()
        clock.tick(cfg.fps)

    logger.info("Quit with highest score %d", state.highest_score)
    pygame.quit()

if __name__ == "__main__":
    main()

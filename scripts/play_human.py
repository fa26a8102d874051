#!/usr/bin/env python3
"""
Human Play Mode - Play Space Invaders in a pygame window.

Controls:
    Arrow Keys or WASD: Move the ship
    Space: Shoot
    R: Restart game
    ESC: Quit
"""
import sys
import os
import argparse
import random
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Suppress pygame messages
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = '1'

import pygame

from invaders.game import SpaceInvadersGame
from invaders.state import GameManager
from invaders.utils import load_config, setup_logging
from invaders.visualization import SpaceInvadersRenderer

KEY_COMMANDS = {
    pygame.K_LEFT: "left",
    pygame.K_a: "left",
    pygame.K_RIGHT: "right",
    pygame.K_d: "right",
    pygame.K_UP: "up",
    pygame.K_w: "up",
    pygame.K_DOWN: "down",
    pygame.K_s: "down",
    pygame.K_SPACE: "fire",
}


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Space Invaders - Human Mode")
    parser.add_argument("-c", "--config", type=str, default=None, help="Path to config file")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for enemy fire")
    return parser.parse_args()


def main():
    """Main entry point for human play mode."""
    args = parse_args()
    config = load_config(args.config)
    setup_logging(config.logging)

    game = SpaceInvadersGame(
        config=config.game,
        game_manager=GameManager(),
        rng=random.Random(args.seed),
    )

    pygame.init()
    renderer = SpaceInvadersRenderer(
        config.game.screen_width,
        config.game.screen_height,
        scale=config.display.window_scale,
    )
    window = pygame.display.set_mode(renderer.get_preferred_size())
    pygame.display.set_caption("Space Invaders - Human Mode")

    print("\n" + "=" * 50)
    print("Space Invaders - Human Mode")
    print("=" * 50)
    print("Controls:")
    print("  Arrow Keys / WASD: Move")
    print("  Space: Shoot")
    print("  R: Restart")
    print("  ESC: Quit")
    print("=" * 50 + "\n")

    game.start()
    clock = pygame.time.Clock()
    running = True

    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    game.reset()
                    game.start()

        # Held keys repeat every tick
        pressed = pygame.key.get_pressed()
        for key, token in KEY_COMMANDS.items():
            if pressed[key]:
                game.submit(token)

        state = game.step()
        renderer.render(state, surface=window)
        pygame.display.flip()
        clock.tick(config.game.target_fps)

    if game.running:
        game.end()
    print(f"Final score: {game.get_score()} | Rank: {game.get_rank()}")
    pygame.quit()


if __name__ == "__main__":
    main()

"""
Space Invaders Renderer - Pygame-based visualization implementing RendererInterface.
Simple geometric shapes, one colour per enemy type.
"""

import pygame
from typing import Dict, Any, Tuple, Optional

from ..core.renderer_interface import RendererInterface


# Colors
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GREEN = (0, 255, 0)
RED = (255, 0, 0)
CYAN = (0, 255, 255)
MAGENTA = (255, 0, 255)
YELLOW = (255, 255, 0)
ORANGE = (255, 165, 0)
GRAY = (120, 120, 120)

PLAYER_COLOR = GREEN
PLAYER_SHOT_COLOR = YELLOW
ENEMY_SHOT_COLOR = WHITE
HUD_COLOR = GREEN
HEALTH_BAR_COLOR = RED

ENEMY_COLORS = {
    "BASIC": GREEN,
    "SCOUT": CYAN,
    "HEAVY": ORANGE,
    "BOSS": RED,
    "HUNTER": MAGENTA,
}

ENTITY_SIZE = 24  # Slightly under the 25 unit hit radius
BOSS_SIZE = 48


class SpaceInvadersRenderer(RendererInterface):
    """
    Renders Space Invaders snapshots with Pygame.

    Can render to a given surface (e.g. the display window) or to an
    off-screen surface it creates itself.
    """

    def __init__(
        self,
        width: int = 800,
        height: int = 600,
        scale: float = 1.0,
        surface: Optional[pygame.Surface] = None,
    ):
        """
        Initialize the renderer.

        Args:
            width: Playfield width in game units
            height: Playfield height in game units
            scale: Pixels per game unit
            surface: Surface to draw on (if None, an off-screen one is created)
        """
        self._base_width = width
        self._base_height = height
        self._scale = scale
        self.owns_surface = surface is None
        self.surface = surface if surface is not None else pygame.Surface(self.get_preferred_size(), 0, 32)
        self._font: Optional[pygame.font.Font] = None
        self._large_font: Optional[pygame.font.Font] = None

    def get_preferred_size(self) -> Tuple[int, int]:
        return (int(self._base_width * self._scale), int(self._base_height * self._scale))

    def _scale_point(self, x: float, y: float) -> Tuple[int, int]:
        return int(x * self._scale), int(y * self._scale)

    def _scale_size(self, size: float) -> int:
        return max(1, int(size * self._scale))

    def _get_fonts(self) -> Tuple[pygame.font.Font, pygame.font.Font]:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, self._scale_size(24))
            self._large_font = pygame.font.Font(None, self._scale_size(64))
        return self._font, self._large_font

    def render(
        self,
        game_state: Dict[str, Any],
        surface: Optional[pygame.Surface] = None,
    ) -> pygame.Surface:
        """
        Render a game state snapshot.

        Args:
            game_state: Dictionary from SpaceInvadersGame.get_state()
            surface: Optional surface overriding the renderer's own

        Returns:
            The surface that was rendered to
        """
        target = surface if surface is not None else self.surface
        target.fill(BLACK)

        for enemy in game_state.get("enemies", []):
            self._draw_enemy(target, enemy)

        self._draw_player(target, game_state.get("player", {}))

        for proj in game_state.get("player_projectiles", []):
            self._draw_projectile(target, proj, PLAYER_SHOT_COLOR)
        for proj in game_state.get("enemy_projectiles", []):
            self._draw_projectile(target, proj, ENEMY_SHOT_COLOR)

        self._draw_hud(
            target,
            game_state.get("score", 0),
            game_state.get("lives", 0),
            game_state.get("level", 1),
        )

        if game_state.get("game_over", False):
            self._draw_game_over(target, game_state.get("rank", ""))

        return target

    def _draw_player(self, surface: pygame.Surface, player: Dict[str, Any]) -> None:
        """Draw the player's ship as a hull with a cannon on top."""
        if not player:
            return

        cx, cy = self._scale_point(player["x"], player["y"])
        size = self._scale_size(ENTITY_SIZE)

        hull = pygame.Rect(0, 0, size, size // 2)
        hull.center = (cx, cy + size // 4)
        pygame.draw.rect(surface, PLAYER_COLOR, hull)

        cannon = pygame.Rect(0, 0, max(2, size // 5), size // 2)
        cannon.midbottom = hull.midtop
        pygame.draw.rect(surface, PLAYER_COLOR, cannon)

        self._draw_health_bar(surface, hull.left, hull.bottom + 2, size, player)

    def _draw_enemy(self, surface: pygame.Surface, enemy: Dict[str, Any]) -> None:
        """Draw an enemy body with eyes and a health bar above it."""
        enemy_type = enemy.get("type")
        color = ENEMY_COLORS.get(enemy_type, GRAY)
        size = self._scale_size(BOSS_SIZE if enemy_type == "BOSS" else ENTITY_SIZE)
        cx, cy = self._scale_point(enemy["x"], enemy["y"])

        body = pygame.Rect(0, 0, size, int(size * 0.7))
        body.center = (cx, cy)
        pygame.draw.rect(surface, color, body, border_radius=max(1, size // 6))

        eye = max(1, size // 8)
        pygame.draw.circle(surface, BLACK, (body.left + size // 3, body.top + size // 4), eye)
        pygame.draw.circle(surface, BLACK, (body.right - size // 3, body.top + size // 4), eye)

        self._draw_health_bar(surface, body.left, body.top - 5, size, enemy)

    def _draw_health_bar(
        self, surface: pygame.Surface, x: int, y: int, width: int, entity: Dict[str, Any]
    ) -> None:
        max_health = entity.get("max_health", 0)
        if max_health <= 0:
            return
        ratio = max(0.0, min(1.0, entity.get("health", 0) / max_health))
        pygame.draw.rect(surface, GRAY, pygame.Rect(x, y, width, 3))
        pygame.draw.rect(surface, HEALTH_BAR_COLOR, pygame.Rect(x, y, int(width * ratio), 3))

    def _draw_projectile(
        self, surface: pygame.Surface, proj: Dict[str, Any], color: Tuple[int, int, int]
    ) -> None:
        cx, cy = self._scale_point(proj["x"], proj["y"])
        rect = pygame.Rect(0, 0, self._scale_size(3), self._scale_size(10))
        rect.center = (cx, cy)
        pygame.draw.rect(surface, color, rect)

    def _draw_hud(self, surface: pygame.Surface, score: int, lives: int, level: int) -> None:
        """Draw the heads-up display (score, level, lives)."""
        font, _ = self._get_fonts()

        score_text = font.render(f"SCORE: {score}", True, HUD_COLOR)
        surface.blit(score_text, self._scale_point(10, 10))

        level_text = font.render(f"LEVEL: {level}", True, HUD_COLOR)
        level_rect = level_text.get_rect()
        level_rect.centerx = self._scale_point(self._base_width / 2, 0)[0]
        level_rect.top = self._scale_point(0, 10)[1]
        surface.blit(level_text, level_rect)

        lives_text = font.render("LIVES:", True, HUD_COLOR)
        lives_x, lives_y = self._scale_point(self._base_width - 160, 10)
        surface.blit(lives_text, (lives_x, lives_y))

        for i in range(lives):
            icon = pygame.Rect(
                lives_x + lives_text.get_width() + 8 + i * self._scale_size(18),
                lives_y + 2,
                self._scale_size(12),
                self._scale_size(10),
            )
            pygame.draw.rect(surface, PLAYER_COLOR, icon)

    def _draw_game_over(self, surface: pygame.Surface, rank: str) -> None:
        font, large_font = self._get_fonts()
        center = self._scale_point(self._base_width / 2, self._base_height / 2)

        text = large_font.render("GAME OVER", True, RED)
        surface.blit(text, text.get_rect(center=center))

        if rank:
            rank_text = font.render(f"RANK: {rank}", True, WHITE)
            surface.blit(rank_text, rank_text.get_rect(center=(center[0], center[1] + text.get_height())))

    def close(self) -> None:
        if self.owns_surface:
            self.surface = None

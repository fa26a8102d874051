"""
Space Invaders game configuration.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List, Tuple


def _default_ranks() -> List[Tuple[int, str]]:
    return [
        (5000, "Space Master"),
        (3000, "Space Commander"),
        (1000, "Veteran Pilot"),
        (500, "Space Soldier"),
        (0, "Rookie"),
    ]


@dataclass
class SpaceInvadersConfig:
    """Configuration for the Space Invaders simulation."""

    # Screen dimensions
    screen_width: int = 800
    screen_height: int = 600

    # Tick pacing
    target_fps: int = 10
    frame_delay_ms: int = 100

    # Player settings
    player_speed: int = 5
    player_health: int = 100
    player_shot_cooldown_ms: int = 250
    player_spawn_offset: int = 50  # Distance of the spawn point above the bottom edge

    # Enemy settings (tuning constants)
    enemy_shot_probability: float = 0.002
    enemy_shot_cooldown_ms: int = 1000
    hunters_track_player: bool = False

    # Playfield margins
    invasion_margin: int = 100  # Enemies below height - margin have invaded
    projectile_margin: int = 50

    # Final ranking, highest threshold first
    rank_thresholds: List[Tuple[int, str]] = field(default_factory=_default_ranks)

    def __post_init__(self):
        if self.screen_width <= 0 or self.screen_height <= 0 or self.target_fps <= 0:
            raise ValueError("Screen dimensions and FPS must be positive")
        if self.frame_delay_ms < 0:
            raise ValueError("Frame delay cannot be negative")
        if not 0.0 <= self.enemy_shot_probability <= 1.0:
            raise ValueError("Enemy shot probability must be between 0 and 1")
        self.rank_thresholds = sorted(
            ((int(score), str(title)) for score, title in self.rank_thresholds),
            reverse=True,
        )

    @property
    def spawn_point(self) -> Tuple[int, int]:
        """Where the player appears at the start and after each respawn."""
        return self.screen_width // 2, self.screen_height - self.player_spawn_offset

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "screen_width": self.screen_width,
            "screen_height": self.screen_height,
            "target_fps": self.target_fps,
            "frame_delay_ms": self.frame_delay_ms,
            "player_speed": self.player_speed,
            "player_health": self.player_health,
            "player_shot_cooldown_ms": self.player_shot_cooldown_ms,
            "player_spawn_offset": self.player_spawn_offset,
            "enemy_shot_probability": self.enemy_shot_probability,
            "enemy_shot_cooldown_ms": self.enemy_shot_cooldown_ms,
            "hunters_track_player": self.hunters_track_player,
            "invasion_margin": self.invasion_margin,
            "projectile_margin": self.projectile_margin,
            "rank_thresholds": [list(rank) for rank in self.rank_thresholds],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SpaceInvadersConfig":
        """Create config from dictionary."""
        return cls(
            screen_width=data.get("screen_width", 800),
            screen_height=data.get("screen_height", 600),
            target_fps=data.get("target_fps", 10),
            frame_delay_ms=data.get("frame_delay_ms", 100),
            player_speed=data.get("player_speed", 5),
            player_health=data.get("player_health", 100),
            player_shot_cooldown_ms=data.get("player_shot_cooldown_ms", 250),
            player_spawn_offset=data.get("player_spawn_offset", 50),
            enemy_shot_probability=data.get("enemy_shot_probability", 0.002),
            enemy_shot_cooldown_ms=data.get("enemy_shot_cooldown_ms", 1000),
            hunters_track_player=data.get("hunters_track_player", False),
            invasion_margin=data.get("invasion_margin", 100),
            projectile_margin=data.get("projectile_margin", 50),
            rank_thresholds=[
                tuple(rank) for rank in data.get("rank_thresholds", _default_ranks())
            ],
        )

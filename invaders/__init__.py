"""
Invaders - Tick-based Space Invaders simulation.

Modules:
- core: Geometry value types and the renderer interface
- strategies: Pluggable enemy movement algorithms
- entities: Player, enemies and projectiles
- factories: Enemy catalogue and wave construction
- state: Shared game state manager
- game: Simulation loop, commands, configuration and session driver
- visualization: Terminal (rich) and pygame renderers
- utils: Configuration loading and logging setup
"""

__version__ = "1.0.0"

"""
Enemy catalogue.
"""

from enum import Enum


class EnemyType(Enum):
    """Enemy types with base stats, sprite and kill points."""
    #        label                health damage sprite points
    BASIC = ("Basic Invader", 100, 10, "👾", 100)
    SCOUT = ("Scout", 80, 15, "🛸", 150)
    HEAVY = ("Heavy Invader", 200, 25, "👿", 200)
    BOSS = ("Boss", 500, 50, "👹", 1000)
    HUNTER = ("Aggressive Hunter", 150, 20, "😈", 300)

    def __init__(self, label: str, health: int, damage: int, sprite: str, points: int):
        self.label = label
        self.health = health
        self.damage = damage
        self.sprite = sprite
        self.points = points

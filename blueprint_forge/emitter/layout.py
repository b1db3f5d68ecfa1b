"""Initial placement and physics constants shared by the emitted game and
its headless simulation.

All coordinates live in a fixed logical canvas (960×600). Pickups sit on a
grid over the upper play area with a small seeded jitter; enemies spawn in a
row along the top edge; the player starts at the bottom centre.
"""

import math
import random
import zlib
from dataclasses import dataclass, field

from blueprint_forge.models import WorldModel


@dataclass(frozen=True)
class Physics:
    width: int = 960
    height: int = 600
    player_radius: float = 14
    player_speed: float = 220
    pickup_radius: float = 12
    enemy_radius: float = 16
    enemy_base_speed: float = 60
    enemy_speed_step: float = 14
    sway_amplitude: float = 40
    sway_frequency: float = 1.4
    sway_frequency_step: float = 0.2
    retreat_factor: float = 0.45
    jitter: float = 18

    @property
    def pickup_distance(self) -> float:
        return self.player_radius + self.pickup_radius

    @property
    def collision_distance(self) -> float:
        return self.player_radius + self.enemy_radius

    def to_config(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "playerRadius": self.player_radius,
            "playerSpeed": self.player_speed,
            "pickupRadius": self.pickup_radius,
            "enemyRadius": self.enemy_radius,
            "swayAmplitude": self.sway_amplitude,
            "retreatFactor": self.retreat_factor,
        }


PHYSICS = Physics()

# Pickup area, in logical canvas units.
PICKUP_AREA = (80, 70, 880, 440)  # left, top, right, bottom


@dataclass(frozen=True)
class PickupSpot:
    label: str
    x: float
    y: float


@dataclass(frozen=True)
class EnemySpawn:
    label: str
    x: float
    y: float
    speed: float
    sway_frequency: float
    phase: float


@dataclass(frozen=True)
class Layout:
    seed: int
    player: tuple[float, float]
    pickups: list[PickupSpot] = field(default_factory=list)
    enemies: list[EnemySpawn] = field(default_factory=list)
    physics: Physics = PHYSICS

    def to_config(self) -> dict:
        return {
            "seed": self.seed,
            "physics": self.physics.to_config(),
            "player": {"x": self.player[0], "y": self.player[1]},
            "pickups": [{"label": p.label, "x": p.x, "y": p.y} for p in self.pickups],
            "enemies": [
                {
                    "label": e.label,
                    "x": e.x,
                    "y": e.y,
                    "speed": e.speed,
                    "swayFrequency": e.sway_frequency,
                    "phase": e.phase,
                }
                for e in self.enemies
            ],
        }


def _grid_shape(count: int) -> tuple[int, int]:
    cols = math.ceil(math.sqrt(count))
    rows = math.ceil(count / cols)
    return cols, rows


def place_pickups(
    labels: list[str], rng: random.Random, physics: Physics = PHYSICS
) -> list[PickupSpot]:
    if not labels:
        return []
    left, top, right, bottom = PICKUP_AREA
    cols, rows = _grid_shape(len(labels))
    cell_w = (right - left) / cols
    cell_h = (bottom - top) / rows
    spots = []
    for index, label in enumerate(labels):
        col, row = index % cols, index // cols
        x = left + (col + 0.5) * cell_w + rng.uniform(-physics.jitter, physics.jitter)
        y = top + (row + 0.5) * cell_h + rng.uniform(-physics.jitter, physics.jitter)
        spots.append(PickupSpot(label=label, x=round(x, 1), y=round(y, 1)))
    return spots


def place_enemies(labels: list[str], physics: Physics = PHYSICS) -> list[EnemySpawn]:
    gap = physics.width / (len(labels) + 1)
    return [
        EnemySpawn(
            label=label,
            x=round((index + 1) * gap, 1),
            y=physics.enemy_radius + 24,
            speed=physics.enemy_base_speed + physics.enemy_speed_step * index,
            sway_frequency=round(physics.sway_frequency + physics.sway_frequency_step * index, 2),
            phase=float(index),
        )
        for index, label in enumerate(labels)
    ]


def build_layout(
    collectibles: list[str], enemies: list[str], seed: int, physics: Physics = PHYSICS
) -> Layout:
    """Place one pickup per collectible and one enemy per enemy label.

    Only the pickup jitter is random; the same seed always yields the same
    layout.
    """
    rng = random.Random(seed)
    return Layout(
        seed=seed,
        player=(physics.width / 2, physics.height - 50),
        pickups=place_pickups(collectibles, rng, physics),
        enemies=place_enemies(enemies, physics),
        physics=physics,
    )


def default_seed(world: WorldModel) -> int:
    """Stable seed for a world model, so identical briefs emit identical games."""
    return zlib.crc32(world.model_dump_json().encode("utf-8"))

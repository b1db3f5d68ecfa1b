"""Headless model of the emitted game's update loop.

`GameSimulation` runs the same state machine as the browser runtime
(playing → victory | game_over, both terminal) over the same layout and
physics, so a brief can be play-tested without a canvas. Each `step`
applies, in order: player movement, pickup collection, enemy movement and
collision.
"""

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass

from pydantic import BaseModel

from blueprint_forge.models import WorldModel

from .layout import Layout, build_layout, default_seed

logger = logging.getLogger(__name__)

PLAYING = "playing"
VICTORY = "victory"
GAME_OVER = "game_over"

KEY_BINDINGS = {
    "up": ("ArrowUp", "KeyW", "KeyZ"),
    "down": ("ArrowDown", "KeyS"),
    "left": ("ArrowLeft", "KeyA", "KeyQ"),
    "right": ("ArrowRight", "KeyD"),
}

FRAME = 1 / 60


@dataclass
class _Pickup:
    label: str
    x: float
    y: float
    collected: bool = False


@dataclass
class _Enemy:
    label: str
    base_x: float
    base_y: float
    speed: float
    sway_frequency: float
    phase: float
    x: float = 0.0
    y: float = 0.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _pressed(keys: set[str], direction: str) -> bool:
    return any(code in keys for code in KEY_BINDINGS[direction])


class GameSimulation:
    def __init__(self, layout: Layout) -> None:
        self.layout = layout
        self.physics = layout.physics
        self.reset()

    def reset(self) -> None:
        """Start a fresh run from the initial layout (the R key in the browser)."""
        self.time = 0.0
        self.player_x, self.player_y = self.layout.player
        self.pickups = [_Pickup(p.label, p.x, p.y) for p in self.layout.pickups]
        self.enemies = [
            _Enemy(e.label, e.x, e.y, e.speed, e.sway_frequency, e.phase, e.x, e.y)
            for e in self.layout.enemies
        ]
        # Nothing to collect means the objective is already met.
        self.state = VICTORY if not self.pickups else PLAYING

    @property
    def collected(self) -> int:
        return sum(1 for p in self.pickups if p.collected)

    @property
    def total(self) -> int:
        return len(self.pickups)

    def teleport(self, x: float, y: float) -> None:
        r = self.physics.player_radius
        self.player_x = _clamp(x, r, self.physics.width - r)
        self.player_y = _clamp(y, r, self.physics.height - r)

    def step(self, dt: float, keys: Iterable[str] = ()) -> str:
        """Advance the world by `dt` seconds and return the resulting state."""
        self.time += dt
        if self.state != GAME_OVER:
            self._move_player(dt, set(keys))
        if self.state == PLAYING:
            self._collect_pickups()
        self._move_enemies(dt)
        return self.state

    def _move_player(self, dt: float, keys: set[str]) -> None:
        vx = int(_pressed(keys, "right")) - int(_pressed(keys, "left"))
        vy = int(_pressed(keys, "down")) - int(_pressed(keys, "up"))
        length = math.hypot(vx, vy)
        if length == 0:
            return
        distance = self.physics.player_speed * dt / length
        self.teleport(self.player_x + vx * distance, self.player_y + vy * distance)

    def _collect_pickups(self) -> None:
        for pickup in self.pickups:
            if pickup.collected:
                continue
            if math.hypot(self.player_x - pickup.x, self.player_y - pickup.y) < self.physics.pickup_distance:
                pickup.collected = True
        if self.collected == self.total:
            self.state = VICTORY

    def _move_enemies(self, dt: float) -> None:
        if self.state == GAME_OVER:
            return
        p = self.physics
        r = p.enemy_radius
        direction = -p.retreat_factor if self.state == VICTORY else 1.0
        for enemy in self.enemies:
            dx = self.player_x - enemy.base_x
            dy = self.player_y - enemy.base_y
            dist = math.hypot(dx, dy) or 1.0
            ux, uy = dx / dist, dy / dist
            enemy.base_x = _clamp(enemy.base_x + ux * enemy.speed * direction * dt, r, p.width - r)
            enemy.base_y = _clamp(enemy.base_y + uy * enemy.speed * direction * dt, r, p.height - r)
            sway = math.sin(self.time * enemy.sway_frequency + enemy.phase) * p.sway_amplitude
            enemy.x = _clamp(enemy.base_x - uy * sway, r, p.width - r)
            enemy.y = _clamp(enemy.base_y + ux * sway, r, p.height - r)
            if self.state == PLAYING and (
                math.hypot(self.player_x - enemy.x, self.player_y - enemy.y) < p.collision_distance
            ):
                self.state = GAME_OVER


class PlaytestReport(BaseModel):
    state: str
    collected: int
    total: int
    enemies: int
    frames: int
    seed: int


def scripted_playthrough(layout: Layout, dt: float = FRAME) -> PlaytestReport:
    """Teleport the player onto every pickup in turn, one frame per pickup."""
    sim = GameSimulation(layout)
    frames = 0
    for pickup in layout.pickups:
        if sim.state != PLAYING:
            break
        sim.teleport(pickup.x, pickup.y)
        sim.step(dt)
        frames += 1
    report = PlaytestReport(
        state=sim.state,
        collected=sim.collected,
        total=sim.total,
        enemies=len(sim.enemies),
        frames=frames,
        seed=layout.seed,
    )
    logger.debug("playthrough seed=%d state=%s %d/%d", layout.seed, report.state, report.collected, report.total)
    return report


def playtest(world: WorldModel, seed: int | None = None) -> PlaytestReport:
    """Scripted playthrough of the game `emit_game_code(world, seed)` would emit."""
    if seed is None:
        seed = default_seed(world)
    return scripted_playthrough(build_layout(world.collectibles, world.enemies, seed))

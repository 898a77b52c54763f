"""The playing field: player, enemies, stars, their movement and collisions."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Callable, Optional

from ballgame.scoring import Score
from ballgame.states import EventQueue, GameOver, Input, Key

ENEMY_SIZE = 64.0
ENEMY_SPEED = 200.0
NUMBER_OF_ENEMIES = 4
ENEMY_SPAWN_TIME = 5.0

PLAYER_SIZE = 64.0
PLAYER_SPEED = 500.0

NUMBER_OF_STARS = 10
STAR_SIZE = 30.0
STAR_SPAWN_TIME = 1.0

PLAYER_SPRITE = "sprites/ball_blue_large.png"
ENEMY_SPRITE = "sprites/ball_red_large.png"
STAR_SPRITE = "sprites/star.png"
EXPLOSION_SOUND = "audio/explosionCrunch_000.ogg"
STAR_SOUND = "audio/laserLarge_000.ogg"

SoundPlayer = Callable[[str], None]


@dataclass(frozen=True)
class Vec2:
    """A two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vec2:
        """Unit vector in the same direction; a zero vector has none."""
        size = self.length()
        if size == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return Vec2(self.x / size, self.y / size)

    def distance(self, other: Vec2) -> float:
        return (self - other).length()


@dataclass
class Timer:
    """Counts elapsed seconds towards a duration, optionally repeating."""

    duration: float
    repeating: bool = True
    elapsed: float = 0.0
    finished: bool = False

    def tick(self, delta: float) -> int:
        """Advance by delta seconds; return how many times the timer completed."""
        if not self.repeating and self.finished:
            return 0
        self.elapsed += delta
        self.finished = False
        if self.elapsed < self.duration:
            return 0
        self.finished = True
        if not self.repeating:
            self.elapsed = self.duration
            return 1
        times = int(self.elapsed // self.duration)
        self.elapsed -= times * self.duration
        return times


@dataclass(frozen=True)
class Window:
    width: float = 1280.0
    height: float = 720.0

    @property
    def center(self) -> Vec2:
        return Vec2(self.width / 2.0, self.height / 2.0)


@dataclass
class Enemy:
    position: Vec2
    direction: Vec2
    sprite: str = ENEMY_SPRITE


@dataclass
class Star:
    position: Vec2
    sprite: str = STAR_SPRITE


@dataclass
class Player:
    position: Vec2
    sprite: str = PLAYER_SPRITE


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if value > high:
        return high
    return value


@dataclass
class World:
    """Everything that lives on the playing field."""

    window: Window = field(default_factory=Window)
    rng: random.Random = field(default_factory=random.Random)
    player: Optional[Player] = None
    enemies: list[Enemy] = field(default_factory=list)
    stars: list[Star] = field(default_factory=list)
    score: Optional[Score] = None
    enemy_spawn_timer: Timer = field(default_factory=lambda: Timer(ENEMY_SPAWN_TIME))
    star_spawn_timer: Timer = field(default_factory=lambda: Timer(STAR_SPAWN_TIME))

    def _random_position(self) -> Vec2:
        return Vec2(
            self.rng.random() * self.window.width,
            self.rng.random() * self.window.height,
        )

    def _bounds(self, size: float) -> tuple[float, float, float, float]:
        half = size / 2.0
        return half, self.window.width - half, half, self.window.height - half

    # Player

    def spawn_player(self) -> Player:
        self.player = Player(self.window.center)
        return self.player

    def despawn_player(self) -> None:
        self.player = None

    def player_movement(self, keys: Input, delta: float) -> None:
        """Move the player by the held arrow or WASD keys."""
        if self.player is None:
            return
        direction = Vec2()
        if keys.pressed(Key.LEFT) or keys.pressed(Key.A):
            direction += Vec2(-1.0, 0.0)
        if keys.pressed(Key.RIGHT) or keys.pressed(Key.D):
            direction += Vec2(1.0, 0.0)
        if keys.pressed(Key.UP) or keys.pressed(Key.W):
            direction += Vec2(0.0, 1.0)
        if keys.pressed(Key.DOWN) or keys.pressed(Key.S):
            direction += Vec2(0.0, -1.0)
        if direction.length() > 0.0:
            direction = direction.normalize()
        self.player.position += direction * (PLAYER_SPEED * delta)

    def confine_player_movement(self) -> None:
        if self.player is None:
            return
        x_min, x_max, y_min, y_max = self._bounds(PLAYER_SIZE)
        position = self.player.position
        self.player.position = Vec2(
            _clamp(position.x, x_min, x_max), _clamp(position.y, y_min, y_max)
        )

    def enemy_hit_player(
        self, events: EventQueue[GameOver], play_sound: SoundPlayer | None = None
    ) -> list[GameOver]:
        """End the game for every enemy touching the player; return the events sent."""
        if self.score is None:
            raise RuntimeError("score is not inserted")
        if self.player is None:
            return []
        sent = []
        reach = PLAYER_SIZE / 2.0 + ENEMY_SIZE / 2.0
        for enemy in self.enemies:
            if self.player.position.distance(enemy.position) < reach:
                print("Enemy hit player! Game Over!")
                if play_sound is not None:
                    play_sound(EXPLOSION_SOUND)
                event = GameOver(self.score.value)
                events.send(event)
                sent.append(event)
        if sent:
            self.player = None
        return sent

    def player_hit_star(self, play_sound: SoundPlayer | None = None) -> int:
        """Collect every star touching the player; return how many were collected."""
        if self.score is None:
            raise RuntimeError("score is not inserted")
        if self.player is None:
            return 0
        reach = PLAYER_SIZE / 2.0 + STAR_SIZE / 2.0
        remaining = []
        collected = 0
        for star in self.stars:
            if self.player.position.distance(star.position) < reach:
                print("Player hit star!")
                self.score.increment()
                if play_sound is not None:
                    play_sound(STAR_SOUND)
                collected += 1
            else:
                remaining.append(star)
        self.stars = remaining
        return collected

    # Enemies

    def _new_enemy(self) -> Enemy:
        position = self._random_position()
        direction = Vec2(self.rng.random(), self.rng.random()).normalize()
        enemy = Enemy(position, direction)
        self.enemies.append(enemy)
        return enemy

    def spawn_enemies(self) -> list[Enemy]:
        return [self._new_enemy() for _ in range(NUMBER_OF_ENEMIES)]

    def despawn_enemies(self) -> None:
        self.enemies.clear()

    def enemy_movement(self, delta: float) -> None:
        for enemy in self.enemies:
            enemy.position += enemy.direction * (ENEMY_SPEED * delta)

    def update_enemy_direction(self) -> None:
        """Reverse an enemy's direction on each axis where it left the field."""
        x_min, x_max, y_min, y_max = self._bounds(ENEMY_SIZE)
        for enemy in self.enemies:
            position = enemy.position
            dx, dy = enemy.direction.x, enemy.direction.y
            if position.x < x_min or position.x > x_max:
                dx = -dx
            if position.y < y_min or position.y > y_max:
                dy = -dy
            enemy.direction = Vec2(dx, dy)

    def confine_enemy_movement(self) -> None:
        x_min, x_max, y_min, y_max = self._bounds(ENEMY_SIZE)
        for enemy in self.enemies:
            position = enemy.position
            enemy.position = Vec2(
                _clamp(position.x, x_min, x_max), _clamp(position.y, y_min, y_max)
            )

    def tick_enemy_spawn_timer(self, delta: float) -> None:
        self.enemy_spawn_timer.tick(delta)

    def spawn_enemies_over_time(self) -> Optional[Enemy]:
        if self.enemy_spawn_timer.finished:
            return self._new_enemy()
        return None

    # Stars

    def _new_star(self) -> Star:
        star = Star(self._random_position())
        self.stars.append(star)
        return star

    def spawn_stars(self) -> list[Star]:
        return [self._new_star() for _ in range(NUMBER_OF_STARS)]

    def despawn_stars(self) -> None:
        self.stars.clear()

    def tick_star_spawn_timer(self, delta: float) -> None:
        self.star_spawn_timer.tick(delta)

    def spawn_stars_over_time(self) -> Optional[Star]:
        if self.star_spawn_timer.finished:
            return self._new_star()
        return None

    # Score

    def insert_score(self) -> Score:
        self.score = Score()
        return self.score

    def remove_score(self) -> None:
        self.score = None
"""
physics_core.py: The kinematic functions, obstacle generation and collision logic.
"""

import random
from dataclasses import dataclass, field

from .constants import (
    GRAVITY_ACCEL, MAX_FALL_VELOCITY, JUMP_IMPULSE, HITBOX_RANGE,
    GAP_Y_MIN, GAP_Y_MAX, GAP_BASE_SIZE, GAP_MIN_SIZE, GAP_SHRINK_EVERY,
    OBSTACLE_SPEED_MIN, OBSTACLE_SPEED_MAX, OBSTACLE_SPEED_RAMP
)
from .data_models import Player, Obstacle


@dataclass
class PhysicsCore:
    """
    Player kinematics and obstacle behaviour.

    The random source only needs ``randrange`` and ``uniform``, so a seeded
    ``random.Random`` or a fixed stand-in can be passed in.
    """

    rng: random.Random = field(default_factory=random.Random)

    def apply_gravity_and_movement(self, player: Player):
        """
        Advances the player by one physics step.
        Gravity accelerates up to the fall limit; upward velocity is never
        clamped.
        """
        if player.velocity < MAX_FALL_VELOCITY:
            player.velocity = min(player.velocity + GRAVITY_ACCEL, MAX_FALL_VELOCITY)

        player.y += int(player.velocity)
        player.x += 1

        if player.y < 0:
            player.y = 0

    def flap(self, player: Player):
        """Overrides the current velocity with the upward impulse."""
        player.velocity = JUMP_IMPULSE

    def new_obstacle(self, x: int, score: int) -> Obstacle:
        """Creates an obstacle at x, harder the higher the score."""
        gap_y = self.rng.randrange(GAP_Y_MIN, GAP_Y_MAX)
        size = max(GAP_MIN_SIZE, GAP_BASE_SIZE - score // GAP_SHRINK_EVERY)
        x_velocity = (-self.rng.uniform(OBSTACLE_SPEED_MIN, OBSTACLE_SPEED_MAX)
                      - score * OBSTACLE_SPEED_RAMP)
        return Obstacle(x=x, gap_y=gap_y, size=size, x_velocity=x_velocity)

    def update_obstacle(self, obstacle: Obstacle):
        obstacle.x += int(obstacle.x_velocity)

    def hit_obstacle(self, obstacle: Obstacle, player: Player) -> bool:
        """True when the player touches the wall above or below the gap."""
        does_x_match = abs(player.x - obstacle.x) < HITBOX_RANGE

        player_above_gap = player.y < obstacle.gap_y - obstacle.half_size
        player_below_gap = player.y > obstacle.gap_y + obstacle.half_size

        return does_x_match and (player_above_gap or player_below_gap)

"""
game_state.py: The single game-state object driven once per frame by the backend.
"""

from typing import List
from dataclasses import dataclass, field

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FRAME_DURATION,
    SPAWN_INTERVAL_START, SPAWN_INTERVAL_MIN, SPAWN_INTERVAL_STEP,
    BLACK, YELLOW, RED, NAVY, PLAYER_GLYPH, OBSTACLE_GLYPH
)
from .console import Console
from .data_models import GameMode, Key, Player, Obstacle
from .physics_core import PhysicsCore


@dataclass
class GameState(PhysicsCore):
    """
    Owns the player, the obstacles, the score and the timers.
    Inherits kinematics and collision from PhysicsCore.
    """
    player: Player = field(default_factory=Player)
    frame_time: float = 0.0
    obstacles: List[Obstacle] = field(default_factory=list)
    score: int = 0
    mode: GameMode = GameMode.MENU
    obstacle_timer: float = 0.0
    obstacle_interval: float = SPAWN_INTERVAL_START

    def tick(self, ctx: Console):
        """Runs the routine for the current mode against this frame's console."""
        if self.mode is GameMode.MENU:
            self.main_menu(ctx)
        elif self.mode is GameMode.END:
            self.dead(ctx)
        else:
            self.play(ctx)

    def restart(self):
        self.player = Player()
        self.frame_time = 0.0
        self.obstacles.clear()
        self.mode = GameMode.PLAYING
        self.score = 0
        self.obstacle_interval = SPAWN_INTERVAL_START
        # Primed so the first playing frame can spawn straight away
        self.obstacle_timer = SPAWN_INTERVAL_START

    # -------- Mode handlers --------

    def main_menu(self, ctx: Console):
        ctx.cls()
        ctx.print_centered(5, "Welcome to Flappy Dragon")
        ctx.print_centered(8, "(P) Play Game")
        ctx.print_centered(9, "(Q) Quit Game")
        self._handle_menu_key(ctx)

    def dead(self, ctx: Console):
        ctx.cls()
        ctx.print_centered(5, "You are Dead")
        ctx.print_centered(6, f"You earned {self.score} points")
        ctx.print_centered(8, "(P) Play Again")
        ctx.print_centered(9, "(Q) Quit Game")
        self._handle_menu_key(ctx)

    def play(self, ctx: Console):
        ctx.cls_bg(NAVY)
        self.frame_time += ctx.frame_time_ms
        self.obstacle_timer += ctx.frame_time_ms

        # 1. Physics step, throttled to FRAME_DURATION
        if self.frame_time > FRAME_DURATION:
            self.frame_time = 0.0
            self.apply_gravity_and_movement(self.player)

        if ctx.key is Key.SPACE:
            self.flap(self.player)

        self._render_player(ctx)
        ctx.print(0, 0, "Press SPACE to flap.")
        ctx.print(0, 1, f"Score: {self.score}")

        # 2. Obstacles
        self.spawn_obstacles()
        self.step_obstacles(ctx)

        # 3. Score
        self.update_score()

    def _handle_menu_key(self, ctx: Console):
        if ctx.key is Key.P:
            self.restart()
        elif ctx.key is Key.Q:
            ctx.quitting = True

    # -------- Obstacle lifecycle --------

    def spawn_obstacles(self):
        if self.obstacle_timer <= self.obstacle_interval:
            return

        last_obstacle_x = self.obstacles[-1].x if self.obstacles else self.player.x
        if last_obstacle_x < self.player.x + SCREEN_WIDTH // 2:
            self.obstacles.append(
                self.new_obstacle(self.player.x + SCREEN_WIDTH, self.score))
        # Always pushed as well, even when the one above was just added
        self.obstacles.append(
            self.new_obstacle(last_obstacle_x + SCREEN_WIDTH, self.score))

        self.obstacle_timer = 0.0
        self.obstacle_interval = max(
            SPAWN_INTERVAL_MIN, self.obstacle_interval - SPAWN_INTERVAL_STEP)

    def step_obstacles(self, ctx: Console):
        player_x = self.player.x
        self.obstacles = [o for o in self.obstacles if o.x > player_x - SCREEN_WIDTH]

        for obstacle in self.obstacles:
            self._render_obstacle(ctx, obstacle)
            self.update_obstacle(obstacle)

            if self.hit_obstacle(obstacle, self.player) or self.player.y > SCREEN_HEIGHT:
                # Several obstacles can hit in one frame; report the death once
                if self.mode is not GameMode.END:
                    print(f"Player died with {self.score} points.")
                self.mode = GameMode.END

    def update_score(self):
        """Credits the earliest obstacle once the player is past it."""
        if not self.obstacles:
            return
        first_obstacle = self.obstacles[0]
        if self.player.x > first_obstacle.x + first_obstacle.half_size:
            self.score += 1
            self.obstacles.pop(0)

    # -------- Rendering --------

    def _render_player(self, ctx: Console):
        ctx.set(0, self.player.y, YELLOW, BLACK, PLAYER_GLYPH)

    def _render_obstacle(self, ctx: Console, obstacle: Obstacle):
        screen_x = obstacle.x - self.player.x
        if screen_x < -1:
            return

        for y in range(0, obstacle.gap_y - obstacle.half_size):
            ctx.set(screen_x, y, RED, BLACK, OBSTACLE_GLYPH)
        for y in range(obstacle.gap_y + obstacle.half_size, SCREEN_HEIGHT):
            ctx.set(screen_x, y, RED, BLACK, OBSTACLE_GLYPH)

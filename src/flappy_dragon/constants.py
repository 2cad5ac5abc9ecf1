"""
constants.py: Centralized configuration for the game world, physics and display.
"""

# -------- Display Config --------
WINDOW_TITLE = "Flappy Dragon"
SCREEN_WIDTH = 80               # Console width (cells)
SCREEN_HEIGHT = 50              # Console height (cells)
DEFAULT_CELL_SIZE = 12          # Pixel size of one cell
RENDER_FPS = 30                 # Target frames per second of the window loop

# Time synchronization
FRAME_DURATION = 100.0          # Milliseconds between physics steps

# -------- Player Config --------
PLAYER_START_X = 5
PLAYER_START_Y = 25

# -------- Physics Config (cells / physics step) --------
GRAVITY_ACCEL = 0.8             # Velocity gained per physics step
MAX_FALL_VELOCITY = 2.0         # Gravity stops accelerating past this
JUMP_IMPULSE = -2.7             # Velocity set instantly by a flap
HITBOX_RANGE = 2                # Horizontal distance that counts as touching

# -------- Obstacle Config --------
GAP_Y_MIN = 10                  # Gap centre range, upper bound excluded
GAP_Y_MAX = 40
GAP_BASE_SIZE = 20
GAP_MIN_SIZE = 2
GAP_SHRINK_EVERY = 5            # Gap loses one cell every N points
OBSTACLE_SPEED_MIN = 1.0        # Leftward speed range (cells / frame)
OBSTACLE_SPEED_MAX = 3.0
OBSTACLE_SPEED_RAMP = 0.1       # Extra speed per point scored

# Spawn scheduling (milliseconds)
SPAWN_INTERVAL_START = 200.0
SPAWN_INTERVAL_MIN = 150.0
SPAWN_INTERVAL_STEP = 1.0

# -------- Colours (RGB) & Glyphs --------
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
RED = (255, 0, 0)
NAVY = (0, 0, 128)

PLAYER_GLYPH = "@"
OBSTACLE_GLYPH = "|"

"""
constants.py: Centralized configuration for the simulation and the window.
"""

# -------- Game World Config --------
SCREEN_WIDTH = 480              # Default surface size, overridden on resize
SCREEN_HEIGHT = 640
RENDER_FPS = 60                 # Host display refresh target

# -------- Bird Config --------
BIRD_X = 50                     # Fixed bird X position (centre)
BIRD_START_Y = 150.0
BIRD_WIDTH = 40                 # Bounding box, centred on the bird
BIRD_HEIGHT = 30

# -------- Pipe Config --------
PIPE_WIDTH = 60
MIN_TOP_HEIGHT = 50             # Smallest possible top segment

# -------- Physics Config (Pixels / Second / Second) --------
BASE_GRAVITY = 2400.0           # Scaled by the level's gravity multiplier
FLAP_IMPULSE = -360.0           # Velocity set on a flap (pixels/s)
TERMINAL_VELOCITY = 700.0       # Max downward speed (pixels/s)
MAX_UPWARD_VELOCITY = -500.0    # Max upward speed (pixels/s)

# Tilt is cosmetic only
MAX_TILT_DEGREES = 45.0
TILT_SMOOTHING_RATE = 8.0       # Per second

# -------- Timing Config --------
MIN_DELTA_TIME = 1e-4           # Floor for clock anomalies (seconds)
FLAP_ANIM_DURATION = 0.15       # Wing flap visual (seconds)

# -------- Colours --------
SKY_COLOR = (112, 197, 206)
PIPE_COLOR = (46, 204, 113)
BIRD_COLOR = (255, 215, 0)
BEAK_COLOR = (255, 165, 0)
WING_COLOR = (224, 122, 0)
EYE_COLOR = (0, 0, 0)
TEXT_COLOR = (0, 0, 0)
OVERLAY_TEXT_COLOR = (255, 255, 255)

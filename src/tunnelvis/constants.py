# --- Configuration Constants ---
DEFAULT_FPS = 60  # Step sizes below are tuned per display refresh
DEFAULT_RESOLUTION = (1280, 720)
DEFAULT_DPI = 1.0
DEFAULT_FOCAL_SIZE = (240, 240)  # Badge the tunnel converges on
DEFAULT_DURATION = 10  # seconds

# Discs
TOTAL_DISCS = 20
DISC_STEP = 0.001  # Progress added per frame

# Radial lines
TOTAL_LINES = 100
LINE_ROTATION_SPEED = 0.0001  # Radians per millisecond of clock time

# Particle pool
TOTAL_PARTICLES = 500
PARTICLE_SPEED_MIN = 0.005
PARTICLE_SPEED_RANGE = 0.005
PARTICLE_TRAIL_MIN = 0.01
PARTICLE_TRAIL_RANGE = 0.1
PARTICLE_ALPHA_MIN = 0.05
PARTICLE_ALPHA_RANGE = 0.15

# Colors (BGR format for OpenCV)
BG_COLOR = (10, 5, 5)
DISC_COLOR = (68, 68, 68)  # #444
LINE_COLOR = (68, 68, 68)
LINE_ALPHA = 0x99 / 0xFF  # #4449
PARTICLE_COLOR = (255, 255, 255)
STROKE_WIDTH = 2

# Sub-pixel precision for OpenCV drawing calls (fractional bits)
DRAW_SHIFT = 4

# Session defaults
TIME_BUDGET = 30          # seconds per level
MATCH_UNIT_VALUE = 10     # points per matched pair
MATCH_GOAL = 10           # pairs needed to clear a level
BONUS_THRESHOLD = 10      # seconds left above this become bonus points
LEVEL_TIME_EXTENSION = 0  # extra seconds granted on each level advance

# Grid sizing
START_TILE_COUNT = 16
TILE_COUNT_STEP = 2
MAX_TILE_COUNT = 36

# Delay before a mismatched pair turns face down again.
MISMATCH_REVEAL_DELAY = 0.8

# Timer driver resolution.
CLOCK_PERIOD = 1.0

# Canonical tile colors, name -> RGB.
DEFAULT_PALETTE = {
    'red':        (214, 48, 49),
    'orange':     (225, 112, 40),
    'amber':      (253, 203, 110),
    'yellow':     (240, 220, 60),
    'lime':       (160, 214, 60),
    'green':      (39, 174, 96),
    'teal':       (0, 150, 136),
    'cyan':       (72, 201, 220),
    'sky':        (116, 185, 255),
    'blue':       (9, 132, 227),
    'indigo':     (72, 52, 212),
    'violet':     (142, 68, 173),
    'purple':     (108, 52, 131),
    'magenta':    (232, 67, 147),
    'pink':       (253, 121, 168),
    'brown':      (121, 85, 72),
    'tan':        (210, 180, 140),
    'olive':      (128, 128, 0),
    'maroon':     (128, 0, 32),
    'navy':       (25, 42, 86),
    'grey':       (150, 150, 150),
    'white':      (245, 245, 245),
    'mint':       (170, 240, 209),
    'coral':      (255, 127, 80),
}

# Front-end geometry
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
HUD_HEIGHT = 72
BOTTOM_MARGIN = 20
BOARD_MAX_WIDTH_PCT = 0.90
BOARD_MAX_HEIGHT_PCT = 0.95
MIN_TILE_SIZE = 20
TILE_PADDING = 4

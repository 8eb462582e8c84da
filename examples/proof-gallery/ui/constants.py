"""Layout constants and color definitions."""

# Timing
FPS = 60
TPS = 60

# Layout dimensions
CANVAS_W = 900
CANVAS_H = 640
SIDEBAR_W = 240
STATUS_H = 36

SCREEN_W = CANVAS_W + SIDEBAR_W
SCREEN_H = CANVAS_H + STATUS_H

MIN_CANVAS_W = 480
MIN_CANVAS_H = 360

# Geometry
ARC_SEGMENTS = 64

# Parameter nudges: key -> (parameter, delta)
PARAM_STEP = {
    "omega": 0.1,
    "n": 1,
    "a": 0.5,
}

# Colors
CANVAS_BG = (249, 249, 255)
SIDEBAR_BG = (25, 25, 38)
SIDEBAR_BORDER = (50, 50, 70)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
LABEL_COLOR = (180, 180, 200)
ACTIVE_COLOR = (100, 255, 100)
HOVER_OUTLINE = (255, 255, 255)

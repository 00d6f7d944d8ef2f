# Fixed, ordered color superset. The palette always holds a prefix of it.
BASE_COLORS = ("red", "blue", "green", "yellow")
EXTRA_COLORS = ("purple", "orange", "pink", "cyan")
COLOR_SUPERSET = BASE_COLORS + EXTRA_COLORS

MIN_COLORS = 2
MAX_COLORS = len(COLOR_SUPERSET)
DEFAULT_NUM_COLORS = len(BASE_COLORS)

# RGB values used by the presentation shell only.
COLOR_RGB = {
    "red": (231, 76, 60),
    "blue": (52, 152, 219),
    "green": (46, 204, 113),
    "yellow": (241, 196, 15),
    "purple": (155, 89, 182),
    "orange": (230, 126, 34),
    "pink": (255, 121, 198),
    "cyan": (26, 188, 156),
}

# Pointer distance (pixels) a press on an occupied slot must travel before it
# turns into a slot drag; shorter press/release pairs are clicks.
DRAG_START_THRESHOLD = 6.0

# Layout geometry (pixels). Arcade's origin is bottom-left.
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
SLOT_SIZE = 72
SLOT_GAP = 12
BOTTLE_PADDING = 10
POOL_BOTTLE_SIZE = 56
POOL_GAP = 14
POOL_ROW_Y = 430
SLOT_ROW_Y = 260
HISTORY_ROW_HEIGHT = 22
HISTORY_TOP_Y = 200

# Two taps on the same occupied slot within this many seconds clear it.
DOUBLE_TAP_INTERVAL = 0.35

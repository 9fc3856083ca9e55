"""Layout constants and color definitions."""

# Timing
FPS = 60

# Layout dimensions
MARGIN = 20
PANEL_W = 200
STATUS_H = 36
BUTTON_H = 56
TOKEN_SIZE = 36
TOKEN_SQUEEZED = 22

# Victory presentation
CONFETTI_PER_BURST = 100
CONFETTI_BURSTS_MS = (0, 500, 1000)
VICTORY_DELAY_MS = 500

# Colors
BG_COLOR = (24, 22, 34)
MACHINE_BG = (40, 38, 60)
TOP_BG = (52, 50, 78)
BOTTOM_BG = (60, 44, 70)
CHUTE_COLOR = (90, 70, 100)
PANEL_BG = (30, 28, 44)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (220, 215, 230)
TEXT_DIM = (130, 125, 150)
LABEL_COLOR = (250, 206, 104)
SHADOW_COLOR = (20, 16, 30)

# Claw part colors
RAIL_COLOR = (90, 156, 181)
JOINT_COLOR = (250, 172, 104)
ARM_COLOR = (200, 200, 210)
CLAW_OPEN_COLOR = (120, 220, 140)
CLAW_MISSED_COLOR = (250, 104, 104)

# Buttons
BUTTON_IDLE = (70, 66, 96)
BUTTON_ACTIVE = (250, 172, 104)
BUTTON_HELD = (250, 206, 104)

# Toy kind -> color
TOY_COLORS: dict[str, tuple[int, int, int]] = {
    "bear": (176, 120, 80),
    "bunny": (240, 220, 230),
    "golem": (140, 150, 130),
    "cucumber": (110, 190, 90),
    "penguin": (60, 70, 90),
    "robot": (160, 170, 200),
    "roses": (220, 70, 100),
}

CONFETTI_COLORS = [(250, 206, 104), (90, 156, 181), (250, 104, 104), (250, 172, 104)]

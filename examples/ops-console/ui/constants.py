"""Layout constants and color definitions."""

# Layout dimensions
VIEW_W = 640
VIEW_H = 480
PANEL_W = 320
STATUS_H = 32

SCREEN_W = VIEW_W + PANEL_W
SCREEN_H = VIEW_H + STATUS_H

CHART_H = 110
CHART_PAD = 8

# Projection
CAMERA_DISTANCE = 14.0
CAMERA_HEIGHT = 2.5
FOCAL = 420.0
NEAR = 0.5

# Colors
BG_COLOR = (20, 24, 33)
VIEW_BG = (16, 19, 27)
PANEL_BG = (26, 31, 44)
STATUS_BG = (35, 40, 55)
BORDER = (50, 56, 74)
TEXT_COLOR = (205, 210, 220)
TEXT_DIM = (120, 126, 144)
CHART_LINE = (0, 163, 255)
CHART_GRID = (40, 46, 62)

# Scene name → series preset shown beside it
SCENE_PRESETS: dict[str, str] = {
    "factory": "dashboard",
    "testing_chamber": "testing",
    "engine_bay": "engine_bay",
    "robotic_arm": "robotic_arm",
    "network": "alerts",
    "neural": "ai_insights",
    "server_room": "server_room",
    "warehouse": "warehouse",
    "aircraft": "aircraft",
}

SCENE_ORDER = list(SCENE_PRESETS)

HEALTH_ORDER = ["optimal", "good", "warning", "critical"]

DEPLOY_COUNTDOWN = 5
TEST_RUN_SECONDS = 3.0


def rgb(hex_color: str) -> tuple[int, int, int]:
    """'#RRGGBB' → (r, g, b)."""
    value = hex_color.lstrip("#")
    return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))

"""Layout, color, and rendering constants."""
from __future__ import annotations

FPS = 60
STATUS_H = 32
MAX_SCREEN_W = 1200
MAX_SCREEN_H = 720

# Cell colors
COLOR_EMPTY = (235, 238, 245)
COLOR_WALL = (34, 41, 60)
COLOR_START = (60, 180, 90)
COLOR_FINISH = (210, 60, 70)
COLOR_VISITED = (90, 170, 220)
COLOR_PATH = (250, 215, 80)
COLOR_GRID_LINE = (180, 190, 205)

# UI colors
COLOR_BG = (20, 20, 30)
COLOR_STATUS_BG = (30, 30, 40)
COLOR_TEXT = (200, 200, 200)
COLOR_OK = (100, 255, 100)
COLOR_WARN = (255, 180, 80)
COLOR_ERROR = (255, 80, 80)


def compute_layout(rows: int, cols: int) -> dict[str, int]:
    """Pick a tile size that fits the grid inside the max window."""
    tile = max(8, min(MAX_SCREEN_W // cols, (MAX_SCREEN_H - STATUS_H) // rows, 40))
    grid_w = cols * tile
    grid_h = rows * tile
    return {
        "tile_size": tile,
        "grid_w": grid_w,
        "grid_h": grid_h,
        "screen_w": grid_w,
        "screen_h": grid_h + STATUS_H,
    }

"""Board and layout constants shared by the renderer and the UI."""

from enum import Enum


class Board(Enum):
    """Supported display targets."""

    WAVESHARE_AMOLED_2_06 = "waveshare-amoled-2.06"
    QEMU = "qemu"


BOARD = Board.WAVESHARE_AMOLED_2_06

if BOARD is Board.QEMU:
    # Same aspect ratio as the hardware panel, reduced to fit internal RAM.
    SCREEN_WIDTH = 198
    SCREEN_HEIGHT = 240
    UI_SCALE = 1
    FONT_SCALE = 1
    ROUNDED_EDGE_INSET_H = 0
    ROUNDED_EDGE_INSET_TOP = 0
else:
    # 2.06" AMOLED, 410x502, rounded corners: content keeps an inset.
    SCREEN_WIDTH = 410
    SCREEN_HEIGHT = 502
    UI_SCALE = 2
    FONT_SCALE = 4
    ROUNDED_EDGE_INSET_H = 28
    ROUNDED_EDGE_INSET_TOP = 24

# 5x7 base font scaled by FONT_SCALE; layout scaled by UI_SCALE.
FONT_CHAR_W = 5 * FONT_SCALE
FONT_CHAR_H = 7 * FONT_SCALE
FONT_STRIDE = 6 * FONT_SCALE
STATUS_BAR_H = 22 * UI_SCALE
STATUS_BAR_TOP = ROUNDED_EDGE_INSET_TOP
MENU_ROW_H = 36 * UI_SCALE
MENU_ROW_PAD = 6 * UI_SCALE
MENU_MARGIN = 12 * UI_SCALE + ROUNDED_EDGE_INSET_H
CONTENT_WIDTH = SCREEN_WIDTH - 2 * ROUNDED_EDGE_INSET_H
BOTTOM_BAR_H = FONT_CHAR_H + 10 * UI_SCALE
BOTTOM_BAR_GAP = 10 * UI_SCALE
BOTTOM_BAR_MARGIN = MENU_MARGIN

TARGET_FPS_IDLE = 30
TARGET_FPS_ACTIVE = 60
"""Top-level frame composition: cutscene, base screen, and the long-press menu."""

from collections.abc import Callable
from enum import IntEnum

from . import config, draw
from .cutscene import CutsceneId

MENU_OVERLAY_COLOR = 0x3186
MENU_ROW_BG_COLOR = 0x2104
MENU_TEXT_COLOR = 0xFFFF
CUTSCENE_BG_COLOR = 0x0000
CUTSCENE_BOX_COLOR = 0x2104

_S = config.UI_SCALE
_W = config.SCREEN_WIDTH
_H = config.SCREEN_HEIGHT

MENU_TITLE_Y = config.STATUS_BAR_TOP + 12 * _S
MENU_CRAFT_TOP_Y = config.STATUS_BAR_TOP + 40 * _S
MENU_CRAFT_BOT_Y = MENU_CRAFT_TOP_Y + config.MENU_ROW_H
MENU_EQUIP_TOP_Y = MENU_CRAFT_BOT_Y + config.MENU_ROW_PAD
MENU_EQUIP_BOT_Y = MENU_EQUIP_TOP_Y + config.MENU_ROW_H
MENU_NAME_TOP_Y = MENU_EQUIP_BOT_Y + config.MENU_ROW_PAD
MENU_NAME_BOT_Y = MENU_NAME_TOP_Y + config.MENU_ROW_H
MENU_LORE_TOP_Y = MENU_NAME_BOT_Y + config.MENU_ROW_PAD
MENU_LORE_BOT_Y = MENU_LORE_TOP_Y + config.MENU_ROW_H
LORE_BACK_TOP_Y = config.STATUS_BAR_TOP + 40 * _S
LORE_BACK_BOT_Y = LORE_BACK_TOP_Y + config.MENU_ROW_H
LORE_EVOLUTION_TOP_Y = LORE_BACK_BOT_Y + config.MENU_ROW_PAD
LORE_EVOLUTION_BOT_Y = LORE_EVOLUTION_TOP_Y + config.MENU_ROW_H
LORE_AETHERON_TOP_Y = LORE_EVOLUTION_BOT_Y + config.MENU_ROW_PAD
LORE_AETHERON_BOT_Y = LORE_AETHERON_TOP_Y + config.MENU_ROW_H
LORE_PIXEL_TOP_Y = LORE_AETHERON_BOT_Y + config.MENU_ROW_PAD
LORE_PIXEL_BOT_Y = LORE_PIXEL_TOP_Y + config.MENU_ROW_H
_ROW_TEXT_OFFSET = config.MENU_ROW_H // 2 - config.FONT_CHAR_H // 2
MENU_FOOTER_Y = _H - config.BOTTOM_BAR_H - 8 * _S - config.FONT_CHAR_H
CUTSCENE_TAP_Y = _H - config.BOTTOM_BAR_H - 6 * _S - config.FONT_CHAR_H

NAME_MAX_CHARS = 16


class LayerAction(IntEnum):
    """Outcome of a tap on the open menu."""

    CYCLED = 0
    CRAFT = 1
    PLAY_CUTSCENE = 2
    OPEN_LORE = 3
    CLOSE_LORE = 4
    PLAY_AETHERON = 5
    PLAY_PIXEL = 6


# (cutscene, row top, row bottom, label, width in characters used for centring, action)
_LORE_ROWS = (
    (CutsceneId.EVOLUTION, LORE_EVOLUTION_TOP_Y, LORE_EVOLUTION_BOT_Y,
     "EVOLUTION", 9, LayerAction.PLAY_CUTSCENE),
    (CutsceneId.AETHERON_INTRO, LORE_AETHERON_TOP_Y, LORE_AETHERON_BOT_Y,
     "AETHERON", 8, LayerAction.PLAY_AETHERON),
    (CutsceneId.PIXEL_MODE, LORE_PIXEL_TOP_Y, LORE_PIXEL_BOT_Y,
     "PIXEL MODE", 10, LayerAction.PLAY_PIXEL),
)


def _tdiv(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _centered(fb, text: str, y: int, chars: int) -> None:
    x = _W // 2 - (chars * config.FONT_STRIDE) // 2
    draw.draw_string(fb, x, y, text, MENU_TEXT_COLOR)


def _row_bg(fb, top: int) -> None:
    draw.draw_rect(
        fb,
        config.MENU_MARGIN,
        top - config.MENU_ROW_PAD,
        _W - 2 * config.MENU_MARGIN,
        config.MENU_ROW_H + 2 * config.MENU_ROW_PAD,
        MENU_ROW_BG_COLOR,
    )


def _render_cutscene(fb, game) -> None:
    draw.draw_rect(fb, 0, 0, _W, _H, CUTSCENE_BG_COLOR)
    line = game.cutscenes.current_line()
    line_w = draw.string_width(line)
    box_pad = 16 * _S
    box_w = min(line_w + box_pad * 2, _W - box_pad)
    box_h = config.FONT_CHAR_H + 4 * _S + box_pad
    box_x = max(_tdiv(_W - box_w, 2), config.MENU_MARGIN)
    box_y = _H // 2 - box_h // 2 - 4 * _S
    draw.draw_rect(fb, box_x, box_y, box_w, box_h, CUTSCENE_BOX_COLOR)
    draw.draw_rect(fb, box_x, box_y, box_w, _S, MENU_TEXT_COLOR)
    draw.draw_rect(fb, box_x, box_y + box_h - _S, box_w, _S, MENU_TEXT_COLOR)
    tx = max(_tdiv(_W - line_w, 2), config.MENU_MARGIN)
    draw.draw_string(fb, tx, box_y + box_pad // 2, line, MENU_TEXT_COLOR)
    _centered(fb, "TAP", CUTSCENE_TAP_Y, 3)


def _render_lore_menu(fb, game) -> None:
    _row_bg(fb, LORE_BACK_TOP_Y)
    _centered(fb, "BACK", LORE_BACK_TOP_Y + (config.MENU_ROW_H - config.FONT_CHAR_H) // 2, 4)
    for cutscene_id, top, _bottom, label, chars, _action in _LORE_ROWS:
        if game.cutscenes.is_unlocked(cutscene_id):
            _row_bg(fb, top)
            _centered(fb, label, top + (config.MENU_ROW_H - config.FONT_CHAR_H) // 2, chars)


def _render_main_menu(fb, game) -> None:
    _row_bg(fb, MENU_CRAFT_TOP_Y)
    craft_y = MENU_CRAFT_TOP_Y + (config.MENU_ROW_H - config.FONT_CHAR_H) // 2
    if game.aura.crafted:
        _centered(fb, "AURA CALM", craft_y, 9)
    elif game.aura.can_craft(game.creature.xp):
        _centered(fb, "CRAFT AURA 200", craft_y, 14)

    _row_bg(fb, MENU_EQUIP_TOP_Y)
    _centered(fb, "EQUIP", MENU_EQUIP_TOP_Y + _ROW_TEXT_OFFSET, 5)

    _row_bg(fb, MENU_NAME_TOP_Y)
    equipped = game.inventory.equipped
    accessory = game.inventory.get_def(equipped)
    if equipped == 0:
        name = "NONE"
    else:
        name = accessory.name if accessory is not None else "???"
    _centered(fb, name, MENU_NAME_TOP_Y + _ROW_TEXT_OFFSET, min(len(name), NAME_MAX_CHARS))

    _row_bg(fb, MENU_LORE_TOP_Y)
    _centered(fb, "LORE", MENU_LORE_TOP_Y + _ROW_TEXT_OFFSET, 4)
    draw.draw_string(fb, config.MENU_MARGIN, MENU_FOOTER_Y, "L R", MENU_TEXT_COLOR)
    _centered(fb, "LONG PRESS CLOSE", MENU_FOOTER_Y, 15)


def render_layers(fb, game, menu_open: bool, time_ms: int, lore_menu_open: bool,
                  base_screen: Callable[[object, int], None] | None = None) -> None:
    """Compose one frame.

    A playing cutscene takes the whole screen. Otherwise ``base_screen``
    draws the current UI screen and the menu is laid over it when open.
    """
    if game.cutscenes.active:
        _render_cutscene(fb, game)
        return

    if base_screen is not None:
        base_screen(fb, time_ms)

    if not menu_open:
        return
    draw.draw_rect(fb, 0, 0, _W, _H, MENU_OVERLAY_COLOR)
    _centered(fb, "MENU", MENU_TITLE_Y, 4)
    if lore_menu_open:
        _render_lore_menu(fb, game)
    else:
        _render_main_menu(fb, game)


def handle_menu_touch(game, touch_x: int, touch_y: int, screen_width: int,
                      screen_height: int, lore_menu_open: bool) -> LayerAction:
    """Interpret a tap on the open menu.

    A tap outside the lore and craft rows of the main menu cycles the worn
    accessory: backward on the left half, forward on the right half.
    """
    if lore_menu_open:
        if LORE_BACK_TOP_Y <= touch_y <= LORE_BACK_BOT_Y:
            return LayerAction.CLOSE_LORE
        for cutscene_id, top, bottom, _label, _chars, action in _LORE_ROWS:
            if top <= touch_y <= bottom and game.cutscenes.is_unlocked(cutscene_id):
                return action
        return LayerAction.CYCLED

    pad = config.MENU_ROW_PAD
    if MENU_LORE_TOP_Y - pad <= touch_y <= MENU_LORE_BOT_Y + pad:
        return LayerAction.OPEN_LORE
    if (MENU_CRAFT_TOP_Y - pad <= touch_y <= MENU_CRAFT_BOT_Y + pad
            and game.aura.can_craft(game.creature.xp)):
        return LayerAction.CRAFT

    inventory = game.inventory
    current = inventory.equipped
    if touch_x < screen_width // 2:
        next_id = inventory.prev_unlocked(current)
    else:
        next_id = inventory.next_unlocked(current)
    inventory.equip(next_id)
    return LayerAction.CYCLED
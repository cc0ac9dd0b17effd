"""The UI shell's screens: home, quests, inventory, crafting and lore."""

from . import config, draw
from .cutscene import CutsceneId

_S = config.UI_SCALE
_W = config.SCREEN_WIDTH
_H = config.SCREEN_HEIGHT
_STRIDE = config.FONT_STRIDE

TIME_COLOR = 0xAD55
BATTERY_COLOR = 0xAD55
QUEST_COLOR = 0x07E0
HINT_COLOR = 0x528A
SEPARATOR_COLOR = 0x3186
TEXT_COLOR = 0xFFFF
PANEL_BG_COLOR = 0x2104
PANEL_BORDER_COLOR = 0x528A
NAV_BG_COLOR = 0x2945
NAV_TEXT_COLOR = 0xAD55
NAV_OUTLINE_COLOR = 0x528A

QUEST_TITLE_COLOR = 0x07E0
INVENTORY_TITLE_COLOR = 0xFEC0
CRAFTING_TITLE_COLOR = 0x4A49
LORE_TITLE_COLOR = 0x5DDF

PANEL_TOP = config.STATUS_BAR_TOP + config.STATUS_BAR_H + 2 * _S
PANEL_H = _H - config.BOTTOM_BAR_H - PANEL_TOP - 4 * _S
TITLE_Y = PANEL_TOP + 4 * _S

_QUEST_DISPLAY_MAX = 999
_NAME_MAX_CHARS = 16


def _centered_x(chars: int) -> int:
    return _W // 2 - (chars * _STRIDE) // 2


def _panel(fb) -> None:
    draw.draw_panel(fb, config.MENU_MARGIN, PANEL_TOP, _W - 2 * config.MENU_MARGIN,
                    PANEL_H, PANEL_BG_COLOR, PANEL_BORDER_COLOR)


def _nav(fb, time_ms: int, text_color: int = NAV_TEXT_COLOR) -> None:
    draw.draw_bottom_nav(fb, "NEXT", "HOME", NAV_BG_COLOR, text_color,
                         NAV_OUTLINE_COLOR, time_ms)


def render_home(fb, game, time_ms: int, now=None, battery_percent: int | None = None) -> None:
    """Creature with its aura, plus a status bar of quest, time and battery.

    ``now`` is a date-time with ``hour`` and ``minute`` (omitted if None);
    ``battery_percent`` is omitted if None.
    """
    game.inventory.check_unlocks(game.creature.xp)
    cx, cy = _W // 2, _H // 2
    if game.aura.crafted:
        game.aura.draw(fb, cx, cy, time_ms)
    game.creature.render(fb, time_ms, game.inventory)

    bar_y = config.STATUS_BAR_TOP
    text_y = bar_y + config.STATUS_BAR_H // 2 - config.FONT_CHAR_H // 2
    margin = config.MENU_MARGIN

    if now is not None:
        time_w = 5 * _STRIDE
        time_x = max((_W - time_w) // 2, margin)
        if time_x + time_w > _W - margin:
            time_x = _W - margin - time_w
        draw.draw_time(fb, time_x, text_y, now.hour, now.minute, TIME_COLOR)

    if battery_percent is not None:
        bx = max(_W - margin - 2 * _STRIDE, margin)
        draw.draw_two_digits(fb, bx, text_y, battery_percent, BATTERY_COLOR)

    progress = game.quests.progress
    goal = game.quests.goal
    if goal > 0:
        draw.draw_string(fb, margin, text_y, "Q", QUEST_COLOR)
        draw.draw_number(fb, margin + 4 * _STRIDE, text_y,
                         min(progress, _QUEST_DISPLAY_MAX), QUEST_COLOR)
        draw.draw_string(fb, margin + 5 * _STRIDE, text_y, " ", QUEST_COLOR)
        draw.draw_number(fb, margin + 9 * _STRIDE, text_y,
                         min(goal, _QUEST_DISPLAY_MAX), QUEST_COLOR)

    draw.draw_rect(fb, 0, bar_y + config.STATUS_BAR_H - _S, _W, _S, SEPARATOR_COLOR)
    _nav(fb, time_ms, HINT_COLOR)


def render_quests(fb, game, time_ms: int) -> None:
    """Current quest progress toward its goal."""
    _panel(fb)
    row_y = TITLE_Y + config.FONT_CHAR_H + 6 * _S
    margin = config.MENU_MARGIN
    draw.draw_string(fb, _centered_x(6), TITLE_Y, "QUESTS", QUEST_TITLE_COLOR)
    draw.draw_string(fb, margin, row_y, "PROGRESS", TEXT_COLOR)
    draw.draw_number(fb, margin + 9 * _STRIDE, row_y, game.quests.progress, TEXT_COLOR)
    draw.draw_string(fb, margin + 12 * _STRIDE, row_y, "/", TEXT_COLOR)
    draw.draw_number(fb, margin + 13 * _STRIDE, row_y, game.quests.goal, TEXT_COLOR)
    _nav(fb, time_ms)


def render_inventory(fb, game, time_ms: int) -> None:
    """Name of the accessory the creature wears."""
    _panel(fb)
    row1 = TITLE_Y + config.FONT_CHAR_H + 8 * _S
    row2 = row1 + config.FONT_CHAR_H + 4 * _S
    draw.draw_string(fb, _centered_x(9), TITLE_Y, "INVENTORY", INVENTORY_TITLE_COLOR)
    equipped = game.inventory.equipped
    accessory = game.inventory.get_def(equipped)
    if equipped == 0:
        name = "NONE"
    else:
        name = accessory.name if accessory is not None else "???"
    draw.draw_string(fb, _centered_x(8), row1, "EQUIPPED", TEXT_COLOR)
    draw.draw_string(fb, _centered_x(min(len(name), _NAME_MAX_CHARS)), row2, name, TEXT_COLOR)
    _nav(fb, time_ms)


def render_crafting(fb, game, time_ms: int) -> None:
    """Aura crafting status."""
    _panel(fb)
    row_y = TITLE_Y + config.FONT_CHAR_H + 8 * _S
    draw.draw_string(fb, _centered_x(8), TITLE_Y, "CRAFTING", CRAFTING_TITLE_COLOR)
    if game.aura.crafted:
        draw.draw_string(fb, _centered_x(9), row_y, "AURA CALM", TEXT_COLOR)
    elif game.aura.can_craft(game.creature.xp):
        draw.draw_string(fb, _centered_x(16), row_y, "CRAFT AURA 200 XP", TEXT_COLOR)
    else:
        draw.draw_string(fb, _centered_x(10), row_y, "NEED 200 XP", TEXT_COLOR)
    _nav(fb, time_ms)


def render_lore(fb, game, time_ms: int) -> None:
    """List of unlocked cutscenes."""
    _panel(fb)
    y = TITLE_Y + config.FONT_CHAR_H + 8 * _S
    line_h = config.FONT_CHAR_H + 4 * _S
    draw.draw_string(fb, _centered_x(4), TITLE_Y, "LORE", LORE_TITLE_COLOR)
    entries = (
        (CutsceneId.EVOLUTION, "EVOLUTION"),
        (CutsceneId.AETHERON_INTRO, "AETHERON"),
        (CutsceneId.PIXEL_MODE, "PIXEL MODE"),
    )
    for cutscene_id, label in entries:
        if game.cutscenes.is_unlocked(cutscene_id):
            draw.draw_string(fb, config.MENU_MARGIN, y, label, TEXT_COLOR)
            y += line_h
    _nav(fb, time_ms)
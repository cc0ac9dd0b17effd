"""Unlockable accessories that the creature can wear."""

from dataclasses import dataclass
from enum import Enum

from . import draw

MAX_ACCESSORIES = 8

COLOR_GOLD = 0xFEC0
COLOR_YELLOW = 0xFFE0
COLOR_RED = 0xF800
COLOR_BLUE = 0x001F


class AccessoryType(Enum):
    """Where an accessory is worn."""

    HAT = 0
    BODY = 1


@dataclass(frozen=True)
class Accessory:
    """Static definition of one accessory."""

    id: int
    name: str
    unlock_xp: int
    type: AccessoryType


ACCESSORIES = (
    Accessory(1, "CROWN", 50, AccessoryType.HAT),
    Accessory(2, "HALO", 100, AccessoryType.HAT),
    Accessory(3, "SCARF", 150, AccessoryType.BODY),
    Accessory(4, "SHIELD", 250, AccessoryType.BODY),
)


def _draw_crown(fb, cx: int, head_cy: int, head_r: int) -> None:
    halfw = max(head_r * 5 // 12, 4)
    height = max(head_r * 2 // 3, 8)
    apex_y = head_cy - head_r - head_r // 4
    draw.fill_triangle(fb, cx, apex_y + head_r // 3, halfw, height, COLOR_GOLD)


def _draw_halo(fb, cx: int, head_cy: int, head_r: int) -> None:
    halo_r = max(head_r * 4 // 10, 4)
    halo_y = head_cy - head_r - head_r // 4
    draw.fill_circle(fb, cx, halo_y, halo_r, COLOR_YELLOW)


def _draw_scarf(fb, cx: int, head_cy: int, head_r: int) -> None:
    width = max(head_r * 2, 20)
    scarf_h = max(head_r * 4 // 10, 4)
    scarf_y = head_cy - head_r - head_r // 8
    draw.draw_rect(fb, cx - width // 2, scarf_y, width, scarf_h, COLOR_RED)


def _draw_shield(fb, cx: int, body_cy: int, body_r: int) -> None:
    shield_r = max(body_r * 3 // 10, 6)
    offset = body_r * 2 // 5
    draw.fill_circle(fb, cx + body_r + offset, body_cy, shield_r, COLOR_BLUE)


class Inventory:
    """Tracks which accessories are unlocked and which one is worn.

    ``unlocked`` is a bitfield where bit i stands for ``ACCESSORIES[i]``;
    ``equipped`` is an accessory id, 0 meaning none.
    """

    def __init__(self) -> None:
        self.unlocked = 0
        self.equipped = 0

    def _unlocked_accessories(self) -> list[Accessory]:
        return [acc for i, acc in enumerate(ACCESSORIES) if self.unlocked & (1 << i)]

    def check_unlocks(self, xp: int) -> None:
        """Unlock every accessory whose threshold is at most ``xp``."""
        for i, acc in enumerate(ACCESSORIES):
            if xp >= acc.unlock_xp:
                self.unlocked |= 1 << i

    def equip(self, accessory_id: int) -> None:
        """Wear an unlocked accessory; 0 removes it. Locked ids are ignored."""
        if accessory_id == 0:
            self.equipped = 0
            return
        if any(acc.id == accessory_id for acc in self._unlocked_accessories()):
            self.equipped = accessory_id

    def unequip(self) -> None:
        self.equipped = 0

    def set_equipped(self, accessory_id: int) -> None:
        """Set the worn accessory without checking unlocks (restoring state)."""
        self.equipped = accessory_id

    def is_unlocked(self, accessory_id: int) -> bool:
        if accessory_id == 0:
            return True
        for i, acc in enumerate(ACCESSORIES):
            if acc.id == accessory_id:
                return bool(self.unlocked & (1 << i))
        return False

    def get_def(self, accessory_id: int) -> Accessory | None:
        return next((acc for acc in ACCESSORIES if acc.id == accessory_id), None)

    def next_unlocked(self, current: int) -> int:
        """Cycle forward: none -> first unlocked -> ... -> last -> none."""
        found_current = current == 0
        for acc in self._unlocked_accessories():
            if found_current:
                return acc.id
            if acc.id == current:
                found_current = True
        return 0

    def prev_unlocked(self, current: int) -> int:
        """Cycle backward: none -> last unlocked -> ... -> first -> none."""
        unlocked = self._unlocked_accessories()
        if current == 0:
            return unlocked[-1].id if unlocked else 0
        prev_id = 0
        for acc in unlocked:
            if acc.id >= current:
                break
            prev_id = acc.id
        return prev_id

    def draw_accessory(self, fb, cx: int, head_cy: int, body_cy: int,
                       body_r: int, head_r: int) -> None:
        """Draw the worn accessory relative to the creature's head and body."""
        if self.equipped == 0:
            return
        acc = self.get_def(self.equipped)
        if acc is None:
            return
        if acc.id == 1:
            _draw_crown(fb, cx, head_cy, head_r)
        elif acc.id == 2:
            _draw_halo(fb, cx, head_cy, head_r)
        elif acc.id == 3:
            _draw_scarf(fb, cx, head_cy, head_r)
        elif acc.id == 4:
            _draw_shield(fb, cx, body_cy, body_r)
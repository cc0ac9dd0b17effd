"""Persistent game state in a small key-value file."""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

KEY_XP = "xp"
KEY_MOMENTUM = "mom"
KEY_QUEST_IDX = "qi"
KEY_QUEST_PROG = "qp"
KEY_EQUIP_ID = "eq"
KEY_UNLOCKED = "unl"
KEY_AURA = "aura"
KEY_LORE = "lore"
KEY_BRIGHT = "br"
KEY_24H = "24h"
KEY_WIFI = "wifi"
KEY_BT = "bt"

DEFAULT_BRIGHTNESS = 80
MIN_BRIGHTNESS = 30

# Aetheron intro and pixel mode are unlocked on a first run.
LORE_DEFAULT_FIRST_RUN = (1 << 1) | (1 << 2)

_U8 = 8
_U32 = 32


@dataclass
class Settings:
    """User preferences from the settings screens."""

    brightness: int = DEFAULT_BRIGHTNESS
    time_24h: bool = False
    wifi_on: bool = False
    bt_on: bool = False


class Storage:
    """Key-value store saved as JSON at ``path``; ``None`` keeps it in memory.

    Every save is committed at once. An unreadable file is treated as empty.
    """

    def __init__(self, path: str | os.PathLike | None = None) -> None:
        self.path = Path(path) if path is not None else None
        self._values: dict[str, object] = self._read()

    def _read(self) -> dict[str, object]:
        if self.path is None:
            return {}
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            logger.warning("storage file %s is corrupt; starting empty", self.path)
            return {}
        if not isinstance(data, dict):
            logger.warning("storage file %s has no key table; starting empty", self.path)
            return {}
        return data

    def _commit(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        tmp.write_text(json.dumps(self._values, sort_keys=True), encoding="utf-8")
        os.replace(tmp, self.path)

    def _set(self, key: str, value: int, bits: int) -> None:
        value = int(value)
        if not 0 <= value < (1 << bits):
            raise ValueError(f"{key}={value} does not fit in {bits} unsigned bits")
        self._values[key] = value

    def _get(self, key: str, bits: int) -> int | None:
        value = self._values.get(key)
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        if not 0 <= value < (1 << bits):
            return None
        return value

    def save_creature(self, xp: int, momentum: int) -> None:
        self._set(KEY_XP, xp, _U32)
        self._set(KEY_MOMENTUM, momentum, _U32)
        self._commit()

    def load_creature(self) -> tuple[int, int] | None:
        """Return ``(xp, momentum)``, or None if not saved."""
        xp = self._get(KEY_XP, _U32)
        momentum = self._get(KEY_MOMENTUM, _U32)
        if xp is None or momentum is None:
            return None
        return xp, momentum

    def save_quest(self, quest_index: int, progress: int) -> None:
        self._set(KEY_QUEST_IDX, quest_index, _U32)
        self._set(KEY_QUEST_PROG, progress, _U32)
        self._commit()

    def load_quest(self) -> tuple[int, int] | None:
        """Return ``(quest_index, progress)``, or None if not saved."""
        index = self._get(KEY_QUEST_IDX, _U32)
        progress = self._get(KEY_QUEST_PROG, _U32)
        if index is None or progress is None:
            return None
        return index, progress

    def save_inventory(self, equipped_id: int, unlocked_bitfield: int) -> None:
        self._set(KEY_EQUIP_ID, equipped_id, _U8)
        self._set(KEY_UNLOCKED, unlocked_bitfield, _U32)
        self._commit()

    def load_inventory(self) -> tuple[int, int] | None:
        """Return ``(equipped_id, unlocked_bitfield)``, or None if not saved."""
        equipped = self._get(KEY_EQUIP_ID, _U8)
        unlocked = self._get(KEY_UNLOCKED, _U32)
        if equipped is None or unlocked is None:
            return None
        return equipped, unlocked

    def save_aura(self, crafted: bool) -> None:
        self._set(KEY_AURA, 1 if crafted else 0, _U8)
        self._commit()

    def load_aura(self) -> bool | None:
        """Return whether the aura was crafted, or None if not saved."""
        value = self._get(KEY_AURA, _U8)
        return None if value is None else value != 0

    def save_lore(self, lore_bitfield: int) -> None:
        self._set(KEY_LORE, lore_bitfield, _U32)
        self._commit()

    def load_lore(self) -> int:
        """Return the lore bitfield; a first run gets the default unlocks."""
        if KEY_LORE not in self._values:
            return LORE_DEFAULT_FIRST_RUN
        value = self._get(KEY_LORE, _U32)
        return LORE_DEFAULT_FIRST_RUN if value is None else value

    def save_settings(self, settings: Settings) -> None:
        self._set(KEY_BRIGHT, settings.brightness, _U8)
        self._set(KEY_24H, 1 if settings.time_24h else 0, _U8)
        self._set(KEY_WIFI, 1 if settings.wifi_on else 0, _U8)
        self._set(KEY_BT, 1 if settings.bt_on else 0, _U8)
        self._commit()

    def load_settings(self) -> Settings:
        """Return saved settings, filling gaps with defaults.

        Brightness never comes back below the minimum, so the screen is
        never started black.
        """
        brightness = self._get(KEY_BRIGHT, _U8)
        if brightness is None:
            brightness = DEFAULT_BRIGHTNESS
        return Settings(
            brightness=max(brightness, MIN_BRIGHTNESS),
            time_24h=bool(self._get(KEY_24H, _U8)),
            wifi_on=bool(self._get(KEY_WIFI, _U8)),
            bt_on=bool(self._get(KEY_BT, _U8)),
        )
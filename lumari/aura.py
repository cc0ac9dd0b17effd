"""The craftable aura: a pulsing glow around the creature."""

from . import config, draw

CRAFT_COST_XP = 200
AURA_COLOR = 0x4A49


class Aura:
    """Whether the aura has been crafted, and how to draw it."""

    def __init__(self) -> None:
        self.crafted = False

    def can_craft(self, current_xp: int) -> bool:
        """True if not yet crafted and ``current_xp`` covers the cost."""
        return not self.crafted and current_xp >= CRAFT_COST_XP

    def craft(self) -> None:
        """Mark the aura as crafted (the caller spends the XP)."""
        self.crafted = True

    def draw(self, fb, cx: int, cy: int, time_ms: int) -> None:
        """Draw the glow ring around (cx, cy), pulsing with a ~2 s period."""
        if not self.crafted or fb is None:
            return
        base = (config.SCREEN_WIDTH + config.SCREEN_HEIGHT) // 14
        phase = (time_ms // 32) % 64
        pulse = phase if phase < 32 else 64 - phase
        r_outer = min(base + 8 + pulse // 4, base + 24)
        r_inner = max(base - 4 - pulse // 8, base - 12)
        draw.draw_ring(fb, cx, cy, r_inner, r_outer, AURA_COLOR)
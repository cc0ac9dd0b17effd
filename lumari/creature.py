"""The creature: XP, momentum meter, mood and its on-screen rendering."""

from enum import Enum

from . import config, draw

XP_CAP = 9999
MOMENTUM_MAX = 100
EVOLVED_XP_THRESHOLD = 100

BODY_RADIUS = config.SCREEN_WIDTH // 5
HEAD_RADIUS = config.SCREEN_WIDTH // 8
HEAD_OFFSET_Y = config.SCREEN_HEIGHT // 16

SEEDLING_COLOR_BODY = 0x7FE0
SEEDLING_COLOR_HEAD = 0xB7E0
EVOLVED_COLOR_BODY = 0x07FF
EVOLVED_COLOR_HEAD = 0x5DDF
XP_COLOR = 0xFFFF
MOMENTUM_BAR_COLOR = 0x07E0
MOMENTUM_BG_COLOR = 0x3186
HAPPY_GLOW_COLOR = 0xFFE0


class Mood(Enum):
    IDLE = 0
    HAPPY = 1
    SLEEP = 2


def _tdiv(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _isin(phase256: int) -> int:
    """Triangle-wave sine approximation in -128..127 over a 256-step phase."""
    p = phase256 & 0xFF
    if p < 64:
        return p * 2
    if p < 128:
        return 127 - (p - 64) * 2
    if p < 192:
        return -(p - 128) * 2
    return -127 + (p - 192) * 2


class Creature:
    """The digital pet's progress and mood."""

    def __init__(self) -> None:
        self.xp = 0
        self.momentum = 0
        self.mood = Mood.IDLE
        self.happy_until_ms = 0

    def add_steps(self, n: int) -> None:
        """Feed the momentum meter: two points per step, capped."""
        self.momentum = min(self.momentum + 2 * n, MOMENTUM_MAX)

    def update(self) -> None:
        """Let momentum decay by one point."""
        if self.momentum > 0:
            self.momentum -= 1

    def set_mood(self, mood: Mood) -> None:
        self.mood = mood

    def set_happy_until(self, end_time_ms: int) -> None:
        """Become happy until ``end_time_ms``; ``tick`` clears it afterwards."""
        self.mood = Mood.HAPPY
        self.happy_until_ms = end_time_ms

    def tick(self, time_ms: int) -> None:
        if self.mood is Mood.HAPPY and time_ms >= self.happy_until_ms:
            self.mood = Mood.IDLE

    def evolved_stage(self) -> int:
        """0 for the seedling, 1 once evolved."""
        return 1 if self.xp >= EVOLVED_XP_THRESHOLD else 0

    def add_xp(self, n: int) -> None:
        self.xp = min(self.xp + n, XP_CAP)

    def spend_xp(self, amount: int) -> bool:
        """Subtract ``amount`` if there is enough XP; report whether it was spent."""
        if self.xp < amount:
            return False
        self.xp -= amount
        return True

    def set_state(self, xp: int, momentum: int) -> None:
        """Restore saved progress, clamped to the valid ranges."""
        self.xp = min(xp, XP_CAP)
        self.momentum = min(momentum, MOMENTUM_MAX)

    def render(self, fb, time_ms: int, inventory) -> None:
        """Draw the creature, its accessory, the XP counter and momentum bar."""
        w, h, scale = config.SCREEN_WIDTH, config.SCREEN_HEIGHT, config.UI_SCALE
        cx = w // 2
        cy = h // 2
        body_r = BODY_RADIUS
        head_r = HEAD_RADIUS
        head_offset_y = HEAD_OFFSET_Y

        sleeping = self.mood is Mood.SLEEP
        bob_amp = 4 * scale
        bob_phase = (time_ms // 10) % 256
        bob_y = 0 if sleeping else _tdiv(_isin(bob_phase) * bob_amp, 128)
        draw_cy = cy + bob_y

        body_color, head_color = SEEDLING_COLOR_BODY, SEEDLING_COLOR_HEAD
        stage = self.evolved_stage()
        if stage >= 1:
            body_color, head_color = EVOLVED_COLOR_BODY, EVOLVED_COLOR_HEAD
            body_r = BODY_RADIUS + w // 41
            head_r = HEAD_RADIUS + w // 41
            head_offset_y = HEAD_OFFSET_Y + h // 84
        head_cy = draw_cy - head_offset_y

        if sleeping:
            body_r = body_r * 9 // 10
            head_r = head_r * 9 // 10

        if self.mood is Mood.HAPPY:
            glow_phase = (time_ms // 50) % 64
            g = glow_phase if glow_phase < 32 else 64 - glow_phase
            r_outer = body_r + 12 * scale + g // 4
            r_inner = max(body_r + 4 * scale - g // 8, body_r)
            draw.draw_ring(fb, cx, draw_cy, r_inner, r_outer, HAPPY_GLOW_COLOR)

        draw.fill_circle(fb, cx, draw_cy, body_r, body_color)
        draw.fill_circle(fb, cx, head_cy, head_r, head_color)

        if not sleeping:
            eye_r = max(head_r // 4, 2)
            eye_off_x = head_r // 2
            eye_y = head_cy - head_r // 4
            eye_color = 0x001F if stage >= 1 else 0x3186
            draw.fill_circle(fb, cx - eye_off_x, eye_y, eye_r, eye_color)
            draw.fill_circle(fb, cx + eye_off_x, eye_y, eye_r, eye_color)

        inventory.draw_accessory(fb, cx, head_cy, draw_cy, body_r, head_r)

        draw.draw_number(
            fb,
            w - config.MENU_MARGIN,
            config.STATUS_BAR_TOP + config.STATUS_BAR_H // 2 - config.FONT_CHAR_H // 2,
            self.xp,
            XP_COLOR,
        )

        bar_w = w * 6 // 10
        bar_h = 8 * scale
        bx = (w - bar_w) // 2
        by = h - config.BOTTOM_BAR_H - bar_h - 6 * scale
        draw.draw_rect(fb, bx, by, bar_w, bar_h, MOMENTUM_BG_COLOR)
        fill_w = bar_w * self.momentum // 100
        if fill_w > 0:
            draw.draw_rect(fb, bx, by, fill_w, bar_h, MOMENTUM_BAR_COLOR)
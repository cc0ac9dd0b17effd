"""Software drawing primitives for RGB565 framebuffers.

Every function takes a target ``fb`` that exposes ``width``, ``height`` and
``put(x, y, color)``. Pixels outside the target are silently clipped.
"""

from collections.abc import Sequence

from . import config

_GLYPH_W = 5
_GLYPH_H = 7

# 5x7 digits 0-9, one row per byte, 5 low bits used.
_DIGITS = (
    (0x1F, 0x11, 0x11, 0x11, 0x11, 0x11, 0x1F),
    (0x04, 0x0C, 0x04, 0x04, 0x04, 0x04, 0x0E),
    (0x1F, 0x01, 0x01, 0x1F, 0x10, 0x10, 0x1F),
    (0x1F, 0x01, 0x01, 0x0F, 0x01, 0x01, 0x1F),
    (0x11, 0x11, 0x11, 0x1F, 0x01, 0x01, 0x01),
    (0x1F, 0x10, 0x10, 0x1F, 0x01, 0x01, 0x1F),
    (0x1F, 0x10, 0x10, 0x1F, 0x11, 0x11, 0x1F),
    (0x1F, 0x01, 0x01, 0x02, 0x04, 0x04, 0x04),
    (0x1F, 0x11, 0x11, 0x1F, 0x11, 0x11, 0x1F),
    (0x1F, 0x11, 0x11, 0x1F, 0x01, 0x01, 0x1F),
)

# 5x7 letters: index 0 is space, 1-26 are A-Z.
_ALPHA = (
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00),
    (0x04, 0x0A, 0x11, 0x11, 0x1F, 0x11, 0x11),
    (0x1E, 0x11, 0x11, 0x1E, 0x11, 0x11, 0x1E),
    (0x0E, 0x11, 0x10, 0x10, 0x10, 0x11, 0x0E),
    (0x1E, 0x11, 0x11, 0x11, 0x11, 0x11, 0x1E),
    (0x1F, 0x10, 0x10, 0x1E, 0x10, 0x10, 0x1F),
    (0x1F, 0x10, 0x10, 0x1E, 0x10, 0x10, 0x10),
    (0x0E, 0x11, 0x10, 0x13, 0x11, 0x11, 0x0F),
    (0x11, 0x11, 0x11, 0x1F, 0x11, 0x11, 0x11),
    (0x0E, 0x04, 0x04, 0x04, 0x04, 0x04, 0x0E),
    (0x01, 0x01, 0x01, 0x01, 0x11, 0x11, 0x0E),
    (0x11, 0x12, 0x14, 0x18, 0x14, 0x12, 0x11),
    (0x10, 0x10, 0x10, 0x10, 0x10, 0x10, 0x1F),
    (0x11, 0x1B, 0x15, 0x11, 0x11, 0x11, 0x11),
    (0x11, 0x19, 0x15, 0x13, 0x11, 0x11, 0x11),
    (0x0E, 0x11, 0x11, 0x11, 0x11, 0x11, 0x0E),
    (0x1E, 0x11, 0x11, 0x1E, 0x10, 0x10, 0x10),
    (0x0E, 0x11, 0x11, 0x11, 0x15, 0x12, 0x0D),
    (0x1E, 0x11, 0x11, 0x1E, 0x14, 0x12, 0x11),
    (0x0E, 0x11, 0x10, 0x0E, 0x01, 0x11, 0x0E),
    (0x1F, 0x04, 0x04, 0x04, 0x04, 0x04, 0x04),
    (0x11, 0x11, 0x11, 0x11, 0x11, 0x11, 0x0E),
    (0x11, 0x11, 0x11, 0x11, 0x11, 0x0A, 0x04),
    (0x11, 0x11, 0x11, 0x15, 0x15, 0x1B, 0x11),
    (0x11, 0x11, 0x0A, 0x04, 0x0A, 0x11, 0x11),
    (0x11, 0x11, 0x0A, 0x04, 0x04, 0x04, 0x04),
    (0x1F, 0x01, 0x02, 0x04, 0x08, 0x10, 0x1F),
)

_DIGIT_STRIDE = (_GLYPH_W + 1) * config.FONT_SCALE
_COLON_W = 2 * config.FONT_SCALE
_COLON_H = 2 * config.FONT_SCALE
_TIME_SPACING = 1 * config.FONT_SCALE


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _plot(fb, x: int, y: int, color: int) -> None:
    if 0 <= x < fb.width and 0 <= y < fb.height:
        fb.put(x, y, color)


def _font_block(fb, x: int, y: int, color: int) -> None:
    """Draw one font pixel, enlarged to FONT_SCALE x FONT_SCALE."""
    draw_rect(fb, x, y, config.FONT_SCALE, config.FONT_SCALE, color)


def _draw_letter(fb, x: int, y: int, index: int, color: int) -> None:
    rows = _ALPHA[index] if 0 <= index <= 26 else _ALPHA[0]
    for row, bits in enumerate(rows):
        for col in range(_GLYPH_W):
            if bits & (1 << (_GLYPH_W - 1 - col)):
                _font_block(
                    fb,
                    x + col * config.FONT_SCALE,
                    y + row * config.FONT_SCALE,
                    color,
                )


def _draw_digit(fb, right: int, y: int, digit: int, color: int) -> None:
    """Draw a digit glyph ending at ``right`` (bit order as in the number font)."""
    for row, bits in enumerate(_DIGITS[digit]):
        for col in range(_GLYPH_W):
            if bits & (1 << (_GLYPH_W - 1 - col)):
                _font_block(
                    fb,
                    right - (col + 1) * config.FONT_SCALE,
                    y + row * config.FONT_SCALE,
                    color,
                )


def draw_sprite(fb, sprite: Sequence[int], sprite_width: int, sprite_height: int,
                pos_x: int, pos_y: int) -> None:
    """Copy a row-major sprite onto ``fb`` with its top-left at (pos_x, pos_y)."""
    if sprite_width < 0 or sprite_height < 0:
        raise ValueError("sprite dimensions must be non-negative")
    if len(sprite) < sprite_width * sprite_height:
        raise ValueError("sprite data is shorter than width * height")
    for y in range(sprite_height):
        row = sprite[y * sprite_width:(y + 1) * sprite_width]
        for x, color in enumerate(row):
            _plot(fb, pos_x + x, pos_y + y, color)


def fill_circle(fb, cx: int, cy: int, radius: int, color: int) -> None:
    """Fill a disc of ``radius`` centred on (cx, cy)."""
    r_sq = radius * radius
    for dy in range(-radius, radius + 1):
        for dx in range(-radius, radius + 1):
            if dx * dx + dy * dy <= r_sq:
                _plot(fb, cx + dx, cy + dy, color)


def draw_number(fb, x: int, y: int, value: int, color: int) -> None:
    """Draw a non-negative integer, clamped to 9999, in the 5x7 digit font."""
    if value < 0:
        raise ValueError("value must be non-negative")
    value = min(value, 9999)
    digits = [int(d) for d in str(value)]
    right = x + (len(digits) - 1) * _DIGIT_STRIDE
    for digit in reversed(digits):
        _draw_digit(fb, right, y, digit, color)
        right -= _DIGIT_STRIDE


def draw_rect(fb, x: int, y: int, w: int, h: int, color: int) -> None:
    """Fill the rectangle of size w x h with top-left (x, y)."""
    x0, x1 = max(x, 0), min(x + w, fb.width)
    y0, y1 = max(y, 0), min(y + h, fb.height)
    for py in range(y0, y1):
        for px in range(x0, x1):
            fb.put(px, py, color)


def draw_panel(fb, x: int, y: int, w: int, h: int, bg_color: int,
               border_color: int) -> None:
    """Filled rectangle with a 1px border."""
    draw_rect(fb, x, y, w, h, bg_color)
    draw_rect_outline(fb, x, y, w, h, border_color)


def draw_rect_outline(fb, x: int, y: int, w: int, h: int, color: int) -> None:
    """Draw the 1px border of a rectangle."""
    if w <= 0 or h <= 0:
        return
    draw_rect(fb, x, y, w, 1, color)
    if h > 1:
        draw_rect(fb, x, y + h - 1, w, 1, color)
    if h > 2:
        draw_rect(fb, x, y + 1, 1, h - 2, color)
        if w > 1:
            draw_rect(fb, x + w - 1, y + 1, 1, h - 2, color)


def string_width(text: str | None) -> int:
    """Pixel width of ``text`` in the scaled font."""
    return len(text) * config.FONT_STRIDE if text else 0


def draw_button(fb, x: int, y: int, w: int, h: int, label: str | None,
                bg_color: int, text_color: int) -> None:
    """Filled rectangle with an outline and a centred label."""
    draw_rect(fb, x, y, w, h, bg_color)
    draw_rect_outline(fb, x, y, w, h, text_color)
    tx = max(x + _tdiv(w - string_width(label), 2), x)
    ty = max(y + _tdiv(h - config.FONT_CHAR_H, 2), y)
    draw_string(fb, tx, ty, label, text_color)


def _bottom_nav_geometry() -> tuple[int, int, int]:
    btn_w = _tdiv(
        config.SCREEN_WIDTH - 2 * config.BOTTOM_BAR_MARGIN - config.BOTTOM_BAR_GAP, 2
    )
    if btn_w < 20:
        btn_w = _tdiv(config.SCREEN_WIDTH - config.BOTTOM_BAR_GAP, 2)
    left_x = config.BOTTOM_BAR_MARGIN
    right_x = config.BOTTOM_BAR_MARGIN + btn_w + config.BOTTOM_BAR_GAP
    return btn_w, left_x, right_x


def draw_bottom_nav(fb, left_label: str | None, right_label: str | None,
                    bg_color: int, text_color: int, outline_color: int,
                    time_ms: int) -> None:
    """Two equal buttons along the bottom edge; the outline pulses every 600 ms."""
    bar_y = config.SCREEN_HEIGHT - config.BOTTOM_BAR_H
    btn_w, left_x, right_x = _bottom_nav_geometry()
    outline = outline_color
    if time_ms != 0 and (time_ms // 600) % 2 != 0:
        outline = text_color
    text_y = bar_y + _tdiv(config.BOTTOM_BAR_H - config.FONT_CHAR_H, 2)
    for bx, label in ((left_x, left_label or "NEXT"), (right_x, right_label or "HOME")):
        draw_rect(fb, bx, bar_y, btn_w, config.BOTTOM_BAR_H, bg_color)
        draw_rect_outline(fb, bx, bar_y, btn_w, config.BOTTOM_BAR_H, outline)
        draw_string(fb, bx + _tdiv(btn_w - string_width(label), 2), text_y,
                    label, text_color)


def bottom_nav_hit_test(x: int, y: int) -> int:
    """Return 0 for the left nav button, 1 for the right one, -1 otherwise."""
    if y < config.SCREEN_HEIGHT - config.BOTTOM_BAR_H or y >= config.SCREEN_HEIGHT:
        return -1
    btn_w, left_x, right_x = _bottom_nav_geometry()
    if left_x <= x < left_x + btn_w:
        return 0
    if right_x <= x < right_x + btn_w:
        return 1
    return -1


def draw_string(fb, x: int, y: int, text: str | None, color: int) -> None:
    """Draw letters and spaces; other characters leave a blank cell."""
    if not text:
        return
    cx = x
    for ch in text:
        if ch == " ":
            _draw_letter(fb, cx, y, 0, color)
        elif "A" <= ch <= "Z":
            _draw_letter(fb, cx, y, ord(ch) - ord("A") + 1, color)
        elif "a" <= ch <= "z":
            _draw_letter(fb, cx, y, ord(ch) - ord("a") + 1, color)
        cx += config.FONT_STRIDE


def fill_triangle(fb, cx: int, cy: int, half_width: int, height: int,
                  color: int) -> None:
    """Isosceles triangle with its apex on top, centred on (cx, cy)."""
    y_top = cy - _tdiv(height, 2)
    y_bot = cy + _tdiv(height, 2)
    for y in range(y_top, y_bot + 1):
        dy = y - y_top
        half_w = 0 if height <= 0 else _tdiv(half_width * dy, height)
        half_w = min(half_w, half_width)
        for x in range(cx - half_w, cx + half_w + 1):
            _plot(fb, x, y, color)


def draw_ring(fb, cx: int, cy: int, r_inner: int, r_outer: int, color: int) -> None:
    """Fill the annulus between ``r_inner`` and ``r_outer``."""
    r_inner = max(r_inner, 0)
    if r_outer <= r_inner:
        return
    r_in_sq = r_inner * r_inner
    r_out_sq = r_outer * r_outer
    for dy in range(-r_outer, r_outer + 1):
        for dx in range(-r_outer, r_outer + 1):
            d_sq = dx * dx + dy * dy
            if r_in_sq <= d_sq <= r_out_sq:
                _plot(fb, cx + dx, cy + dy, color)


def _draw_colon(fb, x: int, y: int, color: int) -> None:
    fs = config.FONT_SCALE
    draw_rect(fb, x, y + 2 * fs, _COLON_W, _COLON_H, color)
    draw_rect(fb, x, y + 6 * fs, _COLON_W, _COLON_H, color)


def draw_two_digits(fb, x: int, y: int, value: int, color: int) -> None:
    """Draw 00-99 with a leading zero; larger values show as 99."""
    if value < 0:
        raise ValueError("value must be non-negative")
    value = min(value, 99)
    draw_number(fb, x + _DIGIT_STRIDE - 1, y, value // 10, color)
    draw_number(fb, x + 2 * _DIGIT_STRIDE - 1, y, value % 10, color)


def draw_time(fb, x: int, y: int, hour: int, minute: int, color: int) -> None:
    """Draw a 12-hour clock time as H:MM or HH:MM."""
    h12 = hour % 12 or 12
    cx = x
    draw_number(fb, cx, y, h12, color)
    cx += (2 if h12 >= 10 else 1) * _DIGIT_STRIDE
    _draw_colon(fb, cx, y, color)
    cx += _COLON_W + _TIME_SPACING
    draw_two_digits(fb, cx, y, minute, color)


def _draw_slash(fb, x: int, y: int, color: int) -> None:
    fs = config.FONT_SCALE
    for i in range(5 * fs):
        ii = i // fs
        px = x + (ii * 2) // 4 * fs
        py = y + i
        for s in range(fs):
            _plot(fb, px + s, py, color)
        if 0 < ii < 4:
            for s in range(fs):
                _plot(fb, px + fs + s, py, color)


def draw_short_date(fb, x: int, y: int, month: int, day: int, color: int) -> None:
    """Draw a date as M/DD, clamping month to 1-12 and day to 1-31."""
    month = min(max(month, 1), 12)
    day = min(max(day, 1), 31)
    cx = x
    draw_number(fb, cx, y, month, color)
    cx += (2 if month >= 10 else 1) * _DIGIT_STRIDE
    _draw_slash(fb, cx, y, color)
    cx += 3 * config.FONT_SCALE
    draw_two_digits(fb, cx, y, day, color)
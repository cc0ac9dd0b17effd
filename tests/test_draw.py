import pytest

from lumari import config, draw


class Canvas:
    def __init__(self, width=120, height=100):
        self.width = width
        self.height = height
        self.pixels = [0] * (width * height)

    def put(self, x, y, color):
        assert 0 <= x < self.width and 0 <= y < self.height
        self.pixels[y * self.width + x] = color

    def get(self, x, y):
        return self.pixels[y * self.width + x]

    def painted(self):
        return {
            (i % self.width, i // self.width)
            for i, c in enumerate(self.pixels)
            if c
        }


def shifted(points, dx, dy=0):
    return {(x + dx, y + dy) for x, y in points}


def test_draw_rect_fills_exact_area():
    fb = Canvas()
    draw.draw_rect(fb, 10, 20, 7, 3, 0xFFFF)
    assert fb.painted() == {(x, y) for x in range(10, 17) for y in range(20, 23)}


def test_draw_rect_clips_to_target():
    fb = Canvas(20, 20)
    draw.draw_rect(fb, -5, -5, 10, 10, 1)
    assert fb.painted() == {(x, y) for x in range(5) for y in range(5)}


def test_draw_rect_empty_when_zero_size():
    fb = Canvas()
    draw.draw_rect(fb, 5, 5, 0, 10, 1)
    assert fb.painted() == set()


def test_outline_is_border_only():
    fb = Canvas()
    draw.draw_rect_outline(fb, 10, 10, 6, 5, 7)
    pts = fb.painted()
    assert len(pts) == 2 * 6 + 2 * 5 - 4
    assert (12, 12) not in pts
    assert (10, 10) in pts and (15, 14) in pts


def test_panel_border_and_background():
    fb = Canvas()
    draw.draw_panel(fb, 0, 0, 10, 10, 3, 9)
    assert fb.get(0, 0) == 9
    assert fb.get(9, 5) == 9
    assert fb.get(5, 5) == 3


def test_fill_circle_radius_zero_is_single_pixel():
    fb = Canvas()
    draw.fill_circle(fb, 3, 4, 0, 1)
    assert fb.painted() == {(3, 4)}


def test_ring_leaves_hole_and_empty_when_degenerate():
    fb = Canvas()
    draw.draw_ring(fb, 50, 50, 5, 10, 1)
    pts = fb.painted()
    assert (50, 50) not in pts
    assert (58, 50) in pts
    fb2 = Canvas()
    draw.draw_ring(fb2, 50, 50, 10, 10, 1)
    assert fb2.painted() == set()


def test_string_width():
    assert draw.string_width("HOME") == 4 * config.FONT_STRIDE
    assert draw.string_width(None) == 0
    assert draw.string_width("") == 0


def test_draw_string_case_insensitive_and_space_blank():
    upper, lower = Canvas(300, 60), Canvas(300, 60)
    draw.draw_string(upper, 0, 0, "AB", 1)
    draw.draw_string(lower, 0, 0, "ab", 1)
    assert upper.painted() == lower.painted()
    assert upper.painted()
    blank = Canvas(300, 60)
    draw.draw_string(blank, 0, 0, "   ", 1)
    assert blank.painted() == set()


def test_draw_string_unknown_char_advances_cursor():
    a, b = Canvas(300, 60), Canvas(300, 60)
    draw.draw_string(a, 0, 0, "1A", 1)
    draw.draw_string(b, 0, 0, "A", 1)
    assert a.painted() == shifted(b.painted(), config.FONT_STRIDE)


def test_draw_string_glyph_top_row():
    fb = Canvas(300, 60)
    draw.draw_string(fb, 0, 0, "I", 1)
    # Row 0 of "I" is 0x0E: columns 1-3 lit, columns 0 and 4 dark.
    assert fb.get(config.FONT_SCALE, 0) == 1
    assert fb.get(0, 0) == 0
    assert fb.get(4 * config.FONT_SCALE, 0) == 0


def test_draw_number_clamps_and_rejects_negative():
    a, b = Canvas(300, 60), Canvas(300, 60)
    draw.draw_number(a, 100, 0, 12345, 1)
    draw.draw_number(b, 100, 0, 9999, 1)
    assert a.painted() == b.painted()
    with pytest.raises(ValueError):
        draw.draw_number(a, 0, 0, -1, 1)


def test_draw_number_stays_in_its_cells():
    fb = Canvas(300, 60)
    x = 100
    draw.draw_number(fb, x, 0, 408, 1)
    stride = 6 * config.FONT_SCALE
    xs = {px for px, _ in fb.painted()}
    assert min(xs) >= x - 5 * config.FONT_SCALE
    assert max(xs) < x + 2 * stride
    assert fb.painted()


def test_draw_sprite_copies_and_clips():
    fb = Canvas(10, 10)
    sprite = [1, 2, 3, 4, 5, 6]
    draw.draw_sprite(fb, sprite, 3, 2, 8, 0)
    assert fb.get(8, 0) == 1 and fb.get(9, 0) == 2
    assert fb.get(8, 1) == 4 and fb.get(9, 1) == 5
    assert fb.painted() == {(8, 0), (9, 0), (8, 1), (9, 1)}


def test_draw_sprite_short_data_raises():
    with pytest.raises(ValueError):
        draw.draw_sprite(Canvas(), [1, 2], 2, 2, 0, 0)


def test_fill_triangle_shape():
    fb = Canvas()
    draw.fill_triangle(fb, 50, 20, 5, 10, 1)
    pts = fb.painted()
    assert {p for p in pts if p[1] == 15} == {(50, 15)}
    assert {p for p in pts if p[1] == 25} == {(x, 25) for x in range(45, 56)}
    assert not any(y < 15 or y > 25 for _, y in pts)


def test_bottom_nav_hit_test():
    bar_top = config.SCREEN_HEIGHT - config.BOTTOM_BAR_H
    assert draw.bottom_nav_hit_test(config.BOTTOM_BAR_MARGIN, bar_top) == 0
    assert draw.bottom_nav_hit_test(
        config.SCREEN_WIDTH - config.BOTTOM_BAR_MARGIN - 1, config.SCREEN_HEIGHT - 1
    ) == 1
    assert draw.bottom_nav_hit_test(config.SCREEN_WIDTH // 2, bar_top) == -1
    assert draw.bottom_nav_hit_test(config.BOTTOM_BAR_MARGIN, bar_top - 1) == -1
    assert draw.bottom_nav_hit_test(config.BOTTOM_BAR_MARGIN, config.SCREEN_HEIGHT) == -1
    assert draw.bottom_nav_hit_test(0, bar_top) == -1


def test_bottom_nav_outline_pulses():
    corner = (config.BOTTOM_BAR_MARGIN, config.SCREEN_HEIGHT - config.BOTTOM_BAR_H)
    still = Canvas(config.SCREEN_WIDTH, config.SCREEN_HEIGHT)
    draw.draw_bottom_nav(still, None, None, 2, 5, 9, 0)
    assert still.get(*corner) == 9
    pulsed = Canvas(config.SCREEN_WIDTH, config.SCREEN_HEIGHT)
    draw.draw_bottom_nav(pulsed, "NEXT", "HOME", 2, 5, 9, 600)
    assert pulsed.get(*corner) == 5
    assert still.painted() == pulsed.painted()


def test_draw_button_label_never_left_of_button():
    fb = Canvas(300, 80)
    draw.draw_button(fb, 100, 0, 10, 60, "WIDELABEL", 0, 1)
    assert min(x for x, _ in fb.painted()) >= 100


def test_two_digits_clamp():
    a, b = Canvas(300, 60), Canvas(300, 60)
    draw.draw_two_digits(a, 50, 0, 150, 1)
    draw.draw_two_digits(b, 50, 0, 99, 1)
    assert a.painted() == b.painted()


def test_draw_time_midnight_is_twelve():
    a, b = Canvas(400, 60), Canvas(400, 60)
    draw.draw_time(a, 40, 0, 0, 5, 1)
    draw.draw_time(b, 40, 0, 12, 5, 1)
    assert a.painted() == b.painted()
    c = Canvas(400, 60)
    draw.draw_time(c, 40, 0, 13, 5, 1)
    d = Canvas(400, 60)
    draw.draw_time(d, 40, 0, 1, 5, 1)
    assert c.painted() == d.painted()


def test_short_date_clamps():
    a, b = Canvas(400, 60), Canvas(400, 60)
    draw.draw_short_date(a, 40, 0, 0, 0, 1)
    draw.draw_short_date(b, 40, 0, 1, 1, 1)
    assert a.painted() == b.painted()
    c, d = Canvas(400, 60), Canvas(400, 60)
    draw.draw_short_date(c, 40, 0, 13, 40, 1)
    draw.draw_short_date(d, 40, 0, 12, 31, 1)
    assert c.painted() == d.painted()
from lumari.imu import (
    SHAKE_DEBOUNCE_MS,
    SHAKE_MAGNITUDE_THRESHOLD,
    STEP_MAG_HIGH,
    STEP_MAG_LOW,
    STEP_MIN_MS,
    MotionTracker,
)


def test_no_sample_reads_zero():
    assert MotionTracker().read_accel() == (0, 0, 0)


def test_read_accel_in_centi_units():
    m = MotionTracker()
    m.update(1.5, -2.25, 9.81)
    assert m.read_accel() == (150, -225, 981)


def test_invalidate_clears_sample():
    m = MotionTracker()
    m.update(1.0, 2.0, 3.0)
    m.invalidate()
    assert m.read_accel() == (0, 0, 0)
    assert m.shake_detected(10_000) is False


def test_shake_with_debounce():
    m = MotionTracker()
    m.update(0, 0, SHAKE_MAGNITUDE_THRESHOLD + 2)
    assert m.shake_detected(1000) is True
    assert m.shake_detected(1000 + SHAKE_DEBOUNCE_MS - 1) is False
    assert m.shake_detected(1000 + SHAKE_DEBOUNCE_MS) is True


def test_gentle_motion_is_not_a_shake():
    m = MotionTracker()
    m.update(0, 0, 9.8)
    assert m.shake_detected(5000) is False


def test_step_counted_on_peak_then_drop():
    m = MotionTracker()
    m.update(0, 0, STEP_MAG_HIGH + 0.5)
    assert m.step_delta(1000) == 0
    m.update(0, 0, STEP_MAG_LOW - 1)
    assert m.step_delta(1000 + STEP_MIN_MS) == 1
    assert m.step_delta(1000 + STEP_MIN_MS + 10) == 0


def test_step_needs_minimum_interval():
    m = MotionTracker()
    m.update(0, 0, STEP_MAG_HIGH + 1)
    m.step_delta(100)
    m.update(0, 0, STEP_MAG_LOW - 1)
    assert m.step_delta(STEP_MIN_MS - 1) == 0
    assert m.step_delta(STEP_MIN_MS) == 1


def test_low_without_peak_is_no_step():
    m = MotionTracker()
    m.update(0, 0, STEP_MAG_LOW - 1)
    assert m.step_delta(10_000) == 0